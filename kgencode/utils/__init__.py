from .datasets import load_encoded_kg
from .operations import get_dictionaries
