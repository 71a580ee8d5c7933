# -*- coding: utf-8 -*-

"""Top-level package for kgencode."""

__version__ = '0.1.0'

from kgencode.exceptions import SanityError, SinkWriteError, SourceReadError, WrongArgumentsError
from .data_structures import IdentifierTable, KnowledgeGraph
from .exporter import export, main
from .pipeline import EncodingSummary, InterningPipeline, process
from .sinks import DelimitedRecordSink, ListRecordSink
from .sources import DelimitedStatementSource, RDFStatementSource, open_statement_source
from .utils import get_dictionaries, load_encoded_kg
