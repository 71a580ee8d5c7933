# -*- coding: utf-8 -*-
"""
Copyright kgencode developers
"""

from torch import int64, Tensor
from torch.utils.data import Dataset

from kgencode.exceptions import SanityError, WrongArgumentsError


class IdentifierTable:
    """Mapping from string keys to dense integer identifiers. Identifiers
    are issued in first-seen order starting at 0, so the next identifier is
    always the current size of the table.

    Two independent tables are used by the pipeline, one for entities and
    one for relations. The same string can be a key of both tables with
    unrelated identifiers.

    """
    def __init__(self):
        self._key2ix = {}

    def __len__(self):
        return len(self._key2ix)

    def __contains__(self, key):
        return key in self._key2ix

    def __getitem__(self, key):
        return self._key2ix[key]

    def __iter__(self):
        return iter(self._key2ix)

    def get_or_assign(self, key):
        """Get the identifier of `key`, assigning the next one if the key was
        never seen before.

        Parameters
        ----------
        key: str
            Entity or relation label. Any string is valid, compared by
            plain equality.

        Returns
        -------
        ix: int
            Identifier of the key.
        is_new: bool
            True if the identifier was assigned by this call.

        """
        ix = self._key2ix.get(key)
        if ix is not None:
            return ix, False
        ix = len(self._key2ix)
        self._key2ix[key] = ix
        return ix, True

    def items(self):
        """Pairs (key, ix) in assignment order."""
        return self._key2ix.items()

    def to_dict(self):
        return dict(self._key2ix)


class KnowledgeGraph(Dataset):
    """Encoded knowledge graph, ready to be fed to an embedding model.
    Facts are stored as three long tensors of the same length.

    Parameters
    ----------
    ent2ix: dict
        Dictionary mapping entity labels to their integer key.
    rel2ix: dict
        Dictionary mapping relation labels to their integer key.
    head_idx: torch.Tensor, dtype = torch.long, shape: (n_facts)
        Integer key of the subject of each fact.
    tail_idx: torch.Tensor, dtype = torch.long, shape: (n_facts)
        Integer key of the object of each fact.
    relations: torch.Tensor, dtype = torch.long, shape: (n_facts)
        Integer key of the predicate of each fact.

    Attributes
    ----------
    n_ent: int
        Number of distinct entities in the data set.
    n_rel: int
        Number of distinct relations in the data set.
    n_facts: int
        Number of samples in the data set. A sample is a fact: a triplet
        (h, r, t).

    """

    def __init__(self, ent2ix, rel2ix, head_idx, tail_idx, relations):
        if (ent2ix is None) or (rel2ix is None):
            raise WrongArgumentsError("Please provide the two dictionaries "
                                      "ent2ix and rel2ix.")
        self.ent2ix = ent2ix
        self.rel2ix = rel2ix
        self.n_ent = len(ent2ix)
        self.n_rel = len(rel2ix)

        self.head_idx = head_idx
        self.tail_idx = tail_idx
        self.relations = relations
        self.n_facts = len(head_idx)

        try:
            self.sanity_check()
        except AssertionError:
            raise SanityError("Please check the sanity of arguments.")

    def __len__(self):
        return self.n_facts

    def __getitem__(self, item):
        return (self.head_idx[item].item(),
                self.tail_idx[item].item(),
                self.relations[item].item())

    def sanity_check(self):
        assert (type(self.ent2ix) == dict) & (type(self.rel2ix) == dict)
        assert sorted(self.ent2ix.values()) == list(range(self.n_ent))
        assert sorted(self.rel2ix.values()) == list(range(self.n_rel))
        assert (type(self.head_idx) == Tensor) & \
               (type(self.tail_idx) == Tensor) & \
               (type(self.relations) == Tensor)
        assert (self.head_idx.dtype == int64) & \
               (self.tail_idx.dtype == int64) & \
               (self.relations.dtype == int64)
        assert len(self.head_idx) == len(self.tail_idx) == len(self.relations)
        if self.n_facts > 0:
            assert (self.head_idx.min().item() >= 0) & \
                   (self.head_idx.max().item() < self.n_ent)
            assert (self.tail_idx.min().item() >= 0) & \
                   (self.tail_idx.max().item() < self.n_ent)
            assert (self.relations.min().item() >= 0) & \
                   (self.relations.max().item() < self.n_rel)

    @property
    def ix2ent(self):
        return {v: k for k, v in self.ent2ix.items()}

    @property
    def ix2rel(self):
        return {v: k for k, v in self.rel2ix.items()}
