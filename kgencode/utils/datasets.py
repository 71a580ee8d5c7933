# -*- coding: utf-8 -*-
"""
Copyright kgencode developers
"""

from os.path import getsize

from numpy import int64
from pandas import DataFrame, read_csv
from torch import tensor

from kgencode.data_structures import KnowledgeGraph


def _read_table(path, names, dtype, delimiter):
    if getsize(path) == 0:
        return DataFrame({n: [] for n in names}).astype(dtype)
    return read_csv(path, sep=delimiter, header=None, names=names,
                    dtype=dtype, na_filter=False)


def load_encoded_kg(entity_path, relation_path, triple_path, delimiter='\t'):
    """Load the files written by `kgencode.exporter.export`.

    Parameters
    ----------
    entity_path: str
        Path to the (entity, ix) file.
    relation_path: str
        Path to the (relation, ix) file.
    triple_path: str
        Path to the (subject_ix, predicate_ix, object_ix) file.
    delimiter: str, optional (default='\\t')
        Field separator of the files.

    Returns
    -------
    kg: kgencode.data_structures.KnowledgeGraph

    """
    df_ent = _read_table(entity_path, ['label', 'ix'],
                         {'label': str, 'ix': int64}, delimiter)
    df_rel = _read_table(relation_path, ['label', 'ix'],
                         {'label': str, 'ix': int64}, delimiter)
    df = _read_table(triple_path, ['from', 'rel', 'to'],
                     {'from': int64, 'rel': int64, 'to': int64},
                     delimiter)

    ent2ix = {k: int(v) for k, v in zip(df_ent['label'], df_ent['ix'])}
    rel2ix = {k: int(v) for k, v in zip(df_rel['label'], df_rel['ix'])}

    return KnowledgeGraph(ent2ix, rel2ix,
                          head_idx=tensor(df['from'].to_numpy(dtype=int64)).long(),
                          tail_idx=tensor(df['to'].to_numpy(dtype=int64)).long(),
                          relations=tensor(df['rel'].to_numpy(dtype=int64)).long())
