# -*- coding: utf-8 -*-
"""
Copyright kgencode developers
"""

from kgencode.data_structures import IdentifierTable


def get_dictionaries(df):
    """Build entities and relations dictionaries from a data frame, in
    first-seen order. Rows are scanned in order and, within a row, the
    `from` column before `rel` before `to`, which gives the same identifiers
    as `kgencode.pipeline.process` on the same statements.

    Parameters
    ----------
    df: `pandas.DataFrame`
        Data frame containing three columns [from, rel, to].

    Returns
    -------
    ent2ix: dict
    rel2ix: dict

    """
    entities = IdentifierTable()
    relations = IdentifierTable()
    for h, r, t in df[['from', 'rel', 'to']].itertuples(index=False):
        entities.get_or_assign(h)
        relations.get_or_assign(r)
        entities.get_or_assign(t)
    return entities.to_dict(), relations.to_dict()
