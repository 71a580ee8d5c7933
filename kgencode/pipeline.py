# -*- coding: utf-8 -*-
"""
Copyright kgencode developers
"""

import logging

from collections import namedtuple

from tqdm.autonotebook import tqdm

from kgencode.data_structures import IdentifierTable
from kgencode.exceptions import SinkWriteError, WrongArgumentsError
from kgencode.sinks import ListRecordSink

logger = logging.getLogger(__name__)

EncodingSummary = namedtuple('EncodingSummary', ['n_ent', 'n_rel', 'n_facts'])


class InterningPipeline:
    """Single pass encoder of a statement stream. Each distinct entity
    (subject or object) and each distinct relation (predicate) receives an
    integer identifier in first-seen order. Mapping records are pushed to the
    entity and relation sinks when a key is first seen and one triple record
    is pushed to the triple sink per statement.

    Parameters
    ----------
    entity_sink: kgencode.sinks.RecordSink
        Receives (entity, ix) records.
    relation_sink: kgencode.sinks.RecordSink
        Receives (relation, ix) records.
    triple_sink: kgencode.sinks.RecordSink
        Receives (subject_ix, predicate_ix, object_ix) records.
    progress: bool, optional (default=False)
        Display a progress bar while statements are consumed.

    Attributes
    ----------
    entity_table: kgencode.data_structures.IdentifierTable
        Entity table of the last call to `process`.
    relation_table: kgencode.data_structures.IdentifierTable
        Relation table of the last call to `process`.

    """

    def __init__(self, entity_sink, relation_sink, triple_sink, progress=False):
        self.entity_sink = entity_sink
        self.relation_sink = relation_sink
        self.triple_sink = triple_sink
        self.progress = progress

        self.entity_table = IdentifierTable()
        self.relation_table = IdentifierTable()

    @staticmethod
    def _write(sink, record):
        try:
            sink.write_record(record)
        except OSError as e:
            path = getattr(sink, 'path', None)
            raise SinkWriteError('Cannot write to {}: {}'.format(
                path or type(sink).__name__, e),
                path=path, operation='write') from e

    def _resolve(self, table, sink, key):
        ix, is_new = table.get_or_assign(key)
        if is_new:
            self._write(sink, (key, ix))
        return ix

    def process(self, statements):
        """Encode the statements. The iterable is consumed exactly once.

        Parameters
        ----------
        statements: iterable
            (subject, predicate, object) string triples.

        Returns
        -------
        summary: kgencode.pipeline.EncodingSummary
            Number of entities, relations and facts encoded.

        """
        self.entity_table = IdentifierTable()
        self.relation_table = IdentifierTable()
        n_facts = 0

        logger.info('Encoding statements')
        for statement in tqdm(statements, unit='stmt', disable=not self.progress):
            if isinstance(statement, (str, bytes)):
                raise WrongArgumentsError('Statement #{} is a string, not a '
                                          '(subject, predicate, object) triple: '
                                          '{!r}'.format(n_facts, statement))
            try:
                subject, predicate, obj = statement
            except (TypeError, ValueError):
                raise WrongArgumentsError('Statement #{} is not a (subject, '
                                          'predicate, object) triple: '
                                          '{!r}'.format(n_facts, statement))
            h = self._resolve(self.entity_table, self.entity_sink, subject)
            r = self._resolve(self.relation_table, self.relation_sink, predicate)
            t = self._resolve(self.entity_table, self.entity_sink, obj)
            self._write(self.triple_sink, (h, r, t))
            n_facts += 1

        summary = EncodingSummary(len(self.entity_table),
                                  len(self.relation_table), n_facts)
        logger.info('Encoded %d facts: %d entities, %d relations',
                    summary.n_facts, summary.n_ent, summary.n_rel)
        return summary


def process(statements):
    """Encode statements in memory.

    Parameters
    ----------
    statements: iterable
        (subject, predicate, object) string triples.

    Returns
    -------
    entity_mappings: list
        (entity, ix) pairs in first-seen order.
    relation_mappings: list
        (relation, ix) pairs in first-seen order.
    triple_records: list
        (subject_ix, predicate_ix, object_ix) triples in input order.

    """
    entity_sink = ListRecordSink()
    relation_sink = ListRecordSink()
    triple_sink = ListRecordSink()
    InterningPipeline(entity_sink, relation_sink, triple_sink).process(statements)
    return entity_sink.records, relation_sink.records, triple_sink.records
