# -*- coding: utf-8 -*-
"""
Copyright kgencode developers
"""

import logging
import sys

from contextlib import ExitStack

import yaml

from kgencode.config import config
from kgencode.exceptions import SinkWriteError, SourceReadError
from kgencode.logger_init import logger_init
from kgencode.pipeline import InterningPipeline
from kgencode.sinks import DelimitedRecordSink
from kgencode.sources import open_statement_source

logger = logging.getLogger(__name__)

USAGE = ('usage: kgencode [--config=FILE] [--section.key=VALUE ...] '
         'INPUT ENTITY_MAPPINGS RELATION_MAPPINGS TRIPLE_MAPPINGS')


def export(input_path, entity_path, relation_path, triple_path,
           rdf_format='xml', delimiter='\t', encoding=None, progress=False):
    """Read a graph file and write the three mapping files.

    Parameters
    ----------
    input_path: str
        Path to the graph file.
    entity_path: str
        Output path of the (entity, ix) records.
    relation_path: str
        Output path of the (relation, ix) records.
    triple_path: str
        Output path of the (subject_ix, predicate_ix, object_ix) records.
    rdf_format: str, optional (default='xml')
        Format of the graph file, see
        `kgencode.sources.open_statement_source`.
    delimiter: str, optional (default='\\t')
        Field separator of the output files.
    encoding: str, optional
        Encoding of the input (delimited formats only) and output files.
    progress: bool, optional (default=False)
        Display a progress bar.

    Returns
    -------
    summary: kgencode.pipeline.EncodingSummary

    Raises
    ------
    SourceReadError
        If the graph file cannot be read. The run is aborted.
    SinkWriteError
        If an output file cannot be written or closed. Files already
        written are left in place.

    """
    with ExitStack() as stack:
        source = stack.enter_context(
            open_statement_source(input_path, rdf_format, encoding=encoding))
        entity_sink = stack.enter_context(
            DelimitedRecordSink(entity_path, delimiter, encoding))
        relation_sink = stack.enter_context(
            DelimitedRecordSink(relation_path, delimiter, encoding))
        triple_sink = stack.enter_context(
            DelimitedRecordSink(triple_path, delimiter, encoding))

        pipeline = InterningPipeline(entity_sink, relation_sink, triple_sink,
                                     progress=progress)
        return pipeline.process(source)


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    options = [a for a in args if a.startswith('--')]
    positional = [a for a in args if not a.startswith('--')]
    if len(positional) != 4 or any('=' not in a for a in options):
        print(USAGE, file=sys.stderr)
        return 2

    try:
        cfg = config(options, reload=True)
    except (OSError, yaml.YAMLError) as e:
        config_path = next((a[9:] for a in options if a.startswith('--config=')), None)
        logger.error('Cannot read config file %s: %s', config_path, e)
        return 1
    except (KeyError, ValueError) as e:
        print('Unknown or invalid option {}'.format(e), file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2
    logger_init()

    input_path, entity_path, relation_path, triple_path = positional
    try:
        summary = export(input_path, entity_path, relation_path, triple_path,
                         rdf_format=cfg.input.format,
                         delimiter=cfg.output.delimiter,
                         encoding=cfg.output.encoding,
                         progress=cfg.progress)
    except (SourceReadError, SinkWriteError) as e:
        logger.error('%s failed: %s', e.operation, e)
        return 1

    logger.info('Wrote %d entities, %d relations and %d triples',
                summary.n_ent, summary.n_rel, summary.n_facts)
    return 0
