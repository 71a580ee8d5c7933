# -*- coding: utf-8 -*-
"""
Copyright kgencode developers

Statement sources. A source is an iterable of (subject, predicate, object)
string triples which can be consumed only once, and a context manager
releasing the underlying resources.
"""

import csv
import logging

from rdflib import Graph, Literal
from rdflib.util import guess_format

from kgencode.exceptions import SourceReadError, WrongArgumentsError

logger = logging.getLogger(__name__)

DELIMITED_FORMATS = {'tsv': '\t', 'csv': ','}


def term_to_key(term):
    """Render a rdflib term as an opaque string key.

    IRIs are rendered as the IRI itself and blank nodes as their identifier.
    Literals keep their language tag (`lexical@lang`) or their datatype
    (`lexical^^datatype`) so that two literals differing only by these are
    still distinct keys.

    """
    if isinstance(term, Literal):
        if term.language:
            return '{}@{}'.format(str(term), term.language)
        if term.datatype is not None:
            return '{}^^{}'.format(str(term), term.datatype)
        return str(term)
    return str(term)


class StatementSource:
    """Base class of the statement sources."""
    def __init__(self, path):
        self.path = path
        self._consumed = False

    def __iter__(self):
        if self._consumed:
            raise WrongArgumentsError('Statements of {} were already '
                                      'consumed.'.format(self.path))
        self._consumed = True
        return self._statements()

    def _statements(self):
        raise NotImplementedError

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class RDFStatementSource(StatementSource):
    """Statements of a RDF file parsed with rdflib.

    Parameters
    ----------
    path: str
        Path to the RDF file.
    rdf_format: str, optional (default='xml')
        Name of the rdflib parser ('xml', 'turtle', 'nt', ...). If None, the
        format is guessed from the file extension.

    """
    def __init__(self, path, rdf_format='xml'):
        super().__init__(path)
        if rdf_format is None:
            rdf_format = guess_format(path)
            if rdf_format is None:
                raise WrongArgumentsError('Cannot guess the RDF format of '
                                          '{}.'.format(path))
        self.rdf_format = rdf_format
        self._graph = None

    def _parse(self):
        graph = Graph()
        try:
            graph.parse(self.path, format=self.rdf_format)
        except Exception as e:
            raise SourceReadError('Cannot read {} as {}: {}'.format(
                self.path, self.rdf_format, e),
                path=self.path, operation='parse') from e
        logger.debug('Parsed %d statements from %s', len(graph), self.path)
        return graph

    def _statements(self):
        if self._graph is None:
            self._graph = self._parse()
        for s, p, o in self._graph.triples((None, None, None)):
            yield term_to_key(s), term_to_key(p), term_to_key(o)

    def close(self):
        if self._graph is not None:
            self._graph.close()
            self._graph = None


class DelimitedStatementSource(StatementSource):
    """Statements of a tabular file with one `subject predicate object`
    line per statement. The file is read line by line, fields containing the
    delimiter are double quoted as written by
    `kgencode.sinks.DelimitedRecordSink`.

    Parameters
    ----------
    path: str
        Path to the file.
    delimiter: str, optional (default='\\t')
        Field separator.
    encoding: str, optional
        File encoding. The platform default is used if None.

    """
    def __init__(self, path, delimiter='\t', encoding=None):
        super().__init__(path)
        self.delimiter = delimiter
        try:
            self._file = open(path, 'r', newline='', encoding=encoding)
        except OSError as e:
            raise SourceReadError('Cannot open {}: {}'.format(path, e),
                                  path=path, operation='open') from e

    def _statements(self):
        reader = csv.reader(self._file, delimiter=self.delimiter)
        line_no = 0
        try:
            for fields in reader:
                line_no = reader.line_num
                if len(fields) == 0 or (len(fields) == 1 and not fields[0].strip()):
                    continue
                if len(fields) != 3:
                    raise SourceReadError(
                        '{}:{}: expected 3 fields, found {}'.format(
                            self.path, line_no, len(fields)),
                        path=self.path, operation='read')
                yield fields[0], fields[1], fields[2]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise SourceReadError('Cannot read {} after line {}: {}'.format(
                self.path, line_no, e),
                path=self.path, operation='read') from e

    def close(self):
        self._file.close()


def open_statement_source(path, rdf_format='xml', encoding=None):
    """Build the statement source matching `rdf_format`: 'tsv' and 'csv'
    select a delimited source, any other value is handed to rdflib.

    """
    if rdf_format in DELIMITED_FORMATS:
        return DelimitedStatementSource(path, DELIMITED_FORMATS[rdf_format],
                                        encoding=encoding)
    return RDFStatementSource(path, rdf_format)
