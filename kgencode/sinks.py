# -*- coding: utf-8 -*-
"""
Copyright kgencode developers
"""

import csv
import logging

from kgencode.exceptions import SinkWriteError

logger = logging.getLogger(__name__)


class RecordSink:
    """Base class of the record sinks. A sink accepts ordered records and is
    closed exactly once, after the last record.

    """
    def __init__(self):
        self.closed = False

    def write_record(self, fields):
        raise NotImplementedError

    def _close(self):
        pass

    def close(self):
        if self.closed:
            return
        self.closed = True
        self._close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class ListRecordSink(RecordSink):
    """Sink keeping the records in memory, as tuples."""
    def __init__(self):
        super().__init__()
        self.records = []

    def write_record(self, fields):
        self.records.append(tuple(fields))


class DelimitedRecordSink(RecordSink):
    """Sink writing one delimited line per record, without header. Fields
    are only quoted when they contain the delimiter, a quote or a line
    break.

    Parameters
    ----------
    path: str
        Path of the output file. It is created or truncated.
    delimiter: str, optional (default='\\t')
        Field separator.
    encoding: str, optional
        File encoding. The platform default is used if None.

    """
    def __init__(self, path, delimiter='\t', encoding=None):
        super().__init__()
        self.path = path
        try:
            self._file = open(path, 'w', newline='', encoding=encoding)
        except OSError as e:
            raise SinkWriteError('Cannot open {} for writing: {}'.format(path, e),
                                 path=path, operation='open') from e
        self._writer = csv.writer(self._file, delimiter=delimiter,
                                  lineterminator='\n',
                                  quoting=csv.QUOTE_MINIMAL)
        logger.debug('Opened %s', path)

    def write_record(self, fields):
        try:
            self._writer.writerow(fields)
        except OSError as e:
            raise SinkWriteError('Cannot write to {}: {}'.format(self.path, e),
                                 path=self.path, operation='write') from e

    def _close(self):
        try:
            self._file.close()
        except OSError as e:
            raise SinkWriteError('Cannot close {}: {}'.format(self.path, e),
                                 path=self.path, operation='close') from e
        logger.debug('Closed %s', self.path)
