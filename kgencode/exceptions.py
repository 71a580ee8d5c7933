# -*- coding: utf-8 -*-
"""
Copyright kgencode developers
"""


class WrongArgumentsError(Exception):
    def __init__(self, message):
        super().__init__(message)


class SanityError(Exception):
    def __init__(self, message):
        super().__init__(message)


class SourceReadError(Exception):
    """Raised when the input graph cannot be opened, read or parsed."""
    def __init__(self, message, path=None, operation=None):
        super().__init__(message)
        self.path = path
        self.operation = operation


class SinkWriteError(Exception):
    """Raised when an output file cannot be opened, written or closed."""
    def __init__(self, message, path=None, operation=None):
        super().__init__(message)
        self.path = path
        self.operation = operation
