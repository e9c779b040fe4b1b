from __future__ import annotations

from .token import Position


class ChaiError(Exception):

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f'Error: {self.message}'


class StandardError(ChaiError):
    '''An error with no source location, e.g. an unreadable file.'''


class SourceError(ChaiError):
    '''An error anchored to the lexeme or expression that caused it.'''

    def __init__(self, source: str, position: Position, message: str) -> None:
        super().__init__(message)
        self.source = source
        self.position = position

    def __str__(self) -> str:
        return f'Error: {self.source} {self.position}: {self.message}'


class LexerError(SourceError):
    pass


class ParserError(SourceError):
    pass


class EvaluatorError(SourceError):
    pass
