from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Type


class Position(NamedTuple):
    '''Zero-based (line, column) of the first character of a lexeme.'''

    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f'({self.line + 1},{self.column + 1})'


#-----------------------------------------------------------------------
# Root Token Class
#-----------------------------------------------------------------------


class Token:

    def __init__(self, source: str, position: Position) -> None:
        self.source = source
        self.position = position

    @property
    def payload(self) -> Any:
        return None

    def __eq__(self, other: object) -> bool:
        return (self.__class__ == other.__class__
                and self.payload == other.payload
                and self.source == other.source
                and self.position == other.position)

    def __hash__(self) -> int:
        return hash((self.__class__, self.payload, self.source, self.position))

    def __repr__(self) -> str:
        return (f'<{self.__class__.__name__}({self.payload!r}) '
                f'at {self.source} {self.position}>')


#-----------------------------------------------------------------------
# 1st Layer Subclasses
#-----------------------------------------------------------------------


class Literal(Token):

    def __init__(self, value: Any, source: str, position: Position) -> None:
        super().__init__(source, position)
        self.value = value

    @property
    def payload(self) -> Any:
        return self.value


class Word(Token):

    text: str = ''

    @property
    def payload(self) -> str:
        return self.text


#-----------------------------------------------------------------------
# 2nd Layer Subclasses
#-----------------------------------------------------------------------


class Number(Literal): pass
class String(Literal): pass


class Plus(Word):
    text = '+'


class Print(Word):
    text = 'print'


#-----------------------------------------------------------------------
# Word Table
#-----------------------------------------------------------------------


WordTable = Mapping[str, Type[Word]]


def make_word_table() -> WordTable:
    '''Build the read-only mapping from keyword text to its token class.

    Lexers only ever read from the table, so one table may be shared by
    every lexer of a run.
    '''
    return MappingProxyType({cls.text: cls for cls in (Plus, Print)})
