from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, List, NamedTuple, Optional, Union

from ..console import report_error
from ..source.reader import SourceReader
from . import token
from .ast import MAX_NUMBER
from .exceptions import ChaiError, LexerError, StandardError


SOURCE_EXTENSION = '.chai'


class Cursor(NamedTuple):
    '''Scanning state: index into the source plus the matching position.'''

    index: int = 0
    line: int = 0
    column: int = 0

    @property
    def position(self) -> token.Position:
        return token.Position(self.line, self.column)

    def advance(self, char: str) -> Cursor:
        if char == '\n':
            return Cursor(self.index + 1, self.line + 1, 0)
        return Cursor(self.index + 1, self.line, self.column + 1)


class Lexer:

    number_obj: re.Pattern = re.compile(r'[0-9]+')
    whitespace: frozenset = frozenset(
        '\t\n\v\f\r \x85\xa0\u1680\u2028\u2029\u202f\u205f\u3000'
        + ''.join(map(chr, range(0x2000, 0x200b)))
    )

    def __init__(self, source: str, source_name: str,
                 word_table: Optional[token.WordTable] = None, *,
                 report: Optional[Callable[[ChaiError], None]] = None) -> None:
        self._source = source
        self._source_name = source_name
        self._words = word_table if word_table is not None else token.make_word_table()
        self._report = report or report_error
        self._cursor = Cursor()
        self._logger = logging.getLogger('chai.lexer')

    @classmethod
    async def from_source(cls, path: Union[str, Path],
                          word_table: Optional[token.WordTable] = None, *,
                          reader: Optional[SourceReader] = None,
                          report: Optional[Callable[[ChaiError], None]] = None,
                          extension: str = SOURCE_EXTENSION) -> Lexer:
        source_name = str(path)
        if not source_name.endswith(extension):
            raise StandardError(f"Source file '{source_name}' must use "
                                f"the '{extension}' file extension.")
        reader = reader or SourceReader()
        source = await reader.read(path)
        return cls(source, source_name, word_table, report=report)

    def collect_tokens(self) -> Optional[List[token.Token]]:
        '''Scan the whole source, reporting every lexical error on the way.

        Returns None if any error was reported.
        '''
        self._cursor = Cursor()
        tokens = []
        failed = False
        while True:
            try:
                tokens.append(next(self))
            except StopIteration:
                break
            except LexerError as exc:
                self._report(exc)
                failed = True
        self._logger.debug(f'{self._source_name}: {len(tokens)} tokens, failed={failed}')
        return None if failed else tokens

    #-------------------------------------------------------------------
    # Scanning
    #-------------------------------------------------------------------

    def _reached_end(self) -> bool:
        return self._cursor.index >= len(self._source)

    def _peek(self) -> str:
        return self._source[self._cursor.index]

    def _read_char(self) -> str:
        char = self._peek()
        self._cursor = self._cursor.advance(char)
        return char

    def _is_whitespace(self) -> bool:
        return self._peek() in self.whitespace

    def _skip_whitespace(self) -> None:
        while not self._reached_end() and self._is_whitespace():
            self._read_char()

    def _read_lexeme(self) -> str:
        start = self._cursor.index
        while not self._reached_end() and not self._is_whitespace():
            self._read_char()
        return self._source[start:self._cursor.index]

    def _read_str(self) -> Optional[str]:
        '''Read a double-quoted string, returning None if it never closes.'''
        self._read_char()
        start = self._cursor.index
        while not self._reached_end():
            char = self._read_char()
            if char == '"':
                return self._source[start:self._cursor.index - 1]
        return None

    #-------------------------------------------------------------------
    # Tokens
    #-------------------------------------------------------------------

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> token.Token:
        self._skip_whitespace()
        if self._reached_end():
            raise StopIteration

        position = self._cursor.position
        char = self._peek()
        if '0' <= char <= '9':
            return self._collect_number(position)
        elif char == '"':
            return self._collect_string(position)
        else:
            return self._collect_word(position)

    def _is_number(self, lexeme: str) -> bool:
        return (self.number_obj.fullmatch(lexeme) is not None
                and len(lexeme) <= len(str(MAX_NUMBER))
                and int(lexeme) <= MAX_NUMBER)

    def _collect_number(self, position: token.Position) -> token.Number:
        lexeme = self._read_lexeme()
        if not self._is_number(lexeme):
            raise LexerError(self._source_name, position,
                             f"Failed to convert '{lexeme}' to number literal.")
        return token.Number(int(lexeme), self._source_name, position)

    def _collect_string(self, position: token.Position) -> token.String:
        text = self._read_str()
        if text is None:
            raise LexerError(self._source_name, position,
                             'Expected closing double-quote. Found end-of-file instead.')
        return token.String(text, self._source_name, position)

    def _collect_word(self, position: token.Position) -> token.Word:
        lexeme = self._read_lexeme()
        try:
            word_cls = self._words[lexeme]
        except KeyError:
            raise LexerError(self._source_name, position,
                             f"Unknown word '{lexeme}' found.") from None
        return word_cls(self._source_name, position)
