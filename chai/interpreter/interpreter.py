from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from ..console import report_error
from ..source.reader import SourceReader
from . import token
from .evaluator import interpret_program
from .exceptions import ChaiError, EvaluatorError, StandardError
from .lexer import SOURCE_EXTENSION, Lexer
from .parser import Parser


class Interpreter:

    setting: dict = {
        'extension': SOURCE_EXTENSION,
        'overflow': 'wrap',
        'encoding': None,
        'chunk_size': 64*1024,
    }

    def __init__(self, setting: Optional[dict] = None, *,
                 reader: Optional[SourceReader] = None,
                 output: Optional[TextIO] = None,
                 report: Optional[Callable[[ChaiError], None]] = None) -> None:
        self.setting = deepcopy(self.setting)
        if setting:
            self.setting.update(setting)
        self._reader = reader or SourceReader({
            'encoding': self.setting['encoding'],
            'chunk_size': self.setting['chunk_size'],
        })
        self._output = output
        self._report = report or report_error
        self._words = token.make_word_table()
        self._logger = logging.getLogger('chai.interpreter')

    async def run(self, path: Union[str, Path]) -> bool:
        try:
            lexer = await Lexer.from_source(path, self._words,
                                            reader=self._reader,
                                            report=self._report,
                                            extension=self.setting['extension'])
        except StandardError as exc:
            self._report(exc)
            return False
        return self._execute(lexer)

    def execute(self, source: str, source_name: str) -> bool:
        '''Lex, parse and evaluate in-memory source text.'''
        lexer = Lexer(source, source_name, self._words, report=self._report)
        return self._execute(lexer)

    def _execute(self, lexer: Lexer) -> bool:
        tokens = lexer.collect_tokens()
        if tokens is None:
            self._logger.info('lexing failed')
            return False
        exprs = Parser.from_tokens(tokens, report=self._report).collect_exprs()
        if exprs is None:
            self._logger.info('parsing failed')
            return False
        try:
            interpret_program(exprs, output=self._output,
                              overflow=self.setting['overflow'])
        except EvaluatorError as exc:
            self._report(exc)
            return False
        self._logger.info(f'ran {len(exprs)} expressions')
        return True
