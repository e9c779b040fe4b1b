import logging

from pampy import _, match

from ..console import report_error
from . import ast, token
from .exceptions import ParserError


class Parser:

    def __init__(self, tokens, *, report=None):
        self._tokens = list(tokens)
        self._index = 0
        self._report = report or report_error
        self._logger = logging.getLogger('chai.parser')

    @classmethod
    def from_tokens(cls, tokens, *, report=None):
        return cls(tokens, report=report)

    def _reached_end(self):
        return self._index >= len(self._tokens)

    def _read_token(self):
        tok = self._tokens[self._index]
        self._index += 1
        return tok

    def collect_exprs(self):
        self._index = 0
        exprs = []
        failed = False
        while not self._reached_end():
            try:
                exprs.append(self._parse_expr(self._read_token()))
            except ParserError as exc:
                self._report(exc)
                failed = True
        self._logger.debug(f'{len(exprs)} expressions, failed={failed}')
        return None if failed else exprs

    #-------------------------------------------------------------------
    # Parse Expressions
    #-------------------------------------------------------------------

    def _parse_expr(self, tok):
        return match(tok,
            token.Number, self._parse_number,
            token.String, self._parse_string,
            token.Plus, self._parse_plus,
            token.Print, self._parse_print,
            _, self._parse_unexpected,
        )

    def _parse_number(self, tok):
        return ast.PushExpression(tok.source, tok.position, ast.NumberValue(tok.value))

    def _parse_string(self, tok):
        return ast.PushExpression(tok.source, tok.position, ast.StringValue(tok.value))

    def _parse_plus(self, tok):
        return ast.AddExpression(tok.source, tok.position)

    def _parse_print(self, tok):
        return ast.PrintExpression(tok.source, tok.position)

    def _parse_unexpected(self, tok):
        raise ParserError(tok.source, tok.position, f'Unexpected token {tok!r}.')
