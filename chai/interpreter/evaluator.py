from __future__ import annotations

import logging
import sys
from typing import Iterable, List, Optional, TextIO

from pampy import match

from . import ast
from .exceptions import EvaluatorError


OVERFLOW_POLICIES = ('wrap', 'fail')


class Evaluator:

    def __init__(self, *, output: Optional[TextIO] = None,
                 overflow: str = 'wrap') -> None:
        if overflow not in OVERFLOW_POLICIES:
            raise ValueError(f'Unknown overflow policy: {overflow}')
        self._output = output
        self._overflow = overflow
        self._logger = logging.getLogger('chai.evaluator')

    def eval(self, exprs: Iterable[ast.Expression]) -> List[ast.Value]:
        '''Run expressions in order against a fresh stack.

        The first runtime error is raised as EvaluatorError and nothing
        after it runs. Returns the stack left behind on success.
        '''
        self._stack = []
        for expr in exprs:
            self._logger.debug(f'{expr.source} {expr.position}: {expr.__class__.__name__}')
            match(expr,
                ast.PushExpression, self._eval_push_expr,
                ast.AddExpression, self._eval_add_expr,
                ast.PrintExpression, self._eval_print_expr,
            )
        return self._stack

    #-------------------------------------------------------------------
    # Evaluate Expressions
    #-------------------------------------------------------------------

    def _eval_push_expr(self, expr: ast.PushExpression) -> None:
        self._stack.append(expr.value)

    def _eval_add_expr(self, expr: ast.AddExpression) -> None:
        self._require(expr, 2)
        a = self._pop_number(expr)
        b = self._pop_number(expr)
        total = a + b
        if total > ast.MAX_NUMBER:
            if self._overflow == 'fail':
                raise EvaluatorError(expr.source, expr.position,
                                     f'Number overflow: {a} + {b} exceeds 64 bits.')
            total &= ast.MAX_NUMBER
        self._stack.append(ast.NumberValue(total))

    def _eval_print_expr(self, expr: ast.PrintExpression) -> None:
        self._require(expr, 1)
        print(self._stack.pop(), file=self._output or sys.stdout)

    #-------------------------------------------------------------------
    # Helper Methods
    #-------------------------------------------------------------------

    def _require(self, expr: ast.Expression, count: int) -> None:
        if len(self._stack) < count:
            raise EvaluatorError(expr.source, expr.position,
                                 f'Expected {count} or more elements on stack.')

    def _pop_number(self, expr: ast.Expression) -> int:
        value = self._stack.pop()
        if not isinstance(value, ast.NumberValue):
            raise EvaluatorError(expr.source, expr.position,
                                 f'Expected Number, found {value!r} instead.')
        return value.number


def interpret_program(exprs: Iterable[ast.Expression], *,
                      output: Optional[TextIO] = None,
                      overflow: str = 'wrap') -> None:
    Evaluator(output=output, overflow=overflow).eval(exprs)
