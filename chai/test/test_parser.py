import unittest

from ..interpreter.ast import *
from ..interpreter.exceptions import ParserError
from ..interpreter.lexer import Lexer
from ..interpreter.parser import Parser
from ..interpreter.token import Position, Token


class TestParser(unittest.TestCase):

    def test_parser(self):
        source = '''
            1 2 +
            "two" print
        '''

        expected_exprs = [
            PushExpression('main.chai', Position(1, 12), NumberValue(1)),
            PushExpression('main.chai', Position(1, 14), NumberValue(2)),
            AddExpression('main.chai', Position(1, 16)),
            PushExpression('main.chai', Position(2, 12), StringValue('two')),
            PrintExpression('main.chai', Position(2, 18)),
        ]

        tokens = Lexer(source, 'main.chai').collect_tokens()
        exprs = Parser.from_tokens(tokens).collect_exprs()
        self.assertEqual(exprs, expected_exprs, exprs)

    def test_empty(self):
        self.assertEqual(Parser.from_tokens([]).collect_exprs(), [])

    def test_same_length_and_order(self):
        tokens = Lexer('print + "x" 9 + print', 'main.chai').collect_tokens()
        exprs = Parser.from_tokens(tokens).collect_exprs()
        self.assertEqual(len(exprs), len(tokens))
        for tok, expr in zip(tokens, exprs):
            self.assertEqual((tok.source, tok.position), (expr.source, expr.position))

    def test_unexpected_token(self):
        errors = []
        tokens = Lexer('1 print', 'main.chai').collect_tokens()
        tokens.insert(1, Token('main.chai', Position(0, 1)))
        tokens.append(Token('main.chai', Position(0, 7)))
        parser = Parser.from_tokens(tokens, report=errors.append)
        self.assertIsNone(parser.collect_exprs())
        self.assertEqual(len(errors), 2)
        self.assertIsInstance(errors[0], ParserError)
        self.assertEqual(errors[1].position, Position(0, 7))
        self.assertTrue(str(errors[0]).startswith('Error: main.chai (1,2): Unexpected token'))
