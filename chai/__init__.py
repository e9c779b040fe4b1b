'''Chai Stack Language Interpreter'''


from .interpreter import (ChaiError, Evaluator, EvaluatorError, Interpreter,
                          Lexer, LexerError, Parser, ParserError, SourceError,
                          StandardError, interpret_program)
from .source import SourceReader
