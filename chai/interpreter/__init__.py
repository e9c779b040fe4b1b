from .evaluator import Evaluator, interpret_program
from .exceptions import (ChaiError, EvaluatorError, LexerError, ParserError,
                         SourceError, StandardError)
from .interpreter import Interpreter
from .lexer import Lexer
from .parser import Parser
