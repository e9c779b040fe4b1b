from dataclasses import dataclass
from typing import Union

from .token import Position


MAX_NUMBER = 2**64 - 1


#-----------------------------------------------------------------------
# Values
#-----------------------------------------------------------------------


@dataclass
class NumberValue:

    number: int

    def __str__(self) -> str:
        return str(self.number)


@dataclass
class StringValue:

    text: str

    def __str__(self) -> str:
        return self.text


Value = Union[NumberValue, StringValue]


#-----------------------------------------------------------------------
# Expressions
#-----------------------------------------------------------------------


@dataclass
class Expression:

    source: str
    position: Position


@dataclass
class PushExpression(Expression):

    value: Value


@dataclass
class AddExpression(Expression):
    pass


@dataclass
class PrintExpression(Expression):
    pass
