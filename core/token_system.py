"""core/token_system.py"""
from enum import Enum

import numpy as np


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符


class OperatorKind(Enum):
    ADD = "add"
    SUBTRACT = "sub"
    MULTIPLY = "mul"
    DIVIDE = "div"
    NEGATE = "neg"


class Token:
    """A postfix token: either an operand carrying a float64, or an operator kind, never both."""

    def __init__(self, token_type, value=None, kind=None):
        if token_type == TokenType.OPERAND:
            if value is None or kind is not None:
                raise ValueError("operand token needs a value and no operator kind")
        elif token_type == TokenType.OPERATOR:
            if kind is None or value is not None:
                raise ValueError("operator token needs a kind and no value")
        else:
            raise ValueError(f"unknown token type: {token_type!r}")
        self.type = token_type
        self.value = value
        self.kind = kind

    @classmethod
    def operand(cls, value):
        return cls(TokenType.OPERAND, value=np.float64(value))

    @classmethod
    def operator(cls, kind):
        return cls(TokenType.OPERATOR, kind=kind)

    @property
    def is_operand(self):
        return self.type == TokenType.OPERAND

    @property
    def arity(self):
        return ARITY[self.kind] if self.type == TokenType.OPERATOR else 0

    @property
    def name(self):
        if self.is_operand:
            return repr(float(self.value))
        return OPERATOR_NAMES[self.kind]

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.kind, self.value) == (other.type, other.kind, other.value)

    def __hash__(self):
        return hash((self.type, self.kind, self.value))

    def __repr__(self):
        if self.is_operand:
            return f"Token.operand({float(self.value)!r})"
        return f"Token.operator(OperatorKind.{self.kind.name})"


# 字符到操作符的映射；'-' 由解析器根据上下文决定是取反还是减法
OPERATOR_SYMBOLS = {
    '+': OperatorKind.ADD,
    '-': OperatorKind.SUBTRACT,
    '*': OperatorKind.MULTIPLY,
    '/': OperatorKind.DIVIDE,
}

OPERATOR_NAMES = {
    OperatorKind.ADD: '+',
    OperatorKind.SUBTRACT: '-',
    OperatorKind.MULTIPLY: '*',
    OperatorKind.DIVIDE: '/',
    OperatorKind.NEGATE: 'neg',
}

# 优先级：数值越大结合越紧
PRIORITY = {
    OperatorKind.ADD: 1,
    OperatorKind.SUBTRACT: 1,
    OperatorKind.MULTIPLY: 2,
    OperatorKind.DIVIDE: 2,
    OperatorKind.NEGATE: 5,
}

ARITY = {
    OperatorKind.ADD: 2,
    OperatorKind.SUBTRACT: 2,
    OperatorKind.MULTIPLY: 2,
    OperatorKind.DIVIDE: 2,
    OperatorKind.NEGATE: 1,
}


def precedence_of(kind):
    return PRIORITY[kind]


def format_postfix(token_sequence):
    """Render a postfix sequence as space separated text, e.g. ``2.0 3.0 4.0 * +``."""
    return ' '.join(token.name for token in token_sequence)
