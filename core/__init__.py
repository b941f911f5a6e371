"""核心模块 - Token系统、表达式解析器、RPN评估器和操作符"""
from .token_system import (
    TokenType, OperatorKind, Token, OPERATOR_SYMBOLS, PRIORITY, ARITY,
    precedence_of, format_postfix
)
from .errors import (
    ExpressionError, LiteralParseError, NestingTooDeepError,
    StackUnderflowError, ResultMissingError, TrailingValuesError
)
from .operators import Operators
from .expression_parser import parse_expression, parse_value, add_operation, to_postfix
from .rpn_evaluator import RPNEvaluator
from .calculator import calculate

__all__ = [
    'TokenType', 'OperatorKind', 'Token', 'OPERATOR_SYMBOLS', 'PRIORITY', 'ARITY',
    'precedence_of', 'format_postfix',
    'ExpressionError', 'LiteralParseError', 'NestingTooDeepError',
    'StackUnderflowError', 'ResultMissingError', 'TrailingValuesError',
    'Operators', 'parse_expression', 'parse_value', 'add_operation', 'to_postfix',
    'RPNEvaluator', 'calculate'
]
