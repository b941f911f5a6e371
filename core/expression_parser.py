"""中缀表达式解析器 - 逐字符扫描，直接生成后缀(RPN) Token序列"""
import logging

import numpy as np

from config.config import PARSER_CONFIG
from core.errors import LiteralParseError, NestingTooDeepError
from core.token_system import Token, OperatorKind, OPERATOR_SYMBOLS, precedence_of

logger = logging.getLogger(__name__)

DECIMAL_SEPARATORS = tuple(PARSER_CONFIG["decimal_separators"])


def _is_literal_char(ch):
    return '0' <= ch <= '9' or ch in DECIMAL_SEPARATORS


def parse_value(text):
    """把数字字面量解析为 float64；',' 视为小数点"""
    normalized = text
    for separator in DECIMAL_SEPARATORS:
        if separator != '.':
            normalized = normalized.replace(separator, '.')
    try:
        return np.float64(float(normalized))
    except ValueError as e:
        raise LiteralParseError(text) from e


def add_operation(output, pending, kind):
    """
    按优先级处理新操作符
    Args:
        output: 后缀Token序列
        pending: 当前括号层级的待定操作符栈
        kind: 新操作符
    """
    # 栈顶操作符结合更紧（或同级，保证左结合）时先输出；
    # 循环弹出，使 pending 自底向上保持优先级递增
    while pending and precedence_of(pending[-1]) >= precedence_of(kind):
        output.append(Token.operator(pending.pop()))
    pending.append(kind)


def _flush_literal(current, output):
    if current:
        output.append(Token.operand(parse_value(current)))
    return ''


def parse_expression(chars, output, depth=0):
    """
    解析一个括号层级，把后缀Token追加到 output
    Args:
        chars: 字符迭代器，嵌套层级与调用方共享同一个迭代器
        output: 后缀Token序列（list）
        depth: 当前括号嵌套深度
    """
    max_depth = PARSER_CONFIG["max_nesting_depth"]
    if depth > max_depth:
        raise NestingTooDeepError(max_depth)

    chars = iter(chars)
    current = ''
    pending = []
    negation = True  # True 时 '-' 表示取反

    for ch in chars:
        if ch == ')':
            if depth == 0:
                logger.warning("Unmatched ')' ends the expression, remaining input ignored")
            break
        elif ch == '(':
            parse_expression(chars, output, depth + 1)
            # 闭合的子表达式相当于一个操作数
            negation = False
        elif _is_literal_char(ch):
            current += ch
            negation = False
        elif ch in OPERATOR_SYMBOLS:
            current = _flush_literal(current, output)
            kind = OPERATOR_SYMBOLS[ch]
            if kind == OperatorKind.SUBTRACT and negation:
                kind = OperatorKind.NEGATE
            negation = True
            add_operation(output, pending, kind)
        else:
            logger.warning(f"Unexpected character {ch!r} ends the expression at depth {depth}")
            break

    _flush_literal(current, output)

    while pending:
        output.append(Token.operator(pending.pop()))


def to_postfix(text):
    """把（已去除空白的）表达式文本转换为后缀Token列表"""
    output = []
    parse_expression(iter(text), output)
    return output
