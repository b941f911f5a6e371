"""表达式计算入口 - 解析器 -> 后缀序列 -> 求值器"""
import logging

from core.expression_parser import to_postfix
from core.rpn_evaluator import RPNEvaluator
from core.token_system import format_postfix
from utils.text import remove_whitespace

logger = logging.getLogger(__name__)


def calculate(expression, allow_trailing_values=None):
    """
    计算中缀表达式
    Args:
        expression: 表达式文本，空白会被全部删除
        allow_trailing_values: 透传给 RPNEvaluator.evaluate
    Returns:
        float 结果；解析或求值失败时抛出 ExpressionError
    """
    text = remove_whitespace(expression)
    postfix = to_postfix(text)
    logger.debug(f"Parsed {text!r} -> {format_postfix(postfix)}")
    return RPNEvaluator.evaluate(postfix, allow_trailing_values=allow_trailing_values)
