"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from config.config import EVALUATOR_CONFIG
from core.errors import ResultMissingError, StackUnderflowError, TrailingValuesError
from core.operators import Operators
from core.token_system import TokenType, format_postfix

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, allow_trailing_values=None):
        """
        评估后缀Token序列
        Args:
            token_sequence: Token序列（从前往后消费）
            allow_trailing_values: 栈中剩余多个值时是否只取第一个；None 时读取 EVALUATOR_CONFIG
        Returns:
            float 结果
        """
        if allow_trailing_values is None:
            allow_trailing_values = EVALUATOR_CONFIG["allow_trailing_values"]

        stack = []

        for position, token in enumerate(token_sequence):
            if token.type == TokenType.OPERAND:
                stack.append(token.value)
                continue

            if len(stack) < token.arity:
                logger.debug(f"RPN expression: {format_postfix(token_sequence)}")
                raise StackUnderflowError(token.kind, position, len(stack))

            # ================== 一元操作符处理 ==================
            if token.arity == 1:
                operand = stack.pop()
                result = getattr(Operators, token.kind.value)(operand)

            # ================== 二元操作符处理 ==================
            else:
                operand2 = stack.pop()
                operand1 = stack.pop()
                result = getattr(Operators, token.kind.value)(operand1, operand2)

            stack.append(result)

        # 返回结果处理
        if len(stack) == 0:
            raise ResultMissingError()
        if len(stack) > 1:
            if not allow_trailing_values:
                logger.debug(f"RPN expression: {format_postfix(token_sequence)}")
                raise TrailingValuesError(len(stack))
            logger.warning(f"Stack has {len(stack)} values after evaluation, using the first one")

        return float(stack[0])
