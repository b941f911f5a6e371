"""core/operators.py"""
import numpy as np


class Operators:
    """所有操作符的静态方法集合

    operand1 是先入栈的操作数，operand2 是后入栈（栈顶）的操作数。
    所有运算都在 float64 上按 IEEE-754 语义进行：除零得到 inf/nan，不抛异常。
    """

    @staticmethod
    def _as_float(operand):
        return np.float64(operand)

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        """取反：0 - x"""
        return np.float64(0.0) - Operators._as_float(operand)

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(operand1) + Operators._as_float(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(operand1) - Operators._as_float(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(operand1) * Operators._as_float(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：operand1 / operand2，除零按浮点约定返回 inf 或 nan"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return Operators._as_float(operand1) / Operators._as_float(operand2)
