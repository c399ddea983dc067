"""core/operators.py"""
import numpy as np


class Operators:
    """所有二元运算符的静态方法集合"""

    @staticmethod
    def add(left, right):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(left) + np.float64(right)

    @staticmethod
    def sub(left, right):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(left) - np.float64(right)

    @staticmethod
    def mul(left, right):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(left) * np.float64(right)

    @staticmethod
    def div(left, right):
        """
        除法操作符，按IEEE-754处理除零：
        x/0 -> ±inf，0/0 -> nan，不抛异常也不产生警告
        """
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return np.float64(left) / np.float64(right)

    @staticmethod
    def apply(op, left, right):
        """按符号分派：left op right"""
        op_method = _SYMBOL_TO_METHOD.get(op)
        if op_method is None:
            raise ValueError(f"invalid operator: {op}")
        return op_method(left, right)


_SYMBOL_TO_METHOD = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
}
