"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.token_system import TokenType, token_type, is_number_literal
from core.operators import Operators
from core.errors import InvalidNumber, InsufficientOperands, ExcessOperands
from core.converter import convert

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, allow_partial=True) -> float:
        """
        评估RPN表达式
        Args:
            token_sequence: 后缀顺序的Token序列
            allow_partial: 是否允许栈中剩余多个值（只取栈顶）
        Returns:
            评估结果（float）
        Raises:
            InvalidNumber: 操作数不是合法的十进制数字
            InsufficientOperands: 运算符或最终结果缺少操作数
            ExcessOperands: allow_partial=False 且栈中剩余多于1个值
        """
        stack = []

        for token in token_sequence:
            if token_type(token) == TokenType.OPERATOR:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token}")
                    raise InsufficientOperands()
                right = stack.pop()
                left = stack.pop()
                stack.append(Operators.apply(token, left, right))

            else:
                if not is_number_literal(token):
                    raise InvalidNumber(token)
                stack.append(float(token))

        if not stack:
            logger.debug("Empty stack after evaluation")
            raise InsufficientOperands()

        if len(stack) > 1:
            if not allow_partial:
                raise ExcessOperands(len(stack))
            logger.debug(f"Partial expression with {len(stack)} stack elements, using top")

        return float(stack.pop())


def evaluate(token_sequence, allow_partial=True) -> float:
    return RPNEvaluator.evaluate(token_sequence, allow_partial=allow_partial)


def evaluate_infix(expression: str, allow_partial=True) -> float:
    """中缀表达式一步求值：convert 后 evaluate"""
    return RPNEvaluator.evaluate(convert(expression), allow_partial=allow_partial)
