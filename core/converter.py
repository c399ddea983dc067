"""中缀表达式 -> RPN（调度场算法）"""
import logging

from core.token_system import PRECEDENCE, LEFT_PAREN, RIGHT_PAREN
from core.errors import InvalidToken

logger = logging.getLogger(__name__)

_NUMBER_CHARS = frozenset('0123456789.')


def convert(expression: str) -> tuple:
    """
    用调度场算法把中缀表达式转换为后缀Token序列。
    Args:
        expression: 中缀表达式，支持 + - * /、小数和圆括号
    Returns:
        后缀顺序的Token元组（不含括号）
    Raises:
        InvalidToken: 遇到无法识别的字符
    """
    output = []
    stack = []
    buffer = ''

    for char in expression:
        if char.isspace():
            if buffer:
                output.append(buffer)
                buffer = ''

        elif char in PRECEDENCE:
            if buffer:
                output.append(buffer)
                buffer = ''
            # 弹出优先级不低于当前运算符的，同级运算符从左到右结合；'(' 没有优先级，视为0
            while stack and PRECEDENCE.get(stack[-1], 0) >= PRECEDENCE[char]:
                output.append(stack.pop())
            stack.append(char)

        elif char == LEFT_PAREN:
            stack.append(char)

        elif char == RIGHT_PAREN:
            if buffer:
                output.append(buffer)
                buffer = ''
            while stack and stack[-1] != LEFT_PAREN:
                output.append(stack.pop())
            # 未匹配的 ')' 时栈为空，静默忽略
            if stack:
                stack.pop()

        elif char in _NUMBER_CHARS:
            buffer += char

        else:
            raise InvalidToken(char)

    if buffer:
        output.append(buffer)
    while stack:
        output.append(stack.pop())

    tokens = tuple(output)
    logger.debug(f"Converted {expression!r} to RPN: {' '.join(tokens)}")
    return tokens
