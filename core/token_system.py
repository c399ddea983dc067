"""core/token_system.py"""
import re
from enum import Enum
from types import MappingProxyType


class TokenType(Enum):
    OPERAND = "operand"  # 数字字面量
    OPERATOR = "operator"  # + - * /
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


OPERATORS = ('+', '-', '*', '/')

# 运算符优先级表，导入时构建一次，之后只读
PRECEDENCE = MappingProxyType({
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
})

LEFT_PAREN = '('
RIGHT_PAREN = ')'

# 只接受十进制写法：1 / 1.5 / 1. / .5，不接受符号、指数、inf、nan
_NUMBER_PATTERN = re.compile(r'(?:[0-9]+\.?[0-9]*|\.[0-9]+)')


def is_number_literal(token):
    """判断token是否是合法的十进制数字"""
    return isinstance(token, str) and _NUMBER_PATTERN.fullmatch(token) is not None


def token_type(token):
    """对字符串token分类；非运算符和括号的一律视为操作数"""
    if token in PRECEDENCE:
        return TokenType.OPERATOR
    if token == LEFT_PAREN:
        return TokenType.LEFT_PAREN
    if token == RIGHT_PAREN:
        return TokenType.RIGHT_PAREN
    return TokenType.OPERAND


def format_tokens(tokens, separator=', '):
    """把Token序列拼接成便于显示的字符串"""
    return separator.join(tokens)


class RPNValidator:
    @staticmethod
    def calculate_stack_size(token_sequence):
        """
        模拟求值栈，只计算栈深度（不关心数值）。
        二元运算符：弹出2个，压入1个。一旦下溢立即返回负数。
        """
        stack_size = 0
        for token in token_sequence:
            if token_type(token) == TokenType.OPERATOR:
                if stack_size < 2:
                    return stack_size - 2
                stack_size -= 1
            else:
                stack_size += 1
        return stack_size

    @staticmethod
    def is_complete_expression(token_sequence):
        """完整表达式：从不下溢，且最终正好留下1个结果"""
        return RPNValidator.calculate_stack_size(token_sequence) == 1
