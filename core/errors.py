"""core/errors.py - 转换和求值过程中的错误类型"""


class ParseError(ValueError):
    """所有表达式错误的基类；kind 用于区分错误种类"""
    kind = 'parse_error'


class InvalidToken(ParseError):
    kind = 'invalid_token'

    def __init__(self, char):
        self.char = char
        super().__init__(f"Invalid token: {char}")


class InvalidNumber(ParseError):
    kind = 'invalid_number'

    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid token: {token}")


class InsufficientOperands(ParseError):
    kind = 'insufficient_operands'

    def __init__(self):
        super().__init__("not enough input")


class ExcessOperands(ParseError):
    """严格模式下求值结束时栈中剩余多于1个值"""
    kind = 'excess_operands'

    def __init__(self, count):
        self.count = count
        super().__init__(f"too much input: {count} values left on the stack, expected 1")
