"""核心模块 - Token系统、中缀转换、RPN评估器和操作符"""
from .token_system import (
    TokenType, OPERATORS, PRECEDENCE, RPNValidator,
    token_type, is_number_literal, format_tokens
)
from .errors import ParseError, InvalidToken, InvalidNumber, InsufficientOperands, ExcessOperands
from .operators import Operators
from .converter import convert
from .rpn_evaluator import RPNEvaluator, evaluate, evaluate_infix

__all__ = [
    'TokenType', 'OPERATORS', 'PRECEDENCE', 'RPNValidator',
    'token_type', 'is_number_literal', 'format_tokens',
    'ParseError', 'InvalidToken', 'InvalidNumber', 'InsufficientOperands', 'ExcessOperands',
    'Operators', 'convert', 'RPNEvaluator', 'evaluate', 'evaluate_infix'
]
