"""批量求值模块 - 表达式求值、缓存和结果汇总"""
from .evaluator import ExpressionEvaluator, EvaluationResult

__all__ = ['ExpressionEvaluator', 'EvaluationResult']
