import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from core import convert, RPNEvaluator, ParseError, format_tokens
from config.config import CALCULATOR_CONFIG, BATCH_CONFIG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    expression: str
    tokens: tuple = ()
    value: float = np.nan
    error: Optional[ParseError] = None

    @property
    def ok(self):
        return self.error is None

    @property
    def rpn(self):
        return format_tokens(self.tokens, CALCULATOR_CONFIG["token_separator"])


class ExpressionEvaluator:

    def __init__(self, cache_size=BATCH_CONFIG["cache_size"],
                 allow_partial=CALCULATOR_CONFIG["allow_partial"]):
        self.rpn_evaluator = RPNEvaluator
        self.allow_partial = allow_partial
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = cache_size
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {'hits': self._cache_hits, 'misses': self._cache_misses, 'size': len(self._result_cache)}

    def run(self, expression: str) -> EvaluationResult:
        """
        求值一个中缀表达式，同时保留中间RPN和错误信息
        Args:
            expression: 中缀表达式字符串
        Returns:
            EvaluationResult，失败时 value 为 NaN、error 为对应的 ParseError
        """
        if expression in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[expression]

        self._cache_misses += 1
        result = self._evaluate_impl(expression)
        self._result_cache[expression] = result
        self._manage_cache()
        return result

    def _evaluate_impl(self, expression: str) -> EvaluationResult:
        try:
            tokens = convert(expression)
        except ParseError as e:
            logger.warning(f"Failed to convert expression {expression[:50]!r}: {e}")
            return EvaluationResult(expression, error=e)

        try:
            value = self.rpn_evaluator.evaluate(tokens, allow_partial=self.allow_partial)
        except ParseError as e:
            logger.warning(f"RPN evaluation failed for {format_tokens(tokens, ' ')!r}: {e}")
            return EvaluationResult(expression, tokens, error=e)

        return EvaluationResult(expression, tokens, value)

    def evaluate(self, expression: str) -> float:
        """求值中缀表达式；出错时记录日志并返回NaN"""
        return self.run(expression).value

    def evaluate_many(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        批量求值，每个表达式一行
        Returns:
            DataFrame，列为 expression / rpn / result / error
        """
        rows = []
        for expression in expressions:
            result = self.run(expression)
            rows.append({
                'expression': result.expression,
                'rpn': result.rpn,
                'result': result.value,
                'error': None if result.ok else str(result.error),
            })

        df = pd.DataFrame(rows, columns=BATCH_CONFIG["output_columns"])
        df['result'] = df['result'].astype(np.float64)

        n_failed = int(df['error'].notna().sum())
        if n_failed:
            logger.warning(f"{n_failed} of {len(df)} expressions failed to evaluate")
        logger.info(f"Evaluated {len(df)} expressions. Cache: {self.cache_info}")
        return df
