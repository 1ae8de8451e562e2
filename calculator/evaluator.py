import logging
from collections import OrderedDict

import numpy as np

from config.config import CALCULATOR_CONFIG
from core import (
    EvalError, Mode, RPNEvaluator, RPNValidator, get_operator_table, normalize,
    resolve_dtype, strip_lexical_junk, to_postfix, token_lexemes, tokenize
)

logger = logging.getLogger(__name__)


def evaluate_expression(raw: str, mode=Mode.SCIENTIFIC, dtype=np.float32,
                        flat_accounting: bool = False) -> float:
    """
    完整流水线: normalize -> tokenize -> to_postfix -> evaluate
    Args:
        raw: 用户输入的中缀表达式
        mode: 计算模式（Mode、1/2 或名称）
        dtype: 值栈数值类型
        flat_accounting: Accounting 模式是否使用全部同级优先级表
    Returns:
        结果（float，可能为 inf/nan）
    Raises:
        EvalError
    """
    optable = get_operator_table(mode, flat_accounting=flat_accounting)
    tokens = tokenize(normalize(raw))
    postfix = to_postfix(tokens, optable)
    return float(RPNEvaluator.evaluate(postfix, dtype=dtype))


class ExpressionCalculator:

    def __init__(self, mode=None, cache_size=None, dtype=None, flat_accounting=None):
        self.mode = Mode.resolve(CALCULATOR_CONFIG['default_mode'] if mode is None else mode)
        self.cache_size = CALCULATOR_CONFIG['cache_size'] if cache_size is None else cache_size
        self.dtype = resolve_dtype(CALCULATOR_CONFIG['numeric_dtype'] if dtype is None else dtype)
        if flat_accounting is None:
            flat_accounting = CALCULATOR_CONFIG['accounting_flat_precedence']
        self.flat_accounting = flat_accounting
        self.optable = get_operator_table(self.mode, flat_accounting=flat_accounting)
        # 有限大小的OrderedDict实现LRU缓存
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        while len(self._result_cache) > self.cache_size:
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
        }

    def evaluate(self, raw: str) -> float:
        """求值，失败时抛出 EvalError；错误结果不缓存"""
        cache_key = normalize(raw)

        if cache_key in self._result_cache:
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {cache_key[:50]}")
            return self._result_cache[cache_key]

        self._cache_misses += 1
        try:
            postfix = to_postfix(tokenize(cache_key), self.optable)
            result = float(RPNEvaluator.evaluate(postfix, dtype=self.dtype))
        except EvalError as e:
            logger.info(f"Failed to evaluate '{raw[:50]}': {e}")
            raise

        if self.cache_size > 0:
            self._result_cache[cache_key] = result
            self._manage_cache()
        return result

    def explain(self, raw: str) -> dict:
        """逐阶段的中间结果，用于 --trace 输出"""
        normalized = normalize(raw)
        tokens = tokenize(normalized)
        trace = {
            'input': raw,
            'validated': strip_lexical_junk(raw),
            'normalized': normalized,
            'tokens': token_lexemes(tokens),
            'postfix': None,
            'well_formed': False,
            'result': None,
            'error': None,
        }
        try:
            postfix = to_postfix(tokens, self.optable)
            trace['postfix'] = token_lexemes(postfix)
            trace['well_formed'] = RPNValidator.is_well_formed(postfix)
            trace['result'] = self.evaluate(raw)
        except EvalError as e:
            trace['error'] = e
        return trace
