"""core/errors.py"""
from enum import Enum


class ErrorKind(Enum):
    MISMATCHED_PAREN = "mismatched_paren"  # 括号不匹配
    ARITY_UNDERFLOW = "arity_underflow"    # 操作数不足 / 缺少操作符
    EMPTY_RESULT = "empty_result"          # 没有任何数字


class EvalError(ValueError):
    """表达式求值失败，kind 标识错误类别"""

    def __init__(self, kind, message):
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message
