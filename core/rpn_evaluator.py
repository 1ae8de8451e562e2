"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from core.errors import ErrorKind, EvalError
from core.operators import Operators
from core.token_system import TokenType

logger = logging.getLogger(__name__)

SUPPORTED_DTYPES = {
    'float32': np.float32,
    'float64': np.float64,
}


def resolve_dtype(dtype):
    """'float32' / np.float32 -> np.float32"""
    if isinstance(dtype, str):
        if dtype not in SUPPORTED_DTYPES:
            raise ValueError(f"Unsupported numeric dtype: {dtype}")
        return SUPPORTED_DTYPES[dtype]
    if dtype not in SUPPORTED_DTYPES.values():
        raise ValueError(f"Unsupported numeric dtype: {dtype}")
    return dtype


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def evaluate(postfix, dtype=np.float32):
        """
        Args:
            postfix: to_postfix() 输出的 Token 序列
            dtype: 值栈的数值类型，默认单精度
        Returns:
            dtype 类型的 numpy 标量，可能为 inf / nan
        Raises:
            EvalError: 空表达式、操作数不足或缺少操作符
        """
        dtype = resolve_dtype(dtype)
        if not postfix:
            raise EvalError(ErrorKind.EMPTY_RESULT, "no numeric literal in expression")

        stack = []
        # 除零、溢出不报错，inf/nan 按浮点语义继续传播
        with np.errstate(all='ignore'):
            for token in postfix:
                if token.type == TokenType.NUMBER:
                    stack.append(dtype(token.value))
                    continue

                if token.type != TokenType.OPERATOR:
                    raise ValueError(f"Parenthesis in postfix sequence: {token!r}")

                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.name}: stack has {len(stack)}")
                    raise EvalError(ErrorKind.ARITY_UNDERFLOW,
                                    f"operator '{token.name}' needs two operands")
                right = stack.pop()
                left = stack.pop()
                stack.append(dtype(Operators.apply(token.name, left, right)))

        if len(stack) > 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.debug(f"RPN expression: {' '.join(t.name for t in postfix)}")
            raise EvalError(ErrorKind.ARITY_UNDERFLOW,
                            f"missing operator between {len(stack)} operands")
        return stack[0]


def evaluate_postfix(postfix, dtype=np.float32):
    return RPNEvaluator.evaluate(postfix, dtype=dtype)
