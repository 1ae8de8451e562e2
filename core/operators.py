"""core/operators.py"""
import logging
from collections import namedtuple
from enum import Enum
from types import MappingProxyType

import numpy as np

logger = logging.getLogger(__name__)


class Mode(Enum):
    """计算模式，只影响操作符优先级表"""
    SCIENTIFIC = 1
    ACCOUNTING = 2

    @classmethod
    def resolve(cls, mode):
        """接受 Mode / 菜单编号 / 名称，未知时回退到 SCIENTIFIC"""
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            key = mode.strip().upper()
            if key in cls.__members__:
                return cls[key]
            if key.isdigit():
                mode = int(key)
        try:
            return cls(mode)
        except ValueError:
            logger.warning(f"Unknown computation mode {mode!r}, falling back to Scientific")
            return cls.SCIENTIFIC


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


OperatorSpec = namedtuple('OperatorSpec', ['precedence', 'associativity'])

VALID_OPERATORS = ('+', '-', '*', '/', '**')

SCIENTIFIC_OPERATORS = MappingProxyType({
    '+': OperatorSpec(2, Associativity.LEFT),
    '-': OperatorSpec(2, Associativity.LEFT),
    '*': OperatorSpec(3, Associativity.LEFT),
    '/': OperatorSpec(3, Associativity.LEFT),
    '**': OperatorSpec(4, Associativity.RIGHT),
})

# 所有操作符同级，按输入顺序结合（仅在 flat_accounting 时启用）
FLAT_ACCOUNTING_OPERATORS = MappingProxyType({
    '+': OperatorSpec(1, Associativity.LEFT),
    '-': OperatorSpec(1, Associativity.LEFT),
    '*': OperatorSpec(1, Associativity.LEFT),
    '/': OperatorSpec(1, Associativity.LEFT),
    '**': OperatorSpec(1, Associativity.RIGHT),
})

OPERATOR_TABLES = MappingProxyType({
    Mode.SCIENTIFIC: SCIENTIFIC_OPERATORS,
    Mode.ACCOUNTING: SCIENTIFIC_OPERATORS,
})


def get_operator_table(mode=Mode.SCIENTIFIC, flat_accounting=False):
    """
    返回给定模式的操作符表（只读映射）
    Args:
        mode: Mode、菜单编号(1/2)或名称
        flat_accounting: Accounting 模式是否使用全部同级的优先级表
    Returns:
        {symbol: OperatorSpec}
    """
    mode = Mode.resolve(mode)
    if mode is Mode.ACCOUNTING and flat_accounting:
        return FLAT_ACCOUNTING_OPERATORS
    return OPERATOR_TABLES[mode]


class Operators:
    """二元算术操作符的静态方法集合

    输入为 numpy 标量，调用方负责在 np.errstate 中执行，
    除零/溢出得到 inf 或 nan 并继续参与后续运算。
    """

    @staticmethod
    def add(left, right):
        return left + right

    @staticmethod
    def sub(left, right):
        return left - right

    @staticmethod
    def mul(left, right):
        return left * right

    @staticmethod
    def div(left, right):
        # 不做除零保护
        return np.divide(left, right)

    @staticmethod
    def pow(left, right):
        """实数幂，负底数配小数指数得到 nan"""
        return np.power(left, right)

    @staticmethod
    def apply(symbol, left, right):
        op_method = getattr(Operators, SYMBOL_TO_METHOD[symbol])
        return op_method(left, right)


SYMBOL_TO_METHOD = MappingProxyType({
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
    '**': 'pow',
})
