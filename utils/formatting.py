"""utils/formatting.py"""
import math

import numpy as np


def format_result(value, dtype=np.float32):
    """
    结果显示：整数不带小数部分，非有限值显示为 +Inf / -Inf / NaN
    例: 7.0 -> '7', 0.1 -> '0.1', inf -> '+Inf'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    scalar = dtype(value)
    magnitude = abs(value)
    if magnitude != 0 and (magnitude >= 1e21 or magnitude < 1e-4):
        return np.format_float_scientific(scalar, trim='-', exp_digits=2)
    # 按 dtype 取最短可往返的十进制表示
    return np.format_float_positional(scalar, trim='-')


def format_menu(mapping):
    """{1: 'Scientific'} -> '1: Scientific'"""
    return "  ".join(f"{key}: {name}" for key, name in sorted(mapping.items()))
