"""计算器模块 - 表达式求值入口和缓存"""
from .evaluator import ExpressionCalculator, evaluate_expression

__all__ = ['ExpressionCalculator', 'evaluate_expression']
