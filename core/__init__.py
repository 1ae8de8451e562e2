"""核心模块 - 规范化、Token系统、调度场转换和RPN评估器"""
from .errors import ErrorKind, EvalError
from .operators import (
    Mode, Associativity, OperatorSpec, VALID_OPERATORS,
    SCIENTIFIC_OPERATORS, FLAT_ACCOUNTING_OPERATORS, get_operator_table, Operators
)
from .token_system import (
    TokenType, Token, TOKEN_PATTERN, tokenize, token_lexemes,
    strip_lexical_junk, RPNValidator
)
from .normalizer import normalize, collapse_signs, collapse_parens
from .shunting_yard import to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate_postfix, resolve_dtype

__all__ = [
    'ErrorKind', 'EvalError',
    'Mode', 'Associativity', 'OperatorSpec', 'VALID_OPERATORS',
    'SCIENTIFIC_OPERATORS', 'FLAT_ACCOUNTING_OPERATORS', 'get_operator_table', 'Operators',
    'TokenType', 'Token', 'TOKEN_PATTERN', 'tokenize', 'token_lexemes',
    'strip_lexical_junk', 'RPNValidator',
    'normalize', 'collapse_signs', 'collapse_parens',
    'to_postfix',
    'RPNEvaluator', 'evaluate_postfix', 'resolve_dtype',
]
