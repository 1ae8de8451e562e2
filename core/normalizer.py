"""core/normalizer.py - 输入清洗：合并符号串和重复括号"""
import re

_WHITESPACE = re.compile(r'\s+')
_SIGN_RUN = re.compile(r'[+-]{2,}')
_LPAREN_RUN = re.compile(r'\({2,}')
_RPAREN_RUN = re.compile(r'\){2,}')


def _collapse_sign_run(match):
    # 偶数个 '-' 得 '+'，奇数个得 '-'
    return '+' if match.group().count('-') % 2 == 0 else '-'


def collapse_signs(expression):
    return _SIGN_RUN.sub(_collapse_sign_run, expression)


def collapse_parens(expression):
    output = _LPAREN_RUN.sub('(', expression)
    return _RPAREN_RUN.sub(')', output)


def normalize(raw):
    """
    去掉空白后依次合并：符号串 -> 连续 '(' -> 连续 ')'
    例: '1 ++-+- 2' -> '1+2', '((1+2))' -> '(1+2)'
    """
    output = _WHITESPACE.sub('', raw)
    output = collapse_signs(output)
    return collapse_parens(output)
