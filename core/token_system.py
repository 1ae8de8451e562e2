"""core/token_system.py"""
import re
from enum import Enum

from core.operators import VALID_OPERATORS


class TokenType(Enum):
    NUMBER = "number"      # 数字
    OPERATOR = "operator"  # 操作符
    LPAREN = "lparen"      # (
    RPAREN = "rparen"      # )


class Token:
    def __init__(self, token_type, name, value=None):
        self.type = token_type
        self.name = name      # 原始词素
        self.value = value    # 仅数字有值

    @classmethod
    def number(cls, literal):
        return cls(TokenType.NUMBER, literal, float(literal))

    @classmethod
    def operator(cls, symbol):
        if symbol not in VALID_OPERATORS:
            raise ValueError(f"Unknown operator: {symbol}")
        return cls(TokenType.OPERATOR, symbol)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.name == other.name

    def __hash__(self):
        return hash((self.type, self.name))

    def __repr__(self):
        return f"Token({self.type.name}, {self.name!r})"


LPAREN = Token(TokenType.LPAREN, '(')
RPAREN = Token(TokenType.RPAREN, ')')

# 匹配顺序即优先级：** 必须先于 *
TOKEN_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]+)?|\*\*|[+\-*/()]')


def tokenize(expression):
    """从左到右最长匹配切分，字母表以外的字符直接丢弃"""
    tokens = []
    for match in TOKEN_PATTERN.finditer(expression):
        lexeme = match.group()
        if lexeme == '(':
            tokens.append(LPAREN)
        elif lexeme == ')':
            tokens.append(RPAREN)
        elif lexeme in VALID_OPERATORS:
            tokens.append(Token.operator(lexeme))
        else:
            tokens.append(Token.number(lexeme))
    return tokens


def token_lexemes(tokens):
    return [t.name for t in tokens]


def strip_lexical_junk(expression):
    """只保留可识别的词素，例如 '1 + a2' -> '1+2'"""
    return ''.join(TOKEN_PATTERN.findall(expression))


class RPNValidator:
    @staticmethod
    def stack_profile(postfix):
        """
        模拟值栈，只记录深度（不计算数值）
        Returns:
            每个元素处理后的栈深度；某个操作符处不足两个操作数时为 -1
        """
        depth = 0
        profile = []
        for tk in postfix:
            if tk.type == TokenType.NUMBER:
                depth += 1
            elif tk.type == TokenType.OPERATOR:
                if depth < 2:
                    profile.append(-1)
                    return profile
                depth -= 1
            else:
                raise ValueError(f"Parenthesis in postfix sequence: {tk!r}")
            profile.append(depth)
        return profile

    @staticmethod
    def calculate_stack_size(postfix):
        """计算求值结束后栈中的元素数量，下溢时返回 -1"""
        profile = RPNValidator.stack_profile(postfix)
        return profile[-1] if profile else 0

    @staticmethod
    def is_well_formed(postfix):
        """全程不下溢且最终恰好留下一个值"""
        profile = RPNValidator.stack_profile(postfix)
        return bool(profile) and min(profile) >= 1 and profile[-1] == 1
