"""core/shunting_yard.py"""
import logging

from core.errors import ErrorKind, EvalError
from core.operators import Associativity
from core.token_system import TokenType

logger = logging.getLogger(__name__)


def _should_pop(top, incoming, optable):
    top_spec = optable[top.name]
    incoming_spec = optable[incoming.name]
    if top_spec.precedence > incoming_spec.precedence:
        return True
    return (top_spec.precedence == incoming_spec.precedence
            and incoming_spec.associativity is Associativity.LEFT)


def to_postfix(tokens, optable):
    """
    Dijkstra 调度场算法，中缀 -> 后缀
    Args:
        tokens: tokenize() 的输出
        optable: get_operator_table() 返回的 {symbol: OperatorSpec}
    Returns:
        只含 NUMBER / OPERATOR 的 Token 列表
    """
    output_queue = []
    op_stack = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output_queue.append(token)

        elif token.type == TokenType.OPERATOR:
            while op_stack and op_stack[-1].type == TokenType.OPERATOR \
                    and _should_pop(op_stack[-1], token, optable):
                output_queue.append(op_stack.pop())
            op_stack.append(token)

        elif token.type == TokenType.LPAREN:
            op_stack.append(token)

        elif token.type == TokenType.RPAREN:
            while op_stack and op_stack[-1].type != TokenType.LPAREN:
                output_queue.append(op_stack.pop())
            if not op_stack:
                logger.debug(f"Unmatched ')' after {' '.join(t.name for t in output_queue)!r}")
                raise EvalError(ErrorKind.MISMATCHED_PAREN, "unmatched ')'")
            op_stack.pop()  # 丢弃 '('

    # 输入读完，弹出剩余操作符
    while op_stack:
        top = op_stack.pop()
        if top.type == TokenType.LPAREN:
            logger.debug("Unclosed '(' left on operator stack")
            raise EvalError(ErrorKind.MISMATCHED_PAREN, "unclosed '('")
        output_queue.append(top)

    return output_queue
