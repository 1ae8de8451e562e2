"""Tests for infix to postfix conversion."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from core import ErrorKind, EvalError, Mode, get_operator_table, to_postfix, token_lexemes, tokenize


def postfix_of(expression, optable):
    return token_lexemes(to_postfix(tokenize(expression), optable))


class TestToPostfix:
    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("1+2*3", "1 2 3 * +"),
            ("(1+2)*3", "1 2 + 3 *"),
            ("10-3-2", "10 3 - 2 -"),
            ("8/4/2", "8 4 / 2 /"),
            ("2**3**2", "2 3 2 ** **"),
            ("2*3**2", "2 3 2 ** *"),
            ("2**3*2", "2 3 ** 2 *"),
            ("1-(2-3)", "1 2 3 - -"),
        ],
    )
    def test_scientific_order(self, scientific_table, expression: str, expected: str) -> None:
        assert postfix_of(expression, scientific_table) == expected.split()

    def test_parentheses_never_in_output(self, scientific_table) -> None:
        lexemes = postfix_of("((1+2)*(3-4))/5", scientific_table)
        assert "(" not in lexemes and ")" not in lexemes

    def test_flat_table_follows_input_order(self, flat_table) -> None:
        assert postfix_of("1+2*3", flat_table) == "1 2 + 3 *".split()

    def test_flat_table_keeps_power_right_associative(self, flat_table) -> None:
        assert postfix_of("2**3**2", flat_table) == "2 3 2 ** **".split()

    def test_accounting_defaults_to_scientific(self) -> None:
        table = get_operator_table(Mode.ACCOUNTING)
        assert postfix_of("1+2*3", table) == "1 2 3 * +".split()

    def test_consecutive_numbers_pass_through(self, scientific_table) -> None:
        assert postfix_of("(1)(2)", scientific_table) == ["1", "2"]

    def test_unmatched_closing_paren(self, scientific_table) -> None:
        with pytest.raises(EvalError) as exc_info:
            to_postfix(tokenize("1+2)*3"), scientific_table)
        assert exc_info.value.kind is ErrorKind.MISMATCHED_PAREN

    def test_unclosed_opening_paren(self, scientific_table) -> None:
        with pytest.raises(EvalError) as exc_info:
            to_postfix(tokenize("(1+2"), scientific_table)
        assert exc_info.value.kind is ErrorKind.MISMATCHED_PAREN

    def test_empty(self, scientific_table) -> None:
        assert to_postfix([], scientific_table) == []


def _expressions():
    """Well-formed binary infix expressions built from small integers."""
    leaves = st.integers(min_value=0, max_value=99).map(str)
    ops = st.sampled_from(["+", "-", "*", "/", "**"])

    def extend(children):
        return st.one_of(
            st.tuples(children, ops, children).map(lambda t: f"{t[0]}{t[1]}{t[2]}"),
            children.map(lambda c: f"({c})"),
        )

    return st.recursive(leaves, extend, max_leaves=10)


class TestToPostfixProperties:
    @given(_expressions())
    @settings(max_examples=200)
    def test_redundant_outer_parens_do_not_change_postfix(self, expression: str) -> None:
        table = get_operator_table(Mode.SCIENTIFIC)
        assert postfix_of(f"({expression})", table) == postfix_of(expression, table)

    @given(_expressions(), st.sampled_from([Mode.SCIENTIFIC, Mode.ACCOUNTING]))
    @settings(max_examples=200)
    def test_number_operator_balance(self, expression: str, mode: Mode) -> None:
        """Invariant: numbers minus operators stays >= 1 and ends at exactly 1."""
        depth = 0
        for lexeme in postfix_of(expression, get_operator_table(mode)):
            depth += 1 if lexeme[0].isdigit() else -1
            assert depth >= 1
        assert depth == 1
