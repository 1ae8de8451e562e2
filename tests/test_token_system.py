"""Tests for the tokenizer and postfix stack-depth validator."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from core import (
    RPNValidator,
    Token,
    TokenType,
    normalize,
    strip_lexical_junk,
    to_postfix,
    token_lexemes,
    tokenize,
)


class TestTokenize:
    def test_numbers_operators_and_parens(self) -> None:
        tokens = tokenize("(1.5+2)**3/4-5*6")
        assert token_lexemes(tokens) == [
            "(", "1.5", "+", "2", ")", "**", "3", "/", "4", "-", "5", "*", "6",
        ]
        assert [t.type for t in tokens[:3]] == [
            TokenType.LPAREN, TokenType.NUMBER, TokenType.OPERATOR,
        ]

    def test_number_values_are_parsed(self) -> None:
        tokens = tokenize("12.25+007")
        assert tokens[0].value == 12.25
        assert tokens[2].value == 7.0
        assert tokens[1].value is None

    def test_double_star_matched_before_star(self) -> None:
        assert token_lexemes(tokenize("2***3")) == ["2", "**", "*", "3"]

    def test_junk_is_dropped(self) -> None:
        assert token_lexemes(tokenize("1 $+ x2")) == ["1", "+", "2"]

    def test_trailing_dot_is_not_part_of_number(self) -> None:
        assert token_lexemes(tokenize("3.+.5")) == ["3", "+", "5"]

    def test_no_implicit_multiplication(self) -> None:
        assert token_lexemes(tokenize("2(3)")) == ["2", "(", "3", ")"]

    def test_empty_input(self) -> None:
        assert tokenize("") == []

    def test_tokens_compare_by_type_and_lexeme(self) -> None:
        assert Token.number("2") == Token(TokenType.NUMBER, "2", 2.0)
        assert Token.operator("+") != Token.operator("-")

    def test_unknown_operator_rejected(self) -> None:
        with pytest.raises(ValueError):
            Token.operator("%")

    def test_strip_lexical_junk(self) -> None:
        assert strip_lexical_junk("1 + a2 * (3)") == "1+2*(3)"


class TestRPNValidator:
    def test_well_formed(self, scientific_table) -> None:
        postfix = to_postfix(tokenize("1+2*3"), scientific_table)
        assert RPNValidator.stack_profile(postfix) == [1, 2, 3, 2, 1]
        assert RPNValidator.is_well_formed(postfix)

    def test_underflow_marked(self, scientific_table) -> None:
        postfix = to_postfix(tokenize("+1"), scientific_table)
        assert RPNValidator.stack_profile(postfix) == [1, -1]
        assert RPNValidator.calculate_stack_size(postfix) == -1
        assert not RPNValidator.is_well_formed(postfix)

    def test_missing_operator(self, scientific_table) -> None:
        postfix = to_postfix(tokenize("(1)(2)"), scientific_table)
        assert RPNValidator.calculate_stack_size(postfix) == 2
        assert not RPNValidator.is_well_formed(postfix)

    def test_empty(self) -> None:
        assert RPNValidator.calculate_stack_size([]) == 0
        assert not RPNValidator.is_well_formed([])


class TestTokenizeProperties:
    @given(st.text(alphabet="0123456789+-*/() ", max_size=80))
    @settings(max_examples=200)
    def test_lexemes_rebuild_normalized_input(self, text: str) -> None:
        """Invariant: concatenated lexemes equal the normalized string when no junk is present."""
        normalized = normalize(text)
        assert "".join(token_lexemes(tokenize(normalized))) == normalized

    @given(st.text(max_size=120))
    @settings(max_examples=200)
    def test_lexemes_rebuild_junk_free_input(self, text: str) -> None:
        normalized = normalize(text)
        assert "".join(token_lexemes(tokenize(normalized))) == strip_lexical_junk(normalized)
