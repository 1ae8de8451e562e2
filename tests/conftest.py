"""Shared pytest fixtures for calculator tests."""

import pytest

from core import Mode, get_operator_table


@pytest.fixture
def scientific_table():
    """Scientific precedence table."""
    return get_operator_table(Mode.SCIENTIFIC)


@pytest.fixture
def flat_table():
    """Accounting table with every operator at the same precedence."""
    return get_operator_table(Mode.ACCOUNTING, flat_accounting=True)
