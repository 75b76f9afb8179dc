# tests/conftest.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Logos test suites.

This module provides pytest configuration, fixtures, and utilities for testing
the propositional logic toolkit. It ensures proper module path setup and
provides common test infrastructure for all test modules.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common formulas and an exhaustive assignment helper
"""

import sys
import itertools
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Initialize test environment and verify module availability.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import parser
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


def all_assignments(names):
    """Yield every assignment over ``names`` as a dictionary."""
    for values in itertools.product([False, True], repeat=len(names)):
        yield dict(zip(names, values))


@pytest.fixture
def assignments():
    """Provide the exhaustive assignment generator.

    Returns:
        Callable mapping a list of variable names to an assignment iterator
    """
    return all_assignments


@pytest.fixture
def sample_formulas():
    """Provide a mix of formulas exercising every connective.

    Returns:
        List[str]: Infix formulas
    """
    return [
        "A",
        "~A",
        "A * B",
        "A + B",
        "A > B",
        "~(A > B)",
        "(A > B) * ~C",
        "A + B * C",
        "(A + B) * (C + D)",
        "~(A * B) > (C + ~D)",
        "P1 > (P2 > P1)",
        "~~(A + ~B) * C",
    ]


@pytest.fixture
def dimacs_text():
    """Provide a small DIMACS formula.

    Returns:
        str: DIMACS CNF text with two clauses
    """
    return "c example\np cnf 2 2\n1 -2 0\n-1 2 0\n"
