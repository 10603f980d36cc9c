"""Shared pytest configuration — path setup and common TriBool fixtures."""

import sys
from itertools import product
from pathlib import Path

import pytest

# Allow ``from tribool import ...`` without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from tribool import TriBool  # noqa: E402


# =============================================================================
# Shared data
# =============================================================================

STATES = (TriBool.FALSE, TriBool.MAYBE, TriBool.TRUE)
PAIRS = list(product(STATES, STATES))


def case_variants(token: str) -> list[str]:
    """Every upper/lower-case spelling of token."""
    choices = [sorted({ch.lower(), ch.upper()}) for ch in token]
    return sorted({"".join(chars) for chars in product(*choices)})


@pytest.fixture(params=STATES, ids=str)
def state(request):
    """Each of the three states in turn."""
    return request.param
