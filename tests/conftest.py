"""Shared fixtures for polyrecon tests."""

import json
import random
import pytest


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def sample_document():
    """4 points on P(x) = x^2 + 2x + 5, k=3, values in mixed bases."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "8"},      # 8
        "2": {"base": "2", "value": "1101"},    # 13
        "3": {"base": "16", "value": "14"},     # 20
        "6": {"base": "36", "value": "z"},      # wrong on purpose (P(6)=53)
    }


@pytest.fixture
def sample_file(tmp_path, sample_document):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(sample_document))
    return path
