"""Shared fixtures for the screening test suite."""

import pytest

from models.registry import get_registry
from utils.cache import clear_cache


@pytest.fixture
def registry():
    return get_registry()


@pytest.fixture
def make_answers(registry):
    """
    Build a complete answer map.

    Trait items take the value of their scale from scale_values (or default);
    control items L, M and N default to 0; inconsistency items repeat the
    answer of the item they restate, so K stays at 0 unless overridden.
    """
    def _make(scale_values=None, default=0):
        scale_values = scale_values or {}
        answers = {}
        for q in registry.questions:
            if q.mirror_of is not None:
                continue
            fallback = 0 if q.scale_key in registry.control_keys else default
            answers[q.id] = scale_values.get(q.scale_key, fallback)
        for q in registry.questions:
            if q.mirror_of is not None:
                answers[q.id] = answers[q.mirror_of]
        return answers

    return _make


@pytest.fixture(autouse=True)
def empty_result_cache():
    clear_cache()
    yield
    clear_cache()
