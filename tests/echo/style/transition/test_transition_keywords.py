"""
Tests for transition keywords.
"""

import pytest

from echo.style.transition import TransitionBehavior, TransitionFunction


class TestTransitionFunction:
    @pytest.mark.parametrize("function", list(TransitionFunction))
    def test_reads_own_text(self, function):
        assert TransitionFunction.from_text(function.value) is function

    def test_unknown_text(self):
        assert TransitionFunction.from_text("cubic-bezier") is None

    def test_is_case_sensitive(self):
        assert TransitionFunction.from_text("Ease") is None


class TestTransitionBehavior:
    def test_reads_keywords(self):
        assert TransitionBehavior.from_text("normal") is TransitionBehavior.NORMAL
        assert TransitionBehavior.from_text("discrete") is TransitionBehavior.DISCRETE

    def test_unknown_text(self):
        assert TransitionBehavior.from_text("allow-discrete") is None
