"""
Tests for the evaluator - the conditional operator.
"""

import pytest


class TestConditional:
    """cond ? a : b evaluates only the selected branch."""

    @pytest.mark.parametrize("source, expected", [
        ("true ? 1 : 2", 1.0),
        ("false ? 1 : 2", 2.0),
        ("nil ? 1 : 2", 2.0),
        ("0 ? 1 : 2", 1.0),
        ('"" ? 1 : 2', 1.0),
        ("1 < 2 ? \"yes\" : \"no\"", "yes"),
    ])
    def test_branch_selection(self, evaluate_source, source, expected):
        assert evaluate_source(source) == expected

    def test_right_associative(self, evaluate_source):
        assert evaluate_source("true ? 1 : false ? 2 : 3") == 1.0
        assert evaluate_source("false ? 1 : false ? 2 : 3") == 3.0
        assert evaluate_source("false ? 1 : true ? 2 : 3") == 2.0

    def test_untaken_true_branch_is_not_evaluated(self, evaluate_source):
        assert evaluate_source("false ? (1/0) : 5") == 5.0
        assert evaluate_source('false ? -"boom" : 5') == 5.0

    def test_untaken_false_branch_is_not_evaluated(self, evaluate_source):
        assert evaluate_source('true ? 5 : -"boom"') == 5.0

    def test_comma_in_branches(self, evaluate_source):
        assert evaluate_source("true ? 1, 2 : 3") == 2.0
        assert evaluate_source("false ? 1 : 2, 3") == 3.0
