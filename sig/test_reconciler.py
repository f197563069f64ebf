# sig/test_reconciler.py
import numbers

import pytest

from sig.errors import ArgumentTypeError, ResultTypeError
from sig.expectations import expectation_from
from sig.reconciler import check_arguments, check_result, reconcile
from sig.signature import Signature


def expect(*declared):
    return [expectation_from(value) for value in declared]


class TestReconcile:

    def test_all_slots_pass(self):
        assert reconcile(expect(int, str), None, (1, "a"), {}) == []

    def test_reports_every_failing_slot(self):
        errors = reconcile(expect(int, str, int), None, ("x", 2, 3), {})
        assert errors == [
            "- Argument #0: Expected 'x' to be a int, but is a str",
            "- Argument #1: Expected 2 to be a str, but is a int",
        ]

    def test_uses_parameter_names_for_labels(self):
        errors = reconcile(expect(int), None, ("x",), {}, ("a", "b"))
        assert errors == ["- Argument 'a': Expected 'x' to be a int, but is a str"]

    def test_extra_arguments_are_unconstrained(self):
        assert reconcile(expect(int), None, (1, "anything", object()), {}) == []

    def test_missing_argument_is_checked_as_none(self):
        errors = reconcile(expect(int, int), None, (1,), {})
        assert errors == ["- Argument #1: Expected None to be a int, but is a NoneType"]

    def test_missing_argument_can_pass(self):
        assert reconcile(expect(int, [int, None]), None, (1,), {}) == []

    def test_keywords_by_name(self):
        keyword = {"word": expectation_from(str)}
        assert reconcile(expect(numbers.Number), keyword, (42,), {"word": "ok"}) == []
        errors = reconcile(expect(numbers.Number), keyword, (42,), {"word": 1})
        assert errors == ["- Argument 'word': Expected 1 to be a str, but is a int"]

    def test_undeclared_keyword_is_unconstrained(self):
        keyword = {"word": expectation_from(str)}
        assert reconcile([], keyword, (), {"other": 1}) == []

    def test_declared_keyword_not_passed_is_not_checked(self):
        keyword = {"word": expectation_from(str)}
        assert reconcile([], keyword, (), {}) == []

    def test_trailing_mapping_is_split_off(self):
        declared = expect(numbers.Number) + [{"word": expectation_from(str)}]
        errors = reconcile(declared, None, ("42",), {"word": "43"})
        assert errors == ["- Argument #0: Expected '42' to be a Number, but is a str"]

    def test_keyword_naming_positional_parameter_fills_its_slot(self):
        errors = reconcile(expect(int, int), None, (1,), {"b": "x"}, ("a", "b"))
        assert errors == ["- Argument 'b': Expected 'x' to be a int, but is a str"]

    def test_keyword_declared_parameter_passed_positionally(self):
        keyword = {"word": expectation_from(str)}
        errors = reconcile(expect(numbers.Number), keyword, (42, 1), {}, ("arg", "word"))
        assert errors == ["- Argument 'word': Expected 1 to be a str, but is a int"]
        assert reconcile(expect(numbers.Number), keyword, (42, "ok"), {}, ("arg", "word")) == []

    def test_declared_keyword_wins_over_parameter_name(self):
        keyword = {"b": expectation_from(str)}
        assert reconcile(expect(int, int), keyword, (1, 2), {"b": "x"}, ("a", "b")) == []


class TestKeywordFolding:
    """Keywords passed without declared keyword expectations become one trailing dict."""

    def test_folded_into_next_index(self):
        errors = reconcile(expect(int, dict), None, (1,), {"word": 1})
        assert errors == []
        errors = reconcile(expect(int, str), None, (1,), {"word": 1})
        assert errors == ["- Argument #1: Expected {'word': 1} to be a str, but is a dict"]

    def test_folded_past_declared_slots_is_unconstrained(self):
        assert reconcile(expect(int), None, (1,), {"word": 1}) == []

    def test_folded_after_slots_filled_by_name(self):
        errors = reconcile(expect(int, int, str), None, (1,), {"b": 2, "extra": 3}, ("a", "b"))
        assert errors == ["- Argument #2: Expected {'extra': 3} to be a str, but is a dict"]

    def test_no_folding_without_keywords(self):
        assert reconcile(expect(int, [dict, None]), None, (1,), {}) == []


class TestChecks:

    def test_check_arguments_raises_with_all_errors(self):
        signature = Signature.declare([int, int])
        with pytest.raises(ArgumentTypeError) as excinfo:
            check_arguments(signature, ("a", "b"), {})
        assert len(excinfo.value.errors) == 2
        assert str(excinfo.value) == "\n".join(excinfo.value.errors)
        assert isinstance(excinfo.value, TypeError)

    def test_check_arguments_passes(self):
        check_arguments(Signature.declare([int]), (1,), {})

    def test_check_result(self):
        check_result(expectation_from(float), 1.5)
        check_result(None, object())
        with pytest.raises(ResultTypeError) as excinfo:
            check_result(expectation_from(float), 1)
        assert str(excinfo.value) == "- Result: Expected 1 to be a float, but is a int"
