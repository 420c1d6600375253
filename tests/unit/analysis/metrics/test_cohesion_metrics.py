"""Unit tests for Tight Class Cohesion."""

import pytest

from design_smells.analysis.metrics import TightClassCohesion
from design_smells.core.models import MethodInfo


class TestTightClassCohesion:
    """Test TCC pair counting."""

    def test_shared_field(self, build_store, account_path):
        """Test two methods sharing 'balance' are fully cohesive."""
        store = build_store(
            methods=[
                MethodInfo(name="deposit", fields_used=["balance"]),
                MethodInfo(name="withdraw", fields_used=["balance", "fee"]),
            ]
        )
        assert TightClassCohesion().calculate(None, store, account_path) == 1.0

    def test_partial_cohesion(self, bank_account_store, account_path):
        assert TightClassCohesion().calculate(None, bank_account_store, account_path) == 0.33

    def test_no_shared_fields(self, build_store, account_path):
        store = build_store(
            methods=[
                MethodInfo(name="a", fields_used=["x"]),
                MethodInfo(name="b", fields_used=["y"]),
                MethodInfo(name="c", fields_used=[]),
            ]
        )
        assert TightClassCohesion().calculate(None, store, account_path) == 0.0

    @pytest.mark.parametrize("count", [0, 1])
    def test_few_methods_return_count(self, build_store, account_path, count):
        """Test zero or one method returns the count, not a ratio."""
        methods = [MethodInfo(name=f"m{i}", fields_used=["x"]) for i in range(count)]
        methods.append(MethodInfo(name="Account", is_constructor=True, fields_used=["x"]))
        store = build_store(methods=methods)
        assert TightClassCohesion().calculate(None, store, account_path) == count

    def test_same_named_overloads_are_separate(self, build_store, account_path):
        store = build_store(
            methods=[
                MethodInfo(name="add", fields_used=["total"]),
                MethodInfo(name="add", params=["int n"], fields_used=["total"]),
            ]
        )
        assert TightClassCohesion().calculate(None, store, account_path) == 1.0
