"""Unit tests for WMC and AMW."""

import pytest

from design_smells.analysis.metrics import (
    AverageMethodWeight,
    WeightedMethodCount,
    method_weight,
)
from design_smells.core.models import ClassInfo, MethodInfo
from design_smells.core.store import ComponentStore


class TestMethodWeight:
    def test_decision_points_add_weight(self):
        """Test a method with if/for/expression tags weighs 3."""
        method = MethodInfo(
            name="process",
            method_body=["if_statement", "for_statement", "expression_statement"],
        )
        assert method_weight(method) == 3

    def test_duplicates_counted(self):
        method = MethodInfo(name="check", method_body=["if_statement", "if_statement"])
        assert method_weight(method) == 3

    def test_empty_body(self):
        assert method_weight(MethodInfo(name="noop")) == 1


class TestWeightedMethodCount:
    """Test WMC and AMW over concrete methods."""

    def test_bank_account(self, bank_account_store, account_path):
        assert WeightedMethodCount().calculate(None, bank_account_store, account_path) == 7
        assert AverageMethodWeight().calculate(None, bank_account_store, account_path) == 1.75

    def test_abstract_class_skips_bodiless_methods(self, build_store, account_path):
        """Test abstract methods of an abstract class are not weighed."""
        store = build_store(
            classes=[ClassInfo(name="Shape", is_abstract=True)],
            methods=[
                MethodInfo(name="area"),
                MethodInfo(name="describe", method_body=["if_statement"]),
                MethodInfo(name="Shape", is_constructor=True),
            ],
        )
        assert WeightedMethodCount().calculate(None, store, account_path) == 3
        assert AverageMethodWeight().calculate(None, store, account_path) == 1.5

    def test_concrete_class_keeps_bodiless_methods(self, build_store, account_path):
        store = build_store(methods=[MethodInfo(name="area")])
        assert WeightedMethodCount().calculate(None, store, account_path) == 1

    @pytest.mark.parametrize("count", [1, 3, 6])
    def test_wmc_at_least_method_count(self, build_store, account_path, count):
        store = build_store(
            methods=[MethodInfo(name=f"m{i}", method_body=["if_statement"] * i) for i in range(count)]
        )
        assert WeightedMethodCount().calculate(None, store, account_path) >= count

    def test_no_methods(self, account_path):
        assert WeightedMethodCount().calculate(None, ComponentStore(), account_path) == 0
        assert AverageMethodWeight().calculate(None, ComponentStore(), account_path) == 0
