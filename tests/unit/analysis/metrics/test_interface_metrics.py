"""Unit tests for Weight Of a Class."""

import pytest

from design_smells.analysis.metrics import WeightOfAClass
from design_smells.core.models import FieldInfo, MethodInfo


class TestWeightOfAClass:
    """Test WOC over the public interface."""

    def test_one_accessor_of_three(self, build_store, account_path):
        """Test 3 public methods with 1 accessor give WOC of about 0.67."""
        store = build_store(
            methods=[
                MethodInfo(name="deposit"),
                MethodInfo(name="withdraw"),
                MethodInfo(name="getBalance", is_accessor=True),
            ]
        )
        woc = WeightOfAClass().calculate(None, store, account_path)
        assert woc == pytest.approx(0.67, abs=0.01)

    def test_public_fields_count_as_data(self, bank_account_store, account_path):
        assert WeightOfAClass().calculate(None, bank_account_store, account_path) == 0.5

    def test_empty_public_interface(self, build_store, account_path):
        store = build_store(
            methods=[
                MethodInfo(name="Account", is_constructor=True),
                MethodInfo(name="audit", modifiers="private"),
            ],
            fields=[FieldInfo(name="balance", type="double", modifiers="private")],
        )
        assert WeightOfAClass().calculate(None, store, account_path) == 0

    @pytest.mark.parametrize(
        "accessors,others,public_fields",
        [(0, 3, 0), (2, 0, 0), (1, 1, 2), (0, 0, 3)],
    )
    def test_range(self, build_store, account_path, accessors, others, public_fields):
        methods = [MethodInfo(name=f"getX{i}", is_accessor=True) for i in range(accessors)]
        methods += [MethodInfo(name=f"run{i}") for i in range(others)]
        fields = [FieldInfo(name=f"f{i}", type="int") for i in range(public_fields)]
        woc = WeightOfAClass().calculate(None, build_store(methods=methods, fields=fields), account_path)
        assert 0 <= woc <= 1
