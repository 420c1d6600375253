"""Unit tests for coupling calculators."""

from design_smells.analysis.metrics import (
    AccessToForeignData,
    CouplingBetweenObjects,
    DataAbstractionCoupling,
    ForeignDataProviders,
)
from design_smells.core.models import FieldInfo, MethodInfo


class TestDataAbstractionCoupling:
    """Test DAC over field types."""

    def test_only_class_types_counted(self, build_store, account_path):
        """Test int and Person fields give DAC 1."""
        store = build_store(
            fields=[FieldInfo(name="id", type="int"), FieldInfo(name="owner", type="Person")]
        )
        assert DataAbstractionCoupling().calculate(None, store, account_path) == 1

    def test_distinct_types(self, build_store, account_path):
        store = build_store(
            fields=[
                FieldInfo(name="owner", type="Person"),
                FieldInfo(name="cosigner", type="Person"),
                FieldInfo(name="bank", type="Bank"),
            ]
        )
        assert DataAbstractionCoupling().calculate(None, store, account_path) == 2

    def test_library_types_case_insensitive(self, build_store, account_path):
        store = build_store(
            fields=[
                FieldInfo(name="name", type="string"),
                FieldInfo(name="created", type="Date"),
                FieldInfo(name="rates", type="HASHMAP"),
            ]
        )
        assert DataAbstractionCoupling().calculate(None, store, account_path) == 0

    def test_generic_types_skipped(self, build_store, account_path):
        store = build_store(
            fields=[
                FieldInfo(name="books", type="List<Book>"),
                FieldInfo(name="shelf", type="Shelf"),
            ]
        )
        assert DataAbstractionCoupling().calculate(None, store, account_path) == 1

    def test_stops_at_untyped_field(self, build_store, account_path):
        """Test the scan ends at the first field without a type."""
        store = build_store(
            fields=[
                FieldInfo(name="owner", type="Person"),
                FieldInfo(name="mystery", type=""),
                FieldInfo(name="bank", type="Bank"),
            ]
        )
        assert DataAbstractionCoupling().calculate(None, store, account_path) == 1

    def test_zero_fields(self, build_store, account_path):
        store = build_store(methods=[MethodInfo(name="run")])
        assert DataAbstractionCoupling().calculate(None, store, account_path) == 0


class TestForeignDataProviders:
    """Test FDP over field accesses."""

    def test_distinct_providers(self, build_store, account_path):
        store = build_store(
            fields=[
                FieldInfo(name="owner", type="Person"),
                FieldInfo(name="bank", type="Bank"),
                FieldInfo(name="count", type="int"),
            ],
            methods=[
                MethodInfo(name="report", field_access=["owner.name", "owner.age", "bank.code"]),
                MethodInfo(name="tally", field_access=["count.value", "local.x"]),
            ],
        )
        assert ForeignDataProviders().calculate(None, store, account_path) == 2

    def test_this_prefix_not_resolved(self, build_store, account_path):
        store = build_store(
            fields=[FieldInfo(name="owner", type="Person")],
            methods=[MethodInfo(name="report", field_access=["this.owner"])],
        )
        assert ForeignDataProviders().calculate(None, store, account_path) == 0

    def test_no_class(self, build_store, account_path):
        store = build_store(
            classes=[],
            fields=[FieldInfo(name="owner", type="Person")],
            methods=[MethodInfo(name="report", field_access=["owner.name"])],
        )
        assert ForeignDataProviders().calculate(None, store, account_path) == 0

    def test_zero_fields(self, build_store, account_path):
        store = build_store(methods=[MethodInfo(name="report", field_access=["owner.name"])])
        assert ForeignDataProviders().calculate(None, store, account_path) == 0


class TestAccessToForeignData:
    """Test ATFD over field accesses and accessor calls."""

    def test_field_access_and_accessor_calls(self, build_store, account_path):
        store = build_store(
            fields=[
                FieldInfo(name="owner", type="Person"),
                FieldInfo(name="bank", type="Bank"),
                FieldInfo(name="log", type="Logger"),
            ],
            methods=[
                MethodInfo(
                    name="process",
                    field_access=["owner.name"],
                    method_calls=["bank.getRate", "log.info"],
                ),
                MethodInfo(name="Account", is_constructor=True, field_access=["log.level"]),
                MethodInfo(name="getLog", is_accessor=True, method_calls=["log.getLevel"]),
            ],
        )
        assert AccessToForeignData().calculate(None, store, account_path) == 2

    def test_no_foreign_fields(self, bank_account_store, account_path):
        assert AccessToForeignData().calculate(None, bank_account_store, account_path) == 0


class TestCouplingBetweenObjects:
    """Test CBO over signatures, locals and fields."""

    def test_all_reference_sites(self, build_store, account_path):
        store = build_store(
            fields=[
                FieldInfo(name="owner", type="Person"),
                FieldInfo(name="books", type="List<Book>"),
            ],
            methods=[
                MethodInfo(
                    name="transfer",
                    params=["Bank bank", "int count"],
                    local_variables=["Ledger"],
                    return_type="Account",
                ),
                MethodInfo(name="reset", return_type="void"),
            ],
        )
        assert CouplingBetweenObjects().calculate(None, store, account_path) == 4

    def test_bank_account(self, bank_account_store, account_path):
        assert CouplingBetweenObjects().calculate(None, bank_account_store, account_path) == 1
