"""Unit tests for type-name classification."""

from design_smells.analysis.metrics.types import (
    base_type,
    is_foreign_type,
    is_library_type,
    is_primitive_type,
    param_type,
    referenced_type_names,
    split_generic,
)


class TestTypeNames:
    def test_base_type(self):
        assert base_type("List<Book>") == "List"

    def test_primitive(self):
        assert is_primitive_type("int")
        assert is_primitive_type("Integer")
        assert not is_primitive_type("Person")

    def test_foreign(self):
        assert is_foreign_type("Person", "Account")
        assert not is_foreign_type("Account", "Account")
        assert not is_foreign_type("String", "Account")
        assert not is_foreign_type("", "Account")

    def test_library_case_insensitive(self):
        assert is_library_type("STRING")
        assert is_library_type("int[]")
        assert not is_library_type("Person")

    def test_split_generic(self):
        assert split_generic("Map<String, Book>") == ("Map", "String, Book")
        assert split_generic("Book") is None

    def test_referenced_type_names(self):
        assert referenced_type_names("Map<String, List<Book>>") == ["Map", "String", "List", "Book"]
        assert referenced_type_names("com.bank.Ledger[]") == ["Ledger"]
        assert referenced_type_names("List<? extends Shape>") == ["List", "Shape"]

    def test_param_type(self):
        assert param_type("Bank bank") == "Bank"
        assert param_type("@NotNull Bank bank") == "Bank"
        assert param_type("int[] values") == "int[]"
        assert param_type("") == ""
