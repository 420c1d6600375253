"""Unit tests for the per-file component store."""

from pathlib import Path

import orjson
import pytest

from design_smells.core.exceptions import StoreError
from design_smells.core.models import ClassGroup, ClassInfo, FileParsedComponents
from design_smells.core.store import ComponentStore, base_name, file_stem, load_components_file


def _components(file_name: str, class_name: str = "Account") -> FileParsedComponents:
    return FileParsedComponents(
        classes=[
            ClassGroup(
                file_name=file_name,
                name=class_name,
                classes=[ClassInfo(name=class_name)],
            )
        ]
    )


class TestFileStem:
    """Test lookup key derivation."""

    def test_posix_path(self):
        assert file_stem("/home/dev/src/Account.java") == "account"

    def test_windows_path(self):
        assert file_stem("C:\\work\\src\\Account.java") == "account"

    def test_bare_name(self):
        assert file_stem("Account") == "account"

    def test_base_name_keeps_case(self):
        assert base_name("/src/main/BankAccount.java") == "BankAccount"


class TestComponentStore:
    """Test in-memory store operations."""

    def test_lookup_across_path_styles(self):
        """Test an entry stored with a POSIX path is found by a Windows path."""
        store = ComponentStore()
        parsed = _components("/home/dev/src/Account.java")
        store.put("/home/dev/src/Account.java", parsed)

        assert store.get_by_file_name("C:\\Users\\dev\\Account.java") is parsed
        assert store.get_by_file_name("account.JAVA") is parsed

    def test_missing_file_returns_none(self):
        """Test unknown files return None instead of raising."""
        assert ComponentStore().get_by_file_name("/src/Missing.java") is None

    def test_put_replaces_entry(self):
        """Test a second put for the same file replaces the first."""
        store = ComponentStore()
        store.put("/a/Account.java", _components("/a/Account.java", "Old"))
        store.put("/b/Account.java", _components("/b/Account.java", "New"))

        assert len(store) == 1
        assert store.get_by_file_name("Account.java").classes[0].name == "New"
        assert store.file_names() == ["/b/Account.java"]

    def test_remove_and_clear(self):
        """Test removing one entry and clearing the rest."""
        store = ComponentStore()
        store.put("/a/Account.java", _components("/a/Account.java"))
        store.put("/a/Bank.java", _components("/a/Bank.java", "Bank"))

        assert store.remove("Account.java")
        assert not store.remove("Account.java")
        assert "Account.java" not in store
        assert "Bank.java" in store

        store.clear()
        assert len(store) == 0

    def test_all_classes(self):
        store = ComponentStore()
        store.put("/a/Account.java", _components("/a/Account.java"))
        store.put("/a/Bank.java", _components("/a/Bank.java", "Bank"))
        assert sorted(c.name for c in store.all_classes()) == ["Account", "Bank"]

    def test_snapshot_is_independent(self):
        """Test a snapshot is unaffected by later writes."""
        store = ComponentStore()
        store.put("/a/Account.java", _components("/a/Account.java"))
        snapshot = store.snapshot()
        store.clear()

        assert "Account.java" in snapshot
        assert len(store) == 0


class TestStorePersistence:
    """Test directory load and save."""

    def test_save_and_load_directory(self, tmp_path: Path):
        """Test saved entries are loaded back by file name."""
        store = ComponentStore()
        store.put("C:\\src\\Account.java", _components("C:\\src\\Account.java"))

        written = store.save_directory(tmp_path)
        assert [p.name for p in written] == ["Account.json"]

        loaded = ComponentStore.from_directory(tmp_path)
        assert len(loaded) == 1
        assert loaded.get_by_file_name("/other/Account.java").classes[0].name == "Account"

    def test_malformed_files_skipped(self, tmp_path: Path):
        """Test empty, invalid and wrongly shaped files are skipped."""
        (tmp_path / "Good.json").write_bytes(
            orjson.dumps(_components("/src/Good.java", "Good").to_wire())
        )
        (tmp_path / "Empty.json").write_text("   ")
        (tmp_path / "Broken.json").write_text("{not json")
        (tmp_path / "Shape.json").write_text('{"classes": "nope"}')

        store = ComponentStore()
        assert store.load_directory(tmp_path) == 1
        assert "Good.java" in store

    def test_missing_directory(self, tmp_path: Path):
        assert ComponentStore().load_directory(tmp_path / "absent") == 0

    def test_load_components_file_empty(self, tmp_path: Path):
        path = tmp_path / "Empty.json"
        path.write_text("")
        assert load_components_file(path) is None

    def test_save_failure_raises_store_error(self, tmp_path: Path):
        """Test write failures surface as StoreError."""
        blocker = tmp_path / "file"
        blocker.write_text("x")
        store = ComponentStore()
        store.put("/a/Account.java", _components("/a/Account.java"))

        with pytest.raises(StoreError):
            store.save_directory(blocker / "sub")
