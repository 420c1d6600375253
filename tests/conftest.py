"""Shared fixtures for design-smells tests."""

from collections.abc import Callable

import pytest

from design_smells.core.models import (
    ClassGroup,
    ClassInfo,
    FieldInfo,
    FileParsedComponents,
    MethodInfo,
    Position,
)
from design_smells.core.store import ComponentStore

ACCOUNT_PATH = "/home/dev/bank/src/Account.java"


def make_class(name: str = "Account", start: int = 0, end: int = 0, **kwargs) -> ClassInfo:
    return ClassInfo(
        name=name,
        start_position=Position(row=start),
        end_position=Position(row=end),
        **kwargs,
    )


def make_components(
    file_name: str = ACCOUNT_PATH,
    classes: list[ClassInfo] | None = None,
    methods: list[MethodInfo] | None = None,
    fields: list[FieldInfo] | None = None,
) -> FileParsedComponents:
    classes = classes if classes is not None else [make_class()]
    return FileParsedComponents(
        classes=[
            ClassGroup(
                file_name=file_name,
                name=classes[0].name if classes else "Unknown",
                classes=classes,
                methods=methods or [],
                fields=fields or [],
            )
        ]
    )


@pytest.fixture
def account_path() -> str:
    return ACCOUNT_PATH


@pytest.fixture
def build_store() -> Callable[..., ComponentStore]:
    """Factory storing one file's components and returning the store."""

    def _build(
        classes: list[ClassInfo] | None = None,
        methods: list[MethodInfo] | None = None,
        fields: list[FieldInfo] | None = None,
        file_name: str = ACCOUNT_PATH,
        store: ComponentStore | None = None,
    ) -> ComponentStore:
        store = store if store is not None else ComponentStore()
        store.put(file_name, make_components(file_name, classes, methods, fields))
        return store

    return _build


@pytest.fixture
def bank_account_store(build_store) -> ComponentStore:
    """A small data-heavy Account class with accessors and a shared field."""
    methods = [
        MethodInfo(name="Account", is_constructor=True, fields_used=["balance"]),
        MethodInfo(
            name="deposit",
            fields_used=["balance", "amount"],
            method_body=["if_statement", "expression_statement"],
        ),
        MethodInfo(
            name="withdraw",
            fields_used=["balance", "amount"],
            method_body=["if_statement", "if_statement", "return_statement"],
        ),
        MethodInfo(
            name="getBalance",
            is_accessor=True,
            fields_used=[],
            method_body=["return_statement"],
        ),
    ]
    fields = [
        FieldInfo(name="balance", type="double", modifiers="private", is_encapsulated=True),
        FieldInfo(name="owner", type="Person", modifiers="private"),
        FieldInfo(name="id", type="String", modifiers="public"),
    ]
    return build_store(
        classes=[make_class("Account", start=3, end=42)], methods=methods, fields=fields
    )
