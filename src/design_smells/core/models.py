"""Structural model of an extracted source file.

These records mirror the JSON written by the extraction layer: one
``FileParsedComponents`` per source file, holding one ``ClassGroup`` per
analysed file with the classes, methods and fields found in it. Keys are
camelCase on the wire and snake_case in Python; both are accepted on input.

Models are frozen. A re-analysis builds fresh instances and replaces the
store entry wholesale instead of patching existing ones.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

UNKNOWN_NAME = "Unknown"
NO_TYPE = "No_Type"

ACCESSOR_PREFIXES = ("get", "Get", "set", "Set")


class AccessLevel(str, Enum):
    """Declared visibility of a class or member."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"


def _none_to_list(value: Any) -> Any:
    return [] if value is None else value


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


def _access_modifier(value: Any) -> Any:
    """Reduce a modifier list to its access level (default public)."""
    if value is None:
        return AccessLevel.PUBLIC.value
    if isinstance(value, (list, tuple)):
        for modifier in value:
            if modifier in {level.value for level in AccessLevel}:
                return modifier
        return AccessLevel.PUBLIC.value
    return value


StrList = Annotated[list[str], BeforeValidator(_none_to_list)]
Text = Annotated[str, BeforeValidator(_none_to_empty)]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump with camelCase keys, as the extraction layer writes them."""
        return self.model_dump(mode="json", by_alias=True)


class Position(_WireModel):
    """Zero-based (row, column) source position."""

    row: int = 0
    column: int = 0


class ClassInfo(_WireModel):
    """One class or interface declaration."""

    name: str = UNKNOWN_NAME
    implemented_interfaces: StrList = Field(default_factory=list)
    is_abstract: bool = False
    is_final: bool = False
    is_interface: bool = False
    access_level: AccessLevel = Field(
        default=AccessLevel.PUBLIC,
        validation_alias=AliasChoices("accessLevel", "AccessLevel", "access_level"),
    )
    modifiers: StrList = Field(default_factory=list)
    annotations: StrList = Field(default_factory=list)
    start_position: Position | None = None
    end_position: Position | None = None
    parent: str | None = None
    is_nested: bool = False
    generic_params: str | None = None
    has_constructor: bool = False
    nested_class_names: StrList = Field(default_factory=list)

    @property
    def has_parent(self) -> bool:
        return bool(self.parent)


class MethodInfo(_WireModel):
    """One method or constructor.

    ``fields_used`` holds the distinct identifiers of every variable
    declarator under the method, not a resolved set of class fields.
    ``method_body`` holds statement-kind tags in depth-first order with
    duplicates retained.
    """

    name: str = UNKNOWN_NAME
    modifiers: Annotated[str, BeforeValidator(_access_modifier)] = AccessLevel.PUBLIC.value
    params: StrList = Field(default_factory=list)
    return_type: str = NO_TYPE
    is_constructor: bool = False
    is_accessor: bool = False
    is_overridden: bool = False
    is_abstract: bool = False
    fields_used: StrList = Field(default_factory=list)
    annotations: StrList = Field(default_factory=list)
    throws_clause: StrList = Field(default_factory=list)
    method_body: StrList = Field(default_factory=list)
    local_variables: StrList = Field(default_factory=list)
    method_calls: StrList = Field(default_factory=list)
    field_access: StrList = Field(default_factory=list)
    parent: ClassInfo | None = None
    start_position: Position | None = None
    end_position: Position | None = None

    @property
    def is_public(self) -> bool:
        return self.modifiers == AccessLevel.PUBLIC.value

    @property
    def is_protected(self) -> bool:
        return self.modifiers == AccessLevel.PROTECTED.value


class FieldInfo(_WireModel):
    """One field declaration.

    ``modifiers`` is the first modifier token of the declaration, or
    ``"public"`` when the declaration has none.
    """

    name: str = "Unnamed"
    type: Text = ""
    modifiers: Text = AccessLevel.PUBLIC.value
    is_encapsulated: bool = False
    start_position: Position | None = None
    end_position: Position | None = None

    @property
    def is_public(self) -> bool:
        return self.modifiers.lower() == AccessLevel.PUBLIC.value


class ClassGroup(_WireModel):
    """Everything extracted from one source file.

    ``is_encapsulated`` on each field is recomputed from the group's own
    methods, whatever the input carried.
    """

    file_name: str = ""
    name: str = UNKNOWN_NAME
    classes: list[ClassInfo] = Field(default_factory=list)
    methods: list[MethodInfo] = Field(default_factory=list)
    fields: list[FieldInfo] = Field(default_factory=list)

    @field_validator("fields")
    @classmethod
    def _apply_encapsulation(
        cls, fields: list[FieldInfo], info: ValidationInfo
    ) -> list[FieldInfo]:
        # methods is declared first, so it is already validated here
        methods = info.data.get("methods", [])
        return [
            f.model_copy(
                update={"is_encapsulated": is_encapsulated_field(f.name, f.modifiers, methods)}
            )
            for f in fields
        ]


class FileParsedComponents(_WireModel):
    """Container persisted as one JSON document per source file."""

    classes: list[ClassGroup] = Field(default_factory=list)

    @property
    def file_name(self) -> str | None:
        for group in self.classes:
            if group.file_name:
                return group.file_name
        return None


def is_accessor_name(name: str) -> bool:
    return name.startswith(ACCESSOR_PREFIXES)


def has_getter_or_setter(field_name: str, methods: Sequence[MethodInfo]) -> bool:
    """Check whether any method name contains get<Field> or set<Field>."""
    if not field_name:
        return False
    capitalized = field_name[0].upper() + field_name[1:]
    getter = f"get{capitalized}"
    setter = f"set{capitalized}"
    return any(getter in m.name or setter in m.name for m in methods)


def is_encapsulated_field(
    field_name: str, modifiers: str, methods: Sequence[MethodInfo]
) -> bool:
    """A field is encapsulated when it is not public and has an accessor."""
    if modifiers.lower() == AccessLevel.PUBLIC.value:
        return False
    return has_getter_or_setter(field_name, methods)
