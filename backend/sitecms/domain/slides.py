from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .invariants.exceptions import InvariantViolation


class SlideType(str, Enum):
    ARTICLE = "article"
    PRODUCT = "product"
    MAIN_SERVICE = "main_service"
    IMPORT_SERVICE = "import_service"
    CONTRACTING_SERVICE = "contracting_service"
    PROJECT = "project"
    CUSTOM = "custom"

    @property
    def is_custom(self) -> bool:
        return self is SlideType.CUSTOM


class ScopeKind(str, Enum):
    HERO_SECTION = "hero_section"
    IMPORT_SERVICE = "import_service"
    CONTRACTING_SERVICE = "contracting_service"


# Storage column holding the reference id for each referencing kind.
REFERENCE_COLUMNS: Dict[SlideType, str] = {
    SlideType.ARTICLE: "article_id",
    SlideType.PRODUCT: "product_id",
    SlideType.MAIN_SERVICE: "main_service_id",
    SlideType.IMPORT_SERVICE: "import_service_id",
    SlideType.CONTRACTING_SERVICE: "contracting_service_id",
    SlideType.PROJECT: "project_id",
}

SCOPE_COLUMNS: Dict[ScopeKind, str] = {
    ScopeKind.HERO_SECTION: "hero_section_id",
    ScopeKind.IMPORT_SERVICE: "parent_import_service_id",
    ScopeKind.CONTRACTING_SERVICE: "parent_contracting_service_id",
}


def parse_slide_type(value: Any) -> SlideType:
    if isinstance(value, SlideType):
        return value
    try:
        return SlideType(value)
    except ValueError:
        raise InvariantViolation(f"Unknown slide type: {value!r}")


@dataclass(frozen=True)
class SlideTarget:
    """
    What a slide points at.

    `kind` is the discriminant; `ref_id` is set for every kind except
    CUSTOM, and never for CUSTOM.
    """

    kind: SlideType
    ref_id: Optional[str] = None

    def __post_init__(self):
        if self.kind.is_custom and self.ref_id:
            raise InvariantViolation("Custom slides cannot reference content")
        if not self.kind.is_custom and not self.ref_id:
            raise InvariantViolation(
                f"{self.kind.value} slide must reference a {self.kind.value}"
            )

    @classmethod
    def custom(cls) -> "SlideTarget":
        return cls(SlideType.CUSTOM)

    @classmethod
    def of(cls, kind: Any, ref_id: Optional[str] = None) -> "SlideTarget":
        return cls(parse_slide_type(kind), ref_id or None)

    @property
    def column(self) -> Optional[str]:
        return REFERENCE_COLUMNS.get(self.kind)


@dataclass(frozen=True)
class SlideScope:
    """The single parent a slide belongs to."""

    kind: ScopeKind
    parent_id: str

    def __post_init__(self):
        if not self.parent_id:
            raise InvariantViolation("Slide scope requires a parent id")

    @classmethod
    def of(cls, kind: Any, parent_id: str) -> "SlideScope":
        try:
            return cls(ScopeKind(kind), parent_id)
        except ValueError:
            raise InvariantViolation(f"Unknown slide scope: {kind!r}")

    @property
    def column(self) -> str:
        return SCOPE_COLUMNS[self.kind]


def target_from_columns(slide_type: Any, values: Mapping[str, Optional[str]]) -> SlideTarget:
    """
    Decode the stored reference columns into a SlideTarget.

    Raises InvariantViolation when the row does not match its tag:
    unknown type, missing id for a referencing kind, or ids populated in
    columns that belong to another kind.
    """
    kind = parse_slide_type(slide_type)
    populated = {column for column, value in values.items() if value}
    expected = REFERENCE_COLUMNS.get(kind)

    stray = populated - {expected}
    if stray:
        raise InvariantViolation(
            f"{kind.value} slide has unexpected references: {sorted(stray)}"
        )

    if kind.is_custom:
        return SlideTarget.custom()
    return SlideTarget(kind, values.get(expected))


def scope_from_columns(values: Mapping[str, Optional[str]]) -> SlideScope:
    populated = [
        (kind, values.get(column))
        for kind, column in SCOPE_COLUMNS.items()
        if values.get(column)
    ]
    if len(populated) != 1:
        raise InvariantViolation(
            f"Slide must belong to exactly one parent, found {len(populated)}"
        )
    kind, parent_id = populated[0]
    return SlideScope(kind, parent_id)
