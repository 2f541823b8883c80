from typing import Any, Dict, List

from sitecms.errors import ValidationFailure
from sitecms.extensions import db
from sitecms.domain.invariants.exceptions import InvariantViolation
from sitecms.domain.slides import SCOPE_COLUMNS, SlideTarget, parse_slide_type, scope_from_columns
from sitecms.models.hero_section import HeroSection
from sitecms.models.image import Image
from sitecms.models.service import ContractingService, ImportService
from sitecms.utils.payload import clean_bool, clean_int, clean_text

from .content_lookup import SqlContentLookup

TEXT_FIELDS = (
    "title_en",
    "title_ar",
    "subtitle_en",
    "subtitle_ar",
    "cta_text_en",
    "cta_text_ar",
    "cta_href",
    "background_image_id",
    "background_color",
)
BOOL_FIELDS = ("cta_enabled", "is_active")
INT_FIELDS = ("overlay_opacity", "sort_order")

DEFAULTS = {
    "cta_enabled": False,
    "overlay_opacity": 0,
    "is_active": True,
    "sort_order": 0,
}

PARENT_MODELS = {
    "hero_section_id": HeroSection,
    "parent_import_service_id": ImportService,
    "parent_contracting_service_id": ContractingService,
}


def _set(slide, field, value, changed: List[str]):
    if getattr(slide, field) != value:
        setattr(slide, field, value)
        changed.append(field)


def _current(slide, attribute):
    """Decoded target/scope of a stored slide, None when it is anomalous."""
    try:
        return getattr(slide, attribute)
    except InvariantViolation:
        return None


def _target_from(slide, data, current) -> SlideTarget:
    if "slide_type" in data:
        kind = parse_slide_type(clean_text("slide_type", data["slide_type"]) or "custom")
    elif current is not None:
        kind = current.kind
    else:
        kind = parse_slide_type(slide.slide_type or "custom")

    if "reference_id" in data:
        ref_id = clean_text("reference_id", data["reference_id"])
    elif current is not None and current.kind is kind:
        ref_id = current.ref_id
    else:
        ref_id = None

    return SlideTarget(kind, ref_id)


def apply_slide_data(slide, data: Dict[str, Any], *, creating: bool = False) -> List[str]:
    """
    Copy request data onto a HeroSlide and return the names of the fields
    that changed. On create, missing optional fields take their defaults.
    Reference and parent columns are only written through the slide's
    `target` and `scope`; a type sent without `reference_id` keeps the
    stored reference when the type is unchanged.
    """
    changed: List[str] = []

    for field in TEXT_FIELDS:
        if field in data:
            _set(slide, field, clean_text(field, data[field]), changed)
    for field in BOOL_FIELDS:
        if field in data:
            _set(slide, field, clean_bool(field, data[field]), changed)
        elif creating:
            _set(slide, field, DEFAULTS[field], changed)
    for field in INT_FIELDS:
        if field in data:
            _set(slide, field, clean_int(field, data[field], DEFAULTS[field]), changed)
        elif creating:
            _set(slide, field, DEFAULTS[field], changed)

    if creating or "slide_type" in data or "reference_id" in data:
        current = None if creating else _current(slide, "target")
        target = _target_from(slide, data, current)
        if creating or target != current:
            slide.target = target
            changed.append("target")

    # Any parent column in the payload replaces the whole scope
    if creating or any(column in data for column in SCOPE_COLUMNS.values()):
        current = None if creating else _current(slide, "scope")
        scope = scope_from_columns(
            {column: clean_text(column, data.get(column)) for column in SCOPE_COLUMNS.values()}
        )
        if creating or scope != current:
            slide.scope = scope
            changed.append("scope")

    return changed


def assert_links_exist(slide):
    """Parent, referenced content and background image must be real rows."""
    scope = slide.scope
    parent_model = PARENT_MODELS[scope.column]
    if not db.session.get(parent_model, scope.parent_id):
        raise ValidationFailure(f"Parent {scope.kind.value} not found")

    target = slide.target
    if not target.kind.is_custom:
        found = SqlContentLookup().fetch(target.kind, [target.ref_id])
        if target.ref_id not in found:
            raise ValidationFailure(f"Referenced {target.kind.value} not found")

    if slide.background_image_id and not db.session.get(Image, slide.background_image_id):
        raise ValidationFailure("Background image not found")
