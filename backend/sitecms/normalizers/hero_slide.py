from sitecms.domain.slides import REFERENCE_COLUMNS, SCOPE_COLUMNS, parse_slide_type
from sitecms.domain.invariants.exceptions import InvariantViolation


def _reference_id(slide):
    try:
        column = REFERENCE_COLUMNS.get(parse_slide_type(slide.slide_type))
    except InvariantViolation:
        return None
    return getattr(slide, column) if column else None


def normalize_hero_slide(slide):
    """Dashboard view of a stored slide (raw columns, no resolution)."""
    data = {
        "id": slide.id,
        "title_en": slide.title_en,
        "title_ar": slide.title_ar,
        "subtitle_en": slide.subtitle_en,
        "subtitle_ar": slide.subtitle_ar,
        "slide_type": slide.slide_type,
        "reference_id": _reference_id(slide),
        "cta_enabled": slide.cta_enabled,
        "cta_text_en": slide.cta_text_en,
        "cta_text_ar": slide.cta_text_ar,
        "cta_href": slide.cta_href,
        "background_image_id": slide.background_image_id,
        "background_image_url": slide.background_image_url,
        "background_color": slide.background_color,
        "overlay_opacity": slide.overlay_opacity,
        "is_active": slide.is_active,
        "sort_order": slide.sort_order,
        "created_at": slide.created_at.isoformat() if slide.created_at else None,
        "updated_at": slide.updated_at.isoformat() if slide.updated_at else None,
    }

    for column in SCOPE_COLUMNS.values():
        data[column] = getattr(slide, column)

    return data
