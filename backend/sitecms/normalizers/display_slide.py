from dataclasses import asdict

from sitecms.domain.display import display_block

LOCALES = ("en", "ar")


def normalize_reference(reference):
    if reference is None:
        return None
    data = asdict(reference)
    if reference.published_at is not None:
        data["published_at"] = reference.published_at.isoformat()
    return data


def normalize_display_slide(slide, locale=None):
    """
    Public carousel payload. Carries the slide's own fields, the resolved
    reference, and the ready-to-render block for one locale (or both).
    """
    data = {
        "id": slide.id,
        "slide_type": slide.slide_type.value,
        "title_en": slide.title_en,
        "title_ar": slide.title_ar,
        "subtitle_en": slide.subtitle_en,
        "subtitle_ar": slide.subtitle_ar,
        "cta_enabled": slide.cta_enabled,
        "cta_text_en": slide.cta_text_en,
        "cta_text_ar": slide.cta_text_ar,
        "cta_href": slide.cta_href,
        "background_image_url": slide.background_image_url,
        "background_color": slide.background_color,
        "overlay_opacity": slide.overlay_opacity,
        "reference": normalize_reference(slide.reference),
        "sort_order": slide.sort_order,
    }

    locales = (locale,) if locale in LOCALES else LOCALES
    data["display"] = {loc: display_block(slide, loc) for loc in locales}

    return data
