import re

from .exceptions import InvariantViolation

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def assert_bilingual(entity, field):
    for locale in ("en", "ar"):
        value = getattr(entity, f"{field}_{locale}", None)
        if not value or not str(value).strip():
            raise InvariantViolation(f"{field}_{locale} is required.")


def assert_slide_background(slide):
    opacity = slide.overlay_opacity
    if opacity is not None and not 0 <= opacity <= 100:
        raise InvariantViolation(
            f"overlay_opacity must be between 0 and 100, got {opacity}"
        )

    if slide.background_color and not HEX_COLOR.match(slide.background_color):
        raise InvariantViolation(
            f"background_color must be a hex color, got {slide.background_color!r}"
        )


def assert_slide_cta(slide):
    if slide.cta_enabled and not slide.cta_href:
        raise InvariantViolation("Enabled CTA must have cta_href set.")


def assert_slide(slide):
    assert_bilingual(slide, "title")
    assert_slide_background(slide)
    assert_slide_cta(slide)

    # Decoding raises when the tag and the reference/parent columns disagree.
    slide.target
    slide.scope
