from .exceptions import InvariantViolation
from .slide import assert_bilingual


def assert_hero_section(section):
    assert_bilingual(section, "title")
    assert_bilingual(section, "slug")

    if section.slug_en.strip() != section.slug_en or " " in section.slug_en:
        raise InvariantViolation("slug_en must not contain spaces.")
