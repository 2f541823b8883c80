from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from sitecms.errors import ValidationFailure
from sitecms.extensions import db
from sitecms.models.hero_section import HeroSection
from sitecms.domain.invariants.hero_section import assert_hero_section
from sitecms.utils.audit import log_action
from sitecms.utils.transaction import transactional
from sitecms.utils.payload import clean_bool, clean_text


def create_hero_section(*, data: Dict[str, Any]) -> HeroSection:
    """
    Create a hero section.

    Edge cases handled:
    - Missing bilingual title or slug
    - Duplicate slug (either language)
    """
    section = HeroSection()
    section.title_en = clean_text("title_en", data.get("title_en"))
    section.title_ar = clean_text("title_ar", data.get("title_ar"))
    section.slug_en = clean_text("slug_en", data.get("slug_en"))
    section.slug_ar = clean_text("slug_ar", data.get("slug_ar"))
    section.is_active = clean_bool("is_active", data.get("is_active", True))

    assert_hero_section(section)

    try:
        with transactional():
            db.session.add(section)
            db.session.flush()  # ensures section.id exists

            log_action(
                action="hero_section.create",
                entity_type="hero_section",
                entity_id=section.id,
                payload={"slug_en": section.slug_en, "slug_ar": section.slug_ar},
            )

        return section

    except IntegrityError as exc:
        raise ValidationFailure("A hero section with this slug already exists") from exc
