from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from sitecms.errors import NotFound, ValidationFailure
from sitecms.extensions import db
from sitecms.models.hero_section import HeroSection
from sitecms.domain.invariants.hero_section import assert_hero_section
from sitecms.utils.audit import log_action
from sitecms.utils.transaction import transactional
from sitecms.utils.payload import clean_bool, clean_text


ALLOWED_UPDATE_FIELDS = ("title_en", "title_ar", "slug_en", "slug_ar", "is_active")


def update_hero_section(*, section_id: str, data: Dict[str, Any]) -> HeroSection:
    section = db.session.get(HeroSection, section_id)
    if not section:
        raise NotFound("Hero section not found")

    changed_fields: list[str] = []

    try:
        with transactional():
            for field in ALLOWED_UPDATE_FIELDS:
                if field not in data:
                    continue
                if field == "is_active":
                    value = clean_bool(field, data[field])
                else:
                    value = clean_text(field, data[field])
                if getattr(section, field) != value:
                    setattr(section, field, value)
                    changed_fields.append(field)

            assert_hero_section(section)

            if changed_fields:
                log_action(
                    action="hero_section.update",
                    entity_type="hero_section",
                    entity_id=section.id,
                    payload={"fields": changed_fields},
                )
    except IntegrityError as exc:
        raise ValidationFailure("A hero section with this slug already exists") from exc

    return section
