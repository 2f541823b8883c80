from typing import Any, Dict
from sitecms.errors import NotFound, ValidationFailure
from sitecms.extensions import db
from sitecms.models.hero_slide import HeroSlide
from sitecms.domain.invariants.slide import assert_slide
from sitecms.utils.audit import log_action
from sitecms.utils.transaction import transactional
from .slide_payload import apply_slide_data, assert_links_exist


def update_hero_slide(*, slide_id: str, data: Dict[str, Any]) -> HeroSlide:
    """
    Update a slide.

    Design rules:
    - Only provided fields change
    - No silent no-op updates
    - Invariants always revalidated
    """
    slide = db.session.get(HeroSlide, slide_id)
    if not slide:
        raise NotFound("Hero slide not found")

    with transactional():
        changed_fields = apply_slide_data(slide, data)

        if not changed_fields:
            raise ValidationFailure("No valid fields provided for update")

        assert_slide(slide)
        assert_links_exist(slide)

        log_action(
            action="hero_slide.update",
            entity_type="hero_slide",
            entity_id=slide.id,
            payload={"fields": changed_fields},
        )

    return slide
