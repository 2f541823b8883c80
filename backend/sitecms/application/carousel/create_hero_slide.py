from typing import Any, Dict
from sitecms.extensions import db
from sitecms.models.hero_slide import HeroSlide
from sitecms.domain.invariants.slide import assert_slide
from sitecms.utils.audit import log_action
from sitecms.utils.transaction import transactional
from .slide_payload import apply_slide_data, assert_links_exist


def create_hero_slide(*, data: Dict[str, Any]) -> HeroSlide:
    """
    Create a slide under exactly one parent (hero section, import service
    or contracting service).

    Edge cases handled:
    - Missing bilingual title
    - Unknown slide type, or reference missing for a referencing type
    - Zero or several parents
    - Parent, referenced content or background image that does not exist
    """
    slide = HeroSlide()
    apply_slide_data(slide, data, creating=True)

    assert_slide(slide)
    assert_links_exist(slide)

    with transactional():
        db.session.add(slide)
        db.session.flush()

        log_action(
            action="hero_slide.create",
            entity_type="hero_slide",
            entity_id=slide.id,
            payload={
                "slide_type": slide.slide_type,
                "scope": slide.scope.kind.value,
                "parent_id": slide.scope.parent_id,
            },
        )

    return slide
