from sitecms.errors import NotFound
from sitecms.extensions import db
from sitecms.models.hero_slide import HeroSlide
from sitecms.utils.audit import log_action
from sitecms.utils.transaction import transactional


def delete_hero_slide(*, slide_id: str) -> None:
    slide = db.session.get(HeroSlide, slide_id)
    if not slide:
        raise NotFound("Hero slide not found")

    with transactional():
        db.session.delete(slide)

        log_action(
            action="hero_slide.delete",
            entity_type="hero_slide",
            entity_id=slide_id,
            payload={},
        )
