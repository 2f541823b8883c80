from typing import List
from sitecms.errors import ValidationFailure
from sitecms.models.hero_slide import HeroSlide
from sitecms.utils.audit import log_action
from sitecms.utils.order import apply_order
from sitecms.utils.transaction import transactional


def reorder_hero_slides(*, slide_ids: List[str]) -> None:
    """
    Give each listed slide its position in the list as sort_order.
    """
    if not slide_ids or len(set(slide_ids)) != len(slide_ids):
        raise ValidationFailure("slide_ids must be a non-empty list of unique ids")

    slides = HeroSlide.query.filter(HeroSlide.id.in_(slide_ids)).all()
    missing = set(slide_ids) - {slide.id for slide in slides}
    if missing:
        raise ValidationFailure(f"Unknown slide ids: {sorted(missing)}")

    with transactional():
        apply_order(slides, slide_ids)

        log_action(
            action="hero_slide.reorder",
            entity_type="hero_slide",
            entity_id=slide_ids[0],
            payload={"slide_ids": slide_ids},
        )
