from sitecms.errors import NotFound
from sitecms.extensions import db
from sitecms.models.hero_section import HeroSection
from sitecms.models.hero_slide import HeroSlide
from sitecms.utils.audit import log_action
from sitecms.utils.transaction import transactional


def delete_hero_section(*, section_id: str) -> None:
    """
    Delete a section together with its slides.
    """
    section = db.session.get(HeroSection, section_id)
    if not section:
        raise NotFound("Hero section not found")

    with transactional():
        slide_count = HeroSlide.query.filter_by(hero_section_id=section.id).count()

        # ORM cascade removes the slides; the FK cascade covers raw deletes
        db.session.delete(section)

        log_action(
            action="hero_section.delete",
            entity_type="hero_section",
            entity_id=section_id,
            payload={"slides_deleted": slide_count},
        )
