import logging

from sqlalchemy import or_

from sitecms.models.hero_section import HeroSection
from sitecms.extensions import db
from sitecms.utils.transaction import transactional

logger = logging.getLogger(__name__)

HOMEPAGE_SECTION = {
    "title_en": "Homepage",
    "title_ar": "الصفحة الرئيسية",
    "slug_en": "homepage",
    "slug_ar": "الرئيسية",
    "is_active": True,
}


def seed_homepage() -> int:
    # Either slug is unique on its own
    existing = HeroSection.query.filter(
        or_(
            HeroSection.slug_en == HOMEPAGE_SECTION["slug_en"],
            HeroSection.slug_ar == HOMEPAGE_SECTION["slug_ar"],
        )
    ).first()
    if existing:
        if existing.slug_en != HOMEPAGE_SECTION["slug_en"]:
            logger.warning(
                "Hero section %s already uses slug %s, homepage not seeded",
                existing.slug_en, HOMEPAGE_SECTION["slug_ar"],
            )
        return 0

    with transactional():
        db.session.add(HeroSection(**HOMEPAGE_SECTION))
    logger.info("Hero section seeded: %s", HOMEPAGE_SECTION["slug_en"])
    return 1
