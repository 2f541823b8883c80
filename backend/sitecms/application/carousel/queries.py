"""
Read side of the hero carousel.

Missing rows come back as None / empty lists; nothing here raises
NotFound. Public display reads only ever see active slides.
"""
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import joinedload

from sitecms.domain.display import DisplaySlide
from sitecms.domain.slides import SCOPE_COLUMNS, ScopeKind
from sitecms.extensions import db
from sitecms.models.hero_section import HeroSection
from sitecms.models.hero_slide import HeroSlide

from .content_lookup import ContentLookup, SqlContentLookup
from .resolve_slides import resolve_slides


def list_hero_sections() -> List[HeroSection]:
    return HeroSection.query.order_by(HeroSection.title_en).all()


def get_hero_section(section_id: str) -> Optional[HeroSection]:
    return db.session.get(HeroSection, section_id)


def get_hero_section_by_slug(slug: str) -> Optional[HeroSection]:
    """Match either language's slug."""
    return HeroSection.query.filter(
        or_(HeroSection.slug_en == slug, HeroSection.slug_ar == slug)
    ).first()


def _slides_query():
    return HeroSlide.query.options(joinedload(HeroSlide.background_image)).order_by(
        HeroSlide.sort_order.asc(), HeroSlide.created_at.asc(), HeroSlide.id.asc()
    )


def get_hero_slide(slide_id: str) -> Optional[HeroSlide]:
    return _slides_query().filter(HeroSlide.id == slide_id).first()


def list_hero_slides(
    scope: Optional[ScopeKind] = None,
    parent_id: Optional[str] = None,
    *,
    active_only: bool = False,
) -> List[HeroSlide]:
    query = _slides_query()
    if scope is not None:
        query = query.filter(getattr(HeroSlide, SCOPE_COLUMNS[scope]) == parent_id)
    if active_only:
        query = query.filter(HeroSlide.is_active.is_(True))
    return query.all()


def display_slides(
    scope: ScopeKind,
    parent_id: str,
    lookup: Optional[ContentLookup] = None,
) -> List[DisplaySlide]:
    """
    Active slides of one parent, resolved for the carousel.

    Two sequential stages: the slide rows, then one batched lookup per
    referenced content kind.
    """
    slides = list_hero_slides(scope, parent_id, active_only=True)
    return resolve_slides(slides, lookup or SqlContentLookup())


def display_slides_for_section(
    slug: str,
    lookup: Optional[ContentLookup] = None,
) -> Optional[List[DisplaySlide]]:
    """Slides for an active section, or None when there is no such section."""
    section = get_hero_section_by_slug(slug)
    if section is None or not section.is_active:
        return None
    return display_slides(ScopeKind.HERO_SECTION, section.id, lookup)
