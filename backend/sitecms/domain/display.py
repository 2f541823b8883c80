from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .slides import SlideType


@dataclass(frozen=True)
class SlideReference:
    """Read-time snapshot of the content a slide points at."""

    id: str
    title_en: str
    title_ar: str
    slug_en: str
    slug_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    image_url: Optional[str] = None
    # article
    category_name: Optional[str] = None
    published_at: Optional[datetime] = None
    # product
    product_category_name: Optional[str] = None
    # project
    location_en: Optional[str] = None
    location_ar: Optional[str] = None
    year: Optional[int] = None
    project_type_name: Optional[str] = None


@dataclass(frozen=True)
class DisplaySlide:
    id: str
    slide_type: SlideType
    title_en: str
    title_ar: str
    subtitle_en: Optional[str]
    subtitle_ar: Optional[str]
    cta_enabled: bool
    cta_text_en: Optional[str]
    cta_text_ar: Optional[str]
    cta_href: Optional[str]
    background_image_url: Optional[str]
    background_color: Optional[str]
    overlay_opacity: Optional[int]
    reference: Optional[SlideReference]
    sort_order: int


ROUTE_PREFIXES = {
    SlideType.ARTICLE: "articles",
    SlideType.PRODUCT: "products",
    SlideType.MAIN_SERVICE: "services",
    SlideType.IMPORT_SERVICE: "import",
    SlideType.CONTRACTING_SERVICE: "contracting",
    SlideType.PROJECT: "projects",
}

DEFAULT_CTA_TEXT = {
    SlideType.ARTICLE: ("Read Article", "اقرأ المقال"),
    SlideType.PRODUCT: ("View Product", "اكتشف المنتج"),
    SlideType.MAIN_SERVICE: ("Learn More", "اعرف المزيد"),
    SlideType.IMPORT_SERVICE: ("Learn More", "اعرف المزيد"),
    SlideType.CONTRACTING_SERVICE: ("Learn More", "اعرف المزيد"),
    SlideType.PROJECT: ("View Project", "عرض المشروع"),
}

DEFAULT_OVERLAY = {
    SlideType.ARTICLE: 60,
    SlideType.PRODUCT: 55,
    SlideType.MAIN_SERVICE: 55,
    SlideType.IMPORT_SERVICE: 55,
    SlideType.CONTRACTING_SERVICE: 55,
    SlideType.PROJECT: 50,
    SlideType.CUSTOM: 50,
}


def _pick(obj, field: str, locale: str):
    return getattr(obj, f"{field}_ar" if locale == "ar" else f"{field}_en")


def display_title(slide: DisplaySlide, locale: str) -> str:
    source = slide.reference or slide
    return _pick(source, "title", locale)


def display_subtitle(slide: DisplaySlide, locale: str) -> Optional[str]:
    ref = slide.reference
    if ref and (ref.description_en or ref.description_ar):
        return _pick(ref, "description", locale)
    return _pick(slide, "subtitle", locale)


def display_image_url(slide: DisplaySlide) -> Optional[str]:
    if slide.reference and slide.reference.image_url:
        return slide.reference.image_url
    return slide.background_image_url


def display_href(slide: DisplaySlide, locale: str) -> Optional[str]:
    if slide.reference:
        prefix = ROUTE_PREFIXES[slide.slide_type]
        return f"/{locale}/{prefix}/{_pick(slide.reference, 'slug', locale)}"
    return slide.cta_href


def display_cta(slide: DisplaySlide, locale: str) -> dict:
    text = _pick(slide, "cta_text", locale)
    if slide.reference:
        fallback_en, fallback_ar = DEFAULT_CTA_TEXT[slide.slide_type]
        return {
            "enabled": True,
            "text": text or (fallback_ar if locale == "ar" else fallback_en),
            "href": display_href(slide, locale),
        }
    return {
        "enabled": bool(slide.cta_enabled and slide.cta_href),
        "text": text,
        "href": slide.cta_href,
    }


def display_block(slide: DisplaySlide, locale: str) -> dict:
    """Everything the carousel needs for one slide in one locale."""
    overlay = slide.overlay_opacity
    if overlay is None:
        overlay = DEFAULT_OVERLAY[slide.slide_type]
    return {
        "title": display_title(slide, locale),
        "subtitle": display_subtitle(slide, locale),
        "image_url": display_image_url(slide),
        "background_color": slide.background_color,
        "overlay_opacity": overlay,
        "cta": display_cta(slide, locale),
    }
