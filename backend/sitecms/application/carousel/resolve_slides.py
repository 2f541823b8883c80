"""
Turn stored hero slides into display slides.

Input batches are expected to be pre-filtered to active slides; every
read path in `queries` applies that filter in SQL. Resolution itself has
no side effects apart from the reads done by the lookup.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Optional

from sitecms.domain.display import DisplaySlide, SlideReference
from sitecms.domain.invariants.exceptions import InvariantViolation
from sitecms.domain.slides import SlideTarget, SlideType, parse_slide_type

from .content_lookup import ContentLookup

logger = logging.getLogger(__name__)

_DECODE = object()

References = Mapping[SlideType, Mapping[str, SlideReference]]


def decode_target(slide) -> Optional[SlideTarget]:
    """Slide target, or None (logged) when the row breaks the tag invariant."""
    try:
        return slide.target
    except InvariantViolation as exc:
        logger.warning("Hero slide %s has an invalid reference: %s", slide.id, exc)
        return None


def _display_type(slide) -> SlideType:
    try:
        return parse_slide_type(slide.slide_type)
    except InvariantViolation:
        return SlideType.CUSTOM


def resolve_slide(
    slide,
    references: References,
    target=_DECODE,
) -> DisplaySlide:
    if target is _DECODE:
        target = decode_target(slide)

    reference = None
    if target is not None and not target.kind.is_custom:
        reference = references.get(target.kind, {}).get(target.ref_id)
        if reference is None:
            logger.info(
                "Hero slide %s points at missing %s %s",
                slide.id, target.kind.value, target.ref_id,
            )

    return DisplaySlide(
        id=slide.id,
        slide_type=target.kind if target is not None else _display_type(slide),
        title_en=slide.title_en,
        title_ar=slide.title_ar,
        subtitle_en=slide.subtitle_en,
        subtitle_ar=slide.subtitle_ar,
        cta_enabled=bool(slide.cta_enabled),
        cta_text_en=slide.cta_text_en,
        cta_text_ar=slide.cta_text_ar,
        cta_href=slide.cta_href,
        background_image_url=slide.background_image_url,
        background_color=slide.background_color,
        overlay_opacity=slide.overlay_opacity,
        reference=reference,
        sort_order=slide.sort_order or 0,
    )


def fetch_references(
    targets: Iterable[Optional[SlideTarget]],
    lookup: ContentLookup,
) -> Dict[SlideType, Dict[str, SlideReference]]:
    wanted: Dict[SlideType, List[str]] = defaultdict(list)
    for target in targets:
        if target is None or target.kind.is_custom:
            continue
        if target.ref_id not in wanted[target.kind]:
            wanted[target.kind].append(target.ref_id)

    references: Dict[SlideType, Dict[str, SlideReference]] = {}
    for kind, ids in wanted.items():
        try:
            references[kind] = lookup.fetch(kind, ids)
        except Exception:
            # The slides degrade to their own fields; the batch still renders.
            logger.exception("Lookup of %s references failed", kind.value)
            references[kind] = {}
    return references


def resolve_slides(slides: Iterable, lookup: ContentLookup) -> List[DisplaySlide]:
    """
    Resolve a batch. Output is ordered by ascending sort_order; slides
    with equal sort_order keep their input order.
    """
    ordered = sorted(slides, key=lambda slide: slide.sort_order or 0)
    targets = [decode_target(slide) for slide in ordered]
    references = fetch_references(targets, lookup)

    return [
        resolve_slide(slide, references, target)
        for slide, target in zip(ordered, targets)
    ]
