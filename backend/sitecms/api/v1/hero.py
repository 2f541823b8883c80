# sitecms/api/v1/hero.py
from flask import request, jsonify
from sitecms.application.carousel.content_lookup import available_content
from sitecms.application.carousel.create_hero_section import create_hero_section
from sitecms.application.carousel.create_hero_slide import create_hero_slide
from sitecms.application.carousel.delete_hero_section import delete_hero_section
from sitecms.application.carousel.delete_hero_slide import delete_hero_slide
from sitecms.application.carousel.queries import (
    display_slides,
    display_slides_for_section,
    get_hero_section,
    get_hero_slide,
    list_hero_sections,
    list_hero_slides,
)
from sitecms.application.carousel.reorder_hero_slides import reorder_hero_slides
from sitecms.application.carousel.update_hero_section import update_hero_section
from sitecms.application.carousel.update_hero_slide import update_hero_slide
from sitecms.domain.slides import ScopeKind, SlideScope
from sitecms.errors import NotFound, ValidationFailure
from sitecms.normalizers.display_slide import normalize_display_slide
from sitecms.normalizers.hero_section import normalize_hero_section
from sitecms.normalizers.hero_slide import normalize_hero_slide
from sitecms.utils.decorators import permission_required
from sitecms.utils.optimistic_lock import enforce_optimistic_lock
from . import v1_bp


def _display_response(slides):
    locale = request.args.get("locale")
    return jsonify({
        "success": True,
        "slides": [normalize_display_slide(s, locale=locale) for s in slides],
    }), 200


# ------------------------
# Public carousel reads
# ------------------------

@v1_bp.route("/hero/sections/<slug>/display", methods=["GET"])
def section_display(slug):
    slides = display_slides_for_section(slug)
    if slides is None:
        raise NotFound("Hero section not found")
    return _display_response(slides)


@v1_bp.route("/services/import/<service_id>/slides/display", methods=["GET"])
def import_service_display(service_id):
    return _display_response(display_slides(ScopeKind.IMPORT_SERVICE, service_id))


@v1_bp.route("/services/contracting/<service_id>/slides/display", methods=["GET"])
def contracting_service_display(service_id):
    return _display_response(display_slides(ScopeKind.CONTRACTING_SERVICE, service_id))


# ------------------------
# Sections
# ------------------------

@v1_bp.route("/hero/sections", methods=["GET"])
@permission_required("hero.view")
def list_sections():
    return jsonify({
        "success": True,
        "sections": [normalize_hero_section(s) for s in list_hero_sections()],
    }), 200


@v1_bp.route("/hero/sections", methods=["POST"])
@permission_required("hero.create")
def create_section():
    section = create_hero_section(data=request.get_json(silent=True) or {})
    return jsonify({
        "success": True,
        "message": "Hero section created",
        "id": section.id,
    }), 201


@v1_bp.route("/hero/sections/<section_id>", methods=["GET"])
@permission_required("hero.view")
def get_section(section_id):
    section = get_hero_section(section_id)
    if not section:
        raise NotFound("Hero section not found")
    return jsonify({
        "success": True,
        "section": normalize_hero_section(section, include_slides=True),
    }), 200


@v1_bp.route("/hero/sections/<section_id>", methods=["PUT"])
@permission_required("hero.edit")
def update_section(section_id):
    section = get_hero_section(section_id)
    if not section:
        raise NotFound("Hero section not found")

    enforce_optimistic_lock(section)

    update_hero_section(section_id=section_id, data=request.get_json(silent=True) or {})
    return jsonify({"success": True, "message": "Hero section updated"}), 200


@v1_bp.route("/hero/sections/<section_id>", methods=["DELETE"])
@permission_required("hero.delete")
def delete_section(section_id):
    delete_hero_section(section_id=section_id)
    return jsonify({"success": True, "message": "Hero section deleted"}), 200


# ------------------------
# Slides
# ------------------------

@v1_bp.route("/hero/slides", methods=["GET"])
@permission_required("hero.view")
def list_slides():
    scope = request.args.get("scope")
    parent_id = request.args.get("parent_id")

    if scope:
        if not parent_id:
            raise ValidationFailure("parent_id is required with scope")
        scope = SlideScope.of(scope, parent_id).kind

    slides = list_hero_slides(scope or None, parent_id)
    return jsonify({
        "success": True,
        "slides": [normalize_hero_slide(s) for s in slides],
    }), 200


@v1_bp.route("/hero/slides", methods=["POST"])
@permission_required("hero.create")
def create_slide():
    slide = create_hero_slide(data=request.get_json(silent=True) or {})
    return jsonify({
        "success": True,
        "message": "Hero slide created",
        "id": slide.id,
    }), 201


@v1_bp.route("/hero/slides/<slide_id>", methods=["GET"])
@permission_required("hero.view")
def get_slide(slide_id):
    slide = get_hero_slide(slide_id)
    if not slide:
        raise NotFound("Hero slide not found")
    return jsonify({"success": True, "slide": normalize_hero_slide(slide)}), 200


@v1_bp.route("/hero/slides/<slide_id>", methods=["PUT"])
@permission_required("hero.edit")
def update_slide(slide_id):
    slide = get_hero_slide(slide_id)
    if not slide:
        raise NotFound("Hero slide not found")

    enforce_optimistic_lock(slide)

    update_hero_slide(slide_id=slide_id, data=request.get_json(silent=True) or {})
    return jsonify({"success": True, "message": "Hero slide updated"}), 200


@v1_bp.route("/hero/slides/<slide_id>", methods=["DELETE"])
@permission_required("hero.delete")
def delete_slide(slide_id):
    delete_hero_slide(slide_id=slide_id)
    return jsonify({"success": True, "message": "Hero slide deleted"}), 200


@v1_bp.route("/hero/slides/reorder", methods=["POST"])
@permission_required("hero.edit")
def reorder_slides():
    data = request.get_json(silent=True) or {}
    slide_ids = data.get("slide_ids")
    if not isinstance(slide_ids, list):
        raise ValidationFailure("slide_ids must be a list")

    reorder_hero_slides(slide_ids=slide_ids)
    return jsonify({"success": True, "message": "Slides reordered"}), 200


@v1_bp.route("/hero/available-content", methods=["GET"])
@permission_required("hero.view")
def slide_content_options():
    return jsonify({"success": True, "content": available_content()}), 200
