"""
HTTP tests for the hero carousel: public display reads and dashboard CRUD.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from sitecms.extensions import db
from sitecms.models import AuditLog, Article, HeroSection, HeroSlide, ImportService, Project


API = "/api/v1"


class TestSectionDisplay:
    """GET /hero/sections/<slug>/display"""

    def test_resolves_slides_in_order(self, client, content, section, make_slide):
        make_slide(hero_section_id=section, sort_order=2, title_en="Custom",
                   cta_enabled=True, cta_href="/contact")
        make_slide(hero_section_id=section, sort_order=1, slide_type="project",
                   project_id=content["project"], title_en="Featured")

        res = client.get(f"{API}/hero/sections/homepage/display")
        assert res.status_code == 200

        slides = res.get_json()["slides"]
        assert [s["title_en"] for s in slides] == ["Featured", "Custom"]

        project = slides[0]
        assert project["slide_type"] == "project"
        assert project["reference"]["title_en"] == "Tower A"
        assert project["reference"]["location_en"] == "Riyadh"
        assert project["reference"]["project_type_name"] == "Residential"
        assert project["display"]["en"]["title"] == "Tower A"
        assert project["display"]["ar"]["title"] == "البرج أ"
        assert project["display"]["en"]["cta"]["href"] == "/en/projects/tower-a"
        assert project["display"]["en"]["image_url"] == "https://cdn.test/tower.jpg"

        custom = slides[1]
        assert custom["reference"] is None
        assert custom["display"]["en"]["title"] == "Custom"
        assert custom["display"]["en"]["cta"] == {"enabled": True, "text": None, "href": "/contact"}

    def test_arabic_slug_and_locale_filter(self, client, section, make_slide):
        make_slide(hero_section_id=section)

        res = client.get(f"{API}/hero/sections/الرئيسية/display?locale=ar")
        assert res.status_code == 200
        display = res.get_json()["slides"][0]["display"]
        assert list(display) == ["ar"]

    def test_deleted_reference_degrades(self, app, client, content, section, make_slide):
        slide_id = make_slide(hero_section_id=section, slide_type="article",
                              article_id=content["article"], title_en="Old news")
        with app.app_context():
            db.session.delete(db.session.get(Article, content["article"]))
            db.session.commit()
            assert db.session.get(HeroSlide, slide_id).article_id is None

        slides = client.get(f"{API}/hero/sections/homepage/display").get_json()["slides"]
        assert len(slides) == 1
        assert slides[0]["reference"] is None
        assert slides[0]["display"]["en"]["title"] == "Old news"

    def test_deleted_project_clears_reference(self, app, client, content, section, make_slide):
        slide_id = make_slide(hero_section_id=section, slide_type="project",
                              project_id=content["project"], title_en="Featured")
        with app.app_context():
            db.session.delete(db.session.get(Project, content["project"]))
            db.session.commit()
            slide = db.session.get(HeroSlide, slide_id)
            assert slide.project_id is None
            assert slide.hero_section_id == section

        slides = client.get(f"{API}/hero/sections/homepage/display").get_json()["slides"]
        assert [s["title_en"] for s in slides] == ["Featured"]
        assert slides[0]["reference"] is None

    def test_dangling_reference_is_rejected_by_store(self, app, section):
        with app.app_context():
            db.session.add(HeroSlide(title_en="T", title_ar="ع", slide_type="article",
                                     hero_section_id=section, article_id="no-such-article"))
            with pytest.raises(IntegrityError):
                db.session.commit()
            db.session.rollback()

    def test_malformed_row_is_not_dropped(self, client, section, make_slide):
        make_slide(hero_section_id=section, slide_type="project", title_en="Broken")

        slides = client.get(f"{API}/hero/sections/homepage/display").get_json()["slides"]
        assert [s["title_en"] for s in slides] == ["Broken"]
        assert slides[0]["reference"] is None

    def test_inactive_slides_are_hidden(self, client, section, make_slide):
        make_slide(hero_section_id=section, title_en="Shown")
        make_slide(hero_section_id=section, title_en="Hidden", is_active=False)

        slides = client.get(f"{API}/hero/sections/homepage/display").get_json()["slides"]
        assert [s["title_en"] for s in slides] == ["Shown"]

    def test_unknown_section(self, client):
        res = client.get(f"{API}/hero/sections/nowhere/display")
        assert res.status_code == 404
        assert res.get_json()["success"] is False

    def test_inactive_section(self, client, create):
        create(HeroSection, title_en="Old", title_ar="قديم", slug_en="old",
               slug_ar="قديم", is_active=False)
        assert client.get(f"{API}/hero/sections/old/display").status_code == 404


class TestServiceDisplay:
    """Service pages carry their own carousels."""

    def test_import_service_slides(self, client, content, section, make_slide):
        make_slide(parent_import_service_id=content["import_service"], title_en="Import")
        make_slide(hero_section_id=section, title_en="Homepage")

        res = client.get(f"{API}/services/import/{content['import_service']}/slides/display")
        assert [s["title_en"] for s in res.get_json()["slides"]] == ["Import"]

    def test_deleting_service_removes_its_slides(self, app, content, section, make_slide):
        owned = make_slide(parent_import_service_id=content["import_service"], title_en="Import")
        linking = make_slide(hero_section_id=section, slide_type="import_service",
                             import_service_id=content["import_service"])

        with app.app_context():
            db.session.delete(db.session.get(ImportService, content["import_service"]))
            db.session.commit()

            assert db.session.get(HeroSlide, owned) is None
            assert db.session.get(HeroSlide, linking).import_service_id is None

    def test_contracting_service_without_slides(self, client, content):
        res = client.get(
            f"{API}/services/contracting/{content['contracting_service']}/slides/display"
        )
        assert res.status_code == 200
        assert res.get_json()["slides"] == []


class TestDashboardAccess:
    """Dashboard routes go through the access gate."""

    def test_anonymous_gets_401(self, client, seeded):
        res = client.get(f"{API}/hero/sections")
        assert res.status_code == 401
        assert res.get_json()["redirect"] == "/sign-in"

    def test_account_without_roles_gets_403(self, client, make_account, auth_headers):
        make_account("u-none")
        res = client.get(f"{API}/hero/sections", headers=auth_headers("u-none"))
        assert res.status_code == 403
        assert res.get_json()["redirect"] == "/access-denied"

    def test_viewer_cannot_create(self, client, make_account, auth_headers):
        make_account("u-viewer", "role_viewer")
        headers = auth_headers("u-viewer")

        assert client.get(f"{API}/hero/sections", headers=headers).status_code == 200
        res = client.post(f"{API}/hero/sections", json={}, headers=headers)
        assert res.status_code == 403
        assert res.get_json()["permission"] == "hero.create"

    def test_editor_cannot_delete(self, client, section, make_account, auth_headers):
        make_account("u-editor", "role_editor")
        res = client.delete(f"{API}/hero/sections/{section}", headers=auth_headers("u-editor"))
        assert res.status_code == 403

    def test_garbage_token(self, client, seeded):
        res = client.get(f"{API}/hero/sections", headers={"Authorization": "Bearer nope"})
        assert res.status_code == 401


class TestSectionCrud:
    """Hero section management."""

    def test_create_and_get(self, client, admin_headers):
        res = client.post(f"{API}/hero/sections", headers=admin_headers, json={
            "title_en": "Projects",
            "title_ar": "المشاريع",
            "slug_en": "projects",
            "slug_ar": "المشاريع",
        })
        assert res.status_code == 201
        section_id = res.get_json()["id"]

        body = client.get(f"{API}/hero/sections/{section_id}", headers=admin_headers).get_json()
        assert body["section"]["slug_en"] == "projects"
        assert body["section"]["slides"] == []

    def test_create_requires_both_languages(self, client, admin_headers):
        res = client.post(f"{API}/hero/sections", headers=admin_headers, json={
            "title_en": "Projects",
            "slug_en": "projects",
            "slug_ar": "المشاريع",
        })
        assert res.status_code == 400
        assert res.get_json()["success"] is False

    def test_duplicate_slug(self, client, section, admin_headers):
        res = client.post(f"{API}/hero/sections", headers=admin_headers, json={
            "title_en": "Again",
            "title_ar": "مرة أخرى",
            "slug_en": "homepage",
            "slug_ar": "مكرر",
        })
        assert res.status_code == 400
        assert "slug" in res.get_json()["message"]

    def test_update(self, client, section, admin_headers):
        res = client.put(f"{API}/hero/sections/{section}", headers=admin_headers,
                         json={"title_en": "Home"})
        assert res.status_code == 200

        body = client.get(f"{API}/hero/sections/{section}", headers=admin_headers).get_json()
        assert body["section"]["title_en"] == "Home"

    def test_update_reads_string_booleans(self, app, client, section, admin_headers):
        res = client.put(f"{API}/hero/sections/{section}", headers=admin_headers,
                         json={"is_active": "false"})
        assert res.status_code == 200

        with app.app_context():
            assert db.session.get(HeroSection, section).is_active is False

    @pytest.mark.parametrize("payload", [
        {"title_en": 5},
        {"slug_ar": ["الرئيسية"]},
        {"is_active": "maybe"},
    ])
    def test_update_rejects_wrong_types(self, app, client, section, admin_headers, payload):
        res = client.put(f"{API}/hero/sections/{section}", headers=admin_headers, json=payload)
        assert res.status_code == 400
        assert res.get_json()["success"] is False

        with app.app_context():
            stored = db.session.get(HeroSection, section)
            assert stored.title_en == "Homepage"
            assert stored.is_active is True

    def test_create_rejects_non_string_title(self, client, admin_headers):
        res = client.post(f"{API}/hero/sections", headers=admin_headers, json={
            "title_en": 5,
            "title_ar": "المشاريع",
            "slug_en": "projects",
            "slug_ar": "المشاريع",
        })
        assert res.status_code == 400
        assert "title_en" in res.get_json()["message"]

    def test_create_inactive_from_string(self, app, client, admin_headers):
        res = client.post(f"{API}/hero/sections", headers=admin_headers, json={
            "title_en": "Projects",
            "title_ar": "المشاريع",
            "slug_en": "projects",
            "slug_ar": "المشاريع",
            "is_active": "0",
        })
        assert res.status_code == 201
        with app.app_context():
            assert db.session.get(HeroSection, res.get_json()["id"]).is_active is False

    def test_stale_update_is_rejected(self, client, section, admin_headers):
        headers = dict(admin_headers)
        headers["If-Unmodified-Since"] = "Mon, 01 Jan 2001 00:00:00 GMT"

        res = client.put(f"{API}/hero/sections/{section}", headers=headers,
                         json={"title_en": "Home"})
        assert res.status_code == 409

    def test_delete_cascades_to_slides(self, app, client, section, make_slide, admin_headers):
        make_slide(hero_section_id=section)
        make_slide(hero_section_id=section)

        res = client.delete(f"{API}/hero/sections/{section}", headers=admin_headers)
        assert res.status_code == 200

        with app.app_context():
            assert HeroSlide.query.count() == 0
            entry = AuditLog.query.filter_by(action="hero_section.delete").one()
            assert entry.payload == {"slides_deleted": 2}

    def test_delete_unknown(self, client, admin_headers):
        res = client.delete(f"{API}/hero/sections/missing", headers=admin_headers)
        assert res.status_code == 404


class TestSlideCrud:
    """Hero slide management."""

    def test_create_project_slide(self, app, client, content, section, admin_headers):
        res = client.post(f"{API}/hero/slides", headers=admin_headers, json={
            "hero_section_id": section,
            "title_en": "Featured",
            "title_ar": "مميز",
            "slide_type": "project",
            "reference_id": content["project"],
        })
        assert res.status_code == 201

        slide_id = res.get_json()["id"]
        slide = client.get(f"{API}/hero/slides/{slide_id}", headers=admin_headers).get_json()["slide"]
        assert slide["slide_type"] == "project"
        assert slide["reference_id"] == content["project"]
        assert slide["overlay_opacity"] == 0
        assert slide["is_active"] is True

        with app.app_context():
            entry = AuditLog.query.filter_by(action="hero_slide.create").one()
            assert entry.entity_id == slide_id
            assert entry.actor_id is not None

    @pytest.mark.parametrize("payload, message", [
        ({"slide_type": "project"}, "project"),
        ({"slide_type": "custom", "reference_id": "x"}, "Custom"),
        ({"slide_type": "video"}, "video"),
        ({"overlay_opacity": 150}, "overlay"),
        ({"background_color": "red"}, "color"),
        ({"cta_enabled": True}, "cta_href"),
    ])
    def test_create_rejects_invalid(self, client, section, admin_headers, payload, message):
        data = {"hero_section_id": section, "title_en": "T", "title_ar": "ع"}
        data.update(payload)

        res = client.post(f"{API}/hero/slides", headers=admin_headers, json=data)
        assert res.status_code == 400
        assert message.lower() in res.get_json()["message"].lower()

    def test_create_rejects_unknown_reference(self, client, section, admin_headers):
        res = client.post(f"{API}/hero/slides", headers=admin_headers, json={
            "hero_section_id": section,
            "title_en": "T",
            "title_ar": "ع",
            "slide_type": "article",
            "reference_id": "missing",
        })
        assert res.status_code == 400

    def test_create_requires_one_parent(self, client, content, section, admin_headers):
        base = {"title_en": "T", "title_ar": "ع"}

        res = client.post(f"{API}/hero/slides", headers=admin_headers, json=base)
        assert res.status_code == 400

        both = dict(base, hero_section_id=section,
                    parent_import_service_id=content["import_service"])
        res = client.post(f"{API}/hero/slides", headers=admin_headers, json=both)
        assert res.status_code == 400

    def test_update_switches_to_custom(self, app, client, content, section, make_slide, admin_headers):
        slide_id = make_slide(hero_section_id=section, slide_type="article",
                              article_id=content["article"])

        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers,
                         json={"slide_type": "custom"})
        assert res.status_code == 200

        with app.app_context():
            slide = db.session.get(HeroSlide, slide_id)
            assert slide.slide_type == "custom"
            assert slide.article_id is None

    def test_empty_update_is_rejected(self, client, section, make_slide, admin_headers):
        slide_id = make_slide(hero_section_id=section)
        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers, json={})
        assert res.status_code == 400

    def test_update_type_keeps_stored_reference(
        self, app, client, content, section, make_slide, admin_headers
    ):
        slide_id = make_slide(hero_section_id=section, slide_type="project",
                              project_id=content["project"])

        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers,
                         json={"slide_type": "project", "is_active": False})
        assert res.status_code == 200

        with app.app_context():
            slide = db.session.get(HeroSlide, slide_id)
            assert slide.project_id == content["project"]
            assert slide.is_active is False
            entry = AuditLog.query.filter_by(action="hero_slide.update").one()
            assert entry.payload == {"fields": ["is_active"]}

    def test_changing_type_needs_new_reference(
        self, client, content, section, make_slide, admin_headers
    ):
        slide_id = make_slide(hero_section_id=section, slide_type="project",
                              project_id=content["project"])

        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers,
                         json={"slide_type": "article"})
        assert res.status_code == 400

        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers,
                         json={"slide_type": "article", "reference_id": content["article"]})
        assert res.status_code == 200

    @pytest.mark.parametrize("payload", [
        {"slide_type": "custom"},
        {"slide_type": "custom", "reference_id": None},
        {"title_en": "Slide", "sort_order": 0},
    ])
    def test_unchanged_values_are_not_an_update(
        self, app, client, section, make_slide, admin_headers, payload
    ):
        slide_id = make_slide(hero_section_id=section)

        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers, json=payload)
        assert res.status_code == 400
        assert res.get_json()["message"] == "No valid fields provided for update"

        with app.app_context():
            assert AuditLog.query.filter_by(action="hero_slide.update").count() == 0

    def test_same_parent_is_not_an_update(self, client, section, make_slide, admin_headers):
        slide_id = make_slide(hero_section_id=section)
        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers,
                         json={"hero_section_id": section})
        assert res.status_code == 400

    def test_moving_scope_is_recorded(self, app, client, content, section, make_slide, admin_headers):
        slide_id = make_slide(hero_section_id=section)

        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers,
                         json={"parent_import_service_id": content["import_service"]})
        assert res.status_code == 200

        with app.app_context():
            slide = db.session.get(HeroSlide, slide_id)
            assert slide.hero_section_id is None
            assert slide.parent_import_service_id == content["import_service"]
            entry = AuditLog.query.filter_by(action="hero_slide.update").one()
            assert entry.payload == {"fields": ["scope"]}

    @pytest.mark.parametrize("value", [50.7, "fifty", True, [50]])
    def test_overlay_must_be_whole_number(self, client, section, make_slide, admin_headers, value):
        slide_id = make_slide(hero_section_id=section)
        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers,
                         json={"overlay_opacity": value})
        assert res.status_code == 400
        assert "overlay_opacity" in res.get_json()["message"]

    @pytest.mark.parametrize("value, stored", [(50.0, 50), ("40", 40)])
    def test_overlay_accepts_integral_values(
        self, app, client, section, make_slide, admin_headers, value, stored
    ):
        slide_id = make_slide(hero_section_id=section)
        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers,
                         json={"overlay_opacity": value})
        assert res.status_code == 200
        with app.app_context():
            assert db.session.get(HeroSlide, slide_id).overlay_opacity == stored

    def test_non_string_title_is_rejected(self, client, section, make_slide, admin_headers):
        slide_id = make_slide(hero_section_id=section)
        res = client.put(f"{API}/hero/slides/{slide_id}", headers=admin_headers,
                         json={"title_en": {"text": "Hi"}})
        assert res.status_code == 400

    def test_delete(self, client, section, make_slide, admin_headers):
        slide_id = make_slide(hero_section_id=section)

        assert client.delete(f"{API}/hero/slides/{slide_id}", headers=admin_headers).status_code == 200
        assert client.get(f"{API}/hero/slides/{slide_id}", headers=admin_headers).status_code == 404

    def test_list_by_scope(self, client, content, section, make_slide, admin_headers):
        make_slide(hero_section_id=section, title_en="Home")
        make_slide(parent_import_service_id=content["import_service"], title_en="Import")

        res = client.get(
            f"{API}/hero/slides?scope=import_service&parent_id={content['import_service']}",
            headers=admin_headers,
        )
        assert [s["title_en"] for s in res.get_json()["slides"]] == ["Import"]

        res = client.get(f"{API}/hero/slides?scope=nowhere&parent_id=x", headers=admin_headers)
        assert res.status_code == 400

    def test_dashboard_list_includes_inactive(self, client, section, make_slide, admin_headers):
        make_slide(hero_section_id=section, is_active=False)
        res = client.get(f"{API}/hero/slides", headers=admin_headers)
        assert len(res.get_json()["slides"]) == 1


class TestReorder:
    """POST /hero/slides/reorder"""

    def test_reorder(self, client, section, make_slide, admin_headers):
        a = make_slide(hero_section_id=section, title_en="A", sort_order=0)
        b = make_slide(hero_section_id=section, title_en="B", sort_order=1)
        c = make_slide(hero_section_id=section, title_en="C", sort_order=2)

        res = client.post(f"{API}/hero/slides/reorder", headers=admin_headers,
                          json={"slide_ids": [c, a, b]})
        assert res.status_code == 200

        slides = client.get(f"{API}/hero/sections/homepage/display").get_json()["slides"]
        assert [s["title_en"] for s in slides] == ["C", "A", "B"]

    @pytest.mark.parametrize("slide_ids", [[], "abc", ["x", "x"], ["unknown"]])
    def test_reorder_rejects(self, client, section, admin_headers, slide_ids):
        res = client.post(f"{API}/hero/slides/reorder", headers=admin_headers,
                          json={"slide_ids": slide_ids})
        assert res.status_code == 400


class TestAvailableContent:
    def test_lists_each_kind(self, client, content, admin_headers):
        body = client.get(f"{API}/hero/available-content", headers=admin_headers).get_json()

        assert set(body["content"]) == {
            "article", "product", "main_service", "import_service",
            "contracting_service", "project",
        }
        assert body["content"]["project"] == [{
            "id": content["project"],
            "title_en": "Tower A",
            "title_ar": "البرج أ",
            "slug_en": "tower-a",
        }]
