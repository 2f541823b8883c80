"""
Pytest configuration and fixtures.

The app runs on in-memory SQLite. Fixtures that write rows do so inside
their own app context and hand back ids, so HTTP tests never share `g`
with the setup code.
"""

from typing import Callable, Dict

import pytest
from flask_jwt_extended import create_access_token

from sitecms import create_app
from sitecms.errors import ExternalServiceFailure
from sitecms.extensions import db
from sitecms.models import (
    Account,
    AccountRole,
    Article,
    ArticleCategory,
    ContractingService,
    HeroSection,
    HeroSlide,
    Image,
    ImportService,
    MainService,
    Product,
    ProductCategory,
    Project,
    ProjectType,
)
from sitecms.seeds import seed_permissions, seed_roles


class FakeStorage:
    """Stands in for the object-storage client."""

    def __init__(self):
        self.objects: Dict[str, bytes] = {}
        self.deleted = []
        self.fail_upload = False

    def public_url(self, name):
        return f"https://storage.test/public/images/{name}"

    def upload(self, name, data, content_type):
        if self.fail_upload:
            raise ExternalServiceFailure("Failed to upload image")
        self.objects[name] = data
        return self.public_url(name)

    def delete(self, name):
        self.deleted.append(name)
        return self.objects.pop(name, None) is not None


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def app(storage):
    app = create_app("testing", storage=storage)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app_ctx(app):
    """Pushed app context for service-level tests."""
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def create(app) -> Callable:
    """Insert a row in its own context and return its id."""

    def _create(model, **fields):
        with app.app_context():
            row = model(**fields)
            db.session.add(row)
            db.session.commit()
            return row.id

    return _create


@pytest.fixture
def seeded(app):
    """Roles and permissions from the seed data."""
    with app.app_context():
        seed_roles()
        seed_permissions()
    return app


@pytest.fixture
def make_account(app, seeded) -> Callable:
    def _make(auth_user_id: str, *role_ids: str) -> str:
        with app.app_context():
            account = Account(
                auth_user_id=auth_user_id,
                display_name_en=auth_user_id,
                display_name_ar=auth_user_id,
            )
            db.session.add(account)
            db.session.flush()
            for role_id in role_ids:
                db.session.add(AccountRole(account_id=account.id, role_id=role_id))
            db.session.commit()
            return account.id

    return _make


@pytest.fixture
def auth_headers(app) -> Callable:
    """Bearer header shaped like the identity provider's tokens."""

    def _headers(auth_user_id: str, **metadata) -> Dict[str, str]:
        with app.app_context():
            token = create_access_token(
                identity=auth_user_id,
                additional_claims={"user_metadata": metadata},
            )
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def admin_headers(make_account, auth_headers):
    make_account("admin-user", "role_admin")
    return auth_headers("admin-user")


@pytest.fixture
def content(app, create):
    """One row of every kind a slide can reference."""
    image_id = create(Image, url="https://cdn.test/tower.jpg", filename="tower.jpg")
    article_category = create(ArticleCategory, title_en="News", title_ar="أخبار")
    product_category = create(ProductCategory, title_en="Steel", title_ar="حديد")
    project_type = create(ProjectType, title_en="Residential", title_ar="سكني")

    def bilingual(slug, title_en, title_ar, **extra):
        fields = dict(
            title_en=title_en,
            title_ar=title_ar,
            slug_en=slug,
            slug_ar=f"{slug}-ar",
            description_en=f"{title_en} description",
            description_ar=f"وصف {title_ar}",
        )
        fields.update(extra)
        return fields

    return {
        "image": image_id,
        "article": create(
            Article,
            category_id=article_category,
            **bilingual("launch", "Launch", "إطلاق"),
        ),
        "product": create(
            Product,
            category_id=product_category,
            **bilingual("rebar", "Rebar", "حديد تسليح"),
        ),
        "main_service": create(MainService, **bilingual("design", "Design", "تصميم")),
        "import_service": create(ImportService, **bilingual("machinery", "Machinery", "معدات")),
        "contracting_service": create(
            ContractingService, **bilingual("roads", "Roads", "طرق")
        ),
        "project": create(
            Project,
            image_id=image_id,
            location_en="Riyadh",
            location_ar="الرياض",
            year=2024,
            project_type_id=project_type,
            **bilingual("tower-a", "Tower A", "البرج أ"),
        ),
    }


@pytest.fixture
def section(create) -> str:
    return create(
        HeroSection,
        title_en="Homepage",
        title_ar="الرئيسية",
        slug_en="homepage",
        slug_ar="الرئيسية",
    )


@pytest.fixture
def make_slide(app) -> Callable:
    """Insert a slide, bypassing the write-path validation."""

    def _make(**fields) -> str:
        fields.setdefault("title_en", "Slide")
        fields.setdefault("title_ar", "شريحة")
        fields.setdefault("slide_type", "custom")
        with app.app_context():
            slide = HeroSlide(**fields)
            db.session.add(slide)
            db.session.commit()
            return slide.id

    return _make
