from __future__ import annotations

from typing import Dict, Iterable, List, Protocol

from sqlalchemy.orm import joinedload

from sitecms.domain.display import SlideReference
from sitecms.domain.slides import SlideType
from sitecms.extensions import db
from sitecms.models.article import Article
from sitecms.models.product import Product
from sitecms.models.project import Project
from sitecms.models.service import ContractingService, ImportService, MainService


class ContentLookup(Protocol):
    def fetch(self, kind: SlideType, ids: Iterable[str]) -> Dict[str, SlideReference]:
        """Return references for the ids that exist; missing ids are absent."""
        ...


def _base_fields(entity) -> dict:
    return {
        "id": entity.id,
        "title_en": entity.title_en,
        "title_ar": entity.title_ar,
        "slug_en": entity.slug_en,
        "slug_ar": entity.slug_ar,
        "description_en": entity.description_en,
        "description_ar": entity.description_ar,
        "image_url": entity.image_url,
    }


def _article_reference(article: Article) -> SlideReference:
    return SlideReference(
        **_base_fields(article),
        category_name=article.category.title_en if article.category else None,
        published_at=article.published_at,
    )


def _product_reference(product: Product) -> SlideReference:
    return SlideReference(
        **_base_fields(product),
        product_category_name=product.category.title_en if product.category else None,
    )


def _project_reference(project: Project) -> SlideReference:
    return SlideReference(
        **_base_fields(project),
        location_en=project.location_en,
        location_ar=project.location_ar,
        year=project.year,
        project_type_name=project.project_type.title_en if project.project_type else None,
    )


def _plain_reference(entity) -> SlideReference:
    return SlideReference(**_base_fields(entity))


# kind -> (model, eager loads, row -> reference)
_SOURCES: Dict[SlideType, tuple] = {
    SlideType.ARTICLE: (Article, ("image", "category"), _article_reference),
    SlideType.PRODUCT: (Product, ("image", "category"), _product_reference),
    SlideType.MAIN_SERVICE: (MainService, ("image",), _plain_reference),
    SlideType.IMPORT_SERVICE: (ImportService, ("image",), _plain_reference),
    SlideType.CONTRACTING_SERVICE: (ContractingService, ("image",), _plain_reference),
    SlideType.PROJECT: (Project, ("image", "project_type"), _project_reference),
}


class SqlContentLookup:
    """
    Batched lookup against the content tables: one IN (...) query per
    kind, whatever the number of slides pointing at that kind.
    """

    def fetch(self, kind: SlideType, ids: Iterable[str]) -> Dict[str, SlideReference]:
        ids = list(dict.fromkeys(i for i in ids if i))
        if not ids or kind not in _SOURCES:
            return {}

        model, eager, to_reference = _SOURCES[kind]
        options = [joinedload(getattr(model, name)) for name in eager]
        rows = db.session.query(model).options(*options).filter(model.id.in_(ids)).all()
        return {row.id: to_reference(row) for row in rows}


def _options(model) -> List[dict]:
    rows = (
        db.session.query(model.id, model.title_en, model.title_ar, model.slug_en)
        .order_by(model.title_en)
        .all()
    )
    return [
        {"id": id_, "title_en": title_en, "title_ar": title_ar, "slug_en": slug_en}
        for id_, title_en, title_ar, slug_en in rows
    ]


def available_content() -> Dict[str, List[dict]]:
    """Candidates for the slide editor's content picker, keyed by slide type."""
    return {kind.value: _options(model) for kind, (model, _, _) in _SOURCES.items()}
