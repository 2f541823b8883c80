from sitecms.extensions import db
from .base import BaseModel
from .content_mixin import BilingualContentMixin


class ArticleCategory(BaseModel):
    __tablename__ = "article_categories"

    title_en = db.Column(db.String(255), nullable=False)
    title_ar = db.Column(db.String(255), nullable=False)


class Article(BaseModel, BilingualContentMixin):
    __tablename__ = "articles"

    category_id = db.Column(
        db.String(36),
        db.ForeignKey("article_categories.id", ondelete="SET NULL"),
        nullable=True,
    )
    published_at = db.Column(db.DateTime(timezone=True), nullable=True)

    category = db.relationship("ArticleCategory")
