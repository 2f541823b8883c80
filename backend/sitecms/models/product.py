from sitecms.extensions import db
from .base import BaseModel
from .content_mixin import BilingualContentMixin


class ProductCategory(BaseModel):
    __tablename__ = "product_categories"

    title_en = db.Column(db.String(255), nullable=False)
    title_ar = db.Column(db.String(255), nullable=False)


class Product(BaseModel, BilingualContentMixin):
    __tablename__ = "products"

    category_id = db.Column(
        db.String(36),
        db.ForeignKey("product_categories.id", ondelete="SET NULL"),
        nullable=True,
    )

    category = db.relationship("ProductCategory")
