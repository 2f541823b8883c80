from sqlalchemy.orm import declared_attr
from sitecms.extensions import db


class BilingualContentMixin:
    """Columns shared by every entity a hero slide can point at."""

    title_en = db.Column(db.String(255), nullable=False)
    title_ar = db.Column(db.String(255), nullable=False)
    slug_en = db.Column(db.String(255), nullable=False, unique=True)
    slug_ar = db.Column(db.String(255), nullable=False, unique=True)
    description_en = db.Column(db.Text, nullable=True)
    description_ar = db.Column(db.Text, nullable=True)

    @declared_attr
    def image_id(cls):
        return db.Column(
            db.String(36),
            db.ForeignKey("images.id", ondelete="SET NULL"),
            nullable=True,
        )

    @declared_attr
    def image(cls):
        return db.relationship("Image")

    @property
    def image_url(self):
        return self.image.url if self.image else None
