from sitecms.extensions import db
from .base import BaseModel


class HeroSection(BaseModel):
    __tablename__ = "hero_sections"

    title_en = db.Column(db.String(255), nullable=False)
    title_ar = db.Column(db.String(255), nullable=False)
    slug_en = db.Column(db.String(255), nullable=False, unique=True, index=True)
    slug_ar = db.Column(db.String(255), nullable=False, unique=True, index=True)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    # Deleting a section deletes its slides
    slides = db.relationship(
        "HeroSlide",
        foreign_keys="HeroSlide.hero_section_id",
        back_populates="hero_section",
        order_by="HeroSlide.sort_order",
        cascade="all, delete-orphan",
    )
