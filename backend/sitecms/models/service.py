from sitecms.extensions import db
from .base import BaseModel
from .content_mixin import BilingualContentMixin


class MainService(BaseModel, BilingualContentMixin):
    __tablename__ = "main_services"


class ImportService(BaseModel, BilingualContentMixin):
    __tablename__ = "import_services"

    # Carousel shown on the service's own page
    slides = db.relationship(
        "HeroSlide",
        foreign_keys="HeroSlide.parent_import_service_id",
        back_populates="parent_import_service",
        cascade="all, delete-orphan",
    )


class ContractingService(BaseModel, BilingualContentMixin):
    __tablename__ = "contracting_services"

    slides = db.relationship(
        "HeroSlide",
        foreign_keys="HeroSlide.parent_contracting_service_id",
        back_populates="parent_contracting_service",
        cascade="all, delete-orphan",
    )
