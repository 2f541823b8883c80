from sitecms.extensions import db
from .base import BaseModel
from .content_mixin import BilingualContentMixin


class ProjectType(BaseModel):
    __tablename__ = "project_types"

    title_en = db.Column(db.String(255), nullable=False)
    title_ar = db.Column(db.String(255), nullable=False)


class Project(BaseModel, BilingualContentMixin):
    __tablename__ = "projects"

    location_en = db.Column(db.String(255), nullable=True)
    location_ar = db.Column(db.String(255), nullable=True)
    year = db.Column(db.Integer, nullable=True)
    project_type_id = db.Column(
        db.String(36),
        db.ForeignKey("project_types.id", ondelete="SET NULL"),
        nullable=True,
    )
    is_highlighted = db.Column(db.Boolean, default=False, nullable=False)
    sort_order = db.Column(db.Integer, default=0, nullable=False)

    project_type = db.relationship("ProjectType")
