from sitecms.extensions import db
from .base import BaseModel


class Image(BaseModel):
    __tablename__ = "images"

    url = db.Column(db.String(1024), nullable=False)
    filename = db.Column(db.String(255), nullable=False, unique=True)

    title_en = db.Column(db.String(255), nullable=True)
    title_ar = db.Column(db.String(255), nullable=True)
    alt_en = db.Column(db.String(255), nullable=True)
    alt_ar = db.Column(db.String(255), nullable=True)

    def to_dict(self):
        return {
            "id": self.id,
            "url": self.url,
            "filename": self.filename,
            "title_en": self.title_en,
            "title_ar": self.title_ar,
            "alt_en": self.alt_en,
            "alt_ar": self.alt_ar,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
