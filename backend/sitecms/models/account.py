from sitecms.extensions import db
from .base import BaseModel


class Account(BaseModel):
    """Internal record for one identity-provider user."""

    __tablename__ = "accounts"

    auth_user_id = db.Column(db.String(255), nullable=False, unique=True, index=True)
    display_name_en = db.Column(db.String(255), nullable=False)
    display_name_ar = db.Column(db.String(255), nullable=False)
    avatar_url = db.Column(db.String(1024), nullable=True)

    roles = db.relationship("Role", secondary="account_roles", lazy="selectin", viewonly=True)

    def to_dict(self):
        return {
            "id": self.id,
            "auth_user_id": self.auth_user_id,
            "display_name_en": self.display_name_en,
            "display_name_ar": self.display_name_ar,
            "avatar_url": self.avatar_url,
            "roles": [role.id for role in self.roles],
        }
