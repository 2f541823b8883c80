from datetime import datetime, timezone
from sitecms.extensions import db
from .base import BaseModel


class Role(BaseModel):
    __tablename__ = "roles"

    # Human readable ids, e.g. "role_admin"
    id = db.Column(db.String(64), primary_key=True)
    name_en = db.Column(db.String(120), nullable=False)
    name_ar = db.Column(db.String(120), nullable=False)
    description_en = db.Column(db.Text, nullable=True)
    description_ar = db.Column(db.Text, nullable=True)

    permissions = db.relationship("Permission", secondary="role_permissions", lazy="selectin", viewonly=True)

    def to_dict(self):
        return {
            "id": self.id,
            "name_en": self.name_en,
            "name_ar": self.name_ar,
            "description_en": self.description_en,
            "description_ar": self.description_ar,
            "permissions": sorted(permission.key for permission in self.permissions),
        }


class Permission(BaseModel):
    __tablename__ = "permissions"

    id = db.Column(db.String(64), primary_key=True)
    key = db.Column(db.String(120), nullable=False, unique=True, index=True)  # "<entity>.<verb>"
    name_en = db.Column(db.String(120), nullable=False)
    name_ar = db.Column(db.String(120), nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "key": self.key,
            "name_en": self.name_en,
            "name_ar": self.name_ar,
        }


class RolePermission(db.Model):
    __tablename__ = "role_permissions"

    role_id = db.Column(db.String(64), db.ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True)
    permission_id = db.Column(
        db.String(64), db.ForeignKey("permissions.id", ondelete="CASCADE"), primary_key=True
    )


class AccountRole(db.Model):
    __tablename__ = "account_roles"

    account_id = db.Column(db.String(36), db.ForeignKey("accounts.id", ondelete="CASCADE"), primary_key=True)
    role_id = db.Column(db.String(64), db.ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True)
    assigned_at = db.Column(
        db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False
    )
