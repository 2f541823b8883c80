import logging

from sitecms.extensions import db
from sitecms.models.role import Role
from sitecms.utils.transaction import transactional

logger = logging.getLogger(__name__)

ROLES = [
    {
        "id": "role_admin",
        "name_en": "Administrator",
        "name_ar": "مدير النظام",
        "description_en": "Full access to all system features and settings",
        "description_ar": "وصول كامل لجميع ميزات وإعدادات النظام",
    },
    {
        "id": "role_editor",
        "name_en": "Editor",
        "name_ar": "محرر",
        "description_en": "Can create, edit, and publish content",
        "description_ar": "يمكنه إنشاء وتحرير ونشر المحتوى",
    },
    {
        "id": "role_author",
        "name_en": "Author",
        "name_ar": "كاتب",
        "description_en": "Can create and edit own content",
        "description_ar": "يمكنه إنشاء وتحرير المحتوى الخاص به",
    },
    {
        "id": "role_viewer",
        "name_en": "Viewer",
        "name_ar": "مشاهد",
        "description_en": "Can view content in the dashboard",
        "description_ar": "يمكنه عرض المحتوى في لوحة التحكم",
    },
]


def seed_roles() -> int:
    """Insert missing roles; existing ones are left untouched."""
    created = 0
    with transactional():
        for data in ROLES:
            if db.session.get(Role, data["id"]):
                continue
            db.session.add(Role(**data))
            created += 1
            logger.info("Role seeded: %s", data["name_en"])
    return created
