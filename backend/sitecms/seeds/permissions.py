import logging

from sitecms.extensions import db
from sitecms.models.role import Permission, Role, RolePermission
from sitecms.utils.transaction import transactional

logger = logging.getLogger(__name__)

PERMISSIONS = [
    {"id": "perm_hero_view", "key": "hero.view", "name_en": "View Hero Carousel", "name_ar": "عرض شرائح البانر"},
    {"id": "perm_hero_create", "key": "hero.create", "name_en": "Create Hero Slides", "name_ar": "إنشاء شرائح البانر"},
    {"id": "perm_hero_edit", "key": "hero.edit", "name_en": "Edit Hero Slides", "name_ar": "تعديل شرائح البانر"},
    {"id": "perm_hero_delete", "key": "hero.delete", "name_en": "Delete Hero Slides", "name_ar": "حذف شرائح البانر"},
    {"id": "perm_media_view", "key": "media.view", "name_en": "View Images", "name_ar": "عرض الصور"},
    {"id": "perm_media_upload", "key": "media.upload", "name_en": "Upload Images", "name_ar": "رفع الصور"},
    {"id": "perm_media_edit", "key": "media.edit", "name_en": "Edit Image Details", "name_ar": "تعديل بيانات الصور"},
    {"id": "perm_media_delete", "key": "media.delete", "name_en": "Delete Images", "name_ar": "حذف الصور"},
    {"id": "perm_roles_view", "key": "roles.view", "name_en": "View Roles", "name_ar": "عرض الأدوار"},
    {"id": "perm_roles_manage", "key": "roles.manage", "name_en": "Manage Roles", "name_ar": "إدارة الأدوار"},
]

# role_admin needs no rows: it is granted everything implicitly.
ROLE_PERMISSIONS = {
    "role_editor": [
        "hero.view", "hero.create", "hero.edit",
        "media.view", "media.upload", "media.edit",
    ],
    "role_author": ["hero.view", "hero.create", "hero.edit", "media.view", "media.upload"],
    "role_viewer": ["hero.view", "media.view"],
}


def seed_permissions() -> int:
    """
    Insert missing permissions and role mappings. Roles must exist already;
    mappings for unknown roles are skipped.
    """
    created = 0
    by_key = {}

    with transactional():
        for data in PERMISSIONS:
            permission = Permission.query.filter_by(key=data["key"]).first()
            if permission is None:
                permission = Permission(**data)
                db.session.add(permission)
                created += 1
                logger.info("Permission seeded: %s", data["key"])
            by_key[data["key"]] = permission

        db.session.flush()

        for role_id, keys in ROLE_PERMISSIONS.items():
            if not db.session.get(Role, role_id):
                logger.warning("Role %s missing, skipping its permissions", role_id)
                continue
            for key in keys:
                permission_id = by_key[key].id
                if db.session.get(RolePermission, (role_id, permission_id)):
                    continue
                db.session.add(RolePermission(role_id=role_id, permission_id=permission_id))
                created += 1
                logger.info("%s -> %s", role_id, key)

    return created
