from typing import Any, Dict

from sitecms.errors import NotFound, ValidationFailure
from sitecms.extensions import db
from sitecms.models.image import Image
from sitecms.utils.audit import log_action
from sitecms.utils.payload import clean_text
from sitecms.utils.transaction import transactional


EDITABLE_FIELDS = ("title_en", "title_ar", "alt_en", "alt_ar")


def update_image(*, image_id: str, data: Dict[str, Any]) -> Image:
    """Update the bilingual title and alt text of a stored image."""
    image = db.session.get(Image, image_id)
    if not image:
        raise NotFound("Image not found")

    if not any(field in data for field in EDITABLE_FIELDS):
        raise ValidationFailure("No valid fields provided for update")

    changed_fields: list[str] = []

    with transactional():
        for field in EDITABLE_FIELDS:
            if field not in data:
                continue
            value = clean_text(field, data[field])
            if getattr(image, field) != value:
                setattr(image, field, value)
                changed_fields.append(field)

        if changed_fields:
            log_action(
                action="image.update",
                entity_type="image",
                entity_id=image.id,
                payload={"fields": changed_fields},
            )

    return image
