from flask import current_app

from sitecms.errors import NotFound
from sitecms.extensions import db
from sitecms.models.image import Image
from sitecms.services import get_storage
from sitecms.utils.audit import log_action
from sitecms.utils.transaction import transactional


def delete_image(*, image_id: str) -> None:
    """
    Remove the stored object, then the row. Slides and content using the
    image keep existing with the reference cleared by the store.
    """
    image = db.session.get(Image, image_id)
    if not image:
        raise NotFound("Image not found")

    if not get_storage().delete(image.filename):
        current_app.logger.warning(f"Image {image_id} had no stored object ({image.filename})")

    with transactional():
        db.session.delete(image)

        log_action(
            action="image.delete",
            entity_type="image",
            entity_id=image_id,
            payload={"filename": image.filename},
        )
