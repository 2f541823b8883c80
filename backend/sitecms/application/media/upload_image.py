import logging
from typing import Optional

from flask import current_app

from sitecms.errors import ExternalServiceFailure, ValidationFailure
from sitecms.extensions import db
from sitecms.models.image import Image
from sitecms.services import get_storage
from sitecms.utils.audit import log_action
from sitecms.utils.media import allowed_file, file_size, unique_filename
from sitecms.utils.transaction import transactional

logger = logging.getLogger(__name__)


def upload_image(
    file,
    *,
    title_en: Optional[str] = None,
    title_ar: Optional[str] = None,
    alt_en: Optional[str] = None,
    alt_ar: Optional[str] = None,
) -> Image:
    """
    Upload an image to object storage, then record it.

    The row is only written after the upload succeeded; if writing the row
    fails, the uploaded object is removed again.
    """
    if file is None or not file.filename:
        raise ValidationFailure("No file provided")

    if not (file.mimetype or "").startswith("image/"):
        raise ValidationFailure("File must be an image")

    if not allowed_file(file.filename):
        raise ValidationFailure("File type not allowed")

    max_bytes = current_app.config.get("MAX_IMAGE_BYTES", 5 * 1024 * 1024)
    if file_size(file) > max_bytes:
        raise ValidationFailure(f"File size must be less than {max_bytes // (1024 * 1024)}MB")

    storage = get_storage()
    filename = unique_filename(file.filename)
    url = storage.upload(filename, file.read(), file.mimetype)

    image = Image()
    image.url = url
    image.filename = filename
    image.title_en = title_en or None
    image.title_ar = title_ar or None
    image.alt_en = alt_en or None
    image.alt_ar = alt_ar or None

    try:
        with transactional():
            db.session.add(image)
            db.session.flush()

            log_action(
                action="image.upload",
                entity_type="image",
                entity_id=image.id,
                payload={"filename": filename},
            )
    except Exception:
        logger.exception("Saving image row for %s failed, removing object", filename)
        try:
            storage.delete(filename)
        except ExternalServiceFailure:
            logger.error("Could not remove orphaned object %s", filename)
        raise

    return image
