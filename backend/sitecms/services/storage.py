# sitecms/services/storage.py
import logging

import requests

from sitecms.errors import ExternalServiceFailure

logger = logging.getLogger(__name__)


class StorageClient:
    """
    Client for a Supabase-compatible Storage REST API.

    Objects live in a single public bucket; the public URL of an object is
    derived from its name.
    """

    def __init__(self, base_url, service_key, bucket, timeout=15):
        self.base_url = (base_url or "").rstrip("/")
        self.bucket = bucket
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {service_key}",
            "apikey": service_key,
        }
        if not self.base_url:
            logger.warning("Storage URL is not configured; uploads will fail.")

    @classmethod
    def from_config(cls, config):
        return cls(
            config.get("STORAGE_URL"),
            config.get("STORAGE_SERVICE_KEY"),
            config.get("STORAGE_BUCKET", "images"),
        )

    def _object_url(self, name):
        return f"{self.base_url}/storage/v1/object/{self.bucket}/{name}"

    def public_url(self, name):
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/{name}"

    def upload(self, name, data, content_type):
        """Upload bytes under `name` and return the public URL."""
        if not self.base_url:
            raise ExternalServiceFailure("Storage is not configured")

        headers = dict(self.headers)
        headers["Content-Type"] = content_type
        headers["Cache-Control"] = "3600"
        headers["x-upsert"] = "false"

        try:
            response = requests.post(
                self._object_url(name), headers=headers, data=data, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to upload {name} to bucket {self.bucket}: {e}")
            raise ExternalServiceFailure("Failed to upload image") from e

        logger.info(f"Uploaded {name} to bucket {self.bucket}.")
        return self.public_url(name)

    def delete(self, name):
        if not self.base_url:
            raise ExternalServiceFailure("Storage is not configured")

        try:
            response = requests.delete(
                self._object_url(name), headers=self.headers, timeout=self.timeout
            )
            if response.status_code == 404:
                logger.warning(f"Object {name} already missing from bucket {self.bucket}.")
                return False
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to delete {name} from bucket {self.bucket}: {e}")
            raise ExternalServiceFailure("Failed to delete image") from e

        return True
