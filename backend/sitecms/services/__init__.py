from flask import current_app


def get_storage():
    """StorageClient registered by the app factory."""
    return current_app.extensions["storage"]
