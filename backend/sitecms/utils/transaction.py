import logging
from contextlib import contextmanager

from sitecms.errors import SiteCMSError
from sitecms.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional():
    """
    Commit the session when the block completes, roll it back when it
    raises. Domain errors are expected and pass through quietly.
    """
    try:
        yield db.session
        db.session.commit()
    except SiteCMSError:
        db.session.rollback()
        raise
    except Exception as exc:
        db.session.rollback()
        logger.warning("Transaction rolled back: %s", exc)
        raise
