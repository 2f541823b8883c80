import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from sitecms.extensions import db
from sitecms.models.account import Account
from sitecms.utils.transaction import transactional

logger = logging.getLogger(__name__)


def display_name_from(metadata: Dict[str, Any]) -> str:
    email = metadata.get("email") or ""
    return (
        metadata.get("full_name")
        or metadata.get("name")
        or email.split("@")[0]
        or "User"
    )


def ensure_account(
    *,
    auth_user_id: str,
    metadata: Optional[Dict[str, Any]] = None,
) -> Optional[Account]:
    """
    Return the Account for an identity-provider user, creating it on first
    sight.

    Never raises: a failure here must not block the sign-in redirect, so it
    is logged and None is returned.
    """
    metadata = metadata or {}

    try:
        existing = Account.query.filter_by(auth_user_id=auth_user_id).first()
    except SQLAlchemyError:
        logger.exception("Error looking up account for user %s", auth_user_id)
        return None
    if existing:
        return existing

    name = display_name_from(metadata)
    account = Account()
    account.auth_user_id = auth_user_id
    account.display_name_en = name
    account.display_name_ar = name
    account.avatar_url = metadata.get("avatar_url")

    try:
        with transactional():
            db.session.add(account)
        logger.info("Account created for user: %s", auth_user_id)
        return account
    except IntegrityError:
        # Created concurrently by another callback
        try:
            return Account.query.filter_by(auth_user_id=auth_user_id).first()
        except SQLAlchemyError:
            logger.exception("Error refetching account for user %s", auth_user_id)
            return None
    except SQLAlchemyError:
        logger.exception("Error creating account for user %s", auth_user_id)
        return None
