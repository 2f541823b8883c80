from flask import g, has_app_context
from sitecms.extensions import db
from sitecms.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None,
    actor_id: Optional[str] = None,
):
    if actor_id is None and has_app_context():
        account = g.get("current_account")
        actor_id = account.id if account is not None else None

    log = AuditLog()

    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
