from typing import List

from sitecms.errors import NotFound
from sitecms.extensions import db
from sitecms.models.account import Account
from sitecms.models.role import AccountRole, Permission, Role
from sitecms.utils.audit import log_action
from sitecms.utils.transaction import transactional


def list_roles() -> List[Role]:
    return Role.query.order_by(Role.id).all()


def list_permissions() -> List[Permission]:
    return Permission.query.order_by(Permission.key).all()


def list_accounts() -> List[Account]:
    return Account.query.order_by(Account.created_at.asc()).all()


def _require(account_id: str, role_id: str):
    if not db.session.get(Account, account_id):
        raise NotFound("Account not found")
    if not db.session.get(Role, role_id):
        raise NotFound("Role not found")


def assign_role(*, account_id: str, role_id: str) -> bool:
    """
    Attach a role to an account. Assigning a role the account already
    holds is a no-op; returns whether a row was added.
    """
    _require(account_id, role_id)

    if db.session.get(AccountRole, (account_id, role_id)):
        return False

    link = AccountRole()
    link.account_id = account_id
    link.role_id = role_id

    with transactional():
        db.session.add(link)
        log_action(
            action="account.role.assign",
            entity_type="account",
            entity_id=account_id,
            payload={"role_id": role_id},
        )
    return True


def remove_role(*, account_id: str, role_id: str) -> bool:
    _require(account_id, role_id)

    link = db.session.get(AccountRole, (account_id, role_id))
    if not link:
        return False

    with transactional():
        db.session.delete(link)
        log_action(
            action="account.role.remove",
            entity_type="account",
            entity_id=account_id,
            payload={"role_id": role_id},
        )
    return True
