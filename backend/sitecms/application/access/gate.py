"""
Role and permission checks for the authenticated caller.

The gate is a boolean oracle: every failure while resolving the identity,
the account or its roles resolves to "no access" and is logged, never
raised. Results are memoized on the gate instance, and one gate lives on
`flask.g`, so nothing outlives the request.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional

from flask import g
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request

from sitecms.extensions import db
from sitecms.models.account import Account
from sitecms.models.role import AccountRole, Permission, RolePermission

logger = logging.getLogger(__name__)

ADMIN_ROLE_ID = "role_admin"


@dataclass(frozen=True)
class Identity:
    auth_user_id: str
    claims: Dict[str, Any] = field(default_factory=dict)

    @property
    def metadata(self) -> Dict[str, Any]:
        return self.claims.get("user_metadata") or {}


class PermissionSet:
    """
    Effective permissions of an account.

    Either an explicit set of keys or the universal set. The universal set
    is a flag, not an enumeration, so permissions added later are covered.
    """

    __slots__ = ("_keys", "_grants_all")

    def __init__(self, keys: Iterable[str] = (), *, grants_all: bool = False):
        self._keys: FrozenSet[str] = frozenset(keys)
        self._grants_all = grants_all

    @property
    def grants_all(self) -> bool:
        return self._grants_all

    def __contains__(self, key: str) -> bool:
        return self._grants_all or key in self._keys

    def __eq__(self, other):
        if not isinstance(other, PermissionSet):
            return NotImplemented
        return (self._grants_all, self._keys) == (other._grants_all, other._keys)

    def __repr__(self):
        if self._grants_all:
            return "PermissionSet(ALL)"
        return f"PermissionSet({sorted(self._keys)!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {"all": self._grants_all, "keys": sorted(self._keys)}


ALL_PERMISSIONS = PermissionSet(grants_all=True)
NO_PERMISSIONS = PermissionSet()


def jwt_identity() -> Optional[Identity]:
    """Identity carried by the bearer token, if any."""
    verify_jwt_in_request(optional=True)
    subject = get_jwt_identity()
    if not subject:
        return None
    return Identity(auth_user_id=str(subject), claims=dict(get_jwt()))


_UNSET = object()


class AccessGate:
    def __init__(self, identity_resolver: Callable[[], Optional[Identity]] = jwt_identity):
        self._resolve_identity = identity_resolver
        self._memo: Dict[str, Any] = {}

    def _remember(self, key, compute, fallback):
        cached = self._memo.get(key, _UNSET)
        if cached is not _UNSET:
            return cached
        try:
            value = compute()
        except Exception:
            logger.exception("Access check %r failed, denying", key)
            value = fallback
        self._memo[key] = value
        return value

    # -------------------------------------------------
    # Lookups
    # -------------------------------------------------
    def current_identity(self) -> Optional[Identity]:
        return self._remember("identity", self._resolve_identity, None)

    def current_account(self) -> Optional[Account]:
        def compute():
            identity = self.current_identity()
            if identity is None:
                return None
            return Account.query.filter_by(auth_user_id=identity.auth_user_id).first()

        return self._remember("account", compute, None)

    def role_set(self, account: Optional[Account] = None) -> FrozenSet[str]:
        if account is None:
            return self._remember("roles", lambda: self._role_ids(self.current_account()), frozenset())
        try:
            return self._role_ids(account)
        except Exception:
            logger.exception("Role lookup failed for account %s, denying", account.id)
            return frozenset()

    def permission_set(self, account: Optional[Account] = None) -> PermissionSet:
        if account is None:
            return self._remember(
                "permissions", lambda: self._permissions(self.role_set()), NO_PERMISSIONS
            )
        try:
            return self._permissions(self.role_set(account))
        except Exception:
            logger.exception("Permission lookup failed for account %s, denying", account.id)
            return NO_PERMISSIONS

    # -------------------------------------------------
    # Checks
    # -------------------------------------------------
    def has_permission(self, key: str) -> bool:
        return key in self.permission_set()

    def has_role(self, *role_ids: str) -> bool:
        return bool(self.role_set() & set(role_ids))

    def is_admin(self) -> bool:
        return self.has_role(ADMIN_ROLE_ID)

    def has_dashboard_access(self) -> bool:
        return len(self.role_set()) > 0

    # -------------------------------------------------
    # Queries
    # -------------------------------------------------
    @staticmethod
    def _role_ids(account: Optional[Account]) -> FrozenSet[str]:
        if account is None:
            return frozenset()
        rows = db.session.query(AccountRole.role_id).filter(
            AccountRole.account_id == account.id
        )
        return frozenset(role_id for (role_id,) in rows)

    @staticmethod
    def _permissions(role_ids: FrozenSet[str]) -> PermissionSet:
        if ADMIN_ROLE_ID in role_ids:
            return ALL_PERMISSIONS
        if not role_ids:
            return NO_PERMISSIONS
        rows = (
            db.session.query(Permission.key)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .filter(RolePermission.role_id.in_(role_ids))
            .distinct()
        )
        return PermissionSet(key for (key,) in rows)


def current_gate() -> AccessGate:
    """The gate for this request."""
    gate = g.get("access_gate")
    if gate is None:
        gate = g.access_gate = AccessGate()
    return gate
