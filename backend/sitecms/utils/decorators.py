from functools import wraps
from flask import g
from sitecms.application.access.gate import current_gate
from sitecms.errors import AuthorizationDenied, failure

SIGN_IN_PATH = "/sign-in"
ACCESS_DENIED_PATH = "/access-denied"


def _check_gate(permission=None):
    """
    Run the gate for the current request. Returns a 401 response when
    there is no identity, raises AuthorizationDenied when the caller may
    not proceed, and returns None otherwise.
    """
    gate = current_gate()

    if gate.current_identity() is None:
        return failure("Authentication required", 401, redirect=SIGN_IN_PATH)

    if not gate.has_dashboard_access():
        raise AuthorizationDenied(redirect=ACCESS_DENIED_PATH)

    if permission is not None and not gate.has_permission(permission):
        raise AuthorizationDenied(
            "Insufficient permissions",
            redirect=ACCESS_DENIED_PATH,
            permission=permission,
        )

    g.current_account = gate.current_account()
    return None


def dashboard_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        denied = _check_gate()
        if denied is not None:
            return denied
        return fn(*args, **kwargs)
    return wrapper


def permission_required(permission):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            denied = _check_gate(permission)
            if denied is not None:
                return denied
            return fn(*args, **kwargs)
        return wrapper
    return decorator
