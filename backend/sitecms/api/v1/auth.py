from flask import request, jsonify
from sitecms.application.access.accounts import ensure_account
from sitecms.application.access.gate import current_gate
from sitecms.errors import failure
from . import v1_bp


def _safe_next(value):
    # Only same-site paths
    if not value or not value.startswith("/") or value.startswith("//"):
        return "/dashboard"
    return value


@v1_bp.route("/auth/callback", methods=["POST"])
def auth_callback():
    """
    Called after the identity provider signed the user in. Materializes
    the internal Account on first sight.
    """
    identity = current_gate().current_identity()
    if identity is None:
        return failure("auth_callback_error", 401, redirect="/sign-in?error=auth_callback_error")

    account = ensure_account(
        auth_user_id=identity.auth_user_id,
        metadata=identity.metadata,
    )

    data = request.get_json(silent=True) or {}
    return jsonify({
        "success": True,
        "message": "Signed in",
        "account_id": account.id if account else None,
        "next": _safe_next(data.get("next") or request.args.get("next")),
    }), 200


@v1_bp.route("/auth/me", methods=["GET"])
def me():
    gate = current_gate()
    identity = gate.current_identity()
    if identity is None:
        return failure("Authentication required", 401, redirect="/sign-in")

    account = gate.current_account()
    return jsonify({
        "success": True,
        "auth_user_id": identity.auth_user_id,
        "account": account.to_dict() if account else None,
        "roles": sorted(gate.role_set()),
        "permissions": gate.permission_set().to_dict(),
        "dashboard_access": gate.has_dashboard_access(),
    }), 200
