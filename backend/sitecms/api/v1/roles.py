from flask import request, jsonify
from sitecms.application.access.gate import current_gate
from sitecms.application.access.roles import (
    assign_role,
    list_accounts,
    list_permissions,
    list_roles,
    remove_role,
)
from sitecms.errors import ValidationFailure
from sitecms.utils.decorators import dashboard_required, permission_required
from . import v1_bp


@v1_bp.route("/roles", methods=["GET"])
@permission_required("roles.view")
def get_roles():
    return jsonify({
        "success": True,
        "roles": [role.to_dict() for role in list_roles()],
    }), 200


@v1_bp.route("/permissions", methods=["GET"])
@permission_required("roles.view")
def get_permissions():
    return jsonify({
        "success": True,
        "permissions": [permission.to_dict() for permission in list_permissions()],
    }), 200


@v1_bp.route("/accounts", methods=["GET"])
@permission_required("roles.view")
def get_accounts():
    return jsonify({
        "success": True,
        "accounts": [account.to_dict() for account in list_accounts()],
    }), 200


@v1_bp.route("/accounts/<account_id>/roles", methods=["POST"])
@permission_required("roles.manage")
def add_account_role(account_id):
    data = request.get_json(silent=True) or {}
    role_id = data.get("role_id")
    if not role_id:
        raise ValidationFailure("role_id is required")

    added = assign_role(account_id=account_id, role_id=role_id)
    return jsonify({
        "success": True,
        "message": "Role assigned successfully" if added else "Role already assigned",
    }), 200


@v1_bp.route("/accounts/<account_id>/roles/<role_id>", methods=["DELETE"])
@permission_required("roles.manage")
def delete_account_role(account_id, role_id):
    removed = remove_role(account_id=account_id, role_id=role_id)
    return jsonify({
        "success": True,
        "message": "Role removed successfully" if removed else "Role was not assigned",
    }), 200


@v1_bp.route("/dashboard/access", methods=["GET"])
@dashboard_required
def dashboard_access():
    gate = current_gate()
    return jsonify({
        "success": True,
        "roles": sorted(gate.role_set()),
        "is_admin": gate.is_admin(),
        "permissions": gate.permission_set().to_dict(),
    }), 200
