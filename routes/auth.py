# routes/auth.py
from flask import Blueprint, request, jsonify, current_app

from controllers.auth_controller import register_user, login_user
from db.database import current_session_factory
from utils.errors import AppError, error_response

bp = Blueprint("auth", __name__)


def _json_payload():
    try:
        payload = request.get_json(force=True)
    except Exception:
        return None
    return payload if isinstance(payload, dict) else None


@bp.route("/register", methods=["POST"])
def register():
    payload = _json_payload()
    if payload is None:
        return jsonify({"detail": "Invalid JSON"}), 400

    try:
        user_id = register_user(payload, current_session_factory())
    except AppError as e:
        if e.status_code >= 500:
            current_app.logger.exception("Registration failed")
        return error_response(e)
    except Exception:
        current_app.logger.exception("Registration failed")
        return jsonify({"detail": "Registration failed"}), 500

    current_app.logger.info("Registered user %s", user_id)
    return jsonify({"message": "Registration successful", "userId": user_id})


@bp.route("/login", methods=["POST"])
def login():
    payload = _json_payload()
    if payload is None:
        return jsonify({"detail": "Invalid JSON"}), 400

    try:
        user_id = login_user(payload, current_session_factory())
    except AppError as e:
        if e.status_code >= 500:
            current_app.logger.exception("Login failed")
        return error_response(e)
    except Exception:
        current_app.logger.exception("Login failed")
        return jsonify({"detail": "Login failed"}), 500

    return jsonify({"message": "Login successful", "userId": user_id})
