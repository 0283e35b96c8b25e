# routes/ads.py
from flask import Blueprint, request, jsonify, current_app, send_file

from controllers.ads_controller import (
    create_ad,
    list_ads,
    get_ad_image,
    list_ads_by_owner,
    delete_ad,
)
from db.database import current_session_factory
from utils.errors import AppError, error_response

bp = Blueprint("ads", __name__)


def _failed(e: AppError, what: str):
    if e.status_code >= 500:
        current_app.logger.exception("%s failed", what)
    return error_response(e)


@bp.route("/ads", methods=["POST"])
def post_ad():
    try:
        ad = create_ad(
            request.form,
            request.files.get("image"),
            current_session_factory(),
            current_app.config["UPLOAD_FOLDER"],
            current_app.config["ALLOWED_IMAGE_EXTENSIONS"],
        )
    except AppError as e:
        return _failed(e, "Posting ad")
    except Exception:
        current_app.logger.exception("Error posting ad")
        return jsonify({"detail": "Server error"}), 500

    current_app.logger.info("Ad %s posted by user %s", ad["id"], ad["user_id"])
    return jsonify({"success": True, "message": "Ad posted successfully", "ad": ad}), 201


@bp.route("/ads", methods=["GET"])
def get_ads():
    pet_type = request.args.get("petType")
    try:
        ads = list_ads(current_session_factory(), pet_type=pet_type)
    except AppError as e:
        return _failed(e, "Listing ads")
    except Exception:
        current_app.logger.exception("Error listing ads")
        return jsonify({"detail": "Server error"}), 500
    return jsonify(ads)


@bp.route("/ads/<int:ad_id>/image", methods=["GET"])
def get_image(ad_id):
    try:
        path, mimetype = get_ad_image(
            ad_id, current_session_factory(), current_app.config["UPLOAD_FOLDER"]
        )
    except AppError as e:
        return _failed(e, "Retrieving image")
    except Exception:
        current_app.logger.exception("Error retrieving image")
        return jsonify({"detail": "Server error"}), 500
    return send_file(path, mimetype=mimetype)


@bp.route("/dashboard", methods=["GET"])
def dashboard():
    try:
        ads = list_ads_by_owner(request.args.get("user_id"), current_session_factory())
    except AppError as e:
        return _failed(e, "Fetching user ads")
    except Exception:
        current_app.logger.exception("Error fetching user ads")
        return jsonify({"detail": "Server error"}), 500
    return jsonify(ads)


@bp.route("/ads/<int:ad_id>", methods=["DELETE"])
def remove_ad(ad_id):
    try:
        result = delete_ad(ad_id, current_session_factory(), current_app.config["UPLOAD_FOLDER"])
    except AppError as e:
        return _failed(e, "Deleting ad")
    except Exception:
        current_app.logger.exception("Error deleting ad")
        return jsonify({"detail": "Server error"}), 500

    current_app.logger.info("Ad %s deleted", ad_id)
    return jsonify(result)
