# controllers/ads_controller.py
import logging
import mimetypes
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from models.ad import Ad
from utils.errors import ValidationError, NotFound, StorageError, first_error_message
from utils.image_storage import allowed_image, save_image, remove_image, image_path

logger = logging.getLogger(__name__)

AD_FIELDS = ("pet_name", "pet_type", "location", "contact_details", "user_id")

# ids are INTEGER columns; keep within the 32-bit range every backend accepts
MAX_ID = 2**31 - 1


class AdSchema(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    pet_name: Optional[str] = Field(None, max_length=200)
    pet_type: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=200)
    contact_details: Optional[str] = None
    user_id: int = Field(..., gt=0, le=MAX_ID)


def _parse_user_id(value) -> int:
    if value is None or str(value).strip() == "":
        raise ValidationError("User ID is missing")
    try:
        user_id = int(value)
    except (TypeError, ValueError):
        raise ValidationError("User ID must be an integer")
    if not 0 < user_id <= MAX_ID:
        raise ValidationError("User ID is out of range")
    return user_id


def _valid_id(ad_id) -> bool:
    return 0 < ad_id <= MAX_ID


def create_ad(form, image, session_factory, upload_folder: str, allowed_extensions) -> dict:
    """
    Persist a new ad and its image file.

    form is any mapping of the multipart text fields, image a werkzeug
    FileStorage (or None). Returns the stored record as a dict.
    """
    if not form.get("user_id"):
        raise ValidationError("User ID is required")
    if image is None or not image.filename:
        raise ValidationError("Image file is required")

    try:
        data = AdSchema.model_validate({k: form.get(k) for k in AD_FIELDS})
    except PydanticValidationError as ve:
        raise ValidationError(first_error_message(ve.errors())) from ve

    if not allowed_image(image.filename, allowed_extensions):
        raise ValidationError("Unsupported image type")

    stored_name = save_image(image, upload_folder)

    session = session_factory()
    try:
        ad = Ad(
            pet_name=data.pet_name,
            pet_type=data.pet_type,
            location=data.location,
            contact_details=data.contact_details,
            image_path=stored_name,
            user_id=data.user_id,
        )
        session.add(ad)
        session.commit()
        session.refresh(ad)
        return ad.to_dict()
    except SQLAlchemyError as e:
        session.rollback()
        # no row was written, so the file would be orphaned
        remove_image(upload_folder, stored_name)
        raise StorageError("Failed to save ad") from e
    except Exception:
        session.rollback()
        remove_image(upload_folder, stored_name)
        raise
    finally:
        session.close()


def list_ads(session_factory, pet_type: str = None) -> list:
    """All ads, or only those whose pet_type equals the filter."""
    session = session_factory()
    try:
        query = session.query(Ad)
        if pet_type:
            query = query.filter(Ad.pet_type == pet_type)
        return [ad.to_dict() for ad in query.order_by(Ad.id).all()]
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError("Database error") from e
    finally:
        session.close()


def get_ad_image(ad_id: int, session_factory, upload_folder: str):
    """Return (file path, mimetype) for an ad's image."""
    if not _valid_id(ad_id):
        raise NotFound("Ad not found")

    session = session_factory()
    try:
        ad = session.get(Ad, ad_id)
        stored_name = ad.image_path if ad is not None else None
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError("Database error") from e
    finally:
        session.close()

    if stored_name is None:
        raise NotFound("Ad not found")

    path = image_path(upload_folder, stored_name)
    if not os.path.isfile(path):
        logger.warning("Image file for ad %s missing at %s", ad_id, path)
        raise NotFound("Image not found")

    mimetype = mimetypes.guess_type(path)[0] or "image/jpeg"
    return path, mimetype


def list_ads_by_owner(user_id, session_factory) -> list:
    """Ads owned by user_id, each pointing at its /ads/<id>/image endpoint."""
    owner_id = _parse_user_id(user_id)

    session = session_factory()
    try:
        ads = session.query(Ad).filter(Ad.user_id == owner_id).order_by(Ad.id).all()
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError("Database error") from e
    finally:
        session.close()

    result = []
    for ad in ads:
        item = ad.to_dict()
        item["image_url"] = f"/ads/{ad.id}/image"
        result.append(item)
    return result


def delete_ad(ad_id: int, session_factory, upload_folder: str) -> dict:
    """
    Delete the ad row, then its image file. The file removal is best effort:
    a failure is logged and the delete still reports success.
    """
    if not _valid_id(ad_id):
        raise NotFound("Ad not found")

    session = session_factory()
    try:
        ad = session.get(Ad, ad_id)
        if ad is None:
            raise NotFound("Ad not found")
        stored_name = ad.image_path
        session.delete(ad)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError("Server error") from e
    finally:
        session.close()

    if not remove_image(upload_folder, stored_name):
        logger.warning("Ad %s deleted but image %s was not removed", ad_id, stored_name)

    return {"message": "Ad deleted successfully"}
