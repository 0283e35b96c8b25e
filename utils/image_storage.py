# utils/image_storage.py
import logging
import os
import uuid

from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


def _extension(filename: str) -> str:
    # taken from the raw name; secure_filename drops the dot of non-ASCII names
    if not filename or "." not in filename:
        return ""
    ext = filename.rsplit(".", 1)[1].lower()
    return ext if ext.isalnum() else ""


def allowed_image(filename: str, allowed_extensions) -> bool:
    return _extension(filename) in allowed_extensions


def image_path(upload_folder: str, name: str) -> str:
    return os.path.join(upload_folder, secure_filename(name))


def save_image(file_storage, upload_folder: str) -> str:
    """
    Write an uploaded werkzeug FileStorage under upload_folder using a
    generated unique name. Returns the stored file name (not the full path).
    """
    os.makedirs(upload_folder, exist_ok=True)
    ext = _extension(file_storage.filename)
    name = uuid.uuid4().hex + (f".{ext}" if ext else "")
    file_storage.save(os.path.join(upload_folder, name))
    logger.debug("Stored image %s in %s", name, upload_folder)
    return name


def remove_image(upload_folder: str, name: str) -> bool:
    """
    Best-effort delete. Returns True if the file was removed; failures are
    logged and reported as False, never raised.
    """
    if not name:
        return False
    path = image_path(upload_folder, name)
    try:
        os.remove(path)
        return True
    except FileNotFoundError:
        logger.warning("Image file already missing: %s", path)
    except OSError:
        logger.exception("Failed to delete image file %s", path)
    return False
