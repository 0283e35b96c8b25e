# utils/errors.py
"""
Error kinds raised by the controllers. Each carries the HTTP status the
routes reply with; routes turn them into {"detail": message}.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = 400


class NotFound(AppError):
    status_code = 404


class AuthError(AppError):
    status_code = 400


class StorageError(AppError):
    status_code = 500


def first_error_message(errors) -> str:
    """Flatten pydantic's error list into one readable line."""
    if not errors:
        return "Invalid input"
    err = errors[0]
    field = ".".join(str(p) for p in err.get("loc", ())) or "input"
    return f"{field}: {err.get('msg', 'invalid value')}"


def error_response(err: AppError):
    from flask import jsonify
    return jsonify({"detail": err.message}), err.status_code
