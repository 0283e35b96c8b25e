# controllers/auth_controller.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import generate_password_hash, check_password_hash

from models.user import User
from utils.errors import ValidationError, NotFound, AuthError, StorageError, first_error_message


# ---- Pydantic models ----
class RegisterSchema(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(..., min_length=1, max_length=200)
    mobile_number: str = Field(..., min_length=1, max_length=20)
    password: str = Field(..., min_length=1)

    @field_validator("name", "mobile_number", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value


class LoginSchema(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    mobile_number: str = Field(..., min_length=1, max_length=20)
    password: str = Field(..., min_length=1)

    @field_validator("mobile_number", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value


def _validate(schema, payload):
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as ve:
        raise ValidationError(first_error_message(ve.errors())) from ve


# ---- Main controllers ----
def register_user(payload: dict, session_factory) -> int:
    """
    Validate payload, store the user with a salted password hash and
    return the new user id.
    Raises ValidationError on missing fields, StorageError if the insert fails.
    """
    data = _validate(RegisterSchema, payload)

    session = session_factory()
    try:
        user = User(
            name=data.name,
            mobile_number=data.mobile_number,
            password=generate_password_hash(data.password),
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user.id
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError("User registration failed") from e
    finally:
        session.close()


def login_user(payload: dict, session_factory) -> int:
    """
    Check credentials and return the account id. No session token is issued;
    the caller keeps the id.
    Raises NotFound if no account has this mobile number, AuthError on a
    password mismatch.
    """
    data = _validate(LoginSchema, payload)

    session = session_factory()
    try:
        # mobile numbers are not unique; the oldest account wins
        user = (
            session.query(User)
            .filter(User.mobile_number == data.mobile_number)
            .order_by(User.id)
            .first()
        )
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError("Database error") from e
    finally:
        session.close()

    if user is None:
        raise NotFound("User not found", status_code=400)
    if not check_password_hash(user.password, data.password):
        raise AuthError("Incorrect password")
    return user.id
