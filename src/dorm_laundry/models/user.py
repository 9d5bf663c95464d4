'''
User and authentication API Models
'''
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Dormitory, UserRole
from ..core.validators import validate_number, validate_persian


class User(BaseModel):
    """
    A user as returned by the backend.
    `phone` is the login identity and `dormitory` is fixed after registration.
    """
    id: str
    first_name: str
    last_name: str
    phone: str
    student_id: str
    dormitory: Dormitory
    role: UserRole
    token: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class UserRegister(BaseModel):
    """
    Registration payload. Names must be Persian, phone and student id digits only.
    """
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    student_id: str = Field(..., min_length=1)
    dormitory: Dormitory

    @field_validator("first_name", "last_name")
    @classmethod
    def _persian_name(cls, value: str) -> str:
        if not validate_persian(value):
            raise ValueError("name must be written in Persian")
        return value

    @field_validator("phone", "student_id")
    @classmethod
    def _digits_only(cls, value: str) -> str:
        if not validate_number(value):
            raise ValueError("must contain digits only")
        return value


class ProfileValues(BaseModel):
    """
    Editable profile fields. Phone and dormitory are deliberately absent.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    student_id: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("first_name", "last_name")
    @classmethod
    def _persian_name(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not validate_persian(value):
            raise ValueError("name must be written in Persian")
        return value

    @field_validator("student_id")
    @classmethod
    def _digits_only(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not validate_number(value):
            raise ValueError("must contain digits only")
        return value


# --- Proxy request bodies ---

class AuthActionRequest(BaseModel):
    action: Optional[str] = None
    phone: Optional[str] = None
    code: Optional[str] = None


class SendCodeRequest(BaseModel):
    phone: Optional[str] = None
    page: Optional[str] = None


class PhoneCodeRequest(BaseModel):
    phone: Optional[str] = None
    code: Optional[str] = None


class RegisterRequest(BaseModel):
    userData: Optional[UserRegister] = None


class VerifyTokenRequest(BaseModel):
    token: Optional[dict[str, Any]] = None


class ProfileEditRequest(BaseModel):
    user_id: Optional[str] = None
    values: Optional[ProfileValues] = None
