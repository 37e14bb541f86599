import re

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator

PHONE_PATTERN = re.compile(r"^\+?[0-9][0-9 \-]{5,}$")
PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15
DEFAULT_PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_BYTES = 72


def normalize_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


def encode_password(value: str) -> bytes:
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError("Password must be valid text.") from exc


class SignInRequest(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, value):
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required.")
        encode_password(value)
        return value


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    phone: str
    role: str
    email: EmailStr
    password: str

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Name is required.")
        return normalized

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        normalized = value.strip()
        digits = sum(ch.isdigit() for ch in normalized)
        if not PHONE_PATTERN.match(normalized) or not PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS:
            raise ValueError("A valid phone number is required.")
        return normalized

    @field_validator("role")
    @classmethod
    def validate_role(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("Role is required.")
        return normalized

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, value):
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str, info: ValidationInfo) -> str:
        min_length = (info.context or {}).get("password_min_length", DEFAULT_PASSWORD_MIN_LENGTH)
        if len(value) < min_length:
            raise ValueError(f"Password must be at least {min_length} characters.")
        if len(encode_password(value)) > PASSWORD_MAX_BYTES:
            raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes.")
        return value


class ProfileResponse(BaseModel):
    firstname: str
    lastname: str
    email: EmailStr
    role: str


class RegisterResponse(BaseModel):
    message: str
    user: ProfileResponse


class MessageResponse(BaseModel):
    message: str
