from __future__ import annotations

import re
from datetime import UTC, date, datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from coverhub.shared.errors.validation_types import ValidationErrorType

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_PHONE_RE = re.compile(r"^\+?[0-9][0-9 \-]{5,19}$")


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=128)
    password: str = Field(
        min_length=1,
        max_length=256,
        validation_alias=AliasChoices("pwd", "password"),
    )


class LogoutRequestDTO(BaseModel):
    logout: bool


class RegisterRequestDTO(BaseModel):
    email: str = Field(max_length=254)
    phone: str = Field(max_length=32)
    full_name: str = Field(min_length=1, max_length=128)
    gender: str = Field(max_length=32)
    birth_date: str
    address: str = Field(max_length=512)
    marital_status: str = Field(max_length=32)
    occupation: str = Field(max_length=128)
    income: float = Field(ge=0)
    dependents: int = Field(ge=0, le=50)
    region: str = Field(max_length=128)
    familiarity: str = Field(max_length=64)
    interests: str = Field(max_length=1024)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        value = value.strip()
        if not _EMAIL_RE.match(value):
            raise PydanticCustomError(
                ValidationErrorType.EMAIL_INVALID,
                "Email address is not valid",
                {},
            )
        return value.lower()

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        value = value.strip()
        if not _PHONE_RE.match(value):
            raise PydanticCustomError(
                ValidationErrorType.PHONE_INVALID,
                "Phone number must contain digits, spaces or dashes",
                {"pattern": _PHONE_RE.pattern},
            )
        return value

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                ValidationErrorType.BLANK,
                "Full name cannot be blank",
                {},
            )
        return value.strip()

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, value: str) -> str:
        try:
            parsed = date.fromisoformat(value)
        except ValueError:
            raise PydanticCustomError(
                ValidationErrorType.DATE_INVALID,
                "Birth date must be an ISO date (YYYY-MM-DD)",
                {},
            ) from None
        if parsed > datetime.now(UTC).date():
            raise PydanticCustomError(
                ValidationErrorType.DATE_IN_FUTURE,
                "Birth date cannot be in the future",
                {},
            )
        return parsed.isoformat()


class AuthSuccessDTO(BaseModel):
    success: bool = True


class LogoutResultDTO(BaseModel):
    success: bool = True
    logged_out: bool
