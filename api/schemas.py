"""
Request / response schemas for the HTTP API.

Request fields are all optional at the schema level: a missing or blank
field is a ``ValidationError`` (400) raised by the service layer with the
route's own message, not a generic 422.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _number_to_str(cls, value: Any) -> Any:
        # Phones and similar fields often arrive as JSON numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def missing_fields(self, *names: str) -> List[str]:
        """Names of ``names`` whose value is absent or blank."""
        missing = []
        for name in names:
            value = getattr(self, name)
            if value is None or not str(value).strip():
                missing.append(name)
        return missing

    def stripped(self, *names: str) -> Dict[str, str]:
        return {name: str(getattr(self, name)).strip() for name in names}


class RegisterRequest(_CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    city_state: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    REQUIRED: ClassVar[Tuple[str, ...]] = (
        "first_name", "last_name", "phone", "city_state", "email", "password",
    )


class LoginRequest(_CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class ProfileEditRequest(_CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    city_state: Optional[str] = None

    REQUIRED: ClassVar[Tuple[str, ...]] = ("first_name", "last_name", "phone", "city_state")


class ReportRequest(BaseModel):
    prompt: Optional[str] = None


class LoginResponse(BaseModel):
    token: str
    userType: str


class MessageResponse(BaseModel):
    message: str


class ReportResponse(BaseModel):
    report: str
