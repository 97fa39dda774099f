"""
User → JSON projections.

Neither projection ever includes the password hash.
"""

from __future__ import annotations

from typing import Any, Dict

from database.models import User

PLACEHOLDER = "Não informado"

# response key → model attribute
PROFILE_FIELDS = (
    ("firstName", "first_name"),
    ("lastName", "last_name"),
    ("email", "email"),
    ("phone", "phone"),
    ("cityState", "city_state"),
    ("userType", "user_type"),
)


def project_profile(user: User, placeholder: str = PLACEHOLDER) -> Dict[str, str]:
    """
    Profile fields for display, with ``placeholder`` standing in for any
    field that is missing or blank so clients never receive ``null``.
    """
    profile: Dict[str, str] = {}
    for key, attr in PROFILE_FIELDS:
        value = getattr(user, attr, None)
        profile[key] = str(value) if value not in (None, "") else placeholder
    return profile


def public_user(user: User) -> Dict[str, Any]:
    """The stored record as-is (``None`` kept), minus the password hash."""
    data: Dict[str, Any] = {"userId": str(user.user_id)}
    for key, attr in PROFILE_FIELDS:
        data[key] = getattr(user, attr, None)
    for key, attr in (("createdAt", "created_at"), ("updatedAt", "updated_at")):
        value = getattr(user, attr, None)
        data[key] = value.isoformat() if value is not None else None
    return data
