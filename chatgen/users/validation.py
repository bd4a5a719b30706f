# chatgen/users/validation.py
"""
Reglas puras de validación para signup/login. No tocan la DB.
"""
import re

from chatgen.core.errors import ValidationError

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

SPECIAL_CHARS = "@$!%*?&"
_SPECIAL = re.escape(SPECIAL_CHARS)
# solo ASCII: letras, dígitos 0-9 y SPECIAL_CHARS; se evalúa con fullmatch
STRONG_PASSWORD_RE = re.compile(
    rf"(?=.*[A-Z])(?=.*[0-9])(?=.*[{_SPECIAL}])[A-Za-z0-9{_SPECIAL}]{{8,}}"
)

POLICIES = ("strict", "none")


def require_fields(*values: str | None) -> None:
    for value in values:
        if value is None or not value.strip():
            raise ValidationError("missing fields")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_email(email: str) -> None:
    if not EMAIL_RE.fullmatch(email):
        raise ValidationError("invalid email format")


def validate_password(password: str, policy: str = "strict") -> None:
    if policy not in POLICIES:
        raise ValueError(f"unknown password policy: {policy!r}")
    if policy == "strict" and not STRONG_PASSWORD_RE.fullmatch(password):
        raise ValidationError("weak password")
