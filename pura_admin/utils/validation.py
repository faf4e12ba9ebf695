import re
from typing import Any, Optional

from pura_admin.utils.errors import ValidationError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp")
MIN_PASSWORD_LENGTH = 6

def validate_email(email: str) -> None:
    if not email:
        raise ValidationError("Email is required", field="email")
    if not _EMAIL_RE.fullmatch(email):
        raise ValidationError("Invalid email format", field="email")

def validate_password(password: str, min_length: int = MIN_PASSWORD_LENGTH) -> None:
    if not password:
        raise ValidationError("Password is required", field="password")
    if len(password) < min_length:
        raise ValidationError(f"Password must be at least {min_length} characters", field="password")

def validate_required(value: Optional[str], field_name: str) -> None:
    if value is None or str(value).strip() == "":
        raise ValidationError(f"{field_name} is required", field=field_name)

def validate_number(value: Any, field_name: str, min_value: Optional[float] = None,
                    max_value: Optional[float] = None) -> None:
    if value is None or value == "":
        raise ValidationError(f"{field_name} is required", field=field_name)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number", field=field_name)
    if min_value is not None and number < min_value:
        raise ValidationError(f"{field_name} must be at least {min_value:g}", field=field_name)
    if max_value is not None and number > max_value:
        raise ValidationError(f"{field_name} must be at most {max_value:g}", field=field_name)

def validate_file(file: Any, field_name: str, max_size_mb: float = 2) -> None:
    """Check an image before upload: present, at most max_size_mb, JPEG/PNG/WebP.

    ``file`` is anything with ``size`` and ``type``/``content_type`` attributes,
    e.g. a StagedFile or a Streamlit UploadedFile.
    """
    if file is None:
        raise ValidationError(f"{field_name} is required", field=field_name)
    max_bytes = int(max_size_mb * 1024 * 1024)
    if file.size > max_bytes:
        raise ValidationError(f"{field_name} must be less than {max_size_mb:g}MB", field=field_name)
    content_type = getattr(file, "content_type", None) or getattr(file, "type", None)
    if content_type not in IMAGE_TYPES:
        raise ValidationError("File must be an image (JPEG, PNG, or WebP)", field=field_name)
