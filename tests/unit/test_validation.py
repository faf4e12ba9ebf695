import pytest

from pura_admin.utils.errors import ValidationError
from pura_admin.utils.typing import StagedFile
from pura_admin.utils.validation import (
    validate_email, validate_file, validate_number, validate_password, validate_required,
)

LIMIT = 2 * 1024 * 1024

def test_rating_bounds_inclusive():
    validate_number(1, "Rating", 1, 5)
    validate_number(5, "Rating", 1, 5)
    with pytest.raises(ValidationError, match="Rating must be at least 1"):
        validate_number(0, "Rating", 1, 5)
    with pytest.raises(ValidationError, match="Rating must be at most 5"):
        validate_number(6, "Rating", 1, 5)

def test_number_missing_or_garbage():
    with pytest.raises(ValidationError, match="Position Order is required"):
        validate_number(None, "Position Order", 1)
    with pytest.raises(ValidationError, match="must be a number"):
        validate_number("abc", "Position Order", 1)

def test_file_at_limit_accepted_and_one_byte_over_rejected():
    validate_file(StagedFile("a.png", "image/png", b"x" * LIMIT), "Image", 2)
    with pytest.raises(ValidationError, match="Image must be less than 2MB"):
        validate_file(StagedFile("a.png", "image/png", b"x" * (LIMIT + 1)), "Image", 2)

def test_file_non_image_rejected_regardless_of_size():
    with pytest.raises(ValidationError, match="File must be an image"):
        validate_file(StagedFile("a.pdf", "application/pdf", b"x"), "Image", 2)
    with pytest.raises(ValidationError, match="Avatar is required"):
        validate_file(None, "Avatar")

def test_required_blank_is_rejected():
    validate_required("Budi", "Name")
    with pytest.raises(ValidationError) as exc:
        validate_required("   ", "Name")
    assert exc.value.field == "Name" and exc.value.message == "Name is required"

def test_email_and_password():
    validate_email("admin@example.com")
    with pytest.raises(ValidationError, match="Email is required"):
        validate_email("")
    with pytest.raises(ValidationError, match="Invalid email format"):
        validate_email("admin@example")
    with pytest.raises(ValidationError, match="at least 6 characters"):
        validate_password("12345")
    validate_password("123456")
