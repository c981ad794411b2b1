"""
Reusable input checks raised as ValidationError.
"""

from contract_api.shared.errors.types import ValidationError

MIME_MISMATCH_MESSAGE = "Unsupported file type"


def validate_mime_type(file_mime_type: str | None, expected_mime_type: str | None) -> None:
    """Ensure an uploaded file's MIME type matches the expected one.

    Args:
        file_mime_type: The content type reported for the upload.
        expected_mime_type: The content type the endpoint accepts.

    Raises:
        ValidationError: Either value is empty, or they differ after trimming.
    """
    if not file_mime_type or not expected_mime_type:
        raise ValidationError(MIME_MISMATCH_MESSAGE)

    if file_mime_type.strip() != expected_mime_type.strip():
        raise ValidationError(
            MIME_MISMATCH_MESSAGE,
            details={"expected": expected_mime_type.strip(), "received": file_mime_type.strip()},
        )
