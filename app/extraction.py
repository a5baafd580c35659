"""
Source text extraction from uploaded documents.

Text files are decoded directly; images and PDFs go through the OCR
provider. Any failure surfaces as ExtractionError so the caller never
analyzes a half-read document.
"""
from __future__ import annotations

import mimetypes
from typing import Optional, Protocol

from app.config import settings, logger


UNSUPPORTED_TYPE_MESSAGE = "Please upload an image, PDF, or text file"
NO_CODE_MESSAGE = "Could not extract readable code from the uploaded file"


class ExtractionError(Exception):
    """Text could not be extracted from an uploaded document."""

    def __init__(self, message: str, status_code: int = 422):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class OCRProvider(Protocol):
    def is_available(self) -> bool: ...

    async def extract(self, data: bytes, mime_type: str) -> str: ...


def resolve_content_type(content_type: Optional[str], filename: Optional[str]) -> str:
    """Use the declared type, or guess from the filename for generic uploads."""
    content_type = (content_type or "").split(";")[0].strip().lower()
    if content_type and content_type != "application/octet-stream":
        return content_type
    guessed, _ = mimetypes.guess_type(filename or "")
    return guessed or content_type


def is_supported_type(content_type: str) -> bool:
    return (
        content_type.startswith("image/")
        or content_type.startswith("text/")
        or content_type == "application/pdf"
    )


def decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ExtractionError("File is not valid UTF-8 text", status_code=422) from e


async def extract_text(
    data: bytes,
    content_type: Optional[str],
    filename: str,
    provider: OCRProvider,
) -> str:
    """
    Extract source text from an uploaded document.

    Args:
        data: Uploaded file bytes
        content_type: Declared MIME type, may be empty
        filename: Uploaded file name
        provider: OCR provider for images and PDFs

    Returns:
        Extracted text, unmodified

    Raises:
        ExtractionError: If the file is empty, too large, of an unsupported
            type, or yields no readable text
    """
    if not data:
        raise ExtractionError("Uploaded file is empty", status_code=400)

    if len(data) > settings.MAX_UPLOAD_SIZE:
        raise ExtractionError(
            f"File exceeds {settings.MAX_UPLOAD_SIZE} bytes",
            status_code=413,
        )

    mime_type = resolve_content_type(content_type, filename)
    if not is_supported_type(mime_type):
        logger.warning(f"Rejected upload '{filename}' with type '{mime_type}'")
        raise ExtractionError(UNSUPPORTED_TYPE_MESSAGE, status_code=415)

    if mime_type.startswith("text/"):
        text = decode_text(data)
    else:
        text = await provider.extract(data, mime_type)

    if not text.strip():
        raise ExtractionError(NO_CODE_MESSAGE, status_code=422)

    logger.info(f"Extracted {len(text)} characters from {filename}")
    return text
