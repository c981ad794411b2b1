"""
PDF text extraction using `pypdf`.

Notes:
- This extracts embedded text. Scanned PDFs need OCR, which is out of scope.
- Extracted text is normalized the same way request strings are.
"""

import io
import logging
from dataclasses import dataclass

from pypdf import PdfReader

from contract_api.shared.errors.types import AppError
from contract_api.shared.sanitization import normalize_text

logger = logging.getLogger(__name__)

PDF_TEXT_SOURCE = "PDF_TEXT"
HTTP_422 = 422
INVALID_DOCUMENT = "INVALID_DOCUMENT"


@dataclass(frozen=True)
class PdfTextResult:
    """Normalized text of a PDF and facts about it.

    Attributes:
        text: Whitespace-normalized text of every page, in order.
        pages: Number of pages in the document.
        characters: Length of `text`.
        source: Where the text came from (always "PDF_TEXT").
    """

    text: str
    pages: int
    characters: int
    source: str = PDF_TEXT_SOURCE


def extract_pdf_text(data: bytes) -> PdfTextResult:
    """Extract and normalize the embedded text of a PDF document.

    Args:
        data: Raw bytes of the PDF file.

    Returns:
        The normalized text with page and character counts.

    Raises:
        AppError: The bytes are not a readable PDF (422).
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        raw_pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        raise AppError(
            "Could not read PDF (file may be corrupted or unsupported).",
            HTTP_422,
            code=INVALID_DOCUMENT,
        ) from e

    text = normalize_text("\n".join(raw_pages))
    logger.info("Extracted %d characters from %d PDF pages", len(text), len(raw_pages))
    return PdfTextResult(text=text, pages=len(raw_pages), characters=len(text))
