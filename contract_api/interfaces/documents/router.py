"""
FastAPI router for document uploads.

Extracts normalized text from uploaded PDFs. The upload must declare the
application/pdf content type and stay under the configured size limit.

FastAPI reads the multipart form before the heavy rate limit is checked,
so only requests with a valid form are counted against it. The form parser
spools the upload to a temporary file, and `read_upload_bytes` stops
reading once the size limit is passed.
"""

from fastapi import APIRouter, File, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from contract_api.core.config import settings
from contract_api.infrastructure.documents.pdf_text_extractor import extract_pdf_text
from contract_api.shared.errors.types import AppError
from contract_api.shared.responses import ErrorEnvelope, SuccessEnvelope, build_success
from contract_api.shared.routing import SanitizingRoute
from contract_api.shared.security.rate_limiting import limiter
from contract_api.shared.validation import validate_mime_type

PDF_MIME_TYPE = "application/pdf"
READ_CHUNK_BYTES = 1024 * 1024  # 1 MiB
HTTP_413 = 413

router = APIRouter(prefix="/documents", tags=["documents"], route_class=SanitizingRoute)


async def read_upload_bytes(file: UploadFile, max_bytes: int) -> bytes:
    """Read the upload into memory, enforcing a maximum size."""
    buf = bytearray()
    while True:
        chunk = await file.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        buf.extend(chunk)
        if len(buf) > max_bytes:
            raise AppError(
                f"File too large. Max is {max_bytes} bytes.", HTTP_413, code="FILE_TOO_LARGE"
            )
    return bytes(buf)


@router.post(
    "/pdf-text",
    response_model=SuccessEnvelope[dict[str, str]],
    responses={
        400: {"model": ErrorEnvelope},
        413: {"model": ErrorEnvelope},
        422: {"model": ErrorEnvelope},
    },
    summary="Extract PDF text",
    description="Return the whitespace-normalized text of an uploaded PDF.",
)
@limiter.limit(settings.rate_limit_heavy)
async def extract_text(request: Request, file: UploadFile = File(...)) -> SuccessEnvelope:
    """Extract text from an uploaded PDF file."""
    validate_mime_type(file.content_type, PDF_MIME_TYPE)
    data = await read_upload_bytes(file, settings.max_upload_bytes)
    result = await run_in_threadpool(extract_pdf_text, data)
    return build_success(
        {"text": result.text},
        {"pages": result.pages, "characters": result.characters, "source": result.source},
    )
