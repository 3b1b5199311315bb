"""
Master CSV list endpoints.

The office uploads the company master list; the web form reads it back
as JSON rows for autocomplete.
"""

import hmac

from fastapi import APIRouter, Depends, File, Header, HTTPException, UploadFile, status

from src.api.dependencies import get_app_settings, get_master_list_store
from src.application.dto.responses import CsvDataResponse, CsvUploadResponse, ErrorResponse
from src.config import Settings
from src.core.exceptions import FileTooLargeError, UploadForbiddenError
from src.core.interfaces import ICsvStore

router = APIRouter(prefix="/api", tags=["csv"])


def _check_upload_secret(provided: str | None, expected: str) -> None:
    # An unset secret locks uploads rather than opening them
    if not expected or not provided:
        raise UploadForbiddenError()
    if not hmac.compare_digest(provided.encode(), expected.encode()):
        raise UploadForbiddenError()


@router.post(
    "/upload-csv",
    response_model=CsvUploadResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
    },
)
async def upload_csv(
    file: UploadFile | None = File(default=None),
    x_upload_secret: str | None = Header(default=None),
    settings: Settings = Depends(get_app_settings),
    store: ICsvStore = Depends(get_master_list_store),
) -> CsvUploadResponse:
    """Replace the master CSV. Requires the ``x-upload-secret`` header."""
    _check_upload_secret(x_upload_secret, settings.proxy.upload_secret)

    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded",
        )

    max_size = settings.storage.max_upload_size
    content = await file.read(max_size + 1)
    filename = file.filename or "upload.csv"

    if len(content) > max_size:
        raise FileTooLargeError(filename, len(content), max_size)
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Uploaded file '{filename}' is empty",
        )

    path = await store.save_upload(content)
    return CsvUploadResponse(path=path)


@router.get(
    "/csv-data",
    response_model=CsvDataResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def csv_data(
    store: ICsvStore = Depends(get_master_list_store),
) -> CsvDataResponse:
    """Return the master CSV as a list of header-keyed rows."""
    rows = await store.read_rows()
    return CsvDataResponse(rows=rows)
