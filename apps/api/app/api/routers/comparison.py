"""Hashing and comparison endpoints for uploaded GeoJSON files."""

from __future__ import annotations

import asyncio
import logging
from typing import Literal

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status
from pydantic import BaseModel

from apps.api.app.core.config import get_settings
from apps.api.app.services.audit import log_structured_event
from geojson_compare.comparison import compare
from geojson_compare.digest import digest
from geojson_compare.errors import DigestError, IntakeError
from geojson_compare.intake import LoadedPayload, load_payload
from geojson_compare.summary import format_file_size, summarize

router = APIRouter(tags=["comparison"])

_logger = logging.getLogger("geojson_compare.api")

COMPARE_FAILED_DETAIL = "Error comparing files. Please try again."
HASH_FAILED_DETAIL = "Error generating hashes. Please try again."


class HashResponse(BaseModel):
    filename: str
    digest: str
    size: int
    byte_size: int
    display_size: str
    geojson_type: str | None


class SummaryResponse(BaseModel):
    verdict: Literal["identical", "hash_match", "different"]
    message: str


class CompareResponse(BaseModel):
    filename1: str
    filename2: str
    hashes_match: bool
    content_match: bool
    digest1: str
    digest2: str
    size1: int
    size2: int
    byte_size1: int
    byte_size2: int
    display_size1: str
    display_size2: str
    differences: list[str] | None
    summary: SummaryResponse


async def _load_upload(upload: UploadFile, *, field: str) -> LoadedPayload:
    settings = get_settings()
    content = await upload.read()
    if settings.max_upload_bytes and len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail={
                "code": "upload_too_large",
                "file": field,
                "message": f"file exceeds {format_file_size(settings.max_upload_bytes)}",
            },
        )
    try:
        return load_payload(
            upload.filename or "",
            content,
            extensions=settings.extension_list(),
            validate=settings.validate_geojson_uploads,
        )
    except IntakeError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"code": "invalid_upload", "file": field, "message": str(exc)},
        ) from exc


@router.post("/hash", response_model=HashResponse)
async def hash_file(file: UploadFile = File(...)) -> HashResponse:
    """Return the SHA-256 digest of one uploaded file's decoded text."""
    payload = await _load_upload(file, field="file")
    try:
        value = await asyncio.to_thread(digest, payload.content)
    except DigestError as exc:
        _logger.error("digest failed for %s: %s", payload.filename, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=HASH_FAILED_DETAIL
        ) from exc
    return HashResponse(
        filename=payload.filename,
        digest=value,
        size=len(payload.content),
        byte_size=payload.byte_size,
        display_size=format_file_size(payload.byte_size),
        geojson_type=payload.geojson_type,
    )


@router.post("/compare", response_model=CompareResponse)
async def compare_files(
    request: Request,
    file1: UploadFile = File(...),
    file2: UploadFile = File(...),
) -> CompareResponse:
    """Compare two uploaded files by digest, exact text and JSON structure."""
    first = await _load_upload(file1, field="file1")
    second = await _load_upload(file2, field="file2")

    try:
        result = await compare(first.content, second.content)
    except DigestError as exc:
        _logger.error("comparison failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=COMPARE_FAILED_DETAIL
        ) from exc

    summary = summarize(result)
    log_structured_event(
        "comparison_completed",
        request_id=getattr(request.state, "request_id", None),
        verdict=summary.verdict,
        digest1=result.digest1,
        digest2=result.digest2,
        byte_size1=result.byte_size1,
        byte_size2=result.byte_size2,
        difference_count=len(result.differences or ()),
    )

    return CompareResponse(
        filename1=first.filename,
        filename2=second.filename,
        hashes_match=result.hashes_match,
        content_match=result.content_match,
        digest1=result.digest1,
        digest2=result.digest2,
        size1=result.size1,
        size2=result.size2,
        byte_size1=result.byte_size1,
        byte_size2=result.byte_size2,
        display_size1=format_file_size(result.byte_size1),
        display_size2=format_file_size(result.byte_size2),
        differences=list(result.differences) if result.differences is not None else None,
        summary=SummaryResponse(verdict=summary.verdict, message=summary.message),
    )
