"""
FastAPI Application Entry Point.

Document Conflict Checker API.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from app.config import get_settings
from conflict_checker.comparison.comparator import SentenceComparator
from conflict_checker.comparison.multi_doc import InsufficientDocumentsError, compare_documents
from conflict_checker.comparison.schemas import DocumentText
from conflict_checker.ingestion.extractor import extract_text
from conflict_checker.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)
settings = get_settings()

VERSION = "0.1.0"
UPLOAD_CHUNK_BYTES = 64 * 1024


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    setup_logging(settings.log_level)
    logger.info("Starting Conflict Checker API...")
    logger.info(
        f"Thresholds: match={settings.match_threshold}, "
        f"conflict={settings.conflict_threshold}, "
        f"min_sentence_length={settings.min_sentence_length}"
    )
    yield
    logger.info("Shutting down Conflict Checker API...")


app = FastAPI(
    title="Document Conflict Checker",
    description="Sentence-level detection of contradictions, overlaps and unique statements between documents",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CompareRequest(BaseModel):
    """Two already-extracted texts to compare."""

    text_a: str = Field(..., description="Text of document A")
    text_b: str = Field(..., description="Text of document B")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


@app.get("/config")
async def get_config() -> dict[str, float | int]:
    """Get the active comparison policy."""
    return {
        "match_threshold": settings.match_threshold,
        "conflict_threshold": settings.conflict_threshold,
        "min_sentence_length": settings.min_sentence_length,
        "max_upload_bytes": settings.max_upload_bytes,
    }


@app.post("/compare")
def compare_texts(request: CompareRequest) -> dict[str, Any]:
    """
    Compare two plain-text documents sentence by sentence.

    Returns the comparison report with conflicts, unique sentences and
    the number of matching sentences.
    """
    comparator = SentenceComparator(settings.thresholds())
    report = comparator.compare(request.text_a, request.text_b)

    return {
        "status": "success",
        "summary": report.to_summary(),
        **report.model_dump(mode="json"),
    }


async def _read_limited(upload: UploadFile, name: str, limit: int) -> bytes:
    """
    Read an upload, refusing it once it grows past ``limit`` bytes.

    The declared size is checked first, then the body is read in chunks so
    an oversized file is never held in memory whole.
    """
    too_large = HTTPException(
        status_code=413,
        detail=f"Document '{name}' exceeds {limit} bytes",
    )
    if upload.size is not None and upload.size > limit:
        raise too_large

    chunks: list[bytes] = []
    received = 0
    while True:
        chunk = await upload.read(UPLOAD_CHUNK_BYTES)
        if not chunk:
            break
        received += len(chunk)
        if received > limit:
            raise too_large
        chunks.append(chunk)
    return b"".join(chunks)


@app.post("/compare/documents")
async def compare_uploaded_documents(
    files: list[UploadFile] = File(...),
) -> dict[str, Any]:
    """
    Compare two or more uploaded text documents pairwise.

    Unsupported or empty files are skipped; at least two usable
    documents are required.
    """
    logger.info(f"Received {len(files)} documents for comparison")

    documents: list[DocumentText] = []
    for upload in files:
        name = upload.filename or "untitled"
        content = await _read_limited(upload, name, settings.max_upload_bytes)
        documents.append(
            DocumentText(name=name, text=extract_text(name, content, upload.content_type))
        )

    try:
        result = await run_in_threadpool(compare_documents, documents, settings.thresholds())
    except InsufficientDocumentsError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "status": "success",
        "summary": result.to_summary(),
        "total_conflicts": result.total_conflicts,
        "total_matches": result.total_matches,
        **result.model_dump(mode="json"),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
