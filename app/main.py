"""
FastAPI application for the Complexity Analyzer.
"""
from __future__ import annotations

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, FastAPI, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings, logger
from app.extraction import ExtractionError, OCRProvider, extract_text
from app.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    ExtractResponse,
)
from app.ocr_provider import ocr_provider
from complexity import classify


def get_ocr_provider() -> OCRProvider:
    """Dependency hook for the OCR provider."""
    return ocr_provider


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

analysis_router = APIRouter()


@analysis_router.post("/analyze", response_model=AnalyzeResponse, responses={
    422: {"model": ErrorResponse},
})
async def analyze_code(request: AnalyzeRequest):
    """
    Analyze code complexity.

    Returns the estimated time and space bounds with equations, a step by
    step derivation, confidence, assumptions and the analysis method.
    """
    request_id = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    start_time = time.time()

    logger.info(f"[{request_id}] REQUEST RECEIVED - Code length: {len(request.code)} chars")

    result = await run_in_threadpool(classify, request.code)

    elapsed_time = time.time() - start_time
    logger.info(
        f"[{request_id}] REQUEST COMPLETED - Time taken: {elapsed_time:.3f}s - "
        f"Result: {result.timeComplexity.bigO} (confidence {result.confidence:.2f})"
    )

    return AnalyzeResponse(success=True, result=result)


@analysis_router.post("/extract", response_model=ExtractResponse, responses={
    400: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    415: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
    504: {"model": ErrorResponse},
})
async def extract_code(
    file: UploadFile = File(..., description="Image, PDF, or text file containing code"),
    provider: OCRProvider = Depends(get_ocr_provider),
):
    """
    Extract source code from an uploaded document.

    The extracted text is returned for review; it is not analyzed here.
    """
    filename = file.filename or "upload"
    # One byte past the limit is enough for extract_text to report 413
    data = await file.read(settings.MAX_UPLOAD_SIZE + 1)

    code = await extract_text(
        data=data,
        content_type=file.content_type,
        filename=filename,
        provider=provider,
    )

    return ExtractResponse(success=True, code=code, filename=filename, characters=len(code))


health_router = APIRouter()


@health_router.get("/health")
async def health(provider: OCRProvider = Depends(get_ocr_provider)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": __version__,
        "ocr": "ok" if provider.is_available() else "unavailable",
        "ocr_configured": settings.ocr_enabled,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ---------------------------------------------------------------------------
# FastAPI app assembly
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info(f"Complexity Analyzer v{__version__} starting...")
    logger.info(f"Server: {settings.HOST}:{settings.PORT}")

    if ocr_provider.is_available():
        logger.info(f"OCR provider ready (model: {ocr_provider.get_model_name()})")
    elif settings.ocr_enabled:
        logger.error("Gemini API key is set but the OCR client failed to initialize")
    else:
        logger.warning("OCR provider not available - only text uploads can be extracted")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="Complexity Analyzer API",
    description="Heuristic time and space complexity analysis with derivations",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)


@app.exception_handler(ExtractionError)
async def extraction_exception_handler(request: Request, exc: ExtractionError):
    logger.warning(f"Extraction failed on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": "extraction_failed", "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log validation errors without echoing submitted code."""
    error_details = [
        {"field": err.get("loc", [])[-1] if err.get("loc") else "unknown", "type": err.get("type")}
        for err in exc.errors()[:5]
    ]
    logger.warning(f"Validation error on {request.method} {request.url.path}: {error_details}")
    return JSONResponse(
        status_code=422,
        content={"success": False, "error": "invalid_request", "message": "Invalid request format"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {str(exc)[:200]}"
    )
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "internal_error", "message": "Internal server error"},
    )


cors_origins = settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.get("/")
async def root(provider: OCRProvider = Depends(get_ocr_provider)):
    """Root endpoint."""
    return {
        "name": "Complexity Analyzer API",
        "version": __version__,
        "ocr": "ok" if provider.is_available() else "unavailable",
        "endpoints": {
            "/api/v1/analyze": "POST - Analyze code complexity (input: code)",
            "/api/v1/extract": "POST - Extract code from an image, PDF, or text file",
            "/api/v1/health": "GET - Health check",
        },
    }


app.include_router(health_router, prefix="/api/v1", tags=["health"])
app.include_router(analysis_router, prefix="/api/v1", tags=["analysis"])
app.include_router(health_router, tags=["health-compat"])
app.include_router(analysis_router, tags=["analysis-compat"])
