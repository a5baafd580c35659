"""
Gemini provider for transcribing code from images and PDFs.
"""
from __future__ import annotations

import asyncio
import re
from typing import Optional

import httpx
from google import genai
from google.genai import errors, types
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.config import settings, logger
from app.extraction import ExtractionError


OCR_INSTRUCTION = """You transcribe source code from images and documents.

## Rules:
1. Return ONLY the code text exactly as it appears, preserving indentation
2. Do not explain, summarize, translate or fix the code
3. Do not wrap the output in markdown code fences
4. If the document contains no readable code or text, return an empty response
"""

_FENCE_PATTERN = re.compile(r"^```[\w+-]*\s*\n(.*?)\n?```\s*$", re.DOTALL)


class GeminiOCRProvider:
    """
    Gemini multimodal provider used as the OCR engine.
    """

    def __init__(self):
        self._client: Optional[genai.Client] = None
        self._model = settings.GEMINI_MODEL
        self._initialize()

    def _initialize(self) -> None:
        """Initialize Gemini client."""
        if not settings.GEMINI_API_KEY:
            logger.warning("Gemini API key not configured - image/PDF extraction disabled")
            return

        try:
            self._client = genai.Client(api_key=settings.GEMINI_API_KEY)
            logger.info(f"Gemini OCR client initialized with model: {self._model}")
        except Exception as e:
            logger.error(f"Failed to initialize Gemini client: {e}")

    def is_available(self) -> bool:
        """Check if provider is available."""
        return self._client is not None

    def get_model_name(self) -> str:
        """Get model name."""
        return self._model

    @staticmethod
    def _strip_fences(text: str) -> str:
        """Remove a markdown code block wrapped around the whole answer."""
        text = text.strip()
        match = _FENCE_PATTERN.match(text)
        if match:
            return match.group(1)
        return text

    @retry(
        stop=stop_after_attempt(settings.OCR_MAX_RETRIES),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type((errors.ServerError, httpx.TimeoutException, httpx.NetworkError)),
        reraise=True,
    )
    async def _generate(self, data: bytes, mime_type: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=[
                types.Content(
                    role="user",
                    parts=[
                        types.Part.from_bytes(data=data, mime_type=mime_type),
                        types.Part(text="Transcribe the code in this document."),
                    ],
                )
            ],
            config=types.GenerateContentConfig(
                system_instruction=OCR_INSTRUCTION,
                temperature=0.0,
            ),
        )
        return response.text or ""

    async def extract(self, data: bytes, mime_type: str) -> str:
        """
        Transcribe text from an image or PDF.

        Args:
            data: Raw document bytes
            mime_type: Document MIME type (image/* or application/pdf)

        Returns:
            Transcribed text, possibly empty

        Raises:
            ExtractionError: If the provider is unavailable or the call fails
        """
        if not self._client:
            raise ExtractionError(
                "Image and PDF extraction unavailable. Please check API key configuration.",
                status_code=503,
            )

        try:
            text = await asyncio.wait_for(
                self._generate(data, mime_type),
                timeout=settings.OCR_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Gemini OCR timeout after {settings.OCR_TIMEOUT_SECONDS}s")
            raise ExtractionError(
                f"Text extraction timed out after {settings.OCR_TIMEOUT_SECONDS}s",
                status_code=504,
            ) from e
        except (errors.APIError, httpx.HTTPError) as e:
            logger.error(f"Gemini OCR error: {e}")
            raise ExtractionError("Failed to extract text from image", status_code=502) from e

        logger.debug(f"Raw OCR response: {text[:500]}...")
        return self._strip_fences(text)


# Global provider instance
ocr_provider = GeminiOCRProvider()
