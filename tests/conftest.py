import pytest

from app.extraction import ExtractionError


class FakeOCRProvider:
    def __init__(self, text: str = "", error: ExtractionError | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[bytes, str]] = []

    def is_available(self) -> bool:
        return True

    async def extract(self, data: bytes, mime_type: str) -> str:
        self.calls.append((data, mime_type))
        if self.error:
            raise self.error
        return self.text


@pytest.fixture
def fake_ocr() -> FakeOCRProvider:
    return FakeOCRProvider(text="def area(r):\n    return 3.14 * r * r\n")


@pytest.fixture
def make_ocr():
    return FakeOCRProvider
