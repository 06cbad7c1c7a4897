from collections.abc import Generator
from io import BytesIO
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from google.genai import types
from PIL import Image

from src.main import app
from src.schemas.page import PageTranslateRequest, PageTranslationResult
from src.services.page_translation import set_page_translation
from src.services.page_translation.gemini import GeminiPageTranslation

GEMINI_MODULE = "src.services.page_translation.gemini"


def make_test_image(width: int = 600, height: int = 800, fmt: str = "JPEG") -> BytesIO:
    """테스트용 실제 이미지 바이트 생성"""
    img = Image.new("RGB", (width, height), color="white")
    buf = BytesIO()
    img.save(buf, format=fmt)
    buf.seek(0)
    return buf


def make_gemini_response(*parts: types.Part) -> types.GenerateContentResponse:
    """candidate 1개짜리 Gemini 응답 (parts 없으면 candidates 빈 리스트)"""
    if not parts:
        return types.GenerateContentResponse(candidates=[])
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


class MockPageTranslator:
    def __init__(
        self,
        result: PageTranslationResult | None = None,
        error: Exception | None = None,
        configured: bool = True,
    ) -> None:
        self.result = result or PageTranslationResult(original_text="Bonjour", translated_text="Hello")
        self.error = error
        self.configured = configured
        self.requests: list[PageTranslateRequest] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    def translate(self, request: PageTranslateRequest) -> PageTranslationResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    yield TestClient(app)
    set_page_translation(None)


@pytest.fixture
def mock_translator() -> Generator[MockPageTranslator, None, None]:
    translator = MockPageTranslator()
    set_page_translation(translator)
    yield translator
    set_page_translation(None)


@pytest.fixture
def mock_genai() -> Generator[MagicMock, None, None]:
    """실제 GeminiPageTranslation + genai.Client mock

    사용법:
        mock_genai.Client.return_value.models.generate_content.return_value = make_gemini_response(...)
    """
    set_page_translation(GeminiPageTranslation(api_key="test-key", model="test-model"))
    with patch(f"{GEMINI_MODULE}.genai") as mocked:
        yield mocked
    set_page_translation(None)
