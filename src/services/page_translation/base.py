"""Page Translation Protocol

교체 가능한 페이지 번역 구현과 게이트웨이 에러 정의.
"""

from typing import ClassVar, Protocol

from src.constants import ErrorMessage
from src.schemas.page import ErrorResponse, PageTranslateRequest, PageTranslationResult


class PageTranslationError(Exception):
    """페이지 번역 게이트웨이 에러

    서브클래스별로 HTTP 상태 코드와 클라이언트 메시지가 고정됨:
    - ConfigurationError: API 키 없음 (500)
    - ClientInputError: 이미지 없음 (400)
    - UpstreamServiceError: Gemini 호출 실패 (500, details 포함)
    - UpstreamEmptyResponseError: candidates 없음 (500)
    - UnexpectedFormatError: text part 없음 (500)
    - MalformedPayloadError: text가 올바른 JSON 객체가 아님 (500)
    """

    status_code: ClassVar[int] = 500
    message: ClassVar[str] = ErrorMessage.UNEXPECTED

    def __init__(self, details: str | None = None):
        self.details = details
        super().__init__(self.message if details is None else f"{self.message}: {details}")

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.message, details=self.details)


class ConfigurationError(PageTranslationError):
    message = ErrorMessage.CONFIGURATION


class ClientInputError(PageTranslationError):
    status_code = 400
    message = ErrorMessage.NO_IMAGE


class UpstreamServiceError(PageTranslationError):
    message = ErrorMessage.UPSTREAM


class UpstreamEmptyResponseError(PageTranslationError):
    message = ErrorMessage.UPSTREAM_EMPTY


class UnexpectedFormatError(PageTranslationError):
    message = ErrorMessage.UNEXPECTED_FORMAT


class MalformedPayloadError(PageTranslationError):
    message = ErrorMessage.MALFORMED_PAYLOAD


class PageTranslator(Protocol):
    """페이지 이미지 → 원문/번역문 인터페이스

    구현체:
    - GeminiPageTranslation: Google Gemini API
    """

    @property
    def is_configured(self) -> bool:
        """외부 서비스 자격 증명이 설정되어 있는지"""
        ...

    def translate(self, request: PageTranslateRequest) -> PageTranslationResult:
        """페이지 이미지에서 텍스트를 추출하고 번역

        Raises:
            PageTranslationError: 설정 누락, 외부 호출 실패, 응답 형식 오류 등
        """
        ...
