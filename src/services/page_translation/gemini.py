"""Gemini 기반 페이지 번역 구현체"""

# pyright: reportMissingTypeStubs=false

import json
import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from src.schemas.page import PageTranslateRequest, PageTranslationResult
from src.services.page_translation.base import (
    ConfigurationError,
    MalformedPayloadError,
    UnexpectedFormatError,
    UpstreamEmptyResponseError,
    UpstreamServiceError,
)

logger = logging.getLogger(__name__)

PAGE_TRANSLATE_PROMPT = """You are a translation assistant.

1. Extract all clearly legible text from the image of a printed magazine page.
2. Keep the original text exactly as it appears (including line breaks where sensible).
3. Translate that text into the target language: "{target_language}".

Return ONLY valid JSON in this exact shape:

{{
  "originalText": "full original text here",
  "translatedText": "full translated text here"
}}"""


def build_prompt(target_language: str) -> str:
    """목표 언어 값을 그대로 넣은 지시문"""
    return PAGE_TRANSLATE_PROMPT.format(target_language=target_language)


class GeminiPageTranslation:
    """Google Gemini API를 사용한 페이지 텍스트 추출 + 번역

    요청마다 새 호출 1회. 재시도/캐시 없음.
    """

    def __init__(self, api_key: str, model: str, timeout: int = 60) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._client: genai.Client | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def translate(self, request: PageTranslateRequest) -> PageTranslationResult:
        """이미지 1장을 한 번의 API 호출로 추출/번역

        Raises:
            ConfigurationError: API 키 누락
            UpstreamServiceError: API 에러 응답, 타임아웃, 연결 실패
            UpstreamEmptyResponseError: candidates 없음
            UnexpectedFormatError: text part 없음
            MalformedPayloadError: text가 JSON 객체가 아님
        """
        if not self.is_configured:
            logger.error("GEMINI_API_KEY가 설정되지 않았습니다")
            raise ConfigurationError()

        response = self._call_gemini(self._get_client(), request)
        text = self._first_text(response)
        return self._parse_payload(text)

    def _get_client(self) -> genai.Client:
        """첫 호출 시 생성 후 재사용 (httpx 커넥션 풀 공유)"""
        if self._client is None:
            self._client = genai.Client(
                api_key=self._api_key,
                http_options=types.HttpOptions(timeout=self._timeout * 1000),
            )
        return self._client

    def _build_contents(self, request: PageTranslateRequest) -> list[types.Content]:
        return [
            types.Content(
                role="user",
                parts=[
                    types.Part.from_text(text=build_prompt(request.target_language)),
                    types.Part.from_bytes(data=request.image_bytes, mime_type=request.mime_type),
                ],
            )
        ]

    def _call_gemini(
        self, client: genai.Client, request: PageTranslateRequest
    ) -> types.GenerateContentResponse:
        try:
            return client.models.generate_content(
                model=self._model,
                contents=self._build_contents(request),
                config=types.GenerateContentConfig(response_mime_type="application/json"),
            )
        except errors.APIError as e:
            body = _error_body(e)
            logger.error(f"Gemini 에러 응답: {e.code} {body}")
            raise UpstreamServiceError(details=body) from e
        except httpx.TimeoutException as e:
            logger.error(f"Gemini 호출 타임아웃 ({self._timeout}s): {e}")
            raise UpstreamServiceError(
                details=f"Gemini request timed out after {self._timeout}s"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini 연결 실패: {e}")
            raise UpstreamServiceError(details=str(e)) from e

    def _first_text(self, response: types.GenerateContentResponse) -> str:
        candidates = response.candidates or []
        if not candidates:
            logger.error(f"Gemini 응답에 candidates 없음: {_dump(response)}")
            raise UpstreamEmptyResponseError()

        content = candidates[0].content
        parts = (content.parts if content else None) or []
        for part in parts:
            if part.text:
                return part.text

        logger.error(f"Gemini 응답에 text part 없음: {_dump(response)}")
        raise UnexpectedFormatError()

    def _parse_payload(self, text: str) -> PageTranslationResult:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Gemini JSON 파싱 실패: {text}")
            raise MalformedPayloadError() from e

        if not isinstance(payload, dict):
            logger.error(f"Gemini 응답이 객체가 아님 ({type(payload).__name__}): {text}")
            raise MalformedPayloadError()

        return PageTranslationResult(
            original_text=_text_field(payload, "originalText", text),
            translated_text=_text_field(payload, "translatedText", text),
        )


def _text_field(payload: dict[str, Any], key: str, raw: str) -> str:
    """빈 값/누락은 빈 문자열, 문자열이 아닌 값은 파싱 실패로 처리"""
    value = payload.get(key)
    if not value:
        return ""
    if not isinstance(value, str):
        logger.error(f"Gemini 응답 {key} 타입 오류 ({type(value).__name__}): {raw}")
        raise MalformedPayloadError()
    return value


def _error_body(error: errors.APIError) -> str:
    """업스트림 에러 응답 본문 (원문 텍스트 우선)"""
    if isinstance(error.response, httpx.Response):
        try:
            return error.response.text
        except httpx.ResponseNotRead:
            pass
    if isinstance(error.details, str):
        return error.details
    return json.dumps(error.details, ensure_ascii=False)


def _dump(response: types.GenerateContentResponse) -> str:
    return response.model_dump_json(exclude_none=True)
