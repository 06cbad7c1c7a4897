"""Translate 서비스: 업로드된 페이지 이미지 → 원문/번역문

전제 조건 검사 순서:
1. 자격 증명 설정 여부 (폼 본문을 읽기 전)
2. image 필드 존재 및 비어있지 않음
"""

import asyncio
import logging

from fastapi import Request
from starlette.datastructures import UploadFile

from src.constants import Defaults, FormField
from src.schemas.page import PageTranslateRequest, PageTranslationResult
from src.services.page_translation import PageTranslator
from src.services.page_translation.base import ClientInputError, ConfigurationError

logger = logging.getLogger(__name__)


async def _read_submission(req: Request) -> PageTranslateRequest:
    """multipart 폼 → PageTranslateRequest

    Raises:
        ClientInputError: image 누락, 파일이 아님, 빈 파일
    """
    async with req.form() as form:
        image = form.get(FormField.IMAGE)
        if not isinstance(image, UploadFile):
            raise ClientInputError()

        image_bytes = await image.read()
        if not image_bytes:
            raise ClientInputError()

        target_lang = form.get(FormField.TARGET_LANG)
        if not isinstance(target_lang, str) or not target_lang:
            target_lang = Defaults.TARGET_LANGUAGE

        return PageTranslateRequest(
            image_bytes=image_bytes,
            mime_type=image.content_type or Defaults.MIME_TYPE,
            target_language=target_lang,
        )


async def translate_page(req: Request, translator: PageTranslator) -> PageTranslationResult:
    """페이지 이미지 추출/번역

    Raises:
        PageTranslationError: 모든 게이트웨이 에러 (서브클래스로 구분)
    """
    if not translator.is_configured:
        logger.error("GEMINI_API_KEY가 설정되지 않았습니다")
        raise ConfigurationError()

    request = await _read_submission(req)

    # 외부 SDK 호출은 동기 - 이벤트 루프 블로킹 방지
    result = await asyncio.to_thread(translator.translate, request)

    logger.info(
        f"페이지 번역 완료 (target={request.target_language}, "
        f"{len(request.image_bytes)} bytes, {request.mime_type})"
    )
    return result
