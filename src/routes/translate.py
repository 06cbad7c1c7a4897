"""Translate API 라우트

페이지 사진 → 원문 추출 + 번역 엔드포인트.

모든 종료 경로에서 JSON 본문을 보장: 게이트웨이 에러는 고정 메시지/상태로,
그 외 예외는 500 "Unexpected server error"로 변환.
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from src.constants import ErrorMessage
from src.schemas.page import ErrorResponse, PageTranslationResult
from src.services import translate as translate_service
from src.services.page_translation import PageTranslationError, get_page_translation

router = APIRouter(prefix="/api/translate", tags=["translate"])
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=PageTranslationResult,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def translate_page(req: Request) -> JSONResponse:
    """페이지 이미지 추출/번역 (multipart: image, targetLang)"""
    try:
        result = await translate_service.translate_page(req, get_page_translation())
    except PageTranslationError as e:
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_response().model_dump(exclude_none=True),
        )
    except Exception as e:
        logger.exception(f"/api/translate 처리 중 예상치 못한 에러: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=ErrorMessage.UNEXPECTED).model_dump(exclude_none=True),
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=result.model_dump(by_alias=True))
