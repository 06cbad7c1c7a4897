"""페이지 번역 데이터 모델

요청 1건 안에서 생성되고 버려지는 값들. 저장되지 않음.
"""

from pydantic import BaseModel, Field

from src.constants import Defaults
from src.schemas.base import BaseSchema


class PageTranslateRequest(BaseModel):
    """촬영된 페이지 이미지 + 목표 언어"""

    image_bytes: bytes = Field(min_length=1)
    mime_type: str = Defaults.MIME_TYPE
    target_language: str = Defaults.TARGET_LANGUAGE


class PageTranslationResult(BaseSchema):
    """추출된 원문과 번역문 (클라이언트에 반환되는 유일한 성공 응답)"""

    original_text: str = ""
    translated_text: str = ""


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
