"""Page Translation 모듈

사용법:
    from src.services.page_translation import get_page_translation

    translator = get_page_translation()
    result = translator.translate(request)

백엔드 선택 (.env TRANSLATION_PROVIDER):
    - "gemini": Google Gemini API (기본값)
"""

from src.config import get_settings
from src.services.page_translation.base import PageTranslationError, PageTranslator
from src.services.page_translation.gemini import GeminiPageTranslation

__all__ = [
    "PageTranslator",
    "PageTranslationError",
    "get_page_translation",
    "set_page_translation",
]

_translator: PageTranslator | None = None


def get_page_translation() -> PageTranslator:
    """설정에 따라 page translation 백엔드 반환"""
    global _translator
    if _translator is None:
        settings = get_settings()
        if settings.translation_provider == "gemini":
            _translator = GeminiPageTranslation(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model,
                timeout=settings.gemini_timeout,
            )
        else:
            raise ValueError(f"Unknown translation provider: {settings.translation_provider!r}")
    return _translator


def set_page_translation(translator: PageTranslator | None) -> None:
    """page translation 백엔드 설정 (테스트용)"""
    global _translator
    _translator = translator
