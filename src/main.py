from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.config import get_settings
from src.routes.translate import router as translate_router

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title="Magazine Snap Translate")

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
    max_age=600,
)

app.include_router(translate_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# 라우트 등록 이후에 마운트 ("/" 는 모든 경로와 매칭됨)
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
