import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .models import (
    ImageParseRequest,
    ParsedCreative,
    RefineRequest,
    RefineResponse,
    SuggestionRequest,
    SuggestionResponse,
)
from .services.image import ImageError, prepare_image
from .services.llm import GeminiClient, get_llm
from .services.orchestrator import parse_creative_image, request_suggestions
from .services.refine import refine_headlines

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


# refine_headlines is idempotent only for colon-free keywords
COLON_KEYWORD = "newKeyword must not contain a colon"


setup_logging(settings.log_level)

app = FastAPI(title="SEOGen")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s body: %s", request.url.path, exc.errors())
    return _error("Invalid request body", 400)


@app.get("/")
def health():
    return {"ok": True, "model": settings.gemini_model, "mock": settings.mock_mode}


@app.post("/api/get-suggestions", response_model=SuggestionResponse)
def get_suggestions(body: SuggestionRequest, llm: Optional[GeminiClient] = Depends(get_llm)):
    if not body.description or not body.primary_keyword or body.relevant_keywords is None:
        return _error("Missing required fields", 400)
    if body.new_keyword and ":" in body.new_keyword:
        return _error(COLON_KEYWORD, 400)

    try:
        suggestions = request_suggestions(
            body.description,
            body.primary_keyword,
            body.relevant_keywords,
            body.creative_context,
            client=llm,
        )
        if body.new_keyword and body.new_keyword.strip():
            suggestions.headlines = refine_headlines(suggestions.headlines, body.new_keyword)
        return suggestions
    except Exception:
        logger.exception("get-suggestions failed")
        return _error("Failed to generate suggestions", 500)


@app.post("/api/refine-headlines", response_model=RefineResponse)
def refine(body: RefineRequest):
    if body.headlines is None or not (body.new_keyword or "").strip():
        return _error("Missing required fields", 400)
    if ":" in body.new_keyword:
        return _error(COLON_KEYWORD, 400)
    return RefineResponse(headlines=refine_headlines(body.headlines, body.new_keyword))


@app.post("/api/parse-image-text", response_model=ParsedCreative)
def parse_image_text(body: ImageParseRequest, llm: Optional[GeminiClient] = Depends(get_llm)):
    if not body.base64_image or not body.mime_type:
        return _error("Missing base64Image or mimeType", 400)
    if not body.mime_type.startswith("image/"):
        return _error("Invalid file type. Please upload an image.", 400)

    try:
        image_b64, mime_type = prepare_image(body.base64_image, body.mime_type)
        return parse_creative_image(image_b64, mime_type, client=llm)
    except ImageError as e:
        return _error(str(e), 400)
    except Exception:
        logger.exception("parse-image-text failed")
        return _error("Failed to parse image text", 500)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
