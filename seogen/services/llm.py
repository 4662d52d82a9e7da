import logging
from typing import Any, Dict, Iterator, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import Settings, settings

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """The generative API could not produce usable text."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _session(retries: int) -> requests.Session:
    s = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=0.5,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=frozenset(["POST"]),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


class GeminiClient:
    """
    Thin client for the Generative Language `generateContent` REST endpoint.
    The API key is passed in explicitly; nothing is read from the environment here.
    """

    def __init__(self, api_key: str, model: str, base_url: str, timeout: float = 30.0, retries: int = 2):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = _session(retries)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate_text(
        self,
        prompt: str,
        *,
        image_b64: Optional[str] = None,
        mime_type: Optional[str] = None,
        temperature: float = 0.7,
        top_k: int = 40,
        top_p: float = 0.95,
        max_output_tokens: int = 1024,
        web_search: bool = False,
    ) -> str:
        parts: List[Dict[str, Any]] = [{"text": prompt}]
        if image_b64:
            parts.append({"inlineData": {"mimeType": mime_type or "image/png", "data": image_b64}})

        body: Dict[str, Any] = {
            "contents": [{"parts": parts}],
            "generationConfig": {
                "temperature": temperature,
                "topK": top_k,
                "topP": top_p,
                "maxOutputTokens": max_output_tokens,
            },
        }
        if web_search:
            body["tools"] = [{"google_search": {}}]

        try:
            r = self.session.post(self.endpoint, params={"key": self.api_key}, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise LLMError(f"Gemini request failed: {e}") from e

        if not r.ok:
            raise LLMError(f"Gemini API error: {r.status_code}", status_code=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise LLMError("Gemini returned a non-JSON body") from e

        text = _first_text(data)
        if not text:
            raise LLMError("No content generated")
        logger.debug("Gemini reply (%s): %s", self.model, text)
        return text


def _first_text(data: Dict[str, Any]) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return (parts[0].get("text") or "") if parts else ""


def build_client(cfg: Settings) -> Optional[GeminiClient]:
    if cfg.mock_mode:
        return None
    return GeminiClient(
        api_key=cfg.gemini_api_key,
        model=cfg.gemini_model,
        base_url=cfg.gemini_base_url,
        timeout=cfg.gemini_timeout,
        retries=cfg.gemini_retries,
    )


def get_llm() -> Iterator[Optional[GeminiClient]]:
    """FastAPI dependency. None means serve mock data; the session is closed after the request."""
    client = build_client(settings)
    if client is None:
        logger.info("No Gemini API key found, using mock data")
        yield None
        return
    try:
        yield client
    finally:
        client.session.close()
