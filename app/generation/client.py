import logging

from google import genai
from google.genai import types

from app.shared.config import settings
from app.shared.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

class GenerationClient:
    """
    Single boundary to the Gemini text API: one prompt in, raw text out.
    One attempt per call; any SDK error or an empty reply is an UpstreamError.
    The credential is checked on `generate`, so the app starts without one.
    """

    def __init__(self, api_key: str | None = None, model: str | None = None, timeout_ms: int | None = None):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self.timeout_ms = timeout_ms if timeout_ms is not None else settings.GEMINI_TIMEOUT_MS
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        if not self.api_key:
            raise ConfigurationError()
        if self._client is None:
            http_options = types.HttpOptions(timeout=self.timeout_ms) if self.timeout_ms else None
            self._client = genai.Client(api_key=self.api_key, http_options=http_options)
        return self._client

    def generate(self, prompt: str) -> str:
        client = self._get_client()
        try:
            response = client.models.generate_content(model=self.model, contents=prompt)
        except Exception as e:
            logger.error("Gemini call failed (model=%s)", self.model, exc_info=True)
            raise UpstreamError(f"Text generation failed: {e}", details=type(e).__name__) from e

        text = getattr(response, "text", None) or ""
        if not text.strip():
            logger.error("Gemini returned empty text (model=%s)", self.model)
            raise UpstreamError("Text generation failed: the response was empty.")
        return text

# FastAPI dep
def get_generation_client() -> GenerationClient:
    return GenerationClient()
