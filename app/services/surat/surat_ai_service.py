import logging
from typing import Optional

from google import genai
from google.genai import types

from app.config.settings import Config
from app.models.surat import LetterMetadata, DocumentMetadata
from app.prompts.surat.summary_prompt import build_summary_prompt
from app.prompts.surat.metadata_prompt import build_metadata_prompt, build_document_prompt
from app.services.shared.gemini import (
    MISSING_KEY_MESSAGE, MissingApiKeyError, make_client, inline_document_part, response_text, parse_json_reply,
    letter_metadata_schema, document_metadata_schema,
)

logger = logging.getLogger(__name__)

SUMMARY_EMPTY = "Gagal membuat ringkasan."
SUMMARY_ERROR = "Terjadi kesalahan saat menghubungi AI."


class SuratAIService:
    """Summary and metadata extraction for letters (surat) through Gemini.

    The three operations fail differently:
      - summarize_letter never raises; failures become SUMMARY_ERROR.
      - extract_metadata never raises; failures become None.
      - extract_metadata_from_image logs and re-raises.
    """

    def __init__(self, client: Optional[genai.Client], model: str = Config.GEMINI_MODEL):
        self.client = client
        self.model = model

    @classmethod
    def from_api_key(cls, api_key: Optional[str], model: str = Config.GEMINI_MODEL) -> "SuratAIService":
        """Build the client once; without a key every call hits MissingApiKeyError."""
        client = make_client(api_key) if api_key else None
        return cls(client, model)

    @property
    def available(self) -> bool:
        return self.client is not None

    def _require_client(self) -> genai.Client:
        if self.client is None:
            raise MissingApiKeyError(MISSING_KEY_MESSAGE)
        return self.client

    def summarize_letter(self, content: str) -> str:
        try:
            client = self._require_client()
            resp = client.models.generate_content(
                model=self.model,
                contents=build_summary_prompt(content),
            )
            return (response_text(resp) or "").strip() or SUMMARY_EMPTY
        except Exception:
            logger.exception("Gemini Error")
            return SUMMARY_ERROR

    def extract_metadata(self, text: str) -> Optional[LetterMetadata]:
        try:
            client = self._require_client()
            cfg = types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=letter_metadata_schema(),
            )
            resp = client.models.generate_content(
                model=self.model,
                contents=build_metadata_prompt(text),
                config=cfg,
            )
            return parse_json_reply(response_text(resp))
        except Exception:
            logger.exception("Extraction Error")
            return None

    def extract_metadata_from_image(self, base64_data: str, mime_type: str) -> DocumentMetadata:
        try:
            client = self._require_client()
            parts = [
                inline_document_part(base64_data, mime_type),
                types.Part.from_text(text=build_document_prompt()),
            ]
            cfg = types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=document_metadata_schema(),
            )
            resp = client.models.generate_content(
                model=self.model,
                contents=[types.Content(role="user", parts=parts)],
                config=cfg,
            )
            return parse_json_reply(response_text(resp))
        except Exception:
            logger.exception("AI Document Analysis Error")
            raise


__all__ = ["SuratAIService", "MissingApiKeyError", "SUMMARY_EMPTY", "SUMMARY_ERROR"]
