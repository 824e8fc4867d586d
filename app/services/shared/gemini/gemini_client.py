# gemini_client.py
import json
import base64
from typing import Any, Optional
from google import genai
from google.genai import types

from app.config.settings import API_KEY_ENV_VARS


MISSING_KEY_MESSAGE = f"Missing Gemini API key. Set one of: {', '.join(API_KEY_ENV_VARS)}"


class MissingApiKeyError(RuntimeError):
    """No Gemini API key could be resolved from the environment."""


def make_client(api_key: Optional[str]) -> genai.Client:
    if not api_key:
        raise MissingApiKeyError(MISSING_KEY_MESSAGE)
    return genai.Client(api_key=api_key)


def inline_document_part(base64_data: str, mime_type: str) -> types.Part:
    """Inline bytes part for a base64 encoded image or scanned document.

    Line-wrapped base64 (MIME style) is accepted; any other stray character
    raises binascii.Error.
    """
    data = base64.b64decode("".join(base64_data.split()), validate=True)
    return types.Part.from_bytes(data=data, mime_type=mime_type)


def response_text(resp) -> Optional[str]:
    """Text of the first candidate; None when the reply carries no text."""
    text = getattr(resp, "text", None)
    return text if isinstance(text, str) else None


def parse_json_reply(text: Optional[str]) -> Any:
    """Decode a JSON reply. An empty reply decodes as an empty object."""
    return json.loads(text or "{}")


def _string_properties(*names: str) -> dict:
    return {name: types.Schema(type=types.Type.STRING) for name in names}


def letter_metadata_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties=_string_properties("number", "sender", "receiver", "title", "category"),
        required=["number", "sender", "receiver", "title", "category"]
    )


def document_metadata_schema() -> types.Schema:
    # No required list: a scan may be missing any of these
    return types.Schema(
        type=types.Type.OBJECT,
        properties=_string_properties(
            "number", "title", "sender", "receiver", "date", "category", "content"
        ),
    )
