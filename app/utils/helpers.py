from typing import Optional, Tuple
from flask import current_app
from pydantic import ValidationError


def get_surat_service():
    """The SuratAIService created by create_app"""
    return current_app.extensions["surat_ai"]


def split_data_url(data: str) -> Tuple[Optional[str], str]:
    """Split 'data:<mime>;base64,<payload>' into (mime, payload). Plain base64 gives (None, data)."""
    if data.startswith("data:") and "," in data:
        header, payload = data.split(",", 1)
        mime = header[len("data:"):].split(";", 1)[0] or None
        return mime, payload
    return None, data


def validation_message(err: ValidationError) -> str:
    """Compact 'field: message' list from a pydantic error"""
    parts = []
    for e in err.errors():
        loc = ".".join(str(x) for x in e.get("loc", ())) or "body"
        parts.append(f"{loc}: {e.get('msg')}")
    return "; ".join(parts)
