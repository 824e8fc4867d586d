from .gemini_client import (
    MISSING_KEY_MESSAGE, MissingApiKeyError, make_client, inline_document_part, response_text, parse_json_reply,
    letter_metadata_schema, document_metadata_schema,
)

__all__ = [
    "MISSING_KEY_MESSAGE", "MissingApiKeyError", "make_client", "inline_document_part", "response_text",
    "parse_json_reply", "letter_metadata_schema", "document_metadata_schema",
]
