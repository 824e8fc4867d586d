from flask import Blueprint

from ..utils.helpers import get_surat_service

health_bp = Blueprint('health', __name__)


@health_bp.get("/health")
def health():
    """Health check endpoint; reports whether a Gemini key is configured"""
    return {"ok": True, "gemini_available": get_surat_service().available}, 200
