import base64
import binascii
from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError

from ..models.surat import SummarizeRequest, ExtractMetadataRequest, ExtractImageRequest
from ..utils.helpers import get_surat_service, split_data_url, validation_message

surat_bp = Blueprint('surat', __name__)


@surat_bp.post("/summarize")
def summarize():
    """One-sentence summary of a letter's text"""
    try:
        body = SummarizeRequest.model_validate(request.get_json(silent=True) or {})
    except ValidationError as ve:
        return jsonify({"error": "invalid_body", "msg": validation_message(ve)}), 400

    summary = get_surat_service().summarize_letter(body.content)
    return jsonify({"summary": summary}), 200


@surat_bp.post("/extract")
def extract():
    """Structured metadata (number, sender, receiver, title, category) from letter text"""
    try:
        body = ExtractMetadataRequest.model_validate(request.get_json(silent=True) or {})
    except ValidationError as ve:
        return jsonify({"error": "invalid_body", "msg": validation_message(ve)}), 400

    data = get_surat_service().extract_metadata(body.text)
    if data is None:
        return jsonify({"error": "extraction_failed", "msg": "AI extraction failed"}), 502
    return jsonify(data), 200


@surat_bp.post("/extract/image")
def extract_image():
    """Metadata plus full transcript from a letter photo or scan.

    Accepts either a multipart upload in field 'file', or a JSON body
    {"data": <base64 or data: URL>, "mime_type": <type>}.
    """
    upload = request.files.get("file")
    if upload and upload.filename:
        mime_type = upload.mimetype
        b64 = base64.b64encode(upload.read()).decode("ascii")
    else:
        try:
            body = ExtractImageRequest.model_validate(request.get_json(silent=True) or {})
        except ValidationError as ve:
            return jsonify({"error": "missing_file", "msg": validation_message(ve)}), 400
        url_mime, b64 = split_data_url(body.data)
        mime_type = body.mime_type or url_mime

    if not mime_type or mime_type not in current_app.config['ALLOWED_MIME_TYPES']:
        return jsonify({"error": "bad_mime_type", "msg": f"unsupported mime type: {mime_type}"}), 400

    try:
        data = get_surat_service().extract_metadata_from_image(b64, mime_type)
    except binascii.Error as e:
        return jsonify({"error": "bad_base64", "msg": str(e)}), 400
    except Exception as e:
        return jsonify({"error": "document_analysis_failed", "msg": str(e)}), 500
    return jsonify(data), 200
