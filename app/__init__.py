from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge
from .config.settings import Config


def create_app(config_class=Config, surat_service=None):
    """Application factory pattern"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Initialize the app (this will configure logging)
    config_class.init_app(app)

    # One Gemini client for the whole process
    if surat_service is None:
        from .services.surat.surat_ai_service import SuratAIService
        surat_service = SuratAIService.from_api_key(
            app.config['GEMINI_API_KEY'], app.config['GEMINI_MODEL']
        )
    app.extensions["surat_ai"] = surat_service

    # Register blueprints
    from .routes.surat import surat_bp
    from .routes.health import health_bp

    app.register_blueprint(surat_bp)
    app.register_blueprint(health_bp)

    @app.errorhandler(RequestEntityTooLarge)
    def payload_too_large(e):
        limit = app.config.get("MAX_CONTENT_LENGTH")
        return jsonify({"error": "payload_too_large", "msg": f"request body exceeds {limit} bytes"}), 413

    return app
