import os
import logging
from app import create_app
from app.config.settings import config, is_gemini_available

app = create_app(config[os.getenv("FLASK_CONFIG", "default")])

if __name__ == "__main__":
    if not is_gemini_available(app.config['GEMINI_API_KEY']):
        logging.getLogger(__name__).warning("No Gemini API key found; AI endpoints will return fallbacks")
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=False, use_reloader=False)
