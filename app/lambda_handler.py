import os
import serverless_wsgi

from app import create_app
from app.config.settings import config

app = create_app(config[os.getenv("FLASK_CONFIG", "production")])

def handler(event, context):
    return serverless_wsgi.handle_request(app, event, context)
