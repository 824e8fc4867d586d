"""Shared fixtures: a stand-in for genai.Client that records requests."""

from types import SimpleNamespace

import pytest

from app import create_app
from app.config.settings import TestingConfig
from app.services.surat.surat_ai_service import SuratAIService


class FakeModels:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.reply)


class FakeClient:
    def __init__(self, reply=None, error=None):
        self.models = FakeModels(reply=reply, error=error)


@pytest.fixture
def make_service():
    """Build a SuratAIService around a FakeClient replying with `reply` or raising `error`."""

    def _make(reply=None, error=None, model="test-model"):
        return SuratAIService(FakeClient(reply=reply, error=error), model=model)

    return _make


@pytest.fixture
def make_http_client():
    def _make(service, config_class=TestingConfig):
        app = create_app(config_class, surat_service=service)
        return app.test_client()

    return _make
