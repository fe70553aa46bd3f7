import pytest
import requests

from showcase_ui.core import http
from showcase_ui.core.provider import HttpInferenceProvider, Prediction, ProviderUnavailable
from showcase_ui.ui.clipboard import copy_button_html


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


@pytest.fixture
def captured(monkeypatch):
    calls = []
    responses = []

    def fake_request(method, url, **kwargs):
        calls.append((method, url, kwargs))
        resp = responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    monkeypatch.setattr(requests, "request", fake_request)
    return calls, responses


def test_classify_image_posts_multipart(captured, run):
    calls, responses = captured
    responses.append(FakeResponse(body={"ok": True, "predictions": [{"label": "cat", "score": 0.9}]}))
    provider = HttpInferenceProvider("http://api:8000/")

    preds = run(provider.classify_image(b"img", "image/png", "cat.png"))

    assert preds == [Prediction("cat", 0.9)]
    method, url, kwargs = calls[0]
    assert method == "POST"
    assert url == "http://api:8000/inference/image-classification"
    assert kwargs["files"] == {"file": ("cat.png", b"img", "image/png")}


def test_summarize_sends_json(captured, run):
    calls, responses = captured
    responses.append(FakeResponse(body={"ok": True, "summary": "short"}))
    provider = HttpInferenceProvider("http://api:8000")

    assert run(provider.summarize("long text")) == "short"
    assert calls[0][2]["json"] == {"text": "long text"}


def test_error_envelope_raises_provider_unavailable(captured, run):
    _, responses = captured
    responses.append(FakeResponse(502, body={"ok": False, "error": "model crashed", "code": "provider_error"}))
    provider = HttpInferenceProvider("http://api:8000")

    with pytest.raises(ProviderUnavailable, match="model crashed"):
        run(provider.analyze_sentiment("hello"))


def test_network_error_raises_provider_unavailable(captured, run):
    _, responses = captured
    responses.append(requests.ConnectionError("refused"))
    provider = HttpInferenceProvider("http://api:8000")

    with pytest.raises(ProviderUnavailable):
        run(provider.analyze_sentiment("hello"))


def test_error_message_falls_back_to_text():
    assert http.error_message(FakeResponse(500, text="boom")) == "HTTP 500: boom"


def test_copy_button_reverts_after_two_seconds():
    markup = copy_button_html('He said "hi" </script>')
    assert "setTimeout" in markup
    assert "2000" in markup
    assert '"He said \\"hi\\" <\\/script>"' in markup
    assert "navigator.clipboard.writeText" in markup
