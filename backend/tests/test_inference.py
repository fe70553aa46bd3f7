import base64

from showcase_api.api import router_inference
from showcase_api.core.errors import ProviderError

EXAMPLE_TEXT = (
    "Artificial intelligence (AI) refers to the simulation of human intelligence in machines "
    "that are programmed to think and learn like humans. Machine learning is a subset of "
    "artificial intelligence that provides systems the ability to automatically learn."
)


def test_inference_run(client):
    payload = {"task": "sentiment-analysis", "payload": {"text": "I absolutely love this new AI technology!"}}
    r = client.post("/inference/run", json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is True
    assert data["label"] == "POSITIVE"
    assert data["score"] == 0.98


def test_inference_alias(client):
    payload = {"task": "summarization", "payload": {"text": EXAMPLE_TEXT}}
    r = client.post("/inference", json=payload)
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_unknown_task(client):
    r = client.post("/inference", json={"task": "translation", "payload": {"text": "hola"}})
    assert r.status_code == 404
    body = r.json()
    assert body["ok"] is False
    assert body["code"] == "unknown_task"


def test_tasks_listing(client):
    r = client.get("/inference/tasks")
    assert r.status_code == 200
    tasks = {t["task"]: t for t in r.json()["tasks"]}
    assert set(tasks) == {"image-classification", "sentiment-analysis", "summarization"}
    assert tasks["image-classification"]["limits"]["top_k"] == 5
    assert tasks["summarization"]["limits"]["min_chars"] == 50


def test_image_classification_top5_sorted(client, provider, png_bytes):
    r = client.post(
        "/inference/image-classification",
        files={"file": ("cat.png", png_bytes, "image/png")},
    )
    assert r.status_code == 200
    data = r.json()
    scores = [p["score"] for p in data["predictions"]]
    assert len(scores) == 5
    assert scores == sorted(scores, reverse=True)
    assert data["predictions"][0]["label"] == "tabby cat"
    assert data["image"]["width"] == 4 and data["image"]["height"] == 3

    task, model, image, options = provider.calls[0]
    assert task == "image-classification"
    assert model == "timm/mobilenetv4_conv_small.e2400_r224_in1k"
    assert image.mode == "RGB"
    assert options == {"top_k": 5}


def test_image_classification_data_url(client, png_bytes):
    b64 = "data:image/png;base64," + base64.b64encode(png_bytes).decode()
    r = client.post("/inference", json={"task": "image-classification", "payload": {"content_b64": b64}})
    assert r.status_code == 200
    assert r.json()["image"]["mime"] == "image/png"


def test_image_rejects_non_image(client, provider):
    r = client.post(
        "/inference/image-classification",
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )
    assert r.status_code == 415
    assert r.json()["code"] == "unsupported_media"
    assert provider.calls == []


def test_image_rejects_undecodable(client, provider):
    r = client.post(
        "/inference/image-classification",
        files={"file": ("broken.png", b"definitely not a png", "image/png")},
    )
    assert r.status_code == 422
    assert provider.calls == []


def test_image_too_large(client, png_bytes, monkeypatch):
    monkeypatch.setattr(router_inference.get_settings(), "UPLOAD_MAX_MB", 0)
    r = client.post(
        "/inference/image-classification",
        files={"file": ("cat.png", png_bytes, "image/png")},
    )
    assert r.status_code == 413


def test_sentiment_rejects_blank_text(client, provider):
    r = client.post("/inference/sentiment-analysis", json={"text": "   "})
    assert r.status_code == 422
    assert r.json()["code"] == "invalid_artifact"
    assert provider.calls == []


def test_summarization_requires_min_length(client, provider):
    r = client.post("/inference/summarization", json={"text": "x" * 49})
    assert r.status_code == 422
    assert provider.calls == []


def test_summarization_metrics(client, provider):
    provider.outputs["summarization"] = [{"summary_text": "s" * 100}]
    r = client.post("/inference/summarization", json={"text": "o" * 500})
    assert r.status_code == 200
    data = r.json()
    assert data["summary"] == "s" * 100
    assert data["original_chars"] == 500
    assert data["summary_chars"] == 100
    assert data["reduction_pct"] == 80


def test_summarization_generated_text_key(client, provider):
    provider.outputs["summarization"] = [{"generated_text": "short"}]
    r = client.post("/inference/summarization", json={"text": EXAMPLE_TEXT})
    assert r.json()["summary"] == "short"


def test_provider_failure_is_502(client, provider):
    provider.error = RuntimeError("model exploded")
    r = client.post(
        "/inference/sentiment-analysis",
        json={"text": "fine"},
        headers={"X-Request-ID": "req-123"},
    )
    assert r.status_code == 502
    body = r.json()
    assert body["ok"] is False
    assert body["code"] == "provider_error"
    assert body["request_id"] == "req-123"
    assert r.headers["X-Request-ID"] == "req-123"


def test_bad_provider_output_is_502(client, provider):
    provider.outputs["sentiment-analysis"] = "POSITIVE"
    r = client.post("/inference/sentiment-analysis", json={"text": "fine"})
    assert r.status_code == 502


def test_score_overshoot_is_clamped(client, provider):
    provider.outputs["sentiment-analysis"] = [{"label": "POSITIVE", "score": 1.0000001}]
    r = client.post("/inference/sentiment-analysis", json={"text": "fine"})
    assert r.status_code == 200
    assert r.json()["score"] == 1.0
    assert r.json()["predictions"][0]["score"] == 1.0


def test_provider_error_passthrough(client, provider):
    provider.error = ProviderError("backend unavailable")
    r = client.post("/inference/sentiment-analysis", json={"text": "fine"})
    assert r.status_code == 502
    assert r.json()["error"] == "backend unavailable"


def test_index_and_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    r = client.get("/")
    assert r.status_code == 200
    assert "AI Showcase" in r.text
    assert "sshleifer/distilbart-cnn-6-6" in r.text
