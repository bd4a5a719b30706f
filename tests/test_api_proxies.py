import json

import httpx
import pytest

from chatgen.chat.router import get_chat_client
from chatgen.chat.service import ChatClient
from chatgen.images.router import get_image_client
from chatgen.images.service import ImageClient


@pytest.fixture
def use_chat(app, settings, mock_http):
    def _install(handler):
        chat = ChatClient(settings, client=mock_http(handler))
        app.dependency_overrides[get_chat_client] = lambda: chat

    return _install


@pytest.fixture
def use_images(app, settings, mock_http):
    def _install(handler):
        images = ImageClient(settings, client=mock_http(handler))
        app.dependency_overrides[get_image_client] = lambda: images

    return _install


def test_chat_relays_reply(client, use_chat, settings):
    seen = {}

    def handler(request: httpx.Request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": "नमस्ते!"}}]})

    use_chat(handler)
    r = client.post("/chat", json={"message": "namaste"})

    assert r.status_code == 200
    assert r.json() == {"reply": "नमस्ते!"}
    assert "नमस्ते" in r.content.decode("utf-8")
    assert seen["url"] == settings.GROQ_API_URL
    assert seen["auth"] == "Bearer test-key"
    assert seen["body"]["model"] == settings.GROQ_MODEL
    assert seen["body"]["messages"][0]["role"] == "system"
    assert seen["body"]["messages"][1] == {"role": "user", "content": "namaste"}


def test_chat_empty_upstream_uses_fallback(client, use_chat, settings):
    use_chat(lambda request: httpx.Response(200, json={"choices": []}))
    r = client.post("/chat", json={"message": "hi"})
    assert r.status_code == 200
    assert r.json() == {"reply": settings.CHAT_EMPTY_REPLY}


def test_chat_missing_message(client, use_chat):
    use_chat(lambda request: pytest.fail("upstream must not be called"))
    for payload in ({}, {"message": ""}, {"message": "   "}):
        r = client.post("/chat", json=payload)
        assert r.status_code == 400
        assert r.json() == {"success": False, "message": "message missing"}


def test_chat_upstream_failure_is_502(client, use_chat):
    use_chat(lambda request: httpx.Response(503, json={"error": {"message": "rate limited"}}))
    r = client.post("/chat", json={"message": "hi"})
    assert r.status_code == 502
    assert r.json() == {"success": False, "message": "chat service unavailable"}
    assert "rate limited" not in r.text


def test_chat_transport_error_is_502(client, use_chat):
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    use_chat(handler)
    r = client.post("/chat", json={"message": "hi"})
    assert r.status_code == 502


def test_image_relays_url(client, use_images, settings):
    seen = {}

    def handler(request: httpx.Request):
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"output": [{"url": "https://img.example/cat.png"}]})

    use_images(handler)
    r = client.post("/generate-image", json={"prompt": "a cat"})

    assert r.status_code == 200
    assert r.json() == {"imageUrl": "https://img.example/cat.png"}
    assert seen["url"] == settings.IMAGE_API_URL
    assert seen["body"] == {"prompt": "a cat", "width": 512, "height": 512, "samples": 1}


def test_image_missing_prompt(client, use_images):
    use_images(lambda request: pytest.fail("upstream must not be called"))
    r = client.post("/generate-image", json={})
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "prompt is required"}


def test_image_without_url_is_502(client, use_images):
    use_images(lambda request: httpx.Response(200, json={"output": []}))
    r = client.post("/generate-image", json={"prompt": "a cat"})
    assert r.status_code == 502
    assert r.json() == {"success": False, "message": "image url not found"}


def test_image_upstream_error_is_502(client, use_images):
    use_images(lambda request: httpx.Response(500, text="kaput"))
    r = client.post("/generate-image", json={"prompt": "a cat"})
    assert r.status_code == 502
    assert r.json() == {"success": False, "message": "image generation failed"}
