"""Shared fixtures: a fake AI gateway behind httpx.MockTransport"""
import json

import httpx
import pytest

from bizbuilder.core.config import GatewayConfig
from bizbuilder.core.gateway import GatewayClient
from bizbuilder.models.schemas import ImageSet, WebsiteContent

SWEET_OVEN = {
    "business_name": "Sweet Oven",
    "hero_title": "Baked Fresh Every Morning",
    "hero_subtitle": "Artisan breads and pastries made with love.",
    "about": "Sweet Oven is a family bakery. We bake everything from scratch. Our ovens start at 4am.",
    "services": [
        {"title": "Artisan Breads", "description": "Sourdough, rye and baguettes.", "icon": "🍞"},
        {"title": "Pastries", "description": "Croissants and danishes.", "icon": "🥐"},
        {"title": "Custom Cakes", "description": "Cakes for every occasion.", "icon": "🎂"},
    ],
    "testimonials": [
        {"name": "Sarah M.", "text": "Best croissants in town!", "rating": 5},
        {"name": "John D.", "text": "Lovely staff.", "rating": 4},
        {"name": "Priya K.", "text": "A bit pricey.", "rating": 1},
    ],
    "contact": "Visit us at 12 Main Street or call 555-0100.",
    "business_type": "bakery",
}

# Keyword found in each image prompt -> URL the fake gateway returns for it
IMAGE_URLS = {
    "hero banner": "https://img.test/hero.png",
    "interior": "https://img.test/gallery-1.png",
    "showcase": "https://img.test/gallery-2.png",
    "team or workspace": "https://img.test/gallery-3.png",
}


def chat_completion(message: dict) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "test-model",
        "choices": [{"index": 0, "finish_reason": "stop", "message": message}],
        "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
    }


def tool_call_message(arguments) -> dict:
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return {
        "role": "assistant",
        "content": None,
        "tool_calls": [
            {
                "id": "call_1",
                "type": "function",
                "function": {"name": "generate_website_content", "arguments": arguments},
            }
        ],
    }


def image_message(url: str) -> dict:
    return {
        "role": "assistant",
        "content": "Here is your image.",
        "images": [{"type": "image_url", "image_url": {"url": url}}],
    }


class FakeGateway:
    """Answers content requests with a tool call and image requests per prompt keyword"""

    def __init__(self, content=None, content_response=None, content_status=200,
                 failing_images=(), empty_images=(), image_messages=None):
        self.content = SWEET_OVEN if content is None else content
        self.content_response = content_response
        self.content_status = content_status
        self.failing_images = failing_images
        self.empty_images = empty_images
        self.image_messages = image_messages or {}
        self.requests = []

    @property
    def content_requests(self):
        return [r for r in self.requests if "tools" in r]

    @property
    def image_requests(self):
        return [r for r in self.requests if "modalities" in r]

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)

        if "tools" in body:
            if self.content_status != 200:
                return httpx.Response(self.content_status, json={"error": {"message": "gateway unavailable"}})
            if self.content_response is not None:
                return httpx.Response(200, json=self.content_response)
            return httpx.Response(200, json=chat_completion(tool_call_message(self.content)))

        prompt = body["messages"][0]["content"]
        keyword = next(k for k in IMAGE_URLS if k in prompt)
        if keyword in self.failing_images:
            return httpx.Response(500, json={"error": {"message": "image model overloaded"}})
        if keyword in self.image_messages:
            return httpx.Response(200, json=chat_completion(self.image_messages[keyword]))
        if keyword in self.empty_images:
            return httpx.Response(200, json=chat_completion({"role": "assistant", "content": "Sorry, no image."}))
        return httpx.Response(200, json=chat_completion(image_message(IMAGE_URLS[keyword])))

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def gateway_config():
    return GatewayConfig(api_key="test-key", base_url="https://gateway.test/v1", image_concurrency=1)


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def make_gateway(gateway_config):
    """Build a GatewayClient bound to a FakeGateway"""
    def _make(fake: FakeGateway, config: GatewayConfig = None) -> GatewayClient:
        return GatewayClient(config or gateway_config, http_client=fake.http_client())
    return _make


@pytest.fixture
def content():
    return WebsiteContent.model_validate(SWEET_OVEN)


@pytest.fixture
def images():
    return ImageSet(
        hero="https://img.test/hero.png",
        gallery=["https://img.test/gallery-1.png", "https://img.test/gallery-3.png"],
    )
