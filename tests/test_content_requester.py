"""Tests for the content requester (forced tool call -> WebsiteContent)"""
import json

import httpx
import pytest

from bizbuilder.core.config import GatewayConfig
from bizbuilder.core.content_requester import ContentRequester, parse_tool_arguments
from bizbuilder.core.gateway import GatewayClient
from bizbuilder.models.errors import MalformedResponseError, UpstreamError

from conftest import SWEET_OVEN, FakeGateway, chat_completion, tool_call_message

PROMPT = "Create a website for my bakery called Sweet Oven"


class TestContentRequest:
    """Shape of the outbound request"""

    def test_forced_tool_call(self, gateway_config):
        requester = ContentRequester(GatewayClient(gateway_config))
        request = requester.build_request(PROMPT)

        assert request["model"] == gateway_config.text_model
        assert request["messages"][0]["role"] == "system"
        assert request["messages"][1] == {"role": "user", "content": PROMPT}
        assert request["tool_choice"] == {"type": "function", "function": {"name": "generate_website_content"}}

        schema = request["tools"][0]["function"]["parameters"]
        assert set(schema["required"]) == {
            "business_name", "hero_title", "hero_subtitle", "about",
            "services", "testimonials", "contact", "business_type",
        }
        assert (schema["properties"]["services"]["minItems"], schema["properties"]["services"]["maxItems"]) == (3, 6)
        assert (schema["properties"]["testimonials"]["minItems"], schema["properties"]["testimonials"]["maxItems"]) == (3, 4)

    @pytest.mark.asyncio
    async def test_request_is_sent_with_bearer_token(self, gateway_config):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("authorization")
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=chat_completion(tool_call_message(SWEET_OVEN)))

        gateway = GatewayClient(gateway_config, http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        async with gateway:
            await ContentRequester(gateway).request(PROMPT)

        assert seen["auth"] == "Bearer test-key"
        assert seen["url"] == "https://gateway.test/v1/chat/completions"
        assert seen["body"]["tool_choice"]["function"]["name"] == "generate_website_content"


class TestContentParsing:
    """Turning the gateway reply into WebsiteContent"""

    @pytest.mark.asyncio
    async def test_success(self, make_gateway):
        fake = FakeGateway()
        async with make_gateway(fake) as gateway:
            content = await ContentRequester(gateway).request(PROMPT)

        assert content.business_name == "Sweet Oven"
        assert content.business_type == "bakery"
        assert [s.title for s in content.services] == ["Artisan Breads", "Pastries", "Custom Cakes"]
        assert [t.rating for t in content.testimonials] == [5, 4, 1]
        assert len(fake.content_requests) == 1

    @pytest.mark.asyncio
    async def test_lists_are_passed_through_unfiltered(self, make_gateway):
        payload = dict(SWEET_OVEN)
        payload["services"] = SWEET_OVEN["services"] * 3  # 9, outside the schema range
        async with make_gateway(FakeGateway(content=payload)) as gateway:
            content = await ContentRequester(gateway).request(PROMPT)

        assert len(content.services) == 9

    @pytest.mark.asyncio
    async def test_missing_tool_call(self, make_gateway):
        fake = FakeGateway(content_response=chat_completion({"role": "assistant", "content": "I'd rather chat."}))
        async with make_gateway(fake) as gateway:
            with pytest.raises(MalformedResponseError) as exc_info:
                await ContentRequester(gateway).request(PROMPT)

        assert "did not return structured data" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_unparsable_arguments(self, make_gateway):
        fake = FakeGateway(content_response=chat_completion(tool_call_message('{"business_name": "Sweet')))
        async with make_gateway(fake) as gateway:
            with pytest.raises(MalformedResponseError):
                await ContentRequester(gateway).request(PROMPT)

    @pytest.mark.asyncio
    async def test_no_choices(self, make_gateway):
        response = chat_completion({"role": "assistant", "content": ""})
        response["choices"] = []
        async with make_gateway(FakeGateway(content_response=response)) as gateway:
            with pytest.raises(MalformedResponseError):
                await ContentRequester(gateway).request(PROMPT)

    def test_arguments_missing_required_field(self):
        payload = {k: v for k, v in SWEET_OVEN.items() if k != "business_type"}

        with pytest.raises(MalformedResponseError) as exc_info:
            parse_tool_arguments(json.dumps(payload))
        assert "does not match" in exc_info.value.message

    def test_arguments_not_an_object(self):
        with pytest.raises(MalformedResponseError):
            parse_tool_arguments("[1, 2, 3]")


class TestContentUpstreamFailures:
    """Transport and status failures become UpstreamError, with no retry"""

    @pytest.mark.asyncio
    async def test_non_2xx(self, make_gateway):
        fake = FakeGateway(content_status=502)
        async with make_gateway(fake) as gateway:
            with pytest.raises(UpstreamError) as exc_info:
                await ContentRequester(gateway).request(PROMPT)

        assert exc_info.value.status_code == 502
        assert len(fake.content_requests) == 1

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        config = GatewayConfig(api_key="test-key", base_url="https://gateway.test/v1")
        gateway = GatewayClient(config, http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        async with gateway:
            with pytest.raises(UpstreamError):
                await ContentRequester(gateway).request(PROMPT)
