"""
Tests for the EmailJS client.

Tests:
- Wire payload
- Acceptance and rejection
- Process-wide initialization
"""

import json

import httpx
import pytest

from app.config import Settings
from app.models.forms import SubmissionRequest
from app.services.email_provider import (
    EmailJSClient,
    ProviderAlreadyInitializedError,
    ProviderNotInitializedError,
    TransportError,
    get_email_provider,
    init_email_provider,
    shutdown_email_provider,
)


def make_request(**overrides):
    data = {
        "recipient": "asso-alamane@outlook.com",
        "sender_name": "Jane",
        "sender_email": "jane@x.com",
        "body": "hello",
    }
    data.update(overrides)
    return SubmissionRequest(**data)


def make_client(handler, **kwargs):
    return EmailJSClient(
        service_id="service_test",
        template_id="template_test",
        public_key="public_test",
        transport=httpx.MockTransport(handler),
        **kwargs
    )


class TestSubmissionRequest:
    """Tests for template parameter mapping."""

    def test_template_params_with_name(self):
        assert make_request().to_template_params() == {
            "to_email": "asso-alamane@outlook.com",
            "from_name": "Jane",
            "from_email": "jane@x.com",
            "message": "hello",
        }

    def test_template_params_without_name(self):
        params = make_request(sender_name=None).to_template_params()

        assert "from_name" not in params
        assert params["from_email"] == "jane@x.com"


class TestEmailJSClient:
    """Tests for EmailJSClient.send."""

    @pytest.mark.asyncio
    async def test_posts_template_payload(self):
        captured = {}

        def handler(request):
            captured["url"] = str(request.url)
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, text="OK")

        client = make_client(handler)
        result = await client.send(make_request())

        assert result == "OK"
        assert captured["url"] == "https://api.emailjs.com/api/v1.0/email/send"
        assert captured["body"] == {
            "service_id": "service_test",
            "template_id": "template_test",
            "user_id": "public_test",
            "template_params": {
                "to_email": "asso-alamane@outlook.com",
                "from_name": "Jane",
                "from_email": "jane@x.com",
                "message": "hello",
            },
        }

    @pytest.mark.asyncio
    async def test_includes_access_token_when_configured(self):
        captured = {}

        def handler(request):
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, text="OK")

        client = make_client(handler, private_key="secret")
        await client.send(make_request())

        assert captured["body"]["accessToken"] == "secret"

    @pytest.mark.asyncio
    async def test_rejection_raises_transport_error(self):
        def handler(request):
            return httpx.Response(400, text="The Public Key is invalid")

        client = make_client(handler)

        with pytest.raises(TransportError) as exc_info:
            await client.send(make_request())

        assert exc_info.value.status_code == 400
        assert "The Public Key is invalid" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_network_failure_raises_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(TransportError) as exc_info:
            await client.send(make_request())

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_from_settings(self):
        settings = Settings(emailjs_service_id="svc", emailjs_template_id="tpl", emailjs_public_key="pub")
        client = EmailJSClient.from_settings(settings)

        assert (client.service_id, client.template_id, client.public_key) == ("svc", "tpl", "pub")


class TestProviderLifecycle:
    """Tests for the process-wide client."""

    def test_get_before_init_fails(self):
        with pytest.raises(ProviderNotInitializedError):
            get_email_provider()

    def test_init_then_get(self, settings):
        client = init_email_provider(settings)

        assert get_email_provider() is client
        assert client.public_key == settings.emailjs_public_key

    def test_double_init_is_refused(self, settings):
        first = init_email_provider(settings)

        with pytest.raises(ProviderAlreadyInitializedError):
            init_email_provider(settings)
        assert get_email_provider() is first

    def test_shutdown_allows_new_init(self, settings):
        init_email_provider(settings)
        shutdown_email_provider()

        with pytest.raises(ProviderNotInitializedError):
            get_email_provider()
        init_email_provider(settings)

    def test_default_credentials(self):
        """Should fall back to the documented account values."""
        settings = Settings()

        assert settings.emailjs_service_id == "service_0c1f5z4"
        assert settings.emailjs_template_id == "template_o877rum"
        assert settings.emailjs_public_key == "GTl-AWnAxGjC-wZxB"
