"""EmailJS client used to deliver form submissions"""
from typing import Dict, Optional
import logging
import httpx

from app.config import Settings, get_settings
from app.models.forms import SubmissionRequest

logger = logging.getLogger(__name__)

# Seconds for the HTTP exchange itself; the orchestrator bounds the whole attempt
HTTP_TIMEOUT = 20.0


class TransportError(Exception):
    """The provider rejected the message or could not be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProviderAlreadyInitializedError(RuntimeError):
    """init_email_provider() was called twice"""


class ProviderNotInitializedError(RuntimeError):
    """A submission was attempted before init_email_provider()"""


class EmailJSClient:
    """Sends template emails through the EmailJS REST API"""

    def __init__(
        self,
        service_id: str,
        template_id: str,
        public_key: str,
        private_key: str = "",
        api_url: str = "https://api.emailjs.com/api/v1.0/email/send",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.private_key = private_key
        self.api_url = api_url
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "EmailJSClient":
        return cls(
            service_id=settings.emailjs_service_id,
            template_id=settings.emailjs_template_id,
            public_key=settings.emailjs_public_key,
            private_key=settings.emailjs_private_key,
            api_url=settings.emailjs_api_url,
            transport=transport,
        )

    def build_payload(self, request: SubmissionRequest) -> Dict:
        """Build the JSON body expected by /email/send"""
        payload = {
            "service_id": self.service_id,
            "template_id": self.template_id,
            "user_id": self.public_key,
            "template_params": request.to_template_params(),
        }
        if self.private_key:
            payload["accessToken"] = self.private_key
        return payload

    async def send(self, request: SubmissionRequest) -> str:
        """
        Send one message, single attempt

        Args:
            request: The submission to deliver

        Returns:
            Provider response text ("OK" on acceptance)

        Raises:
            TransportError: On any non-200 response or network failure
        """
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=HTTP_TIMEOUT) as client:
                response = await client.post(
                    self.api_url,
                    headers={"Content-Type": "application/json"},
                    json=self.build_payload(request)
                )
        except httpx.HTTPError as e:
            raise TransportError(f"EmailJS request failed: {e}") from e

        if response.status_code != 200:
            raise TransportError(
                f"EmailJS rejected message: {response.status_code} - {response.text}",
                status_code=response.status_code
            )

        logger.info(f"EmailJS accepted message for {request.recipient}")
        return response.text


# Process-wide client, set once at startup
_provider: Optional[EmailJSClient] = None


def init_email_provider(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> EmailJSClient:
    """
    Initialize the shared EmailJS client

    Args:
        settings: Configuration carrying the account identifiers (defaults to get_settings())
        transport: Optional httpx transport, mainly for tests

    Returns:
        The initialized client

    Raises:
        ProviderAlreadyInitializedError: If the client was already initialized
    """
    global _provider
    if _provider is not None:
        raise ProviderAlreadyInitializedError("Email provider is already initialized")

    settings = settings or get_settings()
    _provider = EmailJSClient.from_settings(settings, transport=transport)
    logger.info(f"Email provider initialized (service={settings.emailjs_service_id})")
    return _provider


def get_email_provider() -> EmailJSClient:
    """Return the shared client, failing if startup has not run"""
    if _provider is None:
        raise ProviderNotInitializedError("Email provider used before init_email_provider()")
    return _provider


def shutdown_email_provider() -> None:
    """Forget the shared client so it can be initialized again"""
    global _provider
    if _provider is not None:
        logger.info("Email provider shut down")
    _provider = None
