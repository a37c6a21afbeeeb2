"""Single-attempt submission with busy-state tracking and user feedback"""
from enum import Enum
from typing import Callable, Optional
import asyncio
import logging
import traceback

from app.models.forms import SubmissionOutcome, SubmissionRequest
from app.services.email_provider import EmailJSClient, TransportError, get_email_provider
from app.services.feedback import FeedbackChannel

logger = logging.getLogger(__name__)


class OrchestratorState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"


class SubmissionInFlightError(RuntimeError):
    """submit() called while the previous request of the same form is pending"""


class SubmissionOrchestrator:
    """
    Sends one SubmissionRequest per user action and reports the result

    One orchestrator belongs to exactly one form. While a request is in
    flight the form is busy and a second submit() is refused. Every terminal
    outcome produces exactly one notification; failures keep their cause in
    the log and show only the generic error_text to the user.
    """

    def __init__(
        self,
        form_name: str,
        feedback: FeedbackChannel,
        success_text: str,
        error_text: str,
        provider: Optional[EmailJSClient] = None,
        timeout: Optional[float] = None,
    ):
        self.form_name = form_name
        self.feedback = feedback
        self.success_text = success_text
        self.error_text = error_text
        self.timeout = timeout if timeout and timeout > 0 else None
        self._provider = provider
        self.state = OrchestratorState.IDLE

    @property
    def busy(self) -> bool:
        return self.state is OrchestratorState.IN_FLIGHT

    async def submit(
        self,
        request: SubmissionRequest,
        on_success: Optional[Callable[[], None]] = None,
    ) -> SubmissionOutcome:
        """
        Deliver a request through the provider

        Args:
            request: Message built from the form's current fields
            on_success: Post-success effect (reset fields, close dialog...)

        Returns:
            SubmissionOutcome for this attempt

        Raises:
            SubmissionInFlightError: If this form already has a request pending
        """
        if self.busy:
            raise SubmissionInFlightError(f"{self.form_name} form is already submitting")

        self.state = OrchestratorState.IN_FLIGHT
        try:
            try:
                await self._send(request)
            except Exception as e:
                logger.error(f"{self.form_name} submission failed: {e}")
                logger.error(traceback.format_exc())
                self.feedback.error(self.error_text)
                return SubmissionOutcome.failed(e)

            self.feedback.success(self.success_text)
            if on_success is not None:
                on_success()
            return SubmissionOutcome.succeeded()
        finally:
            self.state = OrchestratorState.IDLE

    async def _send(self, request: SubmissionRequest) -> None:
        provider = self._provider or get_email_provider()
        try:
            await asyncio.wait_for(provider.send(request), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise TransportError(f"No answer from email provider after {self.timeout}s") from e
