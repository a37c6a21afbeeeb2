"""
Shared fixtures for the form submission tests.

Provides:
- Settings with short timeouts
- A fake email provider that records requests and can fail or hang
- A controllable clock for the feedback channel
"""

import asyncio

import pytest

from app.config import Settings
from app.services.email_provider import TransportError, shutdown_email_provider
from app.services.feedback import FeedbackChannel


class FakeProvider:
    """Stand-in for EmailJSClient."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []
        self.gate = None

    def hold(self):
        """Keep every send pending until release() is called."""
        self.gate = asyncio.Event()

    def release(self):
        self.gate.set()

    async def send(self, request):
        self.sent.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise TransportError("EmailJS rejected message: 400 - The service ID is invalid", status_code=400)
        return "OK"


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


async def wait_until(predicate, attempts: int = 100):
    """Let the event loop run until predicate() holds."""
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition never became true")


@pytest.fixture
def settings():
    return Settings(
        submit_timeout_seconds=5.0,
        notification_duration_seconds=4.0,
        organization_email="asso-alamane@outlook.com",
    )


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def failing_provider():
    return FakeProvider(fail=True)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def feedback(clock):
    return FeedbackChannel(display_seconds=4.0, clock=clock)


@pytest.fixture(autouse=True)
def _reset_email_provider():
    """The provider client is process-wide; start every test without one."""
    shutdown_email_provider()
    yield
    shutdown_email_provider()
