"""Donation dialog: visibility plus the donor information form it contains"""
from enum import Enum
from typing import Optional, Tuple
import logging

from app.config import Settings
from app.models.donation import DONATION_BANK_DETAILS, DONATION_PURPOSES, TAX_RECEIPT_NOTE, BankDetails
from app.models.forms import SubmissionOutcome
from app.services.email_provider import EmailJSClient
from app.services.feedback import FeedbackChannel
from app.services.forms import FormController, create_donor_form

logger = logging.getLogger(__name__)


class ModalState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class ModalEntryPoint(str, Enum):
    """Buttons on the page that open the dialog"""
    HEADER = "header"
    MOBILE_MENU = "mobile_menu"
    HERO = "hero"


class DonationModal:
    """
    Open/close lifecycle of the donation dialog

    The donor fields belong to the dialog, not to one opening of it: they
    survive close() and open() and are only cleared by a successful
    submission, which also closes the dialog.
    """

    bank_details: BankDetails = DONATION_BANK_DETAILS
    purposes: Tuple[str, ...] = DONATION_PURPOSES
    receipt_note: str = TAX_RECEIPT_NOTE

    def __init__(
        self,
        feedback: FeedbackChannel,
        provider: Optional[EmailJSClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.state = ModalState.CLOSED
        self.form: FormController = create_donor_form(
            feedback,
            on_success=self.close,
            provider=provider,
            settings=settings,
        )

    @property
    def is_open(self) -> bool:
        return self.state is ModalState.OPEN

    def open(self, entry_point: ModalEntryPoint = ModalEntryPoint.HEADER) -> None:
        self.state = ModalState.OPEN
        logger.info(f"Donation dialog opened from {entry_point.value}")

    def close(self) -> None:
        self.state = ModalState.CLOSED

    def on_field_change(self, field: str, value: str) -> bool:
        return self.form.on_field_change(field, value)

    async def on_submit(self, event=None) -> Optional[SubmissionOutcome]:
        """Submit the donor form; a closed dialog has no form to submit"""
        if not self.is_open:
            logger.debug("Donation dialog is closed; ignoring submit")
            return None
        return await self.form.on_submit(event)
