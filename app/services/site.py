"""The single page: its forms, its donation dialog and its toasts"""
from typing import Optional

from app.config import Settings, get_settings
from app.services.email_provider import EmailJSClient
from app.services.feedback import FeedbackChannel
from app.services.forms import FormController, create_contact_form, create_newsletter_form
from app.services.modal import DonationModal, ModalEntryPoint


class SitePage:
    """State of one visitor's page; each form keeps its own busy state"""

    def __init__(self, settings: Optional[Settings] = None, provider: Optional[EmailJSClient] = None):
        settings = settings or get_settings()
        self.feedback = FeedbackChannel(display_seconds=settings.notification_duration_seconds)
        self.contact: FormController = create_contact_form(self.feedback, provider=provider, settings=settings)
        self.newsletter: FormController = create_newsletter_form(self.feedback, provider=provider, settings=settings)
        self.donation = DonationModal(self.feedback, provider=provider, settings=settings)

    def open_donation_from_header(self) -> None:
        self.donation.open(ModalEntryPoint.HEADER)

    def open_donation_from_mobile_menu(self) -> None:
        self.donation.open(ModalEntryPoint.MOBILE_MENU)

    def open_donation_from_hero(self) -> None:
        self.donation.open(ModalEntryPoint.HERO)
