"""Form controllers for the contact, newsletter and donor information forms"""
from typing import Callable, List, Optional, Tuple, Type
import logging

from app.config import Settings, get_settings
from app.models.forms import (
    ContactFormFields,
    DonorFormFields,
    FormFields,
    NewsletterFormFields,
    SubmissionOutcome,
    SubmissionRequest,
)
from app.services.email_provider import EmailJSClient
from app.services.feedback import FeedbackChannel
from app.services.orchestrator import SubmissionOrchestrator
from app.services.validator import InvalidEmailError, ensure_valid_email

logger = logging.getLogger(__name__)

INVALID_EMAIL_TEXT = "Veuillez entrer une adresse email valide"
MISSING_FIELD_TEXT = "Veuillez remplir tous les champs obligatoires"
NEWSLETTER_MARKER = "Inscription à la newsletter"
TAX_RECEIPT_MARKER = "Demande de reçu fiscal pour un don"

SUBMIT_LABEL = "Envoyer"
SUBMITTING_LABEL = "Envoi en cours..."

RequestBuilder = Callable[[FormFields, str], SubmissionRequest]


class FormController:
    """
    One form on the page: its fields, its submit flow and its busy state

    The three site forms only differ by their fields, the way a request is
    built from them, their feedback texts and what happens after a success.
    """

    def __init__(
        self,
        name: str,
        fields_model: Type[FormFields],
        build_request: RequestBuilder,
        feedback: FeedbackChannel,
        success_text: str,
        error_text: str,
        required: Tuple[str, ...] = (),
        on_success: Optional[Callable[[], None]] = None,
        provider: Optional[EmailJSClient] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.name = name
        self.required = required
        self.feedback = feedback
        self.recipient = settings.organization_email
        self._fields_model = fields_model
        self._build_request = build_request
        self._on_success = on_success
        self.fields = fields_model()
        self.orchestrator = SubmissionOrchestrator(
            form_name=name,
            feedback=feedback,
            success_text=success_text,
            error_text=error_text,
            provider=provider,
            timeout=settings.submit_timeout_seconds,
        )

    @property
    def disabled(self) -> bool:
        """True while the form's request is in flight"""
        return self.orchestrator.busy

    @property
    def submit_label(self) -> str:
        return SUBMITTING_LABEL if self.disabled else SUBMIT_LABEL

    def on_field_change(self, field: str, value: str) -> bool:
        """
        Update one input value

        Args:
            field: Field name (e.g. "email")
            value: New raw value

        Returns:
            False if the change was ignored because the form is submitting

        Raises:
            KeyError: If the form has no such field
        """
        if field not in self._fields_model.model_fields:
            raise KeyError(f"{self.name} form has no field '{field}'")
        if self.disabled:
            logger.debug(f"Ignoring change to {self.name}.{field} while submitting")
            return False
        setattr(self.fields, field, value)
        return True

    def missing_fields(self) -> List[str]:
        """Required fields that are empty or blank"""
        return [field for field in self.required if not getattr(self.fields, field).strip()]

    def reset(self) -> None:
        """Restore every field to its empty initial value"""
        self.fields = self._fields_model()

    async def on_submit(self, event=None) -> Optional[SubmissionOutcome]:
        """
        Validate the current fields and send them

        Args:
            event: Optional UI submit event; its prevent_default() is called
                so the page does not navigate

        Returns:
            The SubmissionOutcome, or None if nothing was sent (form busy or
            missing required field or invalid email)
        """
        if event is not None:
            event.prevent_default()

        if self.disabled:
            logger.debug(f"{self.name} form already submitting; ignoring submit")
            return None

        missing = self.missing_fields()
        if missing:
            logger.debug(f"{self.name} form missing required fields: {missing}")
            self.feedback.error(MISSING_FIELD_TEXT)
            return None

        try:
            ensure_valid_email(self.fields.email)
        except InvalidEmailError:
            self.feedback.error(INVALID_EMAIL_TEXT)
            return None

        request = self._build_request(self.fields, self.recipient)
        return await self.orchestrator.submit(request, on_success=self._after_success)

    def _after_success(self) -> None:
        self.reset()
        if self._on_success is not None:
            self._on_success()


def build_contact_request(fields: ContactFormFields, recipient: str) -> SubmissionRequest:
    return SubmissionRequest(
        recipient=recipient,
        sender_name=fields.name,
        sender_email=fields.email,
        body=fields.message,
    )


def build_newsletter_request(fields: NewsletterFormFields, recipient: str) -> SubmissionRequest:
    return SubmissionRequest(
        recipient=recipient,
        sender_email=fields.email,
        body=NEWSLETTER_MARKER,
    )


def build_donor_request(fields: DonorFormFields, recipient: str) -> SubmissionRequest:
    return SubmissionRequest(
        recipient=recipient,
        sender_name=fields.name,
        sender_email=fields.email,
        body=TAX_RECEIPT_MARKER,
    )


def create_contact_form(
    feedback: FeedbackChannel,
    provider: Optional[EmailJSClient] = None,
    settings: Optional[Settings] = None,
) -> FormController:
    """Contact form: name, email and free message"""
    return FormController(
        name="contact",
        fields_model=ContactFormFields,
        build_request=build_contact_request,
        required=("name", "message"),
        feedback=feedback,
        success_text="Message envoyé avec succès !",
        error_text="Erreur lors de l'envoi du message. Veuillez réessayer.",
        provider=provider,
        settings=settings,
    )


def create_newsletter_form(
    feedback: FeedbackChannel,
    provider: Optional[EmailJSClient] = None,
    settings: Optional[Settings] = None,
) -> FormController:
    """Newsletter signup: email only"""
    return FormController(
        name="newsletter",
        fields_model=NewsletterFormFields,
        build_request=build_newsletter_request,
        feedback=feedback,
        success_text="Inscription à la newsletter réussie !",
        error_text="Erreur lors de l'inscription. Veuillez réessayer.",
        provider=provider,
        settings=settings,
    )


def create_donor_form(
    feedback: FeedbackChannel,
    on_success: Optional[Callable[[], None]] = None,
    provider: Optional[EmailJSClient] = None,
    settings: Optional[Settings] = None,
) -> FormController:
    """Donor information form; on_success typically closes the donation dialog"""
    return FormController(
        name="donor",
        fields_model=DonorFormFields,
        build_request=build_donor_request,
        required=("name",),
        feedback=feedback,
        success_text="Vos informations ont été enregistrées. Vous recevrez votre reçu fiscal par email.",
        error_text="Erreur lors de l'envoi des informations. Veuillez réessayer.",
        on_success=on_success,
        provider=provider,
        settings=settings,
    )
