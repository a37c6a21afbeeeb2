"""Form-related Pydantic models"""
from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Dict, Optional


class FormFields(BaseModel):
    """Current values of a form's inputs (all plain strings)"""
    model_config = ConfigDict(validate_assignment=True)

    email: str = ""


class ContactFormFields(FormFields):
    """Contact form inputs"""
    name: str = ""
    message: str = ""


class NewsletterFormFields(FormFields):
    """Newsletter signup inputs"""


class DonorFormFields(FormFields):
    """Donor information inputs (tax receipt request)"""
    name: str = ""


class SubmissionRequest(BaseModel):
    """Outbound message built fresh for one submit attempt"""
    recipient: EmailStr
    sender_name: Optional[str] = None
    sender_email: str
    body: str

    def to_template_params(self) -> Dict[str, str]:
        """Map the request onto the provider template variables"""
        params = {
            "to_email": self.recipient,
            "from_email": self.sender_email,
            "message": self.body,
        }
        if self.sender_name is not None:
            params["from_name"] = self.sender_name
        return params


class SubmissionOutcome(BaseModel):
    """Terminal result of a submission: success, or failure with its cause"""
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    success: bool
    cause: Optional[BaseException] = None

    @classmethod
    def succeeded(cls) -> "SubmissionOutcome":
        return cls(success=True)

    @classmethod
    def failed(cls, cause: BaseException) -> "SubmissionOutcome":
        return cls(success=False, cause=cause)
