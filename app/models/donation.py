"""Donation details shown next to the donor information form"""
from pydantic import BaseModel, ConfigDict
from typing import Tuple


class BankDetails(BaseModel):
    """Bank transfer coordinates (read-only)"""
    model_config = ConfigDict(frozen=True)

    beneficiary: str
    iban: str
    bic: str
    bank_name: str
    bank_address: str


DONATION_BANK_DETAILS = BankDetails(
    beneficiary="Halima Samih Alkhalfi",
    iban="FR76 2823 3000 0133 9453 4514 881",
    bic="REVOFRP2",
    bank_name="Revolut Bank UAB",
    bank_address="10 avenue Kléber, 75116, Paris, France",
)

DONATION_PURPOSES: Tuple[str, ...] = (
    "Distribution de denrées alimentaires",
    "Accès aux soins médicaux",
    "Soutien à l'éducation",
    "Construction de puits",
)

TAX_RECEIPT_NOTE = "Un reçu fiscal vous sera délivré pour tout don effectué."
