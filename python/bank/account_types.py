"""
Account Types Module

Maps the CSS classes of a Fortuneo account row to a canonical account type.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable

from .normalizers import normalize_amount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceRecipe:
    """Where the scraper finds the balance of an account, and how to read it.

    The default parser is normalize_amount, which gives NaN for text carrying
    a currency sign ("1 234,56 €"); the scraper passes the bare amount or a
    parser that strips the sign.
    """

    selector: str
    field_selector: str
    parser: Callable[[str], float] = field(default=normalize_amount, compare=False)

    def parse(self, text: str) -> float:
        return self.parser(text)


@dataclass(frozen=True)
class AccountTypeDescriptor:
    """Canonical account type."""

    id: int
    type: str
    balance_recipe: BalanceRecipe | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
        }


class AccountType(Enum):
    """Account types known to the connector."""

    UNKNOWN = AccountTypeDescriptor(0, "Unknown")
    CHECKINGS = AccountTypeDescriptor(
        1, "Checkings",
        BalanceRecipe("#tableauConsultationHisto", "td>strong")
    )
    CREDITCARD = AccountTypeDescriptor(
        2, "CreditCard",
        BalanceRecipe("#tableauConsultationHisto", "td>a>strong")
    )
    SAVINGS = AccountTypeDescriptor(
        3, "Savings",
        BalanceRecipe("div.synthese_livret_cat a", "p.synthese_data_line_right_text")
    )
    MARKET = AccountTypeDescriptor(
        4, "Market",
        BalanceRecipe("#valorisation_compte>table>tbody>tr", "td.gras")
    )
    LIFEINSURANCE = AccountTypeDescriptor(
        5, "LifeInsurance",
        BalanceRecipe("div.synthese_vie>div>div.colonne_gauche>div>p>span", "strong")
    )

    @property
    def descriptor(self) -> AccountTypeDescriptor:
        return self.value

    @property
    def id(self) -> int:
        return self.value.id

    @property
    def type(self) -> str:
        return self.value.type

    @property
    def balance_recipe(self) -> BalanceRecipe | None:
        return self.value.balance_recipe


# First CSS class of an account row -> account type
ACCOUNT_TYPE_BY_ABBREVIATION = MappingProxyType({
    "cco": AccountType.CHECKINGS,
    "esp": AccountType.CHECKINGS,
    "liv_a": AccountType.SAVINGS,
    "liv_d": AccountType.SAVINGS,
    "liv_p": AccountType.SAVINGS,
    "ord": AccountType.MARKET,
    "pea": AccountType.MARKET,
    "vie": AccountType.LIFEINSURANCE,
})


def resolve_account_type(css_classes: str) -> AccountType:
    """Find the type of a bank account from its CSS classes.

    Only the first class is significant: ``"cco compte"`` -> ``"cco"``.

    Args:
        css_classes: CSS classes of the account row

    Returns:
        Matching AccountType, AccountType.UNKNOWN when there is none
    """
    classes = css_classes.split()
    if not classes:
        return AccountType.UNKNOWN

    account_type = ACCOUNT_TYPE_BY_ABBREVIATION.get(classes[0].lower())
    if account_type is None:
        logger.info(f"Unknown account type for classes: {css_classes!r}")
        return AccountType.UNKNOWN

    return account_type
