"""
Operations Module

Turns raw operation rows scraped from the portal into normalized, categorized
operations ready for the bank data model.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from classification.engine import CategoryMetadata, ClassificationEngine, Polarity

from .normalizers import is_valid_amount, normalize_amount, parse_date

logger = logging.getLogger(__name__)


@dataclass
class NormalizedOperation:
    """An operation with normalized values and its category metadata."""

    label: str
    amount: float
    date: date | None
    polarity: Polarity
    metadata: CategoryMetadata = field(default_factory=CategoryMetadata)
    currency: str = "EUR"
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "type": "credit" if self.polarity is Polarity.CREDIT else "debit",
            "amount": self.amount,
            "currency": self.currency,
            "date": self.date.isoformat() if self.date else None,
            "metadata": self.metadata.to_dict(),
        }


@dataclass
class NormalizationResult:
    """Result of normalizing the operations of an account."""

    operations: list[NormalizedOperation] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    stats: dict = field(default_factory=dict)

    @property
    def valid_operations(self) -> list[NormalizedOperation]:
        return [op for op in self.operations if op.is_valid]


def normalize_operation(
    label: str,
    amount_text: str,
    date_text: str,
    engine: ClassificationEngine,
    polarity: Polarity | None = None,
    locale: str = "fr",
    currency: str = "EUR"
) -> NormalizedOperation:
    """Normalize and categorize a single operation.

    Invalid amounts or dates are reported in the operation errors.

    Args:
        label: Operation label
        amount_text: Amount as displayed by the portal
        date_text: Date as displayed by the portal
        engine: Classification engine
        polarity: Credit or debit; derived from the amount sign when omitted
        locale: Portal locale
        currency: Account currency

    Returns:
        NormalizedOperation
    """
    errors = []

    amount = normalize_amount(amount_text)
    if not is_valid_amount(amount):
        errors.append(f"Invalid amount: {amount_text!r}")

    op_date = parse_date(date_text, locale)
    if op_date is None:
        errors.append(f"Invalid date: {date_text!r}")

    if polarity is None:
        # NaN compares False, so unparsed amounts count as debits
        polarity = Polarity.CREDIT if amount >= 0 else Polarity.DEBIT

    return NormalizedOperation(
        label=label.strip(),
        amount=amount,
        date=op_date,
        polarity=polarity,
        metadata=engine.classify_label(label, polarity),
        currency=currency,
        errors=errors
    )


def normalize_operations(
    rows: Iterable[dict],
    engine: ClassificationEngine,
    locale: str = "fr",
    currency: str = "EUR"
) -> NormalizationResult:
    """Normalize the operation rows scraped for one account.

    Args:
        rows: Dicts with 'label', 'amount', 'date' and optional 'polarity'
        engine: Classification engine
        locale: Portal locale
        currency: Account currency

    Returns:
        NormalizationResult
    """
    result = NormalizationResult()
    skipped = 0

    for row_num, row in enumerate(rows, start=1):
        missing = [k for k in ("label", "amount", "date") if not row.get(k)]
        if missing:
            result.warnings.append(f"Row {row_num}: missing {', '.join(missing)}")
            skipped += 1
            continue

        polarity = row.get("polarity")
        if isinstance(polarity, str):
            try:
                polarity = Polarity[polarity.upper()]
            except KeyError:
                result.warnings.append(f"Row {row_num}: unknown polarity {polarity!r}")
                polarity = None
        elif polarity is not None and not isinstance(polarity, Polarity):
            result.warnings.append(f"Row {row_num}: unknown polarity {polarity!r}")
            polarity = None

        operation = normalize_operation(
            row["label"],
            row["amount"],
            row["date"],
            engine,
            polarity=polarity,
            locale=locale,
            currency=currency
        )
        for error in operation.errors:
            result.warnings.append(f"Row {row_num}: {error}")
        result.operations.append(operation)

    classified = sum(1 for op in result.operations if op.metadata.is_classified)
    total = len(result.operations)

    result.stats = {
        "total": total,
        "valid": len(result.valid_operations),
        "classified": classified,
        "skipped": skipped,
        "classification_rate": classified / total if total > 0 else 0
    }

    if result.warnings:
        logger.warning(f"{len(result.warnings)} operation rows had problems")

    return result
