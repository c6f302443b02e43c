"""
Bank Integration Module

Normalizes the accounts and operations scraped from the Fortuneo portal and
translates portal failures into connector errors.
"""

from .account_types import (
    ACCOUNT_TYPE_BY_ABBREVIATION,
    AccountType,
    AccountTypeDescriptor,
    BalanceRecipe,
    resolve_account_type,
)
from .normalizers import normalize_amount, is_valid_amount, parse_date
from .operations import (
    NormalizedOperation,
    NormalizationResult,
    normalize_operation,
    normalize_operations,
)
from .portal_errors import (
    ConnectorError,
    VendorDownError,
    is_transport_error,
    translate_error,
    vendor_errors,
)
from .settings import ConnectorSettings, configure_logging

__all__ = [
    # Account types
    "ACCOUNT_TYPE_BY_ABBREVIATION",
    "AccountType",
    "AccountTypeDescriptor",
    "BalanceRecipe",
    "resolve_account_type",
    # Normalizers
    "normalize_amount",
    "is_valid_amount",
    "parse_date",
    # Operations
    "NormalizedOperation",
    "NormalizationResult",
    "normalize_operation",
    "normalize_operations",
    # Portal errors
    "ConnectorError",
    "VendorDownError",
    "is_transport_error",
    "translate_error",
    "vendor_errors",
    # Settings
    "ConnectorSettings",
    "configure_logging",
]
