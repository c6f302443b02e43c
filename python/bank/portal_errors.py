"""
Portal Errors Module

Translates transport failures raised while talking to the bank portal into
connector errors.
"""

import logging
from contextlib import contextmanager
from typing import Generator, NoReturn

import httpx
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)


class ConnectorError(Exception):
    """Base class for errors reported by the connector."""

    code = "UNKNOWN_ERROR"


class VendorDownError(ConnectorError):
    """The bank portal is down or unreachable."""

    code = "VENDOR_DOWN"

    def __init__(self, message: str = "Bank portal is unavailable"):
        super().__init__(message)


def is_transport_error(err: BaseException) -> bool:
    """Check whether an error comes from the network layer.

    Args:
        err: Error raised by an HTTP client or the browser automation

    Returns:
        True for connection failures, timeouts and non-success HTTP statuses
    """
    if isinstance(err, (httpx.TransportError, httpx.HTTPStatusError)):
        return True

    if isinstance(err, PlaywrightTimeoutError):
        return True

    # Navigation failures surface as "net::ERR_NAME_NOT_RESOLVED at https://..."
    if isinstance(err, PlaywrightError):
        return "net::ERR_" in (err.message or "")

    return False


def translate_error(err: BaseException) -> NoReturn:
    """Raise the connector error matching a failed portal interaction.

    Args:
        err: Error raised by the portal interaction

    Raises:
        VendorDownError: If err is a transport failure
        BaseException: err itself otherwise
    """
    if is_transport_error(err):
        logger.error(f"Bank portal request failed: {err}")
        raise VendorDownError() from err

    raise err


@contextmanager
def vendor_errors() -> Generator[None, None, None]:
    """Translate transport failures raised inside the block.

    Usage:
        with vendor_errors():
            response = client.get(url)
            response.raise_for_status()
    """
    try:
        yield
    except Exception as e:
        translate_error(e)
