"""
Page-level wrappers around service calls.

``fetch`` is used to load what a page displays: a failure is flashed and the
page renders with ``data=None``. ``mutate`` is used for form posts and
button actions: success and failure messages are flashed and the view picks
the redirect. Expired sessions are never handled here; ``ApiUnauthorized``
always reaches the app-level handler.
"""

from dataclasses import dataclass
from typing import Any, Optional

from flask import current_app, flash

from services.api import ApiError, ApiUnauthorized

GENERIC_ERROR = "An error occurred"


@dataclass
class FetchResult:
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch(call, *args, quiet=False, **kwargs) -> FetchResult:
    try:
        resp = call(*args, **kwargs)
    except ApiUnauthorized:
        raise
    except ApiError as exc:
        current_app.logger.info("Fetch %s failed: %s", getattr(call, "__name__", call), exc.message)
        if not quiet:
            flash(exc.message, "danger")
        return FetchResult(error=exc.message)

    if not resp.success:
        message = resp.message or GENERIC_ERROR
        if not quiet:
            flash(message, "danger")
        return FetchResult(error=message)

    return FetchResult(data=resp.data)


def mutate(call, *args, success=None, failure=None, **kwargs) -> FetchResult:
    """Run a state-changing call and flash its outcome."""
    try:
        resp = call(*args, **kwargs)
    except ApiUnauthorized:
        raise
    except ApiError as exc:
        current_app.logger.info("Mutation %s failed: %s", getattr(call, "__name__", call), exc.message)
        flash(f"{failure}: {exc.message}" if failure else exc.message, "danger")
        return FetchResult(error=exc.message)

    if not resp.success:
        message = resp.message or failure or GENERIC_ERROR
        flash(message, "danger")
        return FetchResult(error=message)

    flash(success or resp.message or "Operation successful", "success")
    return FetchResult(data=resp.data)
