"""HTTP error handler utilities for IdentityHttpClient.

This module provides error parsing for identity provider responses.
"""

from typing import Optional

import httpx

from ..models.error_response import IdentityFault

# Statuses that mean "these credentials are not valid", as opposed to an
# identity provider malfunction.
REJECTION_STATUS_CODES = frozenset({400, 401, 403, 404})


def extract_request_id_from_response(
    response: Optional[httpx.Response] = None,
) -> Optional[str]:
    """Extract the identity request ID from response headers.

    Args:
        response: HTTP response object (optional)

    Returns:
        Request ID string if found, None otherwise

    """
    if not response:
        return None

    for header_name in ("x-openstack-request-id", "x-request-id", "x-correlation-id"):
        request_id = response.headers.get(header_name)
        if request_id:
            return str(request_id)

    return None


def is_rejection_status(status_code: int) -> bool:
    """Return True if the status code means the credential was refused."""
    return status_code in REJECTION_STATUS_CODES


def parse_error_response(response: httpx.Response) -> Optional[IdentityFault]:
    """Parse a structured identity fault from an HTTP response.

    Args:
        response: HTTP response object

    Returns:
        IdentityFault if the body matches the fault structure, None otherwise

    Examples:
        A body of ``{"unauthorized": {"code": 401, "message": "Bad key"}}``
        yields ``IdentityFault(name="unauthorized", code=401, message="Bad key")``.

    """
    if not response.headers.get("content-type", "").startswith("application/json"):
        return None

    try:
        response_data = response.json()
    except ValueError:
        return None

    if not isinstance(response_data, dict) or len(response_data) != 1:
        return None

    name, body = next(iter(response_data.items()))
    if not isinstance(body, dict) or "code" not in body:
        return None

    try:
        return IdentityFault(
            name=name,
            code=body["code"],
            message=body.get("message"),
            requestId=extract_request_id_from_response(response),
        )
    except (ValueError, TypeError):
        return None
