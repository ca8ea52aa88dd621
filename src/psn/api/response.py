"""
Response Interpreter

Responsibilities:
- Decode a response body into a generic JSON value
- Decide success or in-band failure, whatever the HTTP status
- Validate successful payloads into the operation's result model

The PSN API reports failures inside otherwise ordinary responses, e.g.
``{"error": {"code": 2105356, "message": "User not found"}}``. Recognised
error shapes are registered as probe functions; ``interpret`` runs them in
order and the first one that answers wins.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar, Union

import httpx
from pydantic import ValidationError

from ..exceptions import APIError, ResponseValidationError


logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass(frozen=True)
class Success(Generic[T]):
    """The payload carried no error; ``value`` is the validated result."""
    value: T


@dataclass(frozen=True)
class Failure:
    """The payload carried an in-band error."""
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


Result = Union[Success[T], Failure]

ErrorProbe = Callable[[Any], Optional[Failure]]

_error_probes: List[ErrorProbe] = []


def error_probe(probe: ErrorProbe) -> ErrorProbe:
    """Register a function that recognises one error shape."""
    _error_probes.append(probe)
    return probe


@error_probe
def _error_object(payload: Any) -> Optional[Failure]:
    # Presence of the key is what counts, not its contents.
    if not isinstance(payload, dict) or "error" not in payload:
        return None

    error = payload["error"]
    if isinstance(error, dict):
        message = error.get("message")
        if message is None:
            message = str(error)
        return Failure(message=str(message), details={"error": error})
    return Failure(message=str(error), details={"error": error})


def decode_payload(response: httpx.Response) -> Any:
    """
    Decode a response body as JSON.

    Returns:
        The decoded value, or None for an empty or non-JSON body
    """
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug(f"Non-JSON body from {response.request.url.host}")
        return None


def discriminate(payload: Any) -> Optional[Failure]:
    """Return the Failure described by payload, or None if it carries no error."""
    for probe in _error_probes:
        failure = probe(payload)
        if failure is not None:
            return failure
    return None


def interpret(
    payload: Any,
    result_type: Optional[type] = None,
    root: Optional[str] = None,
) -> Result:
    """
    Turn a decoded payload into a Success or a Failure.

    Args:
        payload: Decoded JSON body (None for an empty body)
        result_type: Model to validate into; None means the operation only
                     reports success, and any error-free payload succeeds
        root: Key to select from the payload before validating

    Returns:
        Failure if an error shape matched, otherwise Success

    Raises:
        ResponseValidationError: If an error-free payload does not validate
    """
    failure = discriminate(payload)
    if failure is not None:
        return failure

    if result_type is None:
        return Success(True)

    data = payload
    if root is not None:
        if not isinstance(payload, dict) or root not in payload:
            raise ResponseValidationError(
                f"Expected '{root}' in response for {result_type.__name__}"
            )
        data = payload[root]

    try:
        return Success(result_type.model_validate(data))
    except ValidationError as e:
        raise ResponseValidationError(
            f"Invalid {result_type.__name__} payload: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e


def unwrap(result: Result, status_code: Optional[int] = None) -> Any:
    """
    Return the value of a Success or raise the Failure as APIError.

    Args:
        result: Outcome of ``interpret``
        status_code: HTTP status, recorded on the raised error

    Raises:
        APIError: If result is a Failure
    """
    if isinstance(result, Failure):
        details = dict(result.details)
        if status_code is not None:
            details["status_code"] = status_code
        raise APIError(result.message, details=details)
    return result.value
