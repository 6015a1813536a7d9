"""Response decoding -- maps :class:`httpx.Response` to a JSON envelope or an error.

Every Typekit API call answers with a JSON object. Success is signalled by
HTTP 200 or 302; any other status carries an ``errors`` list whose first
entry is the human-readable reason.

See Also:
    :class:`~typekit_cli.client.sync_client.TypekitClient` -- the only caller.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from typekit_cli.exceptions import ApiError, ParseError
from typekit_cli.models import ErrorEnvelope

SUCCESS_STATUSES = frozenset({200, 302})

RecordT = TypeVar("RecordT", bound=BaseModel)


def parse_body(response: httpx.Response) -> dict[str, Any]:
    """Decode the response body as a JSON object.

    An empty body decodes to ``{}`` (DELETE answers carry nothing useful).

    Raises:
        ParseError: If the body is not JSON, or is JSON but not an object.
    """
    text = response.text
    if not text.strip():
        return {}
    try:
        data = response.json()
    except ValueError:
        raise ParseError(f"Could not parse response {text}", body=text) from None
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got: {text}", body=text)
    return data


def extract_errors(data: dict[str, Any]) -> list[str]:
    """Return the server-reported error strings from a failure envelope."""
    raw = data.get("errors")
    if isinstance(raw, str):
        return [raw]
    try:
        return ErrorEnvelope.model_validate({"errors": raw or []}).errors
    except ValidationError:
        return [str(item) for item in raw] if isinstance(raw, list) else [str(raw)]


def decode_envelope(response: httpx.Response) -> dict[str, Any]:
    """Parse *response* and raise for non-success statuses.

    Args:
        response: A completed :class:`httpx.Response`.

    Returns:
        The decoded JSON object.

    Raises:
        ParseError: If the body cannot be decoded.
        ApiError: If the status is not 200 or 302. The message is the
            first ``errors`` entry, or a status summary when none is given.
    """
    data = parse_body(response)
    if response.status_code not in SUCCESS_STATUSES:
        raise ApiError(extract_errors(data), status_code=response.status_code)
    return data


def require(data: dict[str, Any], *keys: str) -> Any:
    """Walk nested *keys* through *data*, raising if any level is missing.

    Example::

        require({"kit": {"id": "abc"}}, "kit", "id")   # -> "abc"

    Raises:
        ParseError: If a key is absent, null, or a level is not an object.
    """
    value: Any = data
    for key in keys:
        if not isinstance(value, dict) or value.get(key) is None:
            path = ".".join(keys)
            raise ParseError(
                f"Response is missing '{path}'",
                body=json.dumps(data, ensure_ascii=False),
            )
        value = value[key]
    return value


def validate_record(model: type[RecordT], value: Any, envelope: dict[str, Any]) -> RecordT:
    """Build *model* from *value*, a fragment of the decoded *envelope*.

    Example::

        validate_record(KitDetail, data["kit"], data)

    Raises:
        ParseError: If *value* does not have the shape *model* expects. The
            whole envelope is kept on the exception as its body.
    """
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise ParseError(
            f"Unexpected {model.__name__} in response: {exc.error_count()} invalid field(s)",
            body=json.dumps(envelope, ensure_ascii=False),
        ) from exc
