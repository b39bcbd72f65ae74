"""
Request Execution Module

Every endpoint builder hands its prepared request to ``execute``, which
attaches credentials, sends it through the configured transport, checks the
status code and decodes the JSON body into a typed response.
"""

import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar

import requests
from requests.auth import HTTPBasicAuth

from .errors import ResponseDecodeError, UnexpectedStatusError
from .options import Options

logger = logging.getLogger(__name__)

T = TypeVar("T")


def execute(
    opts: Options,
    request: requests.PreparedRequest,
    authorize: bool,
    expected_status_code: int,
    response_type: Optional[Type[T]] = None,
) -> Optional[T]:
    """
    Perform a single request and decode its response.

    Args:
        opts: Client options holding credentials and transport
        request: The prepared request to send
        authorize: Attach the account SID and token as basic auth
        expected_status_code: The only status code treated as success
        response_type: Class with a ``from_dict`` constructor, or None to skip the body

    Returns:
        The decoded response, or None when no response type was given

    Raises:
        requests.exceptions.RequestException: On transport failure
        UnexpectedStatusError: If the status code does not match
        json.JSONDecodeError: If the body is not valid JSON
    """
    if authorize:
        HTTPBasicAuth(opts.sid, opts.token)(request)

    logger.debug(f"Sending {request.method} {request.url}")
    response = opts.http_client.send(request, stream=True, timeout=opts.timeout)

    try:
        logger.debug(f"Received status {response.status_code} from {request.url}")
        if response.status_code != expected_status_code:
            logger.warning(
                f"Unexpected status from {request.method} {request.url}: "
                f"expected {expected_status_code}, found {response.status_code}"
            )
            raise UnexpectedStatusError(expected_status_code, response.status_code)

        if response_type is None:
            return None

        # Let urllib3 undo any gzip/deflate encoding while reading
        response.raw.decode_content = True
        body = opts.reader_func(response.raw).read()
        # UnicodeDecodeError for bodies that are not UTF-8
        payload = json.loads(body.decode("utf-8"))
        return response_type.from_dict(payload)
    finally:
        response.close()


def require_object(payload: Any, type_name: str) -> Dict[str, Any]:
    """Check that a decoded JSON value is an object"""
    if not isinstance(payload, dict):
        raise ResponseDecodeError(
            f"cannot decode JSON {type(payload).__name__} into {type_name}"
        )
    return payload


def get_field(data: Dict[str, Any], key: str, default: T) -> T:
    """Read a field, treating missing keys and null as the zero value"""
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, type(default)) or isinstance(value, bool) != isinstance(default, bool):
        raise ResponseDecodeError(
            f"cannot decode JSON {type(value).__name__} into field {key!r} "
            f"of type {type(default).__name__}"
        )
    return value
