"""GitHub gist API client."""

import requests

from gistup.config import ApiConfig
from gistup.errors import (
    BadResponseError,
    InvalidAuthError,
    MissingTokenError,
    NetworkError,
    UpstreamError,
)
from gistup.log import get_logger

logger = get_logger(__name__)

HTTP_CREATED = 201
HTTP_UNAUTHORIZED = 401


def build_headers(token: str) -> dict[str, str]:
    return {
        "Authorization": f"token {token}",
        "Content-Type": "application/json",
        "Accept": "application/vnd.github+json",
    }


def parse_created(response: requests.Response) -> str:
    """Pull html_url out of a 201 reply."""
    try:
        data = response.json()
    except ValueError as e:
        raise BadResponseError() from e

    url = data.get("html_url") if isinstance(data, dict) else None
    if not isinstance(url, str) or not url:
        raise BadResponseError()
    return url


def upload(
    body: bytes,
    token: str,
    api: ApiConfig | None = None,
    session: requests.Session | None = None,
) -> str:
    """
    Create a gist and return its URL.

    Args:
        body: Encoded request body from encode_payload
        token: GitHub access token with the gist scope
        api: Endpoint and timeout settings
        session: Optional requests session (a plain requests.post is used otherwise)

    Returns:
        The html_url of the created gist

    Raises:
        MissingTokenError: token is empty (nothing is sent)
        NetworkError: the request could not be completed
        InvalidAuthError: GitHub answered 401
        BadResponseError: a 201 reply had no readable html_url
        UpstreamError: any other status, with the raw body
    """
    if not token:
        raise MissingTokenError()
    if api is None:
        api = ApiConfig()

    post = session.post if session is not None else requests.post
    logger.debug("POST %s (%d bytes)", api.url, len(body))
    try:
        response = post(api.url, data=body, headers=build_headers(token), timeout=api.timeout)
    except requests.exceptions.RequestException as e:
        logger.debug("Request failed: %s", e)
        raise NetworkError() from e

    logger.debug("GitHub replied %s", response.status_code)
    if response.status_code == HTTP_CREATED:
        return parse_created(response)
    if response.status_code == HTTP_UNAUTHORIZED:
        raise InvalidAuthError()
    raise UpstreamError(response.text, status_code=response.status_code)
