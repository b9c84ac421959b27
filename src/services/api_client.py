"""HTTP client for the registration endpoint."""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from src.utils.exceptions import ApiClientError, ApiError, ApiServerError, ApiTimeoutError
from src.utils.settings import get_settings

logger = logging.getLogger(__name__)


@dataclass
class HttpConfig:
    """
    Endpoint location plus timeout and retry policy.

    Attributes:
        base_url: Scheme and host of the registration API, without trailing slash
        request_timeout_s: Timeout in seconds for each attempt
        retries: Extra attempts after a timeout or connection failure
    """
    base_url: str
    request_timeout_s: int = 10
    retries: int = 2

    @classmethod
    def from_settings(cls) -> "HttpConfig":
        settings = get_settings()
        return cls(
            base_url=settings.api_base_url,
            request_timeout_s=settings.request_timeout_s,
            retries=settings.retries,
        )


class RegistrationApiClient:
    """
    Thin wrapper around ``requests.Session`` for JSON POSTs.

    Only transport failures are retried. A response that arrives, even a 5xx,
    is returned to the caller on the first attempt so a registration is never
    sent twice after the server has seen it.
    """

    def __init__(self, cfg: Optional[HttpConfig] = None, session: Optional[requests.Session] = None) -> None:
        self.cfg = cfg or HttpConfig.from_settings()
        self.session = session or requests.Session()

    def url(self, path: str) -> str:
        return f"{self.cfg.base_url.rstrip('/')}/{path.lstrip('/')}"

    def post_json(self, path: str, payload: Dict[str, Any]) -> Any:
        """
        POST ``payload`` as JSON and return the decoded response body.

        Args:
            path: Endpoint path, e.g. ``/api/registrations``
            payload: JSON-serializable request body

        Returns:
            Decoded JSON body, or None when the server sends no JSON

        Raises:
            ApiTimeoutError: If every attempt fails with a timeout/connection error
            ApiError: If the request cannot be sent or its response cannot be read
            ApiClientError: On HTTP 4xx
            ApiServerError: On HTTP 5xx
        """
        url = self.url(path)
        context = f"POST {url}"
        data = json.dumps(payload)
        headers = {"Accept": "application/json", "Content-Type": "application/json"}

        last_err: Optional[ApiTimeoutError] = None
        attempts = max(self.cfg.retries, 0) + 1
        for attempt in range(1, attempts + 1):
            try:
                response = self.session.post(
                    url,
                    data=data,
                    headers=headers,
                    timeout=self.cfg.request_timeout_s,
                )
                break
            except (req_exc.Timeout, req_exc.ConnectionError) as e:
                logger.warning("%s failed (attempt %d/%d): %s", context, attempt, attempts, e)
                last_err = ApiTimeoutError(
                    "Network error: unable to reach the registration server. "
                    "Please check your connection and try again.",
                    context=context,
                )
            except req_exc.RequestException as e:
                logger.error("%s failed: %s", context, e)
                raise ApiError(
                    "Network error: the registration request could not be completed. "
                    "Please try again later.",
                    context=context,
                ) from e
        else:
            raise last_err

        return _handle_response(response, context)


def _response_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _response_message(response: requests.Response, body: Any) -> str:
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    text = (response.text or "").strip()
    if text:
        return text
    return response.reason or f"HTTP {response.status_code}"


def _handle_response(response: requests.Response, context: str) -> Any:
    status = response.status_code
    body = _response_body(response)

    if 200 <= status < 300:
        return body

    message = _response_message(response, body)
    if 400 <= status < 500:
        raise ApiClientError(message, status=status, payload=body, context=context)
    raise ApiServerError(message, status=status, payload=body, context=context)
