"""Backlog REST transport"""
import json
import logging
from typing import Any, Dict, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 30.0

# Reported when no HTTP response was received at all.
NO_RESPONSE = 0


class BacklogClient:
    """Thin wrapper issuing one HTTP request per call.

    Never raises on a status code and never retries: every call returns
    (status_code, decoded_json_or_None) and the caller decides what counts
    as success.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        api_key_param: str = "apiKey",
        timeout: float = DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ):
        """Initialize Backlog client"""
        self.api_key = api_key
        self.api_key_param = api_key_param
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    @classmethod
    def from_settings(cls, settings) -> "BacklogClient":
        return cls(
            settings.backlog_api_key,
            api_key_param=settings.api_key_param,
            timeout=settings.request_timeout_seconds,
        )

    def _auth_params(self) -> Dict[str, str]:
        if isinstance(self.api_key, str) and self.api_key:
            return {self.api_key_param: self.api_key}
        return {}

    @staticmethod
    def _decode(response: requests.Response) -> Optional[Any]:
        """Decode the body as UTF-8 JSON, None if it isn't"""
        try:
            return json.loads(response.content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            return None

    def request(self, method: str, url: str, body: Optional[Dict[str, Any]] = None) -> Tuple[int, Optional[Any]]:
        """Send a request and return (status_code, json or None)"""
        kwargs: Dict[str, Any] = {"params": self._auth_params(), "timeout": self.timeout}
        if body is not None:
            kwargs["data"] = json.dumps(body).encode("utf-8")
            kwargs["headers"] = {"Content-Type": "application/json"}

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.exceptions.RequestException as e:
            # Reported as a status code like any other failure; callers decide.
            # str(e) embeds the URL with the API key, so only the type is logged.
            logger.error(f"{method} {url} failed: {type(e).__name__}")
            return NO_RESPONSE, None

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response.status_code, self._decode(response)

    def get(self, url: str) -> Tuple[int, Optional[Any]]:
        return self.request("GET", url)

    def post(self, url: str, body: Dict[str, Any]) -> Tuple[int, Optional[Any]]:
        return self.request("POST", url, body)

    def put(self, url: str, body: Dict[str, Any]) -> Tuple[int, Optional[Any]]:
        return self.request("PUT", url, body)

    def delete(self, url: str) -> Tuple[int, Optional[Any]]:
        return self.request("DELETE", url)
