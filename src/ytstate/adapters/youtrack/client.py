"""
YouTrack API Client - Low-level HTTP client for the YouTrack REST API.

This handles the raw HTTP communication with YouTrack.
The YouTrackAdapter uses this to implement the IssueTrackerPort.
"""

import logging
from typing import Any, Optional

import requests

from ...core.exceptions import (
    AuthenticationError,
    ResponseDecodeError,
    ResponseError,
    TransportError,
)
from ...core.ports.config_provider import DEFAULT_TIMEOUT


class YouTrackApiClient:
    """
    Low-level YouTrack REST API client.

    Handles bearer authentication, TLS settings, timeouts and the
    "200 or nothing" response contract.
    """

    API_PATH = "api"

    # Maximum amount of an error body kept on exceptions and in logs
    ERROR_BODY_LIMIT = 500

    def __init__(
        self,
        base_url: str,
        token: str,
        verify_ssl: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the YouTrack client.

        Args:
            base_url: YouTrack instance URL (e.g., https://company.youtrack.cloud)
            token: Permanent token used as bearer credential
            verify_ssl: If False, TLS certificates are not checked
            timeout: Seconds to wait for each request
        """
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}/{self.API_PATH}"
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.logger = logging.getLogger("YouTrackApiClient")

        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        self._session = requests.Session()
        self._session.headers.update(self.headers)
        self._session.verify = verify_ssl

        if not verify_ssl:
            self.logger.warning(
                f"TLS certificate verification is disabled for {self.base_url}"
            )

    def __enter__(self) -> "YouTrackApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    # -------------------------------------------------------------------------
    # Core Request Methods
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        endpoint: str,
        decode: bool = True,
        **kwargs
    ) -> Any:
        """
        Make an authenticated request to the YouTrack API.

        Args:
            method: HTTP method (GET, POST)
            endpoint: API endpoint (e.g., 'issues/2-42')
            decode: If False, a 200 body is not parsed and None is returned
            **kwargs: Additional arguments for requests

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            TransportError: If no response was received
            ResponseError: If the status is not 200
            ResponseDecodeError: If the body is not valid JSON
        """
        url = f"{self.api_url}/{endpoint}"
        kwargs.setdefault("timeout", self.timeout)
        # A session-level verify=False loses to REQUESTS_CA_BUNDLE
        kwargs.setdefault("verify", self.verify_ssl)

        self.logger.debug(f"{method} {url} params={kwargs.get('params')}")

        try:
            response = self._session.request(method, url, **kwargs)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timed out: {e}", cause=e)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Connection failed: {e}", cause=e)

        return self._handle_response(response, endpoint, decode=decode)

    def get(self, endpoint: str, params: Optional[dict] = None, **kwargs) -> Any:
        """GET request."""
        return self.request("GET", endpoint, params=params, **kwargs)

    def post(
        self,
        endpoint: str,
        json: Optional[dict] = None,
        params: Optional[dict] = None,
        **kwargs
    ) -> Any:
        """POST request."""
        return self.request("POST", endpoint, json=json, params=params, **kwargs)

    # -------------------------------------------------------------------------
    # Response Handling
    # -------------------------------------------------------------------------

    def _handle_response(
        self,
        response: requests.Response,
        endpoint: str,
        decode: bool = True,
    ) -> Any:
        """Handle API response and errors."""
        status = response.status_code
        self.logger.debug(f"{endpoint} -> {status}")

        if status == 200:
            if not decode or not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                raise ResponseDecodeError(
                    f"Invalid JSON from {endpoint}: {e}", cause=e
                )

        error_body = response.text[:self.ERROR_BODY_LIMIT] if response.text else ""

        if status == 401:
            raise AuthenticationError(
                "Authentication failed. Check the YouTrack token.",
                status_code=status,
                body=error_body,
            )

        raise ResponseError(
            f"API error {status}: {error_body}",
            status_code=status,
            body=error_body,
        )
