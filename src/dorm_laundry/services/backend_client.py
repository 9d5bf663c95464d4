'''
Generic authenticated JSON fetch against the remote backend.
'''
import json
from typing import Any, Optional

import httpx

from ..common.config import settings
from ..common.exceptions import BackendUnavailableError
from ..common.logger import log


class BackendClient:
    """
    Sends one JSON request to the backend with the static `Api-Key` header and,
    when given, the user's session token in `Authorization`.
    No retries: the caller owns retry policy.
    """
    def __init__(self):
        self.base_url = settings.API_BASE_URL.rstrip("/")
        self.api_key = settings.API_AUTH_TOKEN

    def _headers(self, token: Optional[str]) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Api-Key": self.api_key,
        }
        if token:
            headers["Authorization"] = token
        return headers

    async def safe_json_fetch(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[Any] = None,
        token: Optional[str] = None,
        params: Optional[dict[str, str]] = None,
    ) -> Optional[dict[str, Any]]:
        """
        Returns the decoded JSON body, including the body of error responses.
        Returns None when the body is empty or not JSON.
        Raises BackendUnavailableError when the backend cannot be reached.
        """
        url = f"{self.base_url}{endpoint}"
        log.info(f"Backend request: {method} {endpoint}")

        try:
            async with httpx.AsyncClient() as client:
                response = await client.request(
                    method,
                    url,
                    headers=self._headers(token),
                    json=body,
                    params=params,
                )
        except httpx.RequestError as e:
            log.error(f"Backend request {method} {endpoint} failed: {e}", exc_info=True)
            raise BackendUnavailableError(str(e)) from e

        if not response.is_success:
            try:
                error_data = response.json()
            except (json.JSONDecodeError, ValueError):
                log.error(f"Backend returned {response.status_code} for {endpoint} without a JSON body.")
                return None
            log.error(f"Error response from backend ({response.status_code}) for {endpoint}: {error_data}")
            return error_data

        if not response.text:
            log.warning(f"Response is empty: {url}")
            return None

        try:
            return response.json()
        except (json.JSONDecodeError, ValueError) as e:
            log.error(f"Failed to parse JSON from {endpoint}: {e}")
            return None
