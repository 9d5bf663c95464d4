'''
Forwards one logical operation to the backend and applies the proxy
envelope rules shared by every `/api` route.
'''
from typing import Annotated, Any, Optional

from fastapi import Depends, HTTPException, status

from ..common.exceptions import BackendUnavailableError
from ..common.logger import log
from ..common import messages
from .backend_client import BackendClient


class ProxyService:
    """
    Service wrapping BackendClient with the route-level rules:
    - no response, or an empty `message`, becomes `failure_status` (401 by default)
      with the route's localized failure message;
    - transport failure becomes 500.
    The backend payload is otherwise returned unchanged.
    """
    def __init__(
        self,
        backend: Annotated[BackendClient, Depends(BackendClient)]
    ):
        self.backend = backend

    async def forward(
        self,
        endpoint: str,
        method: str,
        failure_message: str,
        body: Optional[Any] = None,
        token: Optional[str] = None,
        params: Optional[dict[str, str]] = None,
        failure_status: int = status.HTTP_401_UNAUTHORIZED,
        require_message: bool = False,
    ) -> dict[str, Any]:
        """
        `require_message=True` also rejects responses that carry no `message`
        at all (token verification); otherwise only an empty string is rejected.
        """
        try:
            response = await self.backend.safe_json_fetch(
                endpoint, method, body=body, token=token, params=params
            )
        except BackendUnavailableError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=messages.SERVER_ERROR,
            )
        except Exception as e:
            log.error(f"Unexpected error forwarding to {endpoint}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=messages.SERVER_ERROR,
            )

        if not response or not isinstance(response, dict):
            log.warning(f"Empty backend response for {endpoint}.")
            raise HTTPException(status_code=failure_status, detail=failure_message)

        message = response.get("message")
        if message == "" or (require_message and not message):
            log.warning(f"Backend response for {endpoint} has no message.")
            raise HTTPException(status_code=failure_status, detail=failure_message)

        return response
