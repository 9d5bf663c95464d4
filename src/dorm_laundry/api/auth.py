'''
Authentication proxy endpoints: one-time code, login, register, logout
and token verification.
'''
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..common import messages
from ..common.logger import log
from ..models import user as user_models
from ..services.proxy_service import ProxyService
from ..services.security import clear_auth_cookie, get_auth_token, set_auth_cookie


def _store_session(response: Response, payload: dict[str, Any]) -> None:
    user = payload.get("user")
    if isinstance(user, dict) and user.get("token"):
        set_auth_cookie(response, user["token"], role=user.get("role"))


class AuthRoutes:
    """
    A class to encapsulate all authentication proxy endpoints.
    """
    def __init__(self):
        self.router = APIRouter(
            prefix="/api/auth",
            tags=["Authentication"]
        )
        self._register_routes()

    def _register_routes(self):
        """Registers all the API routes for this class."""
        self.router.add_api_route("", self.dispatch_action, methods=["POST"], summary="Send code or login by action")
        self.router.add_api_route("/send-code", self.send_code, methods=["POST"], summary="Send one-time code")
        self.router.add_api_route("/check-code", self.check_code, methods=["POST"], summary="Check one-time code")
        self.router.add_api_route("/login", self.login, methods=["POST"], summary="Login")
        self.router.add_api_route("/register", self.register, methods=["POST"], summary="Register")
        self.router.add_api_route("/logout", self.logout, methods=["POST"], summary="Logout")
        self.router.add_api_route("/verify-token", self.verify_token_from_cookie, methods=["GET"], summary="Verify session cookie")
        self.router.add_api_route("/verify-token", self.verify_token_from_body, methods=["POST"], summary="Verify token")

    async def dispatch_action(
        self,
        data: user_models.AuthActionRequest,
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        """
        Legacy single entry point: `action` is `sendCode` or `login`.
        """
        if data.action == "sendCode":
            endpoint, body = "/auth/send-code", {"phone": data.phone, "send": False}
        elif data.action == "login":
            endpoint, body = "/auth/login", {"phone": data.phone, "code": data.code, "user": True}
        else:
            log.warning(f"Unknown auth action: {data.action!r}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.INVALID_ACTION)

        return await proxy.forward(endpoint, "POST", messages.OPERATION_FAILED, body=body)

    async def send_code(
        self,
        data: user_models.SendCodeRequest,
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        if not data.phone:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.PHONE_REQUIRED)
        return await proxy.forward(
            "/auth/send-code", "POST", messages.SEND_CODE_FAILED,
            body={"phone": data.phone, "send": False},
            failure_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    async def check_code(
        self,
        data: user_models.PhoneCodeRequest,
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        if not data.phone or not data.code:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.PHONE_AND_CODE_REQUIRED)
        return await proxy.forward(
            "/auth/verify-code", "POST", messages.CHECK_CODE_FAILED,
            body={"phone": data.phone, "code": data.code},
        )

    async def login(
        self,
        data: user_models.PhoneCodeRequest,
        response: Response,
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        """
        Logs in with phone + one-time code and stores the returned token in the
        `auth_token` cookie (1 day for admins, 7 days for users).
        """
        if not data.phone or not data.code:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.PHONE_AND_CODE_REQUIRED)
        payload = await proxy.forward(
            "/auth/login", "POST", messages.LOGIN_FAILED,
            body={"phone": data.phone, "code": data.code},
        )
        _store_session(response, payload)
        return payload

    async def register(
        self,
        data: user_models.RegisterRequest,
        response: Response,
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        if data.userData is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.REGISTER_DATA_MISSING)
        payload = await proxy.forward(
            "/auth/register", "POST", messages.REGISTER_FAILED,
            body=data.userData.model_dump(mode="json"),
        )
        _store_session(response, payload)
        return payload

    async def logout(self, response: Response):
        clear_auth_cookie(response)
        return {"success": True, "message": messages.LOGOUT_SUCCESS}

    async def verify_token_from_cookie(
        self,
        token: Annotated[str, Depends(get_auth_token)],
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        return await proxy.forward(
            "/auth/verify-token", "POST", messages.TOKEN_VERIFY_FAILED,
            body={"token": token},
            require_message=True,
        )

    async def verify_token_from_body(
        self,
        data: user_models.VerifyTokenRequest,
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        """Body shape: `{"token": {"value": "..."}}`."""
        token = (data.token or {}).get("value")
        if not token:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.TOKEN_NOT_FOUND)
        return await proxy.forward(
            "/auth/verify-token", "POST", messages.TOKEN_VERIFY_FAILED,
            body={"token": token},
            require_message=True,
        )

# Create an instance of the class and export its router
auth_routes = AuthRoutes()
router = auth_routes.router
