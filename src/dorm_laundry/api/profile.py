'''
API endpoint for editing the current user's profile.
'''
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ..common import messages
from ..models import user as user_models
from ..services.proxy_service import ProxyService
from ..services.security import get_auth_token


class ProfileAPI:
    """
    A class to encapsulate the profile proxy endpoint.
    """
    def __init__(self):
        self.router = APIRouter(
            prefix="/api/profile",
            tags=["Profile"]
        )
        self._register_routes()

    def _register_routes(self):
        """Registers all the API routes for this class."""
        self.router.add_api_route(
                "/edit",
                self.edit_profile,
                methods=["POST"])

    async def edit_profile(
        self,
        data: user_models.ProfileEditRequest,
        token: Annotated[str, Depends(get_auth_token)],
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        """
        Phone and dormitory are not part of the editable values and are rejected.
        """
        if data.values is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.PROFILE_DATA_MISSING)
        return await proxy.forward(
            "/users/edit-profile", "POST", messages.PROFILE_EDIT_FAILED,
            body={"user_id": data.user_id, "values": data.values.model_dump(exclude_none=True)},
            token=token,
        )

# Instantiate the class and export its router
profile_api = ProfileAPI()
router = profile_api.router
