"""routes/auth.py – POST /jwt, POST /logout"""
from fastapi import APIRouter, Response
from ..deps import get_auth_handler
from ..models import UserClaims, SuccessResponse

router = APIRouter(tags=["Auth"])


@router.post("/jwt", response_model=SuccessResponse)
async def issue_token(user: UserClaims, response: Response):
    """Sign the posted user object and set it as the `token` cookie."""
    return get_auth_handler().login(user, response)


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response):
    return get_auth_handler().logout(response)
