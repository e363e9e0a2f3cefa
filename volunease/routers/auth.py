from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response

from ..services.auth_service import (
    TokenIssuer,
    clear_session_cookie,
    get_token_issuer,
    set_session_cookie,
)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/jwt")
def create_session(
    response: Response,
    claims: Dict[str, Any] = Body(...),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    token = issuer.issue(claims)
    set_session_cookie(response, token, issuer.max_age)
    return {"success": True}


@router.post("/logout")
def logout(response: Response):
    clear_session_cookie(response)
    return {"success": True}
