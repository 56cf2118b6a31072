"""
Password check endpoint for the admin gate.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.dependencies import get_verify_service
from app.domain.models import VerifyRequest, VerifyResponse
from app.services.verify_service import VerifyService

router = APIRouter(tags=["Verify"])


@router.post(
    "/verify",
    response_model=VerifyResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": VerifyResponse}},
)
async def verify_password(
    body: VerifyRequest,
    svc: VerifyService = Depends(get_verify_service),
):
    if svc.verify(body.password):
        return VerifyResponse(success=True)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"success": False},
    )
