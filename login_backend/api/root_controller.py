# External package imports
from fastapi import APIRouter

# Local application imports
from ..application.dto.auth_dto import ServiceInfoResponse
from ..domain.constants import AuthMessages


router = APIRouter(tags=["service"])

ENDPOINTS = {
    "register": "POST /register",
    "login": "POST /login",
    "users": "GET /users",
}


@router.get("/", response_model=ServiceInfoResponse)
async def describe_service() -> ServiceInfoResponse:
    """List the endpoints this API exposes"""
    return ServiceInfoResponse(
        message=AuthMessages.SERVICE_DESCRIPTION,
        endpoints=dict(ENDPOINTS),
    )
