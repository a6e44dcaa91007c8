# Standard library imports
from typing import Any, Dict, Union

# External package imports
from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

# Local application imports
from ..application.dto.auth_dto import AuthResponse, ErrorResponse
from ..application.dto.user_dto import UserResponse
from ..application.use_cases.auth.register_user import RegisterUserUseCase
from ..application.use_cases.auth.login_user import LoginUserUseCase
from ..domain.constants import AuthMessages
from ..domain.models import AuthResult, FailureReason
from ..di.container import get_container


router = APIRouter(tags=["authentication"])

FAILURE_STATUS_CODES = {
    FailureReason.MALFORMED_INPUT: status.HTTP_400_BAD_REQUEST,
    FailureReason.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    FailureReason.DUPLICATE_NATIONAL_ID: status.HTTP_409_CONFLICT,
    FailureReason.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
}

FAILURE_MESSAGES = {
    FailureReason.DUPLICATE_EMAIL: AuthMessages.DUPLICATE_EMAIL,
    FailureReason.DUPLICATE_NATIONAL_ID: AuthMessages.DUPLICATE_NATIONAL_ID,
    FailureReason.INVALID_CREDENTIALS: AuthMessages.INVALID_CREDENTIALS,
}

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
}


def _rejection_response(result: AuthResult, malformed_message: str) -> JSONResponse:
    """
    Map a rejected AuthResult to its HTTP response
    
    Args:
        result: Rejected workflow result
        malformed_message: Top-level message used for MALFORMED_INPUT
        
    Returns:
        JSONResponse with the status code for the failure reason
    """
    if result.failure is FailureReason.MALFORMED_INPUT:
        body = ErrorResponse(message=malformed_message, errors=result.errors)
    else:
        body = ErrorResponse(message=FAILURE_MESSAGES[result.failure])
    
    return JSONResponse(
        status_code=FAILURE_STATUS_CODES[result.failure],
        content=body.model_dump(exclude_none=True),
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def register_user(fields: Dict[str, Any] = Body(...)) -> Union[AuthResponse, JSONResponse]:
    """
    Register a new user
    
    Args:
        fields: JSON object with nombre, dpi, email and password
        
    Returns:
        AuthResponse with the redacted user, or an ErrorResponse
        (400 invalid fields, 409 duplicate email or DPI)
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    
    result = await register_use_case.execute(fields)
    if not result.succeeded:
        return _rejection_response(result, AuthMessages.INVALID_REGISTRATION)
    
    return AuthResponse(
        message=AuthMessages.REGISTERED,
        user=UserResponse.from_user(result.user),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    responses=_ERROR_RESPONSES,
)
async def login_user(fields: Dict[str, Any] = Body(...)) -> Union[AuthResponse, JSONResponse]:
    """
    Authenticate a user by email and password
    
    Args:
        fields: JSON object with email and password
        
    Returns:
        AuthResponse with the redacted user, or an ErrorResponse
        (400 missing fields, 401 invalid credentials)
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    
    result = await login_use_case.execute(fields)
    if not result.succeeded:
        return _rejection_response(result, AuthMessages.LOGIN_FIELDS_REQUIRED)
    
    return AuthResponse(
        message=AuthMessages.LOGGED_IN,
        user=UserResponse.from_user(result.user),
    )
