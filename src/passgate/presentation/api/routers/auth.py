"""Authentication router for registration, login and admin checks."""

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from fastapi import APIRouter, status

from passgate.presentation.api.dependencies import AuthServiceDep, SettingsDep
from passgate.presentation.api.schemas.auth import (
    ErrorResponse,
    IsAdminRequest,
    IsAdminResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from passgate_auth import InternalError
from passgate_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")


async def _with_deadline(operation: Awaitable[T], settings: Settings) -> T:
    """Await an auth operation, failing with InternalError past the deadline."""
    try:
        return await asyncio.wait_for(operation, timeout=settings.request_timeout_seconds)
    except asyncio.TimeoutError as e:
        logger.error(
            "Request deadline of %.1fs exceeded",
            settings.request_timeout_seconds,
        )
        raise InternalError("Request deadline exceeded") from e


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        422: {"description": "Missing or malformed email or password"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthServiceDep,
    settings: SettingsDep,
) -> RegisterResponse:
    user_id = await _with_deadline(
        auth_service.register(email=request.email, password=request.password),
        settings,
    )
    return RegisterResponse(user_id=user_id)


@router.post(
    "/login",
    summary="Authenticate user for an application",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        422: {"description": "Missing email, password or application id"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthServiceDep,
    settings: SettingsDep,
) -> LoginResponse:
    """
    Authenticate with email and password.

    Returns an access token signed with the secret of the requested
    application.
    """
    token = await _with_deadline(
        auth_service.login(
            email=request.email,
            password=request.password,
            app_id=request.app_id,
        ),
        settings,
    )
    return LoginResponse(token=token)


@router.post(
    "/is-admin",
    summary="Check whether a user is an administrator",
    responses={
        200: {"description": "Admin flag"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def is_admin(
    request: IsAdminRequest,
    auth_service: AuthServiceDep,
    settings: SettingsDep,
) -> IsAdminResponse:
    flag = await _with_deadline(auth_service.is_admin(request.user_id), settings)
    return IsAdminResponse(is_admin=flag)
