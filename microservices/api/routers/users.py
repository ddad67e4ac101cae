"""
User API endpoints.

Routes:
- POST /users - Create new user
- GET /users - List all users
- GET /users/{id} - Get single user
- PUT /users/{id} - Update user
- DELETE /users/{id} - Delete user

Dependencies: microservices.application.services, microservices.models
System role: User management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from microservices.api.deps import get_user_service
from microservices.application.services.user_service import UserService
from microservices.models.common import ErrorResponse, MessageResponse
from microservices.models.user import CreateUserRequest, UpdateUserRequest, UserResponse

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)


@router.post("", response_model=UserResponse, status_code=201)
@handle_service_errors
async def create_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create new user.

    Args:
        request: CreateUserRequest with email, name, role
        user_service: Injected UserService

    Returns:
        UserResponse: Created user
    """
    user = await user_service.create_user(
        email=request.email,
        name=request.name,
        role=request.role,
    )
    return UserResponse(**user)


@router.get("", response_model=list[UserResponse])
@handle_service_errors
async def list_users(
    user_service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """List all users."""
    users = await user_service.get_all_users()
    return [UserResponse(**user) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
@handle_service_errors
async def get_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get user by ID."""
    user = await user_service.get_user(user_id)
    return UserResponse(**user)


@router.put("/{user_id}", response_model=UserResponse)
@handle_service_errors
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Update user fields.

    Only fields present in the request body are changed.

    Raises:
        404: User not found
    """
    user = await user_service.update_user(user_id, **request.model_dump(exclude_unset=True))
    return UserResponse(**user)


@router.delete("/{user_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete user by ID."""
    await user_service.delete_user(user_id)
    return MessageResponse(message=f"User with ID {user_id} deleted successfully")
