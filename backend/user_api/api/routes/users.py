"""User Routes — /api/v1/users CRUD and login.

Invariants:
    - Bodies are accepted as raw JSON; validation happens in the use cases
    - /login is declared before /{user_id} so it is never captured as an id
    - The controller comes from app.state via get_user_controller (overridable in tests)
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Header, Request, status

from user_api.api.user_controller import UserController

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def get_user_controller(request: Request) -> UserController:
    """FastAPI dependency for the controller wired at startup."""
    return request.app.state.user_controller


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Any = Body(None),
    accept: str | None = Header(None),
    controller: UserController = Depends(get_user_controller),
):
    """Create a user and issue a token."""
    return await controller.create_user(payload, accept)


@router.post("/login")
async def login(
    payload: Any = Body(None),
    accept: str | None = Header(None),
    controller: UserController = Depends(get_user_controller),
):
    """Check credentials and issue a token."""
    return await controller.login(payload, accept)


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    accept: str | None = Header(None),
    controller: UserController = Depends(get_user_controller),
):
    return await controller.get_user(user_id, accept)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: Any = Body(None),
    accept: str | None = Header(None),
    controller: UserController = Depends(get_user_controller),
):
    """Overwrite the fields present in the body."""
    return await controller.update_user(user_id, payload, accept)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    controller: UserController = Depends(get_user_controller),
):
    return await controller.delete_user(user_id)
