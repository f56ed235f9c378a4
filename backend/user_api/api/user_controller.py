"""User Controller — adapts HTTP input to use-case calls and shapes JSON responses.

Invariants:
    - Business errors are never caught here; they reach the global handlers
    - Every user in a response goes through format_user (password stripped,
      Accept-negotiated projection)
    - Create and login responses carry a token bound to {id, email}
    - Path ids that are not integers are passed through raw so the id schema rejects them
"""

from fastapi import Response, status
from fastapi.responses import JSONResponse

from user_api.core.auth_tokens import TokenIssuer
from user_api.core.format_user import format_user
from user_api.core.repository_protocols import UserRepository
from user_api.services.create_user import CreateUser
from user_api.services.delete_user import DeleteUser
from user_api.services.get_user import GetUser
from user_api.services.login_user import LoginUser
from user_api.services.update_user import UpdateUser


def send_success(
    status_code: int, data: dict | None, message: str, **extra: object,
) -> JSONResponse:
    """Success envelope {data, message, **extra}."""
    return JSONResponse(
        status_code=status_code,
        content={"data": data, "message": message, **extra},
    )


class UserController:
    def __init__(
        self,
        create_user: CreateUser,
        get_user: GetUser,
        update_user: UpdateUser,
        delete_user: DeleteUser,
        login_user: LoginUser,
        token_issuer: TokenIssuer,
    ):
        self._create_user = create_user
        self._get_user = get_user
        self._update_user = update_user
        self._delete_user = delete_user
        self._login_user = login_user
        self._token_issuer = token_issuer

    async def create_user(self, payload: object, accept: str | None) -> JSONResponse:
        user = await self._create_user.execute(payload)
        return send_success(
            status.HTTP_201_CREATED, format_user(user, accept),
            "User created successfully", token=self._token_issuer.issue(user),
        )

    async def login(self, payload: object, accept: str | None) -> JSONResponse:
        result = await self._login_user.execute(payload)
        return send_success(
            status.HTTP_200_OK, format_user(result.user, accept),
            "Login successful", token=result.token,
        )

    async def get_user(self, raw_id: str, accept: str | None) -> JSONResponse:
        user = await self._get_user.execute(parse_path_id(raw_id))
        return send_success(
            status.HTTP_200_OK, format_user(user, accept),
            "User retrieved successfully",
        )

    async def update_user(
        self, raw_id: str, payload: object, accept: str | None,
    ) -> JSONResponse:
        user = await self._update_user.execute(
            merge_path_id(parse_path_id(raw_id), payload),
        )
        return send_success(
            status.HTTP_200_OK, format_user(user, accept),
            "User updated successfully",
        )

    async def delete_user(self, raw_id: str) -> Response:
        await self._delete_user.execute(parse_path_id(raw_id))
        # 204 carries no body on the wire
        return Response(status_code=status.HTTP_204_NO_CONTENT)


def parse_path_id(raw_id: str) -> int | str:
    try:
        return int(raw_id)
    except ValueError:
        return raw_id


def merge_path_id(user_id: int | str, payload: object) -> object:
    """Combine path id with the update body; the path id wins over a body id."""
    if payload is None:
        return {"id": user_id}
    if isinstance(payload, dict):
        return {**payload, "id": user_id}
    return payload


def build_user_controller(
    repository: UserRepository, token_issuer: TokenIssuer,
) -> UserController:
    """Wire every use case to one repository. Called once at startup."""
    return UserController(
        create_user=CreateUser(repository),
        get_user=GetUser(repository),
        update_user=UpdateUser(repository),
        delete_user=DeleteUser(repository),
        login_user=LoginUser(repository, token_issuer),
        token_issuer=token_issuer,
    )
