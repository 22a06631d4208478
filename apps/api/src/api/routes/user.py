"""User API routes."""

from uuid import UUID

from api.config import Settings, get_settings
from api.representation import negotiate_media_type, render
from api.services import get_user_store
from common.models.page import PaginationHeader
from common.models.patch import PatchOperation
from common.models.user import CreateUserDto, UpdateUserDto, User, UserDto
from common.services.pagination import calculate_page, normalize_page_params
from common.services.patch_engine import apply_patch
from common.services.user_store import UserStore
from common.services.validation import CREATE_USER_RULES, UPDATE_USER_RULES, validate
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, Response, status

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

ALLOWED_METHODS = ("GET", "POST", "OPTIONS")

_ID_RESPONSE_TAG = "guid"


def _user_location(request: Request, user_id: UUID) -> str:
    return str(request.url_for("get_user_by_id", user_id=str(user_id)))


def _page_link(request: Request, page_number: int | None, page_size: int) -> str | None:
    if page_number is None:
        return None
    url = request.url_for("list_users").include_query_params(pageNumber=page_number, pageSize=page_size)
    return str(url)


@router.get("/{user_id}", response_model=UserDto, name="get_user_by_id")
@router.head("/{user_id}", include_in_schema=False)
async def get_user_by_id(
    user_id: UUID, request: Request, store: UserStore = Depends(get_user_store)
) -> Response:
    user = store.find_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")

    if request.method == "HEAD":
        return Response(status_code=status.HTTP_200_OK, media_type=negotiate_media_type(request))

    return render(request, UserDto.from_user(user).model_dump(mode="json", by_alias=True), root_tag="UserDto")


@router.get("", response_model=list[UserDto], name="list_users")
@router.get("/", response_model=list[UserDto], name="list_users_slash", include_in_schema=False)
async def list_users(
    request: Request,
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int | None = Query(None, alias="pageSize"),
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
) -> Response:
    """List users one page at a time.

    Navigation data travels in the X-Pagination header so that the body stays
    a plain array of users.
    """
    if page_size is None:
        page_size = settings.default_page_size
    page_number, page_size = normalize_page_params(page_number, page_size, settings.max_page_size)

    page = store.get_page(page_number, page_size)
    info = calculate_page(page.page_number, page.page_size, page.total_count, settings.max_page_size)

    pagination = PaginationHeader(
        previous_page_link=_page_link(request, info.previous_page_number, info.page_size),
        next_page_link=_page_link(request, info.next_page_number, info.page_size),
        total_count=info.total_count,
        page_size=info.page_size,
        current_page=info.page_number,
        total_pages=info.total_pages,
    )

    users = [UserDto.from_user(user).model_dump(mode="json", by_alias=True) for user in page.items]
    return render(
        request,
        users,
        root_tag="ArrayOfUserDto",
        headers={"X-Pagination": pagination.model_dump_json(by_alias=True)},
    )


@router.post("", response_model=UUID, status_code=status.HTTP_201_CREATED, name="create_user")
@router.post(
    "/", response_model=UUID, status_code=status.HTTP_201_CREATED, name="create_user_slash", include_in_schema=False
)
async def create_user(
    request: Request,
    user: CreateUserDto | None = Body(None),
    store: UserStore = Depends(get_user_store),
) -> Response:
    if user is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Request body is required.")

    validate(user, CREATE_USER_RULES)

    created = store.insert(User(login=user.login, first_name=user.first_name or "", last_name=user.last_name or ""))

    return render(
        request,
        str(created.id),
        root_tag=_ID_RESPONSE_TAG,
        status_code=status.HTTP_201_CREATED,
        headers={"Location": _user_location(request, created.id)},
    )


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={status.HTTP_201_CREATED: {"description": "User created under the id from the path"}},
)
async def update_user(
    user_id: UUID,
    request: Request,
    user: UpdateUserDto | None = Body(None),
    store: UserStore = Depends(get_user_store),
) -> Response:
    """Replace a user, or create it under the id from the path."""
    if user is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Request body is required.")

    validate(user, UPDATE_USER_RULES)

    result = store.update_or_insert(
        User(id=user_id, login=user.login, first_name=user.first_name, last_name=user.last_name)
    )
    if result.inserted:
        return render(
            request,
            str(user_id),
            root_tag=_ID_RESPONSE_TAG,
            status_code=status.HTTP_201_CREATED,
            headers={"Location": _user_location(request, user_id)},
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    openapi_extra={"requestBody": {"content": {"application/json-patch+json": {}}}},
)
async def partially_update_user(
    user_id: UUID,
    operations: list[PatchOperation] | None = Body(None),
    store: UserStore = Depends(get_user_store),
) -> Response:
    """Apply a JSON Patch document to a user.

    The patch runs against a working copy; the stored user changes only when
    every operation applies and the result passes the full-update rules.
    """
    user = store.find_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    if operations is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Patch document is required.")

    patched = apply_patch(UpdateUserDto.from_user(user), operations)
    validate(patched, UPDATE_USER_RULES)

    store.update(
        user.model_copy(
            update={"login": patched.login, "first_name": patched.first_name, "last_name": patched.last_name}
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: UUID, store: UserStore = Depends(get_user_store)) -> Response:
    if not store.delete(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.options("", name="get_users_options")
@router.options("/", include_in_schema=False)
async def get_users_options() -> Response:
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": ", ".join(ALLOWED_METHODS)})
