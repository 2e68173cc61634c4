"""
Users router for user accounts and user claims.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status

from mongo_identity.core.exceptions import DuplicateNameError, InvalidArgumentError, StoreError
from mongo_identity.dependencies.stores import get_user_store
from mongo_identity.models.claim import Claim
from mongo_identity.models.user import IdentityUser
from mongo_identity.schemas.claim import ClaimPayload
from mongo_identity.schemas.user import UserCreate, UserResponse, UserUpdate
from mongo_identity.stores.user_store import UserStore

router = APIRouter(prefix="/users", tags=["Users"])


async def _to_response(store: UserStore, user: IdentityUser) -> UserResponse:
    return UserResponse(
        id=await store.get_id(user),
        user_name=user.user_name,
        normalized_user_name=user.normalized_user_name,
        email=user.email,
        claims=[ClaimPayload.from_claim(c) for c in await store.get_claims(user)],
    )


async def _get_user_or_404(store: UserStore, user_id: str) -> IdentityUser:
    user = await store.find_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
)
async def list_users(store: UserStore = Depends(get_user_store)):
    """List every user. Not paginated."""
    return [await _to_response(store, user) for user in await store.list_all()]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
async def create_user(body: UserCreate, store: UserStore = Depends(get_user_store)):
    """
    Create a new user account.

    - **user_name**: Unique user name
    - **normalized_user_name**: Optional lookup name, defaults to the upper-cased user name
    - **email**: Optional contact email
    """
    user = IdentityUser(
        user_name=body.user_name,
        normalized_user_name=body.resolved_normalized_user_name(),
        email=body.email,
    )
    try:
        await store.create(user)
    except DuplicateNameError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message,
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    return await _to_response(store, user)


@router.get(
    "/by-name/{normalized_user_name}",
    response_model=UserResponse,
    summary="Get user by normalized user name",
)
async def get_user_by_name(normalized_user_name: str, store: UserStore = Depends(get_user_store)):
    try:
        user = await store.find_by_normalized_name(normalized_user_name)
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.to_dict(),
        )
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return await _to_response(store, user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)):
    return await _to_response(store, await _get_user_or_404(store, user_id))


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
)
async def update_user(user_id: str, body: UserUpdate, store: UserStore = Depends(get_user_store)):
    """Rename a user or change the contact email. Claims and logins are preserved."""
    user = await _get_user_or_404(store, user_id)
    await store.set_name(user, body.user_name)
    await store.set_normalized_name(user, body.resolved_normalized_user_name())
    user.email = body.email
    try:
        await store.update(user)
    except DuplicateNameError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message,
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    return await _to_response(store, user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
)
async def delete_user(user_id: str, store: UserStore = Depends(get_user_store)):
    user = await _get_user_or_404(store, user_id)
    await store.delete(user)


# ==================== User claims ====================


@router.get(
    "/{user_id}/claims",
    response_model=list[ClaimPayload],
    summary="List user claims",
)
async def list_user_claims(user_id: str, store: UserStore = Depends(get_user_store)):
    user = await _get_user_or_404(store, user_id)
    return [ClaimPayload.from_claim(c) for c in await store.get_claims(user)]


@router.post(
    "/{user_id}/claims",
    response_model=list[ClaimPayload],
    status_code=status.HTTP_201_CREATED,
    summary="Add user claims",
)
async def add_user_claims(
    user_id: str,
    body: list[ClaimPayload],
    store: UserStore = Depends(get_user_store),
):
    """Add several claims in one write. Pairs already present are skipped."""
    user = await _get_user_or_404(store, user_id)
    await store.add_claims(user, [c.to_claim() for c in body])
    return [ClaimPayload.from_claim(c) for c in await store.get_claims(user)]


@router.delete(
    "/{user_id}/claims",
    response_model=list[ClaimPayload],
    summary="Remove user claim",
)
async def remove_user_claim(
    user_id: str,
    claim_type: str = Query(..., alias="type", description="Claim type"),
    claim_value: str = Query(..., alias="value", description="Claim value"),
    store: UserStore = Depends(get_user_store),
):
    user = await _get_user_or_404(store, user_id)
    await store.remove_claim(user, Claim(type=claim_type, value=claim_value))
    return [ClaimPayload.from_claim(c) for c in await store.get_claims(user)]
