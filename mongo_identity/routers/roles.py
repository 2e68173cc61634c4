"""
Roles router for role management and role claims.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status

from mongo_identity.core.exceptions import DuplicateNameError, InvalidArgumentError, StoreError
from mongo_identity.dependencies.stores import get_role_store
from mongo_identity.models.claim import Claim
from mongo_identity.models.role import IdentityRole
from mongo_identity.schemas.claim import ClaimPayload
from mongo_identity.schemas.role import RoleCreate, RoleResponse, RoleUpdate
from mongo_identity.stores.role_store import RoleStore

router = APIRouter(prefix="/roles", tags=["Roles"])


async def _to_response(store: RoleStore, role: IdentityRole) -> RoleResponse:
    return RoleResponse(
        id=await store.get_id(role),
        name=role.name,
        normalized_name=role.normalized_name,
        claims=[ClaimPayload.from_claim(c) for c in await store.get_claims(role)],
    )


async def _get_role_or_404(store: RoleStore, role_id: str) -> IdentityRole:
    role = await store.find_by_id(role_id)
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Role not found",
        )
    return role


# ==================== Role CRUD ====================


@router.get(
    "",
    response_model=list[RoleResponse],
    summary="List roles",
)
async def list_roles(store: RoleStore = Depends(get_role_store)):
    """List every role. Not paginated."""
    return [await _to_response(store, role) for role in await store.list_all()]


@router.post(
    "",
    response_model=RoleResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create role",
)
async def create_role(body: RoleCreate, store: RoleStore = Depends(get_role_store)):
    """
    Create a new role.

    - **name**: Role name (must be unique)
    - **normalized_name**: Optional lookup name, defaults to the upper-cased name
    """
    role = IdentityRole(name=body.name, normalized_name=body.resolved_normalized_name())
    try:
        await store.create(role)
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
    return await _to_response(store, role)


@router.get(
    "/by-name/{normalized_name}",
    response_model=RoleResponse,
    summary="Get role by normalized name",
)
async def get_role_by_name(normalized_name: str, store: RoleStore = Depends(get_role_store)):
    """Exact lookup on the normalized name; the caller normalizes."""
    try:
        role = await store.find_by_normalized_name(normalized_name)
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.to_dict(),
        )
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Role not found",
        )
    return await _to_response(store, role)


@router.get(
    "/{role_id}",
    response_model=RoleResponse,
    summary="Get role",
)
async def get_role(role_id: str, store: RoleStore = Depends(get_role_store)):
    return await _to_response(store, await _get_role_or_404(store, role_id))


@router.put(
    "/{role_id}",
    response_model=RoleResponse,
    summary="Update role",
)
async def update_role(role_id: str, body: RoleUpdate, store: RoleStore = Depends(get_role_store)):
    """Rename a role. Claims are preserved."""
    role = await _get_role_or_404(store, role_id)
    await store.set_name(role, body.name)
    await store.set_normalized_name(role, body.resolved_normalized_name())
    try:
        await store.update(role)
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
    return await _to_response(store, role)


@router.delete(
    "/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete role",
)
async def delete_role(role_id: str, store: RoleStore = Depends(get_role_store)):
    """Delete a role. Users listing the role are not touched."""
    role = await _get_role_or_404(store, role_id)
    await store.delete(role)


# ==================== Role claims ====================


@router.get(
    "/{role_id}/claims",
    response_model=list[ClaimPayload],
    summary="List role claims",
)
async def list_role_claims(role_id: str, store: RoleStore = Depends(get_role_store)):
    role = await _get_role_or_404(store, role_id)
    return [ClaimPayload.from_claim(c) for c in await store.get_claims(role)]


@router.post(
    "/{role_id}/claims",
    response_model=list[ClaimPayload],
    status_code=status.HTTP_201_CREATED,
    summary="Add role claim",
)
async def add_role_claim(role_id: str, body: ClaimPayload, store: RoleStore = Depends(get_role_store)):
    """Add a claim. Adding an existing (type, value) pair changes nothing."""
    role = await _get_role_or_404(store, role_id)
    await store.add_claim(role, body.to_claim())
    return [ClaimPayload.from_claim(c) for c in await store.get_claims(role)]


@router.delete(
    "/{role_id}/claims",
    response_model=list[ClaimPayload],
    summary="Remove role claim",
)
async def remove_role_claim(
    role_id: str,
    claim_type: str = Query(..., alias="type", description="Claim type"),
    claim_value: str = Query(..., alias="value", description="Claim value"),
    store: RoleStore = Depends(get_role_store),
):
    role = await _get_role_or_404(store, role_id)
    await store.remove_claim(role, Claim(type=claim_type, value=claim_value))
    return [ClaimPayload.from_claim(c) for c in await store.get_claims(role)]
