from fastapi import APIRouter, Depends

from storefront.api.deps import get_current_user, get_storage
from storefront.core.errors import Conflict, NotFound
from storefront.core.security import hash_password
from storefront.db.storage import Storage
from storefront.models.entities import User
from storefront.models.schemas import UserOut, UserUpdate

router = APIRouter()


@router.put("/profile", response_model=UserOut)
def update_profile(payload: UserUpdate, user: User = Depends(get_current_user), storage: Storage = Depends(get_storage)):
    data = payload.changes()
    if "username" in data:
        existing = storage.get_user_by_username(data["username"])
        if existing and existing.id != user.id:
            raise Conflict("Username already taken")
    if "email" in data:
        existing = storage.get_user_by_email(data["email"])
        if existing and existing.id != user.id:
            raise Conflict("Email already in use")
    if "password" in data:
        data["password"] = hash_password(data["password"])
    updated = storage.update_user(user.id, data)
    if updated is None:
        raise NotFound("User not found")
    return updated.model_dump(exclude={"password"})
