from typing import Optional

from fastapi import Depends, Request

from storefront.core.config import Settings
from storefront.core.errors import AuthenticationRequired, AuthorizationDenied
from storefront.core.sessions import SessionStore
from storefront.db.storage import Storage
from storefront.models.entities import User


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_session_token(request: Request, settings: Settings = Depends(get_settings)) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_current_user_id(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionStore = Depends(get_sessions),
) -> int:
    user_id = sessions.resolve(token)
    if user_id is None:
        raise AuthenticationRequired()
    return user_id


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
) -> User:
    user = storage.get_user(user_id)
    if user is None:
        raise AuthenticationRequired()
    return user


def get_admin_user(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise AuthorizationDenied("Forbidden - Admin access required")
    return user
