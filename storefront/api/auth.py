import logging

from fastapi import APIRouter, Depends, Response, status

from storefront.api.deps import get_session_token, get_sessions, get_settings, get_storage
from storefront.core.config import Settings
from storefront.core.errors import AuthenticationRequired, Conflict, NotFound
from storefront.core.security import hash_password, verify_password
from storefront.core.sessions import SessionStore
from storefront.db.storage import Storage
from storefront.models.entities import User
from storefront.models.schemas import Message, UserCreate, UserLogin, UserOut

logger = logging.getLogger(__name__)

router = APIRouter()


def _start_session(response: Response, user: User, sessions: SessionStore, settings: Settings):
    token = sessions.create(user.id)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.COOKIE_SECURE,
    )


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(
    payload: UserCreate,
    response: Response,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_sessions),
    settings: Settings = Depends(get_settings),
):
    if storage.get_user_by_email(payload.email):
        raise Conflict("Email already in use")
    if storage.get_user_by_username(payload.username):
        raise Conflict("Username already taken")
    data = payload.model_dump()
    data["password"] = hash_password(payload.password)
    user = storage.create_user(data)
    _start_session(response, user, sessions, settings)
    logger.info("Registered user %s (%s)", user.id, user.username)
    return user.model_dump(exclude={"password"})


@router.post("/login", response_model=UserOut)
def login(
    payload: UserLogin,
    response: Response,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_sessions),
    settings: Settings = Depends(get_settings),
):
    user = storage.get_user_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password):
        raise AuthenticationRequired("Invalid credentials")
    _start_session(response, user, sessions, settings)
    logger.info("User %s logged in", user.id)
    return user.model_dump(exclude={"password"})


@router.post("/logout", response_model=Message)
def logout(
    response: Response,
    token=Depends(get_session_token),
    sessions: SessionStore = Depends(get_sessions),
    settings: Settings = Depends(get_settings),
):
    if sessions.destroy(token):
        logger.info("Session closed")
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserOut)
def me(
    token=Depends(get_session_token),
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_sessions),
):
    user_id = sessions.resolve(token)
    if user_id is None:
        raise AuthenticationRequired()
    user = storage.get_user(user_id)
    if user is None:
        sessions.destroy(token)
        raise NotFound("User not found")
    return user.model_dump(exclude={"password"})
