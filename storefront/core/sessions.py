import logging
import secrets
import threading
import time
from typing import Optional

from storefront.core.config import Settings
from storefront.core.security import create_token, decode_token

logger = logging.getLogger(__name__)


class SessionStore:
    """Maps session tokens to user ids.

    A token is a signed JWT carrying the user id (``sub``) and a random session
    id (``sid``). Only session ids still present here are honoured, so logging
    out revokes a token before it expires.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._sessions = {}
        self._lock = threading.Lock()

    def create(self, user_id: int) -> str:
        sid = secrets.token_urlsafe(24)
        expires_at = time.time() + self.settings.SESSION_EXPIRE_MINUTES * 60
        with self._lock:
            self._prune()
            self._sessions[sid] = (user_id, expires_at)
        return create_token(
            {"sub": str(user_id), "sid": sid},
            self.settings.SECRET_KEY,
            self.settings.ALGORITHM,
            self.settings.SESSION_EXPIRE_MINUTES,
        )

    def resolve(self, token: Optional[str]) -> Optional[int]:
        if not token:
            return None
        payload = decode_token(token, self.settings.SECRET_KEY, self.settings.ALGORITHM)
        if not payload:
            return None
        with self._lock:
            entry = self._sessions.get(payload.get("sid"))
            if entry is None:
                return None
            user_id, expires_at = entry
            if expires_at < time.time():
                del self._sessions[payload["sid"]]
                return None
        if str(user_id) != payload.get("sub"):
            return None
        return user_id

    def destroy(self, token: Optional[str]) -> bool:
        if not token:
            return False
        payload = decode_token(token, self.settings.SECRET_KEY, self.settings.ALGORITHM)
        if not payload:
            return False
        with self._lock:
            return self._sessions.pop(payload.get("sid"), None) is not None

    def _prune(self):
        now = time.time()
        expired = [sid for sid, (_, expires_at) in self._sessions.items() if expires_at < now]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug("Pruned %d expired sessions", len(expired))
