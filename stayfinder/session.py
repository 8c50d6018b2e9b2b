"""
Session context
Owns the single persisted auth token slot and the "session invalidated" event
"""
import json
import logging
from pathlib import Path
from typing import Callable, Optional

from cryptography.fernet import Fernet, InvalidToken

from .config import TOKEN_ENCRYPTION_KEY, TOKEN_PATH, TOKEN_STORAGE_KEY

logger = logging.getLogger(__name__)

SessionListener = Callable[[], None]


class TokenStore:
    """Persistent key/value slot for the auth token"""

    def get(self) -> Optional[str]:
        raise NotImplementedError

    def set(self, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemoryTokenStore(TokenStore):
    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStore(TokenStore):
    """
    JSON file holding the token under a fixed key.

    When an encryption key is configured the token is stored as a Fernet
    token, the same way integration credentials are kept at rest.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        encryption_key: Optional[str] = None,
        key_name: str = TOKEN_STORAGE_KEY,
    ):
        self.path = Path(path or TOKEN_PATH)
        self.key_name = key_name
        key = encryption_key if encryption_key is not None else TOKEN_ENCRYPTION_KEY
        self.cipher_suite = Fernet(key.encode()) if key else None

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"⚠️ Unreadable session file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"⚠️ Session file {self.path} does not hold an object, ignoring it")
            return {}
        return data

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def get(self) -> Optional[str]:
        stored = self._read().get(self.key_name)
        if not stored or not self.cipher_suite:
            return stored
        try:
            return self.cipher_suite.decrypt(stored.encode()).decode()
        except InvalidToken:
            logger.warning("⚠️ Stored token could not be decrypted, ignoring it")
            return None

    def set(self, token: str) -> None:
        data = self._read()
        if self.cipher_suite:
            data[self.key_name] = self.cipher_suite.encrypt(token.encode()).decode()
        else:
            data[self.key_name] = token
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if self.key_name in data:
            del data[self.key_name]
            self._write(data)


class SessionContext:
    """
    Token, current user and role for the running client.

    Only login flows write the token; the API client clears it through
    invalidate() on any 401. Subscribers decide what to do next (usually
    navigate to the login view).
    """

    def __init__(self, store: Optional[TokenStore] = None):
        self.store = store if store is not None else FileTokenStore()
        self.user = None
        self._listeners: list[SessionListener] = []

    @property
    def token(self) -> Optional[str]:
        return self.store.get()

    def set_token(self, token: str) -> None:
        self.store.set(token)

    def clear(self) -> None:
        self.store.clear()
        self.user = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and bool(self.token)

    @property
    def user_id(self) -> Optional[str]:
        return self.user.id if self.user is not None else None

    @property
    def role(self) -> Optional[str]:
        return self.user.role if self.user is not None else None

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a session-invalidated listener; returns an unsubscribe callable"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def invalidate(self) -> None:
        """Drop the session and tell every subscriber"""
        logger.info("🔒 Session invalidated, clearing stored token")
        self.clear()
        for listener in list(self._listeners):
            listener()
