"""
Simulated account handling for the login gate.

Nothing here talks to a real identity provider. Accounts live in a
`CredentialStore` for the lifetime of the process, and `AuthSimulator` runs
the register / login / guest / sign-out flow against it while tracking the
current session.

Key pieces:
    - `CredentialStore`: insert-only mapping email -> `UserProfile`, seeded
        with the demo account. It is passed into the simulator instead of
        living at module level, so every test can start from a clean store.
    - `AuthSimulator`: holds the `SessionState`, the last error message and
        a list of observers notified after each successful transition.

Implementation notes:
    - Errors are raised as `AuthError` subclasses. The message is also kept in
        `last_error` so the form can redraw it on the next Streamlit run.
    - Login is deliberately permissive: the account must exist, and then the
        sentinel password or any other password is accepted. There is no
        password storage at all.
    - The store is shared by every browser session of a Streamlit server, which
        runs sessions on separate threads, so mutations take a lock.
"""

# Import libraries
from __future__ import annotations
import logging
import threading
from typing import Callable, Dict, List, Optional
from uuid import uuid4

from models.user_model import Authenticated, SessionState, Unauthenticated, UserProfile
from .constants import (
    DEMO_EMAIL, DEMO_USERNAME, GUEST_EMAIL, GUEST_USERNAME, MIN_PASSWORD_LEN, SENTINEL_PASSWORD,
)

logger = logging.getLogger(__name__)

SessionObserver = Callable[[SessionState], None]


# ----- Errors -----
class AuthError(Exception):
    """Base class for user-facing auth failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AuthError):
    pass


class ConflictError(AuthError):
    pass


class InvalidCredentialsError(AuthError):
    pass


def _new_id() -> str:
    return str(uuid4())


# ----- Store -----
class CredentialStore:
    def __init__(self, seed_demo: bool = True):
        self._users: Dict[str, UserProfile] = {}
        self._lock = threading.Lock()
        if seed_demo:
            self.add(UserProfile(id=_new_id(), email=DEMO_EMAIL, username=DEMO_USERNAME))

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, email: object) -> bool:
        return email in self._users

    def contains(self, email: str) -> bool:
        return email in self._users

    def get(self, email: str) -> Optional[UserProfile]:
        return self._users.get(email)

    def add(self, profile: UserProfile) -> None:
        """Insert a profile keyed by its email. Existing keys are never overwritten."""
        with self._lock:
            if profile.email in self._users:
                raise ConflictError("Account with this email already exists.")
            self._users[profile.email] = profile


# ----- Session -----
class AuthSimulator:
    def __init__(self, store: CredentialStore):
        self.store = store
        self._state: SessionState = Unauthenticated()
        self._last_error: Optional[str] = None
        self._observers: List[SessionObserver] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    @property
    def current_profile(self) -> Optional[UserProfile]:
        return self._state.profile

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    def clear_error(self) -> None:
        self._last_error = None

    def subscribe(self, callback: SessionObserver) -> Callable[[], None]:
        """Register `callback(state)` for every session transition; returns an unsubscribe function."""
        self._observers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return _unsubscribe

    def _transition(self, state: SessionState) -> None:
        self._state = state
        for cb in list(self._observers):
            cb(state)

    def _fail(self, error: AuthError) -> AuthError:
        self._last_error = error.message
        return error

    def register(self, email: str, password: str, username: str) -> UserProfile:
        with self._lock:
            self._last_error = None
            if not email or not password or not username:
                raise self._fail(ValidationError("All fields are required."))
            if self.store.contains(email):
                logger.warning("Registration rejected, account exists: %s", email)
                raise self._fail(ConflictError("Account with this email already exists."))
            if len(password) < MIN_PASSWORD_LEN:
                raise self._fail(ValidationError(
                    f"Password must be at least {MIN_PASSWORD_LEN} characters long."
                ))

            profile = UserProfile(id=_new_id(), email=email, username=username)
            try:
                self.store.add(profile)
            except ConflictError as e:
                # another session registered the same email in between
                raise self._fail(e)
            self._transition(Authenticated(profile))
            logger.info("Registered and signed in user: %s", username)
            return profile

    def login(self, email: str, password: str) -> UserProfile:
        with self._lock:
            self._last_error = None
            if not email or not password:
                raise self._fail(ValidationError("Email and password are required."))

            profile = self.store.get(email)
            # TODO: replace the email self-match with real password verification
            # once accounts store a password hash; until then any password works.
            if profile is not None and (password == SENTINEL_PASSWORD or email == profile.email):
                self._transition(Authenticated(profile))
                logger.info("Signed in user: %s", profile.username)
                return profile

            logger.warning("Login failed for email: %s", email)
            raise self._fail(InvalidCredentialsError("Invalid email or password."))

    def sign_in_as_guest(self) -> UserProfile:
        with self._lock:
            self._last_error = None
            profile = UserProfile(id=_new_id(), email=GUEST_EMAIL, username=GUEST_USERNAME)
            self._transition(Authenticated(profile))
            logger.info("Signed in as guest")
            return profile

    def sign_out(self) -> None:
        with self._lock:
            self._last_error = None
            self._transition(Unauthenticated())
            logger.info("User signed out")
