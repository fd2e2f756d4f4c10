"""
User profile and session state models.

`UserProfile` mirrors an entry of the in-memory credential store (or a guest
profile that is never stored). `SessionState` is a small tagged union: a
session is either `Unauthenticated` or `Authenticated` with exactly one
profile attached, so "signed in without a profile" cannot be expressed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class UserProfile:
    id: str
    email: str
    username: str


@dataclass(frozen=True)
class Unauthenticated:
    is_authenticated = False

    @property
    def profile(self) -> Optional[UserProfile]:
        return None


@dataclass(frozen=True)
class Authenticated:
    profile: UserProfile
    is_authenticated = True


SessionState = Union[Unauthenticated, Authenticated]
