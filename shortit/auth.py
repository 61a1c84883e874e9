"""Caller identity for link operations.

A request is served either for an ``AuthenticatedContext`` carrying an opaque
user identity, or for an ``AnonymousContext``. Operations branch on the
context type rather than on a nullable user id.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from .common.headers import parse_bearer_token


@dataclass(frozen=True)
class AuthenticatedContext:
    """Caller resolved to a user identity."""

    identity: str


@dataclass(frozen=True)
class AnonymousContext:
    """Caller without a usable identity."""


RequestContext = Union[AuthenticatedContext, AnonymousContext]

ANONYMOUS = AnonymousContext()


def owner_of(context: RequestContext) -> Optional[str]:
    """Identity to record as owner for context, None for anonymous callers."""
    if isinstance(context, AuthenticatedContext):
        return context.identity
    return None


class StaticTokenResolver:
    """Resolve bearer tokens against a fixed token -> identity table."""

    def __init__(
        self,
        tokens: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._tokens = dict(tokens or {})
        self.logger = logger or logging.getLogger(__name__)

    def resolve(self, authorization: Optional[str]) -> RequestContext:
        """Resolve an Authorization header value to a request context.

        Absent, malformed or unknown tokens yield the anonymous context.
        """
        token = parse_bearer_token(authorization)
        if token is None:
            return ANONYMOUS

        identity = self._tokens.get(token)
        if identity is None:
            self.logger.debug("Unknown bearer token, treating caller as anonymous")
            return ANONYMOUS

        return AuthenticatedContext(identity=identity)
