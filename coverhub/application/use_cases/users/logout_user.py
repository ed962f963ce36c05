"""Use-case for ending a cookie session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LogoutResult:
    did_logout: bool


class LogoutUserUseCase:
    def execute(self, requested: bool) -> LogoutResult:
        # Session cookies are stateless, so there is nothing to revoke server side;
        # the controller clears the cookie when did_logout is set.
        return LogoutResult(did_logout=bool(requested))
