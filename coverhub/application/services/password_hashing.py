# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies.

Stored hashes are self-describing: ``#<tag>#<payload>``. The tag selects a
:class:`Scheme`; the payload is whatever that scheme produces. Hashes made
with a scheme other than the hasher's default verify fine but are reported
as :attr:`SchemeStatus.OUTDATED` so the caller can re-hash them.
"""

from __future__ import annotations

import hashlib
import hmac
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from argon2 import Type, extract_parameters
from argon2.exceptions import HashingError, InvalidHashError
from argon2.low_level import hash_secret

from coverhub.domain.exceptions import MalformedHashError, PasswordMismatchError
from coverhub.domain.users.entities import SchemeStatus
from coverhub.domain.users.repositories import PasswordHasher
from coverhub.shared.utils.b64 import b64u_encode

_HASH_RE = re.compile(r"^#(?P<tag>\w+)#(?P<payload>.+)$", re.DOTALL)


@dataclass(slots=True, frozen=True)
class ContentToHash:
    content: str
    salt: UUID


class Scheme(ABC):
    tag: ClassVar[str]

    @abstractmethod
    def hash(self, to_hash: ContentToHash) -> str:
        """Return the scheme payload (without the ``#tag#`` prefix)."""

    @abstractmethod
    def validate(self, to_hash: ContentToHash, payload: str) -> bool:
        """Return whether ``to_hash`` produces ``payload``.

        Raises :class:`MalformedHashError` when the payload cannot be read.
        """


class HmacSha512Scheme(Scheme):
    """Legacy scheme: keyed HMAC-SHA512 over password and salt."""

    tag = "01"
    min_key_bytes = 32

    def __init__(self, key: bytes) -> None:
        if len(key) < self.min_key_bytes:
            raise ValueError(f"HMAC scheme key must be at least {self.min_key_bytes} bytes")
        self._key = key

    def hash(self, to_hash: ContentToHash) -> str:
        mac = hmac.new(self._key, digestmod=hashlib.sha512)
        mac.update(to_hash.content.encode("utf-8"))
        mac.update(str(to_hash.salt).encode("ascii"))
        return b64u_encode(mac.digest())

    def validate(self, to_hash: ContentToHash, payload: str) -> bool:
        return hmac.compare_digest(self.hash(to_hash).encode(), payload.encode())


class Argon2idScheme(Scheme):
    """Argon2id with the user's salt; payload is the PHC encoded string."""

    tag = "02"

    def __init__(
        self,
        *,
        time_cost: int = 2,
        memory_cost: int = 19 * 1024,
        parallelism: int = 1,
        hash_len: int = 32,
    ) -> None:
        self.time_cost = time_cost
        self.memory_cost = memory_cost
        self.parallelism = parallelism
        self.hash_len = hash_len

    def hash(self, to_hash: ContentToHash) -> str:
        encoded = hash_secret(
            secret=to_hash.content.encode("utf-8"),
            salt=to_hash.salt.bytes,
            time_cost=self.time_cost,
            memory_cost=self.memory_cost,
            parallelism=self.parallelism,
            hash_len=self.hash_len,
            type=Type.ID,
        )
        return encoded.decode("ascii")

    def validate(self, to_hash: ContentToHash, payload: str) -> bool:
        try:
            params = extract_parameters(payload)
        except InvalidHashError as exc:
            raise MalformedHashError("unreadable argon2 parameters") from exc
        if params.type is not Type.ID:
            raise MalformedHashError(f"unexpected argon2 variant {params.type.name}")

        try:
            expected = hash_secret(
                secret=to_hash.content.encode("utf-8"),
                salt=to_hash.salt.bytes,
                time_cost=params.time_cost,
                memory_cost=params.memory_cost,
                parallelism=params.parallelism,
                hash_len=params.hash_len,
                type=params.type,
                version=params.version,
            )
        except HashingError as exc:
            raise MalformedHashError("argon2 parameters out of range") from exc
        return hmac.compare_digest(expected, payload.encode("ascii", errors="replace"))


class MultiSchemePasswordHasher(PasswordHasher):
    def __init__(self, schemes: Iterable[Scheme], *, default_tag: str) -> None:
        self._schemes: dict[str, Scheme] = {}
        for scheme in schemes:
            if scheme.tag in self._schemes:
                raise ValueError(f"duplicate password scheme tag {scheme.tag!r}")
            self._schemes[scheme.tag] = scheme
        if default_tag not in self._schemes:
            raise ValueError(f"default password scheme {default_tag!r} is not registered")
        self._default_tag = default_tag

    @property
    def default_tag(self) -> str:
        return self._default_tag

    def hash(self, password: str, salt: UUID, *, tag: str | None = None) -> str:
        tag = tag or self._default_tag
        scheme = self._schemes.get(tag)
        if scheme is None:
            raise ValueError(f"unknown password scheme {tag!r}")
        payload = scheme.hash(ContentToHash(content=password, salt=salt))
        return f"#{tag}#{payload}"

    def verify(self, password: str, salt: UUID, hashed: str) -> SchemeStatus:
        scheme, payload = self._parse(hashed)
        if not scheme.validate(ContentToHash(content=password, salt=salt), payload):
            raise PasswordMismatchError()
        if scheme.tag == self._default_tag:
            return SchemeStatus.CURRENT
        return SchemeStatus.OUTDATED

    def _parse(self, hashed: str) -> tuple[Scheme, str]:
        match = _HASH_RE.match(hashed or "")
        if match is None:
            raise MalformedHashError("missing #tag# prefix")
        scheme = self._schemes.get(match["tag"])
        if scheme is None:
            raise MalformedHashError(f"unknown scheme tag {match['tag']!r}")
        return scheme, match["payload"]


__all__ = [
    "Argon2idScheme",
    "ContentToHash",
    "HmacSha512Scheme",
    "MultiSchemePasswordHasher",
    "Scheme",
]
