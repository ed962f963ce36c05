# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Unpadded base64url helpers for the legacy password scheme and its key."""

from __future__ import annotations

import base64
import binascii
import re

_B64U_RE = re.compile(r"[A-Za-z0-9_-]*")


def b64u_encode(data: bytes | str) -> str:
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64u_decode(value: str) -> bytes:
    if not _B64U_RE.fullmatch(value):
        raise ValueError("invalid base64url value: unexpected characters")
    padded = value + "=" * (-len(value) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError(f"invalid base64url value: {exc}") from exc


__all__ = ["b64u_decode", "b64u_encode"]
