# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Catalog placeholders served until a real product source exists."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Product:
    id: str
    name: str
    desc: str
    count_claim: int
    count_review: int
    rating: float
    company: str
    company_logo: str
    banner: str


@dataclass(slots=True, frozen=True)
class ClaimPoint:
    month: str
    count: int


@dataclass(slots=True, frozen=True)
class Review:
    author: str
    rating: int
    comment: str
