# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProductListRequestDTO(BaseModel):
    search: str | None = Field(None, max_length=128)


class ProductRequestDTO(BaseModel):
    id: str = Field(min_length=1, max_length=64)


class ClaimHistoryRequestDTO(ProductRequestDTO):
    months: int = Field(12, ge=1, le=60)


class ReviewListRequestDTO(ProductRequestDTO):
    limit: int = Field(5, ge=1, le=50)


class ProductDTO(BaseModel):
    id: str
    name: str
    desc: str
    count_claim: int
    count_review: int
    rating: float
    company: str
    company_logo: str
    banner: str

    model_config = ConfigDict(from_attributes=True)


class ProductListDTO(BaseModel):
    success: bool = True
    rows: list[ProductDTO]


class ProductDetailDTO(ProductDTO):
    success: bool = True


class ClaimPointDTO(BaseModel):
    month: str
    count: int

    model_config = ConfigDict(from_attributes=True)


class ClaimHistoryDTO(BaseModel):
    success: bool = True
    id: str
    rows: list[ClaimPointDTO]


class ReviewDTO(BaseModel):
    author: str
    rating: int
    comment: str

    model_config = ConfigDict(from_attributes=True)


class ReviewListDTO(BaseModel):
    success: bool = True
    id: str
    rows: list[ReviewDTO]


__all__ = [
    "ClaimHistoryDTO",
    "ClaimHistoryRequestDTO",
    "ClaimPointDTO",
    "ProductDTO",
    "ProductDetailDTO",
    "ProductListDTO",
    "ProductListRequestDTO",
    "ProductRequestDTO",
    "ReviewDTO",
    "ReviewListDTO",
    "ReviewListRequestDTO",
]
