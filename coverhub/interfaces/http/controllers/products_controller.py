# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import random
from typing import TypeVar

from flask import Blueprint, Response, jsonify, request
from pydantic import BaseModel, ValidationError

from coverhub.interfaces.http.dto.products import (
    ClaimHistoryDTO,
    ClaimHistoryRequestDTO,
    ClaimPointDTO,
    ProductDetailDTO,
    ProductDTO,
    ProductListDTO,
    ProductListRequestDTO,
    ProductRequestDTO,
    ReviewDTO,
    ReviewListDTO,
    ReviewListRequestDTO,
)
from coverhub.services import catalog_service
from coverhub.shared.errors.validation import raise_validation_error
from coverhub.shared.logging import logger


T = TypeVar("T", bound=BaseModel)


def _parse(model: type[T]) -> T:
    try:
        return model.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class ProductsController:
    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng

    def list_products(self) -> Response:
        dto = _parse(ProductListRequestDTO)
        rows = catalog_service.list_products(dto.search)
        logger.debug(f"products.list: search={dto.search!r} rows={len(rows)}")
        payload = ProductListDTO(rows=[ProductDTO.model_validate(p) for p in rows])
        return jsonify(payload.model_dump())

    def detail(self) -> Response:
        dto = _parse(ProductRequestDTO)
        product = catalog_service.get_product(dto.id)
        return jsonify(ProductDetailDTO.model_validate(product).model_dump())

    def claims(self) -> Response:
        dto = _parse(ClaimHistoryRequestDTO)
        points = catalog_service.claim_history(dto.id, dto.months, rng=self._rng)
        payload = ClaimHistoryDTO(
            id=dto.id, rows=[ClaimPointDTO.model_validate(p) for p in points]
        )
        return jsonify(payload.model_dump())

    def reviews(self) -> Response:
        dto = _parse(ReviewListRequestDTO)
        reviews = catalog_service.product_reviews(dto.id, dto.limit, rng=self._rng)
        payload = ReviewListDTO(id=dto.id, rows=[ReviewDTO.model_validate(r) for r in reviews])
        return jsonify(payload.model_dump())

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("products", __name__, url_prefix="/api/product")
        bp.add_url_rule("/list", view_func=self.list_products, methods=["POST"])
        bp.add_url_rule("/detail", view_func=self.detail, methods=["POST"])
        bp.add_url_rule("/claims", view_func=self.claims, methods=["POST"])
        bp.add_url_rule("/reviews", view_func=self.reviews, methods=["POST"])
        return bp
