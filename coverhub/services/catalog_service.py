# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import random
from datetime import UTC, date, datetime
from typing import Optional

from coverhub.domain.products.entities import ClaimPoint, Product, Review

CATALOG_SIZE = 8

_REVIEW_AUTHORS = ("Alex", "Sam", "Jordan", "Taylor", "Morgan", "Casey", "Riley", "Jamie")
_REVIEW_COMMENTS = (
    "Claim was settled quickly.",
    "Fair price for the coverage.",
    "Support took a while to answer.",
    "Clear policy terms, no surprises.",
    "Paperwork could be simpler.",
    "Would recommend to friends.",
)


def _product(product_id: str) -> Product:
    return Product(
        id=product_id,
        name="Dummy Product",
        desc="This is a dummy product description.",
        count_claim=10,
        count_review=20,
        rating=4.0,
        company="Dummy Company",
        company_logo="https://dummycompany.com/logo.png",
        banner="https://dummycompany.com/banner.png",
    )


def list_products(search: Optional[str] = None) -> list[Product]:
    rows = [_product(str(i + 1)) for i in range(CATALOG_SIZE)]
    needle = (search or "").strip().lower()
    if not needle:
        return rows
    return [p for p in rows if needle in p.name.lower() or needle in p.company.lower()]


def get_product(product_id: str) -> Product:
    """Placeholder detail; any id is echoed back."""
    return _product(product_id)


def _shift_month(d: date, back: int) -> date:
    idx = d.year * 12 + (d.month - 1) - back
    return date(idx // 12, idx % 12 + 1, 1)


def claim_history(
    product_id: str,
    months: int,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> list[ClaimPoint]:
    """Random monthly claim counts, oldest month first, ending with the current month."""
    rng = rng or random.Random()
    today = today or datetime.now(UTC).date()
    return [
        ClaimPoint(month=_shift_month(today, back).strftime("%Y-%m"), count=rng.randint(0, 50))
        for back in range(months - 1, -1, -1)
    ]


def product_reviews(
    product_id: str, limit: int, rng: Optional[random.Random] = None
) -> list[Review]:
    rng = rng or random.Random()
    return [
        Review(
            author=rng.choice(_REVIEW_AUTHORS),
            rating=rng.randint(1, 5),
            comment=rng.choice(_REVIEW_COMMENTS),
        )
        for _ in range(limit)
    ]
