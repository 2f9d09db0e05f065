"""CSV の 1 行を ShopRecord に正規化する.

I/O なしの純粋関数のみ。欠けている列はすべてデフォルト値で埋める。
"""

from __future__ import annotations

import math
import re

from shop_import.config import (
    DEFAULT_NAME,
    DEFAULT_REGION,
    DEFAULT_REVIEWS_COUNT,
    DEFAULT_SPECIALTY,
)
from shop_import.models import RawRow, ShopRecord

# 住所中の独立した 5 桁 (例: "12 Rue de Paris 75015 Paris" -> "75015")
_ZIP_CODE_PATTERN = re.compile(r"\b[0-9]{5}\b", re.ASCII)

# 10 進数表記のみ許可（float() が受け付ける "4_7" や "nan" は除外）
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")


def extract_zip_code(address: str) -> str:
    """住所から最初の 5 桁の郵便番号を取り出す. 無ければ ""."""
    m = _ZIP_CODE_PATTERN.search(address)
    if m:
        return m.group(0)
    return ""


def split_city(raw_city: str) -> tuple[str, str]:
    """「City, Region」形式を (city, state) に分ける.

    最初のカンマだけで分割する。region が無ければ DEFAULT_REGION。
    """
    parts = raw_city.split(",", 1)
    city = parts[0].strip()
    state = parts[1].strip() if len(parts) > 1 else ""
    return city, state or DEFAULT_REGION


def parse_rating(raw: str | None) -> float | None:
    """評価値を float に変換する. 空・数値以外は None."""
    if not raw or not _DECIMAL_PATTERN.match(raw.strip()):
        return None
    rating = float(raw)
    if not math.isfinite(rating):
        return None
    return rating


def build_description(business_type: str | None, reviews_count: str | None) -> str:
    """「{業種}. {レビュー数} reviews.」形式の説明文を作る."""
    return (
        f"{business_type or DEFAULT_SPECIALTY}. "
        f"{reviews_count or DEFAULT_REVIEWS_COUNT} reviews."
    )


def normalize_row(raw: RawRow) -> ShopRecord:
    """RawRow を全フィールド埋まった ShopRecord に変換する."""
    address = raw.get("address") or ""
    city, state = split_city(raw.get("city") or "")
    business_type = raw.get("business_type")

    return ShopRecord(
        name=raw.get("name") or DEFAULT_NAME,
        address=address,
        city=city,
        state=state,
        zip_code=extract_zip_code(address),
        phone=raw.get("phone") or "",
        email=None,
        description=build_description(business_type, raw.get("reviews_count")),
        rating=parse_rating(raw.get("rating")),
        specialty=business_type or DEFAULT_SPECIALTY,
    )
