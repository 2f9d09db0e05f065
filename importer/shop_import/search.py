"""店舗一覧の絞り込み."""

from __future__ import annotations


def _contains(value: str | None, needle: str) -> bool:
    return bool(value) and needle in value.lower()


def filter_shops(shops: list[dict], term: str) -> list[dict]:
    """name / city / specialty のいずれかに term を含む店舗だけを返す.

    大文字小文字は区別しない。term が空なら全件。
    """
    if not term:
        return list(shops)
    needle = term.lower()
    return [
        shop for shop in shops
        if _contains(shop.get("name"), needle)
        or _contains(shop.get("city"), needle)
        or _contains(shop.get("specialty"), needle)
    ]
