"""登録済みデータの確認用コマンド."""

from __future__ import annotations

import logging

from shop_import.config import (
    CHECK_CITY,
    CHECK_LIMIT,
    SAMPLE_LIMIT,
    SEARCHABLE_FETCH_LIMIT,
    SEARCHABLE_SHOW_LIMIT,
)
from shop_import.db import ShopStore
from shop_import.search import filter_shops

logger = logging.getLogger(__name__)


def check_data(store: ShopStore) -> None:
    """総件数・CHECK_CITY の店舗・都市のサンプルを表示する."""
    logger.info("Total shops: %d", store.count_shops())

    city_shops = store.find_shops_by_city(CHECK_CITY, CHECK_LIMIT)
    logger.info("%s shops found: %d", CHECK_CITY, len(city_shops))
    for shop in city_shops:
        logger.info("  - %s in %s", shop.get("name"), shop.get("city"))

    logger.info("Sample of cities in database:")
    for shop in store.list_shops(SAMPLE_LIMIT, columns="name, city, state"):
        logger.info("  - %s, %s", shop.get("city"), shop.get("state"))


def show_searchable(store: ShopStore) -> None:
    """検索対象になる都市名と店舗名を表示する."""
    shops = store.list_shops(SEARCHABLE_FETCH_LIMIT)

    # 出現順を保ったままユニーク化
    cities = list(dict.fromkeys(shop.get("city") for shop in shops))
    logger.info("Unique cities (first %d):", SEARCHABLE_SHOW_LIMIT)
    for city in cities[:SEARCHABLE_SHOW_LIMIT]:
        logger.info("  - %s", city)

    logger.info("Shop names (first %d):", SEARCHABLE_SHOW_LIMIT)
    for shop in shops[:SEARCHABLE_SHOW_LIMIT]:
        logger.info("  - %s (%s)", shop.get("name"), shop.get("city"))


def search_shops(store: ShopStore, term: str) -> list[dict]:
    """店舗を取得して term で絞り込み、結果を表示する."""
    matches = filter_shops(store.list_shops(SEARCHABLE_FETCH_LIMIT), term)
    logger.info("「%s」の検索結果: %d 件", term, len(matches))
    for shop in matches:
        logger.info(
            "  - %s (%s) %s", shop.get("name"), shop.get("city"), shop.get("specialty") or ""
        )
    return matches
