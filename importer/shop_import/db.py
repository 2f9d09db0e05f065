"""Supabase データベース操作モジュール.

店舗は repair_shops テーブルに配置。
Supabase client のスキーマ指定は .schema() で行う。
クライアントはプロセス全体で共有せず、open_store() の with ブロック内でだけ使う。
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from shop_import.config import (
    SHOPS_TABLE,
    SUPABASE_SCHEMA,
    SUPABASE_SECRET_KEY,
    SUPABASE_URL,
)
from shop_import.errors import ConfigError, RecordPersistError
from shop_import.models import ShopRecord

logger = logging.getLogger(__name__)

_LIST_COLUMNS = "name, city, state, specialty"


class ShopStore:
    """repair_shops テーブルへの読み書き."""

    def __init__(self, client: Client) -> None:
        self._client = client
        # schema() は呼ぶたびに HTTP セッションを作るので 1 回だけ
        self._rest = client.schema(SUPABASE_SCHEMA)

    def _table(self):
        """SUPABASE_SCHEMA スキーマの repair_shops テーブルを参照する."""
        return self._rest.table(SHOPS_TABLE)

    def insert_shop(self, record: ShopRecord) -> None:
        """店舗を 1 件追加する（upsert ではないので同じ店舗も重複して入る）.

        Raises:
            RecordPersistError: 制約違反などで DB に拒否された場合
        """
        try:
            self._table().insert(record.to_row()).execute()
        except APIError as error:
            raise RecordPersistError(record.name, error.message or str(error)) from error
        except httpx.HTTPError as error:
            # タイムアウト・接続断なども 1 件分の失敗として扱う
            raise RecordPersistError(record.name, f"{type(error).__name__}: {error}") from error

    def count_shops(self) -> int:
        """登録済み店舗数を返す."""
        resp = self._table().select("id", count="exact").execute()
        return resp.count or 0

    def find_shops_by_city(self, term: str, limit: int) -> list[dict]:
        """city に term を含む店舗を大文字小文字を区別せず取得する."""
        resp = (
            self._table()
            .select(_LIST_COLUMNS)
            .ilike("city", f"%{term}%")
            .limit(limit)
            .execute()
        )
        return resp.data

    def list_shops(self, limit: int, columns: str = _LIST_COLUMNS) -> list[dict]:
        """先頭から limit 件の店舗を取得する."""
        resp = self._table().select(columns).limit(limit).execute()
        return resp.data

    def close(self) -> None:
        """スキーマ用とデフォルトの HTTP セッションを閉じる."""
        self._rest.session.close()
        self._client.postgrest.session.close()


@contextmanager
def open_store() -> Iterator[ShopStore]:
    """ShopStore を生成し、ブロックを抜けるときに必ず close する.

    Raises:
        ConfigError: SUPABASE_URL / SUPABASE_SECRET_KEY が未設定の場合
    """
    if not SUPABASE_URL or not SUPABASE_SECRET_KEY:
        raise ConfigError(
            "SUPABASE_URL and SUPABASE_SECRET_KEY must be set. "
            "Add them to .env at the project root."
        )
    store = ShopStore(create_client(SUPABASE_URL, SUPABASE_SECRET_KEY))
    try:
        yield store
    finally:
        store.close()
        logger.debug("Supabase セッションを閉じました")
