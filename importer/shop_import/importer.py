"""CSV から repair_shops への一括インポート.

処理フロー:
  1. 作業ディレクトリから CSV を 1 つ決める
  2. CSV を 1 行ずつ読み ShopRecord に正規化する
  3. 1 件ずつ DB に insert する（失敗した行はログに残してスキップ）
  4. 成功件数 / 全件数をログに出す
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from shop_import.db import ShopStore, open_store
from shop_import.errors import RecordPersistError
from shop_import.models import ImportSummary, ShopRecord
from shop_import.normalize import normalize_row
from shop_import.source import locate_source, read_rows

logger = logging.getLogger(__name__)


def commit_records(records: Iterable[ShopRecord], store: ShopStore) -> ImportSummary:
    """レコードを 1 件ずつ保存する. 失敗しても次のレコードに進む（リトライなし）."""
    summary = ImportSummary()
    for record in records:
        summary.total += 1
        try:
            store.insert_shop(record)
        except RecordPersistError as e:
            summary.failed_names.append(record.name)
            logger.error("インポート失敗: %s (%s)", record.name, e.reason)
            continue
        summary.imported += 1
    return summary


def run_import(directory: Path, path: Path | None = None) -> ImportSummary:
    """CSV を探して読み込み、全店舗を DB に登録する.

    Raises:
        NoSourceFound: CSV が見つからない場合（DB には何も書かない）
        SourceReadError: CSV が壊れている場合
        ConfigError: Supabase の設定が無い場合
    """
    source = locate_source(directory, path)
    logger.info("読み込み元: %s", source)

    shops = [normalize_row(row) for row in read_rows(source)]
    logger.info("Processing %d shops...", len(shops))

    with open_store() as store:
        summary = commit_records(shops, store)

    logger.info(
        "Successfully imported %d out of %d shops", summary.imported, summary.total
    )
    if summary.failed:
        logger.warning("失敗: %d 件", summary.failed)
    return summary
