"""修理店ディレクトリ — メインエントリーポイント.

コマンド:
  import-shops     CSV を読み込んで repair_shops に登録する
  check-data       登録件数とサンプルを確認する
  show-searchable  検索対象の都市名・店舗名を一覧表示する
  search TERM      店舗名・都市・専門で絞り込む
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from datetime import datetime
from pathlib import Path

from shop_import.config import LOG_DIR
from shop_import.db import open_store
from shop_import.diagnostics import check_data, search_shops, show_searchable
from shop_import.errors import ShopImportError
from shop_import.importer import run_import

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_PARTIAL = 2  # --strict 指定時のみ


def setup_logging() -> None:
    """ロギングの初期設定."""
    log_file = LOG_DIR / f"importer_{datetime.now().strftime('%Y%m%d')}.log"
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shop-import")
    sub = parser.add_subparsers(dest="command", required=True)

    imp = sub.add_parser("import-shops", help="CSV を repair_shops に取り込む")
    imp.add_argument("--dir", type=Path, default=Path("."), help="CSV を探すディレクトリ")
    imp.add_argument("--path", type=Path, default=None, help="取り込む CSV を直接指定")
    imp.add_argument(
        "--strict", action="store_true",
        help="1 件でも失敗したら終了コード 2 を返す",
    )

    sub.add_parser("check-data", help="登録件数とサンプルを表示")
    sub.add_parser("show-searchable", help="検索対象の都市名・店舗名を表示")

    search = sub.add_parser("search", help="店舗名・都市・専門で絞り込む")
    search.add_argument("term")
    return parser


def _run_command(args: argparse.Namespace) -> int:
    if args.command == "import-shops":
        summary = run_import(args.dir, args.path)
        if args.strict and summary.failed:
            return EXIT_PARTIAL
        return EXIT_OK

    with open_store() as store:
        if args.command == "check-data":
            check_data(store)
        elif args.command == "show-searchable":
            show_searchable(store)
        elif args.command == "search":
            search_shops(store, args.term)
    return EXIT_OK


def run(argv: list[str] | None = None) -> int:
    """メイン処理. 終了コードを返す."""
    args = build_parser().parse_args(argv)
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("=== %s 開始 ===", args.command)
    start_time = time.time()

    try:
        code = _run_command(args)
    except ShopImportError as e:
        logger.error("中断しました: %s", e)
        return EXIT_FATAL

    elapsed = time.time() - start_time
    logger.info("=== %s 完了 (%.1f 秒) ===", args.command, elapsed)
    return code


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
