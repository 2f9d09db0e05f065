"""設定モジュール — 環境変数・定数定義."""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env はプロジェクトルートに配置
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# --- Supabase ---
# 未設定でも import は通す。接続時に db.open_store() でチェックする
SUPABASE_URL: str = os.environ.get("SUPABASE_URL", "")
SUPABASE_SECRET_KEY: str = os.environ.get("SUPABASE_SECRET_KEY", "")
SUPABASE_SCHEMA: str = os.environ.get("SUPABASE_SCHEMA", "public")
SHOPS_TABLE = "repair_shops"

# --- 入力 CSV ---
SOURCE_SUFFIX = ".csv"
SOURCE_ENCODING = "utf-8-sig"  # BOM 付きでも読めるように
CSV_CHUNK_SIZE = 200  # 一度にメモリに載せる行数

# --- デフォルト値 ---
DEFAULT_NAME = "Unknown"
DEFAULT_REGION = "France"
DEFAULT_SPECIALTY = "Motorcycle repair shop"
DEFAULT_REVIEWS_COUNT = "0"

# --- 診断コマンド ---
CHECK_CITY = "London"
CHECK_LIMIT = 5
SAMPLE_LIMIT = 10
SEARCHABLE_FETCH_LIMIT = 100
SEARCHABLE_SHOW_LIMIT = 20

# --- ログ ---
LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
LOG_DIR.mkdir(exist_ok=True)
