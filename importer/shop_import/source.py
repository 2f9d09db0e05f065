"""入力 CSV の探索と読み込み.

CSV は pandas の chunksize 指定で少しずつ読み、1 行ずつ RawRow として返す。
ファイル全体を一度にメモリへ載せることはしない。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pandas as pd

from shop_import.config import CSV_CHUNK_SIZE, SOURCE_ENCODING, SOURCE_SUFFIX
from shop_import.errors import NoSourceFound, SourceReadError
from shop_import.models import RawRow

logger = logging.getLogger(__name__)


def locate_source(directory: Path, path: Path | None = None) -> Path:
    """取り込み対象の CSV を 1 つ決める.

    Args:
        directory: 探索するディレクトリ（直下のみ）
        path: 明示指定されたファイル。指定時は探索しない

    Returns:
        CSV ファイルのパス

    Raises:
        NoSourceFound: 対象ファイルが無い場合
    """
    if path is not None:
        if not path.is_file():
            raise NoSourceFound(
                f"CSV file {path} does not exist. Pass an existing file with --path."
            )
        return path

    if not directory.is_dir():
        raise NoSourceFound(f"Directory {directory} does not exist.")

    # 複数ある場合も毎回同じファイルを選ぶよう名前順で先頭を採用
    candidates = sorted(
        entry for entry in directory.iterdir()
        if entry.is_file() and entry.name.endswith(SOURCE_SUFFIX)
    )
    if not candidates:
        raise NoSourceFound(
            f"No {SOURCE_SUFFIX} file found in {directory}. "
            "Place the export there or pass --path."
        )
    if len(candidates) > 1:
        logger.warning(
            "CSV が %d 件あります。%s を使用し、残りは無視します: %s",
            len(candidates), candidates[0].name,
            ", ".join(c.name for c in candidates[1:]),
        )
    return candidates[0]


def read_rows(path: Path) -> Iterator[RawRow]:
    """CSV をヘッダ付きで読み、1 行ずつ列名 -> 文字列の dict を返す.

    列数が足りない行は欠けた列をキーごと省く（エラーにはしない）。
    空ファイルは 0 行として扱う。

    Raises:
        SourceReadError: クォート未終了・文字コード不正などで読み進められない場合
    """
    try:
        with pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            index_col=False,
            encoding=SOURCE_ENCODING,
            chunksize=CSV_CHUNK_SIZE,
        ) as reader:
            for chunk in reader:
                for record in chunk.to_dict("records"):
                    # 欠損セルは NaN (float) で来るので落とす
                    yield {
                        str(key): value for key, value in record.items()
                        if isinstance(value, str)
                    }
    except pd.errors.EmptyDataError:
        # 0 バイトのファイルは 0 行として扱う
        logger.warning("CSV が空です: %s", path)
        return
    except (pd.errors.ParserError, UnicodeDecodeError) as error:
        raise SourceReadError(f"Error reading CSV {path}: {error}") from error
    except OSError as error:
        raise SourceReadError(f"Could not open CSV {path}: {error}") from error
