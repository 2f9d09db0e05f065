"""インポート処理の例外定義.

致命的なもの（NoSourceFound, SourceReadError, ConfigError）は CLI まで伝播させ、
RecordPersistError だけは 1 件単位で握りつぶしてループを継続する。
"""

from __future__ import annotations


class ShopImportError(Exception):
    """全例外の基底クラス."""


class ConfigError(ShopImportError):
    """Supabase の接続設定が不足している."""


class NoSourceFound(ShopImportError):
    """取り込み対象の CSV が見つからない."""


class SourceReadError(ShopImportError):
    """CSV ストリームが壊れていて読み進められない."""


class RecordPersistError(ShopImportError):
    """1 件の店舗レコードの保存に失敗した."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Failed to import {name}: {reason}")
        self.name = name
        self.reason = reason
