"""データモデル定義."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

# CSV 1 行分。列名 -> 生の文字列。normalize より先には渡さない
RawRow = dict[str, str]


@dataclass
class ShopRecord:
    """repair_shops テーブルに書き込む店舗レコード."""

    name: str
    address: str
    city: str
    state: str
    zip_code: str  # 住所中の最初の 5 桁。無ければ ""
    phone: str
    email: str | None  # CSV に存在しないため常に None
    description: str
    rating: float | None  # None = 評価なし（0 とは区別する）
    specialty: str

    def to_row(self) -> dict:
        """insert 用の dict に変換する."""
        return asdict(self)


@dataclass
class ImportSummary:
    """インポート 1 回分の集計."""

    total: int = 0
    imported: int = 0
    failed_names: list[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        """保存に失敗した件数."""
        return len(self.failed_names)
