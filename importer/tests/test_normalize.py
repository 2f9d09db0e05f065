"""normalize モジュールのユニットテスト."""

from dataclasses import fields

from shop_import.normalize import (
    build_description,
    extract_zip_code,
    normalize_row,
    parse_rating,
    split_city,
)


class TestExtractZipCode:
    """extract_zip_code のテスト."""

    def test_zip_in_middle(self):
        assert extract_zip_code("12 Rue de Paris 75015 Paris") == "75015"

    def test_no_zip(self):
        assert extract_zip_code("12 Rue de Paris") == ""

    def test_first_of_many(self):
        """5 桁が複数ある場合は最初のものを使うこと."""
        assert extract_zip_code("Zone 13001 bis 13002 Marseille") == "13001"

    def test_longer_digit_run_ignored(self):
        """6 桁以上の数字列は郵便番号とみなさないこと."""
        assert extract_zip_code("Tel 0612345678") == ""

    def test_empty(self):
        assert extract_zip_code("") == ""


class TestSplitCity:
    """split_city のテスト."""

    def test_city_and_region(self):
        assert split_city("Paris, Île-de-France") == ("Paris", "Île-de-France")

    def test_city_only(self):
        assert split_city("Lyon") == ("Lyon", "France")

    def test_empty_region_falls_back(self):
        assert split_city("Nice, ") == ("Nice", "France")

    def test_extra_commas_kept_in_region(self):
        """最初のカンマでだけ分割すること."""
        assert split_city("London, Greater London, UK") == ("London", "Greater London, UK")

    def test_empty(self):
        assert split_city("") == ("", "France")


class TestParseRating:
    """parse_rating のテスト."""

    def test_decimal(self):
        assert parse_rating("4.7") == 4.7

    def test_zero_is_not_none(self):
        assert parse_rating("0") == 0.0

    def test_empty(self):
        assert parse_rating("") is None

    def test_absent(self):
        assert parse_rating(None) is None

    def test_non_numeric(self):
        assert parse_rating("n/a") is None

    def test_nan(self):
        assert parse_rating("nan") is None

    def test_digit_group_underscore(self):
        """「4_7」を 47.0 と読まないこと."""
        assert parse_rating("4_7") is None

    def test_overflow(self):
        assert parse_rating("1e999") is None

    def test_surrounding_spaces(self):
        assert parse_rating(" 4.5 ") == 4.5


class TestBuildDescription:
    """build_description のテスト."""

    def test_with_values(self):
        assert build_description("Scooter repair", "12") == "Scooter repair. 12 reviews."

    def test_defaults(self):
        assert build_description(None, None) == "Motorcycle repair shop. 0 reviews."


class TestNormalizeRow:
    """normalize_row のテスト."""

    def test_full_row(self):
        record = normalize_row({
            "name": "Moto Atelier",
            "address": "12 Rue de Paris 75015 Paris",
            "city": "Paris, Île-de-France",
            "phone": "+33 1 23 45 67 89",
            "business_type": "Scooter repair",
            "reviews_count": "12",
            "rating": "4.7",
            "website": "https://example.fr",
        })

        assert record.name == "Moto Atelier"
        assert record.address == "12 Rue de Paris 75015 Paris"
        assert record.city == "Paris"
        assert record.state == "Île-de-France"
        assert record.zip_code == "75015"
        assert record.phone == "+33 1 23 45 67 89"
        assert record.email is None
        assert record.description == "Scooter repair. 12 reviews."
        assert record.rating == 4.7
        assert record.specialty == "Scooter repair"

    def test_empty_row_uses_defaults(self):
        """列が 1 つも無くても全フィールドがデフォルトで埋まること."""
        record = normalize_row({})

        assert record.name == "Unknown"
        assert record.address == ""
        assert record.city == ""
        assert record.state == "France"
        assert record.zip_code == ""
        assert record.phone == ""
        assert record.email is None
        assert record.description == "Motorcycle repair shop. 0 reviews."
        assert record.rating is None
        assert record.specialty == "Motorcycle repair shop"

    def test_empty_strings_use_defaults(self):
        record = normalize_row({"name": "", "business_type": "", "reviews_count": ""})

        assert record.name == "Unknown"
        assert record.specialty == "Motorcycle repair shop"
        assert record.description == "Motorcycle repair shop. 0 reviews."

    def test_every_column_present_in_payload(self):
        row = normalize_row({"name": "A"}).to_row()

        assert set(row) == {f.name for f in fields(normalize_row({}))}
        assert all(
            value is not None for key, value in row.items()
            if key not in ("email", "rating")
        )
