"""
Тесты для загрузки входных документов

Проверяет:
1. Упорядочивание ключей (числовое / лексикографическое)
2. Выбор первых k записей (use_k), минимум два корня
3. x из ключа точки, fallback для нечисловых ключей
4. UnsupportedBase / InvalidDigit / InvalidInput с ключом записи
5. Пропуск неполных записей
6. Чтение файлов
"""

import json
import logging
from decimal import Decimal
from pathlib import Path

import pytest

from quadc.core.domain import Point, Root
from quadc.core.errors import InvalidDigit, InvalidInput, UnsupportedBase
from quadc.evidence import (
    decode_record,
    is_numeric_key,
    load_document,
    load_points,
    load_roots,
    numeric_key_value,
    order_labels,
    parse_document,
    point_x,
    read_evidence_file,
    select_labels,
)

DATA_DIR = Path(__file__).parent.parent / "data"


@pytest.fixture
def sample_points_data():
    """Документ точек в формате {keys, "1": {base, value}, ...}"""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


# =============================================================================
# ORDERING
# =============================================================================


class TestOrdering:
    """Тесты для order_labels / select_labels"""

    def test_integer_keys_sorted_numerically(self) -> None:
        assert order_labels(["10", "2", "1", "-3"]) == ["-3", "1", "2", "10"]

    def test_mixed_keys_sorted_lexicographically(self) -> None:
        assert order_labels(["b", "10", "2", "a"]) == ["10", "2", "a", "b"]

    def test_is_numeric_key(self) -> None:
        for key in ["42", "-7", " 3 ", "1.5", "10.0", "1e1", ".5", "0x10", "0o17", "0b101"]:
            assert is_numeric_key(key), key
        for key in ["x1", "", "  ", "1_000", "NaN", "Infinity", "0x", "0b12", "-0x10"]:
            assert not is_numeric_key(key), key

    def test_numeric_key_value(self) -> None:
        assert numeric_key_value("1e1") == 10
        assert numeric_key_value("0x10") == 16
        assert numeric_key_value("0b101") == 5
        assert numeric_key_value("-2.50") == Decimal("-2.5")

    def test_decimal_and_prefixed_keys_sorted_numerically(self) -> None:
        assert order_labels(["10.0", "2", "1"]) == ["1", "2", "10.0"]
        assert order_labels(["0x10", "1e1", "3", "0.5"]) == ["0.5", "3", "1e1", "0x10"]

    def test_equal_numeric_keys_keep_document_order(self) -> None:
        assert order_labels(["10", "1e1", "10.0"]) == ["10", "1e1", "10.0"]

    def test_select_without_k(self) -> None:
        assert select_labels(["1", "2", "3"], None) == ["1", "2", "3"]

    def test_select_first_k(self) -> None:
        assert select_labels(["1", "2", "3"], 2) == ["1", "2"]
        assert select_labels(["1", "2", "3"], 0) == []
        assert select_labels(["1", "2", "3"], 10) == ["1", "2", "3"]

    def test_select_minimum(self) -> None:
        assert select_labels(["a", "b", "c"], 1, minimum=2) == ["a", "b"]


# =============================================================================
# POINTS
# =============================================================================


class TestLoadPoints:
    """Тесты для load_points"""

    def test_decodes_all_records(self, sample_points_data) -> None:
        points = load_points(parse_document(sample_points_data))
        assert points == [
            Point(x=1, y=4, label="1"),
            Point(x=2, y=7, label="2"),
            Point(x=3, y=12, label="3"),
            Point(x=6, y=39, label="6"),
        ]

    def test_use_k_truncates(self, sample_points_data) -> None:
        points = load_points(parse_document(sample_points_data), use_k=True)
        assert [p.label for p in points] == ["1", "2", "3"]

    def test_use_k_without_metadata(self, sample_points_data) -> None:
        del sample_points_data["keys"]
        points = load_points(parse_document(sample_points_data), use_k=True)
        assert len(points) == 4

    def test_keys_reordered_numerically(self) -> None:
        document = parse_document(
            {
                "10": {"base": 10, "value": "100"},
                "2": {"base": 10, "value": "4"},
                "1": {"base": 10, "value": "1"},
            }
        )
        assert [p.x for p in load_points(document)] == [1, 2, 10]

    def test_non_numeric_keys_use_position(self) -> None:
        document = parse_document(
            {
                "beta": {"base": 10, "value": "20"},
                "alpha": {"base": 10, "value": "10"},
            }
        )
        points = load_points(document)
        assert points == [
            Point(x=1, y=10, label="alpha"),
            Point(x=2, y=20, label="beta"),
        ]

    def test_decimal_key_gives_integer_x(self) -> None:
        """Ключ "10.0" числовой: порядок 1, 2, 10 и x = 10"""
        document = parse_document(
            {
                "10.0": {"base": 10, "value": "123"},
                "1": {"base": 10, "value": "6"},
                "2": {"base": 10, "value": "11"},
            }
        )
        points = load_points(document)
        assert [(p.x, p.label) for p in points] == [(1, "1"), (2, "2"), (10, "10.0")]

    def test_exponent_and_hex_keys(self) -> None:
        document = parse_document(
            {
                "1e1": {"base": 10, "value": "1"},
                "0x10": {"base": 10, "value": "2"},
                "3": {"base": 10, "value": "3"},
            }
        )
        assert [p.x for p in load_points(document)] == [3, 10, 16]

    def test_fractional_key_rejected(self) -> None:
        document = parse_document(
            {
                "1": {"base": 10, "value": "1"},
                "0.5": {"base": 10, "value": "2"},
            }
        )
        with pytest.raises(InvalidInput, match="not an integer x-coordinate") as exc:
            load_points(document)
        assert exc.value.label == "0.5"

    def test_fractional_key_allowed_for_roots(self) -> None:
        document = parse_document(
            {
                "0.5": {"base": 10, "value": "2"},
                "1.5": {"base": 10, "value": "3"},
            }
        )
        assert [r.r for r in load_roots(document)] == [2, 3]

    def test_incomplete_record_skipped(self, caplog) -> None:
        caplog.set_level(logging.WARNING, logger="quadc")
        document = parse_document(
            {
                "1": {"base": 10, "value": "1"},
                "2": {"base": 10},
                "3": {"base": 10, "value": "9"},
            }
        )
        points = load_points(document)
        assert [p.label for p in points] == ["1", "3"]
        assert "Skipping record '2': missing base or value" in caplog.text

    def test_unsupported_base_names_key(self) -> None:
        document = parse_document({"1": {"base": 10, "value": "1"}, "2": {"base": 37, "value": "1"}})
        with pytest.raises(UnsupportedBase, match="Unsupported base 37") as exc:
            load_points(document)
        assert exc.value.label == "2"
        assert "key '2'" in str(exc.value)

    def test_base_one_rejected(self) -> None:
        document = parse_document({"1": {"base": "1", "value": "0"}})
        with pytest.raises(UnsupportedBase):
            load_points(document)

    def test_invalid_digit_names_key(self) -> None:
        document = parse_document({"7": {"base": 16, "value": "fg"}})
        with pytest.raises(InvalidDigit) as exc:
            load_points(document)
        assert exc.value.label == "7"

    def test_empty_value_names_key(self) -> None:
        document = parse_document({"7": {"base": 16, "value": ""}})
        with pytest.raises(InvalidInput, match="Empty value") as exc:
            load_points(document)
        assert exc.value.label == "7"

    def test_large_value(self) -> None:
        document = parse_document({"1": {"base": 36, "value": "z" * 50}})
        assert load_points(document)[0].y == 36**50 - 1


# =============================================================================
# ROOTS
# =============================================================================


class TestLoadRoots:
    """Тесты для load_roots"""

    def test_decodes_roots(self) -> None:
        document = parse_document(
            {"a": {"base": "16", "value": "2"}, "b": {"base": "2", "value": "11"}}
        )
        assert load_roots(document) == [Root(r=2, label="a"), Root(r=3, label="b")]

    def test_use_k_keeps_at_least_two(self) -> None:
        document = parse_document(
            {
                "keys": {"k": 1},
                "1": {"base": 10, "value": "-5"},
                "2": {"base": 10, "value": "6"},
                "3": {"base": 10, "value": "7"},
            }
        )
        assert [r.r for r in load_roots(document, use_k=True)] == [-5, 6]

    def test_use_k_larger_than_two(self) -> None:
        document = parse_document(
            {
                "keys": {"k": "3"},
                "1": {"base": 10, "value": "1"},
                "2": {"base": 10, "value": "2"},
                "3": {"base": 10, "value": "3"},
                "4": {"base": 10, "value": "4"},
            }
        )
        assert len(load_roots(document, use_k=True)) == 3


class TestDecodeRecord:
    """Тесты для decode_record"""

    def test_decode(self, sample_points_data) -> None:
        document = parse_document(sample_points_data)
        assert decode_record("6", document.records["6"]) == 39


# =============================================================================
# DOCUMENTS AND FILES
# =============================================================================


class TestParseDocument:
    """Тесты для parse_document"""

    def test_selection_metadata(self, sample_points_data) -> None:
        document = parse_document(sample_points_data)
        assert document.selection.k == 3
        assert document.selection.n == 4
        assert "keys" not in document.records

    def test_record_not_an_object(self) -> None:
        with pytest.raises(InvalidInput, match="Malformed evidence document at 1"):
            parse_document({"1": "ff"})

    def test_non_numeric_base(self) -> None:
        with pytest.raises(InvalidInput, match="Malformed evidence document"):
            parse_document({"1": {"base": "hex", "value": "ff"}})

    def test_negative_k(self) -> None:
        with pytest.raises(InvalidInput, match="keys/k"):
            parse_document({"keys": {"k": -1}, "1": {"base": 10, "value": "1"}})

    def test_top_level_not_object(self) -> None:
        with pytest.raises(InvalidInput, match="<root>"):
            parse_document([1, 2, 3])


class TestFiles:
    """Тесты для чтения файлов"""

    def test_read_sample(self) -> None:
        data = read_evidence_file(DATA_DIR / "sample_points.json")
        assert data["keys"] == {"n": 4, "k": 3}

    def test_load_document(self) -> None:
        document = load_document(DATA_DIR / "sample_roots.json")
        assert [r.r for r in load_roots(document)] == [2, 3, 35]

    def test_missing_file(self, tmp_path) -> None:
        missing = tmp_path / "missing.json"
        with pytest.raises(InvalidInput, match="Failed to read/parse"):
            read_evidence_file(missing)

    def test_malformed_json(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidInput, match="Failed to read/parse"):
            read_evidence_file(path)

    def test_roundtrip_via_file(self, tmp_path, sample_points_data) -> None:
        path = tmp_path / "points.json"
        path.write_text(json.dumps(sample_points_data), encoding="utf-8")
        assert len(load_points(load_document(path), use_k=True)) == 3


class TestPointX:
    """Тесты для point_x"""

    def test_integral_numeric_keys(self) -> None:
        assert point_x("7", fallback=99) == 7
        assert point_x(" -3 ", fallback=99) == -3
        assert point_x("10.0", fallback=99) == 10
        assert point_x("2E2", fallback=99) == 200
        assert point_x("0b11", fallback=99) == 3

    def test_non_numeric_key_uses_fallback(self) -> None:
        assert point_x("alpha", fallback=4) == 4

    def test_non_integral_key(self) -> None:
        with pytest.raises(InvalidInput):
            point_x("2.25", fallback=1)


class TestNumericValues:
    """Значение записи числом в JSON"""

    def test_integral_float_value_decoded(self) -> None:
        document = parse_document(json.loads('{"1": {"base": 10, "value": 12.0}}'))
        assert load_points(document) == [Point(x=1, y=12, label="1")]
