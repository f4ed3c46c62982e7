"""
Тесты интерпретатора цветов: справочник, каскад правил и деградация при ошибках.
"""

import json

import pytest

import utils.interpreter as interpreter_module
from utils.interpreter import (
    BLUE_VIOLET_MESSAGE,
    COOL_MESSAGE,
    DARK_MESSAGE,
    EARTHY_MESSAGE,
    FALLBACK_MESSAGE,
    INVALID_COLOR_MESSAGE,
    LIGHT_MESSAGE,
    MUTED_MESSAGE,
    NEUTRAL_MESSAGE,
    SATURATED_MESSAGE,
    WARM_MESSAGE,
    ColorInterpreter,
    ColorItem,
    load_meaning_table,
)

BRAND_MEANING = "Фирменный тёмно-синий. Используется в логотипе."


class TestMeaningTable:
    def test_table_hit_is_returned_verbatim(self, interpreter):
        assert interpreter.interpret("#112233") == BRAND_MEANING
        assert interpreter.interpret("112233") == BRAND_MEANING

    def test_lookup_is_case_insensitive(self):
        interpreter = ColorInterpreter({"ABCDEF": "Светло-голубой"})
        assert interpreter.interpret("#abcdef") == "Светло-голубой"

    def test_table_overrides_rules(self):
        interpreter = ColorInterpreter({"330000": "Бордо"})
        assert interpreter.interpret("#330000") == "Бордо"

    def test_load_normalizes_keys_and_skips_invalid(self, tmp_path):
        path = tmp_path / "meanings.json"
        path.write_text(
            json.dumps({"#abcdef": "Голубой", "xyz": "мусор", "112233": 42}, ensure_ascii=False),
            encoding="utf-8",
        )

        table = load_meaning_table(str(path))

        assert dict(table) == {"ABCDEF": "Голубой"}

    def test_loaded_table_is_read_only(self, tmp_path):
        path = tmp_path / "meanings.json"
        path.write_text(json.dumps({"ABCDEF": "Голубой"}), encoding="utf-8")

        table = load_meaning_table(str(path))

        with pytest.raises(TypeError):
            table["000000"] = "Чёрный"

    def test_missing_file_gives_empty_table(self, tmp_path):
        assert dict(load_meaning_table(str(tmp_path / "missing.json"))) == {}

    def test_non_object_file_is_rejected(self, tmp_path):
        path = tmp_path / "meanings.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        with pytest.raises(ValueError):
            load_meaning_table(str(path))


class TestRuleCascade:
    @pytest.mark.parametrize(
        "color, expected",
        [
            ("#330000", DARK_MESSAGE),
            ("#F5F5F5", LIGHT_MESSAGE),
            ("#808080", MUTED_MESSAGE),
            ("#FF0000", SATURATED_MESSAGE),
            ("#BF4040", WARM_MESSAGE),
            ("#BFBF40", EARTHY_MESSAGE),
            ("#40BF40", COOL_MESSAGE),
            ("#4040BF", BLUE_VIOLET_MESSAGE),
            ("#BF40BF", NEUTRAL_MESSAGE),
        ],
    )
    def test_each_rule(self, color, expected):
        assert ColorInterpreter().interpret(color) == expected

    def test_dark_rule_precedes_saturation_and_hue(self):
        # l = 10, s = 100, h = 0: тёмный, а не насыщенный или тёплый
        assert ColorInterpreter().interpret("#330000") == DARK_MESSAGE

    def test_lightness_boundary_uses_truncated_value(self):
        # 50/255 -> l = 19, 51/255 -> l = 20 (уже не тёмный)
        assert ColorInterpreter().interpret("#323232") == DARK_MESSAGE
        assert ColorInterpreter().interpret("#333333") == MUTED_MESSAGE


class TestFailures:
    @pytest.mark.parametrize("value", ["12345", "GGGGGG", "", None])
    def test_invalid_color_returns_fixed_message(self, value):
        assert ColorInterpreter().interpret(value) == INVALID_COLOR_MESSAGE

    def test_internal_error_degrades_to_fallback(self, monkeypatch):
        def broken(_color):
            raise ArithmeticError("boom")

        monkeypatch.setattr(interpreter_module, "hex_to_hsl", broken)

        assert ColorInterpreter().interpret("#4040BF") == FALLBACK_MESSAGE


class TestAnnotation:
    def test_annotate_keeps_hex_as_given(self, interpreter):
        item = interpreter.annotate("#112233")
        assert item == ColorItem(hex="#112233", meaning=BRAND_MEANING)
        assert item.to_dict() == {"hex": "#112233", "meaning": BRAND_MEANING}

    def test_annotate_many_preserves_order(self):
        items = ColorInterpreter().annotate_many(["#330000", "#F5F5F5"])
        assert [item.meaning for item in items] == [DARK_MESSAGE, LIGHT_MESSAGE]
