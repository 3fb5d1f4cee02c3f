"""Tests for data models and persistence."""

import json

import pytest
from pydantic import ValidationError

from linnlights.exceptions import ConfigFileInvalidError, ConfigValidationError, InvalidArgumentError
from linnlights.models import AppConfig, GridCoordinate, LightPattern, LinnColor, MemorySlot


class TestLinnColor:
    """Test the color palette."""

    def test_palette_order(self):
        names = [c.name for c in LinnColor]
        assert names == [
            "DEFAULT", "RED", "YELLOW", "GREEN", "CYAN", "BLUE",
            "MAGENTA", "OFF", "WHITE", "ORANGE", "LIME", "PINK",
        ]
        assert [c.value for c in LinnColor] == list(range(12))

    @pytest.mark.parametrize("text,expected", [
        ("red", LinnColor.RED),
        ("Lime", LinnColor.LIME),
        (" PINK ", LinnColor.PINK),
        ("0", LinnColor.DEFAULT),
        ("9", LinnColor.ORANGE),
    ])
    def test_parse(self, text, expected):
        assert LinnColor.parse(text) is expected

    @pytest.mark.parametrize("text", ["purple", "12", "-1", ""])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidArgumentError):
            LinnColor.parse(text)


class TestMemorySlot:
    """Test Scale Select memories."""

    def test_labels(self):
        assert [m.label for m in MemorySlot] == ["A", "A#", "B"]
        assert [m.value for m in MemorySlot] == [0, 1, 2]

    @pytest.mark.parametrize("text,expected", [
        ("A", MemorySlot.A),
        ("a#", MemorySlot.A_SHARP),
        ("b", MemorySlot.B),
        ("1", MemorySlot.A_SHARP),
        ("a_sharp", MemorySlot.A_SHARP),
    ])
    def test_parse(self, text, expected):
        assert MemorySlot.parse(text) is expected

    @pytest.mark.parametrize("text", ["C", "3", "A##"])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidArgumentError):
            MemorySlot.parse(text)


class TestGridCoordinate:
    """Test pad addresses."""

    def test_at(self):
        coord = GridCoordinate.at(7, 24)
        assert (coord.row, coord.column) == (7, 24)

    @pytest.mark.parametrize("row,column", [(8, 0), (0, 25), (-1, 3)])
    def test_at_rejects_off_grid(self, row, column):
        with pytest.raises(InvalidArgumentError):
            GridCoordinate.at(row, column)

    def test_direct_construction_validated(self):
        with pytest.raises(ValidationError):
            GridCoordinate(row=9, column=0)

    def test_all_covers_grid(self):
        coords = GridCoordinate.all()
        assert len(coords) == 200
        assert coords[0] == GridCoordinate(row=0, column=0)
        assert coords[-1] == GridCoordinate(row=7, column=24)

    def test_hashable(self):
        assert len({GridCoordinate.at(1, 1), GridCoordinate.at(1, 1)}) == 1


class TestLightPattern:
    """Test light pattern model."""

    def test_blank_pattern_uses_default_color(self):
        pattern = LightPattern()
        assert all(color == LinnColor.DEFAULT for _, color in pattern.iter_cells())

    def test_set_and_get(self):
        pattern = LightPattern()
        pattern.set(4, 12, LinnColor.CYAN)
        assert pattern.get(4, 12) == 4
        assert pattern.cells[4][12] == 4

    def test_set_rejects_bad_color(self):
        with pytest.raises(InvalidArgumentError):
            LightPattern().set(0, 0, 12)

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValidationError):
            LightPattern(cells=[[0] * 25] * 7)
        with pytest.raises(ValidationError):
            LightPattern(cells=[[0] * 24] * 8)

    def test_bad_color_rejected(self):
        cells = [[0] * 25 for _ in range(8)]
        cells[3][3] = 42
        with pytest.raises(ValidationError):
            LightPattern(cells=cells)

    def test_save_and_load(self, temp_dir):
        path = temp_dir / "stars.json"
        pattern = LightPattern.filled(LinnColor.WHITE, name="stars")
        pattern.set(0, 0, LinnColor.RED)
        pattern.save(path)

        loaded = LightPattern.load(path)
        assert loaded == pattern

    def test_load_invalid_file(self, temp_dir):
        path = temp_dir / "broken.json"
        path.write_text('{"name": "x", "cells": [[1, 2],]}')
        with pytest.raises(ConfigFileInvalidError):
            LightPattern.load(path)

    def test_load_wrong_shape_file(self, temp_dir):
        path = temp_dir / "short.json"
        path.write_text(json.dumps({"name": "x", "cells": [[0] * 25]}))
        with pytest.raises(ConfigValidationError):
            LightPattern.load(path)


class TestAppConfig:
    """Test configuration loading and saving."""

    def test_defaults(self):
        config = AppConfig()
        assert config.device_name == "LinnStrument MIDI"
        assert config.midi_backend is None
        assert config.discovery_timeout == 10.0
        assert config.default_memory is MemorySlot.A

    def test_load_missing_returns_default(self, temp_dir):
        config = AppConfig.load_or_default(temp_dir / "config.json")
        assert config == AppConfig()

    def test_save_and_reload(self, temp_dir):
        path = temp_dir / "config.json"
        AppConfig(device_name="LinnStrument 128 MIDI", default_memory=MemorySlot.B).save(path)

        config = AppConfig.load_or_default(path)
        assert config.device_name == "LinnStrument 128 MIDI"
        assert config.default_memory is MemorySlot.B

    def test_save_creates_backup(self, temp_dir):
        path = temp_dir / "config.json"
        AppConfig().save(path)
        AppConfig(discovery_timeout=3.0).save(path)
        assert (temp_dir / "config.json.bak").exists()

    def test_empty_file_is_invalid(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("")
        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(path)

    def test_invalid_value(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"default_memory": 7}))
        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)
        assert exc_info.value.field == "default_memory"
        assert "A, A#, B" in exc_info.value.recovery_hint
