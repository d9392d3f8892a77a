# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for adapters/json_io.py — coefficient reader and analysis writer."""
import json

import pytest

from quadrica.ports import AnalysisWriter, CoefficientReader
from quadrica.adapters.json_io import JsonAnalysisWriter, JsonCoefficientReader
from quadrica.domain.classifier import analyze_quadric
from quadrica.domain.coefficients import QuadricCoefficients


def _write(tmp_path, data, name="surfaces.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestPorts:
    def test_reader_implements_port(self):
        assert isinstance(JsonCoefficientReader(), CoefficientReader)

    def test_writer_implements_port(self):
        assert isinstance(JsonAnalysisWriter(), AnalysisWriter)


class TestJsonCoefficientReader:
    def test_single_object(self, tmp_path):
        path = _write(tmp_path, {"a11": 1, "a22": 1, "a33": 1, "c": -1})
        surfaces = JsonCoefficientReader().read_coefficients(path)
        assert surfaces == [QuadricCoefficients(a11=1.0, a22=1.0, a33=1.0, c=-1.0)]

    def test_list(self, tmp_path):
        path = _write(tmp_path, [{"a11": 1}, {"a22": 2, "b3": -1}])
        surfaces = JsonCoefficientReader().read_coefficients(path)
        assert len(surfaces) == 2
        assert surfaces[1].b3 == -1.0

    def test_wrapped_list(self, tmp_path):
        path = _write(tmp_path, {"surfaces": [{"c": 3}]})
        assert JsonCoefficientReader().read_coefficients(path) == [QuadricCoefficients(c=3.0)]

    def test_empty_record_warns(self, tmp_path, caplog):
        path = _write(tmp_path, [{}])
        with caplog.at_level("WARNING"):
            surfaces = JsonCoefficientReader().read_coefficients(path)
        assert surfaces == [QuadricCoefficients()]
        assert "no coefficients" in caplog.text

    def test_unknown_key(self, tmp_path):
        path = _write(tmp_path, {"a11": 1, "d": 2})
        with pytest.raises(ValueError, match="'d'"):
            JsonCoefficientReader().read_coefficients(path)

    def test_not_an_object(self, tmp_path):
        path = _write(tmp_path, [1, 2])
        with pytest.raises(ValueError, match="#0"):
            JsonCoefficientReader().read_coefficients(path)

    def test_scalar_document(self, tmp_path):
        path = _write(tmp_path, 42)
        with pytest.raises(ValueError):
            JsonCoefficientReader().read_coefficients(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonCoefficientReader().read_coefficients(str(tmp_path / "missing.json"))


class TestJsonAnalysisWriter:
    def test_write(self, tmp_path):
        coeffs = QuadricCoefficients(a11=1, a22=-1, b3=-1)
        path = str(tmp_path / "out.json")
        JsonAnalysisWriter().write_analyses([(coeffs, analyze_quadric(coeffs))], path)

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert len(data["surfaces"]) == 1
        record = data["surfaces"][0]
        assert record["surfaceType"] == "Hyperbolic Paraboloid"
        assert record["centerType"] == "None"
        assert record["equation"] == "x² - y² - z = 0"

    def test_unicode_preserved(self, tmp_path):
        coeffs = QuadricCoefficients(a12=2, c=-1)
        path = tmp_path / "out.json"
        JsonAnalysisWriter().write_analyses([(coeffs, analyze_quadric(coeffs))], str(path))
        assert "√" in path.read_text(encoding="utf-8")
