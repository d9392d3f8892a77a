# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON coefficient file I/O adapter.

Reads coefficient sets and writes analysis results in JSON format.
Accepted input shapes:

    {"a11": 1, "a22": 1, "a33": 1, "c": -1}
    [{"a11": 1, ...}, {"a11": 2, ...}]
    {"surfaces": [{"a11": 1, ...}, ...]}
"""
import json
import logging

from quadrica.ports import AnalysisWriter, CoefficientReader
from quadrica.domain.classifier import AnalysisResult
from quadrica.domain.coefficients import QuadricCoefficients, coefficients_from_mapping
from quadrica.domain.serialization import build_analysis_record

logger = logging.getLogger(__name__)


class JsonCoefficientReader(CoefficientReader):
    """Reads coefficient sets from JSON files."""

    def read_coefficients(self, path: str) -> list[QuadricCoefficients]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        return self.parse(data)

    def parse(self, data) -> list[QuadricCoefficients]:
        if isinstance(data, dict) and 'surfaces' in data:
            data = data['surfaces']
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise ValueError(
                f"Expected a coefficient object or a list of them, got {type(data).__name__}"
            )

        result = []
        for index, record in enumerate(data):
            if not isinstance(record, dict):
                raise ValueError(f"Surface #{index} is not an object: {record!r}")
            if not record:
                logger.warning("Surface #%d has no coefficients, all terms default to 0", index)
            result.append(coefficients_from_mapping(record))
        return result


class JsonAnalysisWriter(AnalysisWriter):
    """Writes analysis results to JSON files."""

    def write_analyses(
        self,
        analyses: list[tuple[QuadricCoefficients, AnalysisResult]],
        path: str,
    ) -> None:
        payload = {
            'surfaces': [
                build_analysis_record(result, coeffs) for coeffs, result in analyses
            ],
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
