# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for coefficient input and analysis export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from quadrica.adapters.json_io import JsonCoefficientReader, JsonAnalysisWriter
from quadrica.adapters.csv_exporter import CsvAnalysisExporter, CsvPointCloudExporter
