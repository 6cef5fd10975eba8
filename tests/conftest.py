"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest

from cenumgen.cli import build_parser
from cenumgen.config import GenerationConfig
from cenumgen.pipeline import CaseStyle


IOPS_HEADER = """\
#ifndef _IOPSKEYS_H_
#define _IOPSKEYS_H_

#define kIOPSPowerAdapterIDKey "AdapterID"
#define kIOPSPowerAdapterWattsKey "AdapterWatts"

#endif
"""


@pytest.fixture
def iops_header() -> str:
    """Header text with two adapter keys and an include guard."""
    return IOPS_HEADER


@pytest.fixture
def header_file(tmp_path: Path, iops_header: str) -> Path:
    """Write the IOPS header to a temporary file."""
    path = tmp_path / "IOPSKeys.h"
    path.write_text(iops_header)
    return path


@pytest.fixture
def iops_config(tmp_path: Path, header_file: Path) -> GenerationConfig:
    """Configuration for the IOPS adapter keys."""
    return GenerationConfig(
        input_path=header_file,
        output_path=tmp_path / "out" / "IOPSKey.swift",
        enum_name="IOPSKey",
        drop_prefixes=("kIOPS",),
        drop_suffixes=("Key",),
        case_style=CaseStyle.LOWER_CAMEL,
    )


@pytest.fixture
def parse_args():
    """Parse a list of CLI arguments into a namespace."""

    def _parse(*argv: str):
        return build_parser().parse_args(list(argv))

    return _parse


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a JSON config file and return its path."""

    def _write(data: dict, name: str = "cenumgen.json") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data))
        return path

    return _write
