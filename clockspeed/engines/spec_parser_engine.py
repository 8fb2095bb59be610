#!filepath: clockspeed/engines/spec_parser_engine.py
from __future__ import annotations

import math
import re
from typing import List

from clockspeed.core.types import ClockSpeedSpec
from clockspeed.registry.machine_registry import is_type_path
from clockspeed.utils.errors import SpecFormatError

# standard decimal text form only (no "inf", "nan", "1_000", hex)
_DECIMAL_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def parse_specs(text: str) -> List[ClockSpeedSpec]:
    """
    "Refinery:2, Manufacturer:3.66" -> [refinery x2.0, manufacturer x3.66]

    - pairs are comma separated, empty pairs are skipped
    - each pair is split on its LAST colon
    - friendly names are lowercased, raw type paths are kept verbatim
    - order and duplicates are kept
    """
    specs: List[ClockSpeedSpec] = []

    for pair in text.split(","):
        trimmed = pair.strip()
        if not trimmed:
            continue

        name, sep, raw_speed = trimmed.rpartition(":")
        if not sep:
            raise SpecFormatError(
                f'Invalid clock speed spec "{trimmed}": expected format "MachineName:clockspeed"'
            )

        name = name.strip()
        raw_speed = raw_speed.strip()

        if not name:
            raise SpecFormatError(f'Invalid clock speed spec "{trimmed}": missing machine name')

        speed = _parse_positive(raw_speed)
        if speed is None:
            raise SpecFormatError(
                f'Invalid clock speed "{raw_speed}" for machine "{name}": must be a positive number'
            )

        # type paths are matched case-sensitively, lowercasing would break them
        if not is_type_path(name):
            name = name.lower()

        specs.append(ClockSpeedSpec(machine_name=name, clock_speed=speed))

    if not specs:
        raise SpecFormatError("No valid clock speed specifications provided")

    return specs


def _parse_positive(raw: str) -> float | None:
    if not _DECIMAL_RE.match(raw):
        return None
    value = float(raw)
    if not math.isfinite(value) or value <= 0:
        return None
    return value
