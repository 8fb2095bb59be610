# clockspeed/core/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


FLOAT_PROPERTY = "FloatProperty"


# ------------------------------------------------------------------
# decoded blueprint (owned by the codec, borrowed by engines)
# ------------------------------------------------------------------
@dataclass
class FloatProperty:
    name: str
    value: float
    type: str = FLOAT_PROPERTY
    ue_type: str = FLOAT_PROPERTY
    # document form as decoded (key order + codec metadata); empty when created here
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass
class SaveEntity:
    """
    One placed object of a blueprint.

    `properties` maps property name -> tagged value. Only FloatProperty
    values are interpreted here; everything else is passed through.
    """

    type_path: str
    instance_name: str
    properties: Dict[str, Any] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Blueprint:
    name: str
    header: Dict[str, Any] = field(default_factory=dict)
    config: Dict[str, Any] = field(default_factory=dict)
    compression_info: Dict[str, Any] = field(default_factory=dict)
    objects: List[SaveEntity] = field(default_factory=list)


@dataclass(frozen=True)
class EncodedBlueprint:
    header: bytes
    body_chunks: List[bytes]
    config: bytes

    def body_bytes(self) -> bytes:
        return self.header + b"".join(self.body_chunks)


# ------------------------------------------------------------------
# adjustment model
# ------------------------------------------------------------------
@dataclass(frozen=True)
class ClockSpeedSpec:
    machine_name: str
    clock_speed: float


@dataclass
class MachineInfo:
    instance_name: str
    type_path: str
    friendly_name: str
    current_clock_speed: float
    index: int  # position in Blueprint.objects


@dataclass(frozen=True)
class AdjustmentReportEntry:
    machine_name: str
    matched_count: int
    requested_clock_speed: float


@dataclass
class AdjustResult:
    machines: List[MachineInfo] = field(default_factory=list)
    adjustments: List[AdjustmentReportEntry] = field(default_factory=list)

    @property
    def any_matched(self) -> bool:
        return any(a.matched_count > 0 for a in self.adjustments)
