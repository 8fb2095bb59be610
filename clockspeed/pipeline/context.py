#!filepath: clockspeed/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from clockspeed.core.types import AdjustResult, Blueprint, ClockSpeedSpec
from clockspeed.utils.path import BlueprintPaths


@dataclass
class PipelineContext:
    """
    PipelineContext = the single runtime carrier of one adjustment run

    - the workflow builds it
    - steps fill their own slot and pass it on
    - no business logic here
    """

    # -------------------------
    # inputs
    # -------------------------
    inputs: BlueprintPaths
    outputs: BlueprintPaths
    spec_text: str

    # -------------------------
    # slots (filled by steps)
    # -------------------------
    specs: List[ClockSpeedSpec] = field(default_factory=list)
    blueprint: Optional[Blueprint] = None
    result: Optional[AdjustResult] = None
    written_files: List = field(default_factory=list)

    # -------- runtime flags --------
    abort_pipeline: bool = False
    abort_reason: Optional[str] = None

    @property
    def blueprint_name(self) -> str:
        return self.inputs.name
