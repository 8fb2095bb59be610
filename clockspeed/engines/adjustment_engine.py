#!filepath: clockspeed/engines/adjustment_engine.py
from __future__ import annotations

from typing import List, Sequence, Tuple

from clockspeed import logs
from clockspeed.core.interfaces import BlueprintCodec
from clockspeed.core.types import (
    AdjustmentReportEntry,
    AdjustResult,
    Blueprint,
    ClockSpeedSpec,
    MachineInfo,
)
from clockspeed.engines.clock_speed_accessor import get_clock_speed, set_clock_speed
from clockspeed.registry.machine_registry import MachineRegistry
from clockspeed.utils.errors import UnknownMachineError


class AdjustmentEngine:
    """
    AdjustmentEngine (FINAL / FROZEN)

    Input:
      - decoded Blueprint (borrowed, mutated in place for one call)
      - ordered, validated ClockSpeedSpec list

    Output:
      - AdjustResult(machines=inventory, adjustments=one entry per spec)

    Semantics:
      - inventory = registered machines only, scan order
      - specs are applied in input order; later specs win for the same kind
      - zero matches is a valid outcome, not an error
      - an unresolvable machine name aborts the whole call;
        specs applied before it stay applied on the caller's objects

    No IO, no copies.
    """

    def __init__(self, registry: MachineRegistry | None = None):
        self.registry = registry if registry is not None else MachineRegistry()

    # --------------------------------------------------
    def inventory(self, blueprint: Blueprint) -> List[MachineInfo]:
        machines: List[MachineInfo] = []

        for i, obj in enumerate(blueprint.objects):
            friendly_name = self.registry.get_machine_name(obj.type_path)
            if friendly_name is None:
                continue

            machines.append(
                MachineInfo(
                    instance_name=obj.instance_name,
                    type_path=obj.type_path,
                    friendly_name=friendly_name,
                    current_clock_speed=get_clock_speed(obj),
                    index=i,
                )
            )

        logs.debug(
            f"[AdjustmentEngine] inventory: {len(machines)} machine(s) "
            f"out of {len(blueprint.objects)} object(s)"
        )
        return machines

    # --------------------------------------------------
    def adjust(self, blueprint: Blueprint, specs: Sequence[ClockSpeedSpec]) -> AdjustResult:
        machines = self.inventory(blueprint)
        adjustments: List[AdjustmentReportEntry] = []

        for spec in specs:
            target = self.registry.resolve_type_path(spec.machine_name)
            if target is None:
                raise UnknownMachineError(spec.machine_name, self.registry.known_names())

            matched = 0
            for machine in machines:
                if machine.type_path != target:
                    continue
                set_clock_speed(blueprint.objects[machine.index], spec.clock_speed)
                machine.current_clock_speed = spec.clock_speed
                matched += 1

            logs.debug(
                f"[AdjustmentEngine] {spec.machine_name} -> {spec.clock_speed} "
                f"matched={matched}"
            )

            adjustments.append(
                AdjustmentReportEntry(
                    machine_name=spec.machine_name,
                    matched_count=matched,
                    requested_clock_speed=spec.clock_speed,
                )
            )

        return AdjustResult(machines=machines, adjustments=adjustments)


def adjust_blueprint_files(
        codec: BlueprintCodec,
        name: str,
        body: bytes,
        config: bytes,
        specs: Sequence[ClockSpeedSpec],
        engine: AdjustmentEngine | None = None,
) -> Tuple[Blueprint, AdjustResult]:
    """
    decode(name, body, config) -> adjust -> (mutated blueprint, result)
    """
    blueprint = codec.decode(name, body, config)
    engine = engine if engine is not None else AdjustmentEngine()
    return blueprint, engine.adjust(blueprint, specs)
