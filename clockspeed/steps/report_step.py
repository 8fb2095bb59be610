# clockspeed/steps/report_step.py
from __future__ import annotations

from clockspeed import logs
from clockspeed.pipeline.context import PipelineContext
from clockspeed.pipeline.step import PipelineStep
from clockspeed.utils.errors import NoMachinesAdjustedError
from clockspeed.utils.format import format_clock_speed


class ReportStep(PipelineStep):
    """
    Log inventory + per-spec outcome, then gate the writer.

    No spec matched anything:
      - require_match=True  -> NoMachinesAdjustedError
      - require_match=False -> abort the run, nothing written
    """

    def __init__(self, require_match: bool = True, inst=None) -> None:
        super().__init__(inst)
        self.require_match = require_match

    def run(self, ctx: PipelineContext) -> PipelineContext:
        result = ctx.result
        if result is None:
            raise RuntimeError(f"[{self.step_name}] no adjustment result in context")

        if not result.machines:
            logs.info(f"[{self.step_name}] no production machines found in blueprint")
        else:
            logs.info(f"[{self.step_name}] {len(result.machines)} machine(s) in blueprint")
            for m in result.machines:
                logs.info(
                    f"[{self.step_name}]   - {m.friendly_name} ({m.instance_name}): "
                    f"clock speed {format_clock_speed(m.current_clock_speed)}"
                )

        for adj in result.adjustments:
            if adj.matched_count == 0:
                logs.warning(
                    f'[{self.step_name}] no "{adj.machine_name}" machines found in blueprint to adjust'
                )
            else:
                logs.info(
                    f'[{self.step_name}] adjusted {adj.matched_count} "{adj.machine_name}" '
                    f"machine(s) to {format_clock_speed(adj.requested_clock_speed)}"
                )

        if not result.any_matched:
            reason = "No machines were modified. Output files will not be written."
            if self.require_match:
                raise NoMachinesAdjustedError(reason, result=result)
            ctx.abort_pipeline = True
            ctx.abort_reason = reason

        return ctx
