#!filepath: clockspeed/pipeline/pipeline.py
from __future__ import annotations

from clockspeed import logs
from clockspeed.pipeline.context import PipelineContext
from clockspeed.pipeline.step import PipelineStep
from clockspeed.observability.instrumentation import Instrumentation, NoOpInstrumentation


class AdjustPipeline:
    """
    AdjustPipeline = scheduler

    - runs steps in order, one shared context
    - each step is timed as a leaf
    - a failing step propagates; later steps never run
    - a step may stop the run early via ctx.abort_pipeline
    """

    def __init__(
            self,
            steps: list[PipelineStep],
            inst: Instrumentation | NoOpInstrumentation | None = None,
    ):
        self.steps = steps
        self.inst = inst if inst is not None else NoOpInstrumentation()

    def run(self, ctx: PipelineContext) -> PipelineContext:
        logs.info(f"[Pipeline] ====== START {ctx.blueprint_name} ======")

        for step in self.steps:
            with step.timed():
                ctx = step.run(ctx)

            if ctx.abort_pipeline:
                logs.warning(f"[Pipeline] aborted after {step.step_name}: {ctx.abort_reason}")
                break

        self.inst.generate_timeline_report(ctx.blueprint_name)
        logs.info(f"[Pipeline] ====== DONE {ctx.blueprint_name} ======")
        return ctx
