# clockspeed/steps/adjust_step.py
from __future__ import annotations

from clockspeed.engines.adjustment_engine import AdjustmentEngine
from clockspeed.pipeline.context import PipelineContext
from clockspeed.pipeline.step import PipelineStep


class AdjustStep(PipelineStep):
    """
    ctx.blueprint + ctx.specs -> engine.adjust -> ctx.result

    On UnknownMachineError the blueprint is dropped from the context so a
    partially adjusted blueprint can never reach the writer.
    """

    def __init__(self, engine: AdjustmentEngine, inst=None) -> None:
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: PipelineContext) -> PipelineContext:
        if ctx.blueprint is None:
            raise RuntimeError(f"[{self.step_name}] no blueprint in context")

        try:
            ctx.result = self.engine.adjust(ctx.blueprint, ctx.specs)
        except Exception:
            ctx.blueprint = None
            raise

        return ctx
