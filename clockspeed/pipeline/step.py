#!filepath: clockspeed/pipeline/step.py
from __future__ import annotations

from clockspeed.pipeline.context import PipelineContext
from clockspeed.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline Step base class

    - orchestration only; the real work lives in engines / adapters
    - instrumentation is optional, step behavior never depends on it
    """

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        return self.__class__.__name__

    def timed(self):
        return self.inst.timer(self.step_name)

    def run(self, ctx: PipelineContext) -> PipelineContext:
        raise NotImplementedError
