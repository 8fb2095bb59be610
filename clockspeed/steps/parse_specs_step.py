# clockspeed/steps/parse_specs_step.py
from __future__ import annotations

from clockspeed import logs
from clockspeed.engines.spec_parser_engine import parse_specs
from clockspeed.pipeline.context import PipelineContext
from clockspeed.pipeline.step import PipelineStep


class ParseSpecsStep(PipelineStep):
    """
    spec_text -> ctx.specs

    Runs before any file is read, so format errors never touch a blueprint.
    """

    def run(self, ctx: PipelineContext) -> PipelineContext:
        ctx.specs = parse_specs(ctx.spec_text)
        logs.info(f"[{self.step_name}] {len(ctx.specs)} spec(s) parsed")
        return ctx
