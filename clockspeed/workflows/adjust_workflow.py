#!filepath: clockspeed/workflows/adjust_workflow.py
from __future__ import annotations

from pathlib import Path

from clockspeed.adapters.codec_loader import load_codec
from clockspeed.config.app_config import AppConfig
from clockspeed.core.interfaces import BlueprintCodec
from clockspeed.engines.adjustment_engine import AdjustmentEngine
from clockspeed.observability.instrumentation import Instrumentation, NoOpInstrumentation
from clockspeed.pipeline.context import PipelineContext
from clockspeed.pipeline.pipeline import AdjustPipeline
from clockspeed.registry.machine_registry import MachineRegistry
from clockspeed.steps.adjust_step import AdjustStep
from clockspeed.steps.parse_specs_step import ParseSpecsStep
from clockspeed.steps.read_blueprint_step import ReadBlueprintStep
from clockspeed.steps.report_step import ReportStep
from clockspeed.steps.write_blueprint_step import WriteBlueprintStep
from clockspeed.utils.path import BlueprintPaths


def build_registry(cfg: AppConfig) -> MachineRegistry:
    if cfg.machines.extra:
        return MachineRegistry.with_extra(cfg.machines.extra)
    return MachineRegistry()


def build_adjust_pipeline(
        cfg: AppConfig,
        codec: BlueprintCodec | None = None,
) -> AdjustPipeline:
    """
    Adjustment Pipeline (FINAL / FROZEN)

    Semantic Order (LAW):
        ParseSpecs          (text -> specs, before any IO)
        -> ReadBlueprint    (file pair -> decoded blueprint)
        -> Adjust           (inventory + apply, in memory)
        -> Report           (log + zero-match gate)
        -> WriteBlueprint   (encode -> file pair, atomic)

    Any failure stops the run before WriteBlueprint: no output files.
    """
    inst = Instrumentation() if cfg.adjust.instrumentation else NoOpInstrumentation()
    codec = codec if codec is not None else load_codec(cfg.codec.target)
    engine = AdjustmentEngine(build_registry(cfg))

    steps = [
        ParseSpecsStep(inst=inst),
        ReadBlueprintStep(codec, inst=inst),
        AdjustStep(engine, inst=inst),
        ReportStep(require_match=cfg.adjust.require_match, inst=inst),
        WriteBlueprintStep(codec, inst=inst),
    ]
    return AdjustPipeline(steps, inst=inst)


def run_adjust(
        blueprint: str | Path,
        spec_text: str,
        output: str | Path | None = None,
        cfg: AppConfig | None = None,
        codec: BlueprintCodec | None = None,
) -> PipelineContext:
    cfg = cfg if cfg is not None else AppConfig.load()

    inputs = BlueprintPaths.resolve(blueprint)
    outputs = (
        BlueprintPaths.resolve(output)
        if output
        else BlueprintPaths.default_output(inputs, cfg.adjust.output_suffix)
    )

    ctx = PipelineContext(inputs=inputs, outputs=outputs, spec_text=spec_text)
    return build_adjust_pipeline(cfg, codec).run(ctx)
