import json

import pytest

from clockspeed.config.app_config import AppConfig
from clockspeed.engines.clock_speed_accessor import get_clock_speed
from clockspeed.engines.spec_parser_engine import parse_specs
from clockspeed.pipeline.context import PipelineContext
from clockspeed.pipeline.pipeline import AdjustPipeline
from clockspeed.pipeline.step import PipelineStep
from clockspeed.steps.adjust_step import AdjustStep
from clockspeed.engines.adjustment_engine import AdjustmentEngine
from clockspeed.steps.write_blueprint_step import WriteBlueprintStep
from clockspeed.utils.errors import (
    BlueprintFileNotFoundError,
    NoMachinesAdjustedError,
    SpecFormatError,
    UnknownMachineError,
)
from clockspeed.utils.path import BlueprintPaths
from clockspeed.workflows.adjust_workflow import build_adjust_pipeline, run_adjust


@pytest.fixture
def cfg():
    return AppConfig()


def _potentials(path):
    doc = json.loads(path.read_text(encoding="utf-8"))
    return [o["properties"].get("mCurrentPotential", {}).get("value") for o in doc["objects"]]


def test_run_adjust_writes_default_output(tmp_path, cfg, write_json_blueprint, entity_doc_factory):
    base = write_json_blueprint("multi-machine", [
        entity_doc_factory("refinery", 0, clock_speed=1.0),
        entity_doc_factory("manufacturer", 1),
        entity_doc_factory("manufacturer", 2),
    ])

    ctx = run_adjust(base, "Refinery:2,Manufacturer:3.66", cfg=cfg)

    out_body = tmp_path / "multi-machine_modified.sbp"
    out_cfg = tmp_path / "multi-machine_modified.sbpcfg"
    assert ctx.written_files == [out_body, out_cfg]
    assert _potentials(out_body) == [2.0, 3.66, 3.66]
    assert json.loads(out_cfg.read_text())["iconID"] == 782
    assert [a.matched_count for a in ctx.result.adjustments] == [1, 2]


def test_run_adjust_explicit_output(tmp_path, cfg, write_json_blueprint, entity_doc_factory):
    base = write_json_blueprint("1000 OC Refinery", [entity_doc_factory("refinery", clock_speed=10.0)])

    ctx = run_adjust(f"{base}.sbp", "Refinery:5", tmp_path / "out" / "500 OC Refinery", cfg=cfg)

    assert ctx.result.machines[0].current_clock_speed == 5
    assert _potentials(tmp_path / "out" / "500 OC Refinery.sbp") == [5.0]
    # input untouched
    assert _potentials(tmp_path / "1000 OC Refinery.sbp") == [10.0]


def test_spec_error_before_reading(tmp_path, cfg):
    with pytest.raises(SpecFormatError):
        run_adjust(tmp_path / "missing", "Refinery", cfg=cfg)


def test_missing_input_file(tmp_path, cfg):
    with pytest.raises(BlueprintFileNotFoundError, match="body"):
        run_adjust(tmp_path / "missing", "Refinery:2", cfg=cfg)


def test_missing_config_file(tmp_path, cfg, write_json_blueprint, entity_doc_factory):
    base = write_json_blueprint("bp", [entity_doc_factory("refinery")])
    (tmp_path / "bp.sbpcfg").unlink()

    with pytest.raises(BlueprintFileNotFoundError, match="config"):
        run_adjust(base, "Refinery:2", cfg=cfg)


def test_unknown_machine_writes_nothing(tmp_path, cfg, write_json_blueprint, entity_doc_factory):
    base = write_json_blueprint("bp", [entity_doc_factory("refinery")])

    with pytest.raises(UnknownMachineError):
        run_adjust(base, "Refinery:2,Teleporter:3", cfg=cfg)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["bp.sbp", "bp.sbpcfg"]


def test_zero_matches_is_hard_failure(tmp_path, cfg, write_json_blueprint, entity_doc_factory):
    base = write_json_blueprint("bp", [entity_doc_factory("packager")])

    with pytest.raises(NoMachinesAdjustedError) as exc:
        run_adjust(base, "Manufacturer:2", cfg=cfg)

    assert [m.friendly_name for m in exc.value.result.machines] == ["packager"]
    assert exc.value.result.adjustments[0].matched_count == 0
    assert not (tmp_path / "bp_modified.sbp").exists()


def test_zero_matches_soft_abort(tmp_path, write_json_blueprint, entity_doc_factory):
    cfg = AppConfig(adjust={"require_match": False})
    base = write_json_blueprint("bp", [entity_doc_factory("packager")])

    ctx = run_adjust(base, "Manufacturer:2", cfg=cfg)

    assert ctx.abort_pipeline
    assert ctx.written_files == []
    assert not (tmp_path / "bp_modified.sbp").exists()


def test_fake_codec_chunks_written_in_order(tmp_path, cfg, entity_factory, blueprint_factory, fake_codec_factory):
    (tmp_path / "bp.sbp").write_bytes(b"raw")
    (tmp_path / "bp.sbpcfg").write_bytes(b"rawcfg")
    bp = blueprint_factory([entity_factory("packager")])
    codec = fake_codec_factory(bp)

    ctx = run_adjust(tmp_path / "bp", "Packager:2.5", cfg=cfg, codec=codec)

    assert codec.decoded == [("bp", b"raw", b"rawcfg")]
    assert codec.encoded == [bp]
    assert (tmp_path / "bp_modified.sbp").read_bytes() == b"HDRC1C2"
    assert (tmp_path / "bp_modified.sbpcfg").read_bytes() == b"CFG"
    assert get_clock_speed(bp.objects[0]) == 2.5
    assert ctx.blueprint is bp


def test_adjust_step_drops_blueprint_on_failure(tmp_path, entity_factory, blueprint_factory):
    paths = BlueprintPaths.resolve(tmp_path / "bp")
    ctx = PipelineContext(inputs=paths, outputs=paths, spec_text="")
    ctx.blueprint = blueprint_factory([entity_factory("refinery")])
    ctx.specs = parse_specs("nope:2")

    with pytest.raises(UnknownMachineError):
        AdjustStep(AdjustmentEngine()).run(ctx)
    assert ctx.blueprint is None

    with pytest.raises(RuntimeError):
        WriteBlueprintStep(codec=None).run(ctx)


def test_pipeline_stops_on_abort(tmp_path):
    calls = []

    class Abort(PipelineStep):
        def run(self, ctx):
            calls.append("abort")
            ctx.abort_pipeline = True
            ctx.abort_reason = "stop"
            return ctx

    class Never(PipelineStep):
        def run(self, ctx):
            calls.append("never")
            return ctx

    paths = BlueprintPaths.resolve(tmp_path / "bp")
    ctx = AdjustPipeline([Abort(), Never()]).run(PipelineContext(inputs=paths, outputs=paths, spec_text=""))

    assert calls == ["abort"]
    assert ctx.abort_reason == "stop"


def test_build_pipeline_step_order(cfg, fake_codec_factory):
    pipeline = build_adjust_pipeline(cfg, codec=fake_codec_factory(None))
    assert [s.step_name for s in pipeline.steps] == [
        "ParseSpecsStep",
        "ReadBlueprintStep",
        "AdjustStep",
        "ReportStep",
        "WriteBlueprintStep",
    ]


def test_extra_machines_from_config(tmp_path, write_json_blueprint, entity_doc_factory):
    coal = "/Game/FactoryGame/Buildable/Factory/GeneratorCoal/Build_GeneratorCoal.Build_GeneratorCoal_C"
    cfg = AppConfig(machines={"extra": {"coalgenerator": coal}})
    base = write_json_blueprint("bp", [entity_doc_factory(coal)])

    ctx = run_adjust(base, "CoalGenerator:2.5", cfg=cfg)

    assert ctx.result.machines[0].friendly_name == "coalgenerator"
    assert _potentials(tmp_path / "bp_modified.sbp") == [2.5]
