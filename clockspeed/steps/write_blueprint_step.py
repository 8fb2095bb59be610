# clockspeed/steps/write_blueprint_step.py
from __future__ import annotations

from clockspeed import logs
from clockspeed.core.interfaces import BlueprintCodec
from clockspeed.pipeline.context import PipelineContext
from clockspeed.pipeline.step import PipelineStep
from clockspeed.utils.filesystem import FileSystem


class WriteBlueprintStep(PipelineStep):
    """
    codec.encode -> <out>.sbp (header + chunks), <out>.sbpcfg (config)

    Both files are encoded before either is written; each write is atomic.
    """

    def __init__(self, codec: BlueprintCodec, inst=None) -> None:
        super().__init__(inst)
        self.codec = codec

    @logs.catch("blueprint file IO failed")
    def run(self, ctx: PipelineContext) -> PipelineContext:
        if ctx.blueprint is None:
            raise RuntimeError(f"[{self.step_name}] no blueprint in context")

        encoded = self.codec.encode(ctx.blueprint)
        out = ctx.outputs

        body_path = FileSystem.safe_write(out.body, [encoded.header, *encoded.body_chunks])
        try:
            config_path = FileSystem.safe_write(out.config, encoded.config)
        except Exception:
            FileSystem.remove(body_path)
            raise

        ctx.written_files = [body_path, config_path]
        logs.info(f"[{self.step_name}] wrote {body_path} and {config_path}")
        return ctx
