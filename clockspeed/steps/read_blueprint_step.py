# clockspeed/steps/read_blueprint_step.py
from __future__ import annotations

from clockspeed import logs
from clockspeed.core.interfaces import BlueprintCodec
from clockspeed.pipeline.context import PipelineContext
from clockspeed.pipeline.step import PipelineStep
from clockspeed.utils.errors import BlueprintFileNotFoundError
from clockspeed.utils.filesystem import FileSystem


class ReadBlueprintStep(PipelineStep):
    """
    <base>.sbp + <base>.sbpcfg -> codec.decode -> ctx.blueprint

    Codec errors are propagated verbatim.
    """

    def __init__(self, codec: BlueprintCodec, inst=None) -> None:
        super().__init__(inst)
        self.codec = codec

    @logs.catch("blueprint file IO failed")
    def run(self, ctx: PipelineContext) -> PipelineContext:
        paths = ctx.inputs

        if not FileSystem.file_exists(paths.body):
            raise BlueprintFileNotFoundError("body", paths.body)
        if not FileSystem.file_exists(paths.config):
            raise BlueprintFileNotFoundError("config", paths.config)

        body = FileSystem.read_bytes(paths.body)
        config = FileSystem.read_bytes(paths.config)

        ctx.blueprint = self.codec.decode(ctx.blueprint_name, body, config)

        logs.info(
            f"[{self.step_name}] {paths.body.name}: "
            f"{len(ctx.blueprint.objects)} object(s)"
        )
        return ctx
