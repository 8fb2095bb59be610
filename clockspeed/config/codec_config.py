#!filepath: clockspeed/config/codec_config.py
from pydantic import BaseModel

DEFAULT_CODEC = "clockspeed.adapters.json_blueprint_codec:JsonBlueprintCodec"


class CodecConfig(BaseModel):
    # "module:attribute" of a BlueprintCodec class / factory
    target: str = DEFAULT_CODEC
