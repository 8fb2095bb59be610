#!filepath: clockspeed/adapters/codec_loader.py
from __future__ import annotations

import importlib

from clockspeed import logs
from clockspeed.core.interfaces import BlueprintCodec
from clockspeed.utils.errors import ConfigError


def load_codec(target: str) -> BlueprintCodec:
    """
    "package.module:Attribute" -> codec instance

    Attribute may be a class or any zero-arg factory.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f'Invalid codec target "{target}": expected "module:attribute"')

    try:
        module = importlib.import_module(module_name)
        factory = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigError(f'Cannot load codec "{target}": {e}') from e

    codec = factory()

    if not isinstance(codec, BlueprintCodec):
        raise ConfigError(f'Codec "{target}" does not provide decode/encode')

    logs.debug(f"[CodecLoader] loaded {target}")
    return codec
