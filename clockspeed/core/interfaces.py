from __future__ import annotations

from typing import Protocol, runtime_checkable

from clockspeed.core.types import Blueprint, EncodedBlueprint


@runtime_checkable
class BlueprintCodec(Protocol):
    """
    Binary blueprint codec (external collaborator).

    decode: (name, body, config) -> Blueprint
    encode: Blueprint -> header + body chunks + config block

    Codec errors are never caught or rewrapped by this package.
    """

    def decode(self, name: str, body: bytes, config: bytes) -> Blueprint:
        ...

    def encode(self, blueprint: Blueprint) -> EncodedBlueprint:
        ...
