#!filepath: clockspeed/utils/path.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from clockspeed import logs

BODY_SUFFIX = ".sbp"
CONFIG_SUFFIX = ".sbpcfg"


@dataclass(frozen=True)
class BlueprintPaths:
    """
    A blueprint is always a file pair:

        <base>.sbp      body (header + compressed chunks)
        <base>.sbpcfg   config block

    `base` may be given with or without the `.sbp` suffix.
    """

    base: Path
    body: Path
    config: Path

    @property
    def name(self) -> str:
        """Blueprint name as passed to the codec (file stem)."""
        return self.base.name

    @classmethod
    def resolve(cls, base: str | Path) -> "BlueprintPaths":
        raw = str(base)

        if raw.endswith(BODY_SUFFIX):
            stem = raw[: -len(BODY_SUFFIX)]
            body = Path(raw)
            config = Path(stem + CONFIG_SUFFIX)
        else:
            stem = raw
            body = Path(raw + BODY_SUFFIX)
            config = Path(raw + CONFIG_SUFFIX)

        paths = cls(base=Path(stem), body=body, config=config)
        logs.debug(f"[BlueprintPaths] {base} -> {paths.body}, {paths.config}")
        return paths

    @classmethod
    def default_output(cls, inputs: "BlueprintPaths", suffix: str = "_modified") -> "BlueprintPaths":
        return cls.resolve(str(inputs.base) + suffix)
