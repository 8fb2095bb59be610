#!filepath: clockspeed/config/machine_config.py
from typing import Dict

from pydantic import BaseModel, Field, field_validator

from clockspeed.registry.machine_def import MACHINE_DEFINITIONS, TYPE_PATH_PREFIXES


class MachineConfig(BaseModel):
    """
    Extra machine kinds on top of the built-in table:

        machines:
          extra:
            coalgenerator: /Game/.../Build_GeneratorCoal.Build_GeneratorCoal_C
    """

    extra: Dict[str, str] = Field(default_factory=dict)

    @field_validator("extra")
    @classmethod
    def _check_extra(cls, v: Dict[str, str]) -> Dict[str, str]:
        builtin = {d.friendly_name for d in MACHINE_DEFINITIONS}
        out: Dict[str, str] = {}

        for name, path in v.items():
            key = name.strip().lower()
            if not key:
                raise ValueError("machine name must not be empty")
            if key in builtin or key in out:
                raise ValueError(f"duplicate machine name: {key}")
            if not path.startswith(TYPE_PATH_PREFIXES):
                raise ValueError(f"invalid type path for {key}: {path}")
            out[key] = path

        return out
