#!filepath: clockspeed/registry/machine_registry.py
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

from clockspeed.registry.machine_def import (
    MACHINE_DEFINITIONS,
    TYPE_PATH_PREFIXES,
    MachineDefinition,
)

_CLASS_NAME_RE = re.compile(r"Build_(\w+?)(Mk\d+)?\.\w+_C$")


class MachineRegistry:
    """
    MachineRegistry (FROZEN)

    Bidirectional, read-only mapping between friendly machine names and
    type paths. The table is injected; the default is MACHINE_DEFINITIONS.

    Contract:
      - friendly names are matched case-insensitively
      - type paths are matched exactly (case-sensitive)
      - unregistered type paths are invisible to get_machine_name
    """

    def __init__(self, definitions: Iterable[MachineDefinition] = MACHINE_DEFINITIONS):
        self._by_name: Dict[str, str] = {}
        self._by_path: Dict[str, str] = {}

        for d in definitions:
            name = d.friendly_name.lower()
            if name in self._by_name:
                raise ValueError(f"Duplicate machine name: {name}")
            self._by_name[name] = d.type_path
            self._by_path.setdefault(d.type_path, name)

    @classmethod
    def with_extra(cls, extra: Dict[str, str]) -> "MachineRegistry":
        """Default table plus user supplied `name -> type_path` entries."""
        defs = list(MACHINE_DEFINITIONS)
        defs.extend(MachineDefinition(name.lower(), path) for name, path in extra.items())
        return cls(defs)

    # --------------------------------------------------
    def known_names(self) -> List[str]:
        return list(self._by_name)

    def definitions(self) -> List[MachineDefinition]:
        return [MachineDefinition(n, p) for n, p in self._by_name.items()]

    def resolve_type_path(self, machine_name: str) -> Optional[str]:
        """
        friendly name -> type path
        raw type path -> itself (targets unregistered kinds)
        otherwise     -> None
        """
        path = self._by_name.get(machine_name.lower())
        if path is not None:
            return path

        if is_type_path(machine_name):
            return machine_name

        return None

    def get_machine_name(self, type_path: str) -> Optional[str]:
        return self._by_path.get(type_path)

    def is_production_machine(self, type_path: str) -> bool:
        return self.get_machine_name(type_path) is not None


# ------------------------------------------------------------------
# pure string helpers (display only, never used for matching)
# ------------------------------------------------------------------
def is_type_path(value: str) -> bool:
    return value.startswith(TYPE_PATH_PREFIXES)


def extract_class_name(type_path: str) -> str:
    """
    "/Game/.../Build_Packager.Build_Packager_C"             -> "Packager"
    "/Game/.../Build_ManufacturerMk1.Build_ManufacturerMk1_C" -> "ManufacturerMk1"
    """
    match = _CLASS_NAME_RE.search(type_path)
    if match:
        return match.group(1) + (match.group(2) or "")

    # fallback: last segment
    return type_path.split(".")[-1] or type_path
