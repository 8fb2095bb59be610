#!filepath: clockspeed/registry/machine_def.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

TYPE_PATH_PREFIXES: Tuple[str, ...] = ("/Game/", "/Script/")

_FACTORY = "/Game/FactoryGame/Buildable/Factory"


@dataclass(frozen=True)
class MachineDefinition:
    """
    friendly_name (lowercase, unique) <-> type_path (exact, case-sensitive)
    """

    friendly_name: str
    type_path: str


def _build(folder: str, cls: str) -> str:
    return f"{_FACTORY}/{folder}/Build_{cls}.Build_{cls}_C"


MACHINE_DEFINITIONS: Tuple[MachineDefinition, ...] = (
    MachineDefinition("constructor", _build("ConstructorMk1", "ConstructorMk1")),
    MachineDefinition("assembler", _build("AssemblerMk1", "AssemblerMk1")),
    MachineDefinition("manufacturer", _build("ManufacturerMk1", "ManufacturerMk1")),
    MachineDefinition("refinery", _build("OilRefinery", "OilRefinery")),
    MachineDefinition("packager", _build("Packager", "Packager")),
    MachineDefinition("smelter", _build("SmelterMk1", "SmelterMk1")),
    MachineDefinition("foundry", _build("FoundryMk1", "FoundryMk1")),
    MachineDefinition("blender", _build("Blender", "Blender")),
    MachineDefinition("particleaccelerator", _build("HadronCollider", "HadronCollider")),
    MachineDefinition("quantumencoder", _build("QuantumEncoder", "QuantumEncoder")),
    MachineDefinition("converter", _build("Converter", "Converter")),
)
