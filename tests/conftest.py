# tests/conftest.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

import pytest
from loguru import logger

from clockspeed.core.types import Blueprint, EncodedBlueprint, FloatProperty, SaveEntity
from clockspeed.registry.machine_def import MACHINE_DEFINITIONS

TYPE_PATHS: Dict[str, str] = {d.friendly_name: d.type_path for d in MACHINE_DEFINITIONS}


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


# ------------------------------------------------------------
# entity / blueprint factories
# ------------------------------------------------------------
def make_entity(kind: str, n: int = 0, clock_speed: float | None = None, **props) -> SaveEntity:
    type_path = TYPE_PATHS.get(kind, kind)
    properties = dict(props)
    if clock_speed is not None:
        properties["mCurrentPotential"] = FloatProperty("mCurrentPotential", clock_speed)
        properties["mPendingPotential"] = FloatProperty("mPendingPotential", clock_speed)
    return SaveEntity(
        type_path=type_path,
        instance_name=f"Persistent_Level:PersistentLevel.{kind}_{n}",
        properties=properties,
    )


def make_blueprint(objects: List[SaveEntity], name: str = "test") -> Blueprint:
    return Blueprint(
        name=name,
        header={"version": 3},
        config={"description": "test blueprint"},
        objects=objects,
    )


@pytest.fixture
def entity_factory():
    return make_entity


@pytest.fixture
def blueprint_factory():
    return make_blueprint


# ------------------------------------------------------------
# in-memory codec
# ------------------------------------------------------------
class FakeCodec:
    """
    decode returns the preset blueprint, encode records what it was given.
    """

    def __init__(self, blueprint: Blueprint):
        self.blueprint = blueprint
        self.decoded: list = []
        self.encoded: list = []

    def decode(self, name: str, body: bytes, config: bytes) -> Blueprint:
        self.decoded.append((name, body, config))
        return self.blueprint

    def encode(self, blueprint: Blueprint) -> EncodedBlueprint:
        self.encoded.append(blueprint)
        return EncodedBlueprint(header=b"HDR", body_chunks=[b"C1", b"C2"], config=b"CFG")


@pytest.fixture
def fake_codec_factory():
    return FakeCodec


# ------------------------------------------------------------
# JSON blueprint files on disk
# ------------------------------------------------------------
def entity_doc(kind: str, n: int = 0, clock_speed: float | None = None) -> dict:
    properties = {
        "mIsProductionPaused": {"type": "BoolProperty", "name": "mIsProductionPaused", "value": False},
    }
    if clock_speed is not None:
        for name in ("mCurrentPotential", "mPendingPotential"):
            properties[name] = {
                "type": "FloatProperty",
                "ue_type": "FloatProperty",
                "name": name,
                "value": clock_speed,
            }
    return {
        "type_path": TYPE_PATHS.get(kind, kind),
        "instance_name": f"Persistent_Level:PersistentLevel.{kind}_{n}",
        "properties": properties,
        "transform": {"translation": [n * 800.0, 0.0, 0.0]},
    }


@pytest.fixture
def write_json_blueprint(tmp_path: Path):
    """
    write_json_blueprint("multi-machine", [entity_doc(...), ...]) -> base path
    """

    def _write(name: str, objects: list) -> Path:
        base = tmp_path / name
        body = {
            "header": {"headerVersion": 2, "saveVersion": 46},
            "compression_info": {"chunkHeaderVersion": 572662306},
            "objects": objects,
        }
        config = {"description": "", "iconID": 782, "color": [0.5, 0.5, 0.5, 1.0]}
        (tmp_path / f"{name}.sbp").write_text(json.dumps(body), encoding="utf-8")
        (tmp_path / f"{name}.sbpcfg").write_text(json.dumps(config), encoding="utf-8")
        return base

    return _write


@pytest.fixture
def entity_doc_factory():
    return entity_doc
