#!filepath: clockspeed/adapters/json_blueprint_codec.py
from __future__ import annotations

import json
from typing import Any, Dict

from clockspeed import logs
from clockspeed.core.types import (
    FLOAT_PROPERTY,
    Blueprint,
    EncodedBlueprint,
    FloatProperty,
    SaveEntity,
)
from clockspeed.utils.errors import BlueprintDecodeError

_ENTITY_KEYS = ("type_path", "instance_name", "properties")


class JsonBlueprintCodec:
    """
    JsonBlueprintCodec

    Codec for blueprints exported as JSON documents.

    body (.sbp):
        {"header": {...}, "compression_info": {...}, "objects": [entity, ...]}
    config (.sbpcfg):
        any JSON object, kept opaque

    entity:
        {"type_path": str, "instance_name": str,
         "properties": {name: {"type", "name", "value", ...}}, ...}

    Decoded properties keep their original keys, key order and value type,
    so only properties rewritten by an adjustment change on encode.
    """

    encoding = "utf-8"

    # --------------------------------------------------
    def decode(self, name: str, body: bytes, config: bytes) -> Blueprint:
        doc = self._load(body, "body")
        cfg = self._load(config, "config")

        raw_objects = doc.get("objects", [])
        if not isinstance(raw_objects, list):
            raise BlueprintDecodeError('Blueprint body: "objects" must be a list')

        objects = [self._decode_entity(i, raw) for i, raw in enumerate(raw_objects)]

        logs.debug(f"[JsonBlueprintCodec] decoded {name}: {len(objects)} object(s)")

        return Blueprint(
            name=name,
            header=doc.get("header", {}),
            config=cfg,
            compression_info=doc.get("compression_info", {}),
            objects=objects,
        )

    def encode(self, blueprint: Blueprint) -> EncodedBlueprint:
        header = {
            "header": blueprint.header,
            "compression_info": blueprint.compression_info,
        }
        objects = [self._encode_entity(obj) for obj in blueprint.objects]

        # header chunk is an open JSON object; the body chunk closes it
        header_bytes = self._dump(header)[:-1] + b', "objects": '
        body_bytes = self._dump(objects) + b"}"

        return EncodedBlueprint(
            header=header_bytes,
            body_chunks=[body_bytes],
            config=self._dump(blueprint.config),
        )

    # --------------------------------------------------
    def _load(self, data: bytes, kind: str) -> Dict[str, Any]:
        try:
            doc = json.loads(data.decode(self.encoding))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise BlueprintDecodeError(f"Blueprint {kind} is not valid JSON: {e}") from e

        if not isinstance(doc, dict):
            raise BlueprintDecodeError(f"Blueprint {kind} must be a JSON object")
        return doc

    def _dump(self, value: Any) -> bytes:
        return json.dumps(value, ensure_ascii=False).encode(self.encoding)

    @staticmethod
    def _decode_entity(i: int, raw: Any) -> SaveEntity:
        if not isinstance(raw, dict) or "type_path" not in raw or "instance_name" not in raw:
            raise BlueprintDecodeError(
                f"Blueprint object #{i} must have type_path and instance_name"
            )

        raw_props = raw.get("properties", {})
        if not isinstance(raw_props, dict):
            raise BlueprintDecodeError(f"Blueprint object #{i}: properties must be an object")

        properties: Dict[str, Any] = {}
        for name, prop in raw_props.items():
            if isinstance(prop, dict) and prop.get("type") == FLOAT_PROPERTY:
                value = prop.get("value")
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise BlueprintDecodeError(
                        f"Blueprint object #{i}: bad FloatProperty {name!r}"
                    )
                properties[name] = FloatProperty(
                    name=prop.get("name", name),
                    value=value,
                    ue_type=prop.get("ue_type", FLOAT_PROPERTY),
                    raw=prop,
                )
            else:
                properties[name] = prop

        return SaveEntity(
            type_path=raw["type_path"],
            instance_name=raw["instance_name"],
            properties=properties,
            extra={k: v for k, v in raw.items() if k not in _ENTITY_KEYS},
        )

    @staticmethod
    def _encode_entity(obj: SaveEntity) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        for name, prop in obj.properties.items():
            if isinstance(prop, FloatProperty):
                properties[name] = _encode_float(prop)
            else:
                properties[name] = prop

        out: Dict[str, Any] = {
            "type_path": obj.type_path,
            "instance_name": obj.instance_name,
            "properties": properties,
        }
        out.update(obj.extra)
        return out


def _encode_float(prop: FloatProperty) -> Dict[str, Any]:
    if not prop.raw:
        return {"type": prop.type, "ue_type": prop.ue_type, "name": prop.name, "value": prop.value}

    out = dict(prop.raw)
    out["type"] = prop.type
    out["value"] = prop.value
    for key, value in (("name", prop.name), ("ue_type", prop.ue_type)):
        if key in out:
            out[key] = value
    return out
