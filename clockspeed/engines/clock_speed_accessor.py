#!filepath: clockspeed/engines/clock_speed_accessor.py
from __future__ import annotations

from dataclasses import replace

from clockspeed.core.types import FLOAT_PROPERTY, FloatProperty

CURRENT_POTENTIAL = "mCurrentPotential"
PENDING_POTENTIAL = "mPendingPotential"

DEFAULT_CLOCK_SPEED = 1.0


def _get_float_property(entity, name: str, default: float) -> float:
    prop = entity.properties.get(name)
    if prop is not None and getattr(prop, "type", None) == FLOAT_PROPERTY:
        return prop.value
    return default


def _float_property(entity, name: str, value: float) -> FloatProperty:
    prop = entity.properties.get(name)
    if isinstance(prop, FloatProperty):
        # keep codec metadata of the decoded property
        return replace(prop, value=value)
    return FloatProperty(name=name, value=value)


def get_clock_speed(entity) -> float:
    return _get_float_property(entity, CURRENT_POTENTIAL, DEFAULT_CLOCK_SPEED)


def get_pending_clock_speed(entity) -> float:
    return _get_float_property(entity, PENDING_POTENTIAL, DEFAULT_CLOCK_SPEED)


def set_clock_speed(entity, clock_speed: float) -> None:
    """
    Overwrite (or create) both potential properties with `clock_speed`.
    No other property is touched.
    """
    entity.properties[CURRENT_POTENTIAL] = _float_property(entity, CURRENT_POTENTIAL, clock_speed)
    entity.properties[PENDING_POTENTIAL] = _float_property(entity, PENDING_POTENTIAL, clock_speed)
