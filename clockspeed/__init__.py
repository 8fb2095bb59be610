#!filepath: clockspeed/__init__.py

__version__ = "0.1.0"

from .utils.logger import Logging, logs
from .utils.filesystem import FileSystem
from .utils.path import BlueprintPaths
from .utils.format import format_clock_speed
from .config.app_config import AppConfig
from .engines.spec_parser_engine import parse_specs
from .engines.adjustment_engine import AdjustmentEngine, adjust_blueprint_files
from .registry.machine_registry import MachineRegistry, extract_class_name

# alias
fs = FileSystem
paths = BlueprintPaths

__all__ = [
    "__version__",
    "logs", "Logging",
    "fs",
    "paths",
    "AppConfig",
    "parse_specs",
    "AdjustmentEngine",
    "adjust_blueprint_files",
    "MachineRegistry",
    "extract_class_name",
    "format_clock_speed",
]
