#!filepath: clockspeed/config/app_config.py
import yaml
from pydantic import BaseModel, Field, ValidationError
from dotenv import load_dotenv
import os

from clockspeed.utils.errors import ConfigError

from .log_config import LogConfig
from .codec_config import CodecConfig
from .adjust_config import AdjustConfig
from .machine_config import MachineConfig

CODEC_ENV = "CLOCKSPEED_CODEC"


def project_root() -> str:
    """
    clockspeed/config/app_config.py -> clockspeed/config -> clockspeed -> project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)
    adjust: AdjustConfig = Field(default_factory=AdjustConfig)
    machines: MachineConfig = Field(default_factory=MachineConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - default: clockspeed/config/base.yml
        - independent of the current working directory
        - CLOCKSPEED_CODEC overrides codec.target
        - any failure is raised as ConfigError
        """
        root = project_root()

        # 1) .env at project root
        load_dotenv(os.path.join(root, ".env"))

        # 2) config file
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise ConfigError(f"Config file not found: {path}")

        # 3) YAML
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file is not valid YAML: {path}\n{e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        # 4) env override
        codec_target = os.getenv(CODEC_ENV)
        if codec_target:
            raw.setdefault("codec", {})
            raw["codec"]["target"] = codec_target

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {path}:\n{e}") from e
