# clockspeed/config/adjust_config.py
from pydantic import BaseModel


class AdjustConfig(BaseModel):
    output_suffix: str = "_modified"
    require_match: bool = True
    instrumentation: bool = True
