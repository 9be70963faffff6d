from typing import Literal

from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()


class Settings(BaseSettings):
    model_config = {"env_prefix": "DOMAIN_GUARD_"}

    # What to do with an empty domain line
    on_invalid: Literal["abort", "skip"] = _defaults.get("on_invalid", "abort")

    # Output
    output_format: Literal["text", "json"] = _defaults.get("output_format", "text")

    # Logging (structlog, stderr)
    log_level: Literal["debug", "info", "warning", "error"] = _defaults.get("log_level", "warning")
