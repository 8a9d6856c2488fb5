"""Configuration and logging utilities."""

from shape_record.utils.config import load_config, save_config, Config
from shape_record.utils.logging import setup_logging

__all__ = ["load_config", "save_config", "Config", "setup_logging"]
