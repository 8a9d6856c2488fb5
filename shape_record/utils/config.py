"""Configuration management."""

import json
from typing import Optional, Tuple
from pathlib import Path
from dataclasses import dataclass, asdict, fields

from shape_record.io.record_io import BYTE_ORDERS, TAG_WIDTHS
from shape_record.render.manager import RENDER_MODES
from shape_record.shapes.kinds import ShortParamsPolicy

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Decoder and rendering configuration."""
    # Input
    input_path: str = "features.dat"
    
    # Wire format
    tag_width: int = 4
    byte_order: str = "little"
    
    # Render behaviour
    short_params_policy: str = "skip"
    render_mode: str = "null"
    output_path: Optional[str] = None
    figsize: Tuple[float, float] = (6, 6)
    dpi: int = 100
    
    # Logging
    log_level: str = "INFO"
    
    def __post_init__(self):
        # Wrong types are left for validate() to report
        if isinstance(self.figsize, list):
            self.figsize = tuple(self.figsize)
        if isinstance(self.log_level, str):
            self.log_level = self.log_level.upper()
    
    def validate(self):
        """Check that every field holds a supported value.
        
        Raises:
            ValueError: On the first invalid field
        """
        if not isinstance(self.input_path, str) or not self.input_path:
            raise ValueError(f"input_path must be a non-empty string, got {self.input_path!r}")
        if self.output_path is not None and not isinstance(self.output_path, str):
            raise ValueError(f"output_path must be a string or null, got {self.output_path!r}")
        if not _is_int(self.tag_width) or self.tag_width not in TAG_WIDTHS:
            raise ValueError(f"tag_width must be one of {list(TAG_WIDTHS)}, got {self.tag_width!r}")
        if not isinstance(self.byte_order, str) or self.byte_order not in BYTE_ORDERS:
            raise ValueError(f"byte_order must be one of {list(BYTE_ORDERS)}, got {self.byte_order!r}")
        policies = [policy.value for policy in ShortParamsPolicy]
        if not isinstance(self.short_params_policy, str) or self.short_params_policy not in policies:
            raise ValueError(f"short_params_policy must be one of {policies}, got {self.short_params_policy!r}")
        if not isinstance(self.render_mode, str) or self.render_mode not in RENDER_MODES:
            raise ValueError(f"render_mode must be one of {list(RENDER_MODES)}, got {self.render_mode!r}")
        if not isinstance(self.log_level, str) or self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(LOG_LEVELS)}, got {self.log_level!r}")
        if (not isinstance(self.figsize, tuple) or len(self.figsize) != 2
                or not all(_is_positive_number(value) for value in self.figsize)):
            raise ValueError(f"figsize must be (width, height) with positive numbers, got {self.figsize!r}")
        if not _is_int(self.dpi) or self.dpi <= 0:
            raise ValueError(f"dpi must be a positive integer, got {self.dpi!r}")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_positive_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def _config_format(path: Path) -> str:
    """Return 'json' or 'yaml' for a config path.
    
    Raises:
        ValueError: If the suffix is not .json, .yaml or .yml
    """
    if path.suffix == '.json':
        return 'json'
    if path.suffix == '.yaml' or path.suffix == '.yml':
        return 'yaml'
    raise ValueError(f"Unsupported config format: {path.suffix or path.name}. Use .json, .yaml or .yml")


def _import_yaml():
    try:
        import yaml
    except ImportError:
        raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
    return yaml


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
        
    Raises:
        ValueError: On an unsupported suffix, malformed content, unknown
            keys or invalid values
    """
    config_path = Path(config_path)
    file_format = _config_format(config_path)
    
    with open(config_path, 'r') as f:
        if file_format == 'yaml':
            yaml = _import_yaml()
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in {config_path}: {exc}") from None
            if data is None:
                data = {}
        else:
            data = json.load(f)
    
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")
    
    known = {field.name for field in fields(Config)}
    unknown = sorted(str(key) for key in set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {config_path}: {unknown}")
    
    config = Config(**data)
    config.validate()
    return config


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
        
    Raises:
        ValueError: If the suffix is not .json, .yaml or .yml
    """
    output_path = Path(output_path)
    file_format = _config_format(output_path)
    data = asdict(config)
    data['figsize'] = list(data['figsize'])
    
    with open(output_path, 'w') as f:
        if file_format == 'yaml':
            _import_yaml().safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
