from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import yaml

from .cache.geometry import Geometry, is_power_of_two
from .cache.policy import ReplacementPolicy
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SimConfig:
    """Cache simulator configuration."""
    # Geometry (0 = not set)
    num_sets: int = 0        # S
    lines_per_set: int = 0   # K
    line_bytes: int = 0      # B

    policy: str = ""         # FIFO or LRU
    verbose: bool = False

    trace_file: str = ""

    # Config file
    config_file: str = ""

    # Reporting (empty = summary line only)
    report_dir: str = ""

    def validate(self):
        """Raises ValueError describing the first invalid or missing setting."""
        for label, value in (("S", self.num_sets), ("K", self.lines_per_set), ("B", self.line_bytes)):
            # bool is an int subclass; a YAML `true` is not a size
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{label} must be an integer, got {value!r}")
        if not is_power_of_two(self.num_sets):
            raise ValueError("S must be a power of 2")
        if not self.lines_per_set > 0:
            raise ValueError("K must be a number larger than 0")
        if not is_power_of_two(self.line_bytes):
            raise ValueError("B must be a power of 2")
        self.policy = ReplacementPolicy.parse(self.policy).value
        if not isinstance(self.trace_file, str):
            raise ValueError(f"Trace file must be a path, got {self.trace_file!r}")
        if not self.trace_file:
            raise ValueError("Missing trace file")

    def geometry(self) -> Geometry:
        return Geometry(self.num_sets, self.lines_per_set, self.line_bytes)

    def replacement_policy(self) -> ReplacementPolicy:
        return ReplacementPolicy.parse(self.policy)

    def update_from_yaml(self, yaml_path: str):
        """Updates config fields from a YAML file."""
        with open(yaml_path, 'r') as f:
            try:
                yaml_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e
        if not isinstance(yaml_config, dict):
            raise ValueError(f"Config file {yaml_path} must hold a mapping of settings, got {type(yaml_config).__name__}")
        for key, value in yaml_config.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                logger.warning("Ignoring unknown config key '%s' in %s", key, yaml_path)

    @classmethod
    def from_args(cls, args) -> SimConfig:
        """Factory method to create a SimConfig from parsed argparse arguments."""
        config = cls()

        # 1. Load from YAML config file if provided
        if hasattr(args, 'config') and args.config:
            config.config_file = args.config
            if Path(config.config_file).exists():
                config.update_from_yaml(config.config_file)
            else:
                raise FileNotFoundError(f"Config file {config.config_file} not found")

        # 2. Override with command-line arguments
        arg_dict = vars(args)
        for key, value in arg_dict.items():
            if value is not None and hasattr(config, key):
                setattr(config, key, value)

        return config
