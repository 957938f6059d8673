"""
Configuration schema for contour_frame.

Supports:
- YAML file loading
- Validation with error messages

Example config (contour_frame.yml):
    version: 1

    context:
      features: [f0, I]
      contexts: [[0, 1], [1, 1], [2, 2]]

    quantizer:
      time_bins: 3
      value_bins: 3
      min_value: -3.0
      max_value: 3.0
"""

import logging
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Tuple

import yaml

from ..core.errors import ConfigError
from ..shapemodel.quantizer import UniformContourQuantizer

logger = logging.getLogger(__name__)


@dataclass
class ContextConfig:
    """Context window settings."""
    features: List[str] = field(default_factory=lambda: ['f0', 'I'])
    contexts: List[Tuple[int, int]] = field(
        default_factory=lambda: [(0, 1), (1, 1), (2, 2)]
    )

    def __post_init__(self):
        self.contexts = [tuple(c) for c in self.contexts]


@dataclass
class QuantizerConfig:
    """Uniform quantizer settings."""
    time_bins: int = 3
    value_bins: int = 3
    min_value: float = -3.0
    max_value: float = 3.0

    def __post_init__(self):
        for name in ('time_bins', 'value_bins'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {value!r}")

        for name in ('min_value', 'max_value'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, got {value!r}")
            setattr(self, name, float(value))

    def build(self) -> UniformContourQuantizer:
        return UniformContourQuantizer(
            time_bins=self.time_bins,
            value_bins=self.value_bins,
            min_value=self.min_value,
            max_value=self.max_value,
        )


@dataclass
class ContourFrameConfig:
    """Root configuration."""

    version: int = 1
    context: ContextConfig = field(default_factory=ContextConfig)
    quantizer: QuantizerConfig = field(default_factory=QuantizerConfig)

    @classmethod
    def load(cls, path: Path) -> 'ContourFrameConfig':
        """Load from YAML file."""
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        config = cls.from_dict(data)
        errors = config.validate()
        if errors:
            raise ConfigError(context={'path': str(path), 'errors': errors})

        logger.info(f"Loaded config from {path}")
        return config

    @classmethod
    def from_dict(cls, data: dict) -> 'ContourFrameConfig':
        """Create from dictionary."""
        try:
            return cls(
                version=data.get('version', 1),
                context=ContextConfig(**data.get('context', {})),
                quantizer=QuantizerConfig(**data.get('quantizer', {})),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(context={'reason': str(e)}) from e

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = asdict(self)
        data['context']['contexts'] = [list(c) for c in self.context.contexts]
        return data

    def to_yaml(self) -> str:
        """Convert to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def validate(self) -> List[str]:
        """Validate config. Returns list of errors (empty if valid)."""
        errors = []

        if self.version != 1:
            errors.append(f"Unsupported config version: {self.version}")

        for context in self.context.contexts:
            if len(context) != 2:
                errors.append(f"Context must be [back, front]: {list(context)}")
            elif context[0] < 0 or context[1] < 0:
                errors.append(f"Context sizes must be >= 0: {list(context)}")

        if not self.context.features:
            errors.append("No context features configured")

        if self.quantizer.time_bins < 1:
            errors.append(f"Invalid time_bins: {self.quantizer.time_bins}")

        if self.quantizer.value_bins < 1:
            errors.append(f"Invalid value_bins: {self.quantizer.value_bins}")

        if self.quantizer.min_value >= self.quantizer.max_value:
            errors.append("min_value should be less than max_value")

        return errors


def load_config(path: Optional[Path] = None) -> ContourFrameConfig:
    """Load config from file or return defaults."""
    if path and Path(path).exists():
        return ContourFrameConfig.load(path)

    search_paths = [
        Path('./contour_frame.yml'),
        Path('./contour_frame.yaml'),
        Path.home() / '.contour_frame' / 'config.yml',
    ]

    for p in search_paths:
        if p.exists():
            return ContourFrameConfig.load(p)

    return ContourFrameConfig()


def generate_default_config() -> str:
    """Generate default config as YAML."""
    return """# contour_frame Configuration
version: 1

context:
  features: [f0, I]
  contexts:
    - [0, 1]
    - [1, 1]
    - [2, 2]

quantizer:
  time_bins: 3
  value_bins: 3
  min_value: -3.0
  max_value: 3.0
"""
