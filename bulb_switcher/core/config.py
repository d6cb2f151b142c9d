"""
================================================================================
Bulb String Configuration
================================================================================

Immutable parameter bundle describing the pull string's geometry, its
animation keyframe sequences and its visual style.

Features:
- Sensible defaults for every field (a 100px string hanging at x=100)
- Configuration save/load to JSON
- Validation that reports issues instead of refusing to build

The configuration is read once when the widget is created. Nothing in the
application mutates it afterwards.
================================================================================
"""

import json
import logging
import string
from dataclasses import dataclass, field, asdict
from typing import List, Tuple
from pathlib import Path

try:
    from .geometry import Point
    from ..utils.constants import ANIMATION_STEP_MS, PATH_SAMPLE_STEP, HEX_COLOR_LENGTHS
except ImportError:
    from core.geometry import Point
    from utils.constants import ANIMATION_STEP_MS, PATH_SAMPLE_STEP, HEX_COLOR_LENGTHS

logger = logging.getLogger(__name__)

# (amplitude, direction) - direction is +1 for a swing right, -1 for left
WaveKeyframe = Tuple[float, int]

DEFAULT_WAVE_SEQUENCE: Tuple[WaveKeyframe, ...] = (
    (60.0, 1),
    (40.0, -1),
    (20.0, 1),
    (10.0, -1),
)

DEFAULT_LENGTH_SEQUENCE: Tuple[float, ...] = (60.0, 100.0, 80.0, 100.0, 80.0, 100.0)


@dataclass(frozen=True)
class BulbStringConfig:
    """
    Complete configuration for one pull string.

    Attributes:
        initial_touch_position: Touch point before the first gesture
        bulb_center_x: X coordinate the string hangs from (Y is always 0)
        initial_y_offset: Resting length of the string before any animation
        wave_sequence: Ordered (amplitude, direction) swings played on release
        length_sequence: Ordered lengths the string stretches through on release
        touch_threshold: Max per-axis distance from the string end to grab it
        stroke_width: Width of the drawn string
        circle_radius: Radius of the marker drawn at the string end
        line_color: String color (#RRGGBB or #AARRGGBB)
        circle_color: Marker color (#RRGGBB or #AARRGGBB)
        step_duration_ms: Duration of one keyframe interpolation
        sample_step: Vertical spacing of the samples along the waving string
    """

    initial_touch_position: Point = Point(100.0, 100.0)
    bulb_center_x: float = 100.0
    initial_y_offset: float = 100.0
    wave_sequence: Tuple[WaveKeyframe, ...] = DEFAULT_WAVE_SEQUENCE
    length_sequence: Tuple[float, ...] = DEFAULT_LENGTH_SEQUENCE
    touch_threshold: float = 50.0
    stroke_width: float = 3.0
    circle_radius: float = 4.0
    line_color: str = "#000000"
    circle_color: str = "#000000"
    step_duration_ms: float = ANIMATION_STEP_MS
    sample_step: float = PATH_SAMPLE_STEP

    def __post_init__(self):
        """Normalize sequences to tuples so the instance stays immutable."""
        object.__setattr__(self, 'initial_touch_position', Point.of(self.initial_touch_position))
        object.__setattr__(
            self, 'wave_sequence',
            tuple((float(amplitude), int(direction)) for amplitude, direction in self.wave_sequence)
        )
        object.__setattr__(
            self, 'length_sequence',
            tuple(float(length) for length in self.length_sequence)
        )

    @property
    def resting_endpoint(self) -> Point:
        """Where the string ends before it has ever been pulled."""
        return Point(self.bulb_center_x, self.initial_y_offset)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data["initial_touch_position"] = list(self.initial_touch_position)
        data["wave_sequence"] = [list(keyframe) for keyframe in self.wave_sequence]
        data["length_sequence"] = list(self.length_sequence)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'BulbStringConfig':
        """
        Create from dictionary.

        Missing keys fall back to the defaults.

        Raises:
            ValueError: If data is not a dict, or a field has the wrong shape
                (e.g. a wave keyframe that is not an (amplitude, direction) pair)
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid bulb string configuration: expected an object, got {type(data).__name__}"
            )

        defaults = cls()
        try:
            wave_sequence = tuple(
                (float(amplitude), int(direction))
                for amplitude, direction in data.get("wave_sequence", defaults.wave_sequence)
            )
            length_sequence = tuple(
                float(length) for length in data.get("length_sequence", defaults.length_sequence)
            )
            touch_x, touch_y = data.get("initial_touch_position", defaults.initial_touch_position)

            return cls(
                initial_touch_position=Point(float(touch_x), float(touch_y)),
                bulb_center_x=float(data.get("bulb_center_x", defaults.bulb_center_x)),
                initial_y_offset=float(data.get("initial_y_offset", defaults.initial_y_offset)),
                wave_sequence=wave_sequence,
                length_sequence=length_sequence,
                touch_threshold=float(data.get("touch_threshold", defaults.touch_threshold)),
                stroke_width=float(data.get("stroke_width", defaults.stroke_width)),
                circle_radius=float(data.get("circle_radius", defaults.circle_radius)),
                line_color=str(data.get("line_color", defaults.line_color)),
                circle_color=str(data.get("circle_color", defaults.circle_color)),
                step_duration_ms=float(data.get("step_duration_ms", defaults.step_duration_ms)),
                sample_step=float(data.get("sample_step", defaults.sample_step)),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid bulb string configuration: {e}") from e

    def save(self, filepath: str):
        """Save configuration to JSON file."""
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> 'BulbStringConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of issues.

        Returns:
            List of validation error messages (empty if valid)
        """
        issues = []

        positive_fields = {
            "touch_threshold": self.touch_threshold,
            "stroke_width": self.stroke_width,
            "circle_radius": self.circle_radius,
            "step_duration_ms": self.step_duration_ms,
            "sample_step": self.sample_step,
        }
        for name, value in positive_fields.items():
            if value <= 0:
                issues.append(f"{name} must be positive (got {value})")

        if self.initial_y_offset < 0:
            issues.append(f"initial_y_offset must not be negative (got {self.initial_y_offset})")

        negative_lengths = [length for length in self.length_sequence if length < 0]
        if negative_lengths:
            issues.append(f"Negative lengths in length_sequence: {negative_lengths}")

        bad_directions = [direction for _, direction in self.wave_sequence if direction not in (-1, 1)]
        if bad_directions:
            issues.append(f"Wave directions must be 1 or -1: {bad_directions}")

        for name in ("line_color", "circle_color"):
            if not _is_hex_color(getattr(self, name)):
                issues.append(f"{name} is not a #RRGGBB or #AARRGGBB color: {getattr(self, name)!r}")

        return issues


def _is_hex_color(value: str) -> bool:
    """Check whether a string looks like a Qt-compatible hex color."""
    if not value.startswith("#") or len(value) not in HEX_COLOR_LENGTHS:
        return False
    return all(char in string.hexdigits for char in value[1:])


# Default configuration file location
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "bulb_string_config.json"


def get_default_config() -> BulbStringConfig:
    """Get default configuration (loads from file if exists, otherwise creates new)."""
    if DEFAULT_CONFIG_PATH.exists():
        try:
            config = BulbStringConfig.load(str(DEFAULT_CONFIG_PATH))
        except (OSError, ValueError) as e:
            logger.warning("Error loading default config %s: %s", DEFAULT_CONFIG_PATH, e)
        else:
            for issue in config.validate():
                logger.warning("Config issue: %s", issue)
            return config

    return BulbStringConfig()
