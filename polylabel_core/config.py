"""
Configuration schema for pole searches and labelling jobs.

Defines the search tuning knobs (precision, probe cap, validation) and the
YAML layout of a labelling job: a list of named polygons to place labels in.
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
import yaml


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class SearchConfig:
    """
    Pole search configuration.

    precision is in the same length units as the polygon coordinates.
    """

    precision: float = 1.0
    max_probes: Optional[int] = None  # None = refine until the frontier is empty
    validate_simple: bool = False  # reject self-intersecting rings (O(N^2))

    def __post_init__(self):
        """Validate search configuration."""
        if not math.isfinite(self.precision) or self.precision <= 0:
            raise ValueError(
                f"precision must be a positive finite number, got {self.precision}"
            )

        if self.max_probes is not None and self.max_probes < 1:
            raise ValueError(
                f"max_probes must be >= 1 or None, got {self.max_probes}"
            )


@dataclass(frozen=True)
class PolygonConfig:
    """Named polygon to label."""

    polygon_id: str
    coordinates: List[Tuple[float, float]]
    precision: Optional[float] = None  # overrides SearchConfig.precision

    def __post_init__(self):
        """Validate polygon configuration."""
        if not self.polygon_id:
            raise ValueError("polygon_id cannot be empty")

        if len(self.coordinates) < 3:
            raise ValueError(
                f"Polygon '{self.polygon_id}' must have at least 3 points, "
                f"got {len(self.coordinates)}"
            )

        if self.precision is not None and (
            not math.isfinite(self.precision) or self.precision <= 0
        ):
            raise ValueError(
                f"Polygon '{self.polygon_id}' precision must be positive, "
                f"got {self.precision}"
            )


@dataclass(frozen=True)
class LabelJobConfig:
    """
    Labelling job: polygons plus shared search settings.

    Immutable after construction (frozen dataclass).
    """

    polygons: List[PolygonConfig] = field(default_factory=list)
    search_config: SearchConfig = field(default_factory=SearchConfig)
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate job configuration."""
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

        ids = [p.polygon_id for p in self.polygons]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate polygon_id values: {duplicates}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def search_config_for(self, polygon: PolygonConfig) -> SearchConfig:
        """Search settings for one polygon (applies its precision override)."""
        if polygon.precision is None:
            return self.search_config
        return SearchConfig(
            precision=polygon.precision,
            max_probes=self.search_config.max_probes,
            validate_simple=self.search_config.validate_simple,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "LabelJobConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            log_level: "INFO"

            search_config:
              precision: 0.5
              max_probes: 100000
              validate_simple: true

            polygons:
              - polygon_id: "lake"
                coordinates: [[0, 0], [10, 0], [10, 10], [0, 10]]
              - polygon_id: "island"
                coordinates: [[0, 0], [4, 0], [2, 3]]
                precision: 0.01

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If YAML is invalid or values fail validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Top level of {yaml_path} must be a mapping")

        search_config_data = data.get("search_config") or {}
        try:
            search_config = SearchConfig(**search_config_data)
        except TypeError as e:
            raise ValueError(f"Invalid search_config in {yaml_path}: {e}")

        polygons_data = data.get("polygons") or []
        try:
            polygons = [
                PolygonConfig(
                    polygon_id=str(p["polygon_id"]),
                    coordinates=[(float(x), float(y)) for x, y in p["coordinates"]],
                    precision=p.get("precision"),
                )
                for p in polygons_data
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Invalid polygon entry in {yaml_path}: {e}")

        return cls(
            polygons=polygons,
            search_config=search_config,
            log_level=str(data.get("log_level", "WARNING")).upper(),
        )
