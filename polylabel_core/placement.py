"""
Label Placement Module
======================

Turns a pole search result into marker/label geometry for drawing code.

Design:
- Value object (frozen), no drawing here
- Anchor exposed as supervision.Point so it plugs straight into
  sv.draw_text / sv.draw_circle style utilities
- Marker diameter = 2 * radius (inscribed circle)

Dependencies:
- supervision (Point)
"""

import math
import supervision as sv
from dataclasses import dataclass
from typing import Any, Dict, Optional

from polylabel_core.search.pole import PoleResult


@dataclass(frozen=True)
class LabelPlacement:
    """
    Where and how large a label can be inside a polygon.

    Attributes:
        label_id: Optional identifier (polygon id)
        x, y: Pole coordinates (label center)
        radius: Inscribed-circle radius, clamped to >= 0

    Usage:
        result = find_pole_of_isolation(vertices, precision=0.5)
        placement = LabelPlacement.from_result(result, label_id="lake")
        sv.draw_text(scene=frame, text="Lake", text_anchor=placement.anchor)
    """

    x: float
    y: float
    radius: float
    label_id: Optional[str] = None

    def __post_init__(self):
        """Validate invariants."""
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Placement center must be finite, got ({self.x}, {self.y})")
        if not math.isfinite(self.radius) or self.radius < 0:
            raise ValueError(f"Placement radius must be finite and >= 0, got {self.radius}")

    @classmethod
    def from_result(cls, result: PoleResult, label_id: Optional[str] = None) -> "LabelPlacement":
        """
        Build a placement from a search result.

        A negative radius (pole outside a degenerate polygon) is clamped
        to 0: the marker collapses to a point.
        """
        return cls(
            x=float(result.pole[0]),
            y=float(result.pole[1]),
            radius=max(0.0, float(result.radius)),
            label_id=label_id,
        )

    @property
    def anchor(self) -> sv.Point:
        """Label center as a supervision point."""
        return sv.Point(x=self.x, y=self.y)

    @property
    def diameter(self) -> float:
        return 2 * self.radius

    def fits(self, text_width: float, text_height: float) -> bool:
        """
        Check whether a centered text box fits in the inscribed circle.

        The box fits when its half-diagonal is no longer than the radius.
        """
        return math.hypot(text_width / 2, text_height / 2) <= self.radius

    def scale_to_fit(self, text_width: float, text_height: float) -> float:
        """
        Largest scale factor at which a centered text box still fits.

        Returns:
            Scale factor (0 for a degenerate placement)
        """
        half_diagonal = math.hypot(text_width / 2, text_height / 2)
        if half_diagonal == 0:
            return math.inf if self.radius > 0 else 0.0
        return self.radius / half_diagonal

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'label_id': self.label_id,
            'anchor': {'x': self.x, 'y': self.y},
            'radius': self.radius,
            'diameter': self.diameter,
        }
