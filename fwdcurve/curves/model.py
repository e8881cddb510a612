"""Collection of curves resolved by name."""

from __future__ import annotations

from typing import Dict, Iterable, List


class CurveModel:
    """Immutable mapping of curve names to curves.

    Forward curves refer to their discount curve by name; a model is what
    turns that name into a curve when forwards are evaluated.
    """

    def __init__(self, curves: Iterable = ()):
        self._curves: Dict[str, object] = {}
        for curve in curves:
            self._curves[curve.name] = curve

    def get_curve(self, name: str):
        if name not in self._curves:
            raise KeyError(f"Curve not found in model: {name}. Available: {self.curve_names}")
        return self._curves[name]

    def get_discount_curve(self, name: str):
        curve = self.get_curve(name)
        if not callable(getattr(curve, "df", None)):
            raise ValueError(f"Curve {name} is not a discount curve")
        return curve

    def add_curves(self, *curves) -> CurveModel:
        """Return a new model with the given curves added (replacing same names)."""
        return CurveModel(list(self._curves.values()) + list(curves))

    @property
    def curve_names(self) -> List[str]:
        return list(self._curves)

    def __contains__(self, name: str) -> bool:
        return name in self._curves

    def __len__(self) -> int:
        return len(self._curves)
