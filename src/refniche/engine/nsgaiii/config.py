"""NSGA-III normalization configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict

from refniche.foundation.exceptions import ConfigurationError

IDEAL_POINT_MODES = ("max", "min")


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


@dataclass(frozen=True)
class NormalizerConfigData(_SerializableConfig):
    eps: float = 1e-10
    min_intercept: float = 1e-3
    asf_epsilon: float = 1e-6
    ideal_point: str = "max"


class NormalizerConfig:
    """
    Declarative configuration holder for the NSGA-III normalizer.

    Examples:
        cfg = NormalizerConfig.default()
        cfg = NormalizerConfig().min_intercept(1e-4).ideal_point("min").fixed()
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(cls) -> NormalizerConfigData:
        """Create the default configuration (EPS=1e-10, intercept floor 0.001)."""
        return cls().fixed()

    def eps(self, value: float) -> "NormalizerConfig":
        self._cfg["eps"] = float(value)
        return self

    def min_intercept(self, value: float) -> "NormalizerConfig":
        self._cfg["min_intercept"] = float(value)
        return self

    def asf_epsilon(self, value: float) -> "NormalizerConfig":
        self._cfg["asf_epsilon"] = float(value)
        return self

    def ideal_point(self, mode: str) -> "NormalizerConfig":
        """
        Select the running update used for the ideal point.

        ``"max"`` (default) seeds every objective at +inf and keeps the
        running maximum. ``"min"`` keeps the running minimum instead.
        """
        self._cfg["ideal_point"] = mode
        return self

    def fixed(self) -> NormalizerConfigData:
        data = NormalizerConfigData(**self._cfg)
        _validate(data)
        return data


def _validate(data: NormalizerConfigData) -> None:
    for field in ("eps", "min_intercept", "asf_epsilon"):
        value = getattr(data, field)
        if not value > 0.0:
            raise ConfigurationError(
                f"Normalizer '{field}' must be positive, got {value!r}.",
                suggestion=f"Use NormalizerConfig.default() or pass a positive {field}",
                details={"field": field, "value": value},
            )
    if data.ideal_point not in IDEAL_POINT_MODES:
        raise ConfigurationError(
            f"Unknown ideal point mode '{data.ideal_point}'.",
            suggestion=f"Available modes: {', '.join(IDEAL_POINT_MODES)}",
            details={"field": "ideal_point", "value": data.ideal_point},
        )


__all__ = ["IDEAL_POINT_MODES", "NormalizerConfig", "NormalizerConfigData"]
