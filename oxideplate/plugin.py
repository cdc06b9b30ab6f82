"""Parameter handling and buffer processing for the plate reverb effect."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields

from oxideplate.plate import EXCURSION, Plate, PlateParams


@dataclass(frozen=True)
class IntRange:
    """Inclusive integer range."""

    min: int
    max: int

    def clamp(self, value: int) -> int:
        """Limit ``value`` to the range."""
        return max(self.min, min(self.max, int(value)))


@dataclass(frozen=True)
class FloatRange:
    """Inclusive float range with an optional skew factor for display."""

    min: float
    max: float
    factor: float = 1.0

    def clamp(self, value: float) -> float:
        """Limit ``value`` to the range."""
        return max(self.min, min(self.max, float(value)))


_SKEW = 2.0**0.0001
_UNIT = FloatRange(0.0001, 0.9999)
_SKEWED = FloatRange(0.0001, 0.9999, _SKEW)

_RANGES = {
    "predelay": IntRange(1, 4095),
    "bandwidth": _SKEWED,
    "input_diffusion_1": _UNIT,
    "input_diffusion_2": _UNIT,
    "decay_diffusion_1": _UNIT,
    "decay_diffusion_2": _UNIT,
    "damping": _SKEWED,
    "decay": _UNIT,
    "wet": FloatRange(0.0, 1.0),
    "decay_mod": IntRange(-(EXCURSION - 1), EXCURSION - 1),
}


@dataclass(frozen=True)
class PlatePluginParams:
    """User-facing parameters; each value is clamped to its range."""

    predelay: int = 50
    bandwidth: float = 0.9995
    input_diffusion_1: float = 0.750
    input_diffusion_2: float = 0.625
    decay_diffusion_1: float = 0.70
    decay_diffusion_2: float = 0.50
    damping: float = 0.0005
    decay: float = 0.500
    wet: float = 0.500
    decay_mod: int = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            object.__setattr__(self, field.name, _RANGES[field.name].clamp(value))

    def to_plate_params(self) -> PlateParams:
        """The reverberator settings these parameters describe."""
        return PlateParams(
            predelay=self.predelay,
            bandwidth=self.bandwidth,
            input_diffusion_1=self.input_diffusion_1,
            input_diffusion_2=self.input_diffusion_2,
            decay_diffusion_1=self.decay_diffusion_1,
            decay_diffusion_2=self.decay_diffusion_2,
            damping=self.damping,
            decay=self.decay,
            decay_modulation=self.decay_mod,
        )


class PlatePlugin:
    """Plate reverb effect for mono or stereo audio blocks."""

    NAME = "oxide plate"
    VENDOR = "zen-en-tonal"
    DESCRIPTION = "A reverb."

    def __init__(self, params: PlatePluginParams | None = None) -> None:
        self.params = params if params is not None else PlatePluginParams()
        self._plate = Plate(EXCURSION)

    def process_buffer(
        self, buffer: Sequence[Sequence[float]]
    ) -> list[list[float]]:
        """Process one block given as a list of channels.

        Returns the wet/dry mix of each channel.
        """
        channels = [list(channel) for channel in buffer]
        if len(channels) not in (1, 2):
            raise ValueError(f"expected 1 or 2 channels, got {len(channels)}")
        if len({len(channel) for channel in channels}) > 1:
            raise ValueError("all channels must have the same length")

        wet = self.params.wet
        self._plate.set_params(self.params.to_plate_params())
        outputs: list[list[float]] = [[] for _ in channels]
        for frame in zip(*channels):
            reverb = self._plate.process_2ch(frame)
            for out, dry, y in zip(outputs, frame, reverb):
                out.append((1.0 - wet) * dry + wet * y)
        return outputs