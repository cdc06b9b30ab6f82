"""Plate reverberator built from a figure-of-eight delay tank."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from oxideplate.delay import Delay, _check_delay
from oxideplate.filters import APF, IIR

INPUT_DIFFUSION_1_1 = 142
INPUT_DIFFUSION_1_2 = 107
INPUT_DIFFUSION_2_1 = 379
INPUT_DIFFUSION_2_2 = 277

DECAY_DIFFUSION_1_1 = 672
DECAY_DIFFUSION_1_2 = 908
DECAY_DIFFUSION_2_1 = 1800
DECAY_DIFFUSION_2_2 = 2656

EXCURSION = 16

DELAY_1 = 4453
DELAY_2 = 3720
DELAY_3 = 4217
DELAY_4 = 3163

PREDELAY_BUFFER = 4096


@dataclass(frozen=True)
class PlateParams:
    """Settings of the plate reverberator."""

    predelay: int = 1
    bandwidth: float = 0.9995
    input_diffusion_1: float = 0.750
    input_diffusion_2: float = 0.625
    decay_diffusion_1: float = 0.70
    decay_diffusion_2: float = 0.50
    decay_modulation: int = 0
    damping: float = 0.0005
    decay: float = 0.50


def _zeros(length: int) -> list[float]:
    return [0.0] * length


def _mean(xs: Sequence[float]) -> float:
    if not xs:
        raise ValueError("at least one input channel is required")
    return sum(xs) / len(xs)


class Plate:
    """A plate reverb that mixes its input channels into a stereo tail.

    ``excursion`` is the head room, in samples, that the first decay diffusers
    keep for ``decay_modulation``.
    """

    def __init__(self, excursion: int = EXCURSION) -> None:
        if excursion < 0:
            raise ValueError(f"excursion must not be negative, got {excursion}")
        self.predelay_length = 1
        self._predelay = Delay(_zeros(PREDELAY_BUFFER))
        self._prefilter = IIR(_zeros(1))

        self._input_diffusion_1_1 = APF(_zeros(INPUT_DIFFUSION_1_1 + 1))
        self._input_diffusion_1_2 = APF(_zeros(INPUT_DIFFUSION_1_2 + 1))
        self._input_diffusion_2_1 = APF(_zeros(INPUT_DIFFUSION_2_1 + 1))
        self._input_diffusion_2_2 = APF(_zeros(INPUT_DIFFUSION_2_2 + 1))

        self._tank = [0.0, 0.0]

        self._decay_diffusion_1_1 = APF(_zeros(DECAY_DIFFUSION_1_1 + excursion + 1))
        self._decay_diffusion_1_2 = APF(_zeros(DECAY_DIFFUSION_1_2 + excursion + 1))
        self._decay_diffusion_2_1 = APF(_zeros(DECAY_DIFFUSION_2_1 + 1))
        self._decay_diffusion_2_2 = APF(_zeros(DECAY_DIFFUSION_2_2 + 1))

        self._damping_1 = IIR(_zeros(1))
        self._damping_2 = IIR(_zeros(1))

        self._delay_1 = Delay(_zeros(DELAY_1 + 1))
        self._delay_2 = Delay(_zeros(DELAY_2 + 1))
        self._delay_3 = Delay(_zeros(DELAY_3 + 1))
        self._delay_4 = Delay(_zeros(DELAY_4 + 1))

        self.decay = 0.0

    def set_params(self, params: PlateParams) -> None:
        """Apply a new set of parameters."""
        modulated_1 = _check_delay(DECAY_DIFFUSION_1_1 + params.decay_modulation)
        modulated_2 = _check_delay(DECAY_DIFFUSION_1_2 + params.decay_modulation)
        self.predelay_length = _check_delay(params.predelay)

        bandwidth = params.bandwidth
        self._prefilter.set_params([1 - bandwidth], bandwidth)

        d1 = params.input_diffusion_1
        d2 = params.input_diffusion_2
        self._input_diffusion_1_1.set_params(d1, d1, INPUT_DIFFUSION_1_1)
        self._input_diffusion_1_2.set_params(d1, d1, INPUT_DIFFUSION_1_2)
        self._input_diffusion_2_1.set_params(d2, d2, INPUT_DIFFUSION_2_1)
        self._input_diffusion_2_2.set_params(d2, d2, INPUT_DIFFUSION_2_2)

        dd1 = -params.decay_diffusion_1
        dd2 = params.decay_diffusion_2
        self._decay_diffusion_1_1.set_params(dd1, dd1, modulated_1)
        self._decay_diffusion_1_2.set_params(dd1, dd1, modulated_2)
        self._decay_diffusion_2_1.set_params(dd2, dd2, DECAY_DIFFUSION_2_1)
        self._decay_diffusion_2_2.set_params(dd2, dd2, DECAY_DIFFUSION_2_2)

        damping = params.damping
        self._damping_1.set_params([damping], 1 - damping)
        self._damping_2.set_params([damping], 1 - damping)

        self.decay = params.decay

    def process(self, x: Sequence[float]) -> None:
        """Feed the mean of the input channels through the tank."""
        self._predelay.write(_mean(x))
        acc = self._predelay.read(self.predelay_length)
        acc = self._prefilter.tick(acc)

        acc = self._input_diffusion_1_1.tick(acc)
        acc = self._input_diffusion_1_2.tick(acc)
        acc = self._input_diffusion_2_1.tick(acc)
        acc = self._input_diffusion_2_2.tick(acc)

        tank1 = self._decay_diffusion_1_1.tick(acc + self._tank[0])
        self._delay_1.write(tank1)
        tank1 = self._delay_1.read(DELAY_1)
        tank1 = self.decay * self._damping_1.tick(tank1)
        tank1 = self._decay_diffusion_2_1.tick(tank1)
        self._delay_2.write(tank1)
        tank1 = self.decay * self._delay_2.read(DELAY_2)

        tank2 = self._decay_diffusion_1_2.tick(acc + self._tank[1])
        self._delay_3.write(tank2)
        tank2 = self._delay_3.read(DELAY_3)
        tank2 = self.decay * self._damping_2.tick(tank2)
        tank2 = self._decay_diffusion_2_2.tick(tank2)
        self._delay_4.write(tank2)
        tank2 = self.decay * self._delay_4.read(DELAY_4)

        self._tank = [tank2, tank1]

    def process_2ch(self, x: Sequence[float]) -> tuple[float, float]:
        """Process one frame and return the (left, right) reverb output."""
        self.process(x)

        left = (
            self._delay_3.read(266)
            + self._delay_3.read(2974)
            - self._decay_diffusion_2_2.sample_buffer(1913)
            + self._delay_4.read(1996)
            - self._delay_1.read(1990)
            - self._decay_diffusion_2_1.sample_buffer(187)
            - self._delay_2.read(1066)
        )
        right = (
            self._delay_1.read(353)
            + self._delay_1.read(3627)
            - self._decay_diffusion_2_1.sample_buffer(1228)
            + self._delay_2.read(2673)
            - self._delay_3.read(2111)
            - self._decay_diffusion_2_2.sample_buffer(335)
            - self._delay_4.read(121)
        )
        return left, right