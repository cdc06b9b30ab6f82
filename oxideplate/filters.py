"""All-pass and IIR filters built on delay lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from oxideplate.delay import Delay, _check_delay


class APF:
    """Schroeder all-pass filter."""

    def __init__(
        self, buffer: Iterable[Any], delay: int = 1, a: Any = 0, b: Any = 0
    ) -> None:
        self.delay = _check_delay(delay)
        self.a = a
        self.b = b
        self._delay_line = Delay(buffer)

    def set_params(self, a: Any, b: Any, delay: int) -> None:
        """Set the feedforward and feedback gains and the delay length."""
        self.delay = _check_delay(delay)
        self.a = a
        self.b = b

    def sample_buffer(self, delay: int) -> Any:
        """Read the internal delay line at ``delay``."""
        return self._delay_line.read(delay)

    def tick(self, x: Any) -> Any:
        """Filter one sample."""
        z = self._delay_line.read(self.delay)
        x = x - self.b * z
        y = self.a * x + z
        self._delay_line.write(x)
        return y


class IIR:
    """Recursive filter of any order: ``y = sum(a[i] * y[n-1-i]) + b * x``."""

    def __init__(
        self, buffer: Iterable[Any], a: Sequence[Any] | None = None, b: Any = 0
    ) -> None:
        self._z = list(buffer)
        coefficients = [0] * len(self._z) if a is None else list(a)
        if len(coefficients) < 1:
            raise ValueError("filter order must be at least 1")
        if len(self._z) < len(coefficients):
            raise ValueError(
                f"buffer of length {len(self._z)} is too short "
                f"for order {len(coefficients)}"
            )
        self.a = tuple(coefficients)
        self.b = b

    @property
    def order(self) -> int:
        return len(self.a)

    def set_params(self, a: Sequence[Any], b: Any) -> None:
        """Set the feedback coefficients and the input gain."""
        coefficients = tuple(a)
        if len(coefficients) != self.order:
            raise ValueError(
                f"expected {self.order} coefficients, got {len(coefficients)}"
            )
        self.a = coefficients
        self.b = b

    def tick(self, x: Any) -> Any:
        """Filter one sample."""
        feedback = 0
        for past, coefficient in zip(self._z, self.a):
            feedback = feedback + past * coefficient
        y = feedback + x * self.b
        self._z = [y, *self._z[:-1]]
        return y