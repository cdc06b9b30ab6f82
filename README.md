# oxideplate

A plate reverb in pure Python, with no dependencies. It is built from a
circular delay line, Schroeder all-pass diffusers and one-pole IIR damping
filters, wired into a figure-of-eight tank.

## Installation

```
pip install .
```

## Building blocks

`oxideplate.delay.Delay` is a fixed-length circular buffer. `read(1)` returns
the latest value written; longer delays wrap around the buffer. `resize`
returns a new delay line that keeps the most recent values, and `clear`
resets every slot to zero. A delay below 1 raises `ValueError`, as does an
empty buffer.

`oxideplate.filters` holds `APF`, a Schroeder all-pass filter, and `IIR`, a
recursive filter whose order is the number of feedback coefficients.

```python
from oxideplate.delay import Delay
from oxideplate.filters import APF, IIR

delay = Delay([0.0] * 3)
delay.write(1.0)
delay.write(2.0)
delay.read(1)   # 2.0, the latest sample
delay.read(2)   # 1.0

iir = IIR([0.0], [0.5], 1.0)
iir.tick(1.0)   # 1.0
iir.tick(1.0)   # 1.5

apf = APF([0, 0], 1, 2, 2)
apf.tick(1)     # 2
apf.tick(1)     # -1
```

## The plate

`oxideplate.plate.Plate` takes a frame of input samples, one per channel,
averages them and returns a stereo pair. Its settings are a frozen
`PlateParams` dataclass (predelay, bandwidth, input and decay diffusion,
decay modulation, damping and decay). `Plate(excursion)` sets how much room
the first decay diffusers keep for `decay_modulation`; it defaults to 16.

```python
from oxideplate.plate import Plate, PlateParams

plate = Plate()
plate.set_params(PlateParams(decay=0.7))
left, right = plate.process_2ch([1.0, 1.0])
```

`process` runs one frame through the tank without producing output;
`process_2ch` does the same and returns `(left, right)`.

## The effect

`oxideplate.plugin.PlatePlugin` adds a dry/wet mix on top of the plate. Its
`PlatePluginParams` clamp every value to its range (for example `predelay`
to 1..4095, `wet` to 0..1, `decay_mod` to -15..15). `process_buffer` takes a
block of one or two channels, each a list of samples of equal length, and
returns a new list of mixed channels; the input is left untouched.

```python
from oxideplate.plugin import PlatePlugin, PlatePluginParams

plugin = PlatePlugin(PlatePluginParams(wet=0.3))
buffer = [[1.0] * 1024, [1.0] * 1024]
output = plugin.process_buffer(buffer)
```

Parameters are applied once at the start of each block; there is no
per-sample smoothing.

## What it does not do

The package is a library only. It does not load into an audio host, read or
write audio files, or talk to a sound device; feed it sample lists and take
the results.

## Running the tests

```
pip install .[test]
pytest
```