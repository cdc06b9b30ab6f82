import math

import pytest

from oxideplate.plugin import (
    FloatRange,
    IntRange,
    PlatePlugin,
    PlatePluginParams,
)


def test_basic_stereo_block():
    plugin = PlatePlugin()
    samples = 2000
    out = plugin.process_buffer([[1.0] * samples, [1.0] * samples])
    assert len(out) == 2
    assert all(len(channel) == samples for channel in out)
    assert all(math.isfinite(v) for channel in out for v in channel)


def test_dry_part_before_predelay():
    plugin = PlatePlugin()
    out = plugin.process_buffer([[1.0] * 60, [1.0] * 60])
    assert out[0][:50] == [0.5] * 50
    assert out[1][:50] == [0.5] * 50


def test_zero_wet_passes_input_through():
    plugin = PlatePlugin(PlatePluginParams(wet=0.0))
    left = [math.sin(t / 10.0) for t in range(800)]
    right = [math.cos(t / 10.0) for t in range(800)]
    assert plugin.process_buffer([left, right]) == [left, right]


def test_full_wet_eventually_rings():
    plugin = PlatePlugin(PlatePluginParams(wet=1.0, predelay=1))
    out = plugin.process_buffer([[1.0] * 1000, [1.0] * 1000])
    assert out[0][0] == 0.0
    assert any(abs(v) > 1e-6 for v in out[0])
    assert any(abs(v) > 1e-6 for v in out[1])


def test_mono_block():
    plugin = PlatePlugin()
    out = plugin.process_buffer([[1.0] * 100])
    assert len(out) == 1
    assert out[0][:50] == [0.5] * 50


def test_state_carries_across_blocks():
    whole = PlatePlugin(PlatePluginParams(wet=1.0, predelay=1))
    split = PlatePlugin(PlatePluginParams(wet=1.0, predelay=1))
    signal = [1.0] * 800
    expected = whole.process_buffer([signal, signal])
    first = split.process_buffer([signal[:400], signal[:400]])
    second = split.process_buffer([signal[400:], signal[400:]])
    assert first[0] + second[0] == pytest.approx(expected[0])
    assert first[1] + second[1] == pytest.approx(expected[1])


def test_bad_channel_count_rejected():
    plugin = PlatePlugin()
    with pytest.raises(ValueError):
        plugin.process_buffer([[0.0], [0.0], [0.0]])
    with pytest.raises(ValueError):
        plugin.process_buffer([])


def test_mismatched_channels_rejected():
    plugin = PlatePlugin()
    with pytest.raises(ValueError):
        plugin.process_buffer([[0.0, 0.0], [0.0]])


def test_int_range_clamp():
    r = IntRange(1, 4095)
    assert r.clamp(0) == 1
    assert r.clamp(5000) == 4095
    assert r.clamp(50) == 50


def test_float_range_clamp():
    r = FloatRange(0.0001, 0.9999)
    assert r.clamp(0.0) == 0.0001
    assert r.clamp(2.0) == 0.9999
    assert r.clamp(0.5) == 0.5


def test_default_params():
    params = PlatePluginParams()
    assert params.predelay == 50
    assert params.bandwidth == 0.9995
    assert params.damping == 0.0005
    assert params.wet == 0.5
    assert params.decay_mod == 0


def test_params_are_clamped():
    params = PlatePluginParams(predelay=0, decay_mod=100, wet=3.0, decay=-1.0)
    assert params.predelay == 1
    assert params.decay_mod == 15
    assert params.wet == 1.0
    assert params.decay == 0.0001
    assert PlatePluginParams(decay_mod=-100).decay_mod == -15


def test_to_plate_params():
    plate = PlatePluginParams(predelay=120, decay=0.8, decay_mod=-3).to_plate_params()
    assert plate.predelay == 120
    assert plate.decay == 0.8
    assert plate.decay_modulation == -3
    assert plate.bandwidth == 0.9995
    assert plate.input_diffusion_1 == 0.750
    assert plate.input_diffusion_2 == 0.625
    assert plate.decay_diffusion_1 == 0.70
    assert plate.decay_diffusion_2 == 0.50
    assert plate.damping == 0.0005