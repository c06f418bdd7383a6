#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

import math

import numpy as np
import pytest

from qltrap.constants import atomic_mass, elementary_charge
from qltrap.conversion import TrapGeometry
from qltrap.exceptions import ConfigurationError
from qltrap.waveform import WaveformTable, WaveformEvaluator, ExcitationWindow, ParametricExcitation

t_on = 42
v_int = -330


@pytest.fixture
def table() -> WaveformTable:
    return WaveformTable.switch_on(t_on, v_int)


@pytest.fixture
def window() -> ExcitationWindow:
    return ExcitationWindow(start=50, duration=100, target_mass=100, amplitude=3)


def test_switch_on_breakpoints(table):
    assert list(table) == [(0, 0), (42, 0), (43.2, 0.8 * v_int), (45, v_int), (math.inf, v_int)]
    assert table.asymptote == v_int


@pytest.mark.parametrize('t, v', [(0, 0), (20, 0), (42, 0), (42.6, -132), (43.2, -264), (44.1, -297),
                                  (45, -330), (1e4, -330)])
def test_interpolation(table, t, v):
    assert table.interpolate(t) == pytest.approx(v)


def test_segment_at_breakpoint(table):
    # a breakpoint time selects the segment starting there
    assert table.segment(42) == 2
    assert table.segment(41.999) == 1
    assert table.segment(45) == 4


def test_continuity(table):
    eps = 1e-9
    for t in table.times[1:-1]:
        assert table.interpolate(t - eps) == pytest.approx(table.interpolate(t), abs=1e-6)
        assert table.interpolate(t + eps) == pytest.approx(table.interpolate(t), abs=1e-6)


def test_monotone_within_segments(table):
    for t1, t2 in zip(table.times[:-2], table.times[1:-1]):
        v1, v2 = table.interpolate(t1), table.interpolate(t2)
        for t in np.linspace(t1, t2, 11):
            v = table.interpolate(t)
            assert min(v1, v2) - 1e-12 <= v <= max(v1, v2) + 1e-12


def test_array_evaluation(table, window):
    t = np.array([0, 20, 42, 42.6, 43.2, 44.1, 45, 1e4])
    np.testing.assert_array_equal(table.segment(t), [1, 1, 2, 2, 3, 3, 4, 4])
    np.testing.assert_allclose(table.interpolate(t), [0, 0, 0, -132, -264, -297, -330, -330])

    evaluator = WaveformEvaluator.switch_on(t_on, v_int, window)
    t = np.linspace(0, 200, 2001)
    v = evaluator.voltage_at(t)
    assert v.shape == t.shape
    np.testing.assert_allclose(v, [evaluator.voltage_at(_t) for _t in t])
    inside = (t >= 50) & (t <= 150)
    np.testing.assert_allclose(v[inside], evaluator.excitation.voltage(t[inside]))
    np.testing.assert_allclose(v[~inside], table.interpolate(t[~inside]))


def test_array_before_first_breakpoint(table):
    with pytest.raises(ValueError):
        table.interpolate(np.array([10, -1, 20]))


def test_time_before_first_breakpoint(table):
    with pytest.raises(ValueError):
        table.interpolate(-1)
    with pytest.raises(ValueError):
        table.interpolate(math.inf)


@pytest.mark.parametrize('breakpoints', [
    [(math.inf, 0)],
    [(0, 0), (10, 1)],
    [(0, 0), (10, 1), (5, 2), (math.inf, 2)],
    [(0, 0), (0, 1), (math.inf, 1)],
    [(0, 'a'), (math.inf, 1)],
    [(0, math.nan), (math.inf, 1)],
])
def test_malformed_tables(breakpoints):
    with pytest.raises(ConfigurationError):
        WaveformTable(breakpoints)


def test_switch_on_at_zero_is_rejected():
    with pytest.raises(ConfigurationError):
        WaveformTable.switch_on(0, v_int)


def test_excitation_frequency(table, window):
    exc = ParametricExcitation(window, v_int, external_voltage=0)
    g = TrapGeometry()
    k = 2 * abs(v_int) / (g.rm**2 * np.log(g.r2 / g.r1) - 0.5 * (g.r2**2 - g.r1**2))
    omega = 2 * np.sqrt(k * elementary_charge / (100 * atomic_mass))
    assert exc.omega == pytest.approx(omega)
    assert exc.curvature == pytest.approx(k)


def test_excitation_override(table, window):
    exc = ParametricExcitation(window, v_int, external_voltage=0)
    evaluator = WaveformEvaluator(table, exc)
    for t in [0, 43, 49.9, 150.1, 1e4]:
        assert evaluator.voltage_at(t) == table.interpolate(t)
    for t in [50, 60, 123.4, 150]:
        expected = 3 * math.sin(exc.omega * t * 1e-6) + v_int
        assert evaluator.voltage_at(t) == pytest.approx(expected)


def test_excitation_disabled(table, window):
    exc = ParametricExcitation(window, v_int, enabled=False)
    evaluator = WaveformEvaluator(table, exc)
    assert evaluator.voltage_at(60) == v_int


def test_excitation_time(table, window):
    evaluator = WaveformEvaluator.switch_on(t_on, v_int, window)
    # ramp sampled at t, window tested at excitation_time
    assert evaluator.voltage_at(49.95, excitation_time=49.9) == v_int
    assert evaluator.voltage_at(50.05, excitation_time=50.) == pytest.approx(
        evaluator.excitation.voltage(50.))


def test_invalid_window():
    with pytest.raises(ConfigurationError):
        ExcitationWindow(50, -1, 100, 3)
    with pytest.raises(ConfigurationError):
        ExcitationWindow(50, 10, 0, 3)
