#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Time-dependent voltage of the internal trap electrode

A WaveformTable holds (time, voltage) breakpoints, the last one at t = inf.
The WaveformEvaluator interpolates linearly between breakpoints and, inside
the excitation window, replaces the ramp with a parametric excitation
oscillating at twice the axial frequency of the target mass.
All times are flight times in microseconds; every evaluation accepts a scalar
or an array of times.
"""

from typing import Sequence

import numpy as np

from .constants import us
from .conversion import field_curvature
from .exceptions import ConfigurationError
from .ions import Ion
from .typing import Breakpoint

import logging
logger = logging.getLogger(__name__)


def _scalar_or_array(x):
    x = np.asarray(x)
    return x.item() if x.ndim == 0 else x


class WaveformTable:
    """Ordered breakpoints of a piecewise-linear waveform

    Parameters
        breakpoints: sequence of (time [us], voltage [V]), times strictly
            increasing, last time +inf
    """

    def __init__(self, breakpoints: Sequence[Breakpoint]):
        try:
            bp = np.asarray([(float(t), float(v)) for t, v in breakpoints], dtype=float)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Breakpoints must be (time, voltage) pairs: {e}") from e
        if len(bp) < 2:
            raise ConfigurationError(f"A waveform needs at least two breakpoints, got {len(bp)}")
        times, voltages = bp.T
        if not np.all(np.diff(times) > 0):
            raise ConfigurationError(f"Breakpoint times must be strictly increasing: {times}")
        if times[-1] != np.inf:
            raise ConfigurationError(f"The last breakpoint must be at t = inf, got {times[-1]}")
        if not np.all(np.isfinite(voltages)):
            raise ConfigurationError(f"Breakpoint voltages must be finite: {voltages}")
        self.times = times
        self.voltages = voltages

    @classmethod
    def switch_on(cls, t_on, v_target):
        """Internal electrode ramp: 0 V until t_on, then to 80% of v_target
        in 1.2 us and to v_target at t_on + 3 us"""
        return cls([
            (0, 0),
            (t_on, 0),
            (t_on + 1.2, 0.8 * v_target),
            (t_on + 3, v_target),
            (np.inf, v_target),
        ])

    @property
    def asymptote(self):
        return float(self.voltages[-1])

    def __len__(self):
        return len(self.times)

    def __iter__(self):
        return zip(self.times.tolist(), self.voltages.tolist())

    def segment(self, t):
        """Index n of the first breakpoint later than t; the segment is (n-1, n)"""
        t = np.asarray(t, dtype=float)
        if not np.all(np.isfinite(t)):
            raise ValueError(f"Flight time must be finite, got {t}")
        n = np.searchsorted(self.times, t, side='right')
        if np.any(n == 0):
            raise ValueError(f"t = {t} is before the first breakpoint at {self.times[0]}")
        return n

    def interpolate(self, t):
        # np.interp holds the last finite voltage, i.e. the start of the infinite segment
        self.segment(t)
        return _scalar_or_array(np.interp(t, self.times[:-1], self.voltages[:-1]))


class ExcitationWindow:
    """
    Parameters
        start: excitation start [us]
        duration: excitation duration [us]
        target_mass: mass to be excited [u]
        amplitude: AC amplitude [V]
    """

    def __init__(self, start, duration, target_mass, amplitude):
        if duration < 0:
            raise ConfigurationError(f"Excitation duration must be non-negative, got {duration}")
        if target_mass <= 0:
            raise ConfigurationError(f"Target mass must be positive, got {target_mass}")
        self.start = start
        self.duration = duration
        self.target_mass = target_mass
        self.amplitude = amplitude

    @property
    def end(self):
        return self.start + self.duration

    def contains(self, t):
        t = np.asarray(t, dtype=float)
        return (self.start <= t) & (t <= self.end)


class ParametricExcitation:
    """Sinusoid at twice the axial angular frequency of the target mass,
    centred on the target internal voltage

    The curvature uses the voltage difference between the internal and
    external electrodes.
    """

    def __init__(self, window: ExcitationWindow, target_voltage, external_voltage=0.,
                 geometry=None, unit_charge=1, enabled=True):
        self.window = window
        self.target_voltage = target_voltage
        self.enabled = enabled
        self.ion = Ion.from_mass(window.target_mass, unit_charge)
        self.curvature = field_curvature(abs(target_voltage - external_voltage), geometry)
        self.omega = 2 * np.sqrt(self.curvature * self.ion.charge / self.ion.mass)
        logger.debug(f"Parametric excitation of {self.ion} at {self.omega / 2 / np.pi:.6g} Hz")

    def active(self, t):
        return np.logical_and(self.enabled, self.window.contains(t))

    def voltage(self, t):
        return self.window.amplitude * np.sin(self.omega * np.asarray(t) * us) + self.target_voltage


class WaveformEvaluator:

    def __init__(self, table: WaveformTable, excitation: ParametricExcitation = None):
        self.table = table
        self.excitation = excitation

    @classmethod
    def switch_on(cls, t_on, v_target, excitation_window=None, external_voltage=0.,
                  geometry=None, excite=True):
        table = WaveformTable.switch_on(t_on, v_target)
        excitation = None
        if excitation_window is not None:
            excitation = ParametricExcitation(excitation_window, table.asymptote, external_voltage,
                                              geometry, enabled=excite)
        return cls(table, excitation)

    def ramp_at(self, t):
        return self.table.interpolate(t)

    def voltage_at(self, t, excitation_time=None):
        """Electrode voltage at flight time t [us], scalar or array

        Inside the excitation window the excitation replaces the ramp.
        excitation_time, if given, is used instead of t for the window test
        and the sinusoid phase.
        """
        ramp = self.table.interpolate(t)
        if self.excitation is None:
            return ramp
        te = t if excitation_time is None else excitation_time
        v = np.where(self.excitation.active(te), self.excitation.voltage(te), ramp)
        return _scalar_or_array(v)
