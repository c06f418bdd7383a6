#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

import numpy as np
import matplotlib.pyplot as plt

from .waveform import WaveformEvaluator
from .results import ConversionResults
from .constants import kHz


def plot_waveform(evaluator: WaveformEvaluator, t, ax=None, **kwargs):
    """Internal electrode voltage against flight time t [us]"""
    if ax is None:
        fig, ax = plt.subplots()
    t = np.asarray(t, dtype=float)
    ax.plot(t, evaluator.voltage_at(t), **kwargs)
    times = evaluator.table.times
    times = times[np.isfinite(times) & (times >= t.min()) & (times <= t.max())]
    ax.plot(times, evaluator.ramp_at(times), 'o', color='k', ms=3)
    ax.set(xlabel='Flight time [us]', ylabel='Voltage [V]')
    return ax


def plot_frequencies(results: ConversionResults, ax=None, **kwargs):
    """Axial frequency against mass"""
    if ax is None:
        fig, ax = plt.subplots()
    mass = np.atleast_1d(results.mass)
    freq = np.atleast_1d(results.freq)
    ax.plot(mass, freq / kHz, **kwargs)
    ax.set(xlabel='Mass [u]', ylabel='Frequency [kHz]',
           title=f"Vint = {results.voltage:.4g} V, KE = {results.energy:.4g} eV")
    return ax
