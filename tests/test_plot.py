#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402

from qltrap.conversion import mass_to_freq  # noqa: E402
from qltrap.plotting import plot_waveform, plot_frequencies  # noqa: E402
from qltrap.waveform import WaveformEvaluator, ExcitationWindow  # noqa: E402


def test_plot_waveform():
    evaluator = WaveformEvaluator.switch_on(42, -330, ExcitationWindow(50, 10, 100, 3))
    t = np.linspace(0, 70, 701)
    ax = plot_waveform(evaluator, t)
    line = ax.lines[0]
    np.testing.assert_allclose(line.get_ydata()[-1], -330)
    assert len(ax.lines[1].get_xdata()) == 4
    plt.close('all')


def test_plot_frequencies():
    res = mass_to_freq(np.linspace(50, 500, 10), energy=101)
    fig, ax = plt.subplots()
    assert plot_frequencies(res, ax=ax) is ax
    np.testing.assert_allclose(ax.lines[0].get_ydata(), res.freq * 1e-3)
    plt.close(fig)
