#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Nested sweep over float, lens and injection voltages

Runs are visited with the float voltage outermost and the injection voltage
innermost; the run log relies on this order. Before each ion flies, the
controller sets the static electrode potentials of the ESA and transfer
optics for the active run, skipping electrodes that already hold the
requested voltage.
"""

import itertools

from .exceptions import ConfigurationError
from .timer import timer
from .typing import ElectrodeVoltages

import logging
logger = logging.getLogger(__name__)


class SweepAxis:
    """Voltages start + step * (k - 1) for k = 1 .. count"""

    def __init__(self, name, start, step=0., count=1):
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ConfigurationError(f"Sweep axis {name} needs an integer count >= 1, got {count!r}")
        self.name = name
        self.start = start
        self.step = step
        self.count = count

    def value(self, k):
        if not 1 <= k <= self.count:
            raise IndexError(f"Index {k} out of range 1..{self.count} for axis {self.name}")
        return self.start + self.step * (k - 1)

    def values(self):
        return [self.value(k) for k in range(1, self.count + 1)]

    def __len__(self):
        return self.count

    def __repr__(self):
        return f"SweepAxis({self.name!r}, start={self.start}, step={self.step}, count={self.count})"


class RunContext:
    """Voltages of one run of the sweep

    Attributes:
        index (tuple): 1-based (k_float, k_lens, k_injection)
        run (int): 1-based run number
        float_voltage, lens_voltage, injection_voltage (float): [V]
    """
    __slots__ = ('index', 'run', 'float_voltage', 'lens_voltage', 'injection_voltage')

    def __init__(self, index, run, float_voltage, lens_voltage, injection_voltage):
        self.index = index
        self.run = run
        self.float_voltage = float_voltage
        self.lens_voltage = lens_voltage
        self.injection_voltage = injection_voltage

    @property
    def voltages(self):
        return self.float_voltage, self.lens_voltage, self.injection_voltage

    def __repr__(self):
        return (f"RunContext(run={self.run}, index={self.index}, float={self.float_voltage}, "
                f"lens={self.lens_voltage}, injection={self.injection_voltage})")


class SweepSpace:

    def __init__(self, float_axis: SweepAxis, lens_axis: SweepAxis, injection_axis: SweepAxis):
        self.axes = (float_axis, lens_axis, injection_axis)

    @classmethod
    def from_settings(cls, settings):
        return cls(
            SweepAxis('float', settings.float_voltage, settings.float_step, settings.n_float),
            SweepAxis('lens', settings.lens_voltage, settings.lens_step, settings.n_lens),
            SweepAxis('injection', settings.injection_voltage, settings.injection_step, settings.n_injection),
        )

    @property
    def shape(self):
        return tuple(axis.count for axis in self.axes)

    @property
    def total(self):
        n_float, n_lens, n_injection = self.shape
        return n_float * n_lens * n_injection

    def __len__(self):
        return self.total

    def __iter__(self):
        ranges = [range(1, axis.count + 1) for axis in self.axes]
        # product varies the last axis fastest
        for run, index in enumerate(itertools.product(*ranges), start=1):
            voltages = [axis.value(k) for axis, k in zip(self.axes, index)]
            yield RunContext(index, run, *voltages)


def log_progress(count, total):
    logger.info(f"Run {count}/{total} ({count / total:.0%})")


class ElectrodeCache:
    """Voltages currently held by the electrodes of each model"""

    def __init__(self):
        self._held = {}

    def held(self, model, electrode):
        return self._held.get((model, electrode))

    def write(self, model, voltages: ElectrodeVoltages) -> ElectrodeVoltages:
        """Store voltages, returning only those that changed"""
        changed = {}
        for electrode, v in voltages.items():
            if self._held.get((model, electrode)) != v:
                self._held[(model, electrode)] = v
                changed[electrode] = v
        return changed

    def reset(self):
        self._held.clear()


class SweepController:
    """
    Parameters
        space: the voltages to sweep
        esa_voltage: ESA float voltage [V]
        models: mapping of role ('esa', 'transfer') to the model identifier
            passed by the host to static_potentials
        run_log: RunLog or None
        header: settings snapshot written at the top of the run log
        progress: callable(count, total), called after every run
    """

    esa_electrodes = (1, 2, 3)
    lens_electrode = 2
    float_electrodes = (1, 3, 4, 5, 6, 7, 8, 9, 10)
    injection_electrodes = (8, 9, 10)

    def __init__(self, space: SweepSpace, esa_voltage=0., models=None, run_log=None,
                 header=None, progress=log_progress):
        self.space = space
        self.esa_voltage = esa_voltage
        models = models or {}
        self._roles = {name: role for role, name in models.items()}
        self.run_log = run_log
        self.header = header or {}
        self.progress = progress
        self.cache = ElectrodeCache()
        self.context = None
        self.count = 0

    def reset(self):
        self.cache.reset()
        self.context = None
        self.count = 0

    def run_sweep(self, run_fn):
        """Call run_fn once per run; returns the number of runs

        Run count, electrode cache and log header start afresh on every call.
        """
        self.reset()
        if self.run_log is not None:
            self.run_log.start_sweep()
        timed_run = timer(run_fn)
        total = self.space.total
        logger.info(f"Starting sweep of {total} runs {self.space.shape}")
        for context in self.space:
            self.context = context
            if self.run_log is not None:
                self.run_log.write_header(self.header, total)
            timed_run()
            logger.info(f"Float voltage = {context.float_voltage} V, Lens voltage = {context.lens_voltage} V, "
                        f"Injection voltage = {context.injection_voltage} V")
            if self.run_log is not None:
                self.run_log.write_run(context)
            self.count += 1
            self.progress(self.count, total)
        return self.count

    def role(self, model_id):
        return self._roles.get(model_id, model_id)

    def static_potentials(self, model_id) -> ElectrodeVoltages:
        """Electrode voltages to set on model_id before an ion flies

        Returns only the electrodes that are actually written.
        """
        role = self.role(model_id)
        if role == 'esa':
            return {e: self.esa_voltage for e in self.esa_electrodes}
        if role != 'transfer':
            return {}
        if self.context is None:
            raise RuntimeError("No active run: static potentials are only defined during a sweep")
        vf, v2, vi = self.context.voltages
        targets = {e: vf for e in self.float_electrodes}
        if vi != vf:
            targets.update({e: vi for e in self.injection_electrodes})
        written = {self.lens_electrode: v2}
        written.update(self.cache.write(role, targets))
        if len(written) == 1:
            logger.debug(f"Float electrodes already at {vf} V")
        return written
