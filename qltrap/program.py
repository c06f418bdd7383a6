#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Hooks called by the trajectory host during an ESA transfer sweep

The host (an ion-optics simulator) owns the ion state and the integration;
for each run of the sweep it calls, per ion:

    initialize_run()                       once, before flight
    compute_static_potentials(model_id)    once, before flight
    compute_dynamic_potential(tof, dt)     many times per step
    compute_field(position)                many times per step
    post_step(tof)                         once per step

and on_run_complete() when all ions of a run have stopped.
Flight times are in microseconds, positions in millimetres.
"""

from abc import ABC, abstractmethod

from .constants import us
from .conversion import TrapGeometry
from .field import FieldGate, FieldRegion
from .runlog import RunLog
from .settings import Settings
from .sweep import SweepController, SweepSpace, log_progress
from .waveform import ExcitationWindow, WaveformEvaluator

import logging
logger = logging.getLogger(__name__)

EXCITED_COLOR = 2


class TrajectoryHost(ABC):

    @abstractmethod
    def fly(self, program: 'TransferProgram'):
        """Fly all ions of one run, calling the program hooks"""
        raise NotImplementedError


class StepAction:
    """What the host should do with the ion after a time step

    Attributes:
        color (int or None): new ion color, None to leave it unchanged
        terminate (bool): stop the ion
    """
    __slots__ = ('color', 'terminate')

    def __init__(self, color=None, terminate=False):
        self.color = color
        self.terminate = terminate

    def __eq__(self, other):
        return isinstance(other, StepAction) and (self.color, self.terminate) == (other.color, other.terminate)

    def __repr__(self):
        return f"StepAction(color={self.color}, terminate={self.terminate})"


class TransferProgram:

    external_electrodes = (2, 3)
    internal_electrode = 1

    def __init__(self, settings: Settings = None, progress=log_progress):
        self.settings = Settings() if settings is None else settings
        s = self.settings
        self.models = dict(s.models)
        self.geometry = TrapGeometry.create(s.geometry)

        run_log = RunLog(s.log_path) if s.log_path is not None else None
        self.controller = SweepController(SweepSpace.from_settings(s), esa_voltage=s.esa_voltage,
                                          models=self.models, run_log=run_log,
                                          header=s.to_dict(), progress=progress)

        window = ExcitationWindow(s.excite_start / us, s.excite_duration / us, s.target_mass, s.ac_voltage)
        self.waveform = WaveformEvaluator.switch_on(s.t_on, s.internal_voltage, window,
                                                    external_voltage=s.external_voltage,
                                                    geometry=self.geometry, excite=s.excite)
        self.field_gate = FieldGate(FieldRegion.from_widths(s.field_center, s.field_width, s.b_mT, enabled=s.mag))
        self.ions_initialized = 0
        self.retain_potentials = False

    @property
    def context(self):
        return self.controller.context

    def run(self, host: TrajectoryHost):
        """Run the whole sweep on host; returns the number of runs"""
        def fly_ions():
            host.fly(self)

        return self.controller.run_sweep(fly_ions)

    def initialize_run(self):
        self.ions_initialized += 1

    def compute_static_potentials(self, model_id):
        return self.controller.static_potentials(model_id)

    def _is_trap(self, model_id):
        return model_id is None or model_id == self.models['trap'] or model_id == 'trap'

    def compute_dynamic_potential(self, tof, time_step, model_id=None):
        """Internal electrode voltage, ramp sampled at the middle of the step

        Returns None for models other than the trap.
        """
        if not self._is_trap(model_id):
            return None
        return self.waveform.voltage_at(tof + 0.5 * time_step, excitation_time=tof)

    def dynamic_potentials(self, tof, time_step, model_id=None):
        """Internal and external trap electrode voltages as {electrode: voltage}"""
        v = self.compute_dynamic_potential(tof, time_step, model_id)
        if v is None:
            return {}
        voltages = {self.internal_electrode: v}
        voltages.update({e: self.settings.external_voltage for e in self.external_electrodes})
        return voltages

    def compute_field(self, position):
        """Magnetic field [G] at position [mm], None if the field is off"""
        return self.field_gate.field_at(position)

    def post_step(self, tof):
        s = self.settings
        action = StepAction()
        if s.excite and tof > s.excite_start / us:
            action.color = EXCITED_COLOR
        if tof > s.max_time:
            action.terminate = True
        return action

    def on_run_complete(self):
        """Ask the host to keep the potentials changed by the static hook"""
        self.retain_potentials = True
        return True
