#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

import pytest
from qltrap.settings import Settings
from qltrap.program import TransferProgram, TrajectoryHost


class RecordingHost(TrajectoryHost):
    """Flies ions_per_run ions through a fixed list of steps, recording the hooks' output"""

    def __init__(self, ions_per_run=2, steps=((0., 0.1), (42.5, 0.1), (60., 0.1), (2e5, 0.1))):
        self.ions_per_run = ions_per_run
        self.steps = steps
        self.static = []
        self.dynamic = []
        self.actions = []
        self.contexts = []
        self.retained = []

    def fly(self, program):
        self.contexts.append(program.context)
        for _ in range(self.ions_per_run):
            program.initialize_run()
            self.static.append({name: program.compute_static_potentials(name)
                                for name in program.models.values()})
            for tof, dt in self.steps:
                self.dynamic.append(program.compute_dynamic_potential(tof, dt))
                program.compute_field((380, 1.9, 0))
                action = program.post_step(tof)
                self.actions.append(action)
                if action.terminate:
                    break
        self.retained.append(program.on_run_complete())


@pytest.fixture
def settings() -> Settings:
    return Settings(n_float=2, float_step=-10, n_lens=3, lens_step=5, n_injection=2, injection_step=-20)


@pytest.fixture
def program(settings) -> TransferProgram:
    return TransferProgram(settings)


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()
