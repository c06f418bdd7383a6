#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
qltrap
~~~~~~
"""
# flake8: noqa

from .conversion import TrapGeometry, mass_to_freq, freq_to_mass
from .exceptions import InvalidInputError, ConfigurationError
from .field import FieldGate, FieldRegion
from .program import TransferProgram, TrajectoryHost, StepAction
from .settings import Settings, load_settings
from .sweep import SweepAxis, SweepSpace, SweepController, RunContext
from .waveform import WaveformTable, WaveformEvaluator, ExcitationWindow, ParametricExcitation
import logging
logging.basicConfig(level=logging.INFO)
