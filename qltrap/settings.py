#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Sweep configuration

Defaults reproduce the ESA transfer workbench: voltages in V, flight times in
us, excitation times in s, field region in mm, field in mT.
Settings can be overridden by keyword or loaded from a YAML file.
"""

import copy
from pathlib import Path

import yaml

from .exceptions import ConfigurationError

import logging
logger = logging.getLogger(__name__)

default_settings = {
    # static voltages [V]
    'esa_voltage': -100,  # ESA float voltage
    'float_voltage': -100,  # first float voltage of the sweep
    'lens_voltage': -35,  # first einzel lens voltage
    'injection_voltage': -100,  # first injection pipe voltage
    'external_voltage': 0,  # QLT external electrodes
    'internal_voltage': -330,  # final QLT internal electrode voltage

    # sweep axes
    'n_float': 1,
    'n_lens': 1,
    'n_injection': 1,
    'float_step': 0,
    'lens_step': 0,
    'injection_step': 0,

    # timing [us]
    'max_time': 1e5,  # ions are stopped after this flight time
    't_on': 42,  # internal electrode switch on

    # parametric excitation
    'excite': False,
    'ac_voltage': 3,  # [V]
    'target_mass': 100,  # [u]
    'excite_start': 50e-6,  # [s]
    'excite_duration': 100e-3,  # [s]

    # magnetic field
    'mag': False,
    'b_mT': [0, 0, 0],  # (Bx, By, Bz) [mT]
    'field_center': [380, 1.9, 0],  # [mm]
    'field_width': [50, 20, 20],  # full widths [mm]

    # trap radii (R1, R2, Rm) [m]
    'geometry': [6e-3, 15e-3, 22e-3],

    # potential array files handled by the program
    'models': {
        'esa': 'bigesa2_edit.pa0',
        'transfer': 'ESA_Transfer.pa0',
        'trap': 'QLT_2mmFillet_0.2mmGap_6mmZinj.pa0',
    },

    # append-only run log, None to disable
    'log_path': None,
}

_count_keys = ('n_float', 'n_lens', 'n_injection')
_vector_keys = ('b_mT', 'field_center', 'field_width', 'geometry')


class Settings:
    """Attribute access to a validated copy of default_settings

    Example:
        settings = Settings(n_float=5, float_step=-10)
        settings.total_runs  # 5
    """

    def __init__(self, **kwargs):
        self.__dict__['_data'] = copy.deepcopy(default_settings)
        self.update(**kwargs)

    def update(self, **kwargs):
        unknown = set(kwargs) - set(default_settings)
        if unknown:
            raise ConfigurationError(f"Unknown settings: {', '.join(sorted(unknown))}. "
                                     f"Available settings: {', '.join(default_settings)}")
        data = copy.deepcopy(self._data)
        models = kwargs.pop('models', None)
        if models is not None:
            data['models'].update(models)
        data.update(kwargs)
        self.validate(data)
        self.__dict__['_data'] = data
        return self

    def validate(self, data=None):
        """Raise ConfigurationError if data (default: the current settings) is invalid"""
        if data is None:
            data = self._data
        for key in _count_keys:
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{key} must be an integer >= 1, got {value!r}")
        for key in _vector_keys:
            value = data[key]
            if len(value) != 3:
                raise ConfigurationError(f"{key} must have three components, got {value!r}")
        if data['max_time'] <= 0:
            raise ConfigurationError(f"max_time must be positive, got {data['max_time']}")

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError as e:
            raise AttributeError(f"No setting {name}") from e

    def __setattr__(self, name, value):
        self.update(**{name: value})

    @property
    def total_runs(self):
        return self.n_float * self.n_lens * self.n_injection

    def to_dict(self):
        return copy.deepcopy(self._data)

    def __repr__(self):
        return f"Settings({self._data})"


def load_settings(path) -> Settings:
    """Read settings overrides from a YAML file"""
    path = Path(path)
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping of settings")
    logger.info(f"Loaded {len(data)} settings from {path}")
    return Settings(**data)
