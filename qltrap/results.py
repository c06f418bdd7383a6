#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers


import numpy as np
from tabulate import tabulate
from colorama import init as colorama_init, Fore

from .constants import kHz

colorama_init(autoreset=True)


def _color_str(color, str):
    return f"{color}{str:s}{Fore.RESET}"


class Results:
    def __init__(self):
        self._printoptions = dict()
        self.set_printoptions()

    def set_printoptions(self, precision=5, format_char='g'):
        _locals = locals().copy()
        _locals.pop('self')
        self._printoptions.update(_locals)

    @staticmethod
    def _to_json_filter(value):
        if isinstance(value, np.ndarray):
            return value.tolist()
        if isinstance(value, np.generic):
            return value.item()
        elif isinstance(value, Results):
            return value.to_json()
        elif hasattr(value, '__dict__'):
            return repr(value)
        else:
            return value

    def to_json(self):
        _json = {key: self._to_json_filter(value) for key, value in self.__dict__.items()
                 if not key.startswith('_')}
        _json['repr'] = str(self)
        return _json


class ConversionResults(Results):
    """ Mass to frequency conversion results

    Attributes:
        mass (float or array, shape (N,)): ion masses [u]
        freq (float or array, shape (N,)): axial frequencies [Hz]
        voltage (float): internal electrode voltage [V]
        energy (float): ion kinetic energy [eV]
        curvature (float): axial field curvature [V/m^2]
        geometry (TrapGeometry): trap radii used
        orbital_radius (float): orbital radius [m]
        charge (int): ion charge [e]
    """

    def __init__(self, mass, freq, voltage, energy, curvature, geometry, orbital_radius, charge=1):
        super().__init__()
        self.mass = mass
        self.freq = freq
        self.voltage = voltage
        self.energy = energy
        self.curvature = curvature
        self.geometry = geometry
        self.orbital_radius = orbital_radius
        self.charge = charge

    def __iter__(self):
        # unpacks like (freq, voltage, energy, curvature)
        return iter((self.freq, self.voltage, self.energy, self.curvature))

    def __repr__(self):
        floatfmt = f".{self._printoptions['precision']}{self._printoptions['format_char']}"
        masses = np.atleast_1d(self.mass)
        freqs = np.atleast_1d(self.freq)
        table = tabulate(np.stack([masses, freqs / kHz], axis=1),
                         headers=['Mass [u]', 'Freq [kHz]'], floatfmt=floatfmt)
        lines = [
            _color_str(Fore.YELLOW, f"--------------\nQLT conversion, {self.geometry}, Ro = {self.orbital_radius:g} m"),
            f"Vint = {self.voltage:{floatfmt}} V, KE = {self.energy:{floatfmt}} eV, "
            f"k = {self.curvature:{floatfmt}} V/m^2, q = {self.charge}",
            table,
            "",
        ]
        return '\n'.join(lines)
