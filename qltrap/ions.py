#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Ion species: mass in atomic mass units, charge in units of e
"""

from scipy.constants import atomic_mass, elementary_charge


class Ion:
    def __init__(self, name, mass_amu, unit_charge=1):
        self.mass_amu = mass_amu
        self.mass = mass_amu * atomic_mass
        self.unit_charge = unit_charge
        self.charge = unit_charge * elementary_charge
        self.__name = name

    @classmethod
    def from_mass(cls, mass_amu, unit_charge=1):
        """Anonymous ion of given mass, named after it (e.g. 'm100+')"""
        sign = '+' * unit_charge if unit_charge > 0 else '-' * abs(unit_charge)
        return cls(f"m{mass_amu:g}{sign}", mass_amu, unit_charge)

    def __repr__(self):
        return self.__name


# Calibrant for orbital trapping
Cs133 = Ion("Cs133", mass_amu=132.905452, unit_charge=1)
