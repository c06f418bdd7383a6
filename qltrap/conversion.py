#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Closed-form relations between ion mass, axial oscillation frequency,
internal electrode voltage and kinetic energy in a quadro-logarithmic trap

The trap potential along the axis is harmonic with curvature

    k = 2 * Vint / (Rm^2 * ln(R2 / R1) - (R2^2 - R1^2) / 2)

where R1, R2 are the internal and external electrode radii and Rm the
characteristic radius. Ions on a circular orbit of radius Ro carry a kinetic
energy fixed by the same geometry, so either the voltage or the energy
determines the other.
"""

import numpy as np

from .constants import atomic_mass, elementary_charge
from .constants import R1, R2, Rm, Ro
from .exceptions import InvalidInputError
from .ions import Ion
from .results import ConversionResults
from .typing import Masses

import logging
logger = logging.getLogger(__name__)


class TrapGeometry:
    """Electrode radii of a quadro-logarithmic trap

    Parameters
        r1: internal electrode radius [m]
        r2: external electrode radius [m]
        rm: characteristic radius [m]
    """

    def __init__(self, r1=R1, r2=R2, rm=Rm):
        radii = np.asarray([r1, r2, rm], dtype=float)
        if radii.shape != (3,) or not np.all(radii > 0):
            raise InvalidInputError(f"Trap radii must be three positive numbers, got {radii}")
        self.r1, self.r2, self.rm = radii

    @classmethod
    def create(cls, geometry=None):
        """Accept None (standard geometry), a TrapGeometry or a sequence (R1, R2, Rm)"""
        if geometry is None:
            return cls()
        if isinstance(geometry, TrapGeometry):
            return geometry
        try:
            r1, r2, rm = geometry
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"geometry must be (R1, R2, Rm), got {geometry!r}") from e
        return cls(r1, r2, rm)

    @property
    def log_term(self):
        """Rm^2 ln(R2/R1) - (R2^2 - R1^2)/2 [m^2]"""
        return self.rm**2 * np.log(self.r2 / self.r1) - 0.5 * (self.r2**2 - self.r1**2)

    def check_orbit(self, orbital_radius):
        """Warn if the radii are not ordered as R1 < Ro < R2 < Rm

        The conversion formulas do not need the ordering, so this never raises.
        """
        ordered = self.r1 < orbital_radius < self.r2 < self.rm
        if not ordered:
            logger.warning(f"Unusual trap geometry: R1={self.r1:g}, Ro={orbital_radius:g}, "
                           f"R2={self.r2:g}, Rm={self.rm:g} [m] are not in increasing order")
        return ordered

    def __repr__(self):
        return f"TrapGeometry(r1={self.r1:g}, r2={self.r2:g}, rm={self.rm:g})"


def curv_to_freq(curv, mass=None, charge=None, ion: Ion = None):
    """
    Axial frequency for the given curvature and ion

    Parameters
        curv: potential curvature [V/m^2]
        mass: mass of the ion [kg]
        charge: charge of the ion [C]
        ion (optional): ion species class specifying mass and charge

    Returns
        freq: axial frequency [Hz], negative for an anti-confining curvature
    """
    if ion is not None:
        mass = ion.mass
        charge = ion.charge
    C = (2 * np.pi) ** 2 * mass / charge
    return np.sign(curv) * np.sqrt(np.abs(curv) / C)


def freq_to_curv(freq, mass=None, charge=None, ion: Ion = None):
    """
    Curvature corresponding to the given axial frequency and ion

    Parameters
        freq: axial frequency [Hz]
        mass: mass of the ion [kg]
        charge: charge of the ion [C]
        ion (optional): ion species class specifying mass and charge

    Returns
        curv: potential curvature [V/m^2]
    """
    if ion is not None:
        mass = ion.mass
        charge = ion.charge
    C = (2 * np.pi) ** 2 * mass / charge
    return C * np.sign(freq) * freq**2


def field_curvature(voltage, geometry=None):
    """Axial field curvature [V/m^2] for an internal electrode voltage [V]"""
    geometry = TrapGeometry.create(geometry)
    return 2 * voltage / geometry.log_term


def voltage_to_energy(voltage, geometry=None, orbital_radius=Ro):
    """Kinetic energy [eV] of a singly charged ion orbiting at orbital_radius"""
    geometry = TrapGeometry.create(geometry)
    return 0.25 * (geometry.rm**2 - orbital_radius**2) * (2 * voltage) / geometry.log_term


def energy_to_voltage(energy, geometry=None, orbital_radius=Ro):
    """Internal electrode voltage [V] trapping ions of the given kinetic energy [eV]"""
    geometry = TrapGeometry.create(geometry)
    return 0.5 * geometry.log_term * 4 * energy / (geometry.rm**2 - orbital_radius**2)


def _resolve_drive(energy, voltage, geometry, orbital_radius):
    if energy is not None and voltage is not None:
        raise InvalidInputError("Only one of energy or voltage can be an input.")
    if voltage is not None:
        return voltage, voltage_to_energy(voltage, geometry, orbital_radius)
    if energy is not None:
        return energy_to_voltage(energy, geometry, orbital_radius), energy
    raise InvalidInputError("One, and only one, of energy or voltage must be an input.")


def _as_masses(mass):
    m = np.asarray(mass, dtype=float)
    if m.ndim > 1:
        raise InvalidInputError(f"mass must be a scalar or a 1d sequence, got shape {m.shape}")
    if not np.all(m > 0):
        raise InvalidInputError(f"mass must be positive, got {mass}")
    return m


def mass_to_freq(mass: Masses, geometry=None, orbital_radius=None, energy=None, voltage=None,
                 charge=1) -> ConversionResults:
    """
    Axial oscillation frequency of ions of the given mass(es)

    Exactly one of energy and voltage must be given; the other one is derived
    from the trap geometry and the orbital radius.

    Parameters
        mass: ion mass, scalar or 1d sequence [u]
        geometry: (R1, R2, Rm) [m] or TrapGeometry, default (6, 15, 22) mm
        orbital_radius: Ro [m], default 9 mm
        energy: ion kinetic energy [eV]
        voltage: internal electrode voltage [V]
        charge: ion charge [e]

    Returns
        ConversionResults with freq [Hz] (same shape as mass), voltage [V],
        energy [eV] and curvature [V/m^2]

    Raises
        InvalidInputError: both or neither of energy and voltage given,
            non-positive mass or radii
    """
    geometry = TrapGeometry.create(geometry)
    orbital_radius = Ro if orbital_radius is None else orbital_radius
    geometry.check_orbit(orbital_radius)

    voltage, energy = _resolve_drive(energy, voltage, geometry, orbital_radius)
    m = _as_masses(mass)
    curvature = field_curvature(voltage, geometry)
    freq = curv_to_freq(curvature, m * atomic_mass, charge * elementary_charge)
    if freq.ndim == 0:
        freq = float(freq)
    return ConversionResults(mass=mass, freq=freq, voltage=voltage, energy=energy,
                             curvature=curvature, geometry=geometry,
                             orbital_radius=orbital_radius, charge=charge)


def freq_to_mass(freq, geometry=None, orbital_radius=None, energy=None, voltage=None, charge=1):
    """
    Inverse of mass_to_freq: ion mass [u] oscillating at freq [Hz]

    Takes the same keyword arguments as mass_to_freq, with the same
    exactly-one-of contract on energy and voltage.
    """
    geometry = TrapGeometry.create(geometry)
    orbital_radius = Ro if orbital_radius is None else orbital_radius
    voltage, _ = _resolve_drive(energy, voltage, geometry, orbital_radius)
    f = np.asarray(freq, dtype=float)
    if not np.all(f > 0):
        raise InvalidInputError(f"freq must be positive, got {freq}")
    curvature = field_curvature(voltage, geometry)
    # curvature scales linearly with mass at fixed frequency
    mass = curvature / freq_to_curv(f, mass=atomic_mass, charge=charge * elementary_charge)
    return float(mass) if mass.ndim == 0 else mass
