#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Unit definitions and default trap geometry, all in SI
"""

from scipy.constants import atomic_mass, elementary_charge  # noqa

mm = 1e-3
us = 1e-6
kHz = 1e3

# host magnetic field units are gauss: 1 mT = 10 G
gauss_per_mT = 10

# quadro-logarithmic trap, standard geometry
R1 = 6 * mm  # internal electrode radius
R2 = 15 * mm  # external electrode radius
Rm = 22 * mm  # characteristic radius
Ro = 9 * mm  # orbital radius
