#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Magnetic field applied inside an axis-aligned box of the flight path
"""

from typing import Optional

import numpy as np

from .constants import gauss_per_mT
from .exceptions import ConfigurationError
from .typing import Vec3

import logging
logger = logging.getLogger(__name__)


class FieldRegion:
    """
    Parameters
        center: box center (x, y, z) [mm]
        half_width: half-width of the box along (x, y, z) [mm]
        field: field vector (Bx, By, Bz) [mT]
        enabled: magnetic field on/off
    """

    def __init__(self, center, half_width, field, enabled=True):
        self.center = np.asarray(center, dtype=float)
        self.half_width = np.asarray(half_width, dtype=float)
        self.field = np.asarray(field, dtype=float)
        for name in ('center', 'half_width', 'field'):
            if getattr(self, name).shape != (3,):
                raise ConfigurationError(f"Field region {name} must have three components")
        if np.any(self.half_width < 0):
            raise ConfigurationError(f"Field region half-width must be non-negative, got {self.half_width}")
        self.enabled = enabled

    @classmethod
    def from_widths(cls, center, width, field, enabled=True):
        """Box given by its full widths along each axis"""
        return cls(center, 0.5 * np.asarray(width, dtype=float), field, enabled)

    def contains(self, position):
        """Open-interval test on all three axes"""
        p = np.asarray(position, dtype=float)
        lo = self.center - self.half_width
        hi = self.center + self.half_width
        return bool(np.all((p > lo) & (p < hi)))


class FieldGate:
    """Field seen by an ion at a given position, in gauss

    Returns None when the region is disabled, so the host field is left alone.
    The z bound is tested around the z center on both sides.
    """

    def __init__(self, region: FieldRegion):
        self.region = region
        self.active = False
        self._field_gauss = region.field * gauss_per_mT
        self._zero = np.zeros(3)

    def field_at(self, position) -> Optional[Vec3]:
        if not self.region.enabled:
            return None
        inside = self.region.contains(position)
        if inside and not self.active:
            logger.debug(f"Magnetic field on at {np.asarray(position)} mm")
        elif self.active and not inside:
            logger.debug(f"Magnetic field off at {np.asarray(position)} mm")
        self.active = inside
        return self._field_gauss.copy() if inside else self._zero.copy()
