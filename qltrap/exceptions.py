#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Errors raised by qltrap
"""


class InvalidInputError(ValueError):
    """Inconsistent arguments to a conversion, e.g. both or neither of energy and voltage"""


class ConfigurationError(ValueError):
    """Malformed sweep axes, waveform tables or settings, raised at construction"""
