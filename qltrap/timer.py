#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Timing execution
"""

import time
import functools
import logging

logger = logging.getLogger(__name__)


def timer(method):
    @functools.wraps(method)
    def timed(*args, **kwargs):
        ts = time.perf_counter()
        result = method(*args, **kwargs)
        elapsed = time.perf_counter() - ts
        logger.info(f"{method.__name__} elapsed time: {elapsed * 1e3:.3f} ms")
        return result

    return timed
