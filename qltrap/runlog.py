#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

"""
Append-only, tab-separated log of a voltage sweep

The header (a snapshot of the settings) is written once, at the first run of
a sweep; every run then appends its float, lens and injection voltages.
"""

from pathlib import Path

import logging
logger = logging.getLogger(__name__)

run_columns = ('Float voltage [V]', 'Lens voltage [V]', 'Injection voltage [V]')


def write_fields(path, fields, end='\n'):
    with open(path, 'a') as f:
        f.write('\t'.join(str(v) for v in fields) + end)


class RunLog:

    def __init__(self, path):
        self.path = Path(path)
        self.header_written = False
        self.runs = 0

    def start_sweep(self):
        """Re-arm the header for a new sweep appended to the same file"""
        self.header_written = False
        self.runs = 0

    def write_header(self, settings: dict, total_runs=None):
        if self.header_written:
            return
        write_fields(self.path, [])
        if total_runs is not None:
            write_fields(self.path, ['Total runs', total_runs])
        write_fields(self.path, ['Adjustable Variables'])
        for key, value in settings.items():
            if key == 'models':
                for model, filename in value.items():
                    write_fields(self.path, [f"model_{model}", filename])
            elif isinstance(value, (list, tuple)):
                write_fields(self.path, [key, *value])
            else:
                write_fields(self.path, [key, value])
        write_fields(self.path, run_columns)
        self.header_written = True
        logger.info(f"Run log header written to {self.path}")

    def write_run(self, context):
        write_fields(self.path, [context.float_voltage, context.lens_voltage, context.injection_voltage])
        self.runs += 1
