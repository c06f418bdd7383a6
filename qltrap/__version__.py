"""
__version__.py
~~~~~~~~~~~~~~

Information about the current version of the package.
"""

__title__ = 'qltrap'
__description__ = 'Voltage sweeps, electrode waveforms and mass-frequency conversion for quadro-logarithmic traps'
__version__ = '1.0.0'
__author__ = 'qltrap developers'
__author_email__ = ''
__license__ = 'MIT'
__url__ = ''
