#!/usr/bin/env python3

import os
from setuptools import setup, find_packages

# get key package details from __version__.py
about = {}  # type: ignore
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'qltrap', '__version__.py')) as f:
    exec(f.read(), about)

# load the README file and use it as the long_description for PyPI
with open(os.path.join(here, 'README.md'), 'r') as f:
    readme = f.read()

with open(os.path.join(here, 'requirements.txt'), 'r') as f:
    requirements = [x.strip() for x in f.readlines() if x.strip()]

# package configuration - for reference see:
# https://setuptools.readthedocs.io/en/latest/setuptools.html#id9
setup(
    name=about['__title__'],
    packages=find_packages(include=["qltrap", "qltrap.*"]),
    description=about['__description__'],
    long_description=readme,
    long_description_content_type='text/markdown',
    version=about['__version__'],
    author=about['__author__'],
    author_email=about['__author_email__'],
    url=about['__url__'],
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={'test': ['pytest']},
    license=about['__license__'],
    zip_safe=False,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Programming Language :: Python :: 3',
        "Operating System :: OS Independent",
    ],
    keywords='ion trap, orbitrap, quadro-logarithmic trap, ion optics, voltage sweep'
)
