#!/usr/bin/env python
# encoding: utf-8

from setuptools import setup
import saxplist as package

setup(
      name = package.__name__,
      version = package.__version__,
      packages = package.__packages__,
      description = package.__description__,
      license = package.__license__,
      long_description = package.__doc__,
      platforms=package.__platforms__,
      classifiers = package.__classifiers__,
      python_requires = '>=3.6',
)
