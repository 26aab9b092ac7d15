#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

LISTDIFF_PATH = HERE / "listdiff"


def get_version(path):
    match = re.search(r'^__version__ = "([^"]+)"', path.read_text(), re.MULTILINE)
    return match.group(1)


VERSION = get_version(LISTDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='listdiff',
      version=VERSION,
      description='Minimal insertion/deletion edit scripts between two lists',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.8',
      packages=find_packages(include=['listdiff', 'listdiff.*']),
      install_requires=[
          'colorama',
          'jupyter_core',
          'tabulate',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'listdiff = listdiff.__main__:main_dispatch',
              'listdiff-diff = listdiff.listdiffapp:main',
              'listdiff-patch = listdiff.listpatchapp:main',
          ],
      },
    )
