#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

DOCMUTATE_PATH = HERE / "docmutate"


def get_version(path):
    with open(path) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M)
    return match.group(1)


VERSION = get_version(DOCMUTATE_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='docmutate',
      version=VERSION,
      description='Declarative update operators and permission checks for nested JSON documents',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.7',
      packages=find_packages(exclude=['*.tests', '*.tests.*']),
      package_data={
          'docmutate': ['*.schema.json'],
      },
      install_requires=[
          'colorama',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'docmutate = docmutate.__main__:main_dispatch',
              'docmutate-apply = docmutate.mutateapp:main',
              'docmutate-verify = docmutate.verifyapp:main',
              'docmutate-demo = docmutate.demo:main',
          ],
      },
      classifiers=[
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
      ],
    )
