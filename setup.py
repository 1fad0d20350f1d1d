#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib

HERE = pathlib.Path(__file__).parent.absolute()

DELTAUPDATE_PATH = HERE / "deltaupdate"


def get_version(path):
    version_ns = {}
    with open(path) as f:
        exec(f.read(), {}, version_ns)
    return version_ns['__version__']


VERSION = get_version(DELTAUPDATE_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
        name='deltaupdate',
        version=VERSION,
        description='Immutable updates of nested data with structural diffs',
        long_description=LONG_DESCRIPTION,
        long_description_content_type='text/markdown',
        license='BSD',
        python_requires='>=3.8',
        packages=find_packages(include=['deltaupdate', 'deltaupdate.*']),
        package_data={
            'deltaupdate': ['diff_format.schema.json'],
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
                'deltaupdate = deltaupdate.__main__:main_dispatch',
                'dupdate = deltaupdate.updateapp:main',
                'dmergediff = deltaupdate.mergediffapp:main',
            ],
        },
        classifiers=[
            'License :: OSI Approved :: BSD License',
            'Programming Language :: Python :: 3',
        ],
    )
