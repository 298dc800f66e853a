# coding: utf-8

"""
    walkdir
"""
from setuptools import setup, find_packages

NAME = "walkdir"

# To install the library, run the following
#
# pip install .
#
# prerequisite: setuptools
# http://pypi.python.org/pypi/setuptools

INSTALL_REQUIRES = [
    'crayons>=0.2.0',
    'fs>=2.4.4',
    'tzlocal>=1.5.1',
]

DEV_REQUIRES = [
    'pycodestyle>=2.4.0',
    'pylint>=2.3.0',
    'pytest>=7.0.0',
    'pytest-cov>=2.5.0',
]

with open('walkdir/VERSION') as f:
    version = f.read().strip()

setup(
    name=NAME,
    version=version,
    description="Recursive directory traversal with iterator and visitor interfaces",
    url="",
    keywords=["walkdir", "directory", "traversal", "filesystem"],
    include_package_data=True,
    package_data={
        'walkdir': ['VERSION'],
    },
    install_requires=INSTALL_REQUIRES,
    extras_require={
        'dev': DEV_REQUIRES
    },
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.6',
    license="MIT",
    entry_points = {
        'console_scripts': [
            'walkdir=walkdir.main:run',
        ]
    }
)
