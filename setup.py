#!/usr/bin/env python3
"""
Setup script for keystrokes
"""

from setuptools import setup, find_packages
import os
import re

# Read the version without importing the package
def read_version():
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'keystrokes', '__version__.py')
    with open(path, encoding='utf-8') as f:
        match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", f.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError('Cannot find __version__ in ' + path)
    return match.group(1)

# Read README for long_description
def read_file(filename):
    with open(os.path.join(os.path.dirname(__file__), filename), encoding='utf-8') as f:
        return f.read()

setup(
    name='keystrokes',
    version=read_version(),
    description='Convert ASCII text into Windows virtual key code sequences (US QWERTY)',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'docs']),
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov',
            'pytest-timeout',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Operating System :: OS Independent',
        'Topic :: Software Development :: Libraries',
    ],
)
