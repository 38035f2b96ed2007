#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright (c) 2017 - cologler <skyoflw@gmail.com>
# ----------
#
# ----------

import os
from setuptools import setup, find_packages

long_description = ''

if os.path.isfile('__pypit_desc__.rst'):
    with open('__pypit_desc__.rst') as fp:
        long_description = fp.read()

long_description = long_description or ''

setup(
    long_description=long_description,
    packages=find_packages(exclude=['tests']),
    # auto generated:
    name='arg-fn',
    version='0.1.0',
    description='dispatch command line tokens to callbacks.',
    keywords=['argument', 'flag', 'callback'],
    author='cologler',
    author_email='skyoflw@gmail.com',
    url='https://github.com/Cologler/arg-fn-python',
    license='MIT License',
    classifiers=[],
    scripts=[],
    entry_points={'console_scripts': ['argfn=argfn.main:main']},
    zip_safe=False,
    include_package_data=True,
    setup_requires=[],
    install_requires=['click', 'fsoopify'],
    extras_require={'test': ['pytest']},
    tests_require=['pytest'],
)
