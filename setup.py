#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

requirements = ['torch>=1.2.0', 'tqdm>=4.64', 'pandas>=1.4', 'numpy>=1.22',
                'PyYAML>=5.1', 'rdflib>=6.0']

test_requirements = ['pytest']

setup(
    author="kgencode developers",
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10'
    ],
    description="Encoding of RDF knowledge graphs into integer triples for "
                "knowledge graph embedding.",
    license="BSD license",
    long_description=readme,
    include_package_data=True,
    package_data={'kgencode': ['config.yaml']},
    keywords='kgencode',
    name='kgencode',
    packages=find_packages(exclude=['tests']),
    install_requires=requirements,
    extras_require={'test': test_requirements},
    tests_require=test_requirements,
    entry_points={'console_scripts': ['kgencode=kgencode.exporter:main']},
    version='0.1.0',
    zip_safe=False,
)
