# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

from setuptools import setup, find_namespace_packages

setup(
    name='term-cache',
    version='0.1.0',
    description='Cached lookup of ontology terms by identifier',
    author='Damien Goutte-Gattat',
    author_email='dpg44@cam.ac.uk',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Programming Language :: Python :: 3.9',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
    ],
    python_requires='>=3.9',
    install_requires=['requests', 'pronto', 'click', 'click_shell', 'IPython'],
    extras_require={'test': ['pytest']},
    package_dir={'': 'src'},
    packages=find_namespace_packages(where='src', include=['fbcam', 'fbcam.*']),
    entry_points={'console_scripts': ['termcache = fbcam.termcache.main:main']},
)
