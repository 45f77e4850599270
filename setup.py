'''setup.py file

Type "pip install ." into a terminal to install the package for basic usage.

Alternatively, type "pip install -e .[test]" to create an installation that
will read from the current directory and can run the test suite.
'''

from setuptools import setup

install_requires = ['numpy',
                    'pandas',
                    'matplotlib>=3.0.0'
                    ]

test_requires = ['pytest']

setup(
    name='IBStruct',
    version='0.1.0',
    description='Immersed boundary structure utilities for IB2d geometry and target points',
    license='GPLv3',
    keywords='immersed boundary IB2d target points vertex',
    python_requires='>=3.6',
    packages=['ibstruct'],
    install_requires=install_requires,
    extras_require={'test': test_requires},
)
