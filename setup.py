"""A setuptools based setup module.
See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

from setuptools import setup, find_packages
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(

    name='lca_rmq',  # Required
    version='0.1.0',  # Required
    description='Segment trees, range minimum queries and lowest common ancestors via RMQ.',  # Required
    long_description=long_description,  # Optional
    long_description_content_type='text/markdown',

    # Classifiers help users find your project by categorizing it.
    #
    # For a list of valid classifiers, see
    # https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[  # Optional
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Programming Language :: Python :: 3',
    ],

    keywords='segment tree range minimum query lowest common ancestor euler tour',  # Optional

    packages=find_packages(exclude=['contrib', 'docs', 'tests']),  # Required

    python_requires='>=3.8, <4',
    # networkx is used to accept trees given as graphs
    install_requires=['networkx'],  # Optional
    extras_require={  # Optional
        'test': ['pytest'],
    },
)
