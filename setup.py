import os.path
import sys

major, minor = sys.version_info[:2]
if (major, minor) < (3, 9):
    print("Python >=3.9 is required to use this module.")
    sys.exit(1)

from setuptools import setup

setup_dir = os.path.split(os.path.abspath(__file__))[0]
with open(os.path.join(setup_dir, 'README.rst')) as f:
    DOCUMENTATION = f.read()

version_path = os.path.join(setup_dir, 'romu', 'version.py')
globals_dict = {}
with open(version_path) as f:
    exec(f.read(), globals_dict)
VERSION = '.'.join([str(x) for x in globals_dict['VERSION']])

dependencies = ['numpy>=1.22']

setup(
    name='romu',
    packages=['romu'],
    provides=['romu'],
    install_requires=dependencies,
    extras_require={
        'tests': ['pytest>=7'],
        'docs': ['sphinx>=4', 'furo'],
    },
    python_requires='>=3.9',
    version=VERSION,
    description='Romu family of fast nonlinear pseudo-random number generators',
    long_description=DOCUMENTATION,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Mathematics'
    ]
)
