#
# This setup.py file creates a wheel of the elmap density map reader for
# installation in a standard Python distribution.
#
#   pip install .
#
# The package sources are in src/ and are installed as the elmap package.
#
from setuptools import setup

# Use README.md as long_description
import os.path
dir = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(dir, 'README.md')) as f:
    long_description = f.read()

setup(
    name = 'elmap',

    packages = ['elmap', 'elmap.ccp4', 'elmap.dsn6'],
    package_dir = {'elmap': 'src'},

    # Brief description
    description = "Crystallographic electron density map readers for CCP4 and DSN6 files",

    # Long description
    long_description = long_description,
    long_description_content_type = "text/markdown",

    version = '1.0.0',

    python_requires = '>=3.8',
    install_requires = [
        'numpy',                # Grid values and binary header views
    ],
    extras_require = {
        'test': ['pytest'],
    },

    classifiers = [
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Science/Research',
        'Programming Language :: Python :: 3',
    ],
)
