import os
import sys
from setuptools import (
    setup,
    find_packages
)

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                'src'))
from tfwrap.__version__ import __version__  # noqa: E402

setup(
    name='tfwrap',
    description='Terraform environment wrapper',
    author='tfwrap contributors',
    version=__version__,
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'tf = tfwrap.cmdline.main:run'
        ]
    }
)
