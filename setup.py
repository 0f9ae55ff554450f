""" _summary_

    Provides the configuration for build the project with `Pyinstaller` as an executable.
    The executable itself is created by `scripts/build_executable.py`, after
    installing the `build` extra
"""

from setuptools import setup, find_packages

setup(
    name='hardhat-conf-manager',
    version='0.1.0',
    license='MIT',
    packages=find_packages(include=['hardhat_conf', 'hardhat_conf.*']),
    keywords='zkSync Hardhat configuration file generator',
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'build': [
            'pyinstaller'
        ],
        'test': [
            'pytest'
        ]
    },
)
