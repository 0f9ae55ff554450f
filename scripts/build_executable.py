""" _summary_

    Builds a standalone `hardhat-conf` executable of the command line
    client with `Pyinstaller`. Run it from the project root:

    $ pip install -e .[build]
    $ python scripts/build_executable.py

    The executable is placed on the `dist` directory
"""

import os

import PyInstaller.__main__

EXECUTABLE_NAME: str = 'hardhat-conf'
PROJECT_ROOT: str = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
ENTRY_POINT: str = os.path.join(PROJECT_ROOT, 'hardhat_conf', '__main__.py')


def build_executable():
    """ Bundles the CLI entry point and its package in a single file """
    PyInstaller.__main__.run([
        ENTRY_POINT,
        '--name', EXECUTABLE_NAME,
        '--onefile',
        '--clean',
        '--paths', PROJECT_ROOT,
        '--distpath', os.path.join(PROJECT_ROOT, 'dist'),
        '--workpath', os.path.join(PROJECT_ROOT, 'build'),
        '--specpath', os.path.join(PROJECT_ROOT, 'build'),
    ])


if __name__ == '__main__':
    build_executable()
