"""[summary]

    Contains several functions with pre-build code schemas for interfacing
    a logger system that acts as an informative process of the project.

    Everything goes to stderr, because stdout carries the generated file
"""

import reprlib
import sys

from .constants import OS, OS_release, OS_architecture, OS_arch_linkage, \
    PROJECT_VERSION


def initial_log():
    """ Greets the user when the generation task is started, and logs
        some useful info about the OS where the program it's running """
    print(
        f'\n[INFO]: Generating a Hardhat configuration with ' +
        f'v{PROJECT_VERSION} on ' +
        f'[{OS} {OS_release}, {OS_architecture}, {OS_arch_linkage}]',
        file=sys.stderr
    )


def show_final_config_values(config):
    """ Shows the values that will be written to the file """
    print(f'\nzksolc version: {config.compiler.version}', file=sys.stderr)
    print(
        f'zksolc settings: {reprlib.repr(config.compiler.settings)}',
        file=sys.stderr
    )
    print(f'Solidity version: {config.language.version}\n', file=sys.stderr)


def log_success(config_file_name: str):
    """ Notifies that the file content was generated """
    print(
        f'[SUCCESS]: {config_file_name} content generated',
        file=sys.stderr
    )


def log_error(error: Exception):
    """ Reports an error that stopped the generation of the file """
    print(f'[ERROR]: {error}', file=sys.stderr)
