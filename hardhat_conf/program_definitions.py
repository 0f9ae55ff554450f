"""[summary]

    This file provides the program defined values used to build
    a Hardhat configuration when the caller doesn't override them
"""

from dataclasses import dataclass

from hardhat_conf.utils.constants import DEFAULT_ZKSOLC_VERSION, \
    DEFAULT_SOLIDITY_VERSION


@dataclass(frozen=True)
class ConfigDefaults:
    """ The versions written on a brand new configuration.

        They are set once at startup and injected wherever a default
        configuration is created, so they are never mutated in place
    """
    compiler_version: str
    language_version: str


# Default base definitions for a new configuration
PROGRAM_DEFAULTS: ConfigDefaults = ConfigDefaults(
    compiler_version=DEFAULT_ZKSOLC_VERSION,
    language_version=DEFAULT_SOLIDITY_VERSION
)
