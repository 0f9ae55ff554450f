""" _summary_

    Provides the command line interface for be consumed as a client
"""

import argparse
import json

from hardhat_conf.config_builder import HardhatConfigBuilder
from hardhat_conf.program_definitions import ConfigDefaults, PROGRAM_DEFAULTS
from hardhat_conf.utils.constants import CONFIGURATION_FILE_NAME
from hardhat_conf.utils.exceptions import InvalidSettingsArgument


def command_line_interface(argv: list = None):
    """ Manages to take the available program options as
        command line arguments """

    parser = argparse.ArgumentParser(
        description=f'Prints a zkSync {CONFIGURATION_FILE_NAME} file'
    )
    parser.add_argument(
        '-v',
        '--verbose',
        dest='verbose',
        action='store_true',
        help='Controls the information sent to stderr'
    )
    parser.add_argument(
        '--zksolc-version',
        dest='zksolc_version',
        type=str,
        action='store',
        help='The zksolc compiler version written on the file'
    )
    parser.add_argument(
        '--solidity-version',
        dest='solidity_version',
        type=str,
        action='store',
        help='The Solidity version written on the file'
    )
    parser.add_argument(
        '--settings',
        dest='settings',
        type=str,
        action='store',
        help='The zksolc settings, as a JSON document'
    )
    parser.add_argument(
        '--default-zksolc-version',
        dest='default_zksolc_version',
        type=str,
        default=PROGRAM_DEFAULTS.compiler_version,
        help='Replaces the program default zksolc version'
    )
    parser.add_argument(
        '--default-solidity-version',
        dest='default_solidity_version',
        type=str,
        default=PROGRAM_DEFAULTS.language_version,
        help='Replaces the program default Solidity version'
    )

    return parser.parse_args(argv)


def parse_settings_argument(raw_settings: str):
    """ Loads the JSON document received for the zksolc settings """
    try:
        return json.loads(raw_settings)
    except json.JSONDecodeError as error:
        raise InvalidSettingsArgument(raw_settings, error.msg) from error
    except RecursionError as error:
        raise InvalidSettingsArgument(
            raw_settings, 'the document is nested too deeply'
        ) from error


def builder_from_cli_options(cli_options) -> HardhatConfigBuilder:
    """ Creates a builder with the overrides received
        from the command line """
    builder = HardhatConfigBuilder(
        ConfigDefaults(
            compiler_version=cli_options.default_zksolc_version,
            language_version=cli_options.default_solidity_version
        )
    )

    # Only the options that were explicitly passed are overridden
    if cli_options.zksolc_version is not None:
        builder.set_compiler_version(cli_options.zksolc_version)
    if cli_options.solidity_version is not None:
        builder.set_language_version(cli_options.solidity_version)
    if cli_options.settings is not None:
        builder.set_compiler_settings(
            parse_settings_argument(cli_options.settings)
        )

    return builder
