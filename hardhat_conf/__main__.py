""" Prints the content of a `hardhat.config.ts` file for a zkSync
    project, so it can be redirected to the file.

    Example:

    $ python -m hardhat_conf --zksolc-version 1.3.21 \\
        --solidity-version 0.8.19 \\
        --settings '{"optimizer": {"enabled": true}}' > hardhat.config.ts
"""

import io
import sys

from hardhat_conf.utils.cli import command_line_interface, \
    builder_from_cli_options
from hardhat_conf.utils.constants import CONFIGURATION_FILE_NAME
from hardhat_conf.utils.exceptions import MalformedVersionString, \
    UnserializableSettings, InvalidSettingsArgument
from hardhat_conf.utils.logs import initial_log, log_error, log_success, \
    show_final_config_values


def main(argv: list = None) -> int:
    cli_options = command_line_interface(argv)
    verbose: bool = cli_options.verbose

    if verbose:
        initial_log()

    try:
        config = builder_from_cli_options(cli_options).build()
        if verbose:
            show_final_config_values(config)
        config_text = config.to_text()
    except (
        MalformedVersionString,
        UnserializableSettings,
        InvalidSettingsArgument
    ) as error:
        log_error(error)
        return 1

    # The generated file is always UTF-8, whatever the console locale is
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding='utf-8')
    sys.stdout.write(config_text)
    if verbose:
        log_success(CONFIGURATION_FILE_NAME)
    return 0


if __name__ == '__main__':
    sys.exit(main())
