"""[summary]

    Provides a builder to create a Hardhat configuration overriding
    only the values that the caller cares about
"""

from typing import Any, Optional

from hardhat_conf.data.user_config import HardhatConfig
from hardhat_conf.program_definitions import ConfigDefaults


class HardhatConfigBuilder:
    """ Accumulates the overrides over a default configuration.

        Setters return the builder itself, so they can be chained, and
        the last value set for a property is the one that gets built.
        Values aren't validated here, that happens when the
        configuration is rendered.

        Ex:
            config = HardhatConfigBuilder() \\
                .set_compiler_version('1.3.21') \\
                .set_language_version('0.8.19') \\
                .build()

        The builder isn't thread safe. Callers sharing an instance must
        serialize the access to it
    """

    def __init__(self, defaults: Optional[ConfigDefaults] = None):
        self._config = HardhatConfig.default(defaults)

    def set_compiler_version(self, version: str):
        """ Overrides the zksolc version, keeping its settings """
        self._config.compiler.set_property('version', version)
        return self

    def set_compiler_settings(self, settings: Any):
        """ Replaces the whole zksolc settings tree with a copy of
            the given one """
        self._config.compiler.set_property('settings', settings)
        return self

    def set_language_version(self, version: str):
        """ Overrides the Solidity version """
        self._config.language.set_property('version', version)
        return self

    def build(self) -> HardhatConfig:
        """ Returns a snapshot of the current configuration.

            It can be called as many times as needed, and the builder
            remains usable afterwards
        """
        return self._config.copy()
