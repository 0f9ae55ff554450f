""" [summary]
    Provides dataclasses to store the compiler and language options
    that will be written to the Hardhat configuration file
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from hardhat_conf.config_renderer import render_config
from hardhat_conf.program_definitions import ConfigDefaults, PROGRAM_DEFAULTS


@dataclass
class CompilerConfig:
    """ The zksolc compiler configuration """
    version: str
    settings: Any = field(default_factory=dict)

    def set_property(self, property_name: str, value: Any):
        """ Sets the value(s) for the members of the class,
            given any value related by the method's parameter
            'property name' """
        if property_name == 'version':
            self.version = value
        elif property_name == 'settings':
            self.settings = copy_settings(value)


@dataclass
class LanguageConfig:
    """ The Solidity language configuration """
    version: str

    def set_property(self, property_name: str, value: Any):
        """ Sets the value(s) for the members of the class,
            given any value related by the method's parameter
            'property name' """
        if property_name == 'version':
            self.version = value


@dataclass
class HardhatConfig:
    """ The whole configuration written on a `hardhat.config.ts` file """
    compiler: CompilerConfig
    language: LanguageConfig

    @classmethod
    def default(cls, defaults: Optional[ConfigDefaults] = None):
        """ A new configuration with the default versions and
            empty compiler settings """
        if defaults is None:
            defaults = PROGRAM_DEFAULTS
        return cls(
            compiler=CompilerConfig(defaults.compiler_version),
            language=LanguageConfig(defaults.language_version)
        )

    def copy(self):
        """ Returns a deep copy, so the settings tree isn't shared """
        return HardhatConfig(
            compiler=CompilerConfig(
                self.compiler.version,
                copy_settings(self.compiler.settings)
            ),
            language=LanguageConfig(self.language.version)
        )

    def to_text(self) -> str:
        """ The content of the `hardhat.config.ts` file for this
            configuration """
        return render_config(self)


def copy_settings(settings: Any) -> Any:
    """ Deep copies a settings tree walking it with a stack instead
        of recursion, so any depth can be copied.

        Mappings and lists that appear more than once, cycles included,
        keep being the same object inside the copy. Every other node
        is copied with `copy.deepcopy`
    """
    if not isinstance(settings, (dict, list)):
        return copy.deepcopy(settings)

    copies: dict = {id(settings): empty_container(settings)}
    pending: list = [settings]
    while pending:
        original = pending.pop()
        copied = copies[id(original)]

        items = original.items() if isinstance(original, dict) \
            else enumerate(original)
        for key, value in items:
            if isinstance(value, (dict, list)):
                if id(value) not in copies:
                    copies[id(value)] = empty_container(value)
                    pending.append(value)
                value = copies[id(value)]
            else:
                value = copy.deepcopy(value)

            if isinstance(copied, dict):
                copied[key] = value
            else:
                copied.append(value)

    return copies[id(settings)]


def empty_container(node):
    """ Mapping subclasses become plain dicts, and lists plain lists """
    return {} if isinstance(node, dict) else []
