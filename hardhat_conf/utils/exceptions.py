"""[summary]

    Provides custom exceptions for values that can't be written
    into a valid Hardhat configuration file
"""

import reprlib
from typing import Any


class MalformedVersionString(Exception):
    """
        A compiler or language version contains characters that would
        close, or break, the string literal that holds it in the
        generated file
    """
    def __init__(self, field_name: str, value: str):
        self.field_name = field_name
        self.value = value
        super().__init__(
            f'<{value}> is not a valid value for the <{field_name}> ' +
            'property. Double quotes, backslashes and line breaks ' +
            'are not allowed in a version string'
        )


class UnserializableSettings(Exception):
    """ A node of the compiler settings has no representation in the
        generated file.

        Ex: sets, bytes, NaN floats, mappings with non-string keys,
        or trees that contain themselves or are too deep to be walked
    """
    def __init__(self, node: Any, path: str):
        self.node = node
        self.path = path
        super().__init__(
            f'<{reprlib.repr(node)}> of type <{type(node).__name__}> ' +
            f'found at <{path}> can\'t be written in the compiler settings'
        )


class InvalidSettingsArgument(Exception):
    """ The compiler settings passed through the command line
        aren't a valid JSON document """
    def __init__(self, raw_settings: str, reason: str):
        self.raw_settings = raw_settings
        super().__init__(
            f'<{reprlib.repr(raw_settings)}> is not a valid JSON document ' +
            'for the ' +
            f'compiler settings: {reason}'
        )
