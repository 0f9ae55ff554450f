"""[summary]

    This file provides the functions that turn a Hardhat configuration
    into the text of a `hardhat.config.ts` file.

    Every value is checked (and serialized) before the template is
    filled, so a failure never produces a partially written file
"""

import json
import math
import re
from string import Template
from typing import Any

from hardhat_conf.utils.constants import HARDHAT_CONFIG_TEMPLATE, \
    SETTINGS_BASE_INDENT, SETTINGS_INDENT_STEP
from hardhat_conf.utils.exceptions import MalformedVersionString, \
    UnserializableSettings

# Characters that can't live inside a double quoted string literal
RE_STRING_LITERAL_BREAKERS: str = r'["\\\r\n\u2028\u2029]'
# Object keys that can be written without quotes
RE_BARE_IDENTIFIER: str = r'[A-Za-z_$][A-Za-z0-9_$]*'


def render_config(config) -> str:
    """ Generates the file content for the given configuration """
    settings = config.compiler.settings
    try:
        serialized_settings = serialize_settings(settings)
    except RecursionError as error:
        raise UnserializableSettings(settings, 'settings') from error

    return fill_template(
        HARDHAT_CONFIG_TEMPLATE,
        {
            'compiler_version': config.compiler.version,
            'language_version': config.language.version,
        },
        {
            'compiler_settings': serialized_settings,
        }
    )


def fill_template(template: str, string_values: dict, raw_values: dict) -> str:
    """ Substitutes the placeholders of the template.

        `string_values` are written inside string literals, so every
        one of them is checked first. `raw_values` are already
        serialized code
    """
    for name, value in string_values.items():
        check_version_string(name, value)

    return Template(template).substitute(**string_values, **raw_values)


def check_version_string(field_name: str, value: str) -> str:
    """ Returns the value untouched if it can be written between
        double quotes, raises `MalformedVersionString` otherwise.

        Empty versions are allowed, the toolchain will complain about
        them if they're wrong
    """
    if not isinstance(value, str) or re.search(
        RE_STRING_LITERAL_BREAKERS, value
    ):
        raise MalformedVersionString(field_name, value)
    return value


def serialize_settings(
    node: Any,
    indent: int = SETTINGS_BASE_INDENT,
    path: str = 'settings',
    parents: frozenset = frozenset()
) -> str:
    """ Writes the compiler settings tree as a TypeScript literal.

        Mappings and sequences are splitted in several lines, one entry
        per line with a trailing comma, like the rest of the file.
        Empty ones are written inline, so the default settings end up
        as `{}`.

        `parents` holds the ids of the containers that enclose the
        current node. Finding one of them again means that the tree
        contains itself, and it can't be written
    """
    if node is None:
        return 'null'
    # bool goes first, because it's also an int
    if isinstance(node, bool):
        return 'true' if node else 'false'
    if isinstance(node, int):
        return str(node)
    if isinstance(node, float):
        if math.isnan(node) or math.isinf(node):
            raise UnserializableSettings(node, path)
        return repr(node)
    if isinstance(node, str):
        return json.dumps(node)
    if isinstance(node, (dict, list, tuple)) and id(node) in parents:
        raise UnserializableSettings(node, path)
    if isinstance(node, dict):
        return serialize_mapping(node, indent, path, parents | {id(node)})
    if isinstance(node, (list, tuple)):
        return serialize_sequence(node, indent, path, parents | {id(node)})

    raise UnserializableSettings(node, path)


def serialize_mapping(
    node: dict, indent: int, path: str, parents: frozenset
) -> str:
    """ Writes a settings mapping as an object literal """
    if not node:
        return '{}'

    inner_indent = indent + SETTINGS_INDENT_STEP
    lines = ['{']
    for key, value in node.items():
        if not isinstance(key, str):
            raise UnserializableSettings(key, f'{path} (key)')
        serialized_value = serialize_settings(
            value, inner_indent, f'{path}.{key}', parents
        )
        lines.append(
            f'{" " * inner_indent}{serialize_key(key)}: {serialized_value},'
        )
    lines.append(f'{" " * indent}}}')

    return '\n'.join(lines)


def serialize_sequence(
    node, indent: int, path: str, parents: frozenset
) -> str:
    """ Writes a settings sequence as an array literal """
    if not node:
        return '[]'

    inner_indent = indent + SETTINGS_INDENT_STEP
    lines = ['[']
    for idx, value in enumerate(node):
        serialized_value = serialize_settings(
            value, inner_indent, f'{path}[{idx}]', parents
        )
        lines.append(f'{" " * inner_indent}{serialized_value},')
    lines.append(f'{" " * indent}]')

    return '\n'.join(lines)


def serialize_key(key: str) -> str:
    """ Object keys are written bare when they're valid identifiers """
    if re.fullmatch(RE_BARE_IDENTIFIER, key):
        return key
    return json.dumps(key)
