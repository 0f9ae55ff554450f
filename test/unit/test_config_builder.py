""" _summary_

    Unit tests for the builder of Hardhat configurations
"""

import pytest

from hardhat_conf.config_builder import HardhatConfigBuilder
from hardhat_conf.utils.constants import DEFAULT_ZKSOLC_VERSION, \
    DEFAULT_SOLIDITY_VERSION


def test_new_builder_builds_defaults():
    config = HardhatConfigBuilder().build()

    assert config.compiler.version == DEFAULT_ZKSOLC_VERSION
    assert config.compiler.settings == {}
    assert config.language.version == DEFAULT_SOLIDITY_VERSION


def test_builder_with_injected_defaults(test_defaults):
    config = HardhatConfigBuilder(test_defaults).build()

    assert config.compiler.version == test_defaults.compiler_version
    assert config.language.version == test_defaults.language_version


@pytest.mark.parametrize(
    'version', ['1.3.21', '', '   ', 'latest', 'v1.3.21-rc.1+build.5', 'ñ']
)
def test_compiler_version_is_stored_verbatim(version):
    config = HardhatConfigBuilder().set_compiler_version(version).build()

    assert config.compiler.version == version


def test_last_write_wins():
    config = HardhatConfigBuilder() \
        .set_compiler_version('1.3.20') \
        .set_language_version('0.8.18') \
        .set_compiler_version('1.3.21') \
        .set_language_version('0.8.19') \
        .build()

    assert config.compiler.version == '1.3.21'
    assert config.language.version == '0.8.19'


def test_compiler_version_keeps_settings():
    config = HardhatConfigBuilder() \
        .set_compiler_settings({'optimizer': {'enabled': True}}) \
        .set_compiler_version('1.3.21') \
        .build()

    assert config.compiler.settings == {'optimizer': {'enabled': True}}


def test_setters_return_the_builder():
    builder = HardhatConfigBuilder()

    assert builder.set_compiler_version('1.3.21') is builder
    assert builder.set_language_version('0.8.19') is builder
    assert builder.set_compiler_settings({}) is builder


def test_build_returns_independent_snapshots():
    """ _summary_
        Two builds without setters in between are equal, but changing
        one of them doesn't change the other one, nor the builder
    """
    builder = HardhatConfigBuilder().set_compiler_settings({'libraries': {}})
    first = builder.build()
    second = builder.build()

    assert first == second
    assert first is not second

    first.compiler.settings['libraries']['Lib.sol'] = {'Lib': '0x01'}

    assert second.compiler.settings == {'libraries': {}}
    assert builder.build().compiler.settings == {'libraries': {}}


def test_builder_is_usable_after_build():
    builder = HardhatConfigBuilder().set_compiler_version('1.3.20')
    before = builder.build()

    builder.set_compiler_version('1.3.21')

    assert before.compiler.version == '1.3.20'
    assert builder.build().compiler.version == '1.3.21'


def test_caller_settings_changes_do_not_leak_into_builder():
    settings = {'optimizer': {'enabled': True}}
    builder = HardhatConfigBuilder().set_compiler_settings(settings)

    settings['optimizer']['enabled'] = False

    assert builder.build().compiler.settings == {
        'optimizer': {'enabled': True}
    }


def test_built_config_renders_the_overrides():
    text = HardhatConfigBuilder() \
        .set_compiler_version('1.3.21') \
        .set_language_version('0.8.19') \
        .build() \
        .to_text()

    assert '  zksolc: {\n    version: "1.3.21",\n    settings: {},\n' in text
    assert '  solidity: {\n    version: "0.8.19",\n  },\n' in text
