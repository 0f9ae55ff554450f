from hardhat_conf.config_builder import HardhatConfigBuilder
from hardhat_conf.data.user_config import CompilerConfig, LanguageConfig, \
    HardhatConfig
from hardhat_conf.program_definitions import ConfigDefaults, PROGRAM_DEFAULTS
from hardhat_conf.utils.exceptions import MalformedVersionString, \
    UnserializableSettings
