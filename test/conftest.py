""" _summary_

    Shared values and fixtures for the unit tests
"""

import pytest

from hardhat_conf.program_definitions import ConfigDefaults

TEST_DEFAULTS: ConfigDefaults = ConfigDefaults(
    compiler_version='9.9.9',
    language_version='0.0.1'
)

# The settings written on the file by a brand new configuration
EMPTY_SETTINGS_LINE: str = '    settings: {},\n'


@pytest.fixture
def test_defaults() -> ConfigDefaults:
    """ Defaults that don't match the program ones, so the tests
        can tell where a version comes from """
    return TEST_DEFAULTS


# Full content expected for a configuration with the program defaults
DEFAULT_CONFIG_FILE_MOCK: str = '''
import { HardhatUserConfig } from "hardhat/config";

import "@matterlabs/hardhat-zksync-solc";
import "@matterlabs/hardhat-zksync-verify";

export const zkSyncTestnet = process.env.NODE_ENV == "test"
? {
    url: "http://127.0.0.1:8011",
    ethNetwork: "http://127.0.0.1:8045",
    zksync: true,
  }
: {
    url: "https://sepolia.era.zksync.dev",
    ethNetwork: "sepolia",
    zksync: true,
    verifyURL: "https://explorer.sepolia.era.zksync.dev/contract_verification"
  };

export const zkSyncMainnet = {
    url: "https://mainnet.era.zksync.io",
    ethNetwork: "mainnet",
    zksync: true,
    verifyURL: "https://zksync2-mainnet-explorer.zksync.io/contract_verification"
  };

const config: HardhatUserConfig = {
  zksolc: {
    version: "1.3.13",
    settings: {},
  },
  defaultNetwork: "zkSyncTestnet",
  networks: {
    hardhat: {
      zksync: false,
    },
    zkSyncTestnet,
    zkSyncMainnet,
  },
  solidity: {
    version: "0.8.17",
  },
};

export default config;
'''


def nested_settings(depth: int) -> dict:
    """ A settings tree with a mapping nested `depth` levels deep,
        built without recursion """
    settings: dict = {}
    node = settings
    for _ in range(depth):
        node['inner'] = {}
        node = node['inner']
    return settings
