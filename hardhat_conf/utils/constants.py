import platform


""" Constant definitions across the whole program """
PROJECT_VERSION: str = '0.1.0'
CONFIGURATION_FILE_NAME: str = 'hardhat.config.ts'

""" Versions used when the caller doesn't provide its own ones """
DEFAULT_ZKSOLC_VERSION: str = '1.3.13'
DEFAULT_SOLIDITY_VERSION: str = '0.8.17'

""" Retrieves the OS available info """
OS = platform.system()
OS_release = platform.release()
OS_architecture = platform.architecture()[0]
OS_arch_linkage = platform.architecture()[1]


""" Static part of the generated file. Declares the zkSync network presets """
HARDHAT_CONFIG_PREFIX: str = '''
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
'''

""" Templated part of the generated file, filled with `string.Template` """
HARDHAT_CONFIG_BODY: str = '''
const config: HardhatUserConfig = {
  zksolc: {
    version: "$compiler_version",
    settings: $compiler_settings,
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
    version: "$language_version",
  },
};

export default config;
'''

HARDHAT_CONFIG_TEMPLATE: str = HARDHAT_CONFIG_PREFIX + HARDHAT_CONFIG_BODY

# Indentation of the `settings` property inside the `zksolc` block
SETTINGS_BASE_INDENT: int = 4
SETTINGS_INDENT_STEP: int = 2
