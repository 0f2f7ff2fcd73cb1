"""
Patterns, template repositories and configuration constants
"""

import re

# Declaration header: `contract <Name> is <CapabilityList> {`
# Matched against comment/string-masked text, so `[^{;]` cannot be fooled
# by braces inside literals. Must start a line; `abstract contract` and
# `library` never match.
DECLARATION_PATTERN = re.compile(
    r"^[ \t]*contract\s+([A-Za-z_$][\w$]*)\s+is\s+([^{;]+?)\s*\{",
    re.MULTILINE
)

IMPORT_PATTERN = re.compile(r"^[ \t]*import\b[^;]*;", re.MULTILINE)

# Leading identifier of a capability specifier, e.g. `ERC721("A", "B")` -> `ERC721`
CAPABILITY_NAME_PATTERN = re.compile(r"[A-Za-z_$][\w$.]*")

DERIVED_NAME_PREFIX = "Updated"
DEFAULT_EXTENSION = ".sol"
DEFAULT_CONTRACTS_DIR = "contracts"

# Boilerplate repositories cloned by `opal init`
TEMPLATE_REPOS = {
    "gemston": "https://github.com/mehdi-defiesta/gem-nft-contract-template.git",
    "erc721": "https://github.com/mehdi-defiesta/newERC721-template.git",
    "erc404": "https://github.com/mehdi-defiesta/newERC721-template.git",
    "link-erc721": "https://github.com/mehdi-defiesta/newERC721-template.git",
}

TEMPLATE_DESCRIPTIONS = {
    "gemston": "Create a new GemSTON web3 game backed by WSTON",
    "erc721": "Create a new ERC721 token backed to WSTON",
    "erc404": "Create a new ERC404 token backed to WSTON",
    "link-erc721": "Link an existing ERC721 token to WSTON",
}

# Deployment
HARDHAT_COMMAND = ["npx", "hardhat"]
NETWORK_ENV_VAR = "OPAL_NETWORK"
DEFAULT_NETWORK = "hardhat"
DEPLOY_TIMEOUT = 600
