"""Chain name resolution and web3 provider/contract factories."""
from typing import Dict, Optional

from aiohttp import ClientTimeout
from web3 import AsyncWeb3, Web3

from amped_agent import config
from amped_agent.errors import UnsupportedNetworkError

NETWORKS = {
    "SONIC": "sonic",
}

# Chain names the tool SDK recognizes; only Sonic is served by this agent.
CHAIN_IDS = {
    "ethereum": 1,
    "optimism": 10,
    "bsc": 56,
    "polygon": 137,
    NETWORKS["SONIC"]: config.SONIC_CHAIN_ID,
    "base": 8453,
    "arbitrum": 42161,
    "avalanche": 43114,
}

_providers: Dict[int, AsyncWeb3] = {}


def get_chain_from_name(chain_name: str) -> Optional[int]:
    if not isinstance(chain_name, str):
        return None
    return CHAIN_IDS.get(chain_name)


def get_provider(chain_id: int) -> AsyncWeb3:
    """Returns a cached AsyncWeb3 client for the chain's configured RPC endpoint."""
    if chain_id in _providers:
        return _providers[chain_id]

    rpc_url = config.RPC_URLS.get(chain_id)
    if not rpc_url:
        raise UnsupportedNetworkError(f"No RPC endpoint configured for chain {chain_id}")

    w3 = AsyncWeb3(
        AsyncWeb3.AsyncHTTPProvider(
            rpc_url,
            request_kwargs={"timeout": ClientTimeout(total=config.RPC_TIMEOUT)},
        )
    )
    _providers[chain_id] = w3
    return w3


def get_contract(provider, address: str, abi_file: str):
    """Binds a bundled ABI to a checksummed contract address on the given provider."""
    checksum_address = Web3.to_checksum_address(address)
    return provider.eth.contract(address=checksum_address, abi=config.load_abi(abi_file))
