# --------------------------------------------------------------------------
# tests/conftest.py
# --------------------------------------------------------------------------
"""
Shared stubs for the ALP APR tests. No network access: every contract read
goes through DummyProvider, which records what was called.

Run with:

    pytest -v
"""
import pytest

from amped_agent import config

REWARD_TRACKER = "0x" + "11" * 20
REWARD_DISTRIBUTOR = "0x" + "22" * 20
ACCOUNT = "0x" + "ab" * 20


class DummyCall:
    """A prepared contract call; an exception value is raised on call()."""

    def __init__(self, log, name, value):
        self._log = log
        self._name = name
        self._value = value

    async def call(self):
        self._log.append(self._name)
        if isinstance(self._value, BaseException):
            raise self._value
        return self._value


class DummyFunctions:
    def __init__(self, log, reads):
        self._log = log
        self._reads = reads

    def __getattr__(self, name):
        if name.startswith("_") or name not in self._reads:
            raise AttributeError(name)
        return lambda *args: DummyCall(self._log, name, self._reads[name])


class DummyContract:
    def __init__(self, address, functions):
        self.address = address
        self.functions = functions


class DummyEth:
    def __init__(self, provider):
        self._provider = provider

    def contract(self, address, abi):
        self._provider.bound.append((address, tuple(entry["name"] for entry in abi)))
        reads = self._provider.contracts.get(address.lower(), {})
        return DummyContract(address, DummyFunctions(self._provider.reads, reads))

    @property
    def block_number(self):
        async def _block_number():
            return self._provider.latest_block
        return _block_number()


class DummyProvider:
    """Implements the slice of AsyncWeb3 the agent touches."""

    def __init__(self, total_supply=1_000_000, tokens_per_interval=1, connected=True):
        self.contracts = {
            REWARD_TRACKER: {"totalSupply": total_supply},
            REWARD_DISTRIBUTOR: {"tokensPerInterval": tokens_per_interval},
        }
        self.reads = []
        self.bound = []
        self.connected = connected
        self.latest_block = 4_200_000
        self.eth = DummyEth(self)

    async def is_connected(self):
        return self.connected


class ProviderFactory:
    """get_provider stand-in that remembers the chain ids it was asked for."""

    def __init__(self, provider):
        self.provider = provider
        self.chain_ids = []

    def __call__(self, chain_id):
        self.chain_ids.append(chain_id)
        return self.provider


@pytest.fixture
def configured_contracts(monkeypatch):
    monkeypatch.setitem(config.CONTRACT_ADDRESSES["sonic"], "REWARD_TRACKER", REWARD_TRACKER)
    monkeypatch.setitem(config.CONTRACT_ADDRESSES["sonic"], "REWARD_DISTRIBUTOR", REWARD_DISTRIBUTOR)


@pytest.fixture
def provider():
    return DummyProvider()
