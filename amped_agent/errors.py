class AmpedAgentError(Exception):
    """Base class for errors raised by the Amped agent helpers."""


class UnsupportedNetworkError(AmpedAgentError):
    """The requested network is unknown or not served by this agent."""


class ConfigurationError(AmpedAgentError):
    """A contract address or RPC endpoint is missing from the environment."""


class AprCalculationError(AmpedAgentError, ValueError):
    """The on-chain values cannot produce a meaningful APR."""


class ZeroSupplyError(AprCalculationError):
    def __init__(self):
        super().__init__("ALP total supply is zero, APR is undefined")
