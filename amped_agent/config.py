import os
import json
from dotenv import load_dotenv

from amped_agent.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

# --- Sonic Configuration ---
SONIC_RPC_URL = os.getenv("SONIC_RPC_URL", "https://rpc.soniclabs.com")
SONIC_CHAIN_ID = int(os.getenv("SONIC_CHAIN_ID", 146))
RPC_TIMEOUT = int(os.getenv("RPC_TIMEOUT", 30))

# --- Contract Addresses ---
REWARD_TRACKER_ADDRESS = os.getenv("REWARD_TRACKER_ADDRESS", "")
REWARD_DISTRIBUTOR_ADDRESS = os.getenv("REWARD_DISTRIBUTOR_ADDRESS", "")

CONTRACT_ADDRESSES = {
    "sonic": {
        "REWARD_TRACKER": REWARD_TRACKER_ADDRESS,
        "REWARD_DISTRIBUTOR": REWARD_DISTRIBUTOR_ADDRESS,
    }
}

RPC_URLS = {
    SONIC_CHAIN_ID: SONIC_RPC_URL,
}

# --- Reward Math ---
SECONDS_PER_YEAR = 31_536_000
PRECISION = 10**30

ABI_DIR = os.path.join(os.path.dirname(__file__), "abi")


def load_abi(filename):
    """Loads a contract ABI from the abi directory."""
    path = os.path.join(ABI_DIR, filename)
    with open(path, "r") as f:
        return json.load(f)["abi"]


def get_contract_address(network, name):
    """Returns the configured address for a named contract, or raises if it is unset."""
    address = CONTRACT_ADDRESSES.get(network, {}).get(name)
    if not address:
        env_name = f"{name}_ADDRESS"
        raise ConfigurationError(f"{env_name} is not configured for {network}")
    return address
