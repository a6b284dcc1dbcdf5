"""
RPC endpoint resolution

Maps a chain id to a read endpoint. Resolution is a plain function injected
into the fetcher, so callers can swap in their own provider without touching
global state.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Final

from safe_owner_sync.core.errors import ValidationError

# (chain_id, api_key) -> endpoint URL
EndpointResolver = Callable[[str, str], str]


ALCHEMY_NETWORKS: Final[Dict[str, str]] = {
    "1": "eth-mainnet",
    "11155111": "eth-sepolia",
    "17000": "eth-holesky",
    "10": "opt-mainnet",
    "11155420": "opt-sepolia",
    "137": "polygon-mainnet",
    "80002": "polygon-amoy",
    "42161": "arb-mainnet",
    "421614": "arb-sepolia",
    "8453": "base-mainnet",
    "84532": "base-sepolia",
}


@dataclass(frozen=True)
class FetcherConfig:
    """Connection settings for the state read."""

    endpoint_template: str = "https://{network}.g.alchemy.com/v2/{api_key}"
    request_timeout_sec: float = 30.0


def alchemy_endpoint(chain_id: str, api_key: str, config: FetcherConfig = FetcherConfig()) -> str:
    """
    Alchemy JSON-RPC URL for a chain.

    Raises:
        ValidationError: If the chain is not served or the key is empty
    """
    network = ALCHEMY_NETWORKS.get(str(chain_id))
    if network is None:
        raise ValidationError(f"No Alchemy network known for chain id {chain_id}")
    if not api_key:
        raise ValidationError("Missing Alchemy API key")
    return config.endpoint_template.format(network=network, api_key=api_key)
