"""
State Fetcher — one-shot read of a deployed Safe

Two read-only calls against the Safe: getOwners() and getThreshold(). This is
the only blocking step of a run. Any failure aborts the run with
StateFetchError; nothing is retried.
"""

import functools
import logging
from typing import Any, Callable, Optional, Protocol, Sequence

import pydantic
from eth_utils import to_checksum_address
from web3 import Web3

from safe_owner_sync.core.domain.safe_state import SafeState
from safe_owner_sync.core.errors import StateFetchError
from safe_owner_sync.fetcher.endpoints import EndpointResolver, FetcherConfig, alchemy_endpoint

logger = logging.getLogger(__name__)


# Minimal Safe ABI
SAFE_ABI = [
    {
        "inputs": [],
        "name": "getOwners",
        "outputs": [{"internalType": "address[]", "name": "", "type": "address[]"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getThreshold",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]


class SafeStateFetcher(Protocol):
    """Anything able to read the current owners and threshold of a Safe."""

    def fetch(self, safe_address: str) -> SafeState:
        ...


def build_safe_state(owners: Sequence[Any], threshold: Any) -> SafeState:
    """
    SafeState from raw call results.

    Raises:
        StateFetchError: If the Safe returned data that cannot be a valid
            owner configuration
    """
    try:
        return SafeState(
            owners=tuple(to_checksum_address(owner) for owner in owners),
            threshold=int(threshold),
        )
    except (pydantic.ValidationError, ValueError, TypeError) as e:
        raise StateFetchError(f"Safe returned an invalid owner configuration: {e}") from e


class StaticStateFetcher:
    """In-memory fetcher returning a fixed state, for offline runs and tests."""

    def __init__(self, owners: Sequence[str], threshold: int):
        self._state = build_safe_state(owners, threshold)

    def fetch(self, safe_address: str) -> SafeState:
        return self._state


class Web3SafeStateFetcher:
    """
    Reads a Safe over JSON-RPC with web3.

    Args:
        chain_id: Chain the Safe is deployed on
        api_key: Provider API key handed to the endpoint resolver
        endpoint_resolver: (chain_id, api_key) -> RPC URL; defaults to
            alchemy_endpoint bound to config
        config: Connection settings
        web3_factory: url -> Web3 instance; defaults to an HTTPProvider
    """

    def __init__(
        self,
        chain_id: str,
        api_key: str,
        endpoint_resolver: Optional[EndpointResolver] = None,
        config: Optional[FetcherConfig] = None,
        web3_factory: Optional[Callable[[str], Any]] = None,
    ):
        self.chain_id = str(chain_id)
        self.api_key = api_key
        self.config = config or FetcherConfig()
        self.endpoint_resolver = endpoint_resolver or functools.partial(alchemy_endpoint, config=self.config)
        self._web3_factory = web3_factory or self._http_web3

    def _http_web3(self, url: str) -> Web3:
        provider = Web3.HTTPProvider(url, request_kwargs={"timeout": self.config.request_timeout_sec})
        return Web3(provider)

    def fetch(self, safe_address: str) -> SafeState:
        """
        Read owners and threshold.

        Raises:
            ValidationError: If no endpoint exists for the chain
            StateFetchError: If either call fails or returns invalid data
        """
        url = self.endpoint_resolver(self.chain_id, self.api_key)
        logger.info("Reading Safe %s on chain %s", safe_address, self.chain_id)

        try:
            w3 = self._web3_factory(url)
            safe = w3.eth.contract(address=safe_address, abi=SAFE_ABI)
            owners = safe.functions.getOwners().call()
            threshold = safe.functions.getThreshold().call()
        except Exception as e:
            raise StateFetchError(f"Failed to read Safe {safe_address}: {e}") from e

        state = build_safe_state(owners, threshold)
        logger.info("Safe %s has %d owner(s), threshold %d", safe_address, len(state.owners), state.threshold)
        return state
