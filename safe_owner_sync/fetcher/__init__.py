"""
State fetching — reading the deployed Safe.
"""

from .endpoints import ALCHEMY_NETWORKS, EndpointResolver, FetcherConfig, alchemy_endpoint
from .state_fetcher import (
    SAFE_ABI,
    SafeStateFetcher,
    StaticStateFetcher,
    Web3SafeStateFetcher,
    build_safe_state,
)

__all__ = [
    "ALCHEMY_NETWORKS",
    "EndpointResolver",
    "FetcherConfig",
    "alchemy_endpoint",
    "SAFE_ABI",
    "SafeStateFetcher",
    "StaticStateFetcher",
    "Web3SafeStateFetcher",
    "build_safe_state",
]
