"""Known Solana cluster names and their public RPC endpoints.

Pure lookup tables — no I/O, no network access.  The ``--env`` option
accepts any string; these tables only provide a fallback RPC URL when
``--rpc-url`` is omitted for a well-known cluster.
"""

from __future__ import annotations

DEFAULT_ENV: str = "devnet"
"""Cluster used when ``--env`` is not supplied."""

CLUSTER_URLS: dict[str, str] = {
    "mainnet-beta": "https://api.mainnet-beta.solana.com",
    "testnet": "https://api.testnet.solana.com",
    "devnet": "https://api.devnet.solana.com",
}


def is_known_cluster(env: str) -> bool:
    return env in CLUSTER_URLS


def resolve_rpc_url(env: str, rpc_url: str | None = None) -> str | None:
    """Return the RPC URL a command should talk to.

    An explicit *rpc_url* always wins.  Otherwise the public endpoint of a
    known cluster is returned, or ``None`` for custom environment names.
    """
    if rpc_url:
        return rpc_url
    return CLUSTER_URLS.get(env)
