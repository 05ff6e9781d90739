"""Core layer — pure declarations and lookups.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from solcmd.core.clusters import CLUSTER_URLS, DEFAULT_ENV, is_known_cluster, resolve_rpc_url
from solcmd.core.models import Argument, StandardOptions

__all__: list[str] = [
    "Argument",
    "CLUSTER_URLS",
    "DEFAULT_ENV",
    "StandardOptions",
    "is_known_cluster",
    "resolve_rpc_url",
]
