"""Proxy propagation for subprocesses.

Child processes (apt-get, flatpak, curl, install scripts) inherit proxy
settings from here. Lowercase variables take precedence over uppercase
ones, and both forms are exported so every tool finds the value it
looks for.
"""

import os

# (lowercase, uppercase) variable pairs that are propagated
_PROXY_VARS: tuple[tuple[str, str], ...] = (
    ("http_proxy", "HTTP_PROXY"),
    ("https_proxy", "HTTPS_PROXY"),
    ("no_proxy", "NO_PROXY"),
)


def _lookup(lower: str, upper: str) -> str:
    return os.environ.get(lower) or os.environ.get(upper) or ""


def get_proxy_env() -> dict[str, str]:
    """Return proxy variables to merge into a subprocess environment.

    Returns:
        Mapping with both lowercase and uppercase names for every proxy
        variable that is set. Empty if no proxy is configured.
    """
    env: dict[str, str] = {}
    for lower, upper in _PROXY_VARS:
        value = _lookup(lower, upper)
        if value:
            env[lower] = value
            env[upper] = value
    return env


def apt_proxy_args() -> list[str]:
    """Return apt-get ``-o`` options that configure the proxy.

    apt-get reads its proxy from configuration rather than the
    environment when run through sudo, so the value is passed explicitly.
    """
    args: list[str] = []

    http_proxy = _lookup("http_proxy", "HTTP_PROXY")
    if http_proxy:
        args.extend(["-o", f"Acquire::http::Proxy={http_proxy}"])

    https_proxy = _lookup("https_proxy", "HTTPS_PROXY")
    if https_proxy:
        args.extend(["-o", f"Acquire::https::Proxy={https_proxy}"])

    return args
