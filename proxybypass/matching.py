#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NO_PROXY matching

Hostname extraction plus the hostname, domain suffix and IPv4 CIDR rules
used to decide whether a target bypasses the proxy.
"""
import re
from typing import Optional
from urllib.parse import urlsplit

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)

MAX_PREFIX = 32
FULL_MASK = 0xFFFFFFFF


def _parse_hostname(url: str) -> Optional[str]:
    """Return the URL's hostname, or None if it cannot be parsed."""
    try:
        return urlsplit(url).hostname or None
    except ValueError:
        # e.g. unbalanced IPv6 brackets
        return None


def extract_hostname(target: str) -> str:
    """
    Best-effort hostname for a URL or bare host[:port].

    Args:
        target: Full http(s) URL or a scheme-less host with optional port

    Returns:
        Lower-cased hostname, or the whole lower-cased input when no
        hostname can be parsed out of it
    """
    url = target if _SCHEME_RE.match(target) else f"http://{target}"
    # http(s) URLs treat a backslash like "/"
    url = url.replace("\\", "/")
    hostname = _parse_hostname(url)
    if hostname is None:
        return target.lower()
    return hostname.lower()


def ip_to_int(ip: str) -> Optional[int]:
    """Decode a dotted-quad IPv4 address to an unsigned 32-bit int."""
    parts = ip.split(".")
    if len(parts) != 4:
        return None

    result = 0
    for part in parts:
        if not part.isdigit() or not part.isascii():
            return None
        num = int(part)
        if num > 255:
            return None
        result = (result << 8) | num
    return result


def prefix_mask(prefix: int) -> int:
    if prefix == 0:
        return 0
    return (FULL_MASK << (MAX_PREFIX - prefix)) & FULL_MASK


def matches_cidr(hostname: str, cidr: str) -> bool:
    """Check whether an IPv4 hostname lies in a network/prefix range.

    Invalid ranges and non-IPv4 hostnames never match.
    """
    parts = cidr.split("/")
    if len(parts) < 2:
        return False
    # anything after a second "/" is ignored
    network, prefix_str = parts[0], parts[1]
    if not prefix_str.isdigit() or not prefix_str.isascii():
        return False
    prefix = int(prefix_str)
    if prefix > MAX_PREFIX:
        return False

    network_int = ip_to_int(network)
    host_int = ip_to_int(hostname)
    if network_int is None or host_int is None:
        return False

    mask = prefix_mask(prefix)
    return (network_int & mask) == (host_int & mask)


def matches(hostname: str, entry: str) -> bool:
    """
    Check a lower-cased hostname against one normalized NO_PROXY entry.

    "example.com" and ".example.com" are equivalent: both match the domain
    itself and any subdomain, but never "notexample.com".
    """
    if "/" in entry:
        return matches_cidr(hostname, entry)

    if hostname == entry:
        return True

    dotted = entry if entry.startswith(".") else "." + entry
    return hostname.endswith(dotted)
