"""Hardware address parsing.

Accepts the textual forms of IEEE 802 MAC-48, EUI-48, EUI-64 and 20-octet
IP over InfiniBand link-layer addresses::

    00:00:5e:00:53:01
    02:00:5e:10:00:00:00:01
    00:00:00:00:fe:80:00:00:00:00:00:00:02:00:5e:10:00:00:00:01
    00-00-5e-00-53-01
    0000.5e00.5301
"""

from __future__ import annotations

import string

VALID_LENGTHS = frozenset({6, 8, 20})
MAC48_LENGTH = 6

_HEX = frozenset(string.hexdigits)


def _octet(text: str, address: str) -> int:
    if len(text) != 2 or not set(text) <= _HEX:
        raise ValueError(f"invalid MAC address: {address}")
    return int(text, 16)


def parse_mac(address: str) -> bytes:
    if len(address) < 14:
        raise ValueError(f"invalid MAC address: {address}")

    if address[2] in ":-":
        if (len(address) + 1) % 3 != 0:
            raise ValueError(f"invalid MAC address: {address}")
        n = (len(address) + 1) // 3
        if n not in VALID_LENGTHS:
            raise ValueError(f"invalid MAC address: {address}")
        sep = address[2]
        groups = address.split(sep)
        if len(groups) != n:
            raise ValueError(f"invalid MAC address: {address}")
        return bytes(_octet(g, address) for g in groups)

    if address[4] == ".":
        if (len(address) + 1) % 5 != 0:
            raise ValueError(f"invalid MAC address: {address}")
        n = 2 * (len(address) + 1) // 5
        if n not in VALID_LENGTHS:
            raise ValueError(f"invalid MAC address: {address}")
        groups = address.split(".")
        if len(groups) != n // 2 or any(len(g) != 4 for g in groups):
            raise ValueError(f"invalid MAC address: {address}")
        return bytes(_octet(chunk, address) for g in groups for chunk in (g[:2], g[2:]))

    raise ValueError(f"invalid MAC address: {address}")
