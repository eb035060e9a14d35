from __future__ import annotations

import re

PCI_ADDRESS_RE = re.compile(r"^([0-9a-fA-F]{4}):([0-9a-fA-F]{2}):([0-9a-fA-F]{2})\.([0-7])$")


def parse_pci_address(address: str) -> tuple[str, str, str, str]:
    """Split ``domain:bus:slot.function`` into its four hex components."""
    m = PCI_ADDRESS_RE.fullmatch(address)
    if not m:
        raise ValueError(f"failed to parse pci address {address}")
    return m.group(1), m.group(2), m.group(3), m.group(4)
