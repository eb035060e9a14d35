import pytest

from netadmit.hardware.mac import parse_mac
from netadmit.hardware.pci import parse_pci_address


@pytest.mark.parametrize(
    "address, length",
    [
        ("de:ad:be:ef:00:01", 6),
        ("DE-AD-BE-EF-00-01", 6),
        ("0000.5e00.5301", 6),
        ("02:00:5e:10:00:00:00:01", 8),
        ("0200.5e10.0000.0001", 8),
        ("00:00:00:00:fe:80:00:00:00:00:00:00:02:00:5e:10:00:00:00:01", 20),
    ],
)
def test_parse_mac_accepts(address: str, length: int) -> None:
    assert len(parse_mac(address)) == length


@pytest.mark.parametrize(
    "address",
    ["not-a-mac", "de:ad:be:ef:00", "de:ad:be:ef:00-01", "zz:ad:be:ef:00:01", "de:ad:be:ef:00:01:02"],
)
def test_parse_mac_rejects(address: str) -> None:
    with pytest.raises(ValueError):
        parse_mac(address)


def test_parse_mac_value() -> None:
    assert parse_mac("de:ad:be:ef:00:01") == bytes.fromhex("deadbeef0001")


def test_parse_pci_address() -> None:
    assert parse_pci_address("0000:00:1f.2") == ("0000", "00", "1f", "2")


@pytest.mark.parametrize("address", ["zz:00:00.0", "0000:00:1f.8", "0000:00:1f", "0000:00:1f.2\n"])
def test_parse_pci_address_rejects(address: str) -> None:
    with pytest.raises(ValueError):
        parse_pci_address(address)
