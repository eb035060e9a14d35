import re

from netadmit.core.field_path import FieldPath
from netadmit.core.model import CauseType, ValidationCause
from netadmit.hardware.mac import MAC48_LENGTH, parse_mac
from netadmit.hardware.pci import parse_pci_address
from netadmit.spec.schema import Interface, WorkloadSpec
from netadmit.validators.base import interface_path, make_cause

VIRTIO = "virtio"

VALID_INTERFACE_MODELS = frozenset({"e1000", "e1000e", "ne2k_pci", "pcnet", "rtl8139", VIRTIO})

INTERFACE_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def validate_interfaces_fields(field: FieldPath, spec: WorkloadSpec) -> list[ValidationCause]:
    causes: list[ValidationCause] = []
    for idx, iface in enumerate(spec.interfaces):
        causes.extend(validate_interface_name_format(field, idx, iface))
        causes.extend(validate_interface_model(field, idx, iface))
        causes.extend(validate_mac_address(field, idx, iface))
        causes.extend(validate_pci_address(field, idx, iface))
    return causes


def validate_interface_name_format(field: FieldPath, idx: int, iface: Interface) -> list[ValidationCause]:
    if INTERFACE_NAME_RE.fullmatch(iface.name):
        return []
    return [
        make_cause(
            CauseType.INVALID,
            "Network interface name can only contain alphabetical characters, numbers, dashes (-) or underscores (_)",
            interface_path(field, idx).child("name"),
        )
    ]


def validate_interface_model(field: FieldPath, idx: int, iface: Interface) -> list[ValidationCause]:
    if not iface.model or iface.model in VALID_INTERFACE_MODELS:
        return []
    name_path = interface_path(field, idx).child("name")
    return [
        make_cause(
            CauseType.NOT_SUPPORTED,
            f"interface {name_path} uses model {iface.model} that is not supported.",
            interface_path(field, idx).child("model"),
        )
    ]


def validate_mac_address(field: FieldPath, idx: int, iface: Interface) -> list[ValidationCause]:
    causes: list[ValidationCause] = []
    if not iface.mac_address:
        return causes

    name_path = interface_path(field, idx).child("name")
    mac_path = interface_path(field, idx).child("macAddress")
    mac = b""
    try:
        mac = parse_mac(iface.mac_address)
    except ValueError:
        causes.append(
            make_cause(
                CauseType.INVALID,
                f"interface {name_path} has malformed MAC address ({iface.mac_address}).",
                mac_path,
            )
        )
    # checked independently of the parse result
    if len(mac) > MAC48_LENGTH:
        causes.append(
            make_cause(
                CauseType.INVALID,
                f"interface {name_path} has MAC address ({iface.mac_address}) that is too long.",
                mac_path,
            )
        )
    return causes


def validate_pci_address(field: FieldPath, idx: int, iface: Interface) -> list[ValidationCause]:
    if not iface.pci_address:
        return []
    try:
        parse_pci_address(iface.pci_address)
    except ValueError:
        name_path = interface_path(field, idx).child("name")
        return [
            make_cause(
                CauseType.INVALID,
                f"interface {name_path} has malformed PCI address ({iface.pci_address}).",
                interface_path(field, idx).child("pciAddress"),
            )
        ]
    return []
