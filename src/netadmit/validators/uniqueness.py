import json

from netadmit.core.field_path import FieldPath
from netadmit.core.model import CauseType, ValidationCause
from netadmit.spec.schema import WorkloadSpec
from netadmit.validators.base import interface_path, make_cause, network_path

DUPLICATE_INTERFACE_MESSAGE = "Only one interface can be connected to one specific network"


def _quoted(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def validate_network_name_unique(field: FieldPath, spec: WorkloadSpec) -> list[ValidationCause]:
    causes: list[ValidationCause] = []
    seen: set[str] = set()
    for i, network in enumerate(spec.networks):
        if network.name in seen:
            message = (
                f"Network with name {_quoted(network.name)} already exists, "
                "every network must have a unique name"
            )
            causes.append(make_cause(CauseType.DUPLICATE, message, network_path(field, i).child("name")))
        seen.add(network.name)
    return causes


def validate_interface_name_unique(field: FieldPath, spec: WorkloadSpec) -> list[ValidationCause]:
    causes: list[ValidationCause] = []
    seen: set[str] = set()
    for idx, iface in enumerate(spec.interfaces):
        if iface.name in seen:
            causes.append(
                make_cause(CauseType.DUPLICATE, DUPLICATE_INTERFACE_MESSAGE, interface_path(field, idx).child("name"))
            )
        seen.add(iface.name)
    return causes
