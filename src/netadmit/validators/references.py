from netadmit.core.field_path import FieldPath
from netadmit.core.model import CauseType, ValidationCause
from netadmit.spec.schema import WorkloadSpec
from netadmit.validators.base import interface_path, make_cause, network_path

NOT_FOUND_MESSAGE = "{path} '{name}' not found."


def validate_networks_assigned_to_interfaces(field: FieldPath, spec: WorkloadSpec) -> list[ValidationCause]:
    causes: list[ValidationCause] = []
    interface_names = {iface.name for iface in spec.interfaces}
    for i, network in enumerate(spec.networks):
        if network.name not in interface_names:
            path = network_path(field, i).child("name")
            message = NOT_FOUND_MESSAGE.format(path=path, name=network.name)
            causes.append(make_cause(CauseType.REQUIRED, message, path))
    return causes


def validate_interfaces_assigned_to_networks(field: FieldPath, spec: WorkloadSpec) -> list[ValidationCause]:
    causes: list[ValidationCause] = []
    network_names = {network.name for network in spec.networks}
    for idx, iface in enumerate(spec.interfaces):
        if iface.name not in network_names:
            path = interface_path(field, idx).child("name")
            message = NOT_FOUND_MESSAGE.format(path=path, name=iface.name)
            causes.append(make_cause(CauseType.INVALID, message, path))
    return causes
