from netadmit.core.field_path import FieldPath
from netadmit.core.model import CauseType, ValidationCause


def make_cause(cause_type: CauseType, message: str, path: FieldPath) -> ValidationCause:
    return ValidationCause(type=cause_type, message=message, field=str(path))


def network_path(field: FieldPath, idx: int) -> FieldPath:
    return field.child("networks").index(idx)


def interface_path(field: FieldPath, idx: int) -> FieldPath:
    return field.child("domain", "devices", "interfaces").index(idx)
