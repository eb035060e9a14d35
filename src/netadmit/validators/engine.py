from __future__ import annotations

import logging

from netadmit.core.field_path import FieldPath
from netadmit.core.model import ValidationCause
from netadmit.core.registry import CheckRegistry
from netadmit.spec.schema import WorkloadSpec
from netadmit.validators.interface_fields import validate_interfaces_fields
from netadmit.validators.references import (
    validate_interfaces_assigned_to_networks,
    validate_networks_assigned_to_interfaces,
)
from netadmit.validators.uniqueness import validate_interface_name_unique, validate_network_name_unique

log = logging.getLogger(__name__)


def build_default_registry() -> CheckRegistry:
    registry = CheckRegistry()
    registry.register("networks-assigned-to-interfaces", validate_networks_assigned_to_interfaces)
    registry.register("interfaces-assigned-to-networks", validate_interfaces_assigned_to_networks)
    registry.register("network-name-unique", validate_network_name_unique)
    registry.register("interface-name-unique", validate_interface_name_unique)
    registry.register("interface-fields", validate_interfaces_fields)
    return registry


DEFAULT_REGISTRY = build_default_registry()


def validate_networks(
    field: FieldPath,
    spec: WorkloadSpec,
    registry: CheckRegistry | None = None,
) -> list[ValidationCause]:
    """Run every registered network check over ``spec``.

    Causes are concatenated in registration order. Nothing is raised for
    bad data; an empty list means the networks and interfaces are consistent.
    """
    out: list[ValidationCause] = []
    if registry is None:
        registry = DEFAULT_REGISTRY
    for name, check in registry:
        causes = check(field, spec)
        log.debug("check %s produced %d cause(s)", name, len(causes))
        out.extend(causes)
    return out
