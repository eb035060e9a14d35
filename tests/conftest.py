import pytest

from netadmit.core.field_path import FieldPath
from netadmit.spec.schema import Devices, Domain, Interface, Network, WorkloadSpec


def make_spec(networks: list[str], interfaces: list[Interface | str]) -> WorkloadSpec:
    ifaces = [Interface(name=i) if isinstance(i, str) else i for i in interfaces]
    return WorkloadSpec(
        networks=[Network(name=n) for n in networks],
        domain=Domain(devices=Devices(interfaces=ifaces)),
    )


@pytest.fixture
def field() -> FieldPath:
    return FieldPath.root("fake")


@pytest.fixture
def spec_factory():
    return make_spec
