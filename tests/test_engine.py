from netadmit.core.field_path import FieldPath
from netadmit.core.model import CauseType
from netadmit.spec.schema import Interface
from netadmit.validators.engine import validate_networks


def test_valid_spec_has_no_causes(spec_factory) -> None:
    spec = spec_factory(
        ["default", "blue"],
        [Interface(name="default", model="virtio", mac_address="de:ad:be:ef:00:01"), Interface(name="blue")],
    )
    assert validate_networks(FieldPath.root("spec"), spec) == []


def test_duplicate_interface_for_single_network(spec_factory) -> None:
    spec = spec_factory(["net1"], ["net1", "net1"])
    causes = validate_networks(FieldPath.root("spec"), spec)
    assert len(causes) == 1
    assert causes[0].type == CauseType.DUPLICATE
    assert causes[0].field == "spec.domain.devices.interfaces[1].name"


def test_causes_follow_check_order(spec_factory) -> None:
    spec = spec_factory(["a", "a", "missing"], ["a", "orphan", "bad name"])
    causes = validate_networks(FieldPath.root("spec", "template", "spec"), spec)
    assert [(c.type, c.field) for c in causes] == [
        (CauseType.REQUIRED, "spec.template.spec.networks[2].name"),
        (CauseType.INVALID, "spec.template.spec.domain.devices.interfaces[1].name"),
        (CauseType.INVALID, "spec.template.spec.domain.devices.interfaces[2].name"),
        (CauseType.DUPLICATE, "spec.template.spec.networks[1].name"),
        (CauseType.INVALID, "spec.template.spec.domain.devices.interfaces[2].name"),
    ]


def test_input_is_left_untouched(spec_factory) -> None:
    spec = spec_factory(["a"], ["a", "a"])
    before = repr(spec)
    validate_networks(FieldPath.root("spec"), spec)
    assert repr(spec) == before
