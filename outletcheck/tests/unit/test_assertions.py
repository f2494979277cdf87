from __future__ import annotations

from outletcheck.adapters.attribute_lookup import MappingLookup
from outletcheck.assertions import (
    action,
    any_outlet,
    current_collector,
    outlet,
    typed_outlet,
    use_collector,
)
from outletcheck.domain.failures import FailureCollector, FailureKind
from outletcheck.tests.unit.helpers import (
    BarButtonItemStub,
    EditorController,
    LabelStub,
    bag_controller,
)


def test_outlet_check_is_curried_over_controller() -> None:
    controller = EditorController()
    failures = FailureCollector()
    check = outlet(controller, failures)

    assert check("title_label") is controller.title_label
    assert check("title_label", LabelStub) is controller.title_label
    assert check("missing") is None
    assert failures.messages() == ["missing outlet was None"]


def test_typed_outlet_applies_its_type() -> None:
    controller = EditorController()
    failures = FailureCollector()
    bar_button_item_outlet = typed_outlet(BarButtonItemStub)

    check = bar_button_item_outlet(controller, failures)

    assert check("save_button") is controller.save_button
    assert check("title_label") is None
    assert [f.kind for f in failures] == [FailureKind.TYPE_MISMATCH]


def test_any_outlet_skips_type_check() -> None:
    failures = FailureCollector()

    assert any_outlet(EditorController(), failures)("preview") is not None
    assert len(failures) == 0


def test_outlet_with_mapping_lookup() -> None:
    label = LabelStub()
    failures = FailureCollector()
    check = outlet(bag_controller({"title": label}), failures, lookup=MappingLookup("widgets"))

    assert check("title", LabelStub) is label
    assert len(failures) == 0


def test_action_check_reports_every_problem() -> None:
    failures = FailureCollector()
    check = action(EditorController(), failures)

    check("save_tapped", from_="save_button")
    check("slider_moved", from_="slider")
    check("title_tapped", from_="title_label")

    assert [f.kind for f in failures] == [
        FailureKind.UNHANDLED_CONTROL,
        FailureKind.TARGET_MISMATCH,
        FailureKind.HANDLER_MISSING,
    ]


def test_checks_default_to_ambient_collector() -> None:
    own = FailureCollector()

    with use_collector(own):
        assert current_collector() is own
        outlet(EditorController())("missing")
        action(EditorController())("save_tapped", from_="cancel_button")

    assert [f.kind for f in own] == [FailureKind.MISSING_OUTLET, FailureKind.HANDLER_MISMATCH]


def test_nested_collectors_restore_outer(wiring: FailureCollector) -> None:
    inner = FailureCollector()

    assert current_collector() is wiring
    with use_collector(inner):
        assert current_collector() is inner
    assert current_collector() is wiring


def test_check_exposes_its_collector() -> None:
    failures = FailureCollector()

    check = outlet(EditorController(), failures)

    assert check.failures is failures
