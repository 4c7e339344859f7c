"""Unit tests for enums in constants/enums.py."""

from __future__ import annotations

import pytest

from pulsarhawk.constants.enums import AuthType, ControlEvent, ResourceKind, SelectedPanel


@pytest.mark.unit
class TestResourceKind:
    def test_members(self) -> None:
        assert [kind.value for kind in ResourceKind] == [
            "tenants",
            "namespaces",
            "topics",
            "subscriptions",
            "consumers",
            "messages",
        ]


@pytest.mark.unit
class TestControlEvent:
    def test_values_unique(self) -> None:
        values = [event.value for event in ControlEvent]
        assert len(values) == len(set(values))

    def test_terminate_present(self) -> None:
        assert ControlEvent("terminate") is ControlEvent.TERMINATE


@pytest.mark.unit
class TestSelectedPanel:
    def test_two_panels(self) -> None:
        assert {panel.value for panel in SelectedPanel} == {"list", "preview"}


@pytest.mark.unit
class TestAuthType:
    def test_values_match_config_discriminator(self) -> None:
        assert {auth.value for auth in AuthType} == {"none", "token", "oauth"}
