"""Unit tests for Permission and the domain registry."""

from uuid import uuid4

from accessperm.domain.value_objects import (
    ACCESS_INFO_DOMAIN,
    KNOWN_DOMAINS,
    Action,
    Permission,
    get_domain,
)


class TestImplies:
    """Tests for Permission.implies wildcard matching."""

    def test_all_permission_implies_everything(self) -> None:
        required = Permission(domain="device", action=Action.WRITE, target_scope_id=uuid4())
        assert Permission().implies(required)

    def test_exact_match(self) -> None:
        scope = uuid4()
        p = Permission(domain="device", action=Action.READ, target_scope_id=scope)
        assert p.implies(Permission(domain="device", action=Action.READ, target_scope_id=scope))

    def test_domain_mismatch(self) -> None:
        assert not Permission(domain="user").implies(Permission(domain="device"))

    def test_action_mismatch(self) -> None:
        held = Permission(domain="device", action=Action.READ)
        assert not held.implies(Permission(domain="device", action=Action.WRITE))

    def test_scope_mismatch(self) -> None:
        held = Permission(domain="device", target_scope_id=uuid4())
        assert not held.implies(Permission(domain="device", target_scope_id=uuid4()))

    def test_specific_does_not_imply_wildcard(self) -> None:
        """Holding one scope is not enough for a grant over every scope."""
        held = Permission(domain="device", action=Action.READ, target_scope_id=uuid4())
        assert not held.implies(Permission(domain="device", action=Action.READ))

    def test_group_restricts(self) -> None:
        group = uuid4()
        held = Permission(domain="device", group_id=group)
        assert held.implies(Permission(domain="device", group_id=group))
        assert not held.implies(Permission(domain="device"))


def test_str_uses_wildcards() -> None:
    scope = uuid4()
    assert str(Permission()) == "*:*:*:*"
    assert str(Permission(domain="device", action=Action.READ, target_scope_id=scope)) == (
        f"device:read:{scope}:*"
    )


def test_permission_is_hashable_value() -> None:
    scope = uuid4()
    a = Permission(domain="device", action=Action.READ, target_scope_id=scope)
    b = Permission(domain="device", action=Action.READ, target_scope_id=scope)
    assert a == b
    assert len({a, b}) == 1


def test_access_info_domain_registered() -> None:
    assert get_domain("access_info") is ACCESS_INFO_DOMAIN
    assert ACCESS_INFO_DOMAIN.actions == {Action.READ, Action.WRITE, Action.DELETE}
    assert get_domain("unknown") is None


def test_device_domain_groupable() -> None:
    device = KNOWN_DOMAINS["device"]
    assert device.groupable
    assert device.supports(Action.CONNECT)
    assert not ACCESS_INFO_DOMAIN.groupable
