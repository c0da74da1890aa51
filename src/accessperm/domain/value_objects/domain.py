"""Domains - named categories of protected resources."""

from dataclasses import dataclass

from accessperm.domain.value_objects.action import Action

_CRUD = frozenset({Action.READ, Action.WRITE, Action.DELETE})


@dataclass(frozen=True)
class Domain:
    """Domain with the actions it supports."""

    name: str
    actions: frozenset[Action]
    groupable: bool = False

    def supports(self, action: Action) -> bool:
        return action in self.actions


ACCESS_INFO_DOMAIN = Domain(name="access_info", actions=_CRUD)

KNOWN_DOMAINS: dict[str, Domain] = {
    d.name: d
    for d in (
        ACCESS_INFO_DOMAIN,
        Domain(name="account", actions=_CRUD),
        Domain(name="user", actions=_CRUD),
        Domain(name="role", actions=_CRUD),
        Domain(name="credential", actions=_CRUD),
        Domain(name="group", actions=_CRUD),
        Domain(
            name="device",
            actions=_CRUD | {Action.CONNECT, Action.EXECUTE},
            groupable=True,
        ),
        Domain(
            name="device_management",
            actions=_CRUD | {Action.EXECUTE},
            groupable=True,
        ),
        Domain(name="datastore", actions=frozenset({Action.READ, Action.DELETE})),
        Domain(name="broker", actions=frozenset({Action.CONNECT})),
    )
}


def get_domain(name: str) -> Domain | None:
    """Look up a registered domain by name."""
    return KNOWN_DOMAINS.get(name)
