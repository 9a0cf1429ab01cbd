"""Fact registration and confinement.

A fact is a named value computed about the host. Each fact declares the
host tags it is confined to; the host evaluates confinement before calling
the resolver, so resolvers assume they run in a valid environment.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cicfacts.core.license_probe import LicenseProbe
from cicfacts.core.platform import Platform

if TYPE_CHECKING:
    from cicfacts.core.context import CicfactsContext

logger = logging.getLogger(__name__)


class UnknownFactError(KeyError):
    """Raised when a fact name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown fact: {self.name}"


@dataclass(frozen=True)
class Fact:
    """A named fact with its confinement and resolver."""

    name: str
    resolve: Callable[["CicfactsContext"], object]
    confine: Mapping[str, str] = field(default_factory=dict)


def _host_tags(platform: Platform) -> dict[str, str]:
    return {"osfamily": platform.osfamily()}


def is_suitable(fact: Fact, platform: Platform) -> bool:
    """Check a fact's confinement against the host.

    Tag values compare case-insensitively; a tag the host does not know
    never matches.
    """
    tags = _host_tags(platform)
    for tag, expected in fact.confine.items():
        actual = tags.get(tag)
        if actual is None or actual.casefold() != expected.casefold():
            return False
    return True


def _resolve_cic_icws_licensed(ctx: "CicfactsContext") -> bool:
    return LicenseProbe(ctx.registry, vendor=ctx.config.vendor).probe()


BUILTIN_FACTS: tuple[Fact, ...] = (
    Fact(
        name="cic_icws_licensed",
        resolve=_resolve_cic_icws_licensed,
        confine={"osfamily": "Windows"},
    ),
)


def find_fact(name: str, facts: Iterable[Fact] = BUILTIN_FACTS) -> Fact:
    """Look up a registered fact by name.

    Raises:
        UnknownFactError: If no fact has that name
    """
    for fact in facts:
        if fact.name == name:
            return fact
    raise UnknownFactError(name)


def resolve_facts(
    ctx: "CicfactsContext",
    names: Iterable[str] | None = None,
    facts: Iterable[Fact] = BUILTIN_FACTS,
) -> dict[str, object]:
    """Resolve facts that are suitable for the host.

    Args:
        ctx: Application context
        names: Fact names to resolve (all registered facts if None)
        facts: Registered facts

    Returns:
        Mapping of fact name -> value. Facts confined away from this host
        are not evaluated and do not appear.

    Raises:
        UnknownFactError: If a requested name is not registered
    """
    registered = tuple(facts)
    if names is None:
        selected = list(registered)
    else:
        selected = [find_fact(name, registered) for name in names]

    values: dict[str, object] = {}
    for fact in selected:
        if not is_suitable(fact, ctx.platform):
            logger.debug("Skipping %s: confined to %s", fact.name, dict(fact.confine))
            continue
        values[fact.name] = fact.resolve(ctx)
    return values
