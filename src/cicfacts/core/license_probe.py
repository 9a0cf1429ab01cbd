"""License presence probe for the ICWS SDK feature.

The probe answers one question: is I3_FEATURE_ICWS_SDK licensed on this
Customer Interaction Center server? It reads the SITE value under the
Directory Services root, then checks for the feature key below that site's
production license tree:

    <root> = SOFTWARE\\Wow6432Node\\<vendor>\\EIC\\Directory Services\\Root
    <root>  SITE = <site>
    <root>\\<site>\\Production\\Licenses\\I3_FEATURE_ICWS_SDK

Every failure along the way yields False. A denied or failed store read is
indistinguishable from "not licensed" to callers of probe(); diagnose()
keeps the distinction for operators and debug logs only.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from cicfacts.core.registry.abc import Registry
from cicfacts.core.registry.types import (
    KEY_READ,
    KEY_WOW64_64KEY,
    RegistryError,
    RegistryErrorKind,
    join_path,
)

logger = logging.getLogger(__name__)

DEFAULT_VENDOR = "Interactive Intelligence"
SITE_VALUE_NAME = "SITE"
ICWS_SDK_FEATURE = "I3_FEATURE_ICWS_SDK"
PROBE_ACCESS = KEY_READ | KEY_WOW64_64KEY


class ProbeOutcome(Enum):
    """Where the probe stopped."""

    LICENSED = "licensed"
    ROOT_UNAVAILABLE = "root_unavailable"
    SITE_MISSING = "site_missing"
    FEATURE_ABSENT = "feature_absent"
    ACCESS_DENIED = "access_denied"


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one probe run with the paths it touched."""

    outcome: ProbeOutcome
    root_path: str
    site_name: str | None
    feature_path: str | None
    error: RegistryError | None

    @property
    def licensed(self) -> bool:
        return self.outcome is ProbeOutcome.LICENSED


def directory_services_root(vendor: str) -> str:
    """Build the Directory Services root key path for a vendor."""
    return join_path("SOFTWARE", "Wow6432Node", vendor, "EIC", "Directory Services", "Root")


def feature_key_path(root_path: str, site_name: str, feature: str = ICWS_SDK_FEATURE) -> str:
    """Build the production license key path for a site.

    The site name is used as a single opaque path segment.
    """
    return "\\".join([root_path, site_name, "Production", "Licenses", feature])


def _check_key(registry: Registry, path: str) -> RegistryError | None:
    with registry.open(path, PROBE_ACCESS) as key:
        if isinstance(key, RegistryError):
            return key
    return None


def _read_first(registry: Registry, path: str, name: str) -> str | RegistryError:
    with registry.open(path, PROBE_ACCESS) as key:
        if isinstance(key, RegistryError):
            return key
        value = registry.read_value(key, name)
        if isinstance(value, RegistryError):
            return value
        first = value.first
        # An empty site name cannot form a license path
        if not first:
            return RegistryError(
                kind=RegistryErrorKind.NOT_FOUND,
                path=path,
                name=name,
                message=f"Value {name} has no data",
            )
        return first


def key_exists(registry: Registry, path: str) -> bool:
    """Check whether a key can be opened for reading.

    Any failure (missing key, denied access, store error) counts as absent.
    Convenience wrapper over the check diagnose() runs; use diagnose() when
    the reason for a miss matters.
    """
    return _check_key(registry, path) is None


def read_first_value(registry: Registry, path: str, name: str) -> str | None:
    """Read the first string candidate of a named value.

    Returns None if the key cannot be opened, the value is missing, or the
    value holds no candidates or an empty first candidate. Convenience
    wrapper over the read diagnose() runs, with the error discarded.
    """
    result = _read_first(registry, path, name)
    if isinstance(result, RegistryError):
        return None
    return result


class LicenseProbe:
    """Checks a Customer Interaction Center install for a licensed feature.

    Holds no state between runs; every call opens and closes its own keys.
    """

    def __init__(
        self,
        registry: Registry,
        *,
        vendor: str = DEFAULT_VENDOR,
        feature: str = ICWS_SDK_FEATURE,
    ) -> None:
        self._registry = registry
        self._root_path = directory_services_root(vendor)
        self._feature = feature

    @property
    def root_path(self) -> str:
        return self._root_path

    def diagnose(self) -> ProbeResult:
        """Run the probe and report where it stopped.

        Returns:
            ProbeResult whose outcome is LICENSED only if the feature key
            under the site's production licenses could be opened
        """
        site = _read_first(self._registry, self._root_path, SITE_VALUE_NAME)
        if isinstance(site, RegistryError):
            if site.kind is RegistryErrorKind.ACCESS_DENIED:
                outcome = ProbeOutcome.ACCESS_DENIED
            elif site.name is None:
                outcome = ProbeOutcome.ROOT_UNAVAILABLE
            else:
                outcome = ProbeOutcome.SITE_MISSING
            logger.debug("Cannot read %s under %s: %s", SITE_VALUE_NAME, self._root_path, site)
            return ProbeResult(
                outcome=outcome,
                root_path=self._root_path,
                site_name=None,
                feature_path=None,
                error=site,
            )

        feature_path = feature_key_path(self._root_path, site, self._feature)
        error = _check_key(self._registry, feature_path)
        if error is not None:
            if error.kind is RegistryErrorKind.ACCESS_DENIED:
                outcome = ProbeOutcome.ACCESS_DENIED
            else:
                outcome = ProbeOutcome.FEATURE_ABSENT
            logger.debug("Feature key %s not available: %s", feature_path, error)
            return ProbeResult(
                outcome=outcome,
                root_path=self._root_path,
                site_name=site,
                feature_path=feature_path,
                error=error,
            )

        logger.debug("Feature key %s present", feature_path)
        return ProbeResult(
            outcome=ProbeOutcome.LICENSED,
            root_path=self._root_path,
            site_name=site,
            feature_path=feature_path,
            error=None,
        )

    def probe(self) -> bool:
        """Return True if the feature key exists, False for every other case."""
        return self.diagnose().licensed
