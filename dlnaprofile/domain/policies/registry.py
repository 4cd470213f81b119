# dlnaprofile/domain/policies/registry.py
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from dlnaprofile.common.logging import get_logger
from dlnaprofile.common.settings import Settings, get_settings
from dlnaprofile.common.strings.splitters import extension_set
from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.entities.stream import StreamDescriptor
from dlnaprofile.domain.enums.media_profile import MediaProfile
from dlnaprofile.domain.policies.families import FAMILY_CLASSIFIERS, FamilyClassifier

logger = get_logger(__name__)

ALL_FAMILIES = "all"


class ProfileConfigError(ValueError):
    """Raised at startup when the configured family list names something unknown."""


@dataclass(frozen=True)
class RegistryConfig:
    """
    Immutable input to registry construction.
      families:        families in precedence order; None means all, default order
      extension_check: skip a family unless the descriptor's extension is on its list
      extensions:      per-family allow-lists replacing the built-in ones
    """
    families: Optional[Tuple[MediaProfile, ...]] = None
    extension_check: bool = False
    extensions: Mapping[MediaProfile, FrozenSet[str]] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RegistryConfig":
        cfg = settings.profiles
        names = cfg.enabled_list
        families = None if (not names or ALL_FAMILIES in names) else tuple(parse_family(n) for n in names)
        extensions = {parse_family(k): extension_set(v) for k, v in cfg.extensions.items()}
        return cls(families=families, extension_check=cfg.extension_check, extensions=extensions)


def parse_family(name: str | MediaProfile) -> MediaProfile:
    try:
        return MediaProfile(str(name).strip().lower())
    except ValueError as e:
        known = ", ".join(m.value for m in MediaProfile)
        raise ProfileConfigError(f"Unknown DLNA profile family {name!r} (known: {known})") from e


@dataclass(frozen=True)
class _Entry:
    classifier: FamilyClassifier
    extensions: FrozenSet[str]


class ProfileRegistry:
    """
    Ordered, read-only list of family classifiers. Registration order is
    precedence order: identify() returns the first family that matches.
    Safe to share across threads once built.
    """

    def __init__(self, entries: Iterable[_Entry], *, extension_check: bool = False) -> None:
        self._entries: Tuple[_Entry, ...] = tuple(entries)
        self._extension_check = extension_check

    # ---------------- public ----------------

    @property
    def families(self) -> Tuple[MediaProfile, ...]:
        return tuple(e.classifier.family for e in self._entries)

    @property
    def extension_check(self) -> bool:
        return self._extension_check

    def identify(self, descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
        for entry in self._entries:
            if self._extension_check and descriptor.file_extension not in entry.extensions:
                continue
            record = entry.classifier.classify(descriptor)
            if record is not None:
                logger.debug("%s matched %s", entry.classifier.family, record.id)
                return record
        return None

    def profiles(self) -> List[ProfileRecord]:
        """Every record the registered families can produce, in precedence order."""
        out: List[ProfileRecord] = []
        for entry in self._entries:
            out.extend(entry.classifier.profiles)
        return out

    def accepts_extension(self, family: MediaProfile, ext: Optional[str]) -> bool:
        for entry in self._entries:
            if entry.classifier.family is family:
                return (not self._extension_check) or ext in entry.extensions
        return False

    def __iter__(self) -> Iterator[FamilyClassifier]:
        return (e.classifier for e in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, family: object) -> bool:
        return family in self.families


class RegistryBuilder:
    """Collects families (once each, first registration wins) and freezes them."""

    def __init__(self, *, extension_check: bool = False,
                 extensions: Optional[Mapping[MediaProfile, FrozenSet[str]]] = None) -> None:
        self._extension_check = extension_check
        self._extensions: Dict[MediaProfile, FrozenSet[str]] = dict(extensions or {})
        self._order: List[MediaProfile] = []

    def register(self, family: str | MediaProfile) -> "RegistryBuilder":
        fam = parse_family(family)
        if fam not in self._order:
            self._order.append(fam)
        return self

    def register_all(self) -> "RegistryBuilder":
        for fam in FAMILY_CLASSIFIERS:
            self.register(fam)
        return self

    def build(self) -> ProfileRegistry:
        entries = []
        for fam in self._order:
            classifier = FAMILY_CLASSIFIERS[fam]()
            exts = self._extensions.get(fam, classifier.extensions)
            entries.append(_Entry(classifier=classifier, extensions=frozenset(exts)))
        return ProfileRegistry(entries, extension_check=self._extension_check)


def build_registry(config: Optional[RegistryConfig] = None) -> ProfileRegistry:
    config = config or RegistryConfig()
    builder = RegistryBuilder(extension_check=config.extension_check, extensions=config.extensions)
    if config.families is None:
        builder.register_all()
    else:
        for fam in config.families:
            builder.register(fam)
    registry = builder.build()
    logger.debug("Profile registry built: %s", ", ".join(registry.families))
    return registry


@lru_cache(maxsize=1)
def get_registry() -> ProfileRegistry:
    """
    Process-wide registry, built once from settings:
        from dlnaprofile.domain.policies.registry import get_registry
        profile = get_registry().identify(descriptor)
    """
    return build_registry(RegistryConfig.from_settings(get_settings()))


def identify(descriptor: StreamDescriptor, registry: Optional[ProfileRegistry] = None) -> Optional[ProfileRecord]:
    """The DLNA profile `descriptor` complies with, or None if no registered family accepts it."""
    # an empty registry is falsy but still the caller's choice
    reg = get_registry() if registry is None else registry
    return reg.identify(descriptor)
