from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Mapping, Sequence

if TYPE_CHECKING:
    from twitter_card.ports.dom import DomDocument


# -------------------------
# Card schema
# -------------------------

@dataclass(frozen=True, slots=True)
class CardSpec:
    """
    Required and allowed properties of one card type.

    `required` keeps declaration order: it is the order properties are checked in.
    `allowed` is a superset of `required`.
    """
    card_type: str
    required: tuple[str, ...]
    allowed: frozenset[str]

    def __post_init__(self) -> None:
        missing = [p for p in self.required if p not in self.allowed]
        if missing:
            raise ValueError(f"{self.card_type}: required properties not allowed: {missing}")

    @classmethod
    def build(cls, card_type: str, *, required: Sequence[str], optional: Sequence[str] = ()) -> CardSpec:
        return cls(
            card_type=card_type,
            required=tuple(required),
            allowed=frozenset(required) | frozenset(optional),
        )


# -------------------------
# Engine input
# -------------------------

@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """
    Normalized engine options. Built once per engine, read-only afterwards.

    defaults: default property values (always includes `card`, never `siteurl`).
    """
    site_url: str
    card: str
    defaults: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SourceFile:
    """
    One document of the host collection.

    metadata: frontmatter fields, including the `twitter` flag/overrides.
    contents: markup; replaced in place once card tags are inserted.
    """
    contents: str
    metadata: dict[str, Any] = field(default_factory=dict)


# -------------------------
# Resolution
# -------------------------

@dataclass(frozen=True, slots=True)
class ResolutionContext:
    """
    Everything needed to turn a raw property value into tag content for ONE document.

    Built fresh per document and passed explicitly to every resolution call.
    """
    document: DomDocument
    lookup: Callable[[str], Any]
    make_absolute: Callable[[str], str]


# -------------------------
# Reports
# -------------------------

@dataclass(frozen=True, slots=True)
class ProcessReport:
    processed: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class IngestReport:
    scanned: int = 0
    loaded: int = 0
    skipped_hidden: int = 0
    skipped_extension: int = 0
    skipped_unreadable: int = 0
    by_extension: Mapping[str, int] = field(default_factory=dict)
