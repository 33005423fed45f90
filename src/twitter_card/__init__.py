from twitter_card.domain.errors import (
    MissingRequiredProperty,
    MissingSiteBaseURL,
    SelectorError,
    TwitterCardError,
    UnknownCardType,
    UnresolvedPropertyValue,
)
from twitter_card.domain.models import ProcessReport, SourceFile
from twitter_card.pipeline import TwitterCard

__all__ = [
    "MissingRequiredProperty",
    "MissingSiteBaseURL",
    "ProcessReport",
    "SelectorError",
    "SourceFile",
    "TwitterCard",
    "TwitterCardError",
    "UnknownCardType",
    "UnresolvedPropertyValue",
]
