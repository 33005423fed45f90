class TwitterCardError(Exception):
    """Base error for the twitter card engine."""


class MissingSiteBaseURL(TwitterCardError):
    def __init__(self) -> None:
        super().__init__("siteurl is required option for twitter card")


class UnknownCardType(TwitterCardError):
    def __init__(self, card_type: object) -> None:
        self.card_type = card_type
        super().__init__(f"{card_type} is not valid twitter card type")


class MissingRequiredProperty(TwitterCardError):
    def __init__(self, prop: str, card_type: str) -> None:
        self.prop = prop
        self.card_type = card_type
        super().__init__(f"{prop} is required for {card_type} twitter card type")


class UnresolvedPropertyValue(TwitterCardError):
    def __init__(self, prop: str) -> None:
        self.prop = prop
        super().__init__(f"Provided {prop} is not valid or not present")


class SelectorError(TwitterCardError):
    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"{selector!r} is not a selector the document can be queried with")


class ConfigError(TwitterCardError):
    pass


class IngestionError(TwitterCardError):
    pass


class FrontmatterError(IngestionError):
    pass
