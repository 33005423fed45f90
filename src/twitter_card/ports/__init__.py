from .dom import DomDocument, DomElement, HtmlParser
from .ingestor import Ingestor
from .writer import Writer

__all__ = [
    "DomDocument",
    "DomElement",
    "HtmlParser",
    "Ingestor",
    "Writer",
]
