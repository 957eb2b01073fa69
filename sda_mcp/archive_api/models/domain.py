"""Domain enums shared by archive API requests and responses."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class MetadataLanguage(str, Enum):
    """Language of archive metadata.

    ``NONE`` means "not specified". Whether it is dropped or replaced by a
    default depends on the operation, see ``tools.normalizer``.
    """

    NONE = "none"
    ENGLISH = "english"
    ARABIC = "arabic"

    @classmethod
    def _missing_(cls, value: object) -> Optional["MetadataLanguage"]:
        # Agents send "English" as often as "english".
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


DEFAULT_LANGUAGE = MetadataLanguage.ENGLISH


class DublinMetadataFormat(str, Enum):
    WACZ = "wacz"


class BrowserProfile(str, Enum):
    """Browser profiles for sites that need a logged-in crawl."""

    FACEBOOK = "facebook"


class CrawlStatus(str, Enum):
    BAD_CRAWL = "BadCrawl"
    COMPLETE = "Complete"
    ERROR = "Error"
    PENDING = "Pending"
