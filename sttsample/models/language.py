"""Recognition language choices."""

from enum import Enum


class Language(Enum):
    """Languages offered by the language picker."""
    ENGLISH = "english"
    KOREAN = "korean"

    @property
    def locale(self) -> str:
        """Locale tag handed to the recognizer."""
        return _LOCALES[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    @classmethod
    def parse(cls, value: str) -> "Language":
        """Look up a language by name or locale tag (case-insensitive)."""
        normalized = value.strip().lower()
        for language in cls:
            if normalized in (language.value, language.locale.lower()):
                return language
        raise ValueError(f"Unknown language: {value}")


_LOCALES = {
    Language.ENGLISH: "en-US",
    Language.KOREAN: "ko-KR",
}

_DISPLAY_NAMES = {
    Language.ENGLISH: "English (영어)",
    Language.KOREAN: "Korean (한국어)",
}
