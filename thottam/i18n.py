# thottam/i18n.py
"""Fixed UI strings in both site languages."""

from typing import Optional, Union

from .models.content import Language


LANGUAGE_COOKIE = "language"

UI_STRINGS: dict[Language, dict[str, str]] = {
    Language.TA: {
        "title": "எண்மின் தோட்டம்",
        "contents": "பொருளடக்கம்",
        "introduction": "அறிமுகம்",
        "collapse": "மூடு",
        "expand": "விரி",
        "switchToEnglish": "English",
        "switchToTamil": "தமிழ்",
        "loading": "ஏற்றுகிறது...",
        "contentNotFound": "உள்ளடக்கம் கிடைக்கவில்லை",
        "error": "பிழை",
        "failedToLoad": "உள்ளடக்கத்தை ஏற்ற முடியவில்லை",
        "closeSidebar": "பக்கப்பட்டியை மூடு",
        "openSidebar": "பக்கப்பட்டியைத் திற",
        "collapseAll": "அனைத்தையும் மூடு",
        "expandAll": "அனைத்தையும் விரி",
    },
    Language.EN: {
        "title": "Digital Garden",
        "contents": "Contents",
        "introduction": "Introduction",
        "collapse": "Collapse",
        "expand": "Expand",
        "switchToEnglish": "English",
        "switchToTamil": "தமிழ்",
        "loading": "Loading...",
        "contentNotFound": "Content not found",
        "error": "Error",
        "failedToLoad": "Failed to load content",
        "closeSidebar": "Close sidebar",
        "openSidebar": "Open sidebar",
        "collapseAll": "Collapse all",
        "expandAll": "Expand all",
    },
}


def parse_language(
    value: Optional[str],
    default: Union[Language, str] = Language.TA,
) -> Language:
    """Map a query/cookie value to a Language, falling back to the default."""
    if value:
        try:
            return Language(value.strip().lower())
        except ValueError:
            pass
    return Language(default)


def translate(key: str, language: Union[Language, str]) -> str:
    """UI string for a key; unknown keys are returned as is."""
    return UI_STRINGS[Language(language)].get(key, key)


def error_message(message: str, language: Union[Language, str]) -> str:
    """`பிழை: <message>` / `Error: <message>`."""
    return f"{translate('error', language)}: {message}"
