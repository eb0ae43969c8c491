# thottam/content/translations.py
"""Per-directory translations sidecar loading."""

import logging
from typing import Any, Union

import anyio
from pydantic import TypeAdapter, ValidationError

from ..models.content import DisplayName

logger = logging.getLogger(__name__)

TRANSLATIONS_FILE = "_translations.json"

Translations = dict[str, DisplayName]

_sidecar_adapter = TypeAdapter(dict[str, Any])


async def load_translations(
    directory: Union[str, anyio.Path],
    filename: str = TRANSLATIONS_FILE,
) -> Translations:
    """
    Load the translations sidecar of a single directory.

    The sidecar maps base names to `{"ta": ..., "en": ...}` labels and only
    applies to entries of the directory it sits in.

    Returns:
        Mapping of base name to DisplayName. Empty if the sidecar is missing,
        is not valid JSON or is not an object. Entries without both labels
        are skipped.
    """
    path = anyio.Path(directory) / filename

    if not await path.is_file():
        return {}

    try:
        text = await path.read_text(encoding="utf-8")
        entries = _sidecar_adapter.validate_json(text)
    except (OSError, ValueError) as e:
        logger.warning("Error loading translations from %s: %s", path, e)
        return {}

    translations: Translations = {}
    for name, entry in entries.items():
        try:
            translations[name] = DisplayName.model_validate(entry)
        except ValidationError as e:
            logger.warning("Skipping translation %r in %s: %s", name, path, e)

    return translations
