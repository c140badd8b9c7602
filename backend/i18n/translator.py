import logging
import re
from typing import Any, Optional

from backend.i18n.strings import TRANSLATIONS
from backend.models.reference import Language

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def get_nested_translation(table: dict, key: str) -> Optional[str]:
    """Resolve a dotted key such as 'calculation.dcf.intro' against a nested table."""
    node: Any = table
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(language: Language, key: str, **params: Any) -> str:
    """Look up ``key`` for ``language`` and substitute ``{name}`` placeholders.

    Arabic falls back to English, then to the key itself. Unmatched
    placeholders are left as written.
    """
    text = get_nested_translation(TRANSLATIONS[language.value], key)
    if text is None and language != Language.EN:
        logger.warning(f"Translation key '{key}' missing for '{language.value}', falling back to English")
        text = get_nested_translation(TRANSLATIONS[Language.EN.value], key)
    if text is None:
        logger.warning(f"Translation key '{key}' not found")
        return key

    return _PLACEHOLDER.sub(lambda m: str(params[m.group(1)]) if m.group(1) in params else m.group(0), text)
