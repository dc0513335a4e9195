# services/lash_map.py
from prompts import LASH_MAP_PLACEHOLDERS
from schemas import Language


def placeholder_map(language: Language) -> str:
    """Canned sample map for the requested language; the photo is not analysed yet."""
    return LASH_MAP_PLACEHOLDERS[language].strip()
