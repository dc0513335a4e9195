# services/classifier.py
import logging

import config
from prompts import CLASSIFY_SYSTEM_PROMPT, CLASSIFY_USER_PROMPT, LASH_TYPE_RESPONSE_FORMAT
from schemas import DEFAULT_LASH_TYPE, ImagePayload, LashType, normalize_lash_type
from services.utils import strict_json_loads

logger = logging.getLogger(__name__)


def parse_lash_type(txt: str) -> LashType:
    obj = strict_json_loads(txt)
    if not isinstance(obj, dict) or not isinstance(obj.get("type"), str):
        raise ValueError(f"no 'type' field in classifier output: {txt[:200]!r}")
    lash_type = normalize_lash_type(obj["type"])
    if lash_type is None:
        raise ValueError(f"unknown lash type {obj['type']!r}")
    return lash_type


class LashClassifier:
    """Natural vs extensions. Always answers: any failure yields the default type."""

    def __init__(self, gateway, model: str = config.CLASSIFY_MODEL):
        self.gateway = gateway
        self.model = model

    def classify(self, image: ImagePayload) -> LashType:
        try:
            txt = self.gateway.complete(
                self.model,
                CLASSIFY_SYSTEM_PROMPT,
                image,
                CLASSIFY_USER_PROMPT,
                temperature=0,
                response_format=LASH_TYPE_RESPONSE_FORMAT,
            )
            return parse_lash_type(txt)
        except Exception as e:
            logger.warning("lash classification failed, using %r: %s", DEFAULT_LASH_TYPE, e)
            return DEFAULT_LASH_TYPE
