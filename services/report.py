# services/report.py
import logging
from typing import Optional

import config
from prompts import LENGTH_HINTS, PRO_REPORT_PROMPTS, REPORT_PROMPTS, REPORT_USER_PROMPTS
from schemas import ImagePayload, LashType, ReportMode, normalize_language

logger = logging.getLogger(__name__)


class ReportGenerationError(RuntimeError):
    pass


def select_system_prompt(language: str, lash_type: LashType, mode: ReportMode = "standard") -> str:
    key = (language, lash_type)
    if key not in REPORT_PROMPTS:
        raise ValueError(f"no report template for language={language!r}, lash_type={lash_type!r}")
    if mode == "pro":
        return PRO_REPORT_PROMPTS[key].strip()
    prompt = REPORT_PROMPTS[key].strip()
    hint = LENGTH_HINTS.get((language, mode))
    return f"{prompt}\n\n{hint}" if hint else prompt


class ReportGenerator:
    """Free-text styling report. Model failures propagate as ReportGenerationError."""

    def __init__(self, gateway, model: str = config.REPORT_MODEL,
                 temperature: float = config.REPORT_TEMPERATURE):
        self.gateway = gateway
        self.model = model
        self.temperature = temperature

    def generate_report(self, image: ImagePayload, language: Optional[str], lash_type: LashType,
                        mode: ReportMode = "standard") -> str:
        language = normalize_language(language)
        system_prompt = select_system_prompt(language, lash_type, mode)
        user_prompt = REPORT_USER_PROMPTS[language]
        try:
            txt = self.gateway.complete(
                self.model,
                system_prompt,
                image,
                user_prompt,
                temperature=self.temperature,
            )
        except Exception as e:
            raise ReportGenerationError(f"report generation failed: {e}") from e
        logger.info("report generated (language=%s, type=%s, mode=%s)", language, lash_type, mode)
        return (txt or "").strip()
