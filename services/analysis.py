# services/analysis.py
import logging
from typing import Optional

from schemas import AnalysisResult, ImagePayload, ReportMode, normalize_language, normalize_lash_type, normalize_mode
from services.classifier import LashClassifier
from services.report import ReportGenerator

logger = logging.getLogger(__name__)


class LashAnalyzer:
    """Classify first, then report on exactly that lash type.

    The two model calls stay sequential: the report template depends on the
    classification. Report errors are not caught here.
    """

    def __init__(self, classifier: LashClassifier, reporter: ReportGenerator):
        self.classifier = classifier
        self.reporter = reporter

    def analyze(self, image: ImagePayload, language: Optional[str], mode: ReportMode = "standard",
                override_type: Optional[str] = None) -> AnalysisResult:
        language = normalize_language(language)
        mode = normalize_mode(mode)

        lash_type = normalize_lash_type(override_type)
        if lash_type is None:
            lash_type = self.classifier.classify(image)
        else:
            logger.info("lash type forced to %r, skipping classification", lash_type)

        report = self.reporter.generate_report(image, language, lash_type, mode)
        return AnalysisResult(type=lash_type, mode=mode, result=report)
