from __future__ import annotations

import logging
import re

from .answers import AnswerMap
from .catalog import FieldCatalog
from .errors import MalformedInputError
from .extractors import ENTITY_RECOGNIZERS, FALLBACK_RECOGNIZERS, EntityRecognizer, find_name
from .matcher import LabelMatcher
from .utils import extract_lines

logger = logging.getLogger(__name__)

# "Label: Value", "Label - Value", "Label = Value"; split on the first delimiter
LABEL_VALUE_RE = re.compile(r"^([^:\-=]{1,60})[:\-=]\s*(.{1,300})$")

# standalone label line, value expected on the next line
LABEL_LINE_RE = re.compile(r"^[A-Za-z\s/.()'’]{3,40}$")
MAX_NEXT_LINE_VALUE = 200


class ExtractionPipeline:
    """
    Multi-pass key/value extraction over raw OCR text.

      Pass 1  "Label: Value" lines resolved through the label matcher
      Pass 2  entity regexes over the whole text (email, mobile, Aadhaar, PAN, pincode, DOB)
      Pass 3  standalone label line followed by its value line
      Pass 4  applicant name fallback
      Pass 5  last-chance date of birth

    Every pass writes through AnswerMap.set_if_absent, so earlier passes
    always win. The pipeline holds no per-call state and can be shared.
    """

    def __init__(
        self,
        catalog: FieldCatalog | None = None,
        entity_recognizers: tuple[EntityRecognizer, ...] = ENTITY_RECOGNIZERS,
        fallback_recognizers: tuple[EntityRecognizer, ...] = FALLBACK_RECOGNIZERS,
    ):
        self.matcher = LabelMatcher(catalog)
        self.entity_recognizers = entity_recognizers
        self.fallback_recognizers = fallback_recognizers

    def extract(self, raw_text: str) -> AnswerMap:
        if not isinstance(raw_text, str):
            raise MalformedInputError(f"expected text, got {type(raw_text).__name__}")

        logger.debug("raw text length: %d", len(raw_text))
        answers = AnswerMap()
        lines = extract_lines(raw_text)

        self._label_value_lines(lines, answers)
        self._run_recognizers(self.entity_recognizers, raw_text, answers, "P2")
        self._next_line_context(lines, answers)
        self._name_fallback(raw_text, lines, answers)
        self._run_recognizers(self.fallback_recognizers, raw_text, answers, "P5")

        logger.info("extracted %d field(s): %s", len(answers), ", ".join(answers))
        return answers

    def _label_value_lines(self, lines: list[str], answers: AnswerMap) -> None:
        for ln in lines:
            m = LABEL_VALUE_RE.match(ln)
            if not m:
                continue
            label = m.group(1).strip()
            value = m.group(2).strip()
            if not label or not value:
                continue
            fid = self.matcher.match_field(label)
            if fid and answers.set_if_absent(fid, value):
                logger.debug("P1 %r -> %s: %r", label, fid, value)

    def _run_recognizers(
        self,
        recognizers: tuple[EntityRecognizer, ...],
        raw_text: str,
        answers: AnswerMap,
        tag: str,
    ) -> None:
        for rec in recognizers:
            if rec.field in answers:
                continue
            value = rec.find(raw_text)
            if value and answers.set_if_absent(rec.field, value):
                logger.debug("%s %s: %r", tag, rec.field, value)

    def _next_line_context(self, lines: list[str], answers: AnswerMap) -> None:
        for label_line, value_line in zip(lines, lines[1:]):
            if not LABEL_LINE_RE.match(label_line) or len(value_line) >= MAX_NEXT_LINE_VALUE:
                continue
            fid = self.matcher.match_field(label_line)
            if fid and answers.set_if_absent(fid, value_line):
                logger.debug("P3 next-line %r -> %s: %r", label_line, fid, value_line)

    def _name_fallback(self, raw_text: str, lines: list[str], answers: AnswerMap) -> None:
        if "fullName" in answers:
            return
        found = find_name(raw_text, lines)
        if found:
            value, heuristic = found
            answers.set_if_absent("fullName", value)
            logger.debug("P4 %s name: %r", heuristic, value)


_default_pipeline = ExtractionPipeline()

def extract(raw_text: str) -> AnswerMap:
    return _default_pipeline.extract(raw_text)
