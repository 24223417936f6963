from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from .catalog import DEFAULT_CATALOG, FieldCatalog
from .config import Settings
from .ocr import extract_text_from_file
from .pipeline import ExtractionPipeline

logger = logging.getLogger(__name__)

@dataclass
class SubmissionResult:
    answers: dict[str, str]
    auto_filled_fields: list[str]
    text: str = field(repr=False, default="")

    def to_dict(self) -> dict[str, object]:
        return {"answers": self.answers, "autoFilledFields": self.auto_filled_fields}

def merge_answers(extracted: Mapping[str, str], existing: Mapping[str, str] | None) -> dict[str, str]:
    # caller-held answers win; extraction only fills gaps
    merged = dict(extracted)
    merged.update(existing or {})
    return merged

def auto_filled_fields(extracted: Mapping[str, str], catalog: FieldCatalog = DEFAULT_CATALOG) -> list[str]:
    known = [k for k in extracted if k in catalog]
    if not known and extracted:
        return list(extracted)
    return known

def process_texts(
    texts: Iterable[str],
    existing: Mapping[str, str] | None = None,
    pipeline: ExtractionPipeline | None = None,
) -> SubmissionResult:
    pipeline = pipeline or ExtractionPipeline()
    all_text = "".join("\n" + t for t in texts)
    extracted = pipeline.extract(all_text)
    return SubmissionResult(
        answers=merge_answers(extracted, existing),
        auto_filled_fields=auto_filled_fields(extracted, pipeline.matcher.catalog),
        text=all_text,
    )

def process_files(
    paths: Iterable[str],
    existing: Mapping[str, str] | None = None,
    settings: Settings | None = None,
    pipeline: ExtractionPipeline | None = None,
) -> SubmissionResult:
    texts = []
    for p in paths:
        t = extract_text_from_file(p, settings=settings)
        logger.info("document %s: %d chars of text", p, len(t))
        texts.append(t)
    return process_texts(texts, existing=existing, pipeline=pipeline)
