from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import cv2
import numpy as np
import pdfplumber
import pytesseract
from PIL import Image
from pytesseract import Output

from .config import Settings, load_settings
from .utils import normalize_whitespace

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tif", ".tiff"}

@dataclass
class OCRResult:
    text: str  # one OCR line per text line
    avg_conf: float  # 0..1
    n_words: int

def preprocess_image(img: Image.Image, max_width: int = 1600, do_threshold: bool = False) -> Image.Image:
    arr = np.array(img.convert("RGB"))
    bgr = cv2.cvtColor(arr, cv2.COLOR_RGB2BGR)

    h, w = bgr.shape[:2]
    if w > max_width:
        scale = max_width / float(w)
        bgr = cv2.resize(bgr, (int(w * scale), int(h * scale)), interpolation=cv2.INTER_AREA)

    gray = cv2.cvtColor(bgr, cv2.COLOR_BGR2GRAY)
    # scanned forms: mild denoise keeps handwriting strokes intact
    gray = cv2.bilateralFilter(gray, d=7, sigmaColor=50, sigmaSpace=50)

    if do_threshold:
        gray = cv2.adaptiveThreshold(
            gray, 255,
            cv2.ADAPTIVE_THRESH_GAUSSIAN_C,
            cv2.THRESH_BINARY,
            35, 11
        )
    return Image.fromarray(gray)

def ocr_image(img: Image.Image, lang: str = "eng") -> OCRResult:
    """
    Tesseract word boxes regrouped into text lines.

    Extraction relies on line structure ("Label: value" lines, label line
    followed by value line), so words are joined per (block, paragraph, line)
    rather than flattened into one string.
    """
    data: dict[str, Any] = pytesseract.image_to_data(img, lang=lang, output_type=Output.DICT)

    lines: dict[tuple[int, int, int], list[str]] = {}
    confs: list[float] = []

    for i, raw in enumerate(data.get("text", [])):
        txt = (raw or "").strip()
        if not txt:
            continue
        # conf comes back as str or float; -1 marks non-word boxes
        try:
            c = float(data["conf"][i])
        except (TypeError, ValueError):
            c = -1.0
        if c < 0:
            continue
        key = (int(data["block_num"][i]), int(data["par_num"][i]), int(data["line_num"][i]))
        lines.setdefault(key, []).append(txt)
        confs.append(max(0.0, min(1.0, c / 100.0)))

    text = "\n".join(normalize_whitespace(" ".join(words)) for words in lines.values())
    avg_conf = sum(confs) / len(confs) if confs else 0.0
    return OCRResult(text=text, avg_conf=avg_conf, n_words=len(confs))

def extract_text_from_pdf(path: str) -> str:
    parts = []
    with pdfplumber.open(path) as pdf:
        for page in pdf.pages:
            parts.append(page.extract_text() or "")
    return "\n".join(parts)

def extract_text_from_image(path: str, settings: Settings) -> str:
    with Image.open(path) as img:
        pre = preprocess_image(img, max_width=settings.max_width, do_threshold=settings.do_threshold)
    res = ocr_image(pre, lang=settings.ocr_lang)
    logger.debug("ocr %s: %d words, avg conf %.2f", path, res.n_words, res.avg_conf)
    return res.text

def _kind(path: str, mime_type: str | None) -> str | None:
    suffix = os.path.splitext(path)[1].lower()
    if mime_type == "application/pdf" or suffix == ".pdf":
        return "pdf"
    if (mime_type or "").startswith("image/") or suffix in IMAGE_SUFFIXES:
        return "image"
    return None

def extract_text_from_file(path: str, settings: Settings | None = None, mime_type: str | None = None) -> str:
    """
    Text of one submitted document. Unsupported types give "".
    A document the OCR/PDF backend cannot read is logged and also gives "",
    so the rest of the submission is still processed.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(path)

    kind = _kind(path, mime_type)
    if kind is None:
        logger.warning("unsupported document type, skipping: %s", path)
        return ""

    settings = settings or load_settings()
    try:
        if kind == "pdf":
            return extract_text_from_pdf(path)
        return extract_text_from_image(path, settings)
    except Exception:
        logger.exception("%s text extraction failed: %s", kind, path)
        return ""
