from __future__ import annotations
from dataclasses import dataclass
import os

@dataclass(frozen=True)
class Settings:
    # OCR / preprocess
    ocr_lang: str = "eng"
    max_width: int = 1600
    do_threshold: bool = False

    log_level: str = "INFO"
    output_path: str = "outputs/answers.json"

def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} env var must be an integer, got {raw!r}.") from None

def load_settings() -> Settings:
    return Settings(
        ocr_lang=os.getenv("OCR_LANG", "eng").strip() or "eng",
        max_width=_env_int("OCR_MAX_WIDTH", 1600),
        do_threshold=os.getenv("OCR_THRESHOLD", "0").strip() == "1",
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        output_path=os.getenv("OUTPUT_PATH", "outputs/answers.json").strip(),
    )
