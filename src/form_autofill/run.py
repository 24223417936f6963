from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from .config import load_settings
from .evaluate import evaluate_one, summarize
from .submission import SubmissionResult, process_files, process_texts
from .utils import read_json, write_json

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="form-autofill",
        description="Extract form answers from scanned documents (PDF/images) or OCR text.",
    )
    parser.add_argument("files", nargs="+", help="documents of one submission")
    parser.add_argument("--text", action="store_true", help="inputs are already-extracted text files")
    parser.add_argument("--existing", help="JSON object of answers the user already gave (these win)")
    parser.add_argument("--expected", help="JSON object of ground-truth answers to score against")
    parser.add_argument("--output", help="where to write the result JSON (default: OUTPUT_PATH)")
    return parser

def _read_texts(paths: list[str]) -> list[str]:
    texts = []
    for p in paths:
        with open(p, "r", encoding="utf-8") as f:
            texts.append(f.read())
    return texts

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    existing: dict[str, Any] = read_json(args.existing) if args.existing else {}

    if args.text:
        result: SubmissionResult = process_texts(_read_texts(args.files), existing=existing)
    else:
        result = process_files(args.files, existing=existing, settings=settings)

    out = result.to_dict()
    output_path = args.output or settings.output_path
    write_json(output_path, out)
    logger.info("wrote %s", output_path)
    print(json.dumps(out, ensure_ascii=False, indent=2))

    if args.expected:
        rows = evaluate_one(result.answers, read_json(args.expected))
        s = summarize(rows)
        for r in rows:
            if not r.ok:
                print(f"[EVAL] miss field={r.field} predicted={r.predicted!r} score={r.score:.2f}")
        print(f"[EVAL] rows={s['rows']} ok={s['ok']} missing={s['missing']} acc={s['acc']:.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
