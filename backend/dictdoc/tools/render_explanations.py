from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, List, Optional

from dictdoc.config import Settings, get_settings
from dictdoc.services.documents import DocumentService


LOGGER = logging.getLogger(__name__)


def _load_payloads(path: Path) -> List[Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, list):
        return data
    return [data]


def _export_results(path: Path, payload: List[dict]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render dictionary explanations from translation provider responses.",
    )
    parser.add_argument("input", type=Path, help="JSON file with one response or a list of them")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output plain text (default) or the full render payload as JSON",
    )
    parser.add_argument(
        "--no-word-forms",
        action="store_true",
        help="Leave word forms out of the plain text",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the result to a file instead of stdout",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(None if argv is None else list(argv))


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if not args.verbose else logging.DEBUG,
        format="%(levelname)s %(message)s",
    )

    try:
        payloads = _load_payloads(args.input)
    except (OSError, ValueError) as exc:
        LOGGER.error("Cannot read %s: %s", args.input, exc)
        return 1

    settings = get_settings()
    if args.no_word_forms:
        settings = Settings(show_word_forms=False, link_words=settings.link_words)
    service = DocumentService(settings)

    texts: List[str] = []
    documents: List[dict] = []
    skipped = 0
    for index, payload in enumerate(payloads):
        if not isinstance(payload, dict):
            LOGGER.warning("Entry %d is not an object, skipped", index)
            skipped += 1
            continue

        result = service.build(payload)
        if result is None:
            LOGGER.info("Entry %d has no explanations, skipped", index)
            skipped += 1
            continue

        texts.append(result.text)
        documents.append(result.to_dict())

    LOGGER.info("Rendered %d of %d entries (%d skipped)", len(documents), len(payloads), skipped)

    if args.format == "json":
        if args.output:
            _export_results(args.output, documents)
        else:
            json.dump(documents, sys.stdout, ensure_ascii=False, indent=2)
            sys.stdout.write("\n")
        return 0

    output = "\n\n".join(texts)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output + "\n", encoding="utf-8")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
