#!/usr/bin/env python3
"""Compare two markdown (or PPTX) presentations slide by slide.

Usage:
    python scripts/diff_presentations.py before.md after.md
    python scripts/diff_presentations.py before.md after.md --format json -o workspace/diff.json
    python scripts/diff_presentations.py old.pptx new.pptx --config configs/default.yaml --exit-code
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from slidediff.diff import diff_presentations, format_diff_summary, has_changes, render_text_report
from slidediff.parsers import load_presentation
from slidediff.utils.file_utils import ensure_directory, load_config

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Diff two presentations slide by slide")
    parser.add_argument("before", type=Path, help="Original document (.md, .markdown, .txt, .pptx)")
    parser.add_argument("after", type=Path, help="Modified document (.md, .markdown, .txt, .pptx)")
    parser.add_argument("--config", type=Path, default=None,
                        help="Config YAML path (default: built-in defaults)")
    parser.add_argument("--format", choices=["text", "json"], default="text",
                        help="Report format (default: text)")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Write the report to this file instead of stdout")
    parser.add_argument("--show-unchanged", action="store_true",
                        help="Include unchanged slides in the text report")
    parser.add_argument("--exit-code", action="store_true",
                        help="Exit with status 1 when the presentations differ")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    for path in (args.before, args.after):
        if not path.exists():
            print(f"Error: Input file not found: {path}", file=sys.stderr)
            sys.exit(1)

    try:
        config = load_config(args.config)
        if args.show_unchanged:
            config = config.model_copy(
                update={"report": config.report.model_copy(update={"show_unchanged": True})}
            )
        before = load_presentation(args.before, config.parsing)
        after = load_presentation(args.after, config.parsing)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    diff = diff_presentations(before, after)
    logger.info(f"{args.before.name} -> {args.after.name}: {format_diff_summary(diff.summary)}")

    if args.format == "json":
        report = diff.model_dump_json(indent=2)
    else:
        report = render_text_report(diff, config)

    if args.output:
        ensure_directory(args.output.parent)
        args.output.write_text(report + "\n", encoding="utf-8")
        print(f"Diff report written to: {args.output}")
    else:
        print(report)

    if args.exit_code and has_changes(diff):
        sys.exit(1)


if __name__ == "__main__":
    main()
