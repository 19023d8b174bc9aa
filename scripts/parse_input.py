#!/usr/bin/env python3
"""Parse a document into slides and list them, or write them as JSON.

Supports: MD, MARKDOWN, TXT, PPTX

Usage:
    python scripts/parse_input.py <input_file> [-o workspace/presentation.json] [--config configs/default.yaml]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from slidediff.parsers import load_presentation
from slidediff.utils.file_utils import load_config, save_model_json


def main():
    parser = argparse.ArgumentParser(description="Parse input document into slides")
    parser.add_argument("input_file", type=Path, help="Input document path (.md, .markdown, .txt, .pptx)")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Optional presentation JSON output path")
    parser.add_argument("--config", type=Path, default=None,
                        help="Config YAML path (default: built-in defaults)")
    args = parser.parse_args()

    if not args.input_file.exists():
        print(f"Error: Input file not found: {args.input_file}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config)
        presentation = load_presentation(args.input_file, config.parsing)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Parsed: {args.input_file}")
    print(f"Slides: {len(presentation.slides)}")
    for index, slide in enumerate(presentation.slides, 1):
        print(f"  {index:>3}. {slide.title}  (lines {slide.start_line + 1}-{slide.end_line + 1})")

    if args.output:
        save_model_json(presentation, args.output)
        print(f"Presentation written to: {args.output}")


if __name__ == "__main__":
    main()
