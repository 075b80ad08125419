import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from mail_insight.app.run import load_input, run_once
from mail_insight.errors import EmptyInputError
from mail_insight.fixtures.samples import SAMPLES


def main() -> int:
    parser = argparse.ArgumentParser(description="Extract structured data from a raw email.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", type=Path, help="Read the email from this file")
    source.add_argument("--sample", choices=sorted(SAMPLES), help="Use a built-in sample email")
    parser.add_argument("--advanced", action="store_true", help="Also run the AI analysis")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ------------------------------------------------------------------
    # Read input: file, sample, or stdin
    # ------------------------------------------------------------------
    stdin_text = ""
    if args.file is None and args.sample is None and not sys.stdin.isatty():
        stdin_text = sys.stdin.read()
    text = load_input(file=args.file, sample=args.sample, stdin_text=stdin_text)

    try:
        summary = run_once(text=text, advanced=args.advanced)
    except EmptyInputError as exc:
        print(f"[ERROR] Empty Input: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(summary, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
