import argparse
import json
import logging
import sys
from pathlib import Path

from config_loader import load_config
from grading_serialization import grade_result_to_storage
from grading_session import GradingSession, GradingSessionError, simulate_latency


def _prompt_submission() -> str:
    """Collect a multi-line submission from stdin."""

    if sys.stdin.isatty():
        print("Paste the student's submission. Finish input with a line containing only '.'")
        print("(press Ctrl+D on UNIX systems if you prefer to end the input early)\n")

    lines: list[str] = []
    while True:
        try:
            line = input()
        except EOFError:
            break
        if line.strip() == ".":
            break
        lines.append(line)

    return "\n".join(lines)


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grade a submission with the mock grader.")
    parser.add_argument("--title", default="", help="Submission title")
    parser.add_argument("--file", type=Path, help="Read the submission from a file instead of stdin")
    parser.add_argument("--config", type=Path, help="JSON or YAML config overrides")
    parser.add_argument("--no-delay", action="store_true", help="Skip the simulated grading delay")
    parser.add_argument("--json", action="store_true", help="Print the stored JSON form instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.file is not None:
            text = args.file.read_text(encoding="utf-8")
        else:
            text = _prompt_submission()
    except (FileNotFoundError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    session = GradingSession(config)

    try:
        result = session.grade(args.title, text)
    except GradingSessionError as exc:
        print(exc, file=sys.stderr)
        return 1

    if not args.no_delay:
        print(config.grading_label, file=sys.stderr)
        simulate_latency(config.grade_delay_seconds)

    if args.json:
        payload = grade_result_to_storage(result, session.last.submission)
        print(json.dumps(payload, indent=2))
    else:
        print(session.export_report(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
