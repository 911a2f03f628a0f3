"""keysmith command-line interface.

Usage examples:
    python -m keysmith generate -n 20 -c 5
    python -m keysmith generate --pronounceable --no-special
    python -m keysmith score mypassword
    python -m keysmith score -f passwords.txt
"""

import argparse
import logging
import sys

from keysmith import (
    MAX_UI_LENGTH,
    MIN_UI_LENGTH,
    GenerationConfig,
    PasswordEngine,
    __version__,
    score_strength,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="keysmith",
        description="Generate passwords and estimate their strength.",
    )
    parser.add_argument("--version", action="version", version=f"keysmith {__version__}")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=16,
        help="Password length (default: 16)",
    )
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-numbers", action="store_true")
    gen_p.add_argument("--no-special", action="store_true")
    gen_p.add_argument(
        "-p", "--pronounceable",
        action="store_true",
        help="Build the password from pronounceable syllables",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )

    # ── score ──────────────────────────────────────────────────────────
    score_p = sub.add_parser("score", help="Estimate the strength of passwords")
    score_p.add_argument("passwords", nargs="*", help="Passwords to score")
    score_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "score":
        return _cmd_score(args)

    parser.print_help()
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    try:
        config = GenerationConfig(
            length=args.length,
            lowercase=not args.no_lowercase,
            uppercase=not args.no_uppercase,
            numbers=not args.no_numbers,
            special=not args.no_special,
            pronounceable=args.pronounceable,
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not config.in_ui_range:
        print(
            f"Note: length {config.length} is outside the usual "
            f"{MIN_UI_LENGTH}-{MAX_UI_LENGTH} range",
            file=sys.stderr,
        )

    engine = PasswordEngine()
    if engine.entropy.fallback_engaged:
        print("Warning: system CSPRNG unavailable, using weak fallback entropy", file=sys.stderr)

    for _ in range(args.count):
        result = engine.generate(config)
        if not result.ok:
            print(f"Error: {result.message}", file=sys.stderr)
            return 1
        print(
            f"  {result.text}  ({result.label}, {result.entropy_bits} bits, "
            f"cracked in ~{result.crack_time})"
        )

    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.rstrip("\n") for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    for pwd in passwords:
        report = score_strength(pwd)
        filled = round(report["strength"] / 10)
        bar = "#" * filled + "-" * (10 - filled)
        print(f"  '{pwd}'")
        print(
            f"            Strength: [{bar}] {report['label']} "
            f"({report['entropy_bits']} bits, {report['strength']:.0f}/100)"
        )
        print(
            f"            Length: {report['length_label']}  "
            f"Crack time: ~{report['crack_time']}"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
