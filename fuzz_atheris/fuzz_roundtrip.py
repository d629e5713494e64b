#!/usr/bin/env python3
"""WSV Roundtrip Fuzzer (Atheris).

Targets: wsvlexengine.syntax.parser.WsvParser,
         wsvlexengine.syntax.serializer.WsvSerializer

Two input modes, chosen by deterministic round-robin so selection is
independent of the fuzzed bytes:

- text: raw fuzzed text goes to the parser. Any accepted document must
  survive serialize/parse unchanged.
- values: a jagged list of values (including None, "", "-" and strings
  rich in whitespace, quotes, hashes and line feeds) is built from the
  fuzzed bytes and serialized first.

Invariants:
- parse() never raises for str input; it returns a document or a ParseError
- parse(serialize(doc)) == doc
- Idempotence: serialize(parse(serialize(doc))) == serialize(doc)
- ParseError positions lie within their line

Finding Artifacts:
Invariant breaches write the offending input to
.fuzz_atheris_corpus/roundtrip/findings/ before re-raising.

Requires Python 3.13+.
"""

from __future__ import annotations

import argparse
import atexit
import json
import logging
import pathlib
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Any

_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for dependency check
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass

if _atheris_mod is None:
    print("-" * 80, file=sys.stderr)
    print("ERROR: Missing required dependency for fuzzing: atheris", file=sys.stderr)
    print("Install with: pip install -e '.[fuzz]'", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

import atheris  # noqa: E402  # pylint: disable=C0412,C0413

# --- State ---


@dataclass
class RoundtripState:
    """Observability counters for a fuzzing session."""

    iterations: int = 0
    findings: int = 0
    parse_errors: int = 0
    accepted_documents: int = 0
    status: str = "starting"
    checkpoint_interval: int = 500
    mode_coverage: dict[str, int] = field(default_factory=dict)
    error_counts: dict[str, int] = field(default_factory=dict)
    started_at: float = field(default_factory=time.time)


_state = RoundtripState()

_MODES: tuple[str, ...] = ("text", "text", "values")

# Characters the line state machine branches on
_INTERESTING = ['"', "#", "-", "/", "\n", "\r", " ", "\t", "\u00a0", "\u3000", "\u2028"]


class RoundtripFuzzError(Exception):
    """Raised when a roundtrip invariant is breached."""


# --- Reporting ---

_REPORT_DIR = pathlib.Path(".fuzz_atheris_corpus") / "roundtrip"
_FINDINGS_DIR = _REPORT_DIR / "findings"


def _emit_report() -> None:
    """Write the session report as JSON (crash-proof)."""
    try:
        _REPORT_DIR.mkdir(parents=True, exist_ok=True)
        stats = asdict(_state)
        stats["elapsed_seconds"] = round(time.time() - _state.started_at, 2)
        (_REPORT_DIR / "fuzz_roundtrip_report.json").write_text(
            json.dumps(stats, indent=2), encoding="utf-8"
        )
    except OSError as e:
        print(f"Failed to write fuzz report: {e}", file=sys.stderr)


atexit.register(_emit_report)


def _write_finding(kind: str, source: str) -> None:
    """Persist an input that breached an invariant."""
    _FINDINGS_DIR.mkdir(parents=True, exist_ok=True)
    path = _FINDINGS_DIR / f"{kind}_{_state.iterations}.wsv"
    path.write_text(source, encoding="utf-8")


# --- Instrumentation & Parser ---

logging.getLogger("wsvlexengine").setLevel(logging.CRITICAL)

atheris.enabled_hooks.add("str")

with atheris.instrument_imports(include=["wsvlexengine"]):
    from wsvlexengine.syntax import ParseError, WsvParser, WsvSerializer

_parser = WsvParser(max_source_size=0)
_serializer = WsvSerializer()


# --- Input construction ---


def _gen_value(fdp: atheris.FuzzedDataProvider) -> str | None:
    """Build one value biased towards special characters."""
    match fdp.ConsumeIntInRange(0, 5):
        case 0:
            return None
        case 1:
            return fdp.PickValueInList(["", "-", '"', "#", "\n"])
        case 2:
            length = fdp.ConsumeIntInRange(0, 8)
            return "".join(fdp.PickValueInList(_INTERESTING) for _ in range(length))
        case _:
            return fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 16))


def _gen_document(fdp: atheris.FuzzedDataProvider) -> list[list[str | None]]:
    """Build a jagged document of up to 6 lines."""
    return [
        [_gen_value(fdp) for _ in range(fdp.ConsumeIntInRange(0, 5))]
        for _ in range(fdp.ConsumeIntInRange(1, 6))
    ]


# --- Invariant checks ---


def _check_error(error: ParseError, source: str) -> None:
    lines = source.split("\n")
    if not 0 <= error.line_index < len(lines):
        _write_finding("bad_line_index", source)
        msg = f"line_index {error.line_index} outside {len(lines)} lines"
        raise RoundtripFuzzError(msg)
    if not 0 <= error.position <= len(lines[error.line_index]):
        _write_finding("bad_position", source)
        msg = f"position {error.position} outside line {error.line_index}"
        raise RoundtripFuzzError(msg)


def _check_roundtrip(document: tuple[tuple[str | None, ...], ...], origin: str) -> None:
    text = _serializer.serialize(document)
    reparsed = _parser.parse(text)
    if isinstance(reparsed, ParseError):
        _write_finding("reparse_failed", text)
        msg = f"serialized {origin} document failed to parse: {reparsed.message}"
        raise RoundtripFuzzError(msg)
    if reparsed != document:
        _write_finding("roundtrip_mismatch", text)
        msg = f"{origin} roundtrip mismatch: {document!r} != {reparsed!r}"
        raise RoundtripFuzzError(msg)
    if _serializer.serialize(reparsed) != text:
        _write_finding("not_idempotent", text)
        msg = f"{origin} serialization is not idempotent"
        raise RoundtripFuzzError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: parse/serialize roundtrip."""
    _state.iterations += 1
    _state.status = "running"

    if _state.iterations % _state.checkpoint_interval == 0:
        _emit_report()

    mode = _MODES[_state.iterations % len(_MODES)]
    _state.mode_coverage[mode] = _state.mode_coverage.get(mode, 0) + 1
    fdp = atheris.FuzzedDataProvider(data)

    try:
        if mode == "text":
            source = fdp.ConsumeUnicodeNoSurrogates(fdp.remaining_bytes())
            result = _parser.parse(source)
            if isinstance(result, ParseError):
                _state.parse_errors += 1
                _check_error(result, source)
                return
            _state.accepted_documents += 1
            _check_roundtrip(result, "parsed")
        else:
            document = tuple(tuple(line) for line in _gen_document(fdp))
            _check_roundtrip(document, "constructed")

    except RoundtripFuzzError:
        _state.findings += 1
        raise

    except KeyboardInterrupt:
        _state.status = "stopped"
        raise

    except Exception as e:  # pylint: disable=broad-exception-caught
        error_key = f"{type(e).__name__}_{str(e)[:30]}"
        _state.error_counts[error_key] = _state.error_counts.get(error_key, 0) + 1
        raise


def main() -> None:
    """Run the roundtrip fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="WSV parse/serialize roundtrip fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--checkpoint-interval", type=int, default=500,
        help="Emit report every N iterations (default: 500)",
    )

    args, remaining = parser.parse_known_args()
    _state.checkpoint_interval = args.checkpoint_interval

    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=2048")

    sys.argv = [sys.argv[0], *remaining]

    print("=" * 80)
    print("WSV Roundtrip Fuzzer (Atheris)")
    print("Target:     WsvParser.parse, WsvSerializer.serialize")
    print(f"Checkpoint: every {_state.checkpoint_interval} iterations")
    print(f"Report:     {_REPORT_DIR}")
    print("=" * 80)

    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
