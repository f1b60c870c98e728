#!/usr/bin/env python3
"""Locale Negotiator Fuzzer (Atheris).

Targets: localematch.tags.parser and localematch.negotiation.resolver
Tests tag parsing, canonical serialization and negotiation over arbitrary
locale lists.

Usage:
    pip install localematch[fuzz]
    python fuzz/fuzz_negotiator.py -max_total_time=60
"""

from __future__ import annotations

import atexit
import json
import logging
import sys
from typing import TypeAlias

# --- PEP 695 Type Aliases ---
FuzzStats: TypeAlias = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    print("Atheris is required: pip install localematch[fuzz]", file=sys.stderr)
    sys.exit(1)

logging.getLogger("localematch").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["localematch"]):
    from localematch.negotiation import resolve, resolve_tag
    from localematch.tags import parse_tag


def _consume_locales(fdp: atheris.FuzzedDataProvider) -> list[str]:
    return [fdp.ConsumeUnicodeNoSurrogates(16) for _ in range(fdp.ConsumeIntInRange(0, 5))]


def test_one_input(data: bytes) -> None:
    """Atheris entry point: Test tag parsing and locale negotiation."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    try:
        # 1. Parsing never raises; canonical form is a fixed point
        raw = fdp.ConsumeUnicodeNoSurrogates(40)
        tag, error = parse_tag(raw)
        assert (tag is None) != (error is None)
        if tag is not None:
            reparsed, _ = parse_tag(str(tag))
            assert reparsed == tag

        # 2. Negotiation over random lists
        available = _consume_locales(fdp)
        user = _consume_locales(fdp)
        result = resolve(available, user)
        if result is not None:
            assert result in {str(t) for code in available if (t := parse_tag(code)[0])}
            selected = resolve_tag(available, user)
            assert selected is not None
            assert str(selected) == result

        # 3. Malformed entries are transparent
        assert resolve([*available, "ru--"], ["en_US", *user]) == result

    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
