from __future__ import annotations

import sys
from typing import TextIO

import structlog

from .checker import build_index
from .config import Settings
from .domain import Domain, InvalidDomainError, canonicalize
from .logging_config import setup_logging
from .models import CheckResult, RunStats, Verdict
from .output import JsonLinesHandler, OutputHandler, StdoutHandler
from .reader import InputFormatError, read_lines, read_number_on_line

log = structlog.get_logger()


def _get_handler(settings: Settings, stdout: TextIO) -> OutputHandler:
    if settings.output_format == "json":
        return JsonLinesHandler(stdout)
    return StdoutHandler(stdout)


def _parse_all(
    raw_names: list[str], settings: Settings, stats: RunStats
) -> list[tuple[str, Domain]]:
    parsed = []
    for lineno, raw in enumerate(raw_names, start=1):
        try:
            parsed.append((raw, canonicalize(raw)))
        except InvalidDomainError:
            if settings.on_invalid == "abort":
                raise
            log.warning("invalid_domain_skipped", line=lineno, raw=raw)
            stats.skipped += 1
    return parsed


def run(stdin: TextIO, stdout: TextIO, settings: Settings) -> RunStats:
    """Read forbidden domains and candidates from ``stdin``, write verdicts."""
    stats = RunStats()
    handler = _get_handler(settings, stdout)

    # 1. Forbidden domains
    forbidden_raw = read_lines(stdin, read_number_on_line(stdin))
    stats.forbidden_read = len(forbidden_raw)
    forbidden = [domain for _, domain in _parse_all(forbidden_raw, settings, stats)]

    # 2. Build the index before reading any candidate
    checker = build_index(forbidden)
    stats.forbidden_retained = len(checker)

    # 3. Candidates, answered in input order
    candidates_raw = read_lines(stdin, read_number_on_line(stdin))
    stats.candidates_read = len(candidates_raw)

    for raw, domain in _parse_all(candidates_raw, settings, stats):
        if checker.is_forbidden(domain):
            verdict = Verdict.BAD
            stats.bad_count += 1
        else:
            verdict = Verdict.GOOD
            stats.good_count += 1
        handler.emit_result(
            CheckResult(domain=raw, canonical=domain.reversed_name, verdict=verdict)
        )
        stats.candidates_checked += 1

    handler.emit_summary(stats)
    log.info("run_complete", **stats.model_dump())
    return stats


def main() -> int:
    settings = Settings()
    setup_logging(settings.log_level)
    try:
        run(sys.stdin, sys.stdout, settings)
    except (InputFormatError, InvalidDomainError) as exc:
        log.error("run_failed", error=str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
