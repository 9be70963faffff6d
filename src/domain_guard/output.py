from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

import structlog

from .models import CheckResult, RunStats, Verdict
from .yaml_config import get_output_strings

log = structlog.get_logger()


class OutputHandler(ABC):
    @abstractmethod
    def emit_result(self, result: CheckResult) -> None: ...

    @abstractmethod
    def emit_summary(self, stats: RunStats) -> None: ...


class StdoutHandler(OutputHandler):
    """Prints one Bad/Good line per candidate."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout
        strings = get_output_strings()
        self.labels = {
            Verdict.BAD: strings["forbidden_label"],
            Verdict.GOOD: strings["allowed_label"],
        }

    def emit_result(self, result: CheckResult) -> None:
        print(self.labels[result.verdict], file=self.stream)

    def emit_summary(self, stats: RunStats) -> None:
        # stdout carries verdicts only
        log.info("run_summary", **stats.model_dump())


class JsonLinesHandler(OutputHandler):
    """Prints each result, then the run stats, as one JSON object per line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def emit_result(self, result: CheckResult) -> None:
        print(result.model_dump_json(), file=self.stream)

    def emit_summary(self, stats: RunStats) -> None:
        print(stats.model_dump_json(), file=self.stream)
