"""SessionService — runs a stream of command lines against one robot.

Every call to :meth:`SessionService.run` builds a fresh :class:`Robot`,
so sessions never share state. Lines are processed strictly in order and
no single line can abort the session: empty and invalid lines are
recorded and processing moves on.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel

from toyrobot.config.models import GridConfig
from toyrobot.domain.commands import Command, CommandName, Place
from toyrobot.domain.errors import CommandError
from toyrobot.domain.parser import parse
from toyrobot.domain.robot import Pose, Robot
from toyrobot.services.dispatcher import Dispatcher, Outcome, ReportSink
from toyrobot.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class LineStatus(StrEnum):
    """Per-line outcome as seen by the driver."""

    APPLIED = "applied"
    IGNORED = "ignored"
    REPORTED = "reported"
    EMPTY_INPUT = "empty_input"
    INVALID_COMMAND = "invalid_command"


_ERROR_STATUS: dict[str, LineStatus] = {
    "EMPTY_INPUT": LineStatus.EMPTY_INPUT,
    "INVALID_COMMAND": LineStatus.INVALID_COMMAND,
}


def _was_ignored(robot: Robot, command: Command, before: Pose) -> bool:
    """True when the robot's bounds check silently dropped *command*."""
    if isinstance(command, Place):
        return not robot.in_bounds(command.x, command.y)
    return command.name is CommandName.MOVE and robot.pose == before


class LineResult(BaseModel):
    """What happened to one input line (1-based ``number``)."""

    model_config = {"frozen": True}

    number: int
    line: str
    status: LineStatus
    output: str | None = None
    error: ServiceError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def outcome(self) -> Outcome:
        """Collapse the status to the dispatcher's three-way outcome."""
        if self.failed:
            return Outcome.REJECTED
        if self.status is LineStatus.REPORTED:
            return Outcome.REPORTED
        return Outcome.APPLIED


LineObserver = Callable[[LineResult], None]


class SessionService:
    """Runs command sessions on a grid of the configured size."""

    def __init__(
        self,
        grid: GridConfig | None = None,
        *,
        sink: ReportSink | None = None,
        observer: LineObserver | None = None,
    ) -> None:
        self._grid = grid or GridConfig()
        self._sink = sink
        self._observer = observer

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _unreadable(source: str, exc: Exception) -> ServiceResult:
        logger.info("Cannot read %s: %s", source, exc)
        return ServiceResult(
            ok=False,
            op="run_session",
            error=ServiceError(
                code="SOURCE_UNREADABLE",
                message=f"Cannot read {source}: {exc}",
                detail={"source": source},
            ),
        )

    def _step(self, dispatcher: Dispatcher, number: int, raw: str) -> LineResult:
        line = raw.rstrip("\r\n")
        robot = dispatcher.robot
        try:
            command = parse(line)
            before = robot.pose
            execution = dispatcher.execute(command)
        except CommandError as exc:
            logger.info("Line %d rejected (%s): %r", number, exc.code, line)
            return LineResult(
                number=number,
                line=line,
                status=_ERROR_STATUS[exc.code],
                error=ServiceError(code=exc.code, message=exc.message, detail={"line": line}),
            )

        if execution.outcome is Outcome.REPORTED:
            status = LineStatus.REPORTED
        elif _was_ignored(robot, command, before):
            status = LineStatus.IGNORED
        else:
            status = LineStatus.APPLIED
        logger.debug("Line %d %s: %r -> %s", number, status, line, robot.pose)
        return LineResult(number=number, line=line, status=status, output=execution.output)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, lines: Iterable[str], *, source: str = "<input>") -> ServiceResult:
        """Run *lines* as one session on a freshly placed robot."""
        robot = Robot(self._grid.width, self._grid.height)
        dispatcher = Dispatcher(robot, sink=self._sink)
        logger.info("Session started: %s (%dx%d)", source, robot.width, robot.height)

        results: list[LineResult] = []
        for number, raw in enumerate(lines, start=1):
            result = self._step(dispatcher, number, raw)
            results.append(result)
            if self._observer is not None:
                self._observer(result)

        counts = Counter(str(r.status) for r in results)
        logger.info("Session finished: %s, %d lines, final %s", source, len(results), robot.pose)
        return ServiceResult(
            ok=True,
            op="run_session",
            data={
                "source": source,
                "lines": [r.model_dump(mode="json") for r in results],
                "reports": [r.output for r in results if r.output is not None],
                "final": robot.report(),
                "counts": dict(counts),
            },
            warnings=[
                f"line {r.number}: {r.error.message}" for r in results if r.error is not None
            ],
            meta={"grid": {"width": robot.width, "height": robot.height}},
        )

    def run_stream(self, lines: Iterable[str], *, source: str) -> ServiceResult:
        """Like :meth:`run`, but a read or decode failure of *lines* fails the session."""
        try:
            return self.run(lines, source=source)
        except (OSError, UnicodeDecodeError) as exc:
            return self._unreadable(source, exc)

    def run_file(self, path: Path) -> ServiceResult:
        """Run the lines of a UTF-8 text file as one session."""
        source = str(path)
        try:
            with path.open(encoding="utf-8") as fh:
                return self.run_stream(fh, source=source)
        except OSError as exc:
            return self._unreadable(source, exc)

    def run_files(self, paths: Iterable[Path]) -> list[ServiceResult]:
        """Run each file as its own isolated session."""
        return [self.run_file(path) for path in paths]
