"""Interval scheduling of backup runs."""

import time
import logging
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable

from .errors import BackupError
from .runner import BackupRunner
from ..utils.formatters import format_date


def local_now() -> datetime:
    """Current local time with its zone attached."""
    return datetime.now().astimezone()


class SchedulerState(Enum):
    """Scheduler states. There is no terminal state."""
    RUNNING = "running"


class BackupScheduler:
    """Runs a backup, sleeps for the interval and repeats until killed."""

    def __init__(self, runner: BackupRunner, interval_seconds: int = 0,
                 clock: Callable[[], datetime] = local_now,
                 sleep: Callable[[float], None] = time.sleep):
        """Initialize scheduler.

        Args:
            runner: Runner invoked once per tick.
            interval_seconds: Delay between runs. Zero means back to back.
            clock: Returns the current time.
            sleep: Blocks for the given number of seconds.
        """
        self.runner = runner
        self.interval = timedelta(seconds=interval_seconds)
        self.clock = clock
        self.sleep = sleep
        self.state = SchedulerState.RUNNING
        self.runs = 0
        self.failures = 0
        self.logger = logging.getLogger(__name__)

    def tick(self) -> bool:
        """Execute one run, report it and wait for the next one.

        Errors are logged and swallowed so the loop keeps going.

        Returns:
            True if the run succeeded.
        """
        self.logger.info(f"Starting backup at {format_date(self.clock())} ...")
        self.runs += 1

        success = False
        try:
            self.runner.run()
            success = True
        except BackupError as e:
            self.logger.error(f"Error backing up files: {e}")
        except Exception as e:
            self.logger.exception(f"Unexpected error backing up files: {e}")

        if success:
            self.logger.info("File(s) backed up successfully!")
        else:
            self.failures += 1

        next_run = self.clock() + self.interval
        self.logger.info(f"Next backup scheduled at {format_date(next_run)} ...")
        self.sleep(self.interval.total_seconds())
        return success

    def run_forever(self) -> None:
        """Loop over ticks for as long as the process lives."""
        while self.state is SchedulerState.RUNNING:
            self.tick()
