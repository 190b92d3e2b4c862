"""Shell execution utilities.

Provides subprocess execution that honours an OperationContext: the
child is polled while it runs and killed as soon as the context is
canceled or its deadline passes.
"""

import os
import shutil
import signal
import subprocess
from dataclasses import dataclass

from wsctl.core.context import OperationContext
from wsctl.core.errors import CommandError, ContextCanceledError

# Interval between cancellation checks while a child runs
_POLL_INTERVAL: float = 0.1


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command, negative if killed by a signal.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0

    @property
    def killed_by_signal(self) -> bool:
        """Check if the command was terminated by a signal."""
        return self.returncode < 0

    @property
    def signal_name(self) -> str | None:
        """Name of the terminating signal (e.g. 'SIGKILL'), if any."""
        if not self.killed_by_signal:
            return None
        try:
            return signal.Signals(-self.returncode).name
        except ValueError:
            return None


def run_command(
    args: list[str],
    *,
    ctx: OperationContext | None = None,
    timeout: float | None = 60.0,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
    capture: bool = True,
) -> CommandResult:
    """Execute a command and return the result.

    Args:
        args: Command and arguments to execute.
        ctx: Context whose cancellation or deadline kills the command.
        timeout: Maximum time in seconds, applied on top of the context
            deadline. None means only the context bounds the command.
        cwd: Working directory for the command. If None, uses current directory.
        env: Environment overlay, merged over the current environment
            for this command only.
        capture: If False, output goes to the terminal instead of being
            captured; stdout and stderr in the result are then empty.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        CommandError: With reason 'canceled' or 'deadline' if the context
            ended before the command finished.
        FileNotFoundError: If command executable is not found.
    """
    ctx = ctx or OperationContext.background()
    if timeout is not None:
        ctx = ctx.with_timeout(timeout)

    aborted = ctx.err()
    if aborted is not None:
        raise CommandError(args, reason=_abort_reason(aborted)) from aborted

    full_env = {**os.environ, **env} if env else None
    pipe = subprocess.PIPE if capture else None

    proc = subprocess.Popen(  # nosec: B603
        args,
        stdout=pipe,
        stderr=pipe,
        text=True,
        cwd=cwd,
        env=full_env,
    )

    while True:
        try:
            stdout, stderr = proc.communicate(timeout=_POLL_INTERVAL)
            break
        except subprocess.TimeoutExpired:
            aborted = ctx.err()
            if aborted is None:
                continue
            proc.kill()
            _, stderr = proc.communicate()
            raise CommandError(
                args,
                returncode=proc.returncode,
                stderr=stderr or "",
                reason=_abort_reason(aborted),
            ) from aborted

    return CommandResult(
        stdout=stdout or "",
        stderr=stderr or "",
        returncode=proc.returncode,
    )


def _abort_reason(error: Exception) -> str:
    return "canceled" if isinstance(error, ContextCanceledError) else "deadline"


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None
