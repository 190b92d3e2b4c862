"""Subprocess-backed command runner."""

import logging

from wsctl.core.context import OperationContext
from wsctl.core.errors import CommandError
from wsctl.core.proxy import get_proxy_env
from wsctl.platform.base import CommandRunner
from wsctl.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)


class SubprocessCommandRunner(CommandRunner):
    """Runs commands with subprocess.

    Proxy variables are merged into every child environment, under any
    per-call overlay.

    Attributes:
        verbose: If True, every command line is logged at info level.
        stream_output: If True, execute() and execute_sudo() let the
            child write directly to the terminal.
    """

    def __init__(self, verbose: bool = False, stream_output: bool = False) -> None:
        self.verbose = verbose
        self.stream_output = stream_output

    def execute(
        self,
        ctx: OperationContext,
        name: str,
        *args: str,
        env: dict[str, str] | None = None,
    ) -> None:
        self._run(ctx, [name, *args], env, capture=not self.stream_output)

    def execute_with_output(
        self,
        ctx: OperationContext,
        name: str,
        *args: str,
        env: dict[str, str] | None = None,
    ) -> str:
        return self._run(ctx, [name, *args], env, capture=True).stdout

    def execute_sudo(
        self,
        ctx: OperationContext,
        name: str,
        *args: str,
        env: dict[str, str] | None = None,
    ) -> None:
        self._run(ctx, ["sudo", name, *args], env, capture=not self.stream_output)

    def command_exists(self, name: str) -> bool:
        return command_exists(name)

    def _run(
        self,
        ctx: OperationContext,
        command: list[str],
        env: dict[str, str] | None,
        *,
        capture: bool,
    ) -> CommandResult:
        if self.verbose:
            logger.info("Executing: %s", " ".join(command))
        else:
            logger.debug("Executing: %s", " ".join(command))

        merged_env = {**get_proxy_env(), **(env or {})}

        try:
            result = run_command(
                command,
                ctx=ctx,
                timeout=None,
                env=merged_env or None,
                capture=capture,
            )
        except FileNotFoundError as e:
            raise CommandError(command, reason="not_found") from e

        if result.killed_by_signal:
            logger.debug("%s terminated by %s", command[0], result.signal_name or result.returncode)
            raise CommandError(
                command,
                returncode=result.returncode,
                stderr=result.stderr,
                reason="signal",
            )
        if not result.success:
            raise CommandError(command, returncode=result.returncode, stderr=result.stderr)

        return result
