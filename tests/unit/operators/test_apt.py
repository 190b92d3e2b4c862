"""Unit tests for AptOperator."""

import pytest
from fakes import FakeFiles, FakeNetwork, FakeRunner
from wsctl.core.context import OperationContext
from wsctl.core.errors import CommandError, InstallStepError
from wsctl.models.package import InstallMethod, Package
from wsctl.operators.apt import AptOperator
from wsctl.operators.base import OutcomeKind

VIM = Package(name="vim", source="vim", method=InstallMethod.APT)


@pytest.fixture
def operator(runner: FakeRunner, files: FakeFiles, network: FakeNetwork) -> AptOperator:
    """Live APT operator."""
    return AptOperator(runner, files, network)


class TestAptOperator:
    """Tests for AptOperator class."""

    def test_method(self, operator: AptOperator) -> None:
        """Operator handles APT."""
        assert operator.method is InstallMethod.APT

    def test_is_available(self, operator: AptOperator, runner: FakeRunner) -> None:
        """Availability follows apt-get on PATH."""
        assert operator.is_available() is False
        runner.available.add("apt-get")
        assert operator.is_available() is True

    def test_install_updates_then_installs(
        self, operator: AptOperator, runner: FakeRunner, ctx: OperationContext
    ) -> None:
        """apt-get update runs before apt-get install."""
        outcome = operator.install(ctx, VIM)

        assert outcome.kind is OutcomeKind.DONE
        assert runner.lines_of("sudo") == ["sudo apt-get update", "sudo apt-get install -y vim"]

    def test_proxy_options(
        self, operator: AptOperator, runner: FakeRunner, ctx: OperationContext, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Proxy settings are passed as Acquire options."""
        monkeypatch.setenv("http_proxy", "http://proxy:3128")

        operator.install(ctx, VIM)

        assert runner.lines_of("sudo") == [
            "sudo apt-get -o Acquire::http::Proxy=http://proxy:3128 update",
            "sudo apt-get -o Acquire::http::Proxy=http://proxy:3128 install -y vim",
        ]

    def test_update_failure(self, operator: AptOperator, runner: FakeRunner, ctx: OperationContext) -> None:
        """A failing update stops the install with InstallStepError."""
        runner.failures["sudo apt-get update"] = "exit"

        with pytest.raises(InstallStepError, match="failed to update package lists"):
            operator.install(ctx, VIM)

        assert "sudo apt-get install -y vim" not in runner.lines

    def test_install_failure(self, operator: AptOperator, runner: FakeRunner, ctx: OperationContext) -> None:
        """A failing install raises CommandError."""
        runner.failures["sudo apt-get install -y vim"] = "exit"

        with pytest.raises(CommandError):
            operator.install(ctx, VIM)

    def test_skips_when_found_anywhere(self, operator: AptOperator, runner: FakeRunner, ctx: OperationContext) -> None:
        """A binary on PATH counts as installed."""
        runner.available.add("vim")

        outcome = operator.install(ctx, VIM)

        assert outcome.kind is OutcomeKind.SKIPPED
        assert runner.lines_of("sudo") == []

    def test_dry_run(self, runner: FakeRunner, files: FakeFiles, network: FakeNetwork, ctx: OperationContext) -> None:
        """Dry-run reports both commands and runs nothing."""
        outcome = AptOperator(runner, files, network, dry_run=True).install(ctx, VIM)

        assert outcome.kind is OutcomeKind.DRY_RUN
        assert outcome.detail == "sudo apt-get update && sudo apt-get install -y vim"
        assert runner.calls == []

    def test_remove(self, operator: AptOperator, runner: FakeRunner, ctx: OperationContext) -> None:
        """Removal uses apt-get remove."""
        operator.remove(ctx, VIM)
        assert runner.lines_of("sudo") == ["sudo apt-get remove -y vim"]

    def test_list_packages_skips_malformed_lines(
        self, operator: AptOperator, runner: FakeRunner, ctx: OperationContext
    ) -> None:
        """Lines without a version are ignored."""
        runner.outputs["dpkg-query -W --showformat=${Package} ${Version}\\n"] = "vim 9.1\nbroken\n\ncurl 8.5\n"

        packages = operator.list_packages(ctx)

        assert [p.name for p in packages] == ["vim", "curl"]
        assert all(p.method is InstallMethod.APT for p in packages)
