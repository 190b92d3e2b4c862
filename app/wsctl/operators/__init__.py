"""Installation operators, one per installation method.

This module provides the abstract Operator and the concrete operators
the installer dispatches to.
"""

from wsctl.operators.apt import AptOperator
from wsctl.operators.aqua import AquaOperator
from wsctl.operators.base import Operator, Outcome, OutcomeKind
from wsctl.operators.binary import BinaryOperator
from wsctl.operators.deb import DebOperator
from wsctl.operators.flatpak import FlatpakOperator
from wsctl.operators.github import (
    GitHubBinaryOperator,
    GitHubBundleOperator,
    GitHubJavaOperator,
    LegacyGitHubOperator,
    extract_repo_name,
)
from wsctl.operators.mise import MiseOperator
from wsctl.operators.script import ScriptOperator
from wsctl.operators.snap import SnapOperator

__all__ = [
    "AptOperator",
    "AquaOperator",
    "BinaryOperator",
    "DebOperator",
    "FlatpakOperator",
    "GitHubBinaryOperator",
    "GitHubBundleOperator",
    "GitHubJavaOperator",
    "LegacyGitHubOperator",
    "MiseOperator",
    "Operator",
    "Outcome",
    "OutcomeKind",
    "ScriptOperator",
    "SnapOperator",
    "extract_repo_name",
]
