"""Ports to the host system and their local adapters.

This module exports the abstract ports and the concrete implementations
used outside of tests.
"""

from wsctl.platform.base import CommandRunner, FileManager, NetworkClient, SystemDetector
from wsctl.platform.commands import SubprocessCommandRunner
from wsctl.platform.detector import LinuxSystemDetector
from wsctl.platform.files import LocalFileManager
from wsctl.platform.network import HttpNetworkClient

__all__ = [
    "CommandRunner",
    "FileManager",
    "HttpNetworkClient",
    "LinuxSystemDetector",
    "LocalFileManager",
    "NetworkClient",
    "SubprocessCommandRunner",
    "SystemDetector",
]
