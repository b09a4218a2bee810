"""
Client detection strategies

Each detector returns the lowercase name of the application that asked for
the URL to be opened, or None when its data source gives no usable signal.
Detectors never raise; detect_client() tries them in priority order.
"""

import json
import os
import subprocess
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence

import psutil

from .logger import get_logger


PROGRAM_NAME = "hyprchoosy"

HYPRCTL_COMMAND = ["hyprctl", "activewindow", "-j"]

DESKTOP_FILE_ENV_VAR = "GIO_LAUNCHED_DESKTOP_FILE"
DESKTOP_SUFFIX = ".desktop"

# Wrapper processes that sit between the real client and us
SKIP_LIST = (
    "xdg-open",
    "gio",
    "systemd",
    "dbus-daemon",
    "bash",
    "sh",
    "zsh",
    "fish",
    "coreutils",
    "xdg-desktop-portal",
    "xdg-desktop-portal-gtk",
    "xdg-desktop-portal-hyprland",
)

MAX_STEPS = 16


Detector = Callable[[], Optional[str]]


def detect_from_window_manager(runner: Callable = subprocess.run) -> Optional[str]:
    """
    Detect client from the Hyprland active window class

    Args:
        runner: subprocess.run compatible callable

    Returns:
        Lowercased window class or None
    """
    logger = get_logger()
    logger.debug("Attempting to detect client from Hyprland active window...")

    try:
        result = runner(HYPRCTL_COMMAND, capture_output=True)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("hyprctl could not be run: %s", e)
        return None

    if result.returncode != 0:
        logger.debug("hyprctl exited with status %s", result.returncode)
        return None

    try:
        # Window titles may carry bytes that are not valid UTF-8
        window = json.loads(result.stdout.decode("utf-8", errors="replace"))
    except (AttributeError, TypeError, ValueError):
        logger.debug("hyprctl output is not valid JSON")
        return None

    if not isinstance(window, dict) or not isinstance(window.get("class"), str):
        logger.debug("hyprctl output has no window class")
        return None

    window_class = window["class"].lower()
    if not window_class or window_class == "unknown":
        logger.debug("Could not extract valid class from Hyprland window")
        return None

    logger.info("Detected client from Hyprland window: '%s'", window_class)
    return window_class


def detect_from_environment(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Detect client from the desktop file GIO recorded at launch

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Desktop file name without suffix, or None
    """
    if environ is None:
        environ = os.environ

    logger = get_logger()
    desktop_file = environ.get(DESKTOP_FILE_ENV_VAR)
    if desktop_file is None:
        logger.debug("%s is not set", DESKTOP_FILE_ENV_VAR)
        return None

    logger.debug("Found %s: %s", DESKTOP_FILE_ENV_VAR, desktop_file)

    app_name = desktop_file.rsplit("/", 1)[-1]
    while app_name.endswith(DESKTOP_SUFFIX):
        app_name = app_name[:-len(DESKTOP_SUFFIX)]

    if not app_name:
        return None

    if app_name == PROGRAM_NAME:
        # We were launched through our own desktop file
        logger.debug("Skipping %s%s (looking for originating app)",
                     PROGRAM_NAME, DESKTOP_SUFFIX)
        return None

    logger.info("Detected client from env: '%s'", app_name)
    return app_name


@dataclass(frozen=True)
class ProcessEntry:
    """One row of a process table snapshot"""
    pid: int
    ppid: Optional[int]
    name: str


class ProcessTable:
    """Read-only snapshot of the process table, keyed by pid"""

    def __init__(self, entries: Optional[Mapping[int, ProcessEntry]] = None):
        self._entries: Dict[int, ProcessEntry] = dict(entries or {})

    @classmethod
    def from_pairs(cls, processes: Mapping[int, tuple]) -> 'ProcessTable':
        """Build a table from {pid: (ppid, name)}"""
        return cls({
            pid: ProcessEntry(pid=pid, ppid=ppid, name=name)
            for pid, (ppid, name) in processes.items()
        })

    @classmethod
    def snapshot(cls) -> 'ProcessTable':
        """Snapshot every process visible to us"""
        entries = {}
        for proc in psutil.process_iter(['pid', 'ppid', 'name']):
            info = proc.info
            entries[info['pid']] = ProcessEntry(
                pid=info['pid'],
                ppid=info.get('ppid'),
                name=info.get('name') or "",
            )
        return cls(entries)

    def get(self, pid: int) -> Optional[ProcessEntry]:
        return self._entries.get(pid)

    def parent_of(self, pid: int) -> Optional[ProcessEntry]:
        """Get parent entry of pid, or None if either is unknown"""
        entry = self.get(pid)
        if entry is None or entry.ppid is None or entry.ppid <= 0:
            return None
        return self.get(entry.ppid)


def is_wrapper(name: str) -> bool:
    """Check if a process name belongs to a shell, portal or session daemon"""
    return any(skip in name for skip in SKIP_LIST)


def detect_from_process_tree(table: Optional[ProcessTable] = None,
                             pid: Optional[int] = None) -> Optional[str]:
    """
    Detect client by walking up the process tree

    Args:
        table: Process table snapshot (default: fresh psutil snapshot)
        pid: Starting pid (default: current process)

    Returns:
        First non-wrapper ancestor name, lowercased, or None
    """
    logger = get_logger()
    logger.debug("Attempting to detect client from process tree...")

    if table is None:
        try:
            table = ProcessTable.snapshot()
        except psutil.Error as e:
            logger.debug("Process table snapshot failed: %s", e)
            return None

    if pid is None:
        pid = os.getpid()

    logger.debug("Current PID: %s", pid)

    for step in range(MAX_STEPS):
        parent = table.parent_of(pid)
        if parent is None:
            logger.debug("Step %d: no parent found for PID %s", step, pid)
            return None

        name = parent.name.lower()
        logger.debug("Step %d: PID %s -> PPID %s (name: '%s')",
                     step, pid, parent.pid, name)

        if name and not is_wrapper(name):
            logger.info("Detected client from process tree: '%s'", name)
            return name

        pid = parent.pid

    logger.warning("Client detection from process tree failed after %d steps", MAX_STEPS)
    return None


DEFAULT_DETECTORS: Sequence[Detector] = (
    detect_from_window_manager,
    detect_from_environment,
    detect_from_process_tree,
)


def detect_client(detectors: Optional[Sequence[Detector]] = None) -> Optional[str]:
    """
    Detect the requesting client

    Stops at the first detector that reports a client; later detectors
    are never called.

    Args:
        detectors: Detector functions in priority order

    Returns:
        Client name or None if every detector failed
    """
    if detectors is None:
        detectors = DEFAULT_DETECTORS

    logger = get_logger()
    logger.info("Starting client detection...")

    for detector in detectors:
        client = detector()
        if client:
            return client

    logger.warning("All client detection methods failed")
    return None
