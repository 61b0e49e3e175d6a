import os
import shutil
import sys

from typing import Dict, Optional, Tuple

from .ai.types import SystemContext


OS_RELEASE_FILES = (
    ("/etc/os-release", "NAME="),
    ("/etc/lsb-release", "DISTRIB_ID="),
)

LINUX_PACKAGE_MANAGERS = ("apt", "pacman", "yum", "dnf", "zypper")
WINDOWS_PACKAGE_MANAGERS = ("choco", "scoop")


def _platform() -> str:
    """Normalized platform name: darwin, linux, windows, freebsd, ..."""
    if sys.platform == "win32":
        return "windows"
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform.startswith("freebsd"):
        return "freebsd"
    return sys.platform


def _read_release_value(path: str, key: str) -> Optional[str]:
    try:
        with open(path, "r") as release_file:
            for line in release_file:
                if line.startswith(key):
                    return line[len(key):].strip().strip('"')
    except OSError:
        return None
    return None


def detect_linux_distro() -> str:
    for path, key in OS_RELEASE_FILES:
        name = _read_release_value(path, key)
        if name:
            return name
    return "Linux"


def detect_os_name(platform: str) -> str:
    names = {"darwin": "macOS", "windows": "Windows", "freebsd": "FreeBSD"}
    if platform == "linux":
        return detect_linux_distro()
    return names.get(platform, platform)


def detect_shell(platform: str, environ: Optional[Dict[str, str]] = None) -> Tuple[str, str]:
    """Returns the shell name and the path to its executable."""
    environ = os.environ if environ is None else environ
    shell_path = environ.get("SHELL", "")
    if shell_path:
        return os.path.basename(shell_path), shell_path

    if platform == "windows":
        if environ.get("PSModulePath"):
            return "powershell", "powershell.exe"
        return "cmd", "cmd.exe"

    return "sh", "/bin/sh"


def detect_package_manager(platform: str) -> str:
    if platform == "darwin":
        return "brew"
    if platform == "freebsd":
        return "pkg"

    if platform == "windows":
        candidates, fallback = WINDOWS_PACKAGE_MANAGERS, "winget"
    elif platform == "linux":
        candidates, fallback = LINUX_PACKAGE_MANAGERS, "unknown"
    else:
        return "unknown"

    for command in candidates:
        if shutil.which(command):
            return command
    return fallback


def detect_system() -> SystemContext:
    platform = _platform()
    shell, _ = detect_shell(platform)
    return SystemContext(
        os_name=detect_os_name(platform),
        shell=shell,
        package_manager=detect_package_manager(platform),
    )
