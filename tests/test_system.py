import unittest
from unittest.mock import mock_open, patch

from how_cli import system


class TestDetectShell(unittest.TestCase):
    def test_shell_from_environment(self):
        self.assertEqual(
            system.detect_shell("linux", {"SHELL": "/usr/bin/fish"}), ("fish", "/usr/bin/fish")
        )

    def test_windows_powershell(self):
        self.assertEqual(
            system.detect_shell("windows", {"PSModulePath": "C:\\modules"}),
            ("powershell", "powershell.exe"),
        )

    def test_windows_cmd(self):
        self.assertEqual(system.detect_shell("windows", {}), ("cmd", "cmd.exe"))

    def test_unix_default(self):
        self.assertEqual(system.detect_shell("linux", {}), ("sh", "/bin/sh"))


class TestDetectOS(unittest.TestCase):
    @patch("builtins.open", new_callable=mock_open, read_data='ID=arch\nNAME="Arch Linux"\n')
    def test_linux_distro_from_os_release(self, mock_file):
        self.assertEqual(system.detect_os_name("linux"), "Arch Linux")

    @patch("builtins.open", side_effect=OSError)
    def test_linux_without_release_files(self, mock_file):
        self.assertEqual(system.detect_os_name("linux"), "Linux")

    def test_known_platforms(self):
        self.assertEqual(system.detect_os_name("darwin"), "macOS")
        self.assertEqual(system.detect_os_name("windows"), "Windows")
        self.assertEqual(system.detect_os_name("freebsd"), "FreeBSD")
        self.assertEqual(system.detect_os_name("sunos5"), "sunos5")


class TestDetectPackageManager(unittest.TestCase):
    @patch("how_cli.system.shutil.which")
    def test_linux_first_available(self, mock_which):
        mock_which.side_effect = lambda cmd: "/usr/bin/dnf" if cmd in ("dnf", "zypper") else None

        self.assertEqual(system.detect_package_manager("linux"), "dnf")

    @patch("how_cli.system.shutil.which", return_value=None)
    def test_linux_unknown(self, mock_which):
        self.assertEqual(system.detect_package_manager("linux"), "unknown")

    @patch("how_cli.system.shutil.which", return_value=None)
    def test_windows_defaults_to_winget(self, mock_which):
        self.assertEqual(system.detect_package_manager("windows"), "winget")

    def test_fixed_platforms(self):
        self.assertEqual(system.detect_package_manager("darwin"), "brew")
        self.assertEqual(system.detect_package_manager("freebsd"), "pkg")
        self.assertEqual(system.detect_package_manager("plan9"), "unknown")


class TestDetectSystem(unittest.TestCase):
    @patch("how_cli.system.detect_package_manager", return_value="brew")
    @patch("how_cli.system.detect_shell", return_value=("zsh", "/bin/zsh"))
    @patch("how_cli.system._platform", return_value="darwin")
    def test_builds_context(self, mock_platform, mock_shell, mock_pm):
        context = system.detect_system()

        self.assertEqual(context.os_name, "macOS")
        self.assertEqual(context.shell, "zsh")
        self.assertEqual(context.package_manager, "brew")
        self.assertEqual(context.describe(), "macOS using zsh shell")
