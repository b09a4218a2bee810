"""Tests for browser module (spawning the chosen browser)."""
import pytest
from unittest.mock import patch
import subprocess

from hyprchoosy.browser import launch_browser, browser_argv
from hyprchoosy.config import parse_config
from hyprchoosy.exceptions import LaunchException


@pytest.mark.unit
class TestLaunchBrowser:
    """Test launch_browser function."""

    @patch('subprocess.Popen')
    def test_spawns_with_url_argument(self, mock_popen):
        launch_browser('firefox', 'https://example.com')
        mock_popen.assert_called_once()
        assert mock_popen.call_args[0][0] == ['firefox', 'https://example.com']

    @patch('subprocess.Popen')
    def test_detached_with_devnull(self, mock_popen):
        launch_browser('/usr/bin/chrome', 'https://example.com')
        call_kwargs = mock_popen.call_args[1]
        assert call_kwargs['stdin'] == subprocess.DEVNULL
        assert call_kwargs['stdout'] == subprocess.DEVNULL
        assert call_kwargs['stderr'] == subprocess.DEVNULL
        assert call_kwargs['start_new_session'] is True
        assert 'shell' not in call_kwargs

    @patch('subprocess.Popen')
    def test_browser_with_args(self, mock_popen):
        launch_browser('google-chrome --new-window', 'https://example.com')
        assert mock_popen.call_args[0][0] == [
            'google-chrome', '--new-window', 'https://example.com'
        ]

    @patch('subprocess.Popen')
    def test_url_not_shell_interpreted(self, mock_popen):
        url = 'https://example.com/path?foo=bar&baz=qux#fragment'
        launch_browser('firefox', url)
        assert mock_popen.call_args[0][0][-1] == url

    @patch('subprocess.Popen')
    def test_spawn_failure(self, mock_popen):
        mock_popen.side_effect = FileNotFoundError("No such file")
        with pytest.raises(LaunchException, match="nonexistent"):
            launch_browser('/nonexistent/browser', 'https://example.com')


@pytest.mark.unit
class TestBrowserArgv:
    """Test browser_argv helper."""

    def test_quoted_path(self):
        argv = browser_argv('"/opt/My Browser/browser" --incognito', 'u')
        assert argv == ['/opt/My Browser/browser', '--incognito', 'u']

    def test_empty_command(self):
        with pytest.raises(LaunchException):
            browser_argv('   ', 'u')

    def test_unbalanced_quotes(self):
        with pytest.raises(LaunchException):
            browser_argv('"firefox', 'u')

    def test_single_quoted_path_with_spaces(self):
        argv = browser_argv("'/opt/My Browser/browser'", 'u')
        assert argv == ['/opt/My Browser/browser', 'u']

    def test_unquoted_path_with_spaces_is_split(self):
        argv = browser_argv('/opt/My Browser/browser', 'u')
        assert argv == ['/opt/My', 'Browser/browser', 'u']

    def test_quoted_path_from_config(self):
        config = parse_config('[work]\nbrowser = "\\"/opt/My Browser/browser\\" --new-window"\n')
        argv = browser_argv(config.sections["work"].browser, 'https://example.com')
        assert argv == ['/opt/My Browser/browser', '--new-window', 'https://example.com']
