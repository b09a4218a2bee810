"""
Command-line interface for hyprchoosy
"""

import sys
import argparse
from pathlib import Path
from typing import Optional, List

from . import __version__
from .browser import launch_browser
from .config import load_config
from .detection import detect_client
from .exceptions import HyprchoosyException
from .logger import init_logger
from .router import route_url


class CLI:
    """Command-line interface handler"""

    def __init__(self):
        self.launcher = launch_browser
        self.detector = detect_client

    def run(self, args: Optional[List[str]] = None) -> int:
        """Run CLI with arguments"""
        parser = self._create_parser()

        if args is None:
            args = sys.argv[1:]

        parsed_args = parser.parse_args(args)
        init_logger(debug=parsed_args.debug)

        try:
            if parsed_args.detect:
                return self.cmd_detect(parsed_args)
            if not parsed_args.url:
                print("Usage: hyprchoosy <URL>", file=sys.stderr)
                return 1
            return self.cmd_open(parsed_args)
        except HyprchoosyException as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            print("\nAborted", file=sys.stderr)
            return 130

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser"""
        parser = argparse.ArgumentParser(
            prog='hyprchoosy',
            description='Open a URL in a browser chosen by the requesting '
                        'application or the URL host',
        )

        parser.add_argument('--version', action='version',
                            version=f'hyprchoosy v{__version__}')
        parser.add_argument('url', nargs='?', help='URL to open')
        parser.add_argument('--config', '-c', type=Path,
                            help='Config file (default: $HYPRCHOOSY_CONFIG or '
                                 '$XDG_CONFIG_HOME/hyprchoosy/config.toml)')
        parser.add_argument('--dry-run', '-n', action='store_true',
                            help='Print the chosen browser instead of launching it')
        parser.add_argument('--detect', action='store_true',
                            help='Print the detected client and exit')
        parser.add_argument('--debug', action='store_true',
                            help='Write debug log to $TMPDIR/hyprchoosy/hyprchoosy.log')
        return parser

    def cmd_open(self, args) -> int:
        """Route and open a URL"""
        config = load_config(args.config)
        decision = route_url(args.url, config, detect=self.detector)

        if args.dry_run:
            print(f"browser: {decision.browser}")
            print(f"reason: {decision.reason}")
            if decision.section:
                print(f"section: {decision.section}")
            print(f"client: {decision.client or 'unknown'}")
            print(f"host: {decision.host}")
            return 0

        self.launcher(decision.browser, args.url)
        return 0

    def cmd_detect(self, args) -> int:
        """Print detected client"""
        client = self.detector()
        print(client or "unknown")
        return 0


def main():
    """Main entry point"""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == '__main__':
    main()
