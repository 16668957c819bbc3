#!/usr/bin/env python3
"""
Show the line-redraw strategy resolved for this terminal.

Usage:
    termline                      # Resolve for the current environment
    termline --shell /bin/zsh     # Pretend $SHELL is zsh
    termline --os windows --shell ""
    termline --json
    termline --demo 20            # Draw a 20-step progress bar

Exit codes:
    0 - Strategy resolved
    1 - Platform not supported
"""

import argparse
import json
import logging
import os
import sys
import time

from termline.redraw.platforms import OSFamily, UnsupportedPlatformError
from termline.redraw.resolver import resolve
from termline.shared.colors import Colors
from termline.shared.config import load_config, probe_settings
from termline.shared.logging_config import setup_logging
from termline.shared.progress import ProgressBar, terminal_width

logger = logging.getLogger(__name__)


def strategy_to_dict(strategy):
    return {
        "os_family": strategy.os_family.value,
        "shell": strategy.shell,
        "clear_prefix": strategy.clear_prefix,
        "clear_suffix": strategy.clear_suffix,
        "requires_native_console": strategy.requires_native_console,
        "supports_size_probe": strategy.supports_size_probe,
    }


def print_strategy(strategy, width):
    print(f"{Colors.BOLD}Line redraw strategy{Colors.NC}")
    print(f"  OS family:        {strategy.os_family.value}")
    print(f"  Shell:            {strategy.shell or '(unset)'}")
    print(f"  Clear prefix:     {Colors.CYAN}{strategy.clear_prefix!r}{Colors.NC}")
    print(f"  Clear suffix:     {Colors.CYAN}{strategy.clear_suffix!r}{Colors.NC}")
    mode = "native console" if strategy.requires_native_console else "ANSI sequences"
    print(f"  Mode:             {mode}")
    probe = f"{Colors.GREEN}yes{Colors.NC}" if strategy.supports_size_probe else f"{Colors.YELLOW}no{Colors.NC}"
    print(f"  stty size probe:  {probe}")
    print(f"  Terminal width:   {width}")


def run_demo(strategy, steps, delay=0.05):
    bar = ProgressBar(steps, prefix="Demo", strategy=strategy)
    for i in range(steps):
        time.sleep(delay)
        bar.update(f"step {i + 1}")
    bar.finish()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Show the terminal line-redraw strategy.")
    parser.add_argument(
        "--os",
        dest="os_family",
        default=None,
        help=f"OS family to resolve for (default: host). "
             f"Options: {', '.join(f.value for f in OSFamily if f is not OSFamily.UNSUPPORTED)}",
    )
    parser.add_argument("--shell", default=None, help="Use this value instead of $SHELL")
    parser.add_argument(
        "--timeout-ms", type=int, default=None,
        help="Size probe timeout in milliseconds (default: config or 250)",
    )
    parser.add_argument("--json", action="store_true", help="Print the strategy as JSON")
    parser.add_argument("--demo", type=int, default=0, metavar="N", help="Draw an N-step progress bar")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Show only warnings and errors")
    args = parser.parse_args(argv)
    if args.timeout_ms is not None and args.timeout_ms <= 0:
        parser.error("--timeout-ms must be a positive number of milliseconds")

    config = load_config(fallback={})
    setup_logging(verbose=args.verbose, quiet=args.quiet, config=config)
    settings = probe_settings(config)
    timeout = args.timeout_ms / 1000.0 if args.timeout_ms is not None else settings.timeout

    environ = dict(os.environ)
    if args.shell is not None:
        environ["SHELL"] = args.shell

    try:
        strategy = resolve(args.os_family, environ=environ, timeout=timeout)
    except UnsupportedPlatformError as e:
        logger.error("%s", e)
        return 1

    # Native console: no ANSI in the log tag or the report
    setup_logging(verbose=args.verbose, quiet=args.quiet, strategy=strategy)
    Colors.auto(sys.stdout, strategy)

    if args.json:
        print(json.dumps(strategy_to_dict(strategy), indent=2))
    else:
        width = terminal_width(strategy, fallback=settings.fallback_width, timeout=timeout)
        print_strategy(strategy, width)

    if args.demo > 0:
        run_demo(strategy, args.demo)
    return 0


if __name__ == "__main__":
    sys.exit(main())
