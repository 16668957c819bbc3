"""Tests for termline.shared.colors module."""

import io

from termline.redraw.platforms import OSFamily
from termline.redraw.resolver import RedrawStrategy
from termline.shared.colors import Colors


class _TTY(io.StringIO):
    def isatty(self):
        return True


class TestColors:
    """Tests for Colors class."""

    def test_colors_have_ansi_codes(self):
        for name in ('RED', 'GREEN', 'YELLOW', 'CYAN', 'BOLD', 'NC'):
            assert '\033[' in getattr(Colors, name)

    def test_disable_clears_all_codes(self):
        Colors.disable()
        for name in ('RED', 'GREEN', 'YELLOW', 'CYAN', 'BOLD', 'NC'):
            assert getattr(Colors, name) == ''

    def test_enable_restores_codes(self):
        Colors.disable()
        Colors.enable()
        assert Colors.RED == '\033[0;31m'
        assert Colors.NC == '\033[0m'

    def test_disabled_colors_produce_clean_output(self):
        Colors.disable()
        msg = f"{Colors.RED}error{Colors.NC}"
        assert msg == 'error'


class TestColorsAuto:
    """Tests for Colors.auto()."""

    def test_disables_when_not_tty(self):
        Colors.auto(io.StringIO())
        assert Colors.RED == ''

    def test_keeps_colors_on_tty(self, bash_strategy):
        Colors.auto(_TTY(), bash_strategy)
        assert '\033[' in Colors.RED

    def test_defaults_to_stdout(self, monkeypatch):
        monkeypatch.setattr('sys.stdout', io.StringIO())
        Colors.auto()
        assert Colors.GREEN == ''

    def test_native_console_disables_colors(self):
        native = RedrawStrategy(
            clear_prefix="\r",
            clear_suffix="",
            requires_native_console=True,
            os_family=OSFamily.WINDOWS,
        )
        Colors.auto(_TTY(), native)
        assert Colors.RED == ''
