# -*- coding: utf-8 -*-
"""Tests for ANSI escape generation."""

import pytest

from tincture_terminal import RESET, bg_escape, color_block, colorize, fg_escape, supports_truecolor


@pytest.mark.parametrize("value, expected", [("truecolor", True), ("24bit", True), ("", False), ("256", False)])
def test_supports_truecolor(monkeypatch, value, expected):
    monkeypatch.setenv("COLORTERM", value)
    assert supports_truecolor() is expected


def test_unset_colorterm(monkeypatch):
    monkeypatch.delenv("COLORTERM", raising=False)
    assert not supports_truecolor()


def test_truecolor_escapes():
    assert fg_escape((1, 2, 3), truecolor=True) == "\033[38;2;1;2;3m"
    assert bg_escape((1, 2, 3), truecolor=True) == "\033[48;2;1;2;3m"


def test_cube_fallback():
    assert fg_escape((255, 0, 0), truecolor=False) == "\033[38;5;196m"
    assert bg_escape((0, 0, 0), truecolor=False) == "\033[48;5;16m"


def test_colorize_and_block():
    assert colorize("x", (10, 20, 30), truecolor=True) == f"\033[38;2;10;20;30mx{RESET}"
    assert color_block((10, 20, 30), width=3, truecolor=True) == f"\033[48;2;10;20;30m   {RESET}"


def test_default_is_truecolor_without_colorterm(monkeypatch):
    monkeypatch.delenv("COLORTERM", raising=False)
    assert colorize("x", (1, 2, 3)) == f"\033[38;2;1;2;3mx{RESET}"
    assert color_block((1, 2, 3)) == f"\033[48;2;1;2;3m  {RESET}"
