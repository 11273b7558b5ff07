from __future__ import annotations

import io
import re
from dataclasses import dataclass, field
from typing import Any

from cmdweave.arguments import Argument
from cmdweave.flags import CmderFlag
from cmdweave.formatter import Pattern
from cmdweave.help import render_help, write_help
from cmdweave.options import parse_option_spec
from cmdweave.themes import Theme

_ANSI = re.compile(r"\x1b\[\d+m")


def plain(text):
    return _ANSI.sub("", text)


@dataclass
class FakeCommand:
    name: str
    description: str = ""
    info: str = ""
    arguments: list[Any] = field(default_factory=list)
    flags: list[Any] = field(default_factory=list)
    options: list[Any] = field(default_factory=list)
    subcommands: list[Any] = field(default_factory=list)

    def usage(self):
        return self.name

    def generate(self, pattern):
        return self.name, self.description


def help_flag():
    return CmderFlag.named("help", "h", "Print out help information")


def test_usage_with_arguments():
    cmd = FakeCommand(
        "demo",
        description="A simple demo cli",
        arguments=[Argument("<name>", help="The name")],
        flags=[help_flag()],
    )
    text = plain(render_help(cmd, Theme.default(), Pattern.LEGACY))
    assert text.startswith("A simple demo cli\n")
    assert "\nUSAGE:\n    demo [OPTIONS] <ARGS>\n" in text
    assert "\nARGS:\n" in text
    assert "<name>" in text
    assert "-h, --help" in text
    assert "SUB-COMMANDS:" not in text
    assert "OPTIONS:\n" not in text


def test_subcommands_section():
    sub = FakeCommand("image", description="Image functionality")
    cmd = FakeCommand("docker", flags=[help_flag()], subcommands=[sub])
    text = plain(render_help(cmd, Theme.default(), Pattern.LEGACY))
    assert "\nUSAGE:\n    docker [OPTIONS] <SUBCOMMAND>\n" in text
    assert "\nSUB-COMMANDS:\n" in text
    assert "image" in text and "Image functionality" in text
    assert "ARGS:" not in text


def test_options_and_info_sections():
    cmd = FakeCommand(
        "srv",
        info="More details",
        options=[parse_option_spec("-p --port <port-number>", "The port to use")],
    )
    text = plain(render_help(cmd, Theme.default(), Pattern.LEGACY))
    assert "\nOPTIONS:\n" in text
    assert "-p, --port <port-number>" in text
    assert text.endswith("\nINFO:\nMore details")


def test_standard_pattern_layout():
    cmd = FakeCommand("demo", flags=[help_flag()])
    text = plain(render_help(cmd, Theme.default(), Pattern.STANDARD))
    assert "    -h, --help\n      Print out help information\n" in text


def test_theme_colours_are_used():
    theme = Theme.colorful()
    cmd = FakeCommand("demo", flags=[help_flag()])
    text = render_help(cmd, theme, Pattern.LEGACY)
    assert f"\x1b[{theme.headline.value}m\nUSAGE:\n" in text
    assert f"\x1b[{theme.keyword.value}m    demo" in text


def test_write_help_matches_render():
    cmd = FakeCommand("demo", description="d", flags=[help_flag()])
    stream = io.StringIO()
    write_help(cmd, Theme.plain(), Pattern.LEGACY, stream)
    assert stream.getvalue() == render_help(cmd, Theme.plain(), Pattern.LEGACY)