"""Building blocks for command-line parsing: arguments, flags, options, matches, events, settings, themes and help output."""

__version__ = "0.1.0"