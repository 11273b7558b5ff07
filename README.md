# cmdweave

Dependency-free building blocks for command-line interfaces: argument,
flag and option specs, the structure that holds parse results, events with
ordered listeners, boolean settings, colour themes and help-text layout.

## Installation

```
pip install cmdweave
```

## Arguments, flags and options

`cmdweave.arguments.Argument` is built from a spec. Angle brackets make it
required, square brackets optional, and a trailing `...` variadic:

```python
from cmdweave.arguments import Argument

arg = Argument("<text...>", help="Some text")
arg.required, arg.variadic, arg.name   # True, True, "text"

lang = Argument("<lang>", valid_values=["ENG", "SPA"])
lang.test_value("ENG")                 # True
lang = lang.with_default("SPA")        # a copy; an invalid default is ignored with a warning
lang.raw_value                         # "<lang>"
```

Flags and options come from `cmdweave.flags` and `cmdweave.options`, either
from a spec string or by name:

```python
from cmdweave.flags import CmderFlag, parse_flag_spec, resolve_flag
from cmdweave.options import CmderOption, parse_option_spec, resolve_option

verbose = parse_flag_spec("-v --verbose", "Show verbose output")
help_flag = CmderFlag.named("help", "h", "Print out help information")
resolve_flag([verbose, help_flag], "-h")          # help_flag

port = parse_option_spec("-p --port <port-number>", "The port to use", required=True)
name = CmderOption.named("name", "n", "Optional name", arguments=["[name]"])
resolve_option([port, name], "--port")            # port
```

`resolve_flag` and `resolve_option` return the last item whose short or long
form matches, or `None`. Each of these classes has a `generate(pattern)`
method giving the `(leading, floating)` pair used in help output.

## Parse results

`cmdweave.matches.ParserMatches` holds matched flags (`FlagMatch`), options
(`OptionMatch`) and arguments (`ArgMatch`), plus positional values. Its
queries:

- `get_arg(name)` – value of an argument match such as `"<name>"`.
- `get_option_arg(name)` / `get_instances_of(name)` – the last / every value
  given for an option argument.
- `get_flag`, `get_option`, `contains_flag`, `contains_option` – lookup by
  short or long form.
- `flag_count`, `option_count` – how many matches there are.
- `raw_args()` – all matched argument values.

## Events and settings

`cmdweave.events.EventEmitter` keeps listeners per `Event` and runs them
sorted by position (`BEFORE_ALL` -5, `DEFAULT` -4, `USER` 0, `AFTER_HELP` 1,
`AFTER_ALL` 5). `emit(config)` calls each listener with a copy of the
`EventConfig` and then raises `SystemExit` with its `exit_code`; an event
without listeners does nothing.

```python
from cmdweave.events import Event, EventConfig, EventEmitter

emitter = EventEmitter()
emitter.on(Event.OUTPUT_VERSION, lambda cfg: print("version requested"), EventEmitter.USER)
emitter.insert_before_all(lambda cfg: print("before every event"))
emitter.emit(EventConfig(program=None, event=Event.OUTPUT_VERSION))  # raises SystemExit(0)
```

`on_all` registers for every event, `on_errors` for all but help and version
output, and `remove_default_listeners(event)` drops listeners at the default
position.

`cmdweave.settings.ProgramSettings` holds a boolean per `Setting`, indexed
like a mapping: `settings[Setting.SHOW_COMMAND_ALIASES] = True`.

`cmdweave.defaults` provides the built-in behaviour:
`register_default_listeners(emitter, settings)` adds help output, error
printing (`print_error`, to stderr) and version printing (`print_version`)
according to the settings; `register_help_subcommand(command)` adds a
`help <SUB-COMMAND>` subcommand to a command object that has subcommands.

## Themes and help output

```python
from cmdweave.themes import Color, Theme, PredefinedTheme, get_predefined_theme

theme = Theme(Color.GREEN, Color.MAGENTA, Color.BLUE, Color.RED, Color.WHITE)
get_predefined_theme(PredefinedTheme.COLORFUL) == Theme.colorful()   # True
```

`cmdweave.formatter.Formatter` collects text coloured by `Designation` with
ANSI codes (or plain with `color=False`); `render()` returns it and `print()`
writes it to a stream, stderr by default. Layout follows `Pattern.LEGACY`,
`Pattern.STANDARD` or a `CustomPattern`.

`cmdweave.help.render_help(command, theme, pattern)` and
`write_help(command, theme, pattern, stream=None)` lay out USAGE, ARGS,
FLAGS, OPTIONS, SUB-COMMANDS and INFO sections for any object exposing
`arguments`, `flags`, `options`, `subcommands`, `description`, `info` and
`usage()`.

`cmdweave.suggest.suggest_command(value, commands)` returns the name of the
first command sharing at least three characters with a mistyped value, or
`None`.

## What the package does not do

There is no command builder and no parser here: nothing walks an argument
list to fill a `ParserMatches`, dispatches to a callback or turns parse
problems into errors. Command objects used with `render_help`,
`suggest_command` and `register_help_subcommand` must be supplied by the
caller. The package installs no command-line program of its own.

## Running the tests

```
pip install -e ".[test]"
pytest
```