from cmdweave.arguments import Argument
from cmdweave.formatter import Pattern
from cmdweave.options import CmderOption, parse_option_spec, resolve_option


def test_options_creation():
    opt = CmderOption.named(
        "port",
        short="p",
        help="A port option",
        required=True,
        arguments=[Argument("value", required=True, default="9000")],
    )
    assert opt.required
    assert not opt.is_global
    assert opt.description == "A port option"
    assert opt.short == "-p"
    assert opt.long == "--port"
    assert len(opt.arguments) == 1
    assert opt.arguments[0].default_value == "9000"


def test_named_accepts_spec_strings():
    opt = CmderOption.named("file-path", short="f", arguments=["<path>"], required=True)
    assert opt.arguments == [Argument("<path>")]
    assert opt.long == "--file-path"


def test_parse_option_spec():
    opt = parse_option_spec("-p --port <port-number>", "Add port mappings")
    assert opt.short == "-p"
    assert opt.long == "--port"
    assert opt.name == "port"
    assert opt.arguments == [Argument("<port-number>")]
    assert not opt.required
    assert parse_option_spec("-f --file-path <path>", "File", True).required


def test_parse_option_without_short():
    opt = parse_option_spec("--example <path>", "Path to example")
    assert opt.short == ""
    assert opt.long == "--example"
    assert opt.arguments[0].raw_value == "<path>"


def test_parse_option_without_arguments():
    opt = parse_option_spec("-a --all", "Remove all")
    assert opt.arguments == []


def test_resolve_option():
    options = [
        parse_option_spec("-n --name [name]", "Optional name"),
        parse_option_spec("-p --port <port-number>", "Port"),
    ]
    assert resolve_option(options, "-p") is options[1]
    assert resolve_option(options, "--name") is options[0]
    assert resolve_option(options, "-x") is None


def test_generate():
    opt = parse_option_spec("-p --port <port-number>", "The port")
    assert opt.generate(Pattern.LEGACY) == ("-p, --port <port-number> ", "The port")
    flag_like = parse_option_spec("--all", "All")
    assert flag_like.generate(Pattern.LEGACY) == ("   --all ", "All")