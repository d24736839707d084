"""Interactive read-loop and file runner for RScheme. Uses cmd as backend."""

from __future__ import annotations

import argparse
import cmd
import logging
import sys

from rscheme import __version__
from rscheme.config import configure_logging, get_prompt
from rscheme.errors import (
    RSchemeError,
    RSchemeLexingError,
    RSchemeParsingError,
    RSchemeRuntimeError,
)
from rscheme.interpreter import Interpreter
from rscheme.printer import to_string
from rscheme.reader.parser import Incomplete
from rscheme.types.nil import Nil

logger = logging.getLogger(__name__)


def error_label(error: RSchemeError) -> str:
    if isinstance(error, RSchemeLexingError):
        return "LEXING ERROR"
    if isinstance(error, RSchemeParsingError):
        return "PARSING ERROR"
    if isinstance(error, RSchemeRuntimeError):
        return "RUNTIME ERROR"
    return "ERROR"


def report(error: RSchemeError, stream=None) -> None:
    stream = stream if stream is not None else sys.stderr
    logger.debug("Error: %r", error)
    print(f"[{error_label(error)}]: {error}", file=stream)


class Repl(cmd.Cmd):
    """RScheme interpreter shell."""
    intro = f"RScheme {__version__} :: Ctrl-D to exit"

    def __init__(self, interpreter: Interpreter | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.prompt_prefix = get_prompt()
        self._update_prompt()

    def _update_prompt(self) -> None:
        self.prompt = f"{self.prompt_prefix}{self.interpreter.depth} "

    def default(self, line):
        """Feeds the line to the interpreter and prints any completed values."""
        try:
            results = self.interpreter.feed(line)
        except RSchemeError as error:
            report(error)
        else:
            if results is not Incomplete:
                for value in results:
                    if value is not Nil:
                        self.stdout.write(to_string(value) + "\n")
        self._update_prompt()

    def cmdloop(self, intro=None):
        """Read lines until end of input.

        Unlike cmd.Cmd, end of input is reported as None rather than the text
        "EOF", which is a valid identifier here.
        """
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            self.stdout.write(str(self.intro) + "\n")
        stop = None
        while not stop:
            line = self.read_line()
            if line is None:
                stop = self.do_EOF("")
            else:
                stop = self.onecmd(self.precmd(line))
            stop = self.postcmd(stop, line)
        self.postloop()

    def read_line(self) -> str | None:
        """Next input line without its newline, or None at end of input."""
        if self.cmdqueue:
            return self.cmdqueue.pop(0)
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def onecmd(self, line):
        # Every line is source text; there are no commands.
        if not line.strip():
            return self.emptyline()
        return self.default(line)

    def emptyline(self):
        """Blank lines only matter inside a pending expression."""
        if self.interpreter.depth:
            self.default("")

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return True


def run_file(path: str, interpreter: Interpreter | None = None) -> int:
    """Evaluate a source file line by line, stopping at the first error."""
    interpreter = interpreter if interpreter is not None else Interpreter()
    try:
        with open(path, "r") as file:
            for line in file:
                results = interpreter.feed(line.rstrip("\n"))
                if results is Incomplete:
                    continue
                for value in results:
                    if value is not Nil:
                        print(to_string(value))
    except OSError as error:
        print(f"rscheme: cannot open {path}: {error.strerror}", file=sys.stderr)
        return 1
    except RSchemeError as error:
        report(error)
        return 1
    if interpreter.depth:
        print(f"[PARSING ERROR]: unexpected end of file, {interpreter.depth} unclosed (", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    """Runs the RScheme interpreter. Called from the rscheme console script."""
    parser = argparse.ArgumentParser(prog="rscheme")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to interactive mode)", nargs="?")
    parser.add_argument("--debug", action="store_true", help="log tokens, trees and closure calls to stderr")
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.debug else None)

    if args.file is not None:
        sys.exit(run_file(args.file))

    Repl().cmdloop()
    sys.exit(0)
