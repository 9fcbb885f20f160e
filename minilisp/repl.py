"""Interactive shell for minilisp. Uses cmd as backend."""

from __future__ import annotations

import cmd
import logging
import sys
import traceback
import warnings

from minilisp import config
from minilisp.debug_utils.pprint import DEFAULT_OPTIONS, format_tokens, pprint_expr
from minilisp.errors import UndefinedVariableWarning
from minilisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


class Shell(cmd.Cmd):
    """Reads one line at a time and prints its tokens, parse tree and value."""
    intro = "Simple LISP interpreter :: Python backend\nType 'quit' to exit."
    QUIT = "quit"

    def __init__(self, interp=None, options=DEFAULT_OPTIONS, stdin=None, stdout=None):
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False  # read self.stdin instead of calling input()
        self.interp = interp if interp is not None else Interpreter(output=stdout)
        self.options = options
        self.prompt = config.get_prompt()

    def cmdloop(self, intro=None):
        """Like cmd.Cmd.cmdloop, but end of input stops the loop directly.

        cmd.Cmd reports end of input as the line "EOF", which is also a valid
        atom; here it never reaches onecmd.
        """
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            print(self.intro, file=self.stdout)
        stop = False
        while not stop:
            line = self.read_line()
            if line is None:
                print(file=self.stdout)
                break
            line = self.precmd(line)
            stop = self.onecmd(line)
            stop = self.postcmd(stop, line)
        self.postloop()

    def read_line(self):
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
        """Every line except quit is Lisp source."""
        if line == self.QUIT:
            return True
        if line.strip():
            self.run_line(line)
        return False

    def run_line(self, line):
        """Evaluate one line; failures are reported and never end the loop."""
        with warnings.catch_warnings():
            warnings.simplefilter("always", UndefinedVariableWarning)
            warnings.showwarning = self.show_warning
            try:
                tokens = self.interp.tokenize(line)
                print(format_tokens(tokens), file=self.stdout)
                for expr in self.interp.read(tokens):
                    print(pprint_expr(expr, self.options), file=self.stdout)
                    result = self.interp.evaluate(expr)
                    print(pprint_expr(result, self.options), file=self.stdout)
            except Exception:
                logger.debug("evaluation failed for %r", line)
                traceback.print_exc()

    def show_warning(self, message, category, filename, lineno, file=None, line=None):
        if issubclass(category, UndefinedVariableWarning):
            print(f"WARNING: {message}", file=self.stdout)
        else:
            sys.stderr.write(warnings.formatwarning(message, category, filename, lineno, line))


def repl(interp=None, options=DEFAULT_OPTIONS, banner=True):
    shell = Shell(interp, options)
    try:
        shell.cmdloop(intro=None if banner else "")
    except KeyboardInterrupt:
        print()
