"""Interactive mode for the tern interpreter. Uses cmd as backend."""

import cmd
import signal
import sys

from tern.errors import TernParseError
from tern.interpreter import Interpreter


class Shell(cmd.Cmd):
    """Tern read-eval-print loop; one Environment lives for the whole session."""
    intro = "Tern interpreter :: Ctrl-D to quit"
    prompt = ">> "

    def __init__(self, interpreter=None, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.interpreter = interpreter if interpreter is not None else Interpreter()

    def onecmd(self, line):
        """Every line is tern source, so `help` and `?` are not commands here."""
        line = line.strip()
        if not line:
            return self.emptyline()
        if line == "EOF":
            return self.do_EOF(line)
        return self.default(line)

    def default(self, line):
        """Parses and evaluates one line of tern."""
        try:
            result = self.interpreter.eval(line)
        except TernParseError as exc:
            for error in exc.errors:
                print(f"\t{error}", file=self.stdout)
            return
        except RecursionError:
            print("ERROR: maximum recursion depth exceeded", file=self.stdout)
            return
        print(result, file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return True

    def run(self):
        """cmdloop until EOF; Ctrl-C and SIGTERM end the session quietly."""
        signal.signal(signal.SIGTERM, lambda signum, frame: sys.exit(0))
        try:
            self.cmdloop()
        except KeyboardInterrupt:
            print(file=self.stdout)
