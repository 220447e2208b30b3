"""pydfa – console adapter for the Automaton API

Examples:
    $ pydfa interactive
    $ pydfa check --language even-a aabb ab
    $ pydfa -D check --language div3 110 111

Commands
--------
- interactive : prompt for the alphabet, states and transition table, then
                evaluate strings until the user stops
- check       : evaluate strings against a built-in language

Exit codes: 0 on success, 2 on any automaton or input error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterator, Optional, TextIO

from pydfa.core.automaton import Automaton, build_automaton
from pydfa.core.errors import AutomatonError
from pydfa.languages import LANGUAGES

logger = logging.getLogger(__name__)


def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _verdict(accepted: bool) -> str:
    return "Accepted" if accepted else "Not accepted"


class _Prompter:
    """Whitespace-separated token reader with prompts, like a scanf loop."""

    def __init__(self, stdin: TextIO, stdout: TextIO):
        self._stdout = stdout
        self._tokens = self._iter_tokens(stdin)

    @staticmethod
    def _iter_tokens(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def ask(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("unexpected end of input") from None

    def ask_int(self, prompt: str) -> int:
        token = self.ask(prompt)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def say(self, text: str = "") -> None:
        self._stdout.write(text + "\n")


def read_automaton(prompter: _Prompter) -> Automaton:
    alphabet = prompter.ask("Enter all the unique alphabets in a single line:\n")
    n_states = prompter.ask_int("Enter number of states: ")
    initial_state = prompter.ask_int("Enter initial state: ")
    n_finals = prompter.ask_int("Enter number of final states: ")
    if n_finals < 0:
        raise ValueError("number of final states must be >= 0")
    finals = [prompter.ask_int(f"Enter final state {i + 1}: ") for i in range(n_finals)]

    automaton = Automaton.create(alphabet, n_states, initial_state, finals)

    prompter.say("Enter transition table:")
    try:
        for state in automaton.states:
            prompter.say(f"State {state}")
            for symbol in automaton.alphabet:
                target = prompter.ask_int(f"\tInput {symbol}: ")
                automaton.add_transition(state, symbol, target)
    except Exception:
        automaton.close()
        raise
    prompter.say()
    return automaton


def run_interactive(stdin: TextIO, stdout: TextIO) -> int:
    prompter = _Prompter(stdin, stdout)
    try:
        automaton = read_automaton(prompter)
    except (AutomatonError, ValueError, EOFError) as e:
        _eprint("[ERROR]", str(e))
        return 2

    with automaton:
        try:
            while True:
                text = prompter.ask("Enter string to check:\n")
                try:
                    prompter.say(_verdict(automaton.accepts(text)))
                except AutomatonError as e:
                    prompter.say(f"[ERROR] {e}")
                answer = prompter.ask("Do you want to continue? (y/n)\n")
                if answer[:1] not in ("y", "Y"):
                    break
        except EOFError:
            logger.debug("input exhausted")
    return 0


def cmd_interactive(args) -> int:
    return run_interactive(sys.stdin, sys.stdout)


def cmd_check(args) -> int:
    spec = LANGUAGES[args.language]()
    try:
        with build_automaton(spec, freeze=True) as automaton:
            logger.debug("loaded %r", automaton)
            status = 0
            for text in args.strings:
                try:
                    print(f"{text!r}: {_verdict(automaton.accepts(text))}")
                except AutomatonError as e:
                    _eprint("[ERROR]", f"{text!r}:", str(e))
                    status = 2
            return status
    except AutomatonError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="pydfa", description="deterministic finite automaton CLI")
    ap.add_argument("-D", "--debug", action="store_true", help="enable debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_interactive = sub.add_parser("interactive", help="define an automaton at the prompt and check strings")
    p_interactive.set_defaults(func=cmd_interactive)

    p_check = sub.add_parser("check", help="check strings against a built-in language")
    p_check.add_argument("--language", choices=sorted(LANGUAGES), required=True, help="built-in language")
    p_check.add_argument("strings", nargs="*", help="input strings ('' for the empty string)")
    p_check.set_defaults(func=cmd_check)

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
