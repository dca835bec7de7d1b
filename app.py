import logging
import os
import sys

from algorithms.session import Command, Session, parse_command
from algorithms.stepper import EMPTY_PATTERN_MESSAGE
from utils.render import render_event, render_last_occurrence, render_lps_table
from utils.text_io import prompt

HELP = "Interactive stepping: commands: n(next), a(auto), f(find all), q(quit)"

def print_heading(out, title):
    out.write(f"\n=== {title} ===\n")

def show_tables(out, session):
    if session.algorithm == "kmp":
        print_heading(out, "LPS (failure function)")
        out.write(render_lps_table(session.stepper.pattern, session.table()) + "\n")
    else:
        print_heading(out, "Bad-character last-occurrence table (showing present chars)")
        out.write(render_last_occurrence(session.table()) + "\n")

def run(session, stdin, out):
    """Command loop: show one step, ask what to do next, until done or quit."""
    show_tables(out, session)
    out.write("\n" + HELP + "\n")
    cmd = "next"
    while not session.finished:
        ran_through = parse_command(cmd) in (Command.AUTO, Command.FIND_ALL)
        for event in session.apply(cmd):
            rendered = render_event(event, session.stepper.text, session.stepper.pattern, ran_through)
            out.write("\n" + rendered + "\n")
        if session.finished:
            break
        cmd = prompt(out, stdin, "> ")
        if cmd is None:
            # EOF counts as quit
            session.quit()

def main(stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    out = stdout or sys.stdout
    logging.basicConfig(level=os.getenv("VISUALIZER_LOG_LEVEL", "WARNING").upper())

    out.write("Pattern Matching Visualizer (KMP & Boyer-Moore)\n")
    text = prompt(out, stdin, "Enter text (single line):\n")
    if text is None:
        return 0
    pat = prompt(out, stdin, "Enter pattern (single line):\n")
    if pat is None:
        return 0
    sel = prompt(out, stdin, "Choose algorithm: (1) KMP  (2) Boyer-Moore\n> ")
    if sel is None:
        return 0

    session = Session(text, pat, sel)
    if session.empty_pattern:
        out.write(EMPTY_PATTERN_MESSAGE + "\n")
    else:
        run(session, stdin, out)
    out.write("Finished.\n")
    return 0

if __name__ == "__main__":
    sys.exit(main())
