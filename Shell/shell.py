import sys
from config import PROMPT, SHELL_NAME, EXIT_INPUT_TERMINATED
from Shell.session import Session
from Shell.history import init_readline, read_line as read_terminal_line
from Shell.parser import tokenize
from Shell.builtin import execute_builtin
from Shell.executor import execute_command
from Shell.job_control import reap_finished


def run_line(session, line):
    """
    Run one input line: built-ins first, then external commands.
    Returns: exit_code (0 for a blank line)
    """
    args, background = tokenize(line)
    if not args:
        return 0

    executed, exit_code = execute_builtin(session, args)
    if executed:
        return exit_code

    return execute_command(args, background, session.background_jobs)


def main_loop(session=None, read_line=None):
    """Main shell loop"""
    if session is None:
        session = Session()
    if read_line is None:
        init_readline()
        read_line = read_terminal_line

    while session.running:
        if session.reap_background:
            reap_finished(session.background_jobs)

        try:
            line = read_line(PROMPT)
        except EOFError:
            print(f"\n{SHELL_NAME}: end of input", file=sys.stderr)
            return EXIT_INPUT_TERMINATED
        except OSError as e:
            print(f"\n{SHELL_NAME}: read error: {e}", file=sys.stderr)
            return EXIT_INPUT_TERMINATED

        # Exit status of the command is not reported
        run_line(session, line)

    return 0
