import errno
import subprocess
import sys
import warnings
from config import SHELL_NAME, EXIT_SPAWN_FAILED
from Shell.job_control import announce_background


def run_external(args):
    """
    Run an external command with subprocess.
    The child inherits environment, cwd and the standard streams.
    Returns: Popen object or None
    """
    try:
        return subprocess.Popen(args)
    except (FileNotFoundError, NotADirectoryError):
        print(f"{SHELL_NAME}: command not found: {args[0]}", file=sys.stderr)
    except PermissionError:
        print(f"{SHELL_NAME}: permission denied: {args[0]}", file=sys.stderr)
    except OSError as e:
        if e.errno in (errno.EAGAIN, errno.ENOMEM):
            # No new process could be created at all
            print(f"{SHELL_NAME}: fork: {e.strerror}", file=sys.stderr)
        else:
            print(f"{SHELL_NAME}: failed to execute '{args[0]}': {e}", file=sys.stderr)
    except ValueError as e:
        # Arguments the OS cannot take, e.g. an embedded NUL byte
        print(f"{SHELL_NAME}: failed to execute {args[0]!r}: {e}", file=sys.stderr)
    return None


def execute_command(args, background=False, jobs=None):
    """
    Launch an external command.
    Foreground commands are waited for. Background ones are announced and,
    unless a jobs list is given to keep their handles, left untracked.
    Returns: exit_code
    """
    p = run_external(args)
    if p is None:
        return EXIT_SPAWN_FAILED

    if background:
        announce_background(p.pid, args)
        if jobs is not None:
            jobs.append(p)
        else:
            # Dropping a running Popen warns about it
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", ResourceWarning)
                del p
        return 0

    return p.wait()
