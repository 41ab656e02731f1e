import os
import sys
from config import HOME_VAR


def builtin_exit(session, args):
    """Stop the input loop"""
    session.stop()
    return 0


def builtin_cd(session, args):
    """Change directory"""
    if len(args) > 1:
        path = args[1]
    else:
        path = os.environ.get(HOME_VAR)
        if path is None:
            print(f"cd: {HOME_VAR} not set", file=sys.stderr)
            return 1

    try:
        session.change_directory(path)
        return 0
    except OSError as e:
        print(f"cd: {path}: {e.strerror}", file=sys.stderr)
        return 1
    except ValueError as e:
        # e.g. an embedded NUL byte
        print(f"cd: {path!r}: {e}", file=sys.stderr)
        return 1


BUILTINS = {
    'exit': builtin_exit,
    'quit': builtin_exit,
    'cd': builtin_cd,
    'chdir': builtin_cd,
}


def execute_builtin(session, args):
    """
    Execute built-in command if it matches.
    Returns (executed: bool, exit_code: int)
    """
    if not args:
        return False, 0

    handler = BUILTINS.get(args[0])
    if handler is None:
        return False, 0

    return True, handler(session, args)
