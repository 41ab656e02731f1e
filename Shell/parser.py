from config import BACKGROUND_TOKEN


def tokenize(line):
    """
    Split a raw command line into arguments and background flag.
    Returns: (args: list, background: bool)
    """
    args, background = [], False

    for tok in line.split():
        if tok == BACKGROUND_TOKEN:
            # Anything after the marker is dropped
            background = True
            break
        args.append(tok)

    return args, background


def format_command(args):
    """Rebuild a command line from its arguments"""
    return " ".join(args)
