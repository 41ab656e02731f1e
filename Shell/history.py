import sys
import readline
from config import MAX_HISTORY


def init_readline():
    """Cấu hình readline để hoạt động giống terminal Linux"""
    # Redirected input gets no line editing
    if not sys.stdin.isatty():
        return

    try:
        readline.set_history_length(MAX_HISTORY)

        # Phím mũi tên lên/xuống
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right để nhảy giữa các từ
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        readline.parse_and_bind("set editing-mode emacs")
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def read_line(prompt):
    """
    Print the prompt and read one line, without its newline.
    Raises EOFError at end of input.
    """
    return input(prompt)
