import os
import psutil
from Shell.parser import format_command


def announce_background(pid, args):
    """Báo tiến trình nền vừa khởi chạy"""
    print(f"[{pid}] started in background: {format_command(args)}")


def reap_finished(jobs=None):
    """
    Collect background children that already exited.

    Handles kept in jobs are polled first and removed once finished. Any
    other child of this interpreter still in zombie state is then collected
    directly; foreground children are always waited for, so those were
    started in the background.
    Returns: list of reaped pids
    """
    reaped = []

    if jobs is not None:
        for p in list(jobs):
            if p.poll() is not None:
                jobs.remove(p)
                print(f"[{p.pid}] finished")
                reaped.append(p.pid)

    tracked = {p.pid for p in jobs} if jobs is not None else set()
    for child in psutil.Process().children():
        if child.pid in tracked:
            continue
        try:
            if child.status() != psutil.STATUS_ZOMBIE:
                continue
            pid, _ = os.waitpid(child.pid, os.WNOHANG)
        except (psutil.NoSuchProcess, ChildProcessError):
            # Already collected elsewhere
            continue
        if pid:
            print(f"[{pid}] finished")
            reaped.append(pid)
    return reaped
