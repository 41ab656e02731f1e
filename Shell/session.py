import os
from config import REAP_BACKGROUND


class Session:
    """State of one interpreter run, shared by the loop and the built-ins"""

    def __init__(self, reap_background=REAP_BACKGROUND):
        self.running = True
        self.reap_background = reap_background
        # Popen handles of background commands, kept only while reaping
        self.background_jobs = [] if reap_background else None

    @property
    def cwd(self):
        return os.getcwd()

    def change_directory(self, path):
        """Raises OSError and leaves cwd untouched if path is unusable"""
        os.chdir(path)

    def stop(self):
        self.running = False
