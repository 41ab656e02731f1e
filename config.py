SHELL_NAME = "microshell"
PROMPT = "microshell: "

# A token that is exactly this string sends the command to the background
BACKGROUND_TOKEN = "#"

# Consulted only by a bare cd/chdir
HOME_VAR = "HOME"

MAX_HISTORY = 1000

# Collect finished background children before each prompt
REAP_BACKGROUND = False

EXIT_SPAWN_FAILED = 127
EXIT_INPUT_TERMINATED = 1
