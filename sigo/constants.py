"""Constants shared across store, config, and CLI modules."""

# Store file names inside the sigo home directory
READY_TASKS_FILE = "ready_tasks"
WAITING_TASKS_FILE = "waiting_tasks"
COMPLETED_TASKS_FILE = "completed_tasks"

# Temp files are tagged with the writer's pid: <name>.sigo-tmp-<pid>
TEMP_SUFFIX_PREFIX = "sigo-tmp"

LOCK_FILE_NAME = ".sigo.lock"

# Configuration defaults
DEFAULT_HOME = "~/.sigo"
DEFAULT_CONFIG_PATH = "~/.config/sigo/config.yaml"
CONFIG_ENV_VAR = "SIGO_CONFIG"
HOME_ENV_VAR = "SIGO_HOME"
