"""
Centralized constants for Dark Pig Git.

Hardcoded strings and magic numbers used across the codebase.
"""

# Environment variable naming the repository to open
REPO_PATH_ENV = "GIT_REPO_PATH"

# Logging switches (read by darkpig.main)
DEBUG_ENV = "DEBUG"
LOG_TO_FILE_ENV = "LOG_TO_FILE"
LOG_FILE = "darkpig.log"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)d - %(message)s"

# Number of lane colors; must match darkpig.ui.git_graph.types.LANE_COLORS
DEFAULT_PALETTE_SIZE = 8

# Commit message lines shown in the detail pane
DETAIL_MESSAGE_LINES = 5
