"""Version information for focus-timer."""

__version__ = "0.1.0"
__version_info__ = tuple(int(i) for i in __version__.split(".") if i.isdigit())

# Package metadata
__title__ = "focus-timer"
__description__ = "Multi-timer countdown core with persistence and alarm coordination"
__author__ = "Focus Timer Contributors"
__author_email__ = "maintainers@focus-timer.dev"
__license__ = "MIT"
__url__ = "https://github.com/focus-timer/focus-timer"
