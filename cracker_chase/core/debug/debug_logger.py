"""
debug_logger.py
---------------
Diagnostic console logger with category filtering and colorized output.

Every line is tagged with a timestamp, the calling class (or module) and a
log tag, so console output from the game loop, the entities and the asset
loader can be told apart at a glance.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which components emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Core
        "system": True,
        "loading": True,
        "input": False,
        "audio": False,

        # Game loop
        "game_state": True,
        "render": False,

        # Entities
        "entity": False,
        "collision": False,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger with category filtering and colored output."""

    LINE_LENGTH = 59

    COLOR_MAP = {
        "reset": Colors.RESET,
        "init": Colors.WHITE,
        "ok": Colors.GREEN,
        "system": Colors.MAGENTA,
        "state": Colors.CYAN,
        "trace": Colors.BLUE,
        "warn": Colors.YELLOW,
        "fail": Colors.RED,
    }

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4
    }

    # ===========================================================
    # Caller Detection
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Detect calling class or module name via frame inspection."""
        try:
            frame = sys._getframe(3)

            if 'self' in frame.f_locals:
                return frame.f_locals['self'].__class__.__name__

            if 'cls' in frame.f_locals:
                return frame.f_locals['cls'].__name__

            filename = frame.f_code.co_filename.replace("\\", "/").split("/")[-1]
            module_name = filename.replace(".py", "")
            return "".join(p.capitalize() for p in module_name.split("_"))

        except (ValueError, AttributeError, KeyError):
            return "Unknown"

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def _should_log(category: str, level: str) -> bool:
        """Check if message should be logged based on config."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        level_val = DebugLogger.LEVEL_VALUES.get(level, 3)
        config_val = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        if level_val > config_val:
            return False
        # Failures always pass the category filter
        if level == "ERROR":
            return True
        return LoggerConfig.CATEGORIES.get(category, False)

    @staticmethod
    def _log(tag: str, message: str, color: str = "reset",
             category: str = "system", level: str = "INFO"):
        if not DebugLogger._should_log(category, level):
            return

        color_code = DebugLogger.COLOR_MAP.get(color, Colors.RESET)
        timestamp = datetime.now().strftime("%H:%M:%S")
        source = DebugLogger._get_caller()
        print(f"{color_code}[{timestamp}] [{source}][{tag}] {message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Initialization log. Empty message prints blank line."""
        if not msg.strip():
            print()
            return
        DebugLogger._log("INIT", msg, "init", category, "INFO")

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, "system", category, "INFO")

    @staticmethod
    def state(msg: str, category: str = "game_state"):
        DebugLogger._log("STATE", msg, "state", category, "INFO")

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, "ok", category, "INFO")

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        DebugLogger._log("TRACE", msg, "trace", category, "VERBOSE")

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, "warn", category, "WARN")

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._log("FAIL", msg, "fail", category, "ERROR")

    # ===========================================================
    # Section Formatting
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        line = "─" * DebugLogger.LINE_LENGTH
        title_line = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{line}\n{title_line}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print a dotted diagnostic entry, e.g. '> AssetLoader ..... [OK]'."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(DebugLogger._render_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Print indented sub-detail."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        indent = " " * (level * 4)
        print(f"{indent}• {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def _render_entry(module: str, status: str) -> str:
        color = {
            "OK": Colors.GREEN,
            "LOADING": Colors.CYAN,
            "FAIL": Colors.RED,
        }.get(status.upper(), Colors.WHITE)

        prefix = f"> {module}"
        status_str = f"[{status}]"
        pad = max(30 - len(prefix), 1)
        dot_count = max(DebugLogger.LINE_LENGTH - (len(prefix) + pad + 1 + len(status_str)), 1)

        return (
            f"{Colors.WHITE}{prefix}{' ' * pad}{'.' * dot_count} "
            f"{color}{status_str}{Colors.RESET}"
        )
