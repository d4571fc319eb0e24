# utils / logger.py

# -----

# Colored Console Logging With an Optional Log File.
# Op Modules Log Through logging.getLogger(__name__), Which Propagates
# Into the 'boxutils' Logger Configured Here.

# -----

# Imports.
import logging
from pathlib import Path
from datetime import datetime
from colorama import init, Fore, Style

# Initialize colorama for Windows support
init()


class ColorLogger:
    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir=None, level='INFO'):
        if not hasattr(self, 'initialized'):
            self.initialized = True
            self.setup_logger(log_dir, level)

    def setup_logger(self, log_dir, level):
        self.logger = logging.getLogger('boxutils')
        self.logger.setLevel(logging.DEBUG)
        self.logger.addHandler(logging.NullHandler())
        self.console_level = logging.getLevelName(str(level).upper())
        if not isinstance(self.console_level, int):
            raise ValueError(f"[ERROR] Unknown log level: {level}")

        # File Handler Only When a Directory Is Given.
        self.log_file = None
        if log_dir is not None:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = log_dir / f'boxutils_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            self.logger.addHandler(file_handler)

    def _echo(self, level):
        return level >= self.console_level

    def debug(self, msg):
        """Log debug message (file only)"""
        self.logger.debug(msg)

    def info(self, msg, color=None):
        """Log info message with optional color"""
        self.logger.info(msg)
        if self._echo(logging.INFO):
            print(f"{color}{msg}{Style.RESET_ALL}" if color else msg)

    def warning(self, msg):
        """Log warning message in yellow"""
        self.logger.warning(msg)
        if self._echo(logging.WARNING):
            print(f"{Fore.YELLOW}WARNING: {msg}{Style.RESET_ALL}")

    def error(self, msg):
        """Log error message in red"""
        self.logger.error(msg)
        if self._echo(logging.ERROR):
            print(f"{Fore.RED}ERROR: {msg}{Style.RESET_ALL}")

    def success(self, msg):
        """Log success message in green"""
        self.logger.info(msg)
        if self._echo(logging.INFO):
            print(f"{Fore.GREEN}{msg}{Style.RESET_ALL}")


def get_logger(config=None):
    """Return the Shared ColorLogger, Configured From `config` on First Use."""
    if config is None:
        return ColorLogger()
    return ColorLogger(log_dir=config.get('log_dir'), level=config.get('log_level', 'INFO'))
