"""
EnvHelper - Read view settings from .env files
"""

import os
import threading
from typing import Optional, Any
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with .env file support

    Usage:
        EnvHelper.load('/path/to/.env')
        root = EnvHelper.get('VIEW_ROOT', './views')
        cache = EnvHelper.get_bool('VIEW_CACHE', True)
    """

    _lock = threading.Lock()

    TRUE_VALUES = ('true', '1', 'yes', 'on')
    FALSE_VALUES = ('false', '0', 'no', 'off', '')

    @classmethod
    def load(cls, env_path=None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (python-dotenv searches upwards when None)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a file was found and loaded
        """
        with cls._lock:
            return load_dotenv(env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """Get an environment variable"""
        return os.environ.get(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get an environment variable as a boolean

        Unrecognized values fall back to the default.
        """
        value = os.environ.get(key)
        if value is None:
            return default
        value = value.strip().lower()
        if value in cls.TRUE_VALUES:
            return True
        if value in cls.FALSE_VALUES:
            return False
        return default
