"""
Logging Configuration
Provides structured logging for the render pipeline
"""
import logging
import json
import sys
from datetime import datetime


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs logs in JSON format for easy parsing and analysis
    """

    RESERVED_FIELDS = frozenset([
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'getMessage', 'message', 'taskName',
    ])

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON

        Args:
            record: Log record to format

        Returns:
            JSON formatted log string
        """
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        # Add extra fields from record.__dict__
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_FIELDS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    TEXT_FORMAT = '[%(asctime)s][%(name)s] %(levelname)s: %(message)s'

    @staticmethod
    def setup_logger(
        name: str = None,
        format_type: str = None,
        level: int = logging.INFO,
        stream=None
    ) -> logging.Logger:
        """
        Setup a console logger

        Args:
            name: Logger name (defaults to the package logger)
            format_type: Format type ('json' or 'text')
            level: Log level
            stream: Output stream (defaults to stderr)

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('sanic_render', format_type='json')
        """
        from sanic_render.defaults import DEFAULT_LOGGER_NAME, DEFAULT_LOG_FORMAT
        if name is None:
            name = DEFAULT_LOGGER_NAME
        if format_type is None:
            format_type = DEFAULT_LOG_FORMAT

        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Clear existing handlers
        logger.handlers.clear()

        handler = logging.StreamHandler(stream or sys.stderr)
        if format_type == 'json':
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter(LoggerConfig.TEXT_FORMAT))

        logger.addHandler(handler)
        return logger
