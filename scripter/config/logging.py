"""
Centralized logging configuration for the script generator.
"""

import os


def get_logging_config(debug: bool = False, log_dir: str = "logs") -> dict:
    """
    Get Django LOGGING configuration.

    Args:
        debug: Whether running in debug/development mode
        log_dir: Directory for the rotating log files

    Returns:
        Complete Django LOGGING configuration dictionary
    """
    # Determine formatters based on environment
    file_formatter = "detailed" if debug else "production"

    def rotating_file(filename: str, formatter: str, backup_count: int = 30) -> dict:
        return {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": os.path.join(log_dir, filename),
            "when": "midnight",
            "interval": 1,
            "backupCount": backup_count,
            "formatter": formatter,
            "encoding": "utf-8",
            "delay": True,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "development": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "production": {
                "()": "telemetry.logging.formatters.JSONFormatter",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "development",
                "level": "DEBUG" if debug else "INFO",
            },
            "django_file": rotating_file("django.log", file_formatter),
            "acquisition_file": rotating_file("acquisition.log", file_formatter),
            "performance_file": rotating_file("performance.log", "detailed", backup_count=7),
            "unified_json": rotating_file("all-services.jsonl", "production"),
        },
        "loggers": {
            # Django framework logs
            "django": {
                "handlers": ["console", "django_file", "unified_json"],
                "level": "INFO",
                "propagate": False,
            },
            "django.request": {
                "handlers": ["console", "django_file"],
                "level": "WARNING",
                "propagate": False,
            },
            # Application modules
            "api": {
                "handlers": ["console", "django_file", "unified_json"],
                "level": "INFO",
                "propagate": False,
            },
            "video_processor": {
                "handlers": ["console", "acquisition_file", "unified_json"],
                "level": "INFO",
                "propagate": False,
            },
            "script_engine": {
                "handlers": ["console", "unified_json"],
                "level": "INFO",
                "propagate": False,
            },
            "ai_utils": {
                "handlers": ["console", "unified_json"],
                "level": "INFO",
                "propagate": False,
            },
            # Telemetry and timing
            "telemetry": {
                "handlers": ["console", "performance_file"],
                "level": "INFO",
                "propagate": False,
            },
            # Third-party libraries (quieter)
            "urllib3": {
                "handlers": ["unified_json"],
                "level": "WARNING",
                "propagate": False,
            },
            "requests": {
                "handlers": ["unified_json"],
                "level": "WARNING",
                "propagate": False,
            },
            "httpx": {
                "handlers": ["unified_json"],
                "level": "WARNING",
                "propagate": False,
            },
            "openai": {
                "handlers": ["unified_json"],
                "level": "WARNING",
                "propagate": False,
            },
            "google": {
                "handlers": ["unified_json"],
                "level": "WARNING",
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console", "unified_json"],
            "level": "WARNING",
        },
    }
