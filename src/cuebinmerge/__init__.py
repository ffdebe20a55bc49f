import logging.config

# Both named loggers stay at NOTSET so -q/-V on the root level drives them
logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"simple": {"format": "%(message)s"}},
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            "root": {"level": "WARNING", "handlers": ["stdout"]},
            # Batch progress and the final summary
            "cuebinmerge": {"level": "NOTSET"},
            # One sheet's parse and merge inside a pool worker
            "cuebinmerge subprocess": {"level": "NOTSET"},
        },
    }
)
