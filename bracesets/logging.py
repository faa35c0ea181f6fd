from datetime import datetime, timezone
import inspect
import json
import logging
import pathlib
import sys
import traceback
from typing import Dict, Optional, TextIO, Tuple


class SetsLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax.

    Messages are only formatted if a handler ends up emitting them."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.DEBUG, format_string, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.INFO, format_string, args, kwargs)

    def warning(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.WARNING, format_string, args, kwargs)

    def error(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.ERROR, format_string, args, kwargs)

    def _log(
        self,
        level: int,
        format_string: str,
        args: Tuple[object, ...],
        kwargs: Dict[str, object],
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        exc_info = kwargs.pop('exc_info', None)
        # Two frames up is whoever called debug, info, etc.
        frame = inspect.currentframe()
        assert frame is not None and frame.f_back is not None
        caller_frame = frame.f_back.f_back
        assert caller_frame is not None
        caller = inspect.getframeinfo(caller_frame, context=0)
        module = caller_frame.f_globals.get('__name__', '')
        # Break the reference cycle through the frame objects.
        del frame, caller_frame
        self._logger.log(
            level,
            _DelayedFormat(format_string, args, kwargs),
            exc_info=exc_info,  # type: ignore[arg-type]
            extra={'caller': caller, 'caller_module': module},
        )


def get_logger(name: str) -> SetsLogger:
    """Create the logger for a module of this package.

    Nothing is printed unless the application configures logging."""
    python_logger = logging.getLogger(name)
    python_logger.addHandler(logging.NullHandler())
    return SetsLogger(python_logger)


def configure(
    level: int = logging.WARNING,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    handler = logging.StreamHandler(stream or sys.stderr)
    if json_format:
        handler.setFormatter(_JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter('%(levelname)s:%(name)s: %(message)s')
        )
    package_logger = logging.getLogger('bracesets')
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            caller: Optional[inspect.Traceback] = getattr(obj, 'caller', None)
            path_name = caller.filename if caller else obj.pathname
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                # arguments for the formatting string don't need to be in the
                # JSON
                'level_name': obj.levelname,
                'path_name': path_name,
                'file_name': pathlib.Path(path_name).name,
                'module': getattr(obj, 'caller_module', obj.module),
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': caller.lineno if caller else obj.lineno,
                'function_name': caller.function if caller else obj.funcName,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
            }
        return super().default(obj)


class _JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)


class _DelayedFormat:
    def __init__(
        self,
        format_string: str,
        args: Tuple[object, ...],
        kwargs: Dict[str, object],
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
