"""
Logging decorators for Surprise Gateway maintenance operations.
Provides structured and redacted logging around method execution.
"""
import logging
import functools
import time
import uuid
import inspect
from typing import Dict, Any, Optional, Callable, Set
from datetime import datetime, timezone

from .log_config import get_logger


# Default sensitive fields blacklist
DEFAULT_SENSITIVE_FIELDS: Set[str] = {
    'password', 'secret', 'token', 'api_key', 'reaction', 'ip',
    'user_agent', 'useragent', 'referer'
}


def op_config(
    level: str = "INFO",
    args: bool = True,
    result: bool = True,
    perform: bool = True,
    blacklist: Optional[Set[str]] = None
) -> Dict[str, Any]:
    """
    Create operation config with flexible overrides for logging decorators.

    Args:
        level: Logging level (default INFO)
        args: Whether to log function arguments
        result: Whether to log operation result
        perform: Whether to log timing metrics
        blacklist: Additional sensitive fields to mask

    Returns:
        dict: Configuration for the decorator
    """
    return {
        "level": level,
        "include_args": args,
        "include_result": result,
        "include_performance": perform,
        "sensitive_fields": blacklist or set()
    }


def _sanitize_sensitive_data(data: Any, blacklist: Set[str]) -> Any:
    """
    Recursively sanitize sensitive data from logs.
    Replaces values of keys matching sensitive fields with [REDACTED].
    """
    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            if str(key).lower() in blacklist:
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = _sanitize_sensitive_data(value, blacklist)
        return sanitized
    elif isinstance(data, (list, tuple)):
        return [_sanitize_sensitive_data(item, blacklist) for item in data]
    elif hasattr(data, 'to_dict'):
        return _sanitize_sensitive_data(data.to_dict(), blacklist)
    else:
        return data


def _build_operation_context(
    operation: str,
    method_name: str,
    component_name: str
) -> Dict[str, Any]:
    return {
        "component": component_name,
        "operation": operation,
        "method": method_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "operation_id": f"op_{uuid.uuid4().hex[:8]}"
    }


def log_operation(
    operation: str,
    level: str = "INFO",
    include_args: bool = False,
    include_result: bool = True,
    include_performance: bool = True,
    sensitive_fields: Optional[Set[str]] = None
) -> Callable:
    """
    Decorator for component methods.
    Logs start, completion (with redacted result) and failure of the call.

    Args:
        operation: Business operation name
        level: Logging level
        include_args: Whether to log function arguments
        include_result: Whether to log operation result
        include_performance: Whether to log timing metrics
        sensitive_fields: Additional sensitive fields to blacklist

    Returns:
        Decorated function with automatic structured logging
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            component_name = self.__class__.__name__
            logger = get_logger(component_name)

            blacklist = DEFAULT_SENSITIVE_FIELDS.copy()
            if sensitive_fields:
                blacklist.update(sensitive_fields)

            context = _build_operation_context(operation, func.__name__, component_name)

            if include_args:
                bound_args = inspect.signature(func).bind(self, *args, **kwargs)
                bound_args.apply_defaults()
                args_dict = {k: v for k, v in bound_args.arguments.items() if k != 'self'}
                context["arguments"] = _sanitize_sensitive_data(args_dict, blacklist)

            start_time = time.time()
            log_level = getattr(logging, level.upper(), logging.INFO)

            logger.log(log_level, f"Starting {operation}", extra={"extra_fields": context})

            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                error_context = context.copy()
                error_context.update({
                    "status": "failed",
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                    "duration_ms": round((time.time() - start_time) * 1000, 2)
                })
                logger.error(f"Failed {operation}", extra={"extra_fields": error_context})
                raise

            success_context = context.copy()
            success_context["status"] = "completed"

            if include_performance:
                success_context["duration_ms"] = round((time.time() - start_time) * 1000, 2)

            if include_result and result is not None:
                success_context["result_type"] = type(result).__name__
                if hasattr(result, '__len__') and not isinstance(result, str):
                    success_context["result_size"] = len(result)
                else:
                    success_context["result"] = _sanitize_sensitive_data(result, blacklist)

            logger.log(log_level, f"Completed {operation}", extra={"extra_fields": success_context})
            return result

        return wrapper
    return decorator
