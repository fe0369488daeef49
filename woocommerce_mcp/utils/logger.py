"""Logging utilities for MCP Server"""

import logging
import sys
import json
import os
from datetime import datetime, timezone
from typing import Optional, Dict, Any

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance

    Args:
        name: Logger name (usually __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if level:
        log_level = getattr(logging, level.upper(), logging.INFO)
        logger.setLevel(log_level)

    return logger


def setup_mcp_logging(debug: bool = False, log_file: Optional[str] = None,
                      log_format: str = DEFAULT_LOG_FORMAT):
    """
    Setup logging appropriate for MCP server

    MCP servers should only output JSON-RPC messages to stdout,
    so we redirect all logging to stderr.

    Args:
        debug: Enable debug logging
        log_file: Optional file that receives a copy of every record
        log_format: Record format shared by every handler
    """
    log_level_str = os.getenv('LOG_LEVEL', 'INFO').upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    if debug:
        log_level = logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        log_format,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(log_level)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(f"Could not create log file {log_file}: {e}")

    # Suppress noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root_logger


class MCPOperationsLogger:
    """Structured JSON logging for MCP tool calls"""

    def __init__(self):
        self.debug_level = os.getenv('MCP_DEBUG_LEVEL', 'BASIC').upper()
        self.max_log_size = int(os.getenv('MCP_LOG_MAX_SIZE', '5000'))
        self.logger = logging.getLogger('mcp_operations')

    def _truncate_data(self, data: Any) -> Any:
        """Truncate large data structures for logging"""
        if self.debug_level == 'RAW':
            return data

        json_str = json.dumps(data, default=str)
        if len(json_str) <= self.max_log_size:
            return data

        truncated_str = json_str[:self.max_log_size] + '...[TRUNCATED]'
        return {"_truncated": True, "_size": len(json_str), "_data": truncated_str}

    @staticmethod
    def _short_session(session_id: str) -> str:
        return session_id[:16] + "..." if len(session_id) > 16 else session_id

    @staticmethod
    def _timestamp() -> str:
        return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

    def log_tool_request(self, tool_name: str, session_id: str, request_data: Dict[str, Any]):
        """Log MCP tool request"""
        if self.debug_level == 'BASIC':
            return

        log_entry = {
            "timestamp": self._timestamp(),
            "event_type": "mcp_request",
            "tool": tool_name,
            "session_id": self._short_session(session_id),
            "request": self._truncate_data(request_data)
        }

        self.logger.info(f"[REQUEST] {json.dumps(log_entry, separators=(',', ':'), default=str)}")

    def log_tool_response(self, tool_name: str, session_id: str, response_text: str,
                          execution_time_ms: float, is_error: bool = False):
        """Log MCP tool response with execution time"""
        log_entry = {
            "timestamp": self._timestamp(),
            "event_type": "mcp_response",
            "tool": tool_name,
            "session_id": self._short_session(session_id),
            "execution_time_ms": round(execution_time_ms, 2),
            "status": "error" if is_error else "success",
            "response": self._truncate_data(response_text) if self.debug_level in ('FULL', 'RAW') else response_text[:200]
        }

        self.logger.info(f"[RESPONSE] {json.dumps(log_entry, separators=(',', ':'))}")

    def log_tool_error(self, tool_name: str, session_id: str, error: Exception, execution_time_ms: float):
        """Log an exception that escaped a tool adapter"""
        log_entry = {
            "timestamp": self._timestamp(),
            "event_type": "mcp_error",
            "tool": tool_name,
            "session_id": self._short_session(session_id),
            "execution_time_ms": round(execution_time_ms, 2),
            "status": "error",
            "error": {
                "type": type(error).__name__,
                "message": str(error)[:500]
            }
        }

        self.logger.error(f"[ERROR] {json.dumps(log_entry, separators=(',', ':'))}")

    def log_feedback(self, request: str, context: Optional[str] = None):
        """Record a feedback submission; always logged regardless of debug level"""
        log_entry = {
            "timestamp": self._timestamp(),
            "event_type": "feedback",
            "request": request,
            "context": context
        }

        self.logger.info(f"[FEEDBACK] {json.dumps(log_entry, separators=(',', ':'))}")


# Global instance
_mcp_operations_logger = None

def get_mcp_operations_logger() -> MCPOperationsLogger:
    """Get global MCP operations logger instance"""
    global _mcp_operations_logger
    if _mcp_operations_logger is None:
        _mcp_operations_logger = MCPOperationsLogger()
    return _mcp_operations_logger
