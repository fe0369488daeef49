"""Configuration management for the WooCommerce MCP Server"""

import os
import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any
from dotenv import load_dotenv

from .models.credentials import Credentials
from .utils.logger import DEFAULT_LOG_FORMAT

# Load environment variables
load_dotenv()

# Logging handlers are installed by utils.logger.setup_mcp_logging, never here:
# stdout must stay clean for JSON-RPC in stdio mode.

VALID_TRANSPORTS = ("stdio", "http")
VALID_CREDENTIAL_SOURCES = ("payload", "headers")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class APIConfig:
    """WooCommerce REST API configuration"""
    url: str = ""
    consumer_key: str = ""
    consumer_secret: str = ""
    timeout: float = 30.0
    debug_curl: bool = False

    @property
    def credentials(self) -> Credentials:
        """Credentials used by the single-session stdio mode"""
        return Credentials(url=self.url, key=self.consumer_key, secret=self.consumer_secret)


@dataclass
class ServerConfig:
    """Transport configuration"""
    transport: str = "stdio"           # stdio, http
    host: str = "0.0.0.0"
    port: int = 3000
    credentials_source: str = "payload"  # payload, headers
    json_response: bool = True
    name: str = "woocommerce-mcp-server"
    version: str = "1.0.0"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = DEFAULT_LOG_FORMAT


class Config:
    """Main configuration class"""

    def __init__(self):
        self.api = APIConfig(
            url=os.getenv("WC_URL", ""),
            consumer_key=os.getenv("WC_CONSUMER_KEY", ""),
            consumer_secret=os.getenv("WC_CONSUMER_SECRET", ""),
            timeout=float(os.getenv("WC_API_TIMEOUT", "30")),
            debug_curl=_env_flag("DEBUG_CURL_LOGGING", "false")
        )

        self.server = ServerConfig(
            transport=os.getenv("MCP_TRANSPORT", "stdio").lower(),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            credentials_source=os.getenv("CREDENTIALS_SOURCE", "payload").lower(),
            json_response=_env_flag("MCP_JSON_RESPONSE", "true")
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            file=os.getenv("LOG_FILE") or None,
            format=os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT)
        )

    def validate(self) -> bool:
        """Validate configuration"""
        errors = []

        if self.server.transport not in VALID_TRANSPORTS:
            errors.append(f"MCP_TRANSPORT must be one of {', '.join(VALID_TRANSPORTS)}")
        if self.server.credentials_source not in VALID_CREDENTIAL_SOURCES:
            errors.append(f"CREDENTIALS_SOURCE must be one of {', '.join(VALID_CREDENTIAL_SOURCES)}")
        if not 0 < self.server.port < 65536:
            errors.append("PORT must be between 1 and 65535")
        if self.api.timeout <= 0:
            errors.append("WC_API_TIMEOUT must be positive")

        # stdio mode has no other way to receive credentials
        if self.server.transport == "stdio" and not self.api.credentials.is_complete:
            logging.warning(
                "WC_URL, WC_CONSUMER_KEY and WC_CONSUMER_SECRET are not all set; "
                "every tool call will fail until they are"
            )

        if errors:
            for error in errors:
                logging.error(f"Configuration error: {error}")
            return False

        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "api": {
                "url": self.api.url,
                "consumer_key": "***" if self.api.consumer_key else "",
                "consumer_secret": "***" if self.api.consumer_secret else "",
                "timeout": self.api.timeout,
                "debug_curl": self.api.debug_curl
            },
            "server": {
                "transport": self.server.transport,
                "host": self.server.host,
                "port": self.server.port,
                "credentials_source": self.server.credentials_source,
                "json_response": self.server.json_response
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file
            }
        }


# Global configuration instance
config = Config()
