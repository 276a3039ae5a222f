"""Production startup script for the SEO Content Processor.

This script handles:
1. Reading server settings from the application config
2. Starting the API server with uvicorn
3. Graceful shutdown handling
"""

import os
import signal
import sys

from api.config import Settings, get_settings


def build_command(settings: Settings) -> list[str]:
    """Build the uvicorn command line; hosting platforms may override PORT."""
    port = os.getenv("PORT", str(settings.api_port))
    return [
        "uvicorn",
        "api.main:app",
        "--host",
        settings.api_host,
        "--port",
        port,
        "--workers",
        str(settings.api_workers),
        "--log-level",
        settings.log_level.lower(),
        "--proxy-headers",
    ]


def start_api() -> None:
    """Start the FastAPI application with uvicorn."""
    settings = get_settings()
    command = build_command(settings)
    port = command[command.index("--port") + 1]

    print(
        f"Starting SEO Content Processor ({settings.env}) on "
        f"{settings.api_host}:{port} with {settings.api_workers} worker(s)..."
    )

    # Use exec to replace the current process
    os.execvp(command[0], command)


def signal_handler(signum: int, _frame: object) -> None:
    """Handle shutdown signals gracefully."""
    print(f"Received signal {signum}, shutting down...")
    sys.exit(0)


def main() -> None:
    """Main entry point."""
    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    start_api()


if __name__ == "__main__":
    main()
