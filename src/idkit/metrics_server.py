"""
Prometheus metrics server for idkit.

Starts an HTTP server that exposes the idkit metrics at /metrics.

Usage:
    python -m idkit.metrics_server --port 9090
"""

import argparse
import time

from idkit.kernel.logging import configure_logging, get_logger
from idkit.kernel.metrics import start_metrics_server
from idkit.kernel.settings import IdKitSettings

logger = get_logger(__name__)


def main() -> None:
    """
    Start the Prometheus metrics server.

    Defaults come from IdKitSettings.from_env(); flags override them.
    """
    settings = IdKitSettings.from_env()

    parser = argparse.ArgumentParser(description="idkit Metrics Server")
    parser.add_argument(
        "--port",
        type=int,
        default=settings.metrics_port,
        help=f"Port to listen on (default: {settings.metrics_port})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=settings.json_logs,
        help="Output logs in JSON format",
    )

    args = parser.parse_args()

    configure_logging(json_output=args.json_logs, log_level=args.log_level)

    logger.info(
        "Starting Prometheus metrics server",
        port=args.port,
        endpoint=f"http://0.0.0.0:{args.port}/metrics",
    )

    start_metrics_server(port=args.port)

    logger.info("Metrics server started successfully")

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down metrics server")


if __name__ == "__main__":
    main()
