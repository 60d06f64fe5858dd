"""
kubecronlogs - tail the logs of every pod a Kubernetes CronJob has created.

Resolves the CronJob, the Jobs it controls and those Jobs' Pods, then streams
all pod logs concurrently to stdout. Each line is prefixed with its pod name
in a color derived from the name.

Usage:
    kubecronlogs [flags] <cronjob-name>
    python -m kubecronlogs [flags] <cronjob-name>

Examples:
    kubecronlogs nightly-backup
    kubecronlogs -n batch -c worker --follow nightly-backup
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from kubecronlogs.constants.enums import ExitCode
from kubecronlogs.constants.values import APP_NAME, APP_VERSION, DEFAULT_NAMESPACE
from kubecronlogs.controllers.cronjob.controller import CronJobLogsController, RunResult
from kubecronlogs.controllers.cronjob.errors import ClusterError
from kubecronlogs.controllers.cronjob.kubectl_client import KubectlClient
from kubecronlogs.models.state.run_config import ConfigError, RunConfig

logger = logging.getLogger(__name__)

# Diagnostics go to stderr; stdout carries only pod log lines.
error_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Tail logs of all pods of all jobs owned by a Kubernetes CronJob.",
    )
    parser.add_argument("name", help="CronJob name")
    parser.add_argument(
        "-n",
        "--namespace",
        help="Target namespace (default: current context namespace, else \"default\")",
    )
    parser.add_argument(
        "-c",
        "--container",
        help="Container to read logs from (default: the pod's default container)",
    )
    parser.add_argument(
        "-f",
        "--follow",
        action="store_true",
        help="Stream continuously instead of exiting at end of log",
    )
    parser.add_argument(
        "--timestamps",
        action="store_true",
        help="Prefix each line with the cluster-side timestamp",
    )
    parser.add_argument("--context", help="kubeconfig context to use")
    parser.add_argument(
        "--max-streams",
        type=int,
        dest="max_concurrent_streams",
        metavar="N",
        help="Limit concurrently open pod log streams (default: unbounded)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )
    return parser


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, show_path=verbose)],
        force=True,
    )


def build_run_config(args: argparse.Namespace, client: KubectlClient) -> RunConfig:
    """Turn parsed arguments into a RunConfig, resolving the namespace.

    Raises:
        ConfigError: If the arguments do not form a valid configuration.
    """
    namespace = args.namespace or client.resolve_namespace() or DEFAULT_NAMESPACE
    try:
        return RunConfig(
            name=args.name,
            namespace=namespace,
            container=args.container,
            follow=args.follow,
            timestamps=args.timestamps,
            context=args.context,
            max_concurrent_streams=args.max_concurrent_streams,
            verbose=args.verbose,
        )
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(problems) from exc


def report_failures(result: RunResult) -> None:
    """Print job and pod failures collected during the run."""
    for job_name, message in result.job_errors.items():
        error_console.print(f"[red]job {job_name}:[/red] {escape(message)}", highlight=False)
    for failed in result.failed_streams:
        error_console.print(
            f"[red]pod {failed.pod_name}:[/red] {escape(failed.error or 'unknown error')}",
            highlight=False,
        )


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the kubecronlogs CLI.

    Exit Codes:
        0: All pod streams completed
        1: Fatal error, or at least one job/pod failed
        2: Invalid command line
        130: Interrupted
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        client = KubectlClient(context=args.context)
        config = build_run_config(args, client)
    except (ClusterError, ConfigError) as exc:
        error_console.print(f"[red]error:[/red] {escape(str(exc))}", highlight=False)
        return ExitCode.FAILURE.value

    logger.debug("Run config: %s", config.model_dump())
    controller = CronJobLogsController(config, client=client)
    try:
        result = asyncio.run(controller.run())
    except KeyboardInterrupt:
        return ExitCode.INTERRUPTED.value
    except ClusterError as exc:
        error_console.print(f"[red]error:[/red] {escape(str(exc))}", highlight=False)
        return ExitCode.FAILURE.value

    report_failures(result)
    return result.exit_code.value


if __name__ == "__main__":
    sys.exit(main())
