"""Entry point orchestration for the GitHub PR pickup-time generator."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from .cli import parse_args
from .config import load_config
from .errors import ApiError, AuthenticationError, ConfigurationError, DataValidationError
from .github_client import GitHubClient
from .pickup import collect_pickup_metrics
from .stats import generate_report, render_json

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNEXPECTED_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2
EXIT_AUTHENTICATION_ERROR = 3
EXIT_API_ERROR = 4
EXIT_DATA_VALIDATION_ERROR = 5


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def orchestrate_pickup_report(argv: Optional[List[str]] = None) -> int:
    """Run the full pickup-time workflow and return a process exit code."""
    try:
        args = parse_args(argv)
        _configure_logging(args.verbose)

        config = load_config(
            repository=args.repo,
            days=args.days,
            ignore_ready_after_review=args.ignore_ready_after_review,
        )
        github_client = GitHubClient(config=config)

        min_time: Optional[datetime] = None
        if config.days is None:
            logger.info("Fetching all PRs", extra={"repository": config.repository})
        else:
            min_time = datetime.now(timezone.utc) - timedelta(days=config.days)
            logger.info(
                "Fetching PRs created in lookback window",
                extra={"repository": config.repository, "days": config.days},
            )

        prs = github_client.list_pull_requests(
            owner=config.owner,
            repo=config.repo,
            min_time=min_time,
        )
        metrics = collect_pickup_metrics(
            github_client=github_client,
            owner=config.owner,
            repo=config.repo,
            prs=prs,
            ignore_ready_after_review=config.ignore_ready_after_review,
        )

        if args.output_format == "json":
            print(render_json(metrics))
        else:
            print(generate_report(repository=config.repository, metrics=metrics))
        return EXIT_OK
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return EXIT_CONFIGURATION_ERROR
    except AuthenticationError as exc:
        logger.error("Authentication error: %s", exc)
        return EXIT_AUTHENTICATION_ERROR
    except ApiError as exc:
        logger.error("GitHub API error: %s", exc)
        return EXIT_API_ERROR
    except DataValidationError as exc:
        logger.error("Data validation error: %s", exc)
        return EXIT_DATA_VALIDATION_ERROR
    except Exception:
        logger.exception("Unexpected error while generating pickup-time report")
        return EXIT_UNEXPECTED_ERROR


def main() -> int:
    return orchestrate_pickup_report()


if __name__ == "__main__":
    raise SystemExit(main())
