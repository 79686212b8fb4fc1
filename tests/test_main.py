"""Tests for application orchestration in the main module."""

import json
import sys
from argparse import Namespace
from datetime import date, datetime, timezone
from pathlib import Path
from unittest.mock import ANY, Mock, patch

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pickup_time.config import Config
from pickup_time.errors import ApiError, AuthenticationError, ConfigurationError, DataValidationError
from pickup_time.main import orchestrate_pickup_report
from pickup_time.models import PickupMetric


def _args(days=30, output_format="text") -> Namespace:
    return Namespace(
        repo="octo/widgets",
        days=days,
        output_format=output_format,
        ignore_ready_after_review=False,
        verbose=False,
    )


def _config(days=30) -> Config:
    return Config(owner="octo", repo="widgets", days=days, token="secret")


def _metric() -> PickupMetric:
    return PickupMetric(
        repository="octo/widgets",
        pr_number=7,
        pr_url="https://github.com/octo/widgets/pull/7",
        pr_creator="author",
        target_branch="main",
        ready_time=datetime(2023, 5, 10, 10, tzinfo=timezone.utc),
        first_review_time=datetime(2023, 5, 10, 11, tzinfo=timezone.utc),
        review_date=date(2023, 5, 10),
        pickup_time_seconds=3600,
        ready_event_type="PR creation (not draft)",
    )


def test_orchestrate_pickup_report_success(capsys):
    """Verify orchestration returns 0 and wires components correctly on success."""
    config = _config()
    github_client = Mock()
    github_client.list_pull_requests.return_value = [Mock()]

    with patch("pickup_time.main.parse_args", return_value=_args()) as parse_args_mock, patch(
        "pickup_time.main.load_config", return_value=config
    ) as load_config_mock, patch(
        "pickup_time.main.GitHubClient", return_value=github_client
    ) as client_ctor_mock, patch(
        "pickup_time.main.collect_pickup_metrics", return_value=[_metric()]
    ) as collect_mock, patch(
        "pickup_time.main.generate_report", return_value="REPORT"
    ) as report_mock:
        exit_code = orchestrate_pickup_report()

    assert exit_code == 0
    parse_args_mock.assert_called_once_with(None)
    load_config_mock.assert_called_once_with(
        repository="octo/widgets",
        days=30,
        ignore_ready_after_review=False,
    )
    client_ctor_mock.assert_called_once_with(config=config)
    github_client.list_pull_requests.assert_called_once_with(owner="octo", repo="widgets", min_time=ANY)
    assert github_client.list_pull_requests.call_args.kwargs["min_time"] is not None
    collect_mock.assert_called_once_with(
        github_client=github_client,
        owner="octo",
        repo="widgets",
        prs=github_client.list_pull_requests.return_value,
        ignore_ready_after_review=False,
    )
    report_mock.assert_called_once_with(repository="octo/widgets", metrics=[_metric()])
    assert "REPORT" in capsys.readouterr().out


def test_orchestrate_pickup_report_with_days_none_fetches_all_prs():
    """Verify days=None queries pull requests without a lookback bound."""
    github_client = Mock()
    github_client.list_pull_requests.return_value = []

    with patch("pickup_time.main.parse_args", return_value=_args(days=None)), patch(
        "pickup_time.main.load_config", return_value=_config(days=None)
    ), patch("pickup_time.main.GitHubClient", return_value=github_client), patch(
        "pickup_time.main.collect_pickup_metrics", return_value=[]
    ), patch("pickup_time.main.generate_report", return_value="REPORT"):
        exit_code = orchestrate_pickup_report()

    assert exit_code == 0
    github_client.list_pull_requests.assert_called_once_with(owner="octo", repo="widgets", min_time=None)


def test_orchestrate_pickup_report_json_output(capsys):
    """Verify the json format prints per-PR metric records."""
    with patch("pickup_time.main.parse_args", return_value=_args(output_format="json")), patch(
        "pickup_time.main.load_config", return_value=_config()
    ), patch("pickup_time.main.GitHubClient", return_value=Mock()), patch(
        "pickup_time.main.collect_pickup_metrics", return_value=[_metric()]
    ):
        exit_code = orchestrate_pickup_report()

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["prNumber"] == 7
    assert payload[0]["pickupTimeSeconds"] == 3600


def test_orchestrate_pickup_report_configuration_error_returns_exit_code():
    """Verify configuration failures return the configuration exit code."""
    with patch("pickup_time.main.parse_args", return_value=_args()), patch(
        "pickup_time.main.load_config", side_effect=ConfigurationError("bad repository")
    ):
        assert orchestrate_pickup_report() == 2


def test_orchestrate_pickup_report_missing_token_returns_auth_error():
    """Verify missing token/authentication failures return the authentication exit code."""
    with patch("pickup_time.main.parse_args", return_value=_args()), patch(
        "pickup_time.main.load_config",
        side_effect=AuthenticationError("Missing required GitHub token."),
    ):
        assert orchestrate_pickup_report() == 3


def test_orchestrate_pickup_report_api_error_returns_api_exit_code():
    """Verify GitHub API failures return the API error exit code."""
    github_client = Mock()
    github_client.list_pull_requests.side_effect = ApiError("Not Found")

    with patch("pickup_time.main.parse_args", return_value=_args()), patch(
        "pickup_time.main.load_config", return_value=_config()
    ), patch("pickup_time.main.GitHubClient", return_value=github_client):
        assert orchestrate_pickup_report() == 4


def test_orchestrate_pickup_report_data_validation_error_returns_exit_code():
    """Verify malformed event data returns the data validation exit code."""
    github_client = Mock()
    github_client.list_pull_requests.return_value = [Mock()]

    with patch("pickup_time.main.parse_args", return_value=_args()), patch(
        "pickup_time.main.load_config", return_value=_config()
    ), patch("pickup_time.main.GitHubClient", return_value=github_client), patch(
        "pickup_time.main.collect_pickup_metrics",
        side_effect=DataValidationError("Missing required timestamp 'submitted_at'."),
    ):
        assert orchestrate_pickup_report() == 5


def test_orchestrate_pickup_report_unexpected_error_returns_generic_exit_code():
    """Verify unexpected exceptions are mapped to the generic non-zero exit code."""
    with patch("pickup_time.main.parse_args", side_effect=RuntimeError("boom")):
        assert orchestrate_pickup_report() == 1
