"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service,
or prints the application list once for the `apps-list` command.
"""

import argparse
import json
import logging

import uvicorn

from registry_dashboard.api.routers.applications import api_serialize_application_item, api_serialize_stats
from registry_dashboard.bootstrap import bootstrap_create_application, bootstrap_create_registry_adapter
from registry_dashboard.config import DashboardSettings, config_load_settings
from registry_dashboard.jobs import RecordFetchOrchestrator
from registry_dashboard.listing import SORT_OPTIONS, listing_compute_stats, listing_filter_and_sort


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Registry application dashboard runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "apps-list"),
        help="Runtime command: `api` starts server, `apps-list` prints statistics and the application list once",
        type=str,
    )
    argument_parser.add_argument("--search", dest="search", default="", type=str, help="Search term for `apps-list`")
    argument_parser.add_argument(
        "--sort",
        dest="sort",
        default="time",
        choices=SORT_OPTIONS,
        type=str,
        help="Sort option for `apps-list`",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    main_configure_logging(settings)

    if parsed_arguments.command == "apps-list":
        fetch_succeeded = main_print_application_list(
            settings=settings,
            search_term=parsed_arguments.search,
            sort_option=parsed_arguments.sort,
        )
        if not fetch_succeeded:
            raise SystemExit(1)
        return

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_level=settings.log_level.lower(),
    )


def main_configure_logging(settings: DashboardSettings) -> None:
    """Configure root logging from the validated log level."""

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main_print_application_list(settings: DashboardSettings, search_term: str, sort_option: str) -> bool:
    """Print statistics and the filtered application list as JSON.

    Args:
        settings: Validated runtime settings.
        search_term: Search term.
        sort_option: Sort option.

    Returns:
        bool: Whether the upstream fetch succeeded.

    Raises:
        ValueError: Raised when the sort option is unsupported.
    """

    registry_adapter = bootstrap_create_registry_adapter(settings=settings)
    try:
        fetch_outcome = RecordFetchOrchestrator(registry_adapter=registry_adapter).job_fetch_application_records()
    finally:
        registry_adapter.adapter_close()

    shown_records = listing_filter_and_sort(fetch_outcome.records, search_term=search_term, sort_option=sort_option)
    payload = {
        "fetch_status": fetch_outcome.status,
        "stats": api_serialize_stats(listing_compute_stats(fetch_outcome.records)),
        "items": [api_serialize_application_item(record) for record in shown_records],
    }
    print(json.dumps(payload, indent=2))
    return fetch_outcome.fetch_succeeded()


if __name__ == "__main__":
    main()
