import argparse
import logging
import sys
from pathlib import Path

from cms_listing.adapters.webflow import WebflowClient
from cms_listing.app_shell.build import run_build
from cms_listing.app_shell.config import BuildSettings, load_settings
from cms_listing.components.roles import Role, resolve_roles
from cms_listing.core.errors import ListingBuildError

logger = logging.getLogger("cli")


def make_client(settings: BuildSettings) -> WebflowClient:
    return WebflowClient(
        api_token=settings.api_token,
        site_id=settings.site_id,
        base_url=settings.api_base_url,
        api_version=settings.api_version,
        timeout=settings.timeout_seconds,
    )


def handle_build(settings: BuildSettings, args: argparse.Namespace) -> None:
    updates = {}
    if args.input:
        updates["input_path"] = Path(args.input)
    if args.output:
        updates["output_dir"] = Path(args.output)
    if updates:
        settings = settings.model_copy(update=updates)

    with make_client(settings) as client:
        report = run_build(settings, client)

    print(f"Generated: {report.output_path}")
    print(", ".join(f"{role.value}: {count}" for role, count in report.counts.items()))


def handle_collections(settings: BuildSettings, args: argparse.Namespace) -> None:
    with make_client(settings) as client:
        collections = client.list_collections()

    assignment = resolve_roles(collections)
    roles_by_id = {c.id: role for role in Role if (c := assignment.get(role)) is not None}

    print("Collections:")
    for c in collections:
        role = roles_by_id.get(c.id)
        suffix = f" -> {role.value}" if role else ""
        print(f" - {c.display_name} ({c.id}){suffix}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Build a filterable listing page from CMS content")
    parser.add_argument("--config", help="Path to a YAML build config")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # build
    build_parser = subparsers.add_parser("build", help="Fetch content and write the listing page")
    build_parser.add_argument("--input", help="Input HTML document (default: index.html)")
    build_parser.add_argument("--output", help="Output directory (default: dist)")

    # collections
    subparsers.add_parser("collections", help="List collections and their resolved roles")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = load_settings(Path(args.config) if args.config else None)
        if args.command == "build":
            handle_build(settings, args)
        elif args.command == "collections":
            handle_collections(settings, args)
    except (ListingBuildError, OSError, ValueError) as e:
        logger.error(f"Build failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
