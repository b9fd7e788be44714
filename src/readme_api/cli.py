# src/readme_api/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from flattener.services.markdown_render_service import MarkdownRenderService
from readme_api.controllers.readme_controller import ReadmeController
from readme_api.core.utils.config_loader import load_config
from readme_api.core.utils.configure_logging import configure_logger
from readme_api.exceptions import ConfigurationError, ReadmeServiceError, RequestValidationError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readme-flattener",
        description="Fetch GitHub READMEs and flatten them into typed content."
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...)")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API server")
    serve.add_argument("--host", default=None, help="Interface to bind (default: HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, default=None, help="Port to bind (default: PORT or 8080)")

    fetch = sub.add_parser("fetch", help="Build the document for one repository")
    fetch.add_argument("owner")
    fetch.add_argument("repo")
    fetch.add_argument("--output", "-o", type=Path, default=None, help="Write JSON here instead of stdout")

    render = sub.add_parser("render", help="Flatten a local markdown file (offline)")
    render.add_argument("file", type=Path)
    render.add_argument("--output", "-o", type=Path, default=None)

    batch = sub.add_parser("batch", help="Build documents for every 'owner/repo' line in a file")
    batch.add_argument("list_file", type=Path)
    batch.add_argument("--output-dir", "-d", type=Path, required=True)

    return parser


def _emit(text: str, output: Optional[Path]) -> None:
    if output is None:
        print(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %s", output)


def read_repo_list(path: Path) -> List[Tuple[str, str]]:
    """
    Reads 'owner/repo' lines; blank lines and '#' comments are ignored.

    Raises:
        RequestValidationError: On a line that is not of the form owner/repo.
    """
    pairs = []
    for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        owner, sep, repo = line.partition("/")
        if not sep or not owner or not repo or "/" in repo:
            raise RequestValidationError(f"{path}:{lineno}: expected owner/repo, got {line!r}")
        pairs.append((owner.strip(), repo.strip()))
    return pairs


def handle_render(args) -> int:
    if not args.file.is_file():
        logger.error("File not found: %s", args.file)
        return EXIT_USAGE
    markdown_text = args.file.read_text(encoding="utf-8")
    elements = MarkdownRenderService().render_elements(markdown_text)
    _emit(json.dumps([e.to_dict() for e in elements], indent=2, ensure_ascii=False), args.output)
    return EXIT_OK


def handle_fetch(args, controller: ReadmeController) -> int:
    document = controller.build_document(args.owner, args.repo)
    _emit(document.to_json(indent=2), args.output)
    return EXIT_OK


def handle_batch(args, controller: ReadmeController) -> int:
    pairs = read_repo_list(args.list_file)
    args.output_dir.mkdir(parents=True, exist_ok=True)

    failures = 0
    for owner, repo in tqdm(pairs, desc="READMEs", unit="repo"):
        try:
            document = controller.build_document(owner, repo)
        except ReadmeServiceError as e:
            failures += 1
            logger.error("Failed %s/%s: %s", owner, repo, e)
            continue
        (args.output_dir / f"{owner}__{repo}.json").write_text(document.to_json(indent=2), encoding="utf-8")

    logger.info("Batch finished: %d succeeded, %d failed.", len(pairs) - failures, failures)
    return EXIT_FAILURE if failures else EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(args.log_level or "INFO")

    # Rendering a local file needs no credential
    if args.command == "render":
        return handle_render(args)

    try:
        config = load_config()
    except ConfigurationError as e:
        logger.critical("Configuration error: %s", e)
        return EXIT_USAGE

    if not args.log_level:
        configure_logger(config.log_level)

    if args.command == "serve":
        from readme_api.server.app import run_server
        run_server(config, host=args.host, port=args.port)
        return EXIT_OK

    controller = ReadmeController(config)
    try:
        if args.command == "fetch":
            return handle_fetch(args, controller)
        return handle_batch(args, controller)
    except RequestValidationError as e:
        logger.error("%s", e)
        return EXIT_USAGE
    except ReadmeServiceError as e:
        logger.error("Error: %s", e)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
