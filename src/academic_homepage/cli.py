"""Command line interface for building the homepage."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import random
from pathlib import Path
from typing import List

from .app import HomepageApp, result_to_dict
from .config import SiteConfig, load_config
from .graph_walk import NeuronWalk, extract_graph
from .matcher import ExactTitleMatcher, TitleMatcher, TokenOverlapMatcher


def _build_app(args: argparse.Namespace, config: SiteConfig) -> HomepageApp:
    if args.source:
        config = config.model_copy(update={"source": args.source})
    matcher: TitleMatcher = ExactTitleMatcher() if args.strict_titles else TokenOverlapMatcher()
    return HomepageApp(config=config, matcher=matcher)


def _cmd_publications(args: argparse.Namespace, config: SiteConfig) -> int:
    homepage = _build_app(args, config)
    result = asyncio.run(homepage.load_publications())
    if args.json:
        print(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
    else:
        print(homepage.render_publications(result))
    return 0 if result.ok else 1


def _cmd_build(args: argparse.Namespace, config: SiteConfig) -> int:
    homepage = _build_app(args, config)
    page = asyncio.run(homepage.render_page())
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(page, encoding="utf-8")
    logging.info("Wrote %s", args.output)
    return 0


def _cmd_graph(args: argparse.Namespace, config: SiteConfig) -> int:
    adjacency = extract_graph(args.svg.read_text(encoding="utf-8"))
    result = {"adjacency": adjacency, "walk": []}
    if adjacency and args.steps:
        walker = NeuronWalk(adjacency, rng=random.Random(args.seed))
        result["walk"] = walker.walk(args.steps)
    print(json.dumps(result))
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a personal academic homepage")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress at INFO level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_source_options(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--source",
            choices=["semantic_scholar", "orcid"],
            help="Override the configured bibliographic source",
        )
        sub.add_argument(
            "--strict-titles",
            action="store_true",
            help="Only suppress preprints whose titles match a published title exactly",
        )

    pubs = subparsers.add_parser("publications", help="Print the reconciled publication list")
    add_source_options(pubs)
    pubs.add_argument("--json", action="store_true", help="Print JSON instead of HTML")
    pubs.set_defaults(handler=_cmd_publications)

    build = subparsers.add_parser("build", help="Render the full page to a file")
    add_source_options(build)
    build.add_argument("--output", type=Path, default=Path("site/index.html"), help="Output HTML path")
    build.set_defaults(handler=_cmd_build)

    graph = subparsers.add_parser("graph", help="Print the brain-logo adjacency and a sample walk")
    graph.add_argument("svg", type=Path, help="Path to the brain logo SVG")
    graph.add_argument("--steps", type=int, default=0, help="Number of walk steps to sample")
    graph.add_argument("--seed", type=int, default=None, help="Random seed for the walk")
    graph.set_defaults(handler=_cmd_graph)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args, load_config())


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
