"""Command-line runner for truck loading plans."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from truckload.algorithms.greedy_planner import LoadingPlanner
from truckload.algorithms.validator import PlacementError, verify_plan
from truckload.core.config import PlannerConfig
from truckload.core.models import Crate, Truck
from truckload.core.result import PlanResult
from truckload.monitoring.metrics import (
    PlanMetrics,
    export_to_csv,
    export_to_json,
    format_instructions,
    print_summary,
)
from truckload.monitoring.telegram_notifier import (
    format_plan_complete,
    format_plan_failure,
    send_telegram,
)
from truckload.runner.dataset import generate_crates
from truckload.runner.manifest import Manifest, ManifestError, load_manifest

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PLAN_FAILED = 1
EXIT_BAD_INPUT = 2


class PlanRunner:
    """
    Runs one planning job end to end.

    Plans the crates, optionally re-verifies the plan, writes results and
    sends a notification.
    """

    def __init__(
        self,
        truck: Truck,
        crates: list[Crate],
        config: PlannerConfig | None = None,
        results_dir: Path | str | None = None,
        send_telegram_updates: bool = False,
    ):
        self.truck = truck
        self.crates = crates
        self.config = config or PlannerConfig()
        self.results_dir = Path(results_dir) if results_dir is not None else None
        self.send_telegram_updates = send_telegram_updates

    def run(self, verify: bool = False) -> tuple[PlanResult, PlanMetrics]:
        """
        Plan, verify and export.

        Raises:
            PlacementError: if *verify* is set and the plan breaks a
                            loading constraint.
        """
        metrics = PlanMetrics.start(self.truck, self.crates)
        result = LoadingPlanner(self.truck, self.crates, self.config).plan()
        metrics.record_result(result)

        if verify and result.ok:
            verify_plan(self.truck, self.crates, result, self.config.support_ratio)
            logger.info("Plan verified: %d placements", len(result.placements))

        if self.results_dir is not None:
            self._save_results(metrics, result)

        if self.send_telegram_updates:
            message = (
                format_plan_complete(metrics, self.truck.extents)
                if result.ok
                else format_plan_failure(metrics)
            )
            asyncio.run(send_telegram(message))

        return result, metrics

    def _save_results(self, metrics: PlanMetrics, result: PlanResult) -> None:
        json_path = self.results_dir / "plan.json"
        csv_path = self.results_dir / "instructions.csv"
        export_to_json(metrics, result, json_path, truck=self.truck)
        export_to_csv(result, csv_path)
        logger.info("Saved results to %s and %s", json_path, csv_path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="truckload-plan",
        description="Plan the loading sequence of crates into a truck",
    )
    parser.add_argument(
        "manifest",
        nargs="?",
        help="YAML or JSON manifest with truck, crates and planner settings",
    )
    parser.add_argument(
        "--random",
        type=int,
        metavar="N",
        help="Plan N random crates instead of reading a manifest",
    )
    parser.add_argument(
        "--truck",
        type=int,
        nargs=3,
        metavar=("W", "H", "L"),
        default=(10, 10, 10),
        help="Truck extents for --random (default: 10 10 10)",
    )
    parser.add_argument(
        "--max-extent",
        type=int,
        default=3,
        help="Largest random crate extent (default: 3)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--support-ratio",
        type=float,
        default=None,
        help="Override the manifest support ratio",
    )
    parser.add_argument("--out", type=Path, default=None, help="Directory for plan.json / instructions.csv")
    parser.add_argument("--verify", action="store_true", help="Re-check the finished plan")
    parser.add_argument("--notify", action="store_true", help="Send a Telegram notification")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _load_input(args: argparse.Namespace) -> Manifest:
    if args.random is not None:
        if any(e <= 0 for e in args.truck):
            raise ManifestError(f"Truck extents must be positive, got {args.truck}")
        if args.random < 0:
            raise ManifestError(f"--random must not be negative, got {args.random}")
        try:
            crates = generate_crates(args.random, 1, args.max_extent, seed=args.seed)
        except ValueError as e:
            raise ManifestError(str(e)) from e
        manifest = Manifest(truck=Truck(*args.truck), crates=crates, config=PlannerConfig())
    elif args.manifest:
        manifest = load_manifest(args.manifest)
    else:
        raise ManifestError("Either a manifest path or --random N is required")

    if args.support_ratio is not None:
        try:
            config = PlannerConfig(support_ratio=args.support_ratio)
        except ValueError as e:
            raise ManifestError(str(e)) from e
        manifest = Manifest(truck=manifest.truck, crates=manifest.crates, config=config)
    return manifest


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        manifest = _load_input(args)
    except ManifestError as e:
        logger.error("%s", e)
        return EXIT_BAD_INPUT

    runner = PlanRunner(
        manifest.truck,
        manifest.crates,
        manifest.config,
        results_dir=args.out,
        send_telegram_updates=args.notify,
    )
    try:
        result, metrics = runner.run(verify=args.verify)
    except PlacementError as e:
        logger.error("Plan verification failed: %s", e)
        return EXIT_PLAN_FAILED

    if result.ok:
        print(format_instructions(result))
    else:
        logger.error("Error: %s", result.failure.message)
    print(print_summary(metrics))
    return EXIT_OK if result.ok else EXIT_PLAN_FAILED


if __name__ == "__main__":
    sys.exit(main())
