#!/usr/bin/env python3
"""
Print an injury-risk report for the squad.

Assessments are sorted by risk score (highest first) and can be filtered by
tier or by a search on athlete name and position.
"""

import argparse
import asyncio
import json

from dotenv import load_dotenv

from team_insights.analysis.risk import (
    filter_assessments,
    risk_level_text,
    summarize_assessments,
)
from team_insights.config import configure_logging
from team_insights.errors import NotFoundError
from team_insights.models.risk import RiskAssessment
from team_insights.services.dashboard import create_dashboard


def print_stats(stats: dict[str, int]) -> None:
    """Print the per-tier counts."""
    print("=" * 80)
    print("INJURY RISK OVERVIEW")
    print("=" * 80)
    print(f"Athletes assessed: {stats['total']}")
    print(f"  High risk:   {stats['high']}")
    print(f"  Medium risk: {stats['medium']}")
    print(f"  Low risk:    {stats['low']}")
    print()


def print_assessment(assessment: RiskAssessment, detailed: bool = False) -> None:
    """Print one assessment line, with factors and recommendations if detailed."""
    print(
        f"{assessment.athlete_name:<24} {assessment.position:<12} "
        f"{assessment.risk_score:>3}  {risk_level_text(assessment.risk_level):<12} "
        f"(T {assessment.training_risk} / I {assessment.injury_risk} / "
        f"P {assessment.performance_risk})"
    )
    if not detailed:
        return
    for factor in assessment.risk_factors:
        print(f"    ! {factor}")
    for recommendation in assessment.recommendations:
        print(f"    - {recommendation}")
    print()


async def build_report(args: argparse.Namespace) -> int:
    dashboard = create_dashboard(latency_scale=args.latency_scale)

    if args.athlete_id is not None:
        try:
            assessment = await dashboard.get_risk_assessment(args.athlete_id)
        except NotFoundError as e:
            print(str(e))
            return 1
        if args.json:
            print(json.dumps(assessment.model_dump(mode="json"), indent=2))  # type: ignore[union-attr]
        else:
            print_assessment(assessment, detailed=True)  # type: ignore[arg-type]
        return 0

    assessments = await dashboard.get_risk_assessment()
    filtered = filter_assessments(assessments, args.search, args.level)  # type: ignore[arg-type]

    if args.json:
        print(json.dumps([a.model_dump(mode="json") for a in filtered], indent=2))
        return 0

    print_stats(summarize_assessments(assessments))  # type: ignore[arg-type]
    if not filtered:
        print("No athletes match the filters.")
        return 0
    for assessment in filtered:
        print_assessment(assessment, detailed=args.detailed)
    return 0


def main() -> int:
    """Generate and print the risk report."""
    load_dotenv()
    parser = argparse.ArgumentParser(description="Print injury-risk assessments for the squad")
    parser.add_argument("--athlete-id", type=int, help="Assess a single athlete")
    parser.add_argument(
        "--level",
        choices=["all", "low", "medium", "high"],
        default="all",
        help="Only show athletes in this risk tier (default: all)",
    )
    parser.add_argument("--search", default="", help="Filter on athlete name or position")
    parser.add_argument(
        "--detailed", action="store_true", help="Include risk factors and recommendations"
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument(
        "--latency-scale",
        type=float,
        default=0.0,
        help="Simulated repository latency multiplier (default: 0)",
    )

    args = parser.parse_args()
    configure_logging()
    return asyncio.run(build_report(args))


if __name__ == "__main__":
    exit(main())
