#!/usr/bin/env python3
"""
FCL Match Scorer CLI

Scores fantasy cricket team entries against a match's ball-by-ball feed and
reports the winning team(s).
Team entries come from data/teams.json
Player roles come from data/players.json
The match feed comes from data/match.json (or a ball-by-ball CSV)

Usage:
    python score_match.py
    python score_match.py --match ipl_ball_by_ball.csv --match-id 1312200
    python score_match.py --output results/match.json --excel results/match.xlsx
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from fcl import export_results_to_excel, process_match_from_json, save_match_results
from fcl.aggregation import rank_teams
from fcl.config import get_config
from fcl.logging_config import get_logger, setup_logging
from fcl.validators import validate_all_scores


def main():
    parser = argparse.ArgumentParser(description="FCL Fantasy Cricket Match Scorer")
    parser.add_argument(
        "--data-dir", "-d",
        default="data",
        help="Path to data directory",
    )
    parser.add_argument(
        "--match", "-m",
        default=None,
        help="Match feed file, JSON or CSV (defaults to the configured match file in the data directory)",
    )
    parser.add_argument(
        "--match-id",
        type=int,
        default=None,
        help="Match ID to score when the feed holds several matches",
    )
    parser.add_argument(
        "--teams", "-t",
        default=None,
        help="Team entries file (defaults to the configured teams file in the data directory)",
    )
    parser.add_argument(
        "--players", "-p",
        default=None,
        help="Player catalog file (defaults to the configured players file in the data directory)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output path for scored results JSON",
    )
    parser.add_argument(
        "--excel",
        default=None,
        help="Also write results to this .xlsx workbook",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Score every team entry without checking team rules",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress detailed output",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write a log file under ./logs",
    )

    args = parser.parse_args()

    setup_logging(
        level=logging.WARNING if args.quiet else logging.INFO,
        log_to_file=args.log_file,
    )
    logger = get_logger('fcl.cli')

    config = get_config()
    data_dir = Path(args.data_dir)
    match_path = Path(args.match) if args.match else data_dir / config.match_file
    teams_path = Path(args.teams) if args.teams else data_dir / config.teams_file
    players_path = Path(args.players) if args.players else data_dir / config.players_file

    if not match_path.exists():
        print(f"❌ Match feed not found: {match_path}")
        sys.exit(1)

    if not teams_path.exists():
        print(f"❌ Team entries file not found: {teams_path}")
        sys.exit(1)

    if not players_path.exists():
        print(f"⚠️  Player catalog not found: {players_path}")
        print("   Scoring without roles or team validation.")
        players_path = None

    print(f"Scoring {teams_path} against {match_path}...")

    try:
        result = process_match_from_json(
            match_path=match_path,
            teams_path=teams_path,
            players_path=players_path,
            match_id=args.match_id,
            validate=not args.no_validate,
            verbose=not args.quiet,
        )
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        logger.error(f"Could not score match: {e}")
        sys.exit(1)

    errors, warnings = validate_all_scores(result)
    for warning in warnings:
        logger.warning(warning)
    for error in errors:
        logger.error(error)

    # Print summary
    print("\n" + "="*60)
    print("FINAL STANDINGS")
    print("="*60)

    for rank, team in rank_teams(result.teams):
        print(f"  {rank}. {team.name}: {team.total_points:.1f} pts")

    if result.has_winner:
        print(f"\nWinner(s): {', '.join(team.name for team in result.winners)} ({result.top_score:.1f} pts)")
    else:
        print("\nNo team entries to rank")

    if args.output:
        save_match_results(args.output, result)

    if args.excel:
        export_results_to_excel(args.excel, result)

    if errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
