"""NFL Playoff Bracket - CLI entry point.

Usage:
    python cli.py load-bracket [--file path.json]
    python cli.py fetch-results [--season 2025] [--week N]
    python cli.py show [--pick afc-div-1=team1 ...] [--picks picks.csv] [--table]
    python cli.py export [--format csv|json] [--output path] [--pick ...] [--picks ...]
    python cli.py interactive
"""

import argparse
import os
import pickle
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from exceptions import BracketError
from logging_config import setup_logging


def save_state(state: dict):
    """Save the session snapshot to disk."""
    os.makedirs(config.DATA_DIR, exist_ok=True)
    with open(config.STATE_FILE, "wb") as f:
        pickle.dump(state, f)


def load_state() -> dict:
    """Load the session snapshot from disk."""
    if os.path.exists(config.STATE_FILE):
        with open(config.STATE_FILE, "rb") as f:
            return pickle.load(f)
    return {}


def get_bracket(state: dict):
    """The stored snapshot, falling back to the bundled one."""
    bracket = state.get("bracket")
    if bracket is not None:
        return bracket
    if os.path.exists(config.DEFAULT_BRACKET_FILE):
        from ingestion.bracket_loader import load_bracket_from_json
        return load_bracket_from_json(config.DEFAULT_BRACKET_FILE)
    return None


def collect_picks(args) -> dict[str, str]:
    """Picks given on the command line for this run only."""
    from ingestion.manual_entry import load_picks_from_csv, parse_pick_args
    picks = {}
    if getattr(args, "picks", None):
        picks.update(load_picks_from_csv(args.picks))
    picks.update(parse_pick_args(getattr(args, "pick", None)))
    return picks


def compile_with_picks(bracket, picks: dict[str, str]):
    from engine.compiler import compile_bracket
    from engine.overlay import PickOverlay

    overlay = PickOverlay(picks=picks)
    derived = compile_bracket(bracket, overlay)
    ignored = sorted(set(picks) - set(derived.picks))
    if ignored:
        print(f"Ignoring picks for games that are final or not set: {', '.join(ignored)}")
    return derived


# --- Commands ---

def cmd_load_bracket(args):
    """Load the playoff snapshot."""
    from ingestion.bracket_loader import load_bracket_from_json

    state = load_state()
    bracket = load_bracket_from_json(args.file)
    state["bracket"] = bracket
    save_state(state)
    print(f"\nBracket loaded: {len(bracket.matchups)} games, byes for {', '.join(bracket.byes) or 'none'}")


def cmd_fetch_results(args):
    """Refresh the snapshot with real results from ESPN."""
    from ingestion.espn_scoreboard import apply_results, fetch_playoff_results

    state = load_state()
    bracket = get_bracket(state)
    if bracket is None:
        print("ERROR: No bracket loaded. Run 'python cli.py load-bracket' first.")
        return 1

    results = fetch_playoff_results(args.season, week=args.week, save=args.save)
    state["bracket"] = apply_results(bracket, results)
    save_state(state)


def cmd_show(args):
    """Display the bracket with optional hypothetical picks."""
    from output.printer import print_bracket, print_summary_table

    bracket = get_bracket(load_state())
    if bracket is None:
        print("ERROR: No bracket loaded. Run 'python cli.py load-bracket' first.")
        return 1

    derived = compile_with_picks(bracket, collect_picks(args))
    print_bracket(derived)
    if args.table:
        print_summary_table(derived)


def cmd_export(args):
    """Export the resolved bracket."""
    from output.export import export_bracket_csv, export_bracket_json

    bracket = get_bracket(load_state())
    if bracket is None:
        print("ERROR: No bracket loaded. Run 'python cli.py load-bracket' first.")
        return 1

    derived = compile_with_picks(bracket, collect_picks(args))
    output_path = args.output or os.path.join(config.DATA_DIR, f"bracket.{args.format}")
    if args.format == "csv":
        export_bracket_csv(derived, output_path)
    else:
        export_bracket_json(derived, output_path)


def cmd_interactive(args):
    """Pick winners one game at a time. Picks last until you quit."""
    from engine.compiler import compile_bracket
    from engine.overlay import PickOverlay
    from output.printer import print_bracket, print_summary_table

    bracket = get_bracket(load_state())
    if bracket is None:
        print("ERROR: No bracket loaded. Run 'python cli.py load-bracket' first.")
        return 1

    overlay = PickOverlay()
    derived = compile_bracket(bracket, overlay)
    print_summary_table(derived)
    print("\nCommands: pick <game> <team1|team2>, clear, show, table, quit")

    while True:
        try:
            line = input("bracket> ").strip()
        except EOFError:
            print()
            break
        if not line:
            continue

        parts = line.split()
        command = parts[0].lower()
        if command in ("quit", "exit", "q"):
            break
        elif command == "pick" and len(parts) == 3:
            matchup_id, slot = parts[1], parts[2].lower()
            if not derived.can_pick(matchup_id):
                print(f"  {matchup_id} cannot be picked (final, not set, or unknown)")
                continue
            try:
                overlay.set_pick(matchup_id, slot)
            except BracketError as e:
                print(f"  {e}")
                continue
        elif command == "clear":
            overlay.clear()
        elif command == "show":
            print_bracket(derived)
            continue
        elif command == "table":
            print_summary_table(derived)
            continue
        else:
            print("  Commands: pick <game> <team1|team2>, clear, show, table, quit")
            continue

        derived = compile_bracket(bracket, overlay)
        overlay.prune(derived)
        print_summary_table(derived)
        champion = derived.champion
        print(f"\n  Champion: {champion if champion else 'TBD'}")


# --- Main ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="NFL Playoff Bracket",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Workflow:
  1. python cli.py load-bracket --file bracket.json     # Load the playoff snapshot
  2. python cli.py fetch-results --season 2025          # Pull real results from ESPN
  3. python cli.py show --pick afc-div-1=team1          # Preview with hypothetical picks
  4. python cli.py interactive                          # Pick game by game
  5. python cli.py export --format csv                  # Save the resolved bracket
        """
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # load-bracket
    p_bracket = subparsers.add_parser("load-bracket", help="Load the playoff snapshot")
    p_bracket.add_argument("--file", default=config.DEFAULT_BRACKET_FILE,
                           help="JSON file with bracket data")

    # fetch-results
    p_results = subparsers.add_parser("fetch-results", help="Fetch real results from ESPN")
    p_results.add_argument("--season", type=int, default=2025)
    p_results.add_argument("--week", type=int, help="Postseason week (1-5)")
    p_results.add_argument("--save", action="store_true", help="Keep the raw response in data/raw/")

    # show
    p_show = subparsers.add_parser("show", help="Display the bracket")
    _add_pick_args(p_show)
    p_show.add_argument("--table", action="store_true", help="Also print a summary table")

    # export
    p_export = subparsers.add_parser("export", help="Export the resolved bracket")
    p_export.add_argument("--format", choices=["csv", "json"], default="csv")
    p_export.add_argument("--output", help="Output file path")
    _add_pick_args(p_export)

    # interactive
    subparsers.add_parser("interactive", help="Pick winners interactively")

    return parser


def _add_pick_args(parser: argparse.ArgumentParser):
    parser.add_argument("--pick", action="append", metavar="GAME=SLOT",
                        help="Hypothetical pick, e.g. afc-div-1=team1 (repeatable)")
    parser.add_argument("--picks", help="CSV file of picks (matchup_id,slot)")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("", level=args.log_level)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "load-bracket": cmd_load_bracket,
        "fetch-results": cmd_fetch_results,
        "show": cmd_show,
        "export": cmd_export,
        "interactive": cmd_interactive,
    }

    cmd_func = commands.get(args.command)
    if not cmd_func:
        parser.print_help()
        return 0

    try:
        return cmd_func(args) or 0
    except BracketError as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
