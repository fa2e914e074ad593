from __future__ import annotations

import argparse
from pathlib import Path

from connectn.config import FIGURES_DIR, RESULTS_DIR, RESULTS_PATTERN

from .io.load_results import LoadSpec, load_latest_from_dir, load_results
from .metrics.summarize import SummaryConfig, numeric_summary, ranked_table
from .plots import plot_metric_bar


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectn-analysis", description="Analyze Connect-N league CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default=RESULTS_DIR, help="Directory containing league_results_*.csv")
    ap.add_argument("--pattern", type=str, default=RESULTS_PATTERN, help="Glob pattern for selecting latest file")
    ap.add_argument("--outdir", type=str, default=FIGURES_DIR, help="Directory for saving plots")
    ap.add_argument("--metric", type=str, default="ppg", help="Ranking metric (ppg, points, wins, avg_ms_per_move, nodes)")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out tiers with fewer than this many games")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plot", action="store_true", help="Skip figure generation")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))
    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    cfg = SummaryConfig(metric=args.metric, min_games=args.min_games)  # type: ignore[arg-type]

    print("\n=== Standings ===")
    print(ranked_table(df, cfg).to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if not args.no_plot:
        path = plot_metric_bar(df, Path(args.outdir), args.metric, show=args.show)
        if path is not None:
            print(f"\nSaved figure to: {path.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
