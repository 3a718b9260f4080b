"""Command-line interface for orchestrating the pipeline.

Provides subcommands: `summary`, `report`, and `all`. Each command is
implemented as a `cmd_*` function that accepts an argparse namespace.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
import pandas as pd

from invest_pipeline.config import Settings, get_settings
from invest_pipeline.logging_config import configure_logging

# INGEST
from invest_pipeline.ingest.load_raw import load_state_summary, read_announcements

# CLEAN
from invest_pipeline.clean.transform import clean_raw_ddf
from invest_pipeline.clean.validate import validate_partition

# GOLD
from invest_pipeline.aggregate.build_gold import (
    gold_announcements_by_period,
    gold_investment_by_month,
    gold_investment_by_state,
    gold_jobs_by_industry,
    gold_mean_investment_by_industry,
    gold_missing_report,
    gold_top_industries,
)

# REPORT
from invest_pipeline.report.render import render_report

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _input_path(args: argparse.Namespace, s: Settings) -> Path:
    return Path(args.input) if getattr(args, "input", None) else s.announcements_csv


def _load_clean(args: argparse.Namespace, s: Settings) -> Any:
    """Read the announcements table and return the Clean Dask DataFrame."""
    raw = read_announcements(_input_path(args, s))
    return clean_raw_ddf(raw, s.periods)


def _load_state_table(path: Path) -> dict[str, float] | None:
    """Load an auxiliary state table, or None so the report uses its own state sums."""
    try:
        return load_state_summary(path)
    except FileNotFoundError:
        log.warning("State table %s not found; using per-state sums from the announcements", path)
        return None


def _log_table(title: str, pdf: pd.DataFrame) -> None:
    log.info("%s (%d rows)\n%s", title, len(pdf), pdf.to_string(index=False) if not pdf.empty else "<empty>")


# --------------------------------------------------
# SUMMARY
# --------------------------------------------------
def cmd_summary(args: argparse.Namespace) -> None:
    """Compute the Gold tables and log them together with data-quality counts.

    Args:
        args: argparse namespace with `input` and `top_n`.
    """
    s = get_settings()
    ddf = _load_clean(args, s)
    top_n = args.top_n or s.top_n

    good, bad = validate_partition(ddf.compute())
    log.info("Clean records: valid=%d rejected=%d", len(good), bad)

    _log_table("Missing values per field", gold_missing_report(ddf).compute())
    _log_table(f"Top {top_n} industries by investment", gold_top_industries(ddf, top_n).compute())
    _log_table("Jobs by industry", gold_jobs_by_industry(ddf).compute())
    _log_table("Mean investment by industry", gold_mean_investment_by_industry(ddf).compute())
    _log_table(
        "Investment by state",
        gold_investment_by_state(ddf).compute().sort_values("total_investment", ascending=False),
    )
    _log_table("Investment by month", gold_investment_by_month(ddf).compute())
    _log_table("Announcements by period", gold_announcements_by_period(ddf, s.periods).compute())

    log.info("Summary completed.")


# --------------------------------------------------
# REPORT
# --------------------------------------------------
def cmd_report(args: argparse.Namespace) -> None:
    """Render charts and maps into the report directory.

    Args:
        args: argparse namespace with `input`, `out_dir`, `top_n` and
            `no_state_tables`.
    """
    s = get_settings()
    ddf = _load_clean(args, s)
    out_dir = Path(args.out_dir) if args.out_dir else s.report_dir

    state_investment = state_jobs = None
    if not args.no_state_tables:
        state_investment = _load_state_table(s.state_investment_csv)
        state_jobs = _load_state_table(s.state_jobs_csv)

    saved = render_report(
        ddf,
        out_dir,
        periods=s.periods,
        state_investment=state_investment,
        state_jobs=state_jobs,
        top_n=args.top_n or s.top_n,
    )
    for name, path in saved.items():
        log.info("  %s: %s", name, path)


# --------------------------------------------------
# ALL
# --------------------------------------------------
def cmd_all(args: argparse.Namespace) -> None:
    """Convenience: run summary → report with the provided args."""
    cmd_summary(args)
    cmd_report(args)


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    The returned parser has subcommands `summary`, `report`, and `all`
    with commonly used options configured.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="invest_pipeline")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_summary = sub.add_parser("summary")
    p_summary.add_argument("--input", default=None)
    p_summary.add_argument("--top-n", type=int, default=None)

    p_report = sub.add_parser("report")
    p_report.add_argument("--input", default=None)
    p_report.add_argument("--out-dir", default=None)
    p_report.add_argument("--top-n", type=int, default=None)
    p_report.add_argument("--no-state-tables", action="store_true")

    p_all = sub.add_parser("all")
    p_all.add_argument("--input", default=None)
    p_all.add_argument("--out-dir", default=None)
    p_all.add_argument("--top-n", type=int, default=None)
    p_all.add_argument("--no-state-tables", action="store_true")

    return p


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands.

    A missing announcements file stops the run with exit status 1; missing
    auxiliary state tables fall back to the pipeline's own per-state sums.
    """
    args = build_parser().parse_args(argv)

    load_dotenv()
    s = get_settings()
    configure_logging(s.log_path, s.log_level)

    try:
        if args.cmd == "summary":
            cmd_summary(args)
        elif args.cmd == "report":
            cmd_report(args)
        elif args.cmd == "all":
            cmd_all(args)
        else:
            raise SystemExit(2)
    except FileNotFoundError as exc:
        log.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
