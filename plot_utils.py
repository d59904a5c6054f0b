#!/usr/bin/env python3
"""
plot_utils.py

Compare history implementations from the batch_results CSV using seaborn.

Typical workflow:

1) Run the benchmark:
       python batch_run.py

2) Plot results:
   - From Python:
        from plot_utils import plot_boxplots_from_csv

        plot_boxplots_from_csv(
            csv_path="outputs_batch/batch_results.csv",
            group_by=["history_name"],
            metrics=["walk.runtime"],
            output_dir="outputs_batch/plots",
            show=False,
        )

   - Or from the command line (using the DEFAULT_* constants at the bottom):
        python plot_utils.py
"""

from pathlib import Path
from typing import Sequence, Optional, Union, Dict

import pandas as pd
import matplotlib.pyplot as plt

import seaborn as sns


PathLike = Union[str, Path]

GROUP_LABEL_COL = "__group_label__"


def load_results(
    csv_path: PathLike,
    group_by: Sequence[str],
    metrics: Sequence[str],
) -> pd.DataFrame:
    """
    Read the CSV, check the requested columns and add a single group label
    column (values of `group_by` joined with " | ").
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)

    for col in list(group_by) + list(metrics):
        if col not in df.columns:
            raise ValueError(
                f"column '{col}' not found in CSV. "
                f"Available columns include: {list(df.columns)[:20]} ..."
            )

    df[GROUP_LABEL_COL] = df[list(group_by)].astype(str).agg(" | ".join, axis=1)
    return df


def group_stats(df: pd.DataFrame, metric: str) -> pd.DataFrame:
    """Count, median and quartiles of `metric` per group label."""
    sub = df[[GROUP_LABEL_COL, metric]].dropna()
    return (
        sub.groupby(GROUP_LABEL_COL)[metric]
        .agg(
            n="count",
            median="median",
            q1=lambda s: s.quantile(0.25),
            q3=lambda s: s.quantile(0.75),
        )
        .sort_index()
    )


def plot_boxplots_from_csv(
    csv_path: PathLike,
    group_by: Sequence[str],
    metrics: Sequence[str],
    output_dir: Optional[PathLike] = None,
    show: bool = True,
    x_axis_label: Optional[str] = None,
    palette_name: str = "colorblind",
    y_axis_labels: Optional[Dict[str, str]] = None,
    log_scale: bool = True,
) -> None:
    """
    One seaborn boxplot per metric, grouped by the given columns.

    Plots are saved as PDF in `output_dir` when given. Median and quartile
    stats per group are printed for every metric.
    """
    df = load_results(csv_path, group_by, metrics)

    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    categories = sorted(df[GROUP_LABEL_COL].unique())
    x_label_text = x_axis_label if x_axis_label is not None else " | ".join(group_by)

    sns.set_style("whitegrid")
    sns.set_context("paper", font_scale=1.2)
    palette = dict(zip(categories, sns.color_palette(palette_name, n_colors=len(categories))))

    for metric in metrics:
        sub = df[[GROUP_LABEL_COL, metric]].dropna()
        if sub.empty:
            print(f"[WARN] No data for metric '{metric}' after dropping NaNs. Skipping.")
            continue

        print(f"\n[STATS] {metric}")
        print(group_stats(df, metric).to_string(float_format=lambda x: f"{x:.4g}"))

        fig, ax = plt.subplots(figsize=(max(6.0, 1.5 * len(categories)), 6))
        sns.boxplot(
            data=sub,
            x=GROUP_LABEL_COL,
            y=metric,
            hue=GROUP_LABEL_COL,
            order=categories,
            palette=palette,
            dodge=False,
            legend=False,
            ax=ax,
        )

        ax.set_title(f"{metric} by {', '.join(group_by)}", fontsize=16)
        ax.set_xlabel(x_label_text, fontsize=14)
        ax.set_ylabel(
            y_axis_labels.get(metric, metric) if y_axis_labels else metric,
            fontsize=14,
        )
        if log_scale:
            ax.set_yscale("log")

        fig.tight_layout()

        if output_dir is not None:
            safe_metric = metric.replace(".", "_").replace(" ", "_")
            fname = output_dir / f"box_{safe_metric}_by_{'_'.join(group_by)}.pdf"
            fig.savefig(fname, dpi=150, bbox_inches="tight")
            print(f"Saved boxplot for '{metric}' to {fname}")

        if show:
            plt.show()
        else:
            plt.close(fig)


# ---------------------------------------------------------------------
# Default behavior when running this file directly
# ---------------------------------------------------------------------
DEFAULT_CSV = "outputs_batch/batch_results.csv"
DEFAULT_GROUP_BY = ["history_name"]
DEFAULT_METRICS = ["walk.runtime"]
DEFAULT_OUTPUT_DIR = "outputs_batch/plots"
DEFAULT_SHOW = False  # set to True for interactive windows


def _run_with_defaults() -> None:
    print(f"Reading CSV: {DEFAULT_CSV}")
    plot_boxplots_from_csv(
        csv_path=DEFAULT_CSV,
        group_by=DEFAULT_GROUP_BY,
        metrics=DEFAULT_METRICS,
        output_dir=DEFAULT_OUTPUT_DIR,
        show=DEFAULT_SHOW,
        x_axis_label="History implementation",
        y_axis_labels={"walk.runtime": "Walk runtime (s)"},
        log_scale=True,
    )


if __name__ == "__main__":
    _run_with_defaults()
