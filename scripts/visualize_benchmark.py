#!/usr/bin/env python3
"""ベンチマーク結果の可視化スクリプト

目的:
    main.py --output で保存した CSV を複数読み込み、計測ごとの ns/op を比較する。

使い方:
    python scripts/visualize_benchmark.py --results outputs/a.csv outputs/b.csv
"""

import argparse
from pathlib import Path
from typing import List

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd


def load_results(paths: List[Path]) -> pd.DataFrame:
    """CSV を読み込み、ファイル名を run 列として付けて縦に連結する。"""
    frames = []
    for path in paths:
        df = pd.read_csv(path)
        required = {"name", "ns_per_op"}
        if not required.issubset(df.columns):
            missing = sorted(required - set(df.columns))
            raise ValueError(f"Missing required columns in {path}: {missing}")
        df["run"] = path.stem
        frames.append(df)
    return pd.concat(frames, ignore_index=True)


def plot_ns_per_op(df: pd.DataFrame, output_dir: Path) -> Path:
    """計測名ごとに run を並べた棒グラフを保存する。"""
    pivot = df.pivot_table(index="name", columns="run", values="ns_per_op")
    names = list(pivot.index)
    runs = list(pivot.columns)
    x = np.arange(len(names))
    width = 0.8 / max(len(runs), 1)

    fig, ax = plt.subplots(figsize=(10, 5))
    for k, run in enumerate(runs):
        ax.bar(x + k * width, pivot[run].to_numpy(), width=width, label=run)

    ax.set_xticks(x + 0.4 - width / 2)
    ax.set_xticklabels(names, rotation=20)
    ax.set_ylabel("ns / op")
    ax.set_title("setter benchmark")
    ax.legend(loc="best", fontsize="small")
    ax.grid(True, axis="y", alpha=0.3)

    fig.tight_layout()
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "setter_ns_per_op.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    print(f"Saved plot to: {output_path}")
    plt.close(fig)
    return output_path


def main():
    parser = argparse.ArgumentParser(description="Visualize setter benchmark results")
    parser.add_argument(
        "--results",
        type=Path,
        nargs="+",
        required=True,
        help="Result CSV files written by main.py --output",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("outputs/plots"),
        help="Directory to save plots",
    )
    args = parser.parse_args()

    df = load_results(args.results)
    print(df.groupby("name")["ns_per_op"].describe())
    plot_ns_per_op(df, args.output_dir)


if __name__ == "__main__":
    main()
