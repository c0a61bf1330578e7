"""CLI エントリポイント。

目的:
    設定ファイル（TOML/JSON）から `SetterBenchmark` を構築し、setter の計測を行う。
    結果は表として標準出力に表示し、必要に応じて CSV/JSON/プロットとして保存する。

想定される例外:
    - 設定ファイルが存在しない: FileNotFoundError
    - JSON/TOML の構文エラー: パーサ由来の例外
    - 未知の設定キーや不正な値: ValueError
"""

import argparse
import json
import os
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

try:
    import matplotlib.pyplot as plt
except ImportError:
    plt = None

from accessor_setter.benchmark import SetterBenchmark
from accessor_setter.config import load_config
from accessor_setter.logger import WandBLogger, wandb_available


def main(argv: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """コマンドライン引数を解釈し、ベンチマークを実行する。

    Args:
        argv: 引数リスト。None の場合は `sys.argv` を argparse が参照する。

    Returns:
        計測結果の DataFrame。
    """

    parser = argparse.ArgumentParser(description="accessor setter benchmark")

    # --config 引数:
    # - 指定がなければ既定値（SetterBenchmark の引数デフォルト）で計測する
    # - TOML の場合は [benchmark] テーブルがあればそれを使う
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a TOML or JSON config file.",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Override the number of iterations per measurement.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path to write result CSV (optional).",
    )
    parser.add_argument(
        "--json",
        type=Path,
        default=None,
        help="Path to write result JSON (optional).",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Save ns/op bar plot (requires matplotlib).",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable progress bars.",
    )

    args = parser.parse_args(argv)

    config = {}
    if args.config is not None:
        config = load_config(args.config)
        if isinstance(config.get("benchmark"), dict):
            config = config["benchmark"]
    config = dict(config)
    if args.iterations is not None:
        config["iterations"] = args.iterations
    if args.no_progress:
        config["progress"] = False

    # WandB ログの準備（任意）。
    wandb_logger = None
    wandb_project = os.getenv("WANDB_PROJECT")
    wandb_enabled = os.getenv("WANDB_ENABLED", "").lower() in {"1", "true", "yes"}
    if wandb_project or wandb_enabled:
        if not wandb_project:
            wandb_project = "accessor-setter"
        if wandb_available():
            wandb_logger = WandBLogger(project=wandb_project, name="setter-benchmark")
            wandb_logger.start_run(config={"config": config})
        else:
            print("WandB が利用できないためロギングをスキップします。")

    print("\n=== Run parameters ===")
    print(
        {
            "config_path": str(args.config) if args.config is not None else None,
            "output_path": str(args.output) if args.output is not None else None,
            "plot": bool(args.plot),
            "config": config,
        }
    )

    bench = SetterBenchmark.from_config(config)
    results = bench.run()

    pd.set_option("display.max_columns", 100)
    print("\n=== Results ===")
    print(results.to_string(index=False))

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        results.to_csv(args.output, index=False)
        print(f"Saved result CSV to {args.output}")

    if args.json is not None:
        args.json.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "config": config,
            "results": results.to_dict(orient="records"),
        }
        with args.json.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, ensure_ascii=False, indent=2)
        print(f"Saved result JSON to {args.json}")

    if args.plot:
        if plt is None:
            print("matplotlib が利用できないためプロットをスキップします。")
        else:
            fig, ax = plt.subplots(figsize=(8, 4))
            ax.bar(results["name"], results["ns_per_op"])
            ax.set_ylabel("ns / op")
            ax.set_title("setter benchmark")
            ax.grid(True, axis="y", linestyle=":", alpha=0.6)
            output_path = Path("setter_benchmark.png")
            fig.tight_layout()
            fig.savefig(output_path, dpi=150)
            print(f"Saved plot to {output_path}")
            plt.close(fig)

    if wandb_logger is not None:
        wandb_logger.log_results(results)
        wandb_logger.finish()

    return results


if __name__ == "__main__":
    # 直接実行時のみ main() を呼び出す（import された場合に副作用を起こさない）。
    main()
