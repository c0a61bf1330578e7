from __future__ import annotations

import json
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from accessor_setter.benchmark import SetterBenchmark
from accessor_setter.config import load_config
from accessor_setter.logger import WandBLogger, wandb_available

import main as cli


def test_load_config_formats() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        tmp_path = Path(tmp)

        toml_path = tmp_path / "bench.toml"
        toml_path.write_text(
            '[benchmark]\niterations = 10\ndtypes = ["complex64"]\n', encoding="utf-8"
        )
        config = load_config(toml_path)
        if config != {"benchmark": {"iterations": 10, "dtypes": ["complex64"]}}:
            raise AssertionError(f"unexpected TOML config: {config}")
        if load_config(toml_path, section="benchmark")["iterations"] != 10:
            raise AssertionError("section lookup failed")
        if load_config(toml_path, section="missing") != {}:
            raise AssertionError("missing section should be empty")

        json_path = tmp_path / "bench.JSON"
        json_path.write_text(json.dumps({"length": 5}), encoding="utf-8")
        if load_config(json_path) != {"length": 5}:
            raise AssertionError("JSON config not loaded")

        yaml_path = tmp_path / "bench.yaml"
        yaml_path.write_text("length: 5\n", encoding="utf-8")
        try:
            load_config(yaml_path)
        except ValueError:
            pass
        else:
            raise AssertionError("unsupported suffix should raise ValueError")

        try:
            load_config(tmp_path / "nope.toml")
        except FileNotFoundError:
            pass
        else:
            raise AssertionError("missing file should raise FileNotFoundError")


def test_benchmark_config_validation() -> None:
    for bad in [
        {"iterations": 0},
        {"length": -1},
        {"dtypes": []},
        {"unknown": 1},
        # 文字列は 1 文字ずつのタグに分解されないよう拒否する。
        {"dtypes": "complex64"},
        {"dtypes": ["complex64", 64]},
        # 小数は切り捨てずに拒否する。
        {"iterations": 1.5},
        {"length": 0.9},
        {"iterations": True},
    ]:
        try:
            SetterBenchmark.from_config(bad)
        except ValueError:
            continue
        raise AssertionError(f"config {bad!r} should be rejected")


def test_benchmark_run() -> None:
    bench = SetterBenchmark(
        iterations=50,
        length=7,
        dtypes=["complex128", "complex64", "generic", "float64"],
        progress=False,
    )
    results = bench.run()
    expected = [
        "factory",
        "dtype=complex128",
        "dtype=complex64",
        "dtype=generic",
        "dtype=float64",
    ]
    if results["name"].tolist() != expected:
        raise AssertionError(f"unexpected rows: {results['name'].tolist()}")
    if (results["iterations"] != 50).any():
        raise AssertionError("iterations column mismatch")
    if (results["elapsed_sec"] < 0).any():
        raise AssertionError("negative elapsed time")

    try:
        bench.run_dtype("not-a-dtype")
    except ValueError:
        pass
    else:
        raise AssertionError("unknown benchmark dtype should raise ValueError")


def test_cli_writes_outputs() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        tmp_path = Path(tmp)
        config_path = tmp_path / "bench.json"
        config_path.write_text(
            json.dumps({"iterations": 20, "length": 4, "dtypes": ["complex64"]}),
            encoding="utf-8",
        )
        csv_path = tmp_path / "out" / "results.csv"
        json_path = tmp_path / "out" / "results.json"
        results = cli.main(
            [
                "--config",
                str(config_path),
                "--output",
                str(csv_path),
                "--json",
                str(json_path),
                "--no-progress",
            ]
        )
        if results.shape[0] != 2:
            raise AssertionError(f"unexpected result rows: {results.shape}")
        if not csv_path.exists() or not json_path.exists():
            raise AssertionError("CLI did not write outputs")
        payload = json.loads(json_path.read_text(encoding="utf-8"))
        if payload["config"]["progress"] is not False:
            raise AssertionError("--no-progress not reflected in config")
        if [row["name"] for row in payload["results"]] != [
            "factory",
            "dtype=complex64",
        ]:
            raise AssertionError(f"unexpected JSON rows: {payload['results']}")


def test_disabled_logger_is_noop() -> None:
    if not isinstance(wandb_available(), bool):
        raise AssertionError("wandb_available should return bool")
    results = SetterBenchmark(iterations=5, length=2, progress=False).run()
    logger = WandBLogger(project="accessor-setter", enabled=False)
    logger.start_run(config={"iterations": 5})
    logger.log_metrics({"ns_per_op": 1.0}, prefix="factory")
    logger.log_results(results)
    logger.finish()
    if logger._run is not None:
        raise AssertionError("disabled logger should not start a run")


def main() -> None:
    test_load_config_formats()
    test_benchmark_config_validation()
    test_benchmark_run()
    test_cli_writes_outputs()
    test_disabled_logger_is_noop()
    print("OK: benchmark smoke test passed")


if __name__ == "__main__":
    main()
