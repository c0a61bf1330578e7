"""WandB ロギング用のユーティリティ。

方針:
    - WandB は任意依存。未インストールでもベンチマーク自体は動作させる。
    - ロギングはベンチマーク本体から分離し、外側（main 等）で利用する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional


def _import_wandb():
    try:
        import importlib

        return importlib.import_module("wandb")
    except Exception as exc:  # noqa: BLE001 - 任意依存のため広めに捕捉
        raise RuntimeError(
            "wandb がインストールされていません。"
            " `pip install wandb` を実行するか、ロギングを無効化してください。"
        ) from exc


def wandb_available() -> bool:
    """wandb が利用可能かを返す。"""

    try:
        _import_wandb()
        return True
    except RuntimeError:
        return False


@dataclass
class WandBLogger:
    """ベンチマーク結果を WandB へ送るクラス。"""

    project: str
    entity: Optional[str] = None
    name: Optional[str] = None
    tags: Optional[Iterable[str]] = None
    enabled: bool = True
    _run: Any = field(default=None, init=False, repr=False)

    def start_run(self, config: Optional[Dict[str, Any]] = None) -> None:
        if not self.enabled:
            return
        wandb = _import_wandb()
        self._run = wandb.init(
            project=self.project,
            entity=self.entity,
            name=self.name,
            tags=list(self.tags) if self.tags else None,
            config=config,
        )

    def log_metrics(
        self,
        metrics: Dict[str, Any],
        step: Optional[int] = None,
        prefix: Optional[str] = None,
    ) -> None:
        """指標 dict を記録する。prefix があればキーを "prefix/key" にする。"""

        if not self.enabled:
            return
        wandb = _import_wandb()
        if prefix:
            payload = {f"{prefix}/{key}": value for key, value in metrics.items()}
        else:
            payload = dict(metrics)
        wandb.log(payload, step=step)

    def log_results(self, results: Any, key: str = "benchmark") -> None:
        """ベンチマーク結果（pandas.DataFrame）を表と行ごとの指標として記録する。

        各行は name をプレフィクスにした指標（例: "complex64/ops_per_sec"）として送る。
        """

        if not self.enabled:
            return
        wandb = _import_wandb()
        wandb.log({key: wandb.Table(dataframe=results)})
        for step, row in enumerate(results.to_dict(orient="records")):
            name = row.get("name", str(step))
            metrics = {k: v for k, v in row.items() if k != "name"}
            self.log_metrics(metrics, step=step, prefix=name)

    def finish(self) -> None:
        if not self.enabled:
            return
        wandb = _import_wandb()
        wandb.finish()
        self._run = None
