"""設定ファイル（TOML/JSON）を読み込むユーティリティ。

目的:
    ベンチマーク条件（反復回数・配列長・対象の型タグなど）を設定ファイルに外部化し、
    辞書（dict）としてロードする。
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional


def load_config(path: Path, section: Optional[str] = None) -> Dict[str, Any]:
    """設定ファイルを読み込み、Python の辞書として返す。

    Args:
        path: 設定ファイルへのパス。拡張子（大文字小文字は区別しない）で形式を判定する。
        section: 指定した場合、そのキーのサブテーブル（例: [benchmark]）だけを返す。
            キーが無ければ空 dict を返す。

    Returns:
        設定内容を表す辞書。

    Raises:
        FileNotFoundError: 指定パスが存在しない場合。
        ValueError: 対応していない拡張子、または section が表（dict）でない場合。
        json.JSONDecodeError: JSON のパースに失敗した場合。
        tomllib.TOMLDecodeError: TOML のパースに失敗した場合。
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".toml":
        # tomllib.load はバイナリファイルオブジェクトを想定する。
        with path.open("rb") as handle:
            config = tomllib.load(handle)
    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as handle:
            config = json.load(handle)
    else:
        raise ValueError(f"Unsupported config format: {path.suffix}")

    if section is None:
        return config

    sub = config.get(section, {})
    if not isinstance(sub, dict):
        raise ValueError(f"Config section {section!r} must be a table: {path}")
    return sub
