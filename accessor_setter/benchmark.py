"""セッタのベンチマーク。

計測対象:
    - factory: setter(dtype) の呼び出し（型タグを巡回させる）
    - 型タグごと: setter で得た関数による書き込み + get による読み戻しのループ

結果は 1 行 1 計測の pandas.DataFrame として返す。
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd
from tqdm.auto import tqdm

from .arrays import AccessorArray, Complex64Array, Complex128Array
from .complex import complex64, complex128, imag, imagf, real, realf
from .dtypes import GENERIC, dtype
from .setter import setter

DEFAULT_DTYPES = ("complex128", "complex64", GENERIC)

# factory 計測で巡回させるタグ。"foo" は未知タグ（generic へのフォールバック）。
FACTORY_DTYPES = ("complex128", "complex64", "foo")

# 書き込み元のバッファは [0, 127] の一様整数で埋める。
_RAND_HIGH = 128


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class SetterBenchmark:
    """setter の計測ハーネス。

    config の想定（すべて任意）:
        - "iterations": 各計測の反復回数（正の整数）
        - "length": 書き込み先配列の要素数（正の整数）
        - "dtypes": 計測する型タグのリスト
        - "seed": 乱数シード
        - "progress": tqdm の進捗バーを表示するか
    """

    def __init__(
        self,
        iterations: int = 100_000,
        length: int = 100,
        dtypes: Sequence[str] = DEFAULT_DTYPES,
        seed: Optional[int] = 0,
        progress: bool = True,
    ) -> None:
        if not _is_int(iterations) or not _is_int(length):
            raise ValueError("iterations と length は整数である必要があります。")
        # 文字列は 1 文字ずつのタグに分解されてしまうため、list/tuple に限る。
        if not isinstance(dtypes, (list, tuple)) or not all(
            isinstance(tag, str) for tag in dtypes
        ):
            raise ValueError("dtypes は型タグ（文字列）の list である必要があります。")
        self.iterations = int(iterations)
        self.length = int(length)
        self.dtypes = tuple(dtypes)
        self.seed = seed
        self.progress = bool(progress)
        if self.iterations <= 0:
            raise ValueError("iterations は正の整数である必要があります。")
        if self.length <= 0:
            raise ValueError("length は正の整数である必要があります。")
        if not self.dtypes:
            raise ValueError("dtypes に 1 つ以上の型タグを指定してください。")

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "SetterBenchmark":
        """設定辞書からハーネスを構築する。

        Raises:
            ValueError: 未知のキーが含まれる場合。
        """

        allowed = {"iterations", "length", "dtypes", "seed", "progress"}
        unknown = sorted(set(config) - allowed)
        if unknown:
            raise ValueError(f"未知の設定キーがあります: {unknown}")
        return cls(**dict(config))

    def run(self) -> pd.DataFrame:
        """factory と各型タグの計測を行い、結果をまとめて返す。"""

        rows = [self.run_factory()]
        for tag in self.dtypes:
            rows.append(self.run_dtype(tag))
        return pd.DataFrame(rows)

    def run_factory(self) -> Dict[str, Any]:
        """setter(dtype) の呼び出しコストを計測する。"""

        tags = FACTORY_DTYPES
        n_tags = len(tags)
        fn: Optional[Callable[..., None]] = None

        start = time.perf_counter()
        for i in self._iter("factory"):
            fn = setter(tags[i % n_tags])
        elapsed = time.perf_counter() - start

        if not callable(fn):
            raise RuntimeError("setter が関数を返しませんでした。")
        return self._row("factory", "-", elapsed)

    def run_dtype(self, tag: str) -> Dict[str, Any]:
        """型タグ tag の配列に対して書き込み・読み戻しのループを計測する。

        Raises:
            RuntimeError: 最後に読み戻した値が NaN を含む場合。
        """

        rng = np.random.default_rng(self.seed)
        arr = self._make_array(tag, rng)
        values = self._make_values(tag)
        set_ = setter(dtype(arr))
        n = len(arr)
        n_values = len(values)
        get = arr.get if hasattr(arr, "get") else arr.__getitem__

        v: Any = None
        start = time.perf_counter()
        for i in self._iter(f"dtype={tag}"):
            j = i % n
            set_(arr, j, values[i % n_values])
            v = get(j)
        elapsed = time.perf_counter() - start

        if self._has_nan(tag, v):
            raise RuntimeError(f"dtype={tag}: 読み戻した値が NaN です: {v!r}")
        return self._row(f"dtype={tag}", tag, elapsed)

    def _iter(self, desc: str):
        return tqdm(
            range(self.iterations),
            desc=desc,
            disable=not self.progress,
            leave=False,
        )

    def _row(self, name: str, tag: str, elapsed: float) -> Dict[str, Any]:
        ops = self.iterations / elapsed if elapsed > 0 else math.inf
        return {
            "name": name,
            "dtype": tag,
            "iterations": self.iterations,
            "elapsed_sec": elapsed,
            "ops_per_sec": ops,
            "ns_per_op": 1e9 * elapsed / self.iterations,
        }

    def _make_array(self, tag: str, rng: np.random.Generator) -> Any:
        if tag == "complex128":
            buf = rng.integers(0, _RAND_HIGH, size=2 * self.length).astype(np.float64)
            return Complex128Array(buf)
        if tag == "complex64":
            buf = rng.integers(0, _RAND_HIGH, size=2 * self.length).astype(np.float32)
            return Complex64Array(buf)
        if tag == GENERIC:
            return AccessorArray(rng.integers(0, _RAND_HIGH, size=self.length).tolist())
        try:
            np_dtype = np.dtype(tag)
        except TypeError as exc:
            raise ValueError(f"計測できない型タグです: {tag!r}") from exc
        return rng.integers(0, _RAND_HIGH, size=self.length).astype(np_dtype)

    def _make_values(self, tag: str) -> List[Any]:
        if tag == "complex128":
            return [complex128(1.0, 2.0), complex128(3.0, 4.0), complex128(5.0, 6.0)]
        if tag == "complex64":
            return [complex64(1.0, 2.0), complex64(3.0, 4.0), complex64(5.0, 6.0)]
        return [1, 2, 3]

    @staticmethod
    def _has_nan(tag: str, v: Any) -> bool:
        if tag == "complex128":
            return math.isnan(real(v)) or math.isnan(imag(v))
        if tag == "complex64":
            return bool(np.isnan(realf(v)) or np.isnan(imagf(v)))
        try:
            return bool(np.isnan(v))
        except TypeError:
            return False
