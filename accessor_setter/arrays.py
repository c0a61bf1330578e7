"""アクセサプロトコル（get/set）を持つ配列の実装。

セッタの書き込み先となる配列オブジェクトを提供する。

    - Complex128Array / Complex64Array:
        複素数配列。内部は実数のフラットなバッファで、要素 i の実部を 2*i、
        虚部を 2*i+1 に交互（interleaved）に格納する。
    - AccessorArray:
        Python の list を包み、get/set アクセサを生やしたもの。
        範囲外の set は list を伸長し、範囲外の get は None を返す。

注意:
    いずれも範囲チェックは行わない（NumPy の添字規則にそのまま従う）。
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional

import numpy as np

from .types import ComplexLike


class _ComplexArray:
    """interleaved な実数バッファ上の複素数配列（基底クラス）。

    サブクラスは以下のクラス属性を定める:
        - dtype: 型タグ（"complex128" など）
        - _real_dtype: 実数バッファの NumPy dtype
        - _scalar: get が返す NumPy 複素スカラ型
    """

    dtype: str = ""
    _real_dtype: Any = None
    _scalar: Any = None

    def __init__(self, arg: Any = 0) -> None:
        self._buffer = self._to_buffer(arg)

    @property
    def buffer(self) -> np.ndarray:
        """実数バッファ（長さ 2*len）を返す。コピーではなく内部配列そのもの。"""

        return self._buffer

    @property
    def BYTES_PER_ELEMENT(self) -> int:
        return 2 * np.dtype(self._real_dtype).itemsize

    def get(self, idx: int) -> Any:
        """要素 idx を複素スカラとして返す。"""

        buf = self._buffer
        return self._scalar(complex(buf[2 * idx], buf[2 * idx + 1]))

    def set(self, value: ComplexLike, idx: int) -> None:
        """要素 idx に複素数値を書き込む。

        実部を 2*idx、虚部を 2*idx+1 に書く。NaN もそのまま書き込む。
        """

        re = value.real
        im = value.imag
        self._buffer[2 * idx] = re
        self._buffer[2 * idx + 1] = im

    def to_numpy(self) -> np.ndarray:
        """複素数の NumPy 配列（コピー）を返す。"""

        buf = self._buffer
        out = np.empty(buf.shape[0] // 2, dtype=self._scalar)
        out.real = buf[0::2]
        out.imag = buf[1::2]
        return out

    def __len__(self) -> int:
        return self._buffer.shape[0] // 2

    def __iter__(self) -> Iterator[Any]:
        for i in range(len(self)):
            yield self.get(i)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_numpy().tolist()!r})"

    def _to_buffer(self, arg: Any) -> np.ndarray:
        real_dtype = np.dtype(self._real_dtype)

        # 長さ指定: ゼロ埋めの配列を確保する。
        if isinstance(arg, (int, np.integer)) and not isinstance(arg, bool):
            n = int(arg)
            if n < 0:
                raise ValueError(f"長さは 0 以上である必要があります: {n}")
            return np.zeros(2 * n, dtype=real_dtype)

        # 同じ精度の実数 ndarray: コピーせずビューとして共有する。
        if isinstance(arg, np.ndarray) and arg.dtype == real_dtype:
            if arg.ndim != 1:
                raise ValueError("実数バッファは 1 次元配列である必要があります")
            self._check_even(arg.shape[0])
            return arg

        # 生バイト列: 実数バッファとして解釈する（共有）。bytes は読み取り専用になる。
        if isinstance(arg, (bytes, bytearray, memoryview)):
            nbytes = len(memoryview(arg).cast("B"))
            if nbytes % real_dtype.itemsize != 0:
                raise ValueError("バイト長が実数型のサイズの倍数ではありません")
            buf = np.frombuffer(arg, dtype=real_dtype)
            self._check_even(buf.shape[0])
            return buf

        if isinstance(arg, _ComplexArray):
            return arg.buffer.astype(real_dtype)

        if isinstance(arg, str) or not isinstance(arg, Iterable):
            raise TypeError(
                f"{type(self).__name__} に渡せない引数です: {type(arg).__name__}"
            )

        values = list(arg)
        if any(isinstance(v, (complex, np.complexfloating)) for v in values):
            # 複素数を含む列: 実部/虚部を交互に並べる。
            buf = np.empty(2 * len(values), dtype=real_dtype)
            buf[0::2] = [v.real for v in values]
            buf[1::2] = [v.imag for v in values]
            return buf

        # 実数列: そのまま interleaved とみなしてコピーする。
        buf = np.asarray(values, dtype=real_dtype).reshape(-1)
        self._check_even(buf.shape[0])
        return buf

    @staticmethod
    def _check_even(n: int) -> None:
        if n % 2 != 0:
            raise ValueError(
                f"実数バッファの長さは偶数である必要があります（実部/虚部の組）: {n}"
            )


class Complex128Array(_ComplexArray):
    """倍精度の複素数配列（実数バッファは float64）。"""

    dtype = "complex128"
    _real_dtype = np.float64
    _scalar = np.complex128


class Complex64Array(_ComplexArray):
    """単精度の複素数配列（実数バッファは float32）。"""

    dtype = "complex64"
    _real_dtype = np.float32
    _scalar = np.complex64


class AccessorArray:
    """list に get/set アクセサを付けた汎用配列。

    get は範囲外（idx >= len または idx < -len）で None を返す。
    set は末尾より後ろへの書き込みで list を伸長し、-len 未満の負の添字は
    list と同様に IndexError となる。
    """

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._data: List[Any] = list(values) if values is not None else []

    def get(self, idx: int) -> Any:
        if idx >= len(self._data) or idx < -len(self._data):
            return None
        return self._data[idx]

    def set(self, value: Any, idx: int) -> None:
        # 範囲外への書き込みは list を伸長する（間は None で埋める）。
        if idx >= len(self._data):
            self._data.extend([None] * (idx + 1 - len(self._data)))
        self._data[idx] = value

    def to_list(self) -> List[Any]:
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"AccessorArray({self._data!r})"
