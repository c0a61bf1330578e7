"""型定義。

セッタ（setter）が受け取る配列・値の「形」を Protocol として表す。
実行時の分岐には使わず（generic セッタの判定は hasattr ベース）、
静的解析と読み手への説明のために置いている。
"""

from __future__ import annotations

from typing import Any, Callable, Literal, Protocol

# ArrayLike:
# - 「配列のように扱える」書き込み先を表す暫定型。
# - list / numpy.ndarray / アクセサ配列のいずれも受け付けるため Any とする。
ArrayLike = Any

# DType:
# - セッタの専用実装が存在する型タグの閉じた集合。
# - これ以外の文字列は generic 扱い（エラーにはしない）。
DType = Literal["complex128", "complex64"]


class ComplexLike(Protocol):
    """実部と虚部を読み出せる複素数値。"""

    @property
    def real(self) -> Any: ...

    @property
    def imag(self) -> Any: ...


class AccessorArrayLike(Protocol):
    """get/set アクセサで要素を読み書きする配列。

    set の引数順は (value, index) であり、通常の添字代入とは逆になる点に注意。
    """

    def get(self, idx: int) -> Any: ...

    def set(self, value: Any, idx: int) -> None: ...


# SetterFn:
# - setter(dtype) が返す関数のシグネチャ (arr, idx, value) -> None。
SetterFn = Callable[[ArrayLike, int, Any], None]
