"""配列オブジェクトから型タグを求める。

`setter(dtype(arr))` の形で、配列に合ったセッタを得るためのヘルパ。
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .arrays import AccessorArray, Complex64Array, Complex128Array

GENERIC = "generic"


def dtype(arr: Any) -> Optional[str]:
    """配列の型タグを返す。判定できない場合は None。

    - Complex128Array / Complex64Array: "complex128" / "complex64"
    - numpy.ndarray: dtype 名（"float64", "int32" など）。複素 ndarray は "generic"
    - list / tuple / AccessorArray: "generic"
    """

    if isinstance(arr, (Complex128Array, Complex64Array)):
        return arr.dtype
    if isinstance(arr, np.ndarray):
        # 複素 ndarray は添字代入で複素数を直接受け付けるため、アクセサ前提の
        # complex セッタではなく generic に回す。
        if np.iscomplexobj(arr):
            return GENERIC
        return arr.dtype.name
    if isinstance(arr, (list, tuple, AccessorArray)):
        return GENERIC
    return None
