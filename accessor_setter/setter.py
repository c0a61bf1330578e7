"""型タグに応じた要素セッタ（setter）を返すファクトリ。

目的:
    配列アルゴリズムが要素を書き込むたびに型で分岐しなくて済むよう、
    分岐は setter(dtype) の呼び出し時に 1 回だけ行い、以後は返された関数を
    ループ内で使い回す。

    >>> set_ = setter(dtype(arr))
    >>> for i, v in enumerate(values):
    ...     set_(arr, i, v)

分岐:
    - "complex128" -> set_complex128
    - "complex64"  -> set_complex64
    - それ以外     -> set_generic（未知のタグもエラーにしない）

注意:
    どのセッタも範囲チェック・型変換は行わない。
    書き込み先（arr）側の例外はそのまま呼び出し元へ伝播する。
"""

from __future__ import annotations

from typing import Any, Dict

from .types import AccessorArrayLike, ArrayLike, ComplexLike, DType, SetterFn


def set_complex128(arr: AccessorArrayLike, idx: int, value: ComplexLike) -> None:
    """倍精度複素数配列の要素 idx に value を書き込む。

    arr はアクセサ配列（Complex128Array など）を前提とし、複素数値を丸ごと
    arr.set に渡す。実部/虚部への分解（2*idx, 2*idx+1）は配列側が行う。
    """

    arr.set(value, idx)


def set_complex64(arr: AccessorArrayLike, idx: int, value: ComplexLike) -> None:
    """単精度複素数配列の要素 idx に value を書き込む。

    成分の float32 への丸めは配列側（Complex64Array）で行われる。
    """

    arr.set(value, idx)


def set_generic(arr: ArrayLike, idx: int, value: Any) -> None:
    """任意の配列の要素 idx に value を書き込む。

    arr の形は事前に分からないため、呼び出しごとに判定する:
        - set アクセサを持つ: arr.set(value, idx)
        - それ以外: arr[idx] = value
    """

    accessor = getattr(arr, "set", None)
    if callable(accessor):
        accessor(value, idx)
    else:
        arr[idx] = value


# 型タグ -> セッタ。ここに無いタグは set_generic にフォールバックする。
SETTERS: Dict[DType, SetterFn] = {
    "complex128": set_complex128,
    "complex64": set_complex64,
}


def setter(dtype: Any) -> SetterFn:
    """型タグに対応するセッタを返す。

    Args:
        dtype: 型タグ。文字列以外（None やハッシュ不能な値）も受け付け、
            未知のタグとして扱う。

    Returns:
        (arr, idx, value) -> None の関数。同じタグには常に同じ関数を返す。
    """

    try:
        return SETTERS.get(dtype, set_generic)
    except TypeError:
        # list などハッシュ不能なタグ。
        return set_generic
