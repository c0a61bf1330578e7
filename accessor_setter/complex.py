"""複素数値の生成と成分の読み出し。

倍精度（complex128）と単精度（complex64）で別関数を用意する。
値そのものは NumPy のスカラ型（numpy.complex128 / numpy.complex64）で表現し、
成分は .real / .imag を持つ任意のオブジェクト（Python の complex 等）から読み出せる。
"""

from __future__ import annotations

import numpy as np

from .types import ComplexLike


def complex128(re: float, im: float) -> np.complex128:
    """倍精度の複素数値を生成する。"""

    return np.complex128(complex(float(re), float(im)))


def complex64(re: float, im: float) -> np.complex64:
    """単精度の複素数値を生成する。

    各成分は float32 に丸められる（例: 0.1 は 0.1 ちょうどにはならない）。
    """

    return np.complex64(complex(np.float32(re), np.float32(im)))


def real(z: ComplexLike) -> float:
    """倍精度の実部を返す。"""

    return float(z.real)


def imag(z: ComplexLike) -> float:
    """倍精度の虚部を返す。"""

    return float(z.imag)


def realf(z: ComplexLike) -> np.float32:
    """単精度の実部を返す。"""

    return np.float32(z.real)


def imagf(z: ComplexLike) -> np.float32:
    """単精度の虚部を返す。"""

    return np.float32(z.imag)
