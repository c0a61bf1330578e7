"""accessor_setter パッケージ。

型タグから要素セッタを返すファクトリと、その書き込み先となるアクセサ配列を
再エクスポートする。基本的には次の形で使う。

    from accessor_setter import setter, dtype
    set_ = setter(dtype(arr))
    set_(arr, i, value)
"""

from .arrays import AccessorArray, Complex64Array, Complex128Array
from .complex import complex64, complex128, imag, imagf, real, realf
from .dtypes import dtype
from .setter import set_complex64, set_complex128, set_generic, setter

__all__ = [
    "setter",
    "set_complex128",
    "set_complex64",
    "set_generic",
    "dtype",
    "Complex128Array",
    "Complex64Array",
    "AccessorArray",
    "complex128",
    "complex64",
    "real",
    "imag",
    "realf",
    "imagf",
]
