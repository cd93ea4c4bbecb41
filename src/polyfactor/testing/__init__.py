"""Testing helpers for polyfactor.

The ``strategies`` module requires the ``test`` extra (hypothesis).
"""

from ._assertions import assert_roots_close, sort_roots

__all__ = ["assert_roots_close", "sort_roots"]
