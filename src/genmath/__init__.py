"""
genmath — generic numeric primitives.

Type-parameterized math over integer and floating representations of
varying width: sign-aware modulo, whole/remainder decomposition, numerical
derivative/integral approximation, range algebra and exact-bit NaN/Inf
construction. Stateless and free of I/O.

The library logs at DEBUG only and installs a NullHandler; configure the
"src.genmath" logger in the application to see its output.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
