# Import kernels
from .reference import *

# Torch kernels are optional; without torch only the numpy backend is registered
try:
    from .cpu_torch import *
except ImportError:
    pass
