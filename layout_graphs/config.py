DEBUG_EXECUTION = False
DEBUG_DETAILED = False

# Tolerances used by the kernel verifier when comparing a composite kernel
# against its atomic decomposition. Layout ops are integral, so exact match.
VERIFY_RTOL = 0.0
VERIFY_ATOL = 0.0
