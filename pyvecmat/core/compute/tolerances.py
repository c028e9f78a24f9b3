"""
Tolerance tiers for comparing engine results.

The adapter layer adds no rounding of its own, so the tolerance that
applies to a result is purely a property of the engine that produced it:
- NumPy/SciPy FP64: LAPACK double precision
- torch FP64: same as NumPy
- torch FP32: relaxed for single-precision arithmetic (GPU default)

Used by the test suite and by callers comparing results across engines.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='NumPy/SciPy double precision',
)

GPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='gpu_fp64',
    description='torch double precision, matches the NumPy engine',
)

GPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='gpu_fp32',
    description='torch single precision',
)

# Apple Silicon has no float64 support
MPS_FP32 = GPU_FP32


def select_tolerance(engine_name: str) -> ToleranceTier:
    """
    Select the tolerance tier for an engine.
    
    Args:
        engine_name: ``Engine.name``, e.g. 'cpu_numpy' or 'gpu_torch_fp32'
    """
    if 'torch' in engine_name or 'gpu' in engine_name:
        if 'fp64' in engine_name:
            return GPU_FP64
        return GPU_FP32
    return CPU_FP64
