"""Wavelet rasterization and scanline landscape fire growth."""

from firetrace.spread.behavior import FireBehaviorProvider
from firetrace.spread.ignition import IgnitionTemplate
from firetrace.spread.landscape import Landscape, ScanlineArray
from firetrace.spread.wavelet import FireWavelet, rasterize_wavelet

__all__ = [
    "FireBehaviorProvider",
    "FireWavelet",
    "IgnitionTemplate",
    "Landscape",
    "ScanlineArray",
    "rasterize_wavelet",
]
