# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color math for Swatchkit.

Mixing and opacity scaling; the only ways one color is derived from others.
"""

from swatchkit.measure.mixing import mix, opacity

__all__ = ["mix", "opacity"]
