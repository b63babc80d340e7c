# metamesh/generators/teapot_patches.py
"""
Utah teapot control points: 32 bicubic patches of 16 points each.

Each patch is four consecutive curves of four points. Data from
http://www.holmes3d.net/graphics/teapot/
"""

from typing import Tuple

Point = Tuple[float, float, float]

TEAPOT_PATCHES: Tuple[Point, ...] = (
    # patch 0
    (1.4, 2.4, 0.0),
    (1.4, 2.4, -0.784),
    (0.784, 2.4, -1.4),
    (0.0, 2.4, -1.4),
    (1.3375, 2.53125, 0.0),
    (1.3375, 2.53125, -0.749),
    (0.749, 2.53125, -1.3375),
    (0.0, 2.53125, -1.3375),
    (1.4375, 2.53125, 0.0),
    (1.4375, 2.53125, -0.805),
    (0.805, 2.53125, -1.4375),
    (0.0, 2.53125, -1.4375),
    (1.5, 2.4, 0.0),
    (1.5, 2.4, -0.84),
    (0.84, 2.4, -1.5),
    (0.0, 2.4, -1.5),
    # patch 1
    (0.0, 2.4, -1.4),
    (-0.784, 2.4, -1.4),
    (-1.4, 2.4, -0.784),
    (-1.4, 2.4, 0.0),
    (0.0, 2.53125, -1.3375),
    (-0.749, 2.53125, -1.3375),
    (-1.3375, 2.53125, -0.749),
    (-1.3375, 2.53125, 0.0),
    (0.0, 2.53125, -1.4375),
    (-0.805, 2.53125, -1.4375),
    (-1.4375, 2.53125, -0.805),
    (-1.4375, 2.53125, 0.0),
    (0.0, 2.4, -1.5),
    (-0.84, 2.4, -1.5),
    (-1.5, 2.4, -0.84),
    (-1.5, 2.4, 0.0),
    # patch 2
    (-1.4, 2.4, 0.0),
    (-1.4, 2.4, 0.784),
    (-0.784, 2.4, 1.4),
    (0.0, 2.4, 1.4),
    (-1.3375, 2.53125, 0.0),
    (-1.3375, 2.53125, 0.749),
    (-0.749, 2.53125, 1.3375),
    (0.0, 2.53125, 1.3375),
    (-1.4375, 2.53125, 0.0),
    (-1.4375, 2.53125, 0.805),
    (-0.805, 2.53125, 1.4375),
    (0.0, 2.53125, 1.4375),
    (-1.5, 2.4, 0.0),
    (-1.5, 2.4, 0.84),
    (-0.84, 2.4, 1.5),
    (0.0, 2.4, 1.5),
    # patch 3
    (0.0, 2.4, 1.4),
    (0.784, 2.4, 1.4),
    (1.4, 2.4, 0.784),
    (1.4, 2.4, 0.0),
    (0.0, 2.53125, 1.3375),
    (0.749, 2.53125, 1.3375),
    (1.3375, 2.53125, 0.749),
    (1.3375, 2.53125, 0.0),
    (0.0, 2.53125, 1.4375),
    (0.805, 2.53125, 1.4375),
    (1.4375, 2.53125, 0.805),
    (1.4375, 2.53125, 0.0),
    (0.0, 2.4, 1.5),
    (0.84, 2.4, 1.5),
    (1.5, 2.4, 0.84),
    (1.5, 2.4, 0.0),
    # patch 4
    (1.5, 2.4, 0.0),
    (1.5, 2.4, -0.84),
    (0.84, 2.4, -1.5),
    (0.0, 2.4, -1.5),
    (1.75, 1.875, 0.0),
    (1.75, 1.875, -0.98),
    (0.98, 1.875, -1.75),
    (0.0, 1.875, -1.75),
    (2.0, 1.35, 0.0),
    (2.0, 1.35, -1.12),
    (1.12, 1.35, -2.0),
    (0.0, 1.35, -2.0),
    (2.0, 0.9, 0.0),
    (2.0, 0.9, -1.12),
    (1.12, 0.9, -2.0),
    (0.0, 0.9, -2.0),
    # patch 5
    (0.0, 2.4, -1.5),
    (-0.84, 2.4, -1.5),
    (-1.5, 2.4, -0.84),
    (-1.5, 2.4, 0.0),
    (0.0, 1.875, -1.75),
    (-0.98, 1.875, -1.75),
    (-1.75, 1.875, -0.98),
    (-1.75, 1.875, 0.0),
    (0.0, 1.35, -2.0),
    (-1.12, 1.35, -2.0),
    (-2.0, 1.35, -1.12),
    (-2.0, 1.35, 0.0),
    (0.0, 0.9, -2.0),
    (-1.12, 0.9, -2.0),
    (-2.0, 0.9, -1.12),
    (-2.0, 0.9, 0.0),
    # patch 6
    (-1.5, 2.4, 0.0),
    (-1.5, 2.4, 0.84),
    (-0.84, 2.4, 1.5),
    (0.0, 2.4, 1.5),
    (-1.75, 1.875, 0.0),
    (-1.75, 1.875, 0.98),
    (-0.98, 1.875, 1.75),
    (0.0, 1.875, 1.75),
    (-2.0, 1.35, 0.0),
    (-2.0, 1.35, 1.12),
    (-1.12, 1.35, 2.0),
    (0.0, 1.35, 2.0),
    (-2.0, 0.9, 0.0),
    (-2.0, 0.9, 1.12),
    (-1.12, 0.9, 2.0),
    (0.0, 0.9, 2.0),
    # patch 7
    (0.0, 2.4, 1.5),
    (0.84, 2.4, 1.5),
    (1.5, 2.4, 0.84),
    (1.5, 2.4, 0.0),
    (0.0, 1.875, 1.75),
    (0.98, 1.875, 1.75),
    (1.75, 1.875, 0.98),
    (1.75, 1.875, 0.0),
    (0.0, 1.35, 2.0),
    (1.12, 1.35, 2.0),
    (2.0, 1.35, 1.12),
    (2.0, 1.35, 0.0),
    (0.0, 0.9, 2.0),
    (1.12, 0.9, 2.0),
    (2.0, 0.9, 1.12),
    (2.0, 0.9, 0.0),
    # patch 8
    (2.0, 0.9, 0.0),
    (2.0, 0.9, -1.12),
    (1.12, 0.9, -2.0),
    (0.0, 0.9, -2.0),
    (2.0, 0.45, 0.0),
    (2.0, 0.45, -1.12),
    (1.12, 0.45, -2.0),
    (0.0, 0.45, -2.0),
    (1.5, 0.225, 0.0),
    (1.5, 0.225, -0.84),
    (0.84, 0.225, -1.5),
    (0.0, 0.225, -1.5),
    (1.5, 0.15, 0.0),
    (1.5, 0.15, -0.84),
    (0.84, 0.15, -1.5),
    (0.0, 0.15, -1.5),
    # patch 9
    (0.0, 0.9, -2.0),
    (-1.12, 0.9, -2.0),
    (-2.0, 0.9, -1.12),
    (-2.0, 0.9, 0.0),
    (0.0, 0.45, -2.0),
    (-1.12, 0.45, -2.0),
    (-2.0, 0.45, -1.12),
    (-2.0, 0.45, 0.0),
    (0.0, 0.225, -1.5),
    (-0.84, 0.225, -1.5),
    (-1.5, 0.225, -0.84),
    (-1.5, 0.225, 0.0),
    (0.0, 0.15, -1.5),
    (-0.84, 0.15, -1.5),
    (-1.5, 0.15, -0.84),
    (-1.5, 0.15, 0.0),
    # patch 10
    (-2.0, 0.9, 0.0),
    (-2.0, 0.9, 1.12),
    (-1.12, 0.9, 2.0),
    (0.0, 0.9, 2.0),
    (-2.0, 0.45, 0.0),
    (-2.0, 0.45, 1.12),
    (-1.12, 0.45, 2.0),
    (0.0, 0.45, 2.0),
    (-1.5, 0.225, 0.0),
    (-1.5, 0.225, 0.84),
    (-0.84, 0.225, 1.5),
    (0.0, 0.225, 1.5),
    (-1.5, 0.15, 0.0),
    (-1.5, 0.15, 0.84),
    (-0.84, 0.15, 1.5),
    (0.0, 0.15, 1.5),
    # patch 11
    (0.0, 0.9, 2.0),
    (1.12, 0.9, 2.0),
    (2.0, 0.9, 1.12),
    (2.0, 0.9, 0.0),
    (0.0, 0.45, 2.0),
    (1.12, 0.45, 2.0),
    (2.0, 0.45, 1.12),
    (2.0, 0.45, 0.0),
    (0.0, 0.225, 1.5),
    (0.84, 0.225, 1.5),
    (1.5, 0.225, 0.84),
    (1.5, 0.225, 0.0),
    (0.0, 0.15, 1.5),
    (0.84, 0.15, 1.5),
    (1.5, 0.15, 0.84),
    (1.5, 0.15, 0.0),
    # patch 12
    (-1.6, 2.025, 0.0),
    (-1.6, 2.025, -0.3),
    (-1.5, 2.25, -0.3),
    (-1.5, 2.25, 0.0),
    (-2.3, 2.025, 0.0),
    (-2.3, 2.025, -0.3),
    (-2.5, 2.25, -0.3),
    (-2.5, 2.25, 0.0),
    (-2.7, 2.025, 0.0),
    (-2.7, 2.025, -0.3),
    (-3.0, 2.25, -0.3),
    (-3.0, 2.25, 0.0),
    (-2.7, 1.8, 0.0),
    (-2.7, 1.8, -0.3),
    (-3.0, 1.8, -0.3),
    (-3.0, 1.8, 0.0),
    # patch 13
    (-1.5, 2.25, 0.0),
    (-1.5, 2.25, 0.3),
    (-1.6, 2.025, 0.3),
    (-1.6, 2.025, 0.0),
    (-2.5, 2.25, 0.0),
    (-2.5, 2.25, 0.3),
    (-2.3, 2.025, 0.3),
    (-2.3, 2.025, 0.0),
    (-3.0, 2.25, 0.0),
    (-3.0, 2.25, 0.3),
    (-2.7, 2.025, 0.3),
    (-2.7, 2.025, 0.0),
    (-3.0, 1.8, 0.0),
    (-3.0, 1.8, 0.3),
    (-2.7, 1.8, 0.3),
    (-2.7, 1.8, 0.0),
    # patch 14
    (-2.7, 1.8, 0.0),
    (-2.7, 1.8, -0.3),
    (-3.0, 1.8, -0.3),
    (-3.0, 1.8, 0.0),
    (-2.7, 1.575, 0.0),
    (-2.7, 1.575, -0.3),
    (-3.0, 1.35, -0.3),
    (-3.0, 1.35, 0.0),
    (-2.5, 1.125, 0.0),
    (-2.5, 1.125, -0.3),
    (-2.65, 0.9375, -0.3),
    (-2.65, 0.9375, 0.0),
    (-2.0, 0.9, 0.0),
    (-2.0, 0.9, -0.3),
    (-1.9, 0.6, -0.3),
    (-1.9, 0.6, 0.0),
    # patch 15
    (-3.0, 1.8, 0.0),
    (-3.0, 1.8, 0.3),
    (-2.7, 1.8, 0.3),
    (-2.7, 1.8, 0.0),
    (-3.0, 1.35, 0.0),
    (-3.0, 1.35, 0.3),
    (-2.7, 1.575, 0.3),
    (-2.7, 1.575, 0.0),
    (-2.65, 0.9375, 0.0),
    (-2.65, 0.9375, 0.3),
    (-2.5, 1.125, 0.3),
    (-2.5, 1.125, 0.0),
    (-1.9, 0.6, 0.0),
    (-1.9, 0.6, 0.3),
    (-2.0, 0.9, 0.3),
    (-2.0, 0.9, 0.0),
    # patch 16
    (1.7, 1.425, 0.0),
    (1.7, 1.425, -0.66),
    (1.7, 0.6, -0.66),
    (1.7, 0.6, 0.0),
    (2.6, 1.425, 0.0),
    (2.6, 1.425, -0.66),
    (3.1, 0.825, -0.66),
    (3.1, 0.825, 0.0),
    (2.3, 2.1, 0.0),
    (2.3, 2.1, -0.25),
    (2.4, 2.025, -0.25),
    (2.4, 2.025, 0.0),
    (2.7, 2.4, 0.0),
    (2.7, 2.4, -0.25),
    (3.3, 2.4, -0.25),
    (3.3, 2.4, 0.0),
    # patch 17
    (1.7, 0.6, 0.0),
    (1.7, 0.6, 0.66),
    (1.7, 1.425, 0.66),
    (1.7, 1.425, 0.0),
    (3.1, 0.825, 0.0),
    (3.1, 0.825, 0.66),
    (2.6, 1.425, 0.66),
    (2.6, 1.425, 0.0),
    (2.4, 2.025, 0.0),
    (2.4, 2.025, 0.25),
    (2.3, 2.1, 0.25),
    (2.3, 2.1, 0.0),
    (3.3, 2.4, 0.0),
    (3.3, 2.4, 0.25),
    (2.7, 2.4, 0.25),
    (2.7, 2.4, 0.0),
    # patch 18
    (2.7, 2.4, 0.0),
    (2.7, 2.4, -0.25),
    (3.3, 2.4, -0.25),
    (3.3, 2.4, 0.0),
    (2.8, 2.475, 0.0),
    (2.8, 2.475, -0.25),
    (3.525, 2.49375, -0.25),
    (3.525, 2.49375, 0.0),
    (2.9, 2.475, 0.0),
    (2.9, 2.475, -0.15),
    (3.45, 2.5125, -0.15),
    (3.45, 2.5125, 0.0),
    (2.8, 2.4, 0.0),
    (2.8, 2.4, -0.15),
    (3.2, 2.4, -0.15),
    (3.2, 2.4, 0.0),
    # patch 19
    (3.3, 2.4, 0.0),
    (3.3, 2.4, 0.25),
    (2.7, 2.4, 0.25),
    (2.7, 2.4, 0.0),
    (3.525, 2.49375, 0.0),
    (3.525, 2.49375, 0.25),
    (2.8, 2.475, 0.25),
    (2.8, 2.475, 0.0),
    (3.45, 2.5125, 0.0),
    (3.45, 2.5125, 0.15),
    (2.9, 2.475, 0.15),
    (2.9, 2.475, 0.0),
    (3.2, 2.4, 0.0),
    (3.2, 2.4, 0.15),
    (2.8, 2.4, 0.15),
    (2.8, 2.4, 0.0),
    # patch 20
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.8, 3.15, 0.0),
    (0.8, 3.15, -0.45),
    (0.45, 3.15, -0.8),
    (0.0, 3.15, -0.8),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.2, 2.7, 0.0),
    (0.2, 2.7, -0.112),
    (0.112, 2.7, -0.2),
    (0.0, 2.7, -0.2),
    # patch 21
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.0, 3.15, -0.8),
    (-0.45, 3.15, -0.8),
    (-0.8, 3.15, -0.45),
    (-0.8, 3.15, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.7, -0.2),
    (-0.112, 2.7, -0.2),
    (-0.2, 2.7, -0.112),
    (-0.2, 2.7, 0.0),
    # patch 22
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (-0.8, 3.15, 0.0),
    (-0.8, 3.15, 0.45),
    (-0.45, 3.15, 0.8),
    (0.0, 3.15, 0.8),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (-0.2, 2.7, 0.0),
    (-0.2, 2.7, 0.112),
    (-0.112, 2.7, 0.2),
    (0.0, 2.7, 0.2),
    # patch 23
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.0),
    (0.0, 3.15, 0.8),
    (0.45, 3.15, 0.8),
    (0.8, 3.15, 0.45),
    (0.8, 3.15, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.85, 0.0),
    (0.0, 2.7, 0.2),
    (0.112, 2.7, 0.2),
    (0.2, 2.7, 0.112),
    (0.2, 2.7, 0.0),
    # patch 24
    (0.2, 2.7, 0.0),
    (0.2, 2.7, -0.112),
    (0.112, 2.7, -0.2),
    (0.0, 2.7, -0.2),
    (0.4, 2.55, 0.0),
    (0.4, 2.55, -0.224),
    (0.224, 2.55, -0.4),
    (0.0, 2.55, -0.4),
    (1.3, 2.55, 0.0),
    (1.3, 2.55, -0.728),
    (0.728, 2.55, -1.3),
    (0.0, 2.55, -1.3),
    (1.3, 2.4, 0.0),
    (1.3, 2.4, -0.728),
    (0.728, 2.4, -1.3),
    (0.0, 2.4, -1.3),
    # patch 25
    (0.0, 2.7, -0.2),
    (-0.112, 2.7, -0.2),
    (-0.2, 2.7, -0.112),
    (-0.2, 2.7, 0.0),
    (0.0, 2.55, -0.4),
    (-0.224, 2.55, -0.4),
    (-0.4, 2.55, -0.224),
    (-0.4, 2.55, 0.0),
    (0.0, 2.55, -1.3),
    (-0.728, 2.55, -1.3),
    (-1.3, 2.55, -0.728),
    (-1.3, 2.55, 0.0),
    (0.0, 2.4, -1.3),
    (-0.728, 2.4, -1.3),
    (-1.3, 2.4, -0.728),
    (-1.3, 2.4, 0.0),
    # patch 26
    (-0.2, 2.7, 0.0),
    (-0.2, 2.7, 0.112),
    (-0.112, 2.7, 0.2),
    (0.0, 2.7, 0.2),
    (-0.4, 2.55, 0.0),
    (-0.4, 2.55, 0.224),
    (-0.224, 2.55, 0.4),
    (0.0, 2.55, 0.4),
    (-1.3, 2.55, 0.0),
    (-1.3, 2.55, 0.728),
    (-0.728, 2.55, 1.3),
    (0.0, 2.55, 1.3),
    (-1.3, 2.4, 0.0),
    (-1.3, 2.4, 0.728),
    (-0.728, 2.4, 1.3),
    (0.0, 2.4, 1.3),
    # patch 27
    (0.0, 2.7, 0.2),
    (0.112, 2.7, 0.2),
    (0.2, 2.7, 0.112),
    (0.2, 2.7, 0.0),
    (0.0, 2.55, 0.4),
    (0.224, 2.55, 0.4),
    (0.4, 2.55, 0.224),
    (0.4, 2.55, 0.0),
    (0.0, 2.55, 1.3),
    (0.728, 2.55, 1.3),
    (1.3, 2.55, 0.728),
    (1.3, 2.55, 0.0),
    (0.0, 2.4, 1.3),
    (0.728, 2.4, 1.3),
    (1.3, 2.4, 0.728),
    (1.3, 2.4, 0.0),
    # patch 28
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (1.425, 0.0, 0.0),
    (1.425, 0.0, 0.798),
    (0.798, 0.0, 1.425),
    (0.0, 0.0, 1.425),
    (1.5, 0.075, 0.0),
    (1.5, 0.075, 0.84),
    (0.84, 0.075, 1.5),
    (0.0, 0.075, 1.5),
    (1.5, 0.15, 0.0),
    (1.5, 0.15, 0.84),
    (0.84, 0.15, 1.5),
    (0.0, 0.15, 1.5),
    # patch 29
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 1.425),
    (-0.798, 0.0, 1.425),
    (-1.425, 0.0, 0.798),
    (-1.425, 0.0, 0.0),
    (0.0, 0.075, 1.5),
    (-0.84, 0.075, 1.5),
    (-1.5, 0.075, 0.84),
    (-1.5, 0.075, 0.0),
    (0.0, 0.15, 1.5),
    (-0.84, 0.15, 1.5),
    (-1.5, 0.15, 0.84),
    (-1.5, 0.15, 0.0),
    # patch 30
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (-1.425, 0.0, 0.0),
    (-1.425, 0.0, -0.798),
    (-0.798, 0.0, -1.425),
    (0.0, 0.0, -1.425),
    (-1.5, 0.075, 0.0),
    (-1.5, 0.075, -0.84),
    (-0.84, 0.075, -1.5),
    (0.0, 0.075, -1.5),
    (-1.5, 0.15, 0.0),
    (-1.5, 0.15, -0.84),
    (-0.84, 0.15, -1.5),
    (0.0, 0.15, -1.5),
    # patch 31
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, -1.425),
    (0.798, 0.0, -1.425),
    (1.425, 0.0, -0.798),
    (1.425, 0.0, 0.0),
    (0.0, 0.075, -1.5),
    (0.84, 0.075, -1.5),
    (1.5, 0.075, -0.84),
    (1.5, 0.075, 0.0),
    (0.0, 0.15, -1.5),
    (0.84, 0.15, -1.5),
    (1.5, 0.15, -0.84),
    (1.5, 0.15, 0.0),
)
