"""
Box geometry kernels.

All boxes use the (y1, x1, y2, x2) convention.
"""

from .overlaps import box_area, compute_iou, bbox_overlaps, bbox_overlaps_loops
from .deltas import box_refinement, apply_box_deltas, normalize_deltas, denormalize_deltas
from .clipping import Window, clip_boxes, clip_to_window

__all__ = [
    'box_area',
    'compute_iou',
    'bbox_overlaps',
    'bbox_overlaps_loops',
    'box_refinement',
    'apply_box_deltas',
    'normalize_deltas',
    'denormalize_deltas',
    'Window',
    'clip_boxes',
    'clip_to_window',
]
