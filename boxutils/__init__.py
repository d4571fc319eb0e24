"""
Box geometry for object detection: IoU matrices, regression deltas and clipping.

Boxes are [N, 4] tensors in (y1, x1, y2, x2) order.
"""

from .errors import BoxShapeError
from .ops import (
    box_area,
    compute_iou,
    bbox_overlaps,
    bbox_overlaps_loops,
    box_refinement,
    apply_box_deltas,
    normalize_deltas,
    denormalize_deltas,
    Window,
    clip_boxes,
    clip_to_window,
)
from .utils import norm_boxes, denorm_boxes, BoxDebugger, ColorLogger, get_logger
from .config import get_default_config, load_config

__version__ = "1.0.0"
__all__ = [
    # Errors
    'BoxShapeError',

    # Overlaps
    'box_area',
    'compute_iou',
    'bbox_overlaps',
    'bbox_overlaps_loops',

    # Deltas
    'box_refinement',
    'apply_box_deltas',
    'normalize_deltas',
    'denormalize_deltas',

    # Clipping
    'Window',
    'clip_boxes',
    'clip_to_window',

    # Coordinates & diagnostics
    'norm_boxes',
    'denorm_boxes',
    'BoxDebugger',
    'ColorLogger',
    'get_logger',

    # Config
    'get_default_config',
    'load_config',
]
