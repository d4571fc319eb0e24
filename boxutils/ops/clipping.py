# ops / clipping.py

# -----

# Clips Boxes to a Window (e.g. Image Bounds).
# clip_boxes Returns a New Tensor; clip_to_window Writes Into the Caller's Array.

# -----

# Imports.
import torch
import numpy as np
from typing import NamedTuple

from boxutils.utils.validation import as_boxes, as_window


# Window Type.
class Window(NamedTuple):
    """Valid Coordinate Extent (y1, x1, y2, x2)."""
    y1: float
    x1: float
    y2: float
    x2: float


# Clip Boxes Function.
def clip_boxes(boxes, window):
    """
    Clamp Each Coordinate Column to the Window. Input Is Left Unmodified.

    Args:
        boxes:      [N, 4] Boxes (y1, x1, y2, x2).
        window:     Window or Any 4 Values (y1, x1, y2, x2).

    Returns:
        torch.Tensor: New [N, 4] Tensor of Clipped Boxes.
    """
    boxes = as_boxes(boxes, 'boxes')
    window = Window(*as_window(window))

    # Integer Boxes Stay Integer, Same as clip_to_window.
    return torch.stack([
        boxes[:, 0].clamp(window.y1, window.y2),
        boxes[:, 1].clamp(window.x1, window.x2),
        boxes[:, 2].clamp(window.y1, window.y2),
        boxes[:, 3].clamp(window.x1, window.x2),
    ], dim=1).to(boxes.dtype)


# Clip to Window Function.
def clip_to_window(window, boxes):
    """
    Clamp Boxes to the Window In Place and Return Them.

    `boxes` Must Be a Tensor or NumPy Array; Its Storage Is Overwritten.
    Callers Sharing the Same Array Across Threads Must Serialize Calls.
    """
    if not isinstance(boxes, (torch.Tensor, np.ndarray)):
        raise TypeError(f"[ERROR] clip_to_window needs a tensor or ndarray, got {type(boxes).__name__}")

    window = Window(*as_window(window))
    bounds = [(window.y1, window.y2), (window.x1, window.x2)] * 2

    # Negative-Stride Arrays Have No Tensor View; Clip Them With NumPy.
    if isinstance(boxes, np.ndarray) and any(s < 0 for s in boxes.strides):
        as_boxes(boxes, 'boxes')
        for k, (lo, hi) in enumerate(bounds):
            np.clip(boxes[:, k], boxes.dtype.type(lo), boxes.dtype.type(hi), out=boxes[:, k])
        return boxes

    # Other NumPy Arrays Are Clipped Through a Shared-Memory View.
    target = as_boxes(boxes, 'boxes')
    for k, (lo, hi) in enumerate(bounds):
        target[:, k] = target[:, k].clamp(lo, hi)

    return boxes

