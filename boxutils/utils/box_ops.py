# utils / box_ops.py

# -----

# Converts Boxes Between Pixel & Normalized Coordinates.
# In Pixel Coordinates (y2, x2) Lie Outside the Box; in Normalized
# Coordinates They Lie Inside, So (0, 0, 1, 1) Covers the Whole Image.

# -----

# Imports.
import torch

from boxutils.utils.validation import as_boxes


# Build Scale & Shift for an Image Shape.
def _scale_and_shift(shape, like):
    h, w = shape
    if h <= 1 or w <= 1:
        raise ValueError(f"[ERROR] Image shape must be larger than 1x1, got {tuple(shape)}")

    dtype = like.dtype if like.is_floating_point() else torch.get_default_dtype()
    scale = torch.tensor([h - 1, w - 1, h - 1, w - 1], dtype=dtype, device=like.device)
    shift = torch.tensor([0, 0, 1, 1], dtype=dtype, device=like.device)
    return scale, shift


def norm_boxes(boxes, shape):
    """
    Map Boxes From Pixel Coordinates to Normalized Coordinates.

    Args:
        boxes:  [N, 4] Boxes (y1, x1, y2, x2) in Pixels.
        shape:  (height, width) of the Image.

    Returns:
        torch.Tensor: [N, 4] Normalized Boxes. Input Is Not Modified.
    """
    boxes = as_boxes(boxes, 'boxes')
    scale, shift = _scale_and_shift(shape, boxes)
    return (boxes - shift) / scale


def denorm_boxes(boxes, shape):
    """
    Map Normalized Boxes Back to Integer Pixel Coordinates.

    Args:
        boxes:  [N, 4] Normalized Boxes (y1, x1, y2, x2).
        shape:  (height, width) of the Image.

    Returns:
        torch.Tensor: [N, 4] int32 Boxes in Pixels.
    """
    boxes = as_boxes(boxes, 'boxes')
    scale, shift = _scale_and_shift(shape, boxes)
    return torch.round(boxes * scale + shift).to(torch.int32)
