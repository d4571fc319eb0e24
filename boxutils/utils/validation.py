# utils / validation.py

# -----

# Converts Inputs to Box Tensors & Checks Their Shapes.
# Every Kernel Runs Its Inputs Through Here Before Doing Any Math.

# -----

# Imports.
import torch
import numpy as np

from boxutils.errors import BoxShapeError


# Convert to Box Tensor.
def as_boxes(boxes, name='boxes', like=None):
    """
    Convert Input to an [N, 4] Box Tensor.

    Args:
        boxes:      Tensor, NumPy Array or Nested Sequence of (y1, x1, y2, x2) Rows.
        name:       Argument Name Used in Error Messages.
        like:       Optional Tensor Whose Device the Result Is Moved To.

    Returns:
        torch.Tensor of Shape [N, 4]. NumPy Inputs Share Memory With the Result
        Unless They Have Negative Strides.
    """

    # Convert to Tensor.
    if isinstance(boxes, np.ndarray):
        # Tensors Cannot View Negative Strides (e.g. boxes[::-1]).
        if any(s < 0 for s in boxes.strides):
            boxes = np.ascontiguousarray(boxes)
        boxes = torch.from_numpy(boxes)
    elif not isinstance(boxes, torch.Tensor):
        boxes = torch.as_tensor(boxes, dtype=torch.float32)

    # Empty Input Is an Empty Box Set.
    if boxes.dim() == 1 and boxes.numel() == 0:
        boxes = boxes.reshape(0, 4)

    # Check Shape.
    if boxes.dim() != 2 or boxes.shape[1] != 4:
        raise BoxShapeError(f"[ERROR] {name} must have shape [N, 4], got {list(boxes.shape)}")

    # Match Device.
    if like is not None and boxes.device != like.device:
        boxes = boxes.to(like.device)

    return boxes


# Check Paired Box Sets.
def check_paired(first, second, first_name, second_name):
    """Raise if Two Row-Paired Box Sets Have Different Row Counts."""
    if first.shape[0] != second.shape[0]:
        raise BoxShapeError(
            f"[ERROR] {first_name} and {second_name} must have the same number of rows, "
            f"got {first.shape[0]} and {second.shape[0]}"
        )


# Convert to Window.
def as_window(window):
    """Return the Window as a Tuple of Four Floats (y1, x1, y2, x2)."""
    if isinstance(window, torch.Tensor):
        values = window.detach().cpu().reshape(-1).tolist()
    else:
        values = np.asarray(window, dtype=np.float64).reshape(-1).tolist()

    if len(values) != 4:
        raise BoxShapeError(f"[ERROR] window must have 4 values (y1, x1, y2, x2), got {len(values)}")

    return tuple(float(v) for v in values)


# Convert to Per-Coordinate Vector.
def as_vector(values, name, like):
    """Return a Length-4 Float Tensor on the Same Device as `like`."""
    dtype = like.dtype if like.is_floating_point() else torch.get_default_dtype()
    vector = torch.as_tensor(values, dtype=dtype, device=like.device).reshape(-1)
    if vector.numel() != 4:
        raise BoxShapeError(f"[ERROR] {name} must have 4 values, got {vector.numel()}")
    return vector
