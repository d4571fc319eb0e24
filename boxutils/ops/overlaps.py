# ops / overlaps.py

# -----

# Computes IoU Between Two Sets of Boxes.
# Two Versions: Fully Vectorized (Tile & Repeat) and Column-by-Column.
# Boxes Are (y1, x1, y2, x2).

# -----

# Imports.
import logging
import torch

from boxutils.utils.validation import as_boxes

logger = logging.getLogger(__name__)


# Box Area Function.
def box_area(boxes):
    """Area of Each Box, (y2 - y1) * (x2 - x1). Returns [N]."""
    return (boxes[:, 2] - boxes[:, 0]) * (boxes[:, 3] - boxes[:, 1])


# Single Box IoU Function.
def compute_iou(box, boxes, box_area, boxes_area):
    """
    Compute IoU of One Box Against an Array of Boxes.

    Args:
        box:            Tensor [4] (y1, x1, y2, x2).
        boxes:          Tensor [N, 4].
        box_area:       Scalar Area of `box`.
        boxes_area:     Tensor [N] Areas of `boxes`.

    Returns:
        torch.Tensor: [N] IoU Values.

    Note:
        Areas Are Passed In Rather Than Computed Here So the Caller
        Can Compute Them Once for the Whole Set.
    """

    # Compute Intersection.
    y1 = torch.max(box[0], boxes[:, 0])
    x1 = torch.max(box[1], boxes[:, 1])
    y2 = torch.min(box[2], boxes[:, 2])
    x2 = torch.min(box[3], boxes[:, 3])
    intersection = (x2 - x1).clamp(min=0) * (y2 - y1).clamp(min=0)

    # Compute Union.
    union = box_area + boxes_area - intersection

    return intersection / union


# Vectorized Box Overlaps Function.
def bbox_overlaps(boxes1, boxes2):
    """
    Compute IoU Between Every Pair of Boxes Without a Python Loop.

    Args:
        boxes1 (torch.Tensor): [N, 4] Boxes (y1, x1, y2, x2).
        boxes2 (torch.Tensor): [M, 4] Boxes (y1, x1, y2, x2).

    Returns:
        torch.Tensor: IoU Matrix of Shape [M, N], Where out[j, i] Is the
        IoU of boxes1[i] and boxes2[j]. Transpose for [N, M].

    A Zero Union (Two Degenerate Boxes) Gives NaN.
    """
    boxes1 = as_boxes(boxes1, 'boxes1')
    boxes2 = as_boxes(boxes2, 'boxes2', like=boxes1)
    n, m = boxes1.shape[0], boxes2.shape[0]

    # 1. Tile boxes1 & Repeat boxes2 So Row k Pairs boxes1[k % N] With boxes2[k // N].
    b1 = boxes1.repeat(m, 1)                   # [M*N, 4]
    b2 = boxes2.repeat_interleave(n, dim=0)    # [M*N, 4]
    b1_y1, b1_x1, b1_y2, b1_x2 = b1.unbind(dim=1)
    b2_y1, b2_x1, b2_y2, b2_x2 = b2.unbind(dim=1)

    # 2. Compute Intersections.
    y1 = torch.max(b1_y1, b2_y1)
    x1 = torch.max(b1_x1, b2_x1)
    y2 = torch.min(b1_y2, b2_y2)
    x2 = torch.min(b1_x2, b2_x2)
    zeros = torch.zeros_like(y1)
    intersection = torch.max(x2 - x1, zeros) * torch.max(y2 - y1, zeros)

    # 3. Compute Unions.
    b1_area = (b1_y2 - b1_y1) * (b1_x2 - b1_x1)
    b2_area = (b2_y2 - b2_y1) * (b2_x2 - b2_x1)
    union = b1_area + b2_area - intersection

    # 4. Compute IoU & Reshape to [boxes2, boxes1].
    iou = intersection / union
    return iou.view(m, n)


# Looped Box Overlaps Function.
def bbox_overlaps_loops(boxes1, boxes2):
    """
    Compute IoU Between Every Pair of Boxes, One boxes2 Column at a Time.

    Slower Than bbox_overlaps, Kept as a Readable Reference.

    Returns:
        torch.Tensor: IoU Matrix of Shape [N, M], out[i, j] = IoU(boxes1[i], boxes2[j]).
    """
    boxes1 = as_boxes(boxes1, 'boxes1')
    boxes2 = as_boxes(boxes2, 'boxes2', like=boxes1)
    n, m = boxes1.shape[0], boxes2.shape[0]
    logger.debug(f"Looped overlaps for {n} x {m} boxes")

    # Areas of Anchors & GT Boxes.
    area1 = box_area(boxes1)
    area2 = box_area(boxes2)

    # Output Dtype Is Floating Even for Integer Boxes.
    dtype = torch.promote_types(boxes1.dtype, boxes2.dtype)
    if not dtype.is_floating_point:
        dtype = torch.get_default_dtype()

    # Fill One Column per boxes2 Entry.
    overlaps = torch.zeros((n, m), dtype=dtype, device=boxes1.device)
    for j in range(m):
        overlaps[:, j] = compute_iou(boxes2[j], boxes1, area2[j], area1)

    return overlaps
