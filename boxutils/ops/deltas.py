# ops / deltas.py

# -----

# Encodes & Decodes Box Regression Targets.
# A Delta (dy, dx, dh, dw) Moves the Center by a Fraction of the Box Size
# and Scales Height/Width in Log Space.

# -----

# Imports.
import torch

from boxutils.config.box_config import get_default_config
from boxutils.utils.validation import as_boxes, as_vector, check_paired


# Convert Corners to Centers.
def _to_center_form(boxes):
    """Split [N, 4] Corner Boxes Into (center_y, center_x, height, width), Each [N]."""
    height = boxes[:, 2] - boxes[:, 0]
    width = boxes[:, 3] - boxes[:, 1]
    center_y = boxes[:, 0] + 0.5 * height
    center_x = boxes[:, 1] + 0.5 * width
    return center_y, center_x, height, width


# Box Refinement Function.
def box_refinement(box, gt_box):
    """
    Compute the Deltas Needed to Transform `box` Into `gt_box`.

    Args:
        box (torch.Tensor):     [N, 4] Source Boxes (y1, x1, y2, x2).
        gt_box (torch.Tensor):  [N, 4] Target Boxes, Paired With `box` by Row.

    Returns:
        torch.Tensor: [N, 4] Deltas (dy, dx, dh, dw).

    Zero Height/Width in `box` Gives Inf/NaN; No Check Is Made.
    """
    box = as_boxes(box, 'box')
    gt_box = as_boxes(gt_box, 'gt_box', like=box)
    check_paired(box, gt_box, 'box', 'gt_box')

    # Convert to Center Form.
    center_y, center_x, height, width = _to_center_form(box)
    gt_center_y, gt_center_x, gt_height, gt_width = _to_center_form(gt_box)

    # Compute Deltas.
    dy = (gt_center_y - center_y) / height
    dx = (gt_center_x - center_x) / width
    dh = torch.log(gt_height / height)
    dw = torch.log(gt_width / width)

    return torch.stack([dy, dx, dh, dw], dim=1)


# Apply Box Deltas Function.
def apply_box_deltas(boxes, deltas):
    """
    Apply Deltas to Boxes. Inverse of box_refinement.

    Args:
        boxes (torch.Tensor):   [N, 4] Boxes (y1, x1, y2, x2).
        deltas (torch.Tensor):  [N, 4] Deltas (dy, dx, dh, dw).

    Returns:
        torch.Tensor: [N, 4] Refined Boxes (y1, x1, y2, x2). Not Clipped.
    """
    boxes = as_boxes(boxes, 'boxes')
    deltas = as_boxes(deltas, 'deltas', like=boxes)
    check_paired(boxes, deltas, 'boxes', 'deltas')

    # Convert to Center Form.
    center_y, center_x, height, width = _to_center_form(boxes)

    # Apply Deltas.
    center_y = center_y + deltas[:, 0] * height
    center_x = center_x + deltas[:, 1] * width
    height = height * torch.exp(deltas[:, 2])
    width = width * torch.exp(deltas[:, 3])

    # Convert Back to y1, x1, y2, x2.
    y1 = center_y - 0.5 * height
    x1 = center_x - 0.5 * width
    y2 = y1 + height
    x2 = x1 + width

    return torch.stack([y1, x1, y2, x2], dim=1)


# Normalize Deltas Function.
def normalize_deltas(deltas, std_dev=None, means=None, config=None):
    """
    Scale Raw Deltas to Regression Targets: (deltas - means) / std_dev.

    Missing std_dev / means Are Read From `config` (bbox_std_dev, bbox_means),
    or From the Defaults When No Config Is Given.
    """
    deltas = as_boxes(deltas, 'deltas')
    std_dev, means = _delta_stats(deltas, std_dev, means, config)
    return (deltas - means) / std_dev


# Denormalize Deltas Function.
def denormalize_deltas(deltas, std_dev=None, means=None, config=None):
    """Undo normalize_deltas: deltas * std_dev + means."""
    deltas = as_boxes(deltas, 'deltas')
    std_dev, means = _delta_stats(deltas, std_dev, means, config)
    return deltas * std_dev + means


# Resolve Delta Statistics.
def _delta_stats(deltas, std_dev, means, config):
    # Fall Back to the Config, Then the Defaults.
    if std_dev is None or means is None:
        config = config if config is not None else get_default_config()
        std_dev = config['bbox_std_dev'] if std_dev is None else std_dev
        means = config['bbox_means'] if means is None else means

    return as_vector(std_dev, 'std_dev', deltas), as_vector(means, 'means', deltas)
