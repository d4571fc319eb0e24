# utils / debug.py

# -----

# Statistics & Sanity Checks for Box Sets and IoU Matrices.

# -----

import torch
import numpy as np
from pathlib import Path

from boxutils.utils.logger import get_logger
from boxutils.utils.validation import as_boxes


class BoxDebugger:
    """Helper class for inspecting box sets and overlap matrices."""

    def __init__(self, save_dir=None):
        self.save_dir = Path(save_dir) if save_dir is not None else None
        self.logger = get_logger()

    @classmethod
    def from_config(cls, config):
        return cls(save_dir=config.get("debug_dir"))

    def analyze_boxes(self, boxes, name="boxes"):
        """Analyze box statistics and potential issues. Boxes are (y1, x1, y2, x2)."""
        boxes = as_boxes(boxes, name).detach().cpu().numpy()
        if len(boxes) == 0:
            return {}, []

        # Compute basic statistics
        heights = boxes[:, 2] - boxes[:, 0]
        widths = boxes[:, 3] - boxes[:, 1]
        areas = widths * heights
        with np.errstate(divide='ignore', invalid='ignore'):
            aspect_ratios = widths / heights

        stats = {
            "height": _summary(heights),
            "width": _summary(widths),
            "area": _summary(areas),
            "aspect_ratio": _summary(aspect_ratios),
        }

        # Check for potential issues
        issues = []
        if (heights <= 0).any():
            issues.append("Found boxes with zero or negative height")
        if (widths <= 0).any():
            issues.append("Found boxes with zero or negative width")
        if (areas <= 0).any():
            issues.append("Found boxes with zero or negative area")
        if not np.isfinite(boxes).all():
            issues.append("Found boxes with non-finite coordinates")

        for issue in issues:
            self.logger.warning(f"{name}: {issue}")

        return stats, issues

    def analyze_overlaps(self, overlaps, name="overlaps"):
        """Count NaN/Inf and out-of-range entries in an IoU matrix."""
        if isinstance(overlaps, torch.Tensor):
            overlaps = overlaps.detach().cpu().numpy()
        overlaps = np.asarray(overlaps, dtype=np.float64)

        finite = overlaps[np.isfinite(overlaps)]
        stats = {
            "shape": tuple(overlaps.shape),
            "num_nan": int(np.isnan(overlaps).sum()),
            "num_inf": int(np.isinf(overlaps).sum()),
            "num_out_of_range": int(((finite < 0) | (finite > 1)).sum()),
            "iou": _summary(finite) if finite.size else {},
        }

        issues = []
        if stats["num_nan"]:
            issues.append(f"Found {stats['num_nan']} NaN IoU values (zero-area union)")
        if stats["num_inf"]:
            issues.append(f"Found {stats['num_inf']} infinite IoU values")
        if stats["num_out_of_range"]:
            issues.append(f"Found {stats['num_out_of_range']} IoU values outside [0, 1]")

        for issue in issues:
            self.logger.warning(f"{name}: {issue}")

        return stats, issues

    def save_stats(self, stats, name):
        """Save statistics to a file."""
        if self.save_dir is None:
            raise ValueError("[ERROR] BoxDebugger has no save_dir")
        self.save_dir.mkdir(parents=True, exist_ok=True)

        path = self.save_dir / f'{name}_stats.txt'
        with open(path, 'w') as f:
            f.write(f"=== {name} Statistics ===\n\n")
            for key, value in stats.items():
                f.write(f"{key}:\n")
                if isinstance(value, dict):
                    for k, v in value.items():
                        f.write(f"  {k}: {v}\n")
                else:
                    f.write(f"  {value}\n")
                f.write("\n")

        self.logger.debug(f"Saved {name} stats to {path}")
        return path


def _summary(values):
    return {"min": float(np.min(values)), "max": float(np.max(values)), "mean": float(np.mean(values))}
