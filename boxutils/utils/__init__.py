from .validation import as_boxes, as_window, as_vector, check_paired
from .box_ops import norm_boxes, denorm_boxes
from .logger import ColorLogger, get_logger
from .debug import BoxDebugger

__all__ = [
    'as_boxes',
    'as_window',
    'as_vector',
    'check_paired',
    'norm_boxes',
    'denorm_boxes',
    'ColorLogger',
    'get_logger',
    'BoxDebugger',
]
