# Imports
import torch
import pytest

from boxutils.utils.box_ops import norm_boxes, denorm_boxes


def test_full_image_normalizes_to_unit_box():
    """A box covering a 101x201 image maps to (0, 0, 1, 1)."""
    boxes = torch.tensor([[0., 0., 101., 201.]])
    normalized = norm_boxes(boxes, (101, 201))

    assert torch.allclose(normalized, torch.tensor([[0., 0., 1., 1.]]))


def test_norm_does_not_modify_input():
    boxes = torch.tensor([[10., 20., 30., 40.]])
    before = boxes.clone()

    norm_boxes(boxes, (100, 100))
    assert torch.equal(boxes, before)


def test_denorm_inverts_norm():
    boxes = torch.tensor([[10, 20, 30, 40], [0, 0, 480, 640]], dtype=torch.int32)
    shape = (480, 640)

    restored = denorm_boxes(norm_boxes(boxes, shape), shape)

    assert restored.dtype == torch.int32
    assert torch.equal(restored, boxes)


def test_rejects_tiny_shape():
    with pytest.raises(ValueError):
        norm_boxes(torch.zeros(1, 4), (1, 100))
