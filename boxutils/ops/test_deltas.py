# Imports
import math
import torch
import pytest

from boxutils.errors import BoxShapeError
from boxutils.config.box_config import load_config
from boxutils.ops.deltas import box_refinement, apply_box_deltas, normalize_deltas, denormalize_deltas


def random_boxes(n, seed=0):
    generator = torch.Generator().manual_seed(seed)
    corners = torch.rand(n, 2, generator=generator, dtype=torch.float64) * 100
    sizes = torch.rand(n, 2, generator=generator, dtype=torch.float64) * 50 + 1
    return torch.cat([corners, corners + sizes], dim=1)


# ----------------------------
# Box Refinement
# ----------------------------
def test_refinement_known_values():
    """Shift by half a box and double the height."""
    box = torch.tensor([[0., 0., 10., 10.]])
    gt_box = torch.tensor([[0., 5., 20., 15.]])

    deltas = box_refinement(box, gt_box)

    # Centers (5, 5) -> (10, 10), sizes (10, 10) -> (20, 10).
    expected = torch.tensor([[0.5, 0.5, math.log(2.0), 0.0]])
    assert torch.allclose(deltas, expected)


def test_refinement_of_identical_boxes_is_zero():
    boxes = random_boxes(5)
    assert torch.allclose(box_refinement(boxes, boxes), torch.zeros(5, 4, dtype=torch.float64))


def test_refinement_zero_size_gives_non_finite():
    box = torch.tensor([[0., 0., 0., 10.]])
    gt_box = torch.tensor([[0., 0., 5., 10.]])

    deltas = box_refinement(box, gt_box)
    assert not torch.isfinite(deltas[0, 0])
    assert not torch.isfinite(deltas[0, 2])


def test_refinement_rejects_mismatched_rows():
    with pytest.raises(BoxShapeError, match="same number of rows"):
        box_refinement(random_boxes(3), random_boxes(2))


# ----------------------------
# Delta Application
# ----------------------------
def test_apply_known_values():
    boxes = torch.tensor([[0., 0., 10., 10.]])
    deltas = torch.tensor([[0.5, 0.5, math.log(2.0), 0.0]])

    refined = apply_box_deltas(boxes, deltas)
    assert torch.allclose(refined, torch.tensor([[0., 5., 20., 15.]]))


def test_apply_zero_deltas_is_identity():
    boxes = random_boxes(4)
    refined = apply_box_deltas(boxes, torch.zeros(4, 4, dtype=torch.float64))
    assert torch.allclose(refined, boxes)


def test_round_trip():
    """Applying the refinement from A to B recovers B."""
    anchors = random_boxes(20, seed=1)
    gt_boxes = random_boxes(20, seed=2)

    deltas = box_refinement(anchors, gt_boxes)
    recovered = apply_box_deltas(anchors, deltas)

    assert torch.allclose(recovered, gt_boxes, atol=1e-9)


def test_round_trip_single_box():
    anchor = torch.tensor([[10., 20., 30., 60.]])
    gt_box = torch.tensor([[12., 18., 40., 50.]])

    recovered = apply_box_deltas(anchor, box_refinement(anchor, gt_box))
    assert recovered.shape == (1, 4)
    assert torch.allclose(recovered, gt_box, atol=1e-4)


def test_apply_rejects_mismatched_rows():
    with pytest.raises(BoxShapeError):
        apply_box_deltas(random_boxes(2), torch.zeros(3, 4))


# ----------------------------
# Delta Normalization
# ----------------------------
def test_normalize_uses_default_std_dev():
    deltas = torch.tensor([[0.1, 0.2, 0.2, 0.4]])
    normalized = normalize_deltas(deltas)
    assert torch.allclose(normalized, torch.tensor([[1., 2., 1., 2.]]))


def test_normalize_round_trip():
    deltas = box_refinement(random_boxes(8, seed=3), random_boxes(8, seed=4))
    std_dev = [0.5, 0.5, 0.25, 0.25]
    means = [0.1, -0.1, 0.0, 0.2]

    normalized = normalize_deltas(deltas, std_dev, means)
    restored = denormalize_deltas(normalized, std_dev, means)

    assert torch.allclose(restored, deltas)


def test_normalize_rejects_bad_std_dev():
    with pytest.raises(BoxShapeError):
        normalize_deltas(torch.zeros(2, 4), std_dev=[0.1, 0.1, 0.2])


def test_normalize_reads_loaded_config(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text("bbox_std_dev: [0.5, 0.5, 1.0, 1.0]\nbbox_means: [0.1, 0.1, 0.0, 0.0]\n")
    config = load_config(path)
    deltas = torch.tensor([[0.6, 1.1, 0.3, -0.2]])

    normalized = normalize_deltas(deltas, config=config)

    assert torch.allclose(normalized, torch.tensor([[1.0, 2.0, 0.3, -0.2]]))
    assert torch.allclose(denormalize_deltas(normalized, config=config), deltas)


def test_explicit_std_dev_overrides_config():
    config = {'bbox_std_dev': [1., 1., 1., 1.], 'bbox_means': [0., 0., 0., 0.]}
    deltas = torch.tensor([[0.2, 0.2, 0.2, 0.2]])

    normalized = normalize_deltas(deltas, std_dev=[0.1, 0.1, 0.1, 0.1], config=config)
    assert torch.allclose(normalized, torch.full((1, 4), 2.0))
