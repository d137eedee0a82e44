"""
Tests for the mosaic filter.

Tests cover:
- Seed selection and capping at the pixel count
- Nearest-seed assignment and tie-breaking
- Cluster averaging
- Determinism with an injected random source
- Pixel blocks and seed chunks matching the unchunked result
"""

import random

import numpy as np
import pytest

from IP_Libs.errors import InvalidParameterError
from IP_Libs.ImageEditingLib import mosaic_filter
from IP_Libs.ImageEditingLib.image_models import PixelBuffer
from IP_Libs.ImageEditingLib.mosaic_filter import (
    apply_mosaic,
    assign_clusters,
    average_clusters,
    block_sizes,
    choose_seeds,
)


class TestSeeds:
    """Tests for choose_seeds."""

    def test_seeds_are_distinct_and_in_bounds(self):
        seeds = choose_seeds(5, 4, 12, random.Random(3))

        assert len(seeds) == 12
        assert len(set(seeds)) == 12
        assert all(0 <= x < 5 and 0 <= y < 4 for x, y in seeds)

    def test_seed_count_capped_at_pixel_count(self):
        seeds = choose_seeds(3, 2, 100, random.Random(0))

        assert sorted(seeds) == [(x, y) for x in range(3) for y in range(2)]

    @pytest.mark.parametrize("seed_count", [0, -4])
    def test_non_positive_seed_count_rejected(self, seed_count):
        with pytest.raises(InvalidParameterError):
            choose_seeds(4, 4, seed_count, random.Random(0))

    def test_same_rng_seed_same_seeds(self):
        first = choose_seeds(10, 10, 7, random.Random(42))
        second = choose_seeds(10, 10, 7, random.Random(42))

        assert first == second


class TestAssignment:
    """Tests for assign_clusters and average_clusters."""

    def test_nearest_seed(self):
        labels = assign_clusters(5, 1, [(0, 0), (4, 0)])

        assert labels.tolist() == [[0, 0, 0, 1, 1]]

    def test_tie_goes_to_lowest_seed_index(self):
        labels = assign_clusters(3, 1, [(2, 0), (0, 0)])

        # Pixel (1, 0) is equidistant from both seeds
        assert labels.tolist() == [[1, 0, 0]]

    def test_parallel_blocks_match_sequential(self, monkeypatch):
        monkeypatch.setattr(mosaic_filter, "MOSAIC_BLOCK_ELEMENTS", 40)
        seeds = choose_seeds(20, 15, 9, random.Random(11))

        sequential = assign_clusters(20, 15, seeds, max_workers=1)
        parallel = assign_clusters(20, 15, seeds, max_workers=4)

        assert np.array_equal(sequential, parallel)

    @pytest.mark.parametrize("max_workers", [1, 3])
    def test_seed_chunks_match_unchunked(self, monkeypatch, max_workers):
        seeds = choose_seeds(12, 9, 30, random.Random(4))
        unchunked = assign_clusters(12, 9, seeds)

        # Fewer elements than one row against every seed
        monkeypatch.setattr(mosaic_filter, "MOSAIC_BLOCK_ELEMENTS", 5)
        chunked = assign_clusters(12, 9, seeds, max_workers=max_workers)

        assert np.array_equal(chunked, unchunked)

    def test_tie_break_holds_across_seed_chunks(self, monkeypatch):
        monkeypatch.setattr(mosaic_filter, "MOSAIC_BLOCK_ELEMENTS", 1)

        labels = assign_clusters(3, 1, [(2, 0), (0, 0)])

        assert labels.tolist() == [[1, 0, 0]]

    def test_block_bounded_for_many_seeds(self):
        pixels, seeds = block_sizes(500, 250_000)

        assert pixels * seeds <= mosaic_filter.MOSAIC_BLOCK_ELEMENTS
        assert seeds < 250_000


    def test_average_rounds_half_up(self):
        image = PixelBuffer.from_array([[[1, 0, 10], [2, 0, 11]]])
        labels = np.array([[0, 0]])

        averages = average_clusters(image, labels, 1)

        assert averages.tolist() == [[2, 0, 11]]


class TestApplyMosaic:
    """Tests for apply_mosaic."""

    def test_one_seed_per_pixel_is_identity(self, gradient_buffer):
        pixel_count = gradient_buffer.width * gradient_buffer.height

        result = apply_mosaic(gradient_buffer, pixel_count, rng=random.Random(1))

        assert result == gradient_buffer

    def test_too_many_seeds_is_identity(self, gradient_buffer):
        result = apply_mosaic(gradient_buffer, 10_000, rng=random.Random(1))

        assert result == gradient_buffer

    def test_single_seed_paints_average(self):
        image = PixelBuffer.from_array([[[0, 0, 0], [100, 50, 200]]])

        result = apply_mosaic(image, 1, rng=random.Random(5))

        assert result == PixelBuffer.filled(2, 1, (50, 25, 100))

    def test_uniform_image_unchanged(self):
        image = PixelBuffer.filled(9, 7, (33, 66, 99))

        assert apply_mosaic(image, 4, rng=random.Random(2)) == image

    def test_color_count_bounded_by_seeds(self, gradient_buffer):
        result = apply_mosaic(gradient_buffer, 3, rng=random.Random(8))

        colors = np.unique(result.to_array().reshape(-1, 3), axis=0)
        assert len(colors) <= 3

    def test_deterministic_with_injected_rng(self, gradient_buffer):
        first = apply_mosaic(gradient_buffer, 5, rng=random.Random(99))
        second = apply_mosaic(gradient_buffer, 5, rng=random.Random(99))

        assert first == second

    def test_worker_count_does_not_change_result(self, gradient_buffer, monkeypatch):
        monkeypatch.setattr(mosaic_filter, "MOSAIC_BLOCK_ELEMENTS", 8)

        sequential = apply_mosaic(gradient_buffer, 4, rng=random.Random(6), max_workers=1)
        parallel = apply_mosaic(gradient_buffer, 4, rng=random.Random(6), max_workers=3)

        assert sequential == parallel

    def test_zero_seeds_rejected(self, gradient_buffer):
        with pytest.raises(InvalidParameterError):
            apply_mosaic(gradient_buffer, 0, rng=random.Random(0))
