"""
Mosaic Filter.

Partitions the image into clusters around randomly chosen seed pixels and
paints every cluster with its average color.

Algorithm:
    1. Pick min(k, width * height) distinct seed coordinates from the
       injectable random source.
    2. Assign every pixel to the seed with the smallest Euclidean distance
       in (x, y); ties go to the seed with the lowest index.
    3. Average the colors of each cluster (rounded half-up per channel).
    4. Paint every pixel with its cluster's average.

The assignment step dominates (O(width * height * k)). It is computed over
blocks of pixels and chunks of seeds so that no distance table grows past
MOSAIC_BLOCK_ELEMENTS entries. Pixel blocks may be farmed out to a thread
pool; the result does not depend on the number of workers or the block size.

Example:
    >>> import random
    >>> from IP_Libs.ImageEditingLib.image_models import PixelBuffer
    >>> image = PixelBuffer.filled(8, 8, (40, 80, 120))
    >>> result = apply_mosaic(image, seed_count=5, rng=random.Random(7))
"""

import concurrent.futures
import logging
import random
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from IP_Libs.constants import MOSAIC_BLOCK_ELEMENTS
from IP_Libs.errors import InvalidParameterError
from IP_Libs.ImageEditingLib.image_models import PixelBuffer

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


def choose_seeds(width: int, height: int, seed_count: int, rng: Any) -> List[Coordinate]:
    """
    Choose distinct seed coordinates.

    Args:
        width: Image width
        height: Image height
        seed_count: Requested number of seeds (>= 1)
        rng: Random source providing ``sample(population, k)``

    Returns:
        List of (x, y) tuples, length min(seed_count, width * height)

    Raises:
        InvalidParameterError: If seed_count < 1
    """
    if seed_count < 1:
        raise InvalidParameterError(f"seed count must be >= 1, got {seed_count}")

    total = width * height
    count = min(seed_count, total)
    indices = rng.sample(range(total), count)
    return [(index % width, index // width) for index in indices]


def block_sizes(width: int, seed_count: int) -> Tuple[int, int]:
    """
    Pick (pixels per block, seeds per chunk) for the assignment phase.

    The product never exceeds MOSAIC_BLOCK_ELEMENTS, whatever the seed count.
    """
    seeds_per_chunk = max(1, min(seed_count, MOSAIC_BLOCK_ELEMENTS // max(1, width)))
    pixels_per_block = max(1, MOSAIC_BLOCK_ELEMENTS // seeds_per_chunk)
    return pixels_per_block, seeds_per_chunk


def _assign_pixels(
    start: int,
    stop: int,
    width: int,
    seed_x: np.ndarray,
    seed_y: np.ndarray,
    seeds_per_chunk: int,
) -> np.ndarray:
    """Nearest-seed labels for row-major pixel indices [start, stop)."""
    indices = np.arange(start, stop, dtype=np.int64)
    xs = (indices % width)[:, np.newaxis]
    ys = (indices // width)[:, np.newaxis]
    positions = np.arange(stop - start)

    best_distance = None
    best_label = None
    for offset in range(0, len(seed_x), seeds_per_chunk):
        chunk_x = seed_x[offset:offset + seeds_per_chunk]
        chunk_y = seed_y[offset:offset + seeds_per_chunk]
        distances = (xs - chunk_x) ** 2 + (ys - chunk_y) ** 2
        # argmin returns the first minimum, i.e. the lowest seed index on ties
        local = np.argmin(distances, axis=1)
        local_distance = distances[positions, local]

        if best_distance is None:
            best_distance = local_distance
            best_label = local + offset
        else:
            # Strictly closer only, so earlier chunks keep their ties
            closer = local_distance < best_distance
            best_distance = np.where(closer, local_distance, best_distance)
            best_label = np.where(closer, local + offset, best_label)

    return best_label


def assign_clusters(
    width: int,
    height: int,
    seeds: Sequence[Coordinate],
    max_workers: Optional[int] = None,
) -> np.ndarray:
    """
    Label every pixel with the index of its nearest seed.

    Args:
        width: Image width
        height: Image height
        seeds: Seed coordinates; position in the sequence is the seed index
        max_workers: Thread count for pixel blocks (None or 1 = sequential)

    Returns:
        Integer array of shape (height, width)
    """
    seed_x = np.array([s[0] for s in seeds], dtype=np.int64)
    seed_y = np.array([s[1] for s in seeds], dtype=np.int64)
    total = width * height
    step, seeds_per_chunk = block_sizes(width, len(seeds))
    blocks = [(start, min(start + step, total)) for start in range(0, total, step)]

    labels = np.empty(total, dtype=np.int64)

    if max_workers and max_workers > 1 and len(blocks) > 1:
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(
                    _assign_pixels, start, stop, width, seed_x, seed_y, seeds_per_chunk
                ): (start, stop)
                for start, stop in blocks
            }
            for future in concurrent.futures.as_completed(futures):
                start, stop = futures[future]
                labels[start:stop] = future.result()
    else:
        for start, stop in blocks:
            labels[start:stop] = _assign_pixels(
                start, stop, width, seed_x, seed_y, seeds_per_chunk
            )

    return labels.reshape(height, width)


def average_clusters(image: PixelBuffer, labels: np.ndarray, cluster_count: int) -> np.ndarray:
    """
    Average color of each cluster.

    Returns:
        Integer array of shape (cluster_count, 3)
    """
    flat_labels = labels.ravel()
    pixels = image.to_array().reshape(-1, 3).astype(np.int64)
    counts = np.bincount(flat_labels, minlength=cluster_count).astype(np.int64)

    averages = np.zeros((cluster_count, 3), dtype=np.int64)
    occupied = counts > 0
    for channel in range(3):
        sums = np.bincount(
            flat_labels, weights=pixels[:, channel], minlength=cluster_count
        ).astype(np.int64)
        averages[occupied, channel] = (
            sums[occupied] + counts[occupied] // 2
        ) // counts[occupied]

    return averages


def apply_mosaic(
    image: PixelBuffer,
    seed_count: int,
    rng: Optional[Any] = None,
    max_workers: Optional[int] = None,
) -> PixelBuffer:
    """
    Apply the mosaic filter.

    Args:
        image: Source buffer
        seed_count: Number of clusters (>= 1); capped at the pixel count
        rng: Random source with ``sample`` (default: fresh random.Random)
        max_workers: Thread count for the assignment phase

    Returns:
        New buffer where every pixel has its cluster's average color

    Raises:
        InvalidParameterError: If seed_count < 1
    """
    if rng is None:
        rng = random.Random()

    seeds = choose_seeds(image.width, image.height, seed_count, rng)
    logger.debug(
        f"Mosaic with {len(seeds)} seeds on {image.width}x{image.height} image"
    )

    labels = assign_clusters(image.width, image.height, seeds, max_workers=max_workers)
    averages = average_clusters(image, labels, len(seeds))
    return PixelBuffer(averages[labels])
