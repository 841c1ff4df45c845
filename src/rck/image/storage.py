"""Saving decoded images to disk.

Naming rule:

- a response with one image is written as ``<base>.<ext>``
- otherwise each image is written as ``<base>_<n>.<ext>`` where ``n`` is the
  image's 1-based position in the response output

Writes follow a partial-failure model: every image is attempted, failures are
collected, and the caller receives both the saved paths and the errors.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rck.image.response import ImageInfo, ImageResponse

logger = logging.getLogger(__name__)


def image_filename(image: ImageInfo, base_filename: str, single: bool) -> str:
    if single:
        return f"{base_filename}.{image.file_extension}"
    return f"{base_filename}_{image.index + 1}.{image.file_extension}"


def save_images(
    response: ImageResponse, output_dir: str | Path, base_filename: str
) -> tuple[list[Path], list[Exception]]:
    """Write every image in ``response`` to ``output_dir``.

    The directory (and any missing parents) is created on demand.

    Args:
        response: Decoded image response
        output_dir: Target directory
        base_filename: Filename stem shared by all images

    Returns:
        Tuple of (saved file paths, errors encountered)
    """
    saved: list[Path] = []
    errors: list[Exception] = []

    if not response.success:
        errors.append(ValueError("image response is not successful, cannot save"))
        return saved, errors

    output_path = Path(output_dir)
    try:
        output_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create output directory {output_path}: {e}")
        errors.append(e)
        return saved, errors

    single = response.count == 1
    for image in response.images:
        file_path = output_path / image_filename(image, base_filename, single)
        try:
            file_path.write_bytes(image.image_data)
        except OSError as e:
            logger.error(f"Failed to save image {file_path}: {e}")
            errors.append(e)
            continue
        logger.info(f"Saved image to: {file_path}")
        saved.append(file_path)

    return saved, errors
