"""Multi-channel raster images stored as a flat, row-major list of samples."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import IntEnum


class ImageType(IntEnum):
    """External image file formats."""

    PNM = 0
    PNG = 1
    TIFF = 2
    JPEG = 3


class Raster:
    """A ``width`` x ``height`` image with ``channels`` samples per pixel.

    Samples are stored row by row, pixel by pixel, channel by channel.
    Indexing with a single integer addresses the flat sample list.
    """

    def __init__(
        self,
        width: int,
        height: int,
        channels: int,
        data: Iterable | None = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("raster dimensions must not be negative")
        if channels < 1:
            raise ValueError("a raster needs at least one channel")
        self.width = width
        self.height = height
        self.channels = channels
        size = width * height * channels
        if data is None:
            self.data = [0] * size
        else:
            self.data = list(data)
            if len(self.data) != size:
                raise ValueError(
                    f"expected {size} samples, got {len(self.data)}"
                )

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator:
        return iter(self.data)

    def __getitem__(self, index: int):
        return self.data[index]

    def __setitem__(self, index: int, value) -> None:
        self.data[index] = value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.width}, {self.height}, "
            f"{self.channels})"
        )

    def is_valid_address(self, x: int, y: int) -> bool:
        """Return whether ``(x, y)`` names a pixel inside the image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, i: int, j: int) -> tuple:
        """Return the channel values of the pixel in column ``i``, row ``j``."""
        if not self.is_valid_address(i, j):
            raise IndexError(f"pixel ({i}, {j}) lies outside the raster")
        start = (j * self.width + i) * self.channels
        return tuple(self.data[start:start + self.channels])

    def reverse(self, start: int = 0, end: int = -1) -> None:
        """Reverse the order of the pixels from sample ``start`` to sample ``end``.

        ``end`` is the offset of the last pixel in the run; a negative or
        out-of-range value means the last pixel of the image.
        """
        c = self.channels
        samples = self.data
        if end < 0 or end >= len(samples):
            end = len(samples) - c
        i, j = start, end
        while i < j:
            samples[i:i + c], samples[j:j + c] = samples[j:j + c], samples[i:i + c]
            i += c
            j -= c

    def hflip(self) -> None:
        """Mirror the image left to right."""
        row_span = self.channels * (self.width - 1)
        for row_start in range(0, len(self.data), row_span + self.channels):
            self.reverse(row_start, row_start + row_span)

    def vflip(self) -> None:
        """Mirror the image top to bottom."""
        self.reverse()
        self.hflip()