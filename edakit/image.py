"""Binary images read from 8-bit BMP files and drawn as text."""

from __future__ import annotations

import struct
import sys
from pathlib import Path
from typing import Optional, Sequence

DEFAULT_FILENAME = "images/image_1.bmp"
DEFAULT_THRESHOLD = 120
_HEADER_SIZE = 54


class Image:
    """A grey-level image reduced to 0 and 1 by a fixed threshold.

    Pixels are stored row by row, top row first.
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        data: Optional[Sequence[int]] = None,
        threshold_value: int = DEFAULT_THRESHOLD,
    ) -> None:
        self.width = width
        self.height = height
        self.threshold_value = threshold_value
        self.data: Optional[bytearray] = None
        if data is not None:
            if len(data) != width * height:
                raise ValueError(
                    f"expected {width * height} pixels for {width} x {height}, "
                    f"got {len(data)}"
                )
            self.data = bytearray(data)
            self.threshold()

    def threshold(self) -> None:
        """Set pixels below the threshold to 0 and all others to 1."""
        if self.data is None:
            return
        limit = self.threshold_value
        self.data = bytearray(0 if pixel < limit else 1 for pixel in self.data)

    def _pixels(self) -> bytearray:
        if self.data is None:
            raise ValueError("image has no pixel data")
        return self.data

    def value(self, row: int, col: int) -> int:
        """Return the pixel at the given row and column."""
        pixels = self._pixels()
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"pixel ({row}, {col}) is outside the image")
        return pixels[row * self.width + col]

    def render(self) -> str:
        """Draw the image: a size banner, then '*' for set pixels and ' ' for clear ones."""
        pixels = self._pixels()
        lines = [
            "----------------------",
            f"size [ (w: {self.width}) x   ( h:{self.height})]",
            "---------------------",
        ]
        for start in range(0, self.width * self.height, self.width or 1):
            row = pixels[start:start + self.width]
            lines.append("".join(" " if pixel == 0 else "*" for pixel in row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


def read_image(path) -> Image:
    """Read an uncompressed 8-bit BMP file into a thresholded ``Image``.

    Raises ``ValueError`` when the file is not such a BMP or its declared
    pixel size does not match width times height.
    """
    raw = Path(path).read_bytes()
    if len(raw) < _HEADER_SIZE:
        raise ValueError(f"{path}: file too short for a BMP header")
    if raw[:2] != b"BM":
        raise ValueError(f"{path}: not a BMP file")
    width, height = struct.unpack_from("<ii", raw, 18)
    (bits,) = struct.unpack_from("<h", raw, 28)
    (image_size,) = struct.unpack_from("<i", raw, 34)
    (num_colors,) = struct.unpack_from("<i", raw, 46)
    if bits != 8:
        raise ValueError(f"{path}: expected 8 bits per pixel, found {bits}")
    if width < 0 or height < 0 or num_colors < 0:
        raise ValueError(f"{path}: invalid header values")
    if image_size != width * height:
        raise ValueError(
            f"{path}: image size {image_size} does not match {width} x {height}"
        )
    offset = _HEADER_SIZE + num_colors * 4
    pixels = raw[offset:offset + image_size]
    if len(pixels) < image_size:
        raise ValueError(f"{path}: pixel data is truncated")
    # BMP stores rows bottom-up; put the top row first.
    rows = [
        pixels[width * (height - 1 - i): width * (height - i)] for i in range(height)
    ]
    return Image(width, height, b"".join(rows))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    filename = args[0] if args else DEFAULT_FILENAME
    print(filename)
    try:
        image = read_image(filename)
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    print("----------------")
    print(image.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())