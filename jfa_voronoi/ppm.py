"""
PPM (P3/P6) and PNG output of a finished grid.

@author yisiox
@version October 2026
"""

import matplotlib.pyplot as plt
import numpy as np

from .errors import PPMFormatError


def writePPM(grid, stream, binary=True):
    """
    Function to write the grid as a PPM image.

    @param grid   The grid to encode.
    @param stream Binary file-like object receiving the image.
    @param binary True for raw P6 triplets, False for decimal P3 lines.
    """
    image = grid.asImage()
    stream.write(b"P%d\n%d %d\n255\n" % (6 if binary else 3, grid.width, grid.height))
    if binary:
        stream.write(np.ascontiguousarray(image, dtype=np.uint8).tobytes())
    else:
        for r, g, b in image.reshape(-1, 3).tolist():
            stream.write(b"%d %d %d\n" % (r, g, b))


def _tokens(stream):
    # header tokens are whitespace separated, '#' starts a comment
    while True:
        line = stream.readline()
        if not line:
            return
        line = line.split(b"#", 1)[0]
        for token in line.split():
            yield token


def readPPM(stream):
    """
    Function to parse a P3 or P6 image back into an (height, width, 3) uint8 array.

    @param stream Binary file-like object positioned at the start of the image.
    """
    tokens = _tokens(stream)
    try:
        magic = next(tokens)
        width, height, maxval = [int(next(tokens)) for _ in range(3)]
    except (StopIteration, ValueError) as e:
        raise PPMFormatError("Truncated or malformed PPM header.") from e
    if magic not in (b"P3", b"P6"):
        raise PPMFormatError(f"Unsupported PPM variant {magic!r}.")
    if width <= 0 or height <= 0 or maxval != 255:
        raise PPMFormatError(f"Unsupported PPM geometry {width}x{height} max {maxval}.")

    count = width * height * 3
    if magic == b"P6":
        data = stream.read(count)
        if len(data) != count:
            raise PPMFormatError(f"Expected {count} bytes of pixel data, got {len(data)}.")
        values = np.frombuffer(data, dtype=np.uint8)
    else:
        try:
            values = np.array([int(t) for t in tokens], dtype=np.int64)
        except ValueError as e:
            raise PPMFormatError("Non-numeric sample in P3 body.") from e
        if values.size != count:
            raise PPMFormatError(f"Expected {count} samples, got {values.size}.")
        if values.min(initial=0) < 0 or values.max(initial=0) > maxval:
            raise PPMFormatError("Sample out of range in P3 body.")
        values = values.astype(np.uint8)
    return values.reshape(height, width, 3)


def savePNG(grid, path):
    """
    Function to save the grid as a PNG image.

    @param grid The grid to encode.
    @param path Destination file path.
    """
    plt.imsave(path, grid.asImage())
