"""Shared fixtures: an in-memory printer sink and ready-made printers per dialect."""

from __future__ import annotations

import io
from typing import Callable, Optional

import pytest
from PIL import Image

from posify.model.enums import PrinterDialect
from posify.model.image import Bitmap
from posify.printer import Printer


class FakeSink:
    """
    Records written bytes and replays a queued device response.

    ``chunk_size`` limits how many response bytes a single read returns,
    to exercise short reads.
    """

    def __init__(self, response: bytes = b"", chunk_size: Optional[int] = None) -> None:
        self.buffer = io.BytesIO()
        self.response = io.BytesIO(response)
        self.chunk_size = chunk_size
        self.flush_count = 0
        self.reads = 0
        self.closed = False

    def write(self, data: bytes) -> int:
        return self.buffer.write(data)

    def flush(self) -> None:
        self.flush_count += 1

    def read(self, size: int) -> bytes:
        self.reads += 1
        if self.chunk_size is not None:
            size = min(size, self.chunk_size)
        return self.response.read(size)

    def close(self) -> None:
        self.closed = True

    @property
    def written(self) -> bytes:
        return self.buffer.getvalue()


@pytest.fixture
def sink() -> FakeSink:
    return FakeSink()


@pytest.fixture
def make_printer() -> Callable[..., Printer]:
    def _make(
        dialect: PrinterDialect = PrinterDialect.SNBC,
        response: bytes = b"",
        **kwargs,
    ) -> Printer:
        kwargs.setdefault("read_timeout", 0.05)
        return Printer(FakeSink(response), dialect, **kwargs)

    return _make


@pytest.fixture
def snbc(sink: FakeSink) -> Printer:
    return Printer(sink, PrinterDialect.SNBC, read_timeout=0.05)


@pytest.fixture
def p3(sink: FakeSink) -> Printer:
    return Printer(sink, PrinterDialect.P3, read_timeout=0.05)


@pytest.fixture
def unknown(sink: FakeSink) -> Printer:
    return Printer(sink, PrinterDialect.UNKNOWN, read_timeout=0.05)


@pytest.fixture
def checker_bitmap() -> Bitmap:
    """16x16 image, black in the top-left and bottom-right 8x8 quadrants."""
    img = Image.new("L", (16, 16), 255)
    for y in range(16):
        for x in range(16):
            if (x < 8) == (y < 8):
                img.putpixel((x, y), 0)
    return Bitmap(img)
