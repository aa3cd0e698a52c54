"""
Printer command facade.

The Printer is the single stateful entry point of posify: it owns the output
sink, the text encoding policy and the printer dialect, and turns every
print directive into bytes on the sink, in call order.

Every print operation returns the number of bytes written. ``chain()`` wraps
the printer in a PrinterChain whose print operations return the chain, so
calls can be composed:

    >>> with open("/dev/usb/lp0", "r+b", buffering=0) as sink:
    ...     printer = Printer(sink, PrinterDialect.P3)
    ...     (printer.chain()
    ...         .initialize()
    ...         .size(2, 2)
    ...         .println("The quick brown fox jumped over the lazy dog")
    ...         .feed(1)
    ...         .partial_cut()
    ...         .flush())

Status queries write a fixed op-code and block until the fixed-size
response arrived, or until ``read_timeout`` seconds elapsed. The timeout
needs a sink whose ``read`` returns while the device is silent (non-blocking,
or with its own timeout, e.g. ``serial.Serial(..., timeout=0.1)``).

The printer's enabled/disabled state is not tracked: enable() and disable()
only send the toggle command.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Final, Iterable, Mapping, Optional, Protocol, Union

from posify.barcodegen.qr_image import render_qr
from posify.config import default_config
from posify.escpos.barcode_encoder import BarcodeSpec, encode_payload
from posify.escpos.commands.fonts import FONT_FAMILIES
from posify.escpos.commands.hardware import HW_INIT, cash_drawer, paper_end_limit
from posify.escpos.commands.line_spacing import line_spacing
from posify.escpos.commands.positioning import ALIGNMENTS, CONTROL_CODES, CTL_LF
from posify.escpos.commands.sizing import TXT_2HEIGHT, TXT_2WIDTH, TXT_NORMAL
from posify.escpos.commands.status import (
    COVER_OPEN_MASK,
    PAPER_PRESENT,
    QUERY_CUT_COUNT,
    QUERY_OFFLINE_STATUS,
    QUERY_PAPER_SENSOR,
    QUERY_POWER_COUNT,
    QUERY_PRINTED_LENGTH,
    QUERY_REMAINING_PAPER,
    QUERY_ROM_VERSION,
    QUERY_SERIAL,
    STATUS_COVER_OPEN,
    STATUS_OK,
    StatusQuery,
)
from posify.escpos.commands.text_formatting import style_commands, underline_command
from posify.escpos.dialects import DialectTable, get_dialect_table
from posify.escpos.raster_encoder import BitmapSource, bit_image_blocks, raster_blocks
from posify.exceptions import (
    DecodingError,
    InvalidArgumentError,
    PosifyError,
    ResponseTimeoutError,
)
from posify.model.encoding import TextEncoding
from posify.model.enums import (
    Alignment,
    BarcodeType,
    BitImageDensity,
    ControlCode,
    Font,
    FontFamily,
    PrinterDialect,
    RasterMode,
    TextPosition,
    TextStyle,
    Underline,
)

logger: Final = logging.getLogger(__name__)

__all__ = ["Printer", "PrinterChain", "PrinterSink", "DEFAULT_READ_TIMEOUT"]

DEFAULT_READ_TIMEOUT: Final[float] = 5.0
_POLL_INTERVAL: Final[float] = 0.01


class PrinterSink(Protocol):
    """Binary byte sink: a device file, a serial port, a socket file, BytesIO..."""

    def write(self, data: bytes) -> Optional[int]: ...

    def flush(self) -> None: ...

    def read(self, size: int) -> Optional[bytes]: ...


class Printer:
    """
    ESC/POS command facade for one printer session.

    Args:
        sink: Output sink, owned exclusively by this printer.
        dialect: Printer dialect; fixed for the lifetime of the instance.
        encoding: Text encoding policy, UTF-8 with ``replace`` by default.
        read_timeout: Seconds to wait for a full query response;
            None waits forever. The deadline is checked between reads, so it
            only fires on a sink whose ``read`` returns (possibly empty) when
            no data is pending: a non-blocking file, or a serial port or
            socket with its own read timeout. A blocking device file blocks
            inside ``read`` for as long as the printer stays silent.
        bit_image_density: Density used by bit_image() when none is given.
        raster_mode: Mode used by raster() and qr_image() when none is given.

    Not thread-safe: one writer, one reader, calls in sequence.
    """

    def __init__(
        self,
        sink: PrinterSink,
        dialect: Union[PrinterDialect, str] = PrinterDialect.SNBC,
        encoding: Optional[TextEncoding] = None,
        *,
        read_timeout: Optional[float] = DEFAULT_READ_TIMEOUT,
        bit_image_density: Union[BitImageDensity, str] = BitImageDensity.D24,
        raster_mode: Union[RasterMode, str] = RasterMode.NORMAL,
        qr_box_size: int = 4,
        qr_border: int = 4,
    ) -> None:
        if read_timeout is not None and read_timeout < 0:
            raise InvalidArgumentError("read timeout", read_timeout)
        self._sink = sink
        self._dialect = PrinterDialect.parse(dialect)
        self._table: DialectTable = get_dialect_table(self._dialect)
        self._encoding = encoding or TextEncoding()
        self._read_timeout = read_timeout
        self._bit_image_density = BitImageDensity.coerce(bit_image_density)
        self._raster_mode = RasterMode.coerce(raster_mode)
        self._qr_box_size = qr_box_size
        self._qr_border = qr_border
        logger.debug(
            "Printer created: dialect=%s codec=%s/%s timeout=%s",
            self._dialect.name,
            self._encoding.codec,
            self._encoding.errors,
            read_timeout,
        )

    @classmethod
    def from_config(
        cls, sink: PrinterSink, config: Optional[Mapping[str, Any]] = None
    ) -> "Printer":
        """Build a printer from a configuration dict (see posify.config)."""
        settings: Dict[str, Any] = default_config()
        if config:
            settings.update(config)
        timeout = settings.get("read_timeout_seconds")
        return cls(
            sink,
            PrinterDialect.parse(settings["dialect"]),
            TextEncoding(settings["codec"], settings["errors"]),
            read_timeout=None if timeout is None else float(timeout),
            bit_image_density=settings["bit_image_density"],
            raster_mode=settings["raster_mode"],
            qr_box_size=int(settings["qr_box_size"]),
            qr_border=int(settings["qr_border"]),
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def dialect(self) -> PrinterDialect:
        return self._dialect

    @property
    def encoding(self) -> TextEncoding:
        return self._encoding

    @property
    def read_timeout(self) -> Optional[float]:
        return self._read_timeout

    def chain(self) -> "PrinterChain":
        return PrinterChain(self)

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    def write(self, data: bytes) -> int:
        """
        Write raw bytes, unescaped, and return ``len(data)``.

        Short writes are retried with the remaining bytes until the sink has
        accepted everything; a sink returning None is taken as having
        accepted the whole buffer.

        Raises:
            PosifyError: If the sink accepts no bytes at all.
        """
        view = memoryview(data)
        total = len(view)
        offset = 0
        while offset < total:
            written = self._sink.write(view[offset:])
            if written is None:
                break
            if written <= 0:
                logger.error("Sink stalled after %d of %d bytes", offset, total)
                raise PosifyError(
                    "Sink accepted no bytes",
                    context={"written": offset, "expected": total},
                )
            offset += written
        return total

    def _write_all(self, blocks: Iterable[bytes]) -> int:
        return sum(self.write(block) for block in blocks)

    def write_byte(self, n: int) -> int:
        if not 0 <= n <= 0xFF:
            raise InvalidArgumentError("byte value", n)
        return self.write(bytes([n]))

    def flush(self) -> None:
        self._sink.flush()

    def close(self) -> None:
        """Flush and release the sink; the sink is closed even if flushing fails."""
        try:
            self.flush()
        finally:
            close = getattr(self._sink, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> "Printer":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Hardware
    # ------------------------------------------------------------------

    def initialize(self) -> int:
        """ESC @, identical on every dialect."""
        return self.write(HW_INIT)

    def enable(self) -> int:
        return self.write(self._table.enable_command())

    def disable(self) -> int:
        return self.write(self._table.disable_command())

    def cash_drawer(self, pin: int) -> int:
        return self.write(cash_drawer(pin))

    def full_cut(self) -> int:
        return self.write(self._table.full_cut_command())

    def partial_cut(self) -> int:
        return self.write(self._table.partial_cut_command())

    def set_paper_end_limit(self, centimeters: int) -> int:
        return self.write(paper_end_limit(centimeters))

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def print(self, content: str) -> int:
        return self.write(self._encoding.encode(content))

    def println(self, content: str) -> int:
        return self.print(f"{content}\n")

    def text(self, content: str) -> int:
        return self.println(content)

    def set_underline(self, mode: Union[Underline, str, None] = None) -> int:
        return self.write(underline_command(Underline.coerce(mode)))

    def set_line_spacing(self, n: int) -> int:
        return self.write(line_spacing(n))

    def feed(self, n: int = 1) -> int:
        """Feed ``n`` lines; anything below 1 still feeds one line."""
        return self.write(CTL_LF * max(n, 1))

    def control(self, code: Union[ControlCode, str]) -> int:
        return self.write(CONTROL_CODES[ControlCode.parse(code)])

    def align(self, alignment: Union[Alignment, str]) -> int:
        return self.write(ALIGNMENTS[Alignment.parse(alignment)])

    def font(self, family: Union[FontFamily, str]) -> int:
        return self.write(FONT_FAMILIES[FontFamily.parse(family)])

    def style(self, kind: Union[TextStyle, str, None] = None) -> int:
        """Send the bold state, then the underline state; unknown kinds mean NORMAL."""
        return self._write_all(style_commands(TextStyle.coerce(kind)))

    def size(self, width: int, height: int) -> int:
        """Reset to normal size, then double width/height for a value of exactly 2."""
        n = self.write(TXT_NORMAL)
        if width == 2:
            n += self.write(TXT_2WIDTH)
        if height == 2:
            n += self.write(TXT_2HEIGHT)
        return n

    # ------------------------------------------------------------------
    # Barcodes and images
    # ------------------------------------------------------------------

    def barcode(
        self,
        code: Union[str, bytes],
        kind: BarcodeType,
        position: TextPosition = TextPosition.BELOW,
        font: Font = Font.STANDARD,
        width: int = 3,
        height: int = 162,
    ) -> int:
        """
        Print a 1D barcode.

        Sends GS w, GS h, GS H, GS f, GS k in that order, the CODE128 code set
        B selector when ``kind`` is CODE128, the raw code bytes and NUL.

        Raises:
            UnsupportedOperationError: If the dialect has no barcode width
                table. Nothing is written in that case.
        """
        params = BarcodeSpec(
            dialect=self._dialect,
            width=width,
            height=height,
            font=font,
            kind=kind,
            position=position,
        )
        prologue = params.prologue()
        raw = code.encode("utf-8") if isinstance(code, str) else bytes(code)
        return self._write_all(prologue) + self.write(encode_payload(kind, raw))

    def bit_image(
        self,
        bitmap: BitmapSource,
        density: Union[BitImageDensity, str, None] = None,
    ) -> int:
        chosen = self._bit_image_density if density is None else BitImageDensity.coerce(density)
        return self._write_all(bit_image_blocks(bitmap, chosen))

    def raster(
        self,
        bitmap: BitmapSource,
        mode: Union[RasterMode, str, None] = None,
    ) -> int:
        chosen = self._raster_mode if mode is None else RasterMode.coerce(mode)
        return self._write_all(raster_blocks(bitmap, chosen))

    def qr_image(
        self,
        data: str,
        *,
        box_size: Optional[int] = None,
        border: Optional[int] = None,
        level: str = "L",
        mode: Union[RasterMode, str, None] = None,
    ) -> int:
        """Render ``data`` as a QR code and print it as a raster image."""
        bitmap = render_qr(
            data,
            box_size=self._qr_box_size if box_size is None else box_size,
            border=self._qr_border if border is None else border,
            level=level,
        )
        return self.raster(bitmap, mode)

    # ------------------------------------------------------------------
    # Status queries
    # ------------------------------------------------------------------

    def _read_exact(self, size: int) -> bytes:
        deadline = None if self._read_timeout is None else time.monotonic() + self._read_timeout
        buffer = bytearray()
        while len(buffer) < size:
            chunk = self._sink.read(size - len(buffer))
            if chunk:
                buffer.extend(chunk)
                continue
            if deadline is not None and time.monotonic() >= deadline:
                logger.error("Status response incomplete: %d of %d bytes", len(buffer), size)
                raise ResponseTimeoutError(size, len(buffer), self._read_timeout)
            time.sleep(_POLL_INTERVAL)
        return bytes(buffer)

    def _query(self, query: StatusQuery) -> bytes:
        self.write(query.opcode)
        self.flush()
        response = self._read_exact(query.response_size)
        logger.debug("Query %s -> %s", query.name, response.hex(" "))
        return response

    def _query_text(self, query: StatusQuery) -> str:
        raw = self._query(query)
        try:
            value = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.error("Query %s returned non-text bytes", query.name)
            raise DecodingError(
                f"{query.name} response is not valid UTF-8: {e.reason}",
                raw,
                context={"query": query.name},
            ) from e
        return value.rstrip("\x00")

    def read_serial(self) -> str:
        return self._query_text(QUERY_SERIAL)

    def read_cut_count(self) -> str:
        return self._query_text(QUERY_CUT_COUNT)

    def read_rom_version(self) -> str:
        return self._query_text(QUERY_ROM_VERSION)

    def read_power_count(self) -> str:
        return self._query_text(QUERY_POWER_COUNT)

    def read_printed_length(self) -> str:
        return self._query_text(QUERY_PRINTED_LENGTH)

    def read_remaining_paper(self) -> str:
        return self._query_text(QUERY_REMAINING_PAPER)

    def is_paper_loaded(self) -> bool:
        return self._query(QUERY_PAPER_SENSOR)[0] == PAPER_PRESENT

    def read_status(self) -> str:
        """Off-line status; only the cover-open bit is interpreted."""
        status = self._query(QUERY_OFFLINE_STATUS)[0]
        if status & COVER_OPEN_MASK:
            return STATUS_COVER_OPEN
        return STATUS_OK


class PrinterChain:
    """
    Fluent view of a Printer.

    Print operations return the chain instead of a byte count; queries and
    properties pass through unchanged. Errors propagate at the failing call,
    earlier calls of the chain have already been written.
    """

    _CHAINABLE: Final[frozenset[str]] = frozenset(
        {
            "write",
            "write_byte",
            "flush",
            "initialize",
            "enable",
            "disable",
            "cash_drawer",
            "full_cut",
            "partial_cut",
            "set_paper_end_limit",
            "print",
            "println",
            "text",
            "set_underline",
            "set_line_spacing",
            "feed",
            "control",
            "align",
            "font",
            "style",
            "size",
            "barcode",
            "bit_image",
            "raster",
            "qr_image",
        }
    )

    def __init__(self, printer: Printer) -> None:
        self._printer = printer

    @property
    def printer(self) -> Printer:
        return self._printer

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._printer, name)
        if name not in self._CHAINABLE:
            return attr

        def chained(*args: Any, **kwargs: Any) -> "PrinterChain":
            attr(*args, **kwargs)
            return self

        chained.__name__ = name
        chained.__doc__ = attr.__doc__
        return chained
