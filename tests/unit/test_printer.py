"""
Unit tests for posify/printer.py

Every test drives a Printer over an in-memory sink and checks the exact
bytes on the wire.
"""

from __future__ import annotations

import pytest

from posify.exceptions import (
    DecodingError,
    EncodingError,
    InvalidArgumentError,
    PosifyError,
    ResponseTimeoutError,
    UnsupportedOperationError,
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
from posify.printer import DEFAULT_READ_TIMEOUT, Printer, PrinterChain
from tests.conftest import FakeSink


class TestConstruction:
    def test_defaults(self, sink: FakeSink) -> None:
        printer = Printer(sink)
        assert printer.dialect is PrinterDialect.SNBC
        assert printer.encoding == TextEncoding("utf-8", "replace")
        assert printer.read_timeout == DEFAULT_READ_TIMEOUT

    def test_dialect_from_string(self, sink: FakeSink) -> None:
        assert Printer(sink, "B").dialect is PrinterDialect.P3

    def test_invalid_dialect(self, sink: FakeSink) -> None:
        with pytest.raises(InvalidArgumentError):
            Printer(sink, "epson")

    def test_negative_timeout_rejected(self, sink: FakeSink) -> None:
        with pytest.raises(InvalidArgumentError):
            Printer(sink, read_timeout=-1)

    def test_unknown_dialect_is_accepted(self, unknown: Printer) -> None:
        assert unknown.dialect is PrinterDialect.UNKNOWN

    def test_from_config(self, sink: FakeSink) -> None:
        printer = Printer.from_config(
            sink,
            {"dialect": "p3", "codec": "cp437", "errors": "strict", "read_timeout_seconds": None},
        )
        assert printer.dialect is PrinterDialect.P3
        assert printer.encoding == TextEncoding("cp437", "strict")
        assert printer.read_timeout is None

    def test_from_config_defaults(self, sink: FakeSink) -> None:
        printer = Printer.from_config(sink)
        assert printer.dialect is PrinterDialect.SNBC
        assert printer.read_timeout == 5.0

    def test_context_manager_flushes_and_closes(self, sink: FakeSink) -> None:
        with Printer(sink) as printer:
            printer.initialize()
        assert sink.flush_count == 1
        assert sink.closed


class TestHardware:
    def test_initialize(self, snbc: Printer, sink: FakeSink) -> None:
        assert snbc.initialize() == 2
        assert sink.written == b"\x1b\x40"

    def test_initialize_same_on_p3(self, p3: Printer, sink: FakeSink) -> None:
        p3.initialize()
        assert sink.written == b"\x1b\x40"

    @pytest.mark.parametrize(
        "dialect,enable,disable",
        [
            (PrinterDialect.SNBC, b"\x1b\x3d\x01", b"\x1b\x3d\x00"),
            (PrinterDialect.P3, b"\x1b\x3d\x01", b"\x1b\x3d\x02"),
        ],
    )
    def test_enable_disable(
        self, sink: FakeSink, dialect: PrinterDialect, enable: bytes, disable: bytes
    ) -> None:
        printer = Printer(sink, dialect)
        assert printer.enable() == 3
        assert printer.disable() == 3
        assert sink.written == enable + disable

    @pytest.mark.parametrize("operation", ["enable", "disable", "full_cut", "partial_cut"])
    def test_unknown_dialect_rejects_dialect_commands(
        self, unknown: Printer, sink: FakeSink, operation: str
    ) -> None:
        with pytest.raises(UnsupportedOperationError) as exc_info:
            getattr(unknown, operation)()
        assert exc_info.value.dialect is PrinterDialect.UNKNOWN
        assert sink.written == b""

    def test_full_cut_snbc(self, snbc: Printer, sink: FakeSink) -> None:
        assert snbc.full_cut() == 6
        assert sink.written == b"\x0a\x0a\x0a\x1d\x56\x00"

    def test_full_cut_p3_unsupported(self, p3: Printer, sink: FakeSink) -> None:
        with pytest.raises(UnsupportedOperationError):
            p3.full_cut()
        assert sink.written == b""

    def test_partial_cut_snbc(self, snbc: Printer, sink: FakeSink) -> None:
        snbc.partial_cut()
        assert sink.written == b"\x0a\x0a\x0a\x1d\x56\x01"

    def test_partial_cut_p3(self, p3: Printer, sink: FakeSink) -> None:
        assert p3.partial_cut() == 5
        assert sink.written == b"\x0a\x0a\x0a\x1b\x6d"

    @pytest.mark.parametrize(
        "pin,expected",
        [
            (5, b"\x1b\x70\x01\x19\xfa"),
            (2, b"\x1b\x70\x00\x19\xfa"),
            (0, b"\x1b\x70\x00\x19\xfa"),
            (9, b"\x1b\x70\x00\x19\xfa"),
        ],
    )
    def test_cash_drawer(self, snbc: Printer, sink: FakeSink, pin: int, expected: bytes) -> None:
        snbc.cash_drawer(pin)
        assert sink.written == expected

    def test_paper_end_limit(self, snbc: Printer, sink: FakeSink) -> None:
        assert snbc.set_paper_end_limit(1500) == 4
        assert sink.written == b"\x1d\xe6\x05\xdc"

    def test_paper_end_limit_out_of_range(self, snbc: Printer, sink: FakeSink) -> None:
        with pytest.raises(InvalidArgumentError):
            snbc.set_paper_end_limit(70000)
        assert sink.written == b""


class TestText:
    def test_print_utf8(self, snbc: Printer, sink: FakeSink) -> None:
        assert snbc.print("héllo") == 6
        assert sink.written == "héllo".encode("utf-8")

    def test_println_appends_lf(self, snbc: Printer, sink: FakeSink) -> None:
        assert snbc.println("hi") == 3
        assert sink.written == b"hi\n"

    def test_text_is_println(self, snbc: Printer, sink: FakeSink) -> None:
        snbc.text("receipt")
        assert sink.written == b"receipt\n"

    def test_empty_print_writes_nothing(self, snbc: Printer, sink: FakeSink) -> None:
        assert snbc.print("") == 0
        assert sink.written == b""

    def test_replace_trap(self, sink: FakeSink) -> None:
        printer = Printer(sink, encoding=TextEncoding("ascii", "replace"))
        printer.print("naïve")
        assert sink.written == b"na?ve"

    def test_strict_trap_raises(self, sink: FakeSink) -> None:
        printer = Printer(sink, encoding=TextEncoding("ascii", "strict"))
        with pytest.raises(EncodingError):
            printer.print("Привет")
        assert sink.written == b""

    @pytest.mark.parametrize(
        "mode,expected",
        [
            (Underline.OFF, b"\x1b\x2d\x00"),
            (Underline.ON, b"\x1b\x2d\x01"),
            (Underline.THICK, b"\x1b\x2d\x02"),
            ("thick", b"\x1b\x2d\x02"),
            ("WAVY", b"\x1b\x2d\x00"),
            (None, b"\x1b\x2d\x00"),
        ],
    )
    def test_set_underline(self, snbc: Printer, sink: FakeSink, mode, expected: bytes) -> None:
        snbc.set_underline(mode)
        assert sink.written == expected

    @pytest.mark.parametrize(
        "n,expected",
        [
            (0, b"\x1b\x33\x00"),
            (30, b"\x1b\x33\x1e"),
            (255, b"\x1b\x33\xff"),
            (256, b"\x1b\x32"),
            (-1, b"\x1b\x32"),
        ],
    )
    def test_set_line_spacing(self, snbc: Printer, sink: FakeSink, n: int, expected: bytes) -> None:
        snbc.set_line_spacing(n)
        assert sink.written == expected

    @pytest.mark.parametrize("n,count", [(3, 3), (1, 1), (0, 1), (-5, 1)])
    def test_feed(self, snbc: Printer, sink: FakeSink, n: int, count: int) -> None:
        assert snbc.feed(n) == count
        assert sink.written == b"\x0a" * count

    def test_feed_default(self, snbc: Printer, sink: FakeSink) -> None:
        snbc.feed()
        assert sink.written == b"\x0a"

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("LF", b"\x0a"),
            ("FF", b"\x0c"),
            ("CR", b"\x0d"),
            ("HT", b"\x09"),
            (ControlCode.VT, b"\x0b"),
        ],
    )
    def test_control(self, snbc: Printer, sink: FakeSink, code, expected: bytes) -> None:
        assert snbc.control(code) == 1
        assert sink.written == expected

    def test_control_invalid(self, snbc: Printer, sink: FakeSink) -> None:
        with pytest.raises(InvalidArgumentError):
            snbc.control("BEL")
        assert sink.written == b""

    @pytest.mark.parametrize(
        "alignment,expected",
        [
            ("LT", b"\x1b\x61\x00"),
            ("LEFT", b"\x1b\x61\x00"),
            ("CT", b"\x1b\x61\x01"),
            ("center", b"\x1b\x61\x01"),
            ("RT", b"\x1b\x61\x02"),
            (Alignment.RIGHT, b"\x1b\x61\x02"),
        ],
    )
    def test_align(self, snbc: Printer, sink: FakeSink, alignment, expected: bytes) -> None:
        snbc.align(alignment)
        assert sink.written == expected

    def test_align_invalid(self, snbc: Printer, sink: FakeSink) -> None:
        with pytest.raises(InvalidArgumentError):
            snbc.align("JUSTIFY")
        assert sink.written == b""

    @pytest.mark.parametrize(
        "family,expected",
        [
            ("A", b"\x1b\x4d\x00"),
            ("b", b"\x1b\x4d\x01"),
            (FontFamily.C, b"\x1b\x4d\x02"),
        ],
    )
    def test_font(self, snbc: Printer, sink: FakeSink, family, expected: bytes) -> None:
        snbc.font(family)
        assert sink.written == expected

    def test_font_invalid(self, snbc: Printer, sink: FakeSink) -> None:
        with pytest.raises(InvalidArgumentError):
            snbc.font("D")
        assert sink.written == b""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("B", b"\x1b\x45\x01" + b"\x1b\x2d\x00"),
            ("U", b"\x1b\x45\x00" + b"\x1b\x2d\x01"),
            ("U2", b"\x1b\x45\x00" + b"\x1b\x2d\x02"),
            ("BU", b"\x1b\x45\x01" + b"\x1b\x2d\x01"),
            ("BU2", b"\x1b\x45\x01" + b"\x1b\x2d\x02"),
            (TextStyle.NORMAL, b"\x1b\x45\x00" + b"\x1b\x2d\x00"),
            ("ITALIC", b"\x1b\x45\x00" + b"\x1b\x2d\x00"),
        ],
    )
    def test_style(self, snbc: Printer, sink: FakeSink, kind, expected: bytes) -> None:
        assert snbc.style(kind) == 6
        assert sink.written == expected

    @pytest.mark.parametrize(
        "width,height,expected",
        [
            (1, 1, b"\x1b\x21\x00"),
            (2, 1, b"\x1b\x21\x00\x1b\x21\x20"),
            (1, 2, b"\x1b\x21\x00\x1b\x21\x10"),
            (2, 2, b"\x1b\x21\x00\x1b\x21\x20\x1b\x21\x10"),
            (3, 8, b"\x1b\x21\x00"),
        ],
    )
    def test_size(
        self, snbc: Printer, sink: FakeSink, width: int, height: int, expected: bytes
    ) -> None:
        assert snbc.size(width, height) == len(expected)
        assert sink.written == expected


class TestBarcode:
    def test_ean13_snbc(self, snbc: Printer, sink: FakeSink) -> None:
        n = snbc.barcode("4006381333931", BarcodeType.EAN13, TextPosition.BELOW, Font.STANDARD, 3, 162)
        expected = (
            b"\x1d\x77\x03"
            b"\x1d\x68\xa2"
            b"\x1d\x48\x02"
            b"\x1d\x66\x00"
            b"\x1d\x6b\x02"
            b"4006381333931\x00"
        )
        assert sink.written == expected
        assert n == len(expected)

    def test_code128_p3(self, p3: Printer, sink: FakeSink) -> None:
        p3.barcode("ABC-123", BarcodeType.CODE128, TextPosition.ABOVE, Font.FONT_B, 2, 80)
        assert sink.written == (
            b"\x1d\x77\x02"
            b"\x1d\x68\x50"
            b"\x1d\x48\x01"
            b"\x1d\x66\x01"
            b"\x1d\x6b\x08"
            b"\x7b\x42ABC-123\x00"
        )

    @pytest.mark.parametrize(
        "dialect,width,sent",
        [
            (PrinterDialect.SNBC, 0, 2),
            (PrinterDialect.SNBC, 1, 2),
            (PrinterDialect.SNBC, 255, 2),
            (PrinterDialect.SNBC, 7, 2),
            (PrinterDialect.SNBC, 6, 6),
            (PrinterDialect.P3, 1, 1),
            (PrinterDialect.P3, 0, 3),
            (PrinterDialect.P3, 9, 3),
            (PrinterDialect.P3, 255, 3),
        ],
    )
    def test_width_fallback(
        self, sink: FakeSink, dialect: PrinterDialect, width: int, sent: int
    ) -> None:
        Printer(sink, dialect).barcode("1", BarcodeType.EAN13, TextPosition.OFF, Font.STANDARD, width, 50)
        assert sink.written[:3] == bytes([0x1D, 0x77, sent])

    @pytest.mark.parametrize(
        "kind", [k for k in BarcodeType if k is not BarcodeType.CODE128]
    )
    def test_code_set_selector_only_for_code128(
        self, snbc: Printer, sink: FakeSink, kind: BarcodeType
    ) -> None:
        snbc.barcode("1234567", kind, TextPosition.OFF, Font.STANDARD, 2, 50)
        assert b"\x7b\x42" not in sink.written

    @pytest.mark.parametrize("height", [256, 300, -1])
    def test_height_outside_byte_rejected(self, snbc: Printer, sink: FakeSink, height: int) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            snbc.barcode("1", BarcodeType.EAN13, TextPosition.OFF, Font.STANDARD, 2, height)
        assert exc_info.value.argument == "barcode height"
        assert sink.written == b""

    @pytest.mark.parametrize("height", [0, 1, 255])
    def test_height_sent_unclamped(self, snbc: Printer, sink: FakeSink, height: int) -> None:
        snbc.barcode("1", BarcodeType.EAN13, TextPosition.OFF, Font.STANDARD, 2, height)
        assert sink.written[3:6] == bytes([0x1D, 0x68, height])

    def test_unmapped_type_uses_ean13_byte(self, snbc: Printer, sink: FakeSink) -> None:
        snbc.barcode("12345", BarcodeType.UPCA, TextPosition.BOTH, Font.COMPRESSED, 2, 50)
        assert sink.written[12:15] == b"\x1d\x6b\x02"
        assert sink.written.endswith(b"12345\x00")

    def test_unknown_dialect_writes_nothing(self, unknown: Printer, sink: FakeSink) -> None:
        with pytest.raises(UnsupportedOperationError):
            unknown.barcode("123", BarcodeType.EAN13)
        assert sink.written == b""

    def test_bytes_payload(self, snbc: Printer, sink: FakeSink) -> None:
        snbc.barcode(b"\x30\x31", BarcodeType.EAN13)
        assert sink.written.endswith(b"\x1d\x6b\x02\x30\x31\x00")


class TestImages:
    def test_bit_image_default_d24(self, snbc: Printer, sink: FakeSink, checker_bitmap) -> None:
        n = snbc.bit_image(checker_bitmap)
        column_left = b"\xff\x00\x00"
        column_right = b"\x00\xff\x00"
        expected = (
            b"\x1b\x33\x00"
            + b"\x1b\x2a\x21"
            + b"\x10\x00"
            + column_left * 8
            + column_right * 8
            + b"\x0a"
        )
        assert sink.written == expected
        assert n == len(expected)

    def test_bit_image_s8(self, snbc: Printer, sink: FakeSink, checker_bitmap) -> None:
        snbc.bit_image(checker_bitmap, BitImageDensity.S8)
        assert sink.written == (
            b"\x1b\x33\x00"
            + b"\x1b\x2a\x00\x10\x00"
            + b"\xff" * 8
            + b"\x00" * 8
            + b"\x0a"
            + b"\x1b\x2a\x00\x10\x00"
            + b"\x00" * 8
            + b"\xff" * 8
            + b"\x0a"
        )

    def test_bit_image_unknown_density_uses_d24(
        self, snbc: Printer, sink: FakeSink, checker_bitmap
    ) -> None:
        snbc.bit_image(checker_bitmap, "Q48")
        assert sink.written[3:6] == b"\x1b\x2a\x21"

    @pytest.mark.parametrize(
        "mode,m",
        [
            (None, 0x00),
            (RasterMode.DOUBLE_WIDE, 0x01),
            ("DH", 0x02),
            ("QD", 0x03),
            ("bogus", 0x00),
        ],
    )
    def test_raster(self, snbc: Printer, sink: FakeSink, checker_bitmap, mode, m: int) -> None:
        n = snbc.raster(checker_bitmap, mode)
        expected = (
            bytes([0x1D, 0x76, 0x30, m])
            + b"\x02\x00"
            + b"\x10\x00"
            + b"\xff\x00" * 8
            + b"\x00\xff" * 8
        )
        assert sink.written == expected
        assert n == len(expected)

    def test_qr_image_is_raster(self, snbc: Printer, sink: FakeSink) -> None:
        n = snbc.qr_image("https://example.com", box_size=2, border=1)
        assert sink.written.startswith(b"\x1d\x76\x30\x00")
        width_bytes = int.from_bytes(sink.written[4:6], "little")
        height = int.from_bytes(sink.written[6:8], "little")
        assert n == 8 + width_bytes * height

    def test_qr_image_empty_data(self, snbc: Printer, sink: FakeSink) -> None:
        with pytest.raises(InvalidArgumentError):
            snbc.qr_image("")
        assert sink.written == b""


class TestRawAccess:
    def test_write_raw(self, snbc: Printer, sink: FakeSink) -> None:
        assert snbc.write(b"\x1b\x40raw") == 5
        assert sink.written == b"\x1b\x40raw"

    def test_write_byte(self, snbc: Printer, sink: FakeSink) -> None:
        assert snbc.write_byte(0x1B) == 1
        assert sink.written == b"\x1b"

    @pytest.mark.parametrize("value", [-1, 256])
    def test_write_byte_out_of_range(self, snbc: Printer, value: int) -> None:
        with pytest.raises(InvalidArgumentError):
            snbc.write_byte(value)

    def test_flush(self, snbc: Printer, sink: FakeSink) -> None:
        snbc.flush()
        assert sink.flush_count == 1

    def test_short_writes_are_completed(self) -> None:
        class ShortWriteSink(FakeSink):
            def write(self, data: bytes) -> int:
                return super().write(bytes(data[:4]))

        sink = ShortWriteSink()
        printer = Printer(sink)
        assert printer.partial_cut() == 6
        assert sink.written == b"\x0a\x0a\x0a\x1d\x56\x01"

    def test_short_writes_keep_barcode_intact(self) -> None:
        class OneByteSink(FakeSink):
            def write(self, data: bytes) -> int:
                return super().write(bytes(data[:1]))

        sink = OneByteSink()
        n = Printer(sink).barcode("ABC", BarcodeType.CODE128, TextPosition.OFF, Font.STANDARD, 2, 50)
        assert sink.written.endswith(b"\x1d\x6b\x08\x7b\x42ABC\x00")
        assert n == len(sink.written)

    def test_stalled_sink_raises(self) -> None:
        class StalledSink(FakeSink):
            def write(self, data: bytes) -> int:
                return 0

        with pytest.raises(PosifyError) as exc_info:
            Printer(StalledSink()).initialize()
        assert exc_info.value.context == {"written": 0, "expected": 2}

    def test_close_releases_sink_when_flush_fails(self) -> None:
        class BrokenFlushSink(FakeSink):
            def flush(self) -> None:
                raise OSError("device gone")

        sink = BrokenFlushSink()
        with pytest.raises(OSError):
            Printer(sink).close()
        assert sink.closed

    def test_sink_without_write_count(self) -> None:
        class NoneSink(FakeSink):
            def write(self, data: bytes) -> None:  # type: ignore[override]
                super().write(data)

        printer = Printer(NoneSink())
        assert printer.println("abc") == 4


class TestQueries:
    @pytest.mark.parametrize(
        "method,opcode,response,expected",
        [
            ("read_serial", b"\x1c\xea\x52", b"SN0001234".ljust(16, b"\x00"), "SN0001234"),
            ("read_cut_count", b"\x1d\xe2", b"0000000000001234", "0000000000001234"),
            ("read_rom_version", b"\x1d\x49\x03", b"V1.2", "V1.2"),
            ("read_power_count", b"\x1d\xe5", b"42".ljust(8, b"\x00"), "42"),
            ("read_printed_length", b"\x1d\xe3", b"00012345", "00012345"),
            ("read_remaining_paper", b"\x1d\xe1", b"1500\x00\x00\x00\x00", "1500"),
        ],
    )
    def test_text_queries(
        self, make_printer, method: str, opcode: bytes, response: bytes, expected: str
    ) -> None:
        printer = make_printer(response=response)
        assert getattr(printer, method)() == expected
        assert printer._sink.written == opcode
        assert printer._sink.flush_count == 1

    def test_short_reads_are_accumulated(self) -> None:
        sink = FakeSink(b"ABCDEFGH", chunk_size=3)
        printer = Printer(sink, read_timeout=1.0)
        assert printer.read_power_count() == "ABCDEFGH"
        assert sink.reads == 3

    def test_invalid_utf8_response(self, make_printer) -> None:
        printer = make_printer(response=b"\xff\xfe\x00\x01")
        with pytest.raises(DecodingError) as exc_info:
            printer.read_rom_version()
        assert exc_info.value.raw == b"\xff\xfe\x00\x01"

    @pytest.mark.parametrize("response,expected", [(b"\x00", True), (b"\x03", False), (b"\x0c", False)])
    def test_is_paper_loaded(self, make_printer, response: bytes, expected: bool) -> None:
        printer = make_printer(response=response)
        assert printer.is_paper_loaded() is expected
        assert printer._sink.written == b"\x1d\x72\x01"

    @pytest.mark.parametrize(
        "response,expected",
        [
            (b"\x04", "Cover open"),
            (b"\x16", "Cover open"),
            (b"\x00", "No Errors"),
            (b"\x12", "No Errors"),
        ],
    )
    def test_read_status(self, make_printer, response: bytes, expected: str) -> None:
        printer = make_printer(response=response)
        assert printer.read_status() == expected
        assert printer._sink.written == b"\x10\x04\x02"

    def test_timeout_when_device_silent(self, make_printer) -> None:
        printer = make_printer(response=b"", read_timeout=0)
        with pytest.raises(ResponseTimeoutError) as exc_info:
            printer.read_serial()
        assert exc_info.value.expected == 16
        assert exc_info.value.received == 0
        assert isinstance(exc_info.value, TimeoutError)

    def test_timeout_on_partial_response(self, make_printer) -> None:
        printer = make_printer(response=b"V1", read_timeout=0.02)
        with pytest.raises(ResponseTimeoutError) as exc_info:
            printer.read_rom_version()
        assert exc_info.value.received == 2

    def test_timeout_with_non_blocking_sink(self) -> None:
        class NonBlockingSink(FakeSink):
            def read(self, size: int) -> None:
                self.reads += 1
                return None

        sink = NonBlockingSink()
        printer = Printer(sink, read_timeout=0.02)
        with pytest.raises(ResponseTimeoutError):
            printer.read_status()
        assert sink.reads >= 1

    def test_queries_work_on_unknown_dialect(self, make_printer) -> None:
        printer = make_printer(PrinterDialect.UNKNOWN, response=b"\x00")
        assert printer.is_paper_loaded() is True


class TestChain:
    def test_chain_returns_chain(self, snbc: Printer) -> None:
        chain = snbc.chain()
        assert isinstance(chain, PrinterChain)
        assert chain.initialize() is chain
        assert chain.printer is snbc

    def test_chain_round_trip(self, snbc: Printer, sink: FakeSink) -> None:
        (snbc.chain()
            .initialize()
            .enable()
            .print("hello")
            .feed(1)
            .partial_cut()
            .flush())
        assert sink.written == bytes.fromhex("1b40" "1b3d01") + b"hello" + bytes.fromhex(
            "0a" "0a0a0a1d5601"
        )

    def test_chain_queries_return_values(self, make_printer) -> None:
        printer = make_printer(response=b"\x04")
        assert printer.chain().read_status() == "Cover open"

    def test_chain_properties_pass_through(self, p3: Printer) -> None:
        assert p3.chain().dialect is PrinterDialect.P3

    def test_chain_stops_at_error(self, p3: Printer, sink: FakeSink) -> None:
        chain = p3.chain().initialize()
        with pytest.raises(UnsupportedOperationError):
            chain.full_cut()
        assert sink.written == b"\x1b\x40"


class TestEndToEnd:
    def test_snbc_receipt(self, snbc: Printer, sink: FakeSink) -> None:
        total = 0
        total += snbc.initialize()
        total += snbc.enable()
        total += snbc.print("hello")
        total += snbc.feed(1)
        total += snbc.partial_cut()
        expected = bytes.fromhex("1b401b3d01") + b"hello" + bytes.fromhex("0a0a0a0a1d5601")
        assert sink.written == expected
        assert total == len(expected)

    def test_p3_styled_receipt(self, p3: Printer, sink: FakeSink) -> None:
        p3.initialize()
        p3.align("CT")
        p3.style("B")
        p3.size(2, 2)
        p3.println("TOTAL")
        p3.partial_cut()
        assert sink.written == (
            b"\x1b\x40"
            b"\x1b\x61\x01"
            b"\x1b\x45\x01\x1b\x2d\x00"
            b"\x1b\x21\x00\x1b\x21\x20\x1b\x21\x10"
            b"TOTAL\n"
            b"\x0a\x0a\x0a\x1b\x6d"
        )
