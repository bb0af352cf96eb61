import io
import struct
import zipfile

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from earnings_analyzer.config.settings import Settings

TRANSCRIPT_TEXT = "Revenue was $10M, up 5% YoY. EPS: $0.50."

_DOCX_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
    "<w:body>{paragraphs}</w:body></w:document>"
)


def build_docx(paragraphs: list[str]) -> bytes:
    """Build a minimal .docx container with one run per paragraph."""
    body = "".join(f"<w:p><w:r><w:t>{text}</w:t></w:r></w:p>" for text in paragraphs)
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        archive.writestr("[Content_Types].xml", "<Types/>")
        archive.writestr("word/document.xml", _DOCX_XML.format(paragraphs=body))
    return buf.getvalue()


def build_word_streams(text: str, flags: int = 0x0200) -> dict[str, bytes]:
    """Build WordDocument and table streams holding one compressed text piece."""
    text_offset = 0x200
    encoded = text.encode("cp1252")
    word = bytearray(text_offset) + encoded
    struct.pack_into("<H", word, 0x0000, 0xA5EC)
    struct.pack_into("<H", word, 0x000A, flags)
    struct.pack_into("<i", word, 0x004C, len(text))

    fc = (text_offset * 2) | 0x40000000
    plc = struct.pack("<II", 0, len(text)) + struct.pack("<HIH", 0, fc, 0)
    clx = b"\x02" + struct.pack("<I", len(plc)) + plc
    struct.pack_into("<II", word, 0x01A2, 0, len(clx))

    table_name = "1Table" if flags & 0x0200 else "0Table"
    return {"WordDocument": bytes(word), table_name: clx}


_SECTOR = 512
_END_OF_CHAIN = 0xFFFFFFFE
_FREE_SECTOR = 0xFFFFFFFF
_FAT_SECTOR = 0xFFFFFFFD
_NO_STREAM = 0xFFFFFFFF


def _directory_entry(name: str, kind: int, child: int, right: int, start: int, size: int) -> bytes:
    entry = bytearray(128)
    encoded = (name + "\0").encode("utf-16-le") if name else b""
    entry[: len(encoded)] = encoded
    struct.pack_into("<HBBIII", entry, 64, len(encoded), kind, 1, _NO_STREAM, right, child)
    struct.pack_into("<II", entry, 116, start, size)
    return bytes(entry)


def build_ole_file(streams: dict[str, bytes]) -> bytes:
    """Pack up to three streams into a version 3 compound file.

    Streams are padded to at least 4096 bytes so they live in regular
    sectors. Layout: header, one FAT sector, one directory sector, stream data.
    """
    names = sorted(streams, key=lambda n: (len(n), n.upper()))
    fat = [_FAT_SECTOR, _END_OF_CHAIN]
    data = bytearray()
    entries = [_directory_entry("Root Entry", 5, 1, _NO_STREAM, _END_OF_CHAIN, 0)]
    for index, name in enumerate(names, start=1):
        size = max(4096, -(-len(streams[name]) // _SECTOR) * _SECTOR)
        start = len(fat)
        fat.extend(range(start + 1, start + size // _SECTOR))
        fat.append(_END_OF_CHAIN)
        data += streams[name].ljust(size, b"\0")
        right = index + 1 if index < len(names) else _NO_STREAM
        entries.append(_directory_entry(name, 2, _NO_STREAM, right, start, size))
    while len(entries) < 4:
        entries.append(_directory_entry("", 0, _NO_STREAM, _NO_STREAM, 0, 0))

    header = bytearray(_SECTOR)
    header[0:8] = bytes.fromhex("D0CF11E0A1B11AE1")
    struct.pack_into("<HHHHH", header, 24, 0x003E, 0x0003, 0xFFFE, 9, 6)
    struct.pack_into(
        "<IIIIIIIII", header, 40, 0, 1, 1, 0, 4096, _END_OF_CHAIN, 0, _END_OF_CHAIN, 0
    )
    difat = [0] + [_FREE_SECTOR] * 108
    struct.pack_into("<109I", header, 76, *difat)

    fat_sector = struct.pack("<128I", *(fat + [_FREE_SECTOR] * (128 - len(fat))))
    return bytes(header) + fat_sector + b"".join(entries) + bytes(data)


@pytest.fixture(autouse=True)
def _isolate_provider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GEMINI_API_KEY", "OPENAI_API_KEY", "PDF_ENGINE", "DEFAULT_PROVIDER"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, TRANSCRIPT_TEXT)
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    return build_docx(["Operator: Welcome to the call.", TRANSCRIPT_TEXT])


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    return build_docx([])


@pytest.fixture()
def transcript_text() -> str:
    return TRANSCRIPT_TEXT


@pytest.fixture()
def word_streams() -> dict[str, bytes]:
    """Streams of a .doc whose text has a paragraph mark, a field and a table cell."""
    text = "Q3 results\r" + '\x13 HYPERLINK "http://ir.example.com" \x14Investor site\x15\r' + "EPS\x07$0.50\x07\r"
    return build_word_streams(text)


@pytest.fixture()
def blank_word_streams() -> dict[str, bytes]:
    return build_word_streams("\r\r")


@pytest.fixture()
def encrypted_word_streams() -> dict[str, bytes]:
    return build_word_streams("secret", flags=0x0200 | 0x0100)


@pytest.fixture()
def sample_doc_bytes(word_streams: dict[str, bytes]) -> bytes:
    return build_ole_file(word_streams)


@pytest.fixture()
def blank_doc_bytes(blank_word_streams: dict[str, bytes]) -> bytes:
    return build_ole_file(blank_word_streams)


@pytest.fixture()
def doc_without_table_bytes(word_streams: dict[str, bytes]) -> bytes:
    return build_ole_file({"WordDocument": word_streams["WordDocument"]})
