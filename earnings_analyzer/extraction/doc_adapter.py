"""Text extraction from legacy Word 97-2003 (.doc) binary documents.

Processing flow:
1. Open the OLE compound file and read the WordDocument stream.
2. Read the FIB header: magic, flags, main text length, CLX location.
3. Read the CLX from the table stream named by the FIB flags.
4. Walk the piece table, decoding each piece as cp1252 or UTF-16LE.
5. Drop field instructions and map Word control marks to plain text.
"""

import io
import re
import struct
from typing import ClassVar

import olefile

from earnings_analyzer.extraction.base import BaseTextExtractor
from earnings_analyzer.extraction.exceptions import ParseFailureError


class DocAdapter(BaseTextExtractor):
    """Extracts the main document text from a binary .doc file."""

    format_name = "doc"

    _WORD_IDENT: ClassVar[int] = 0xA5EC
    _FLAG_ENCRYPTED: ClassVar[int] = 0x0100
    _FLAG_TABLE_1: ClassVar[int] = 0x0200
    _FLAGS_OFFSET: ClassVar[int] = 0x000A
    _CCP_TEXT_OFFSET: ClassVar[int] = 0x004C
    _CLX_OFFSET: ClassVar[int] = 0x01A2
    _COMPRESSED_BIT: ClassVar[int] = 0x40000000

    _FIELD_WITH_RESULT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\x13[^\x13\x14\x15]*\x14")
    _FIELD_WITHOUT_RESULT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\x13[^\x13\x14\x15]*\x15")
    _CONTROL_RE: ClassVar[re.Pattern[str]] = re.compile(r"[\x00-\x08\x0e-\x1f]")

    _CONTROL_MARKS: ClassVar[dict[int, str]] = {
        0x0D: "\n",  # paragraph end
        0x0B: "\n",  # line break
        0x0C: "\n",  # page or section break
        0x07: "\t",  # table cell end
        0x1E: "-",  # non-breaking hyphen
        0x1F: "",  # optional hyphen
    }

    def extract(self, data: bytes) -> str:
        try:
            with olefile.OleFileIO(io.BytesIO(data)) as ole:
                word = ole.openstream("WordDocument").read()
                table_name = self._table_stream_name(word)
                if not ole.exists(table_name):
                    raise ValueError(f"missing {table_name} stream")
                table = ole.openstream(table_name).read()
            text = self._read_pieces(word, table)
        except Exception as exc:
            raise ParseFailureError(self.format_name, str(exc)) from exc
        return self._clean(text)

    def _table_stream_name(self, word: bytes) -> str:
        (ident,) = struct.unpack_from("<H", word, 0)
        if ident != self._WORD_IDENT:
            raise ValueError("not a Word 97-2003 document")
        (flags,) = struct.unpack_from("<H", word, self._FLAGS_OFFSET)
        if flags & self._FLAG_ENCRYPTED:
            raise ValueError("document is encrypted")
        return "1Table" if flags & self._FLAG_TABLE_1 else "0Table"

    def _read_pieces(self, word: bytes, table: bytes) -> str:
        (ccp_text,) = struct.unpack_from("<i", word, self._CCP_TEXT_OFFSET)
        fc_clx, lcb_clx = struct.unpack_from("<II", word, self._CLX_OFFSET)
        plc = self._piece_table(table[fc_clx : fc_clx + lcb_clx])

        count = (len(plc) - 4) // 12
        cps = struct.unpack_from(f"<{count + 1}I", plc, 0)
        chunks: list[str] = []
        for i in range(count):
            (fc,) = struct.unpack_from("<I", plc, (count + 1) * 4 + i * 8 + 2)
            length = cps[i + 1] - cps[i]
            if fc & self._COMPRESSED_BIT:
                start = (fc & 0x3FFFFFFF) // 2
                chunks.append(word[start : start + length].decode("cp1252", errors="replace"))
            else:
                chunks.append(word[fc : fc + 2 * length].decode("utf-16-le", errors="replace"))

        text = "".join(chunks)
        return text[:ccp_text] if ccp_text > 0 else text

    @staticmethod
    def _piece_table(clx: bytes) -> bytes:
        pos = 0
        while pos < len(clx):
            kind = clx[pos]
            if kind == 0x01:
                (size,) = struct.unpack_from("<H", clx, pos + 1)
                pos += 3 + size
            elif kind == 0x02:
                (size,) = struct.unpack_from("<I", clx, pos + 1)
                return clx[pos + 5 : pos + 5 + size]
            else:
                break
        raise ValueError("piece table not found")

    def _clean(self, text: str) -> str:
        text = self._FIELD_WITH_RESULT_RE.sub("", text)
        text = self._FIELD_WITHOUT_RESULT_RE.sub("", text)
        text = text.translate(self._CONTROL_MARKS)
        text = self._CONTROL_RE.sub("", text)
        return text.strip()
