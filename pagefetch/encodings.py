"""Character encodings named by the HTML encoding standard."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Encoding(Enum):
    NULL = ""
    UTF_8 = "utf-8"
    IBM866 = "ibm866"
    ISO_8859_2 = "iso-8859-2"
    ISO_8859_3 = "iso-8859-3"
    ISO_8859_4 = "iso-8859-4"
    ISO_8859_5 = "iso-8859-5"
    ISO_8859_6 = "iso-8859-6"
    ISO_8859_7 = "iso-8859-7"
    ISO_8859_8 = "iso-8859-8"
    ISO_8859_8_I = "iso-8859-8-i"
    ISO_8859_10 = "iso-8859-10"
    ISO_8859_13 = "iso-8859-13"
    ISO_8859_14 = "iso-8859-14"
    ISO_8859_15 = "iso-8859-15"
    ISO_8859_16 = "iso-8859-16"
    KOI8_R = "koi8-r"
    KOI8_U = "koi8-u"
    MACINTOSH = "macintosh"
    WINDOWS_874 = "windows-874"
    WINDOWS_1250 = "windows-1250"
    WINDOWS_1251 = "windows-1251"
    WINDOWS_1252 = "windows-1252"
    WINDOWS_1253 = "windows-1253"
    WINDOWS_1254 = "windows-1254"
    WINDOWS_1255 = "windows-1255"
    WINDOWS_1256 = "windows-1256"
    WINDOWS_1257 = "windows-1257"
    WINDOWS_1258 = "windows-1258"
    X_MAC_CYRILLIC = "x-mac-cyrillic"
    GBK = "gbk"
    GB18030 = "gb18030"
    BIG5 = "big5"
    EUC_JP = "euc-jp"
    ISO_2022_JP = "iso-2022-jp"
    SHIFT_JIS = "shift_jis"
    EUC_KR = "euc-kr"
    REPLACEMENT = "replacement"
    UTF_16BE = "utf-16be"
    UTF_16LE = "utf-16le"
    X_USER_DEFINED = "x-user-defined"


class Confidence(Enum):
    TENTATIVE = "tentative"
    CERTAIN = "certain"


@dataclass
class EncodedBytes:
    """Raw document bytes with the encoding they are believed to use."""

    data: bytes
    encoding: Encoding = Encoding.NULL
    confidence: Confidence = Confidence.CERTAIN


_LABELS: dict[Encoding, tuple[str, ...]] = {
    Encoding.UTF_8: ("unicode-1-1-utf-8", "unicode11utf8", "unicode20utf8",
                     "utf-8", "utf8", "x-unicode20utf8"),
    Encoding.IBM866: ("866", "cp866", "csibm866", "ibm866"),
    Encoding.ISO_8859_2: ("csisolatin2", "iso-8859-2", "iso-ir-101", "iso8859-2",
                          "iso88592", "iso_8859-2", "iso_8859-2:1987", "l2", "latin2"),
    Encoding.ISO_8859_3: ("csisolatin3", "iso-8859-3", "iso-ir-109", "iso8859-3",
                          "iso88593", "iso_8859-3", "iso_8859-3:1988", "l3", "latin3"),
    Encoding.ISO_8859_4: ("csisolatin4", "iso-8859-4", "iso-ir-110", "iso8859-4",
                          "iso88594", "iso_8859-4", "iso_8859-4:1988", "l4", "latin4"),
    Encoding.ISO_8859_5: ("csisolatincyrillic", "cyrillic", "iso-8859-5", "iso-ir-144",
                          "iso8859-5", "iso88595", "iso_8859-5", "iso_8859-5:1988"),
    Encoding.ISO_8859_6: ("arabic", "asmo-708", "csiso88596e", "csiso88596i",
                          "csisolatinarabic", "ecma-114", "iso-8859-6", "iso-8859-6-e",
                          "iso-8859-6-i", "iso-ir-127", "iso8859-6", "iso88596",
                          "iso_8859-6", "iso_8859-6:1987"),
    Encoding.ISO_8859_7: ("csisolatingreek", "ecma-118", "elot_928", "greek", "greek8",
                          "iso-8859-7", "iso-ir-126", "iso8859-7", "iso88597",
                          "iso_8859-7", "iso_8859-7:1987", "sun_eu_greek"),
    Encoding.ISO_8859_8: ("csiso88598e", "csisolatinhebrew", "hebrew", "iso-8859-8",
                          "iso-8859-8-e", "iso-ir-138", "iso8859-8", "iso88598",
                          "iso_8859-8", "iso_8859-8:1988", "visual"),
    Encoding.ISO_8859_8_I: ("csiso88598i", "iso-8859-8-i", "logical"),
    Encoding.ISO_8859_10: ("csisolatin6", "iso-8859-10", "iso-ir-157", "iso8859-10",
                           "iso885910", "l6", "latin6"),
    Encoding.ISO_8859_13: ("iso-8859-13", "iso8859-13", "iso885913"),
    Encoding.ISO_8859_14: ("iso-8859-14", "iso8859-14", "iso885914"),
    Encoding.ISO_8859_15: ("csisolatin9", "iso-8859-15", "iso8859-15", "iso885915",
                           "iso_8859-15", "l9"),
    Encoding.ISO_8859_16: ("iso-8859-16",),
    Encoding.KOI8_R: ("cskoi8r", "koi", "koi8", "koi8-r", "koi8_r"),
    Encoding.KOI8_U: ("koi8-ru", "koi8-u"),
    Encoding.MACINTOSH: ("csmacintosh", "mac", "macintosh", "x-mac-roman"),
    Encoding.WINDOWS_874: ("dos-874", "iso-8859-11", "iso8859-11", "iso885911",
                           "tis-620", "windows-874"),
    Encoding.WINDOWS_1250: ("cp1250", "windows-1250", "x-cp1250"),
    Encoding.WINDOWS_1251: ("cp1251", "windows-1251", "x-cp1251"),
    Encoding.WINDOWS_1252: ("ansi_x3.4-1968", "ascii", "cp1252", "cp819", "csisolatin1",
                            "ibm819", "iso-8859-1", "iso-ir-100", "iso8859-1", "iso88591",
                            "iso_8859-1", "iso_8859-1:1987", "l1", "latin1", "us-ascii",
                            "windows-1252", "x-cp1252"),
    Encoding.WINDOWS_1253: ("cp1253", "windows-1253", "x-cp1253"),
    Encoding.WINDOWS_1254: ("cp1254", "csisolatin5", "iso-8859-9", "iso-ir-148",
                            "iso8859-9", "iso88599", "iso_8859-9", "iso_8859-9:1989",
                            "l5", "latin5", "windows-1254", "x-cp1254"),
    Encoding.WINDOWS_1255: ("cp1255", "windows-1255", "x-cp1255"),
    Encoding.WINDOWS_1256: ("cp1256", "windows-1256", "x-cp1256"),
    Encoding.WINDOWS_1257: ("cp1257", "windows-1257", "x-cp1257"),
    Encoding.WINDOWS_1258: ("cp1258", "windows-1258", "x-cp1258"),
    Encoding.X_MAC_CYRILLIC: ("x-mac-cyrillic", "x-mac-ukrainian"),
    Encoding.GBK: ("chinese", "csgb2312", "csiso58gb231280", "gb2312", "gb_2312",
                   "gb_2312-80", "gbk", "iso-ir-58", "x-gbk"),
    Encoding.GB18030: ("gb18030",),
    Encoding.BIG5: ("big5", "big5-hkscs", "cn-big5", "csbig5", "x-x-big5"),
    Encoding.EUC_JP: ("cseucpkdfmtjapanese", "euc-jp", "x-euc-jp"),
    Encoding.ISO_2022_JP: ("csiso2022jp", "iso-2022-jp"),
    Encoding.SHIFT_JIS: ("csshiftjis", "ms932", "ms_kanji", "shift-jis", "shift_jis",
                         "sjis", "windows-31j", "x-sjis"),
    Encoding.EUC_KR: ("cseuckr", "csksc56011987", "euc-kr", "iso-ir-149", "korean",
                      "ks_c_5601-1987", "ks_c_5601-1989", "ksc5601", "ksc_5601",
                      "windows-949"),
    Encoding.REPLACEMENT: ("csiso2022kr", "hz-gb-2312", "iso-2022-cn", "iso-2022-cn-ext",
                           "iso-2022-kr", "replacement"),
    Encoding.UTF_16BE: ("unicodefffe", "utf-16be"),
    Encoding.UTF_16LE: ("csunicode", "iso-10646-ucs-2", "ucs-2", "unicode", "unicodefeff",
                        "utf-16", "utf-16le"),
    Encoding.X_USER_DEFINED: ("x-user-defined",),
}

_BY_LABEL = {label: enc for enc, labels in _LABELS.items() for label in labels}

_CODECS = {
    Encoding.UTF_8: "utf-8",
    Encoding.IBM866: "cp866",
    Encoding.ISO_8859_2: "iso8859_2",
    Encoding.ISO_8859_3: "iso8859_3",
    Encoding.ISO_8859_4: "iso8859_4",
    Encoding.ISO_8859_5: "iso8859_5",
    Encoding.ISO_8859_6: "iso8859_6",
    Encoding.ISO_8859_7: "iso8859_7",
    Encoding.ISO_8859_8: "iso8859_8",
    Encoding.ISO_8859_8_I: "iso8859_8",
    Encoding.ISO_8859_10: "iso8859_10",
    Encoding.ISO_8859_13: "iso8859_13",
    Encoding.ISO_8859_14: "iso8859_14",
    Encoding.ISO_8859_15: "iso8859_15",
    Encoding.ISO_8859_16: "iso8859_16",
    Encoding.KOI8_R: "koi8_r",
    Encoding.KOI8_U: "koi8_u",
    Encoding.MACINTOSH: "mac_roman",
    Encoding.WINDOWS_874: "cp874",
    Encoding.WINDOWS_1250: "cp1250",
    Encoding.WINDOWS_1251: "cp1251",
    Encoding.WINDOWS_1252: "cp1252",
    Encoding.WINDOWS_1253: "cp1253",
    Encoding.WINDOWS_1254: "cp1254",
    Encoding.WINDOWS_1255: "cp1255",
    Encoding.WINDOWS_1256: "cp1256",
    Encoding.WINDOWS_1257: "cp1257",
    Encoding.WINDOWS_1258: "cp1258",
    Encoding.X_MAC_CYRILLIC: "mac_cyrillic",
    Encoding.GBK: "gbk",
    Encoding.GB18030: "gb18030",
    Encoding.BIG5: "big5hkscs",
    Encoding.EUC_JP: "euc_jp",
    Encoding.ISO_2022_JP: "iso2022_jp",
    Encoding.SHIFT_JIS: "cp932",
    Encoding.EUC_KR: "cp949",
    Encoding.UTF_16BE: "utf-16-be",
    Encoding.UTF_16LE: "utf-16-le",
}

_ASCII_WHITESPACE = " \t\n\r\f"


def bom_sniff(data: bytes) -> Encoding:
    """Encoding announced by a byte order mark, or ``Encoding.NULL``."""
    if data.startswith(b"\xef\xbb\xbf"):
        return Encoding.UTF_8
    if data.startswith(b"\xfe\xff"):
        return Encoding.UTF_16BE
    if data.startswith(b"\xff\xfe"):
        return Encoding.UTF_16LE
    return Encoding.NULL


def get_encoding(label: str) -> Encoding:
    """Look up an encoding label, ignoring case and surrounding whitespace."""
    key = label.strip(_ASCII_WHITESPACE)
    key = "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in key)
    return _BY_LABEL.get(key, Encoding.NULL)


def decode(data: bytes, encoding: Encoding) -> str:
    """Decode ``data``; malformed sequences become U+FFFD."""
    if encoding is Encoding.NULL:
        raise ValueError("cannot decode without an encoding")
    if encoding is Encoding.REPLACEMENT:
        return "\ufffd" if data else ""
    if encoding is Encoding.X_USER_DEFINED:
        return "".join(chr(b) if b < 0x80 else chr(0xF780 + b - 0x80) for b in data)
    return data.decode(_CODECS[encoding], errors="replace")