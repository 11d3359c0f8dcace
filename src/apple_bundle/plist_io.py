"""
plist 文件与记录之间的读写工具。

读取时自动识别 XML/Binary 格式；写出时保持字段声明顺序（不对键排序），
XML 输出与 Xcode 生成的文件格式一致（制表符缩进）。
"""

from __future__ import annotations

import plistlib
from typing import IO, Any, TypeVar
from xml.parsers.expat import ExpatError

from .codec import decode, encode, plist_type_name
from .errors import PlistFormatError, TypeMismatch

T = TypeVar("T")


def _loads(data: bytes, *, source: str, fmt: Any = None) -> dict[str, Any]:
    """解析 plist 字节并确认顶层是字典；`fmt` 为 `None` 时自动识别格式。"""
    try:
        obj = plistlib.loads(data, fmt=fmt)
    except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
        raise PlistFormatError(f"{source}: not a valid plist ({e})") from e
    if not isinstance(obj, dict):
        raise TypeMismatch("", "dictionary", plist_type_name(obj))
    return obj


def load_document(path: str) -> dict[str, Any]:
    """从磁盘读取 plist 原始字典，不做 schema 解码。"""
    with open(path, "rb") as f:
        data = f.read()
    return _loads(data, source=path)


def from_bytes(cls: type[T], data: bytes) -> T:
    return decode(cls, _loads(data, source="<bytes>"))


def from_reader(cls: type[T], fp: IO[bytes]) -> T:
    source = getattr(fp, "name", None) or "<stream>"
    return decode(cls, _loads(fp.read(), source=str(source)))


def from_reader_xml(cls: type[T], fp: IO[bytes]) -> T:
    """只接受 XML 格式的读取；二进制输入抛出 `PlistFormatError`。"""
    source = getattr(fp, "name", None) or "<stream>"
    return decode(cls, _loads(fp.read(), source=str(source), fmt=plistlib.FMT_XML))


def from_file(cls: type[T], path: str) -> T:
    """读取并解码 plist 文件（自动识别 XML/Binary）。"""
    return decode(cls, load_document(path))


def to_bytes(obj: Any, *, binary: bool = False) -> bytes:
    """把记录编码为 plist 字节；默认 XML，`binary=True` 时输出二进制格式。"""
    fmt = plistlib.FMT_BINARY if binary else plistlib.FMT_XML
    return plistlib.dumps(encode(obj), fmt=fmt, sort_keys=False)


def to_writer_xml(obj: Any, fp: IO[bytes]) -> None:
    fp.write(to_bytes(obj))


def to_writer_binary(obj: Any, fp: IO[bytes]) -> None:
    fp.write(to_bytes(obj, binary=True))


def to_file_xml(obj: Any, path: str) -> None:
    """将记录以 XML plist 格式写入磁盘。"""
    data = to_bytes(obj)
    with open(path, "wb") as f:
        f.write(data)


def to_file_binary(obj: Any, path: str) -> None:
    """将记录以二进制 plist 格式写入磁盘。"""
    data = to_bytes(obj, binary=True)
    with open(path, "wb") as f:
        f.write(data)
