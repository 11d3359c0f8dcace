"""
`apple-bundle` 的命令行入口模块。

读取一个 Entitlements 或 Info.plist 文件，按 schema 校验并输出摘要；
也可以按 key path 取值，或把规范化后的文档写回磁盘。
"""

import argparse
import os
from collections.abc import Sequence

from .codec import encode
from .errors import DecodeError, PlistFormatError
from .inspect import (
    SCHEMAS,
    detect_kind,
    format_value,
    inspect_document,
    print_document_info,
    print_key_table,
)
from .plist_io import load_document, to_file_binary, to_file_xml
from .plist_path import get_value


def _log_step(message: str) -> None:
    """输出简洁的流程阶段提示。"""
    print(f"[apple-bundle] {message}")


def build_parser() -> argparse.ArgumentParser:
    """构建并返回 `apple-bundle` 命令行参数解析器。"""
    p = argparse.ArgumentParser(
        prog="apple-bundle",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Validate an Entitlements or Info.plist file against its typed schema.\n"
            "Prints a summary, reads single values, or writes the normalized document."
        ),
    )

    p.add_argument("plist", nargs="?", default="", metavar="PLIST", help="Input plist path")
    p.add_argument(
        "-k",
        "--kind",
        choices=["auto", *SCHEMAS],
        default="auto",
        help="Schema to use (default: auto, picked from the document's keys)",
    )
    p.add_argument(
        "--keys",
        action="store_true",
        help="List every key declared by --kind and exit",
    )
    p.add_argument(
        "--get",
        default="",
        metavar="KEY_PATH",
        help="Print one value, e.g. CFBundleURLTypes:0:CFBundleURLSchemes:0",
    )
    p.add_argument(
        "-o",
        "--output",
        default="",
        help="Write the normalized document to this path (XML unless --binary)",
    )
    p.add_argument("--binary", action="store_true", help="Write --output as binary plist")
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the document contains keys the schema does not declare",
    )
    p.add_argument("--verbose", action="store_true", help="Verbose logging")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口：解析参数、读取并校验 plist，按参数输出结果。"""
    parser = build_parser()
    ns = parser.parse_args(argv)

    if ns.keys:
        if ns.kind == "auto":
            raise SystemExit("Error: --keys needs an explicit -k/--kind.")
        print_key_table(ns.kind)
        return 0

    if not ns.plist:
        raise SystemExit(
            "Error: missing PLIST path.\n"
            "Hint: pass an .entitlements or Info.plist file.\n"
        )
    if ns.binary and not ns.output:
        raise SystemExit("Error: --binary requires -o/--output.")

    path = os.path.abspath(os.path.expanduser(ns.plist))
    if not os.path.isfile(path):
        raise SystemExit(f"Error: plist not found: {path}")

    if ns.verbose:
        _log_step(f"Reading plist: {path}")
    try:
        doc = load_document(path)
    except (OSError, PlistFormatError, DecodeError) as e:
        raise SystemExit(f"Error: failed to read plist: {path}\nDetail: {e}\n") from e

    kind = ns.kind
    if kind == "auto":
        try:
            kind = detect_kind(doc)
        except ValueError as e:
            raise SystemExit(
                "Error: cannot tell the document kind.\n"
                f"Detail: {e}\n"
                "Hint: pass -k entitlements or -k info-plist.\n"
            ) from e
        if ns.verbose:
            _log_step(f"Auto kind: {kind}")

    try:
        info, value = inspect_document(path, doc, kind)
    except DecodeError as e:
        raise SystemExit(f"Error: invalid {kind} document: {path}\nDetail: {e}\n") from e

    if ns.strict and info.unknown_keys:
        raise SystemExit(
            f"Error: undeclared keys in {kind} document: {', '.join(info.unknown_keys)}"
        )
    if ns.verbose:
        for key in info.unknown_keys:
            _log_step(f"Ignoring undeclared key: {key}")
        for key in info.deprecated_keys:
            _log_step(f"Deprecated key present: {key}")

    if ns.output:
        output = os.path.abspath(os.path.expanduser(ns.output))
        if ns.binary:
            to_file_binary(value, output)
        else:
            to_file_xml(value, output)
        if ns.verbose:
            _log_step(f"Wrote normalized plist: {output}")

    if ns.get:
        try:
            print(format_value(get_value(encode(value), ns.get)))
        except ValueError as e:
            raise SystemExit(f"Error: {e}") from e
        except KeyError as e:
            raise SystemExit(f"Error: key path not found: {ns.get}") from e
        return 0

    print_document_info(info)
    return 0
