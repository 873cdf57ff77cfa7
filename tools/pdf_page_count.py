"""
PDF页数统计（标准库，用于核对生成的靶纸是单页）。

按 "/Type /Page" 对象标记计数（排除 /Type /Pages 页树节点）。
对 reportlab 输出的未压缩对象字典足够可靠。
"""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_PAGE_OBJ = re.compile(rb"/Type\s*/Page(?![a-zA-Z])")


def count_pdf_pages(path: Path) -> int:
    return len(_PAGE_OBJ.findall(path.read_bytes()))


def main() -> int:
    ap = argparse.ArgumentParser(description="Count pages of PDF files")
    ap.add_argument("pdf", nargs="+")
    args = ap.parse_args()
    for name in args.pdf:
        print(f"{name}: {count_pdf_pages(Path(name))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
