"""
批量生成常用尺寸靶纸：target-<WxH>.pdf

默认尺寸 8.5x11 11x8.5 11x17 17x11，也可在命令行指定。
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

SIZES = ["8.5x11", "11x8.5", "11x17", "17x11"]


def _add_repo_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


def main() -> int:
    parser = argparse.ArgumentParser(description="Build targets for standard page sizes.")
    parser.add_argument("sizes", nargs="*", default=SIZES, help="WxH（英寸），默认四种常用尺寸")
    parser.add_argument("--out-dir", default=".", help="输出目录（默认：当前目录）")
    parser.add_argument("-b", dest="background", action="store_true", help="淡黄背景")
    args = parser.parse_args()

    _add_repo_to_path()
    from fishlet_target.config import get_config  # type: ignore
    from fishlet_target.interfaces import TargetError  # type: ignore
    from fishlet_target.models import TargetOptions  # type: ignore
    from fishlet_target.render import TargetRenderer  # type: ignore

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    renderer = TargetRenderer(get_config())

    failed = 0
    for size in args.sizes:
        out = out_dir / f"target-{size}.pdf"
        try:
            opts = TargetOptions.from_size(size, output_path=out, background=args.background)
            renderer.render(opts)
            print(f"{out}: OK")
        except TargetError as exc:
            print(f"{out}: ERROR {exc}", file=sys.stderr)
            failed += 1

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
