"""
命令行入口

    fishlet-target [-s WxH] [-m MARGIN] [-o FNAME] [-r RINGS] [-I IRINGS]
                   [-O ORINGS] [-l LINEW] [-b]

退出码：
- 0: 成功
- 1: 画布/PDF输出失败（含未注册字体）、装饰图片加载失败，或运行期配置无效
- 2: 参数错误（argparse 打印用法到 stderr）
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import LoggingConfig, get_config
from .interfaces import ImageLoadError, SurfaceError, UsageError
from .models import (
    DEFAULT_FNAME,
    DEFAULT_GEOM,
    DEFAULT_IRINGS,
    DEFAULT_LINEW,
    DEFAULT_MARGIN,
    DEFAULT_ORINGS,
    DEFAULT_RINGS,
    TargetOptions,
    parse_size,
)
from .render import TargetRenderer

logger = logging.getLogger(__name__)


def _size_arg(text: str) -> tuple[float, float]:
    try:
        return parse_size(text)
    except UsageError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="target",
        description="Fishlet shooting target in PDF",
    )
    parser.add_argument(
        "-s", dest="size", metavar="WxH", type=_size_arg, default=DEFAULT_GEOM,
        help=f"Set size in inches, default {DEFAULT_GEOM}",
    )
    parser.add_argument(
        "-m", dest="margin", metavar="MARGIN", type=float, default=DEFAULT_MARGIN,
        help=f"Set page margin, default {DEFAULT_MARGIN:g}",
    )
    parser.add_argument(
        "-o", dest="fname", metavar="FNAME", default=DEFAULT_FNAME,
        help=f"Set output filename, default {DEFAULT_FNAME}",
    )
    parser.add_argument(
        "-r", dest="rings", metavar="RINGS", type=int, default=DEFAULT_RINGS,
        help=f"Set number of rings, default {DEFAULT_RINGS}",
    )
    parser.add_argument(
        "-I", dest="irings", metavar="IRINGS", type=int, default=DEFAULT_IRINGS,
        help=f"Set number of inner rings, default {DEFAULT_IRINGS}",
    )
    parser.add_argument(
        "-O", dest="orings", metavar="ORINGS", type=int, default=DEFAULT_ORINGS,
        help=f"Set number of outer rings, default {DEFAULT_ORINGS}",
    )
    parser.add_argument(
        "-l", dest="linew", metavar="LINEW", type=float, default=DEFAULT_LINEW,
        help=f"Set line width, default {DEFAULT_LINEW:g}",
    )
    parser.add_argument(
        "-b", dest="background", action="store_true",
        help="Use yellowish background color",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> TargetOptions:
    # argparse 只对字符串默认值调用 type，因此 size 此时一定是元组
    width_in, height_in = args.size
    return TargetOptions(
        width_in=width_in,
        height_in=height_in,
        margin_in=args.margin,
        line_width_in=args.linew,
        rings=args.rings,
        inner_rings=args.irings,
        outer_rings=args.orings,
        output_path=Path(args.fname),
        background=args.background,
    )


def setup_logging(cfg: LoggingConfig) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if cfg.log_file:
        handlers.append(logging.FileHandler(cfg.log_file, encoding="utf-8"))
    logging.basicConfig(
        level=cfg.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except ValidationError as e:
        print(f"Invalid runtime configuration: {e}", file=sys.stderr)
        return 1
    setup_logging(config.logging)

    opts = options_from_args(args)
    try:
        TargetRenderer(config).render(opts)
    except ImageLoadError as e:
        logger.debug("装饰图片加载失败", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    except SurfaceError as e:
        logger.debug("PDF输出失败", exc_info=True)
        print(f"Operation failed: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
