"""
Fishlet 射击靶纸生成器 - 核心模块

模块结构：
- config/     运行期配置（图片路径/字体/文字/配色/日志）
- models/     数据模型定义（命令行选项、靶面几何）
- layout/     版面计算（环距/环半径/配色区/页面几何/标注分数）
- render/     绘制（PDF画布/对齐文字/装饰图片/绘制驱动）
- cli.py      命令行入口
"""

__version__ = "0.1.0"
