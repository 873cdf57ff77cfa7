"""
运行期配置 - 读取 config/target_runtime.yaml

职责：
- 加载装饰图片/字体/标注文字/配色/日志等运行参数
- 提供环境变量覆盖机制（FISHLET_ 前缀）
- 类型安全的配置访问

命令行选项（页面尺寸/环数等）不在此处，见 models.options.TargetOptions
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

DEFAULT_RUNTIME_PATH = Path("config/target_runtime.yaml")


class DecorationConfig(BaseModel):
    """装饰图片配置"""

    image_path: str = "koi.png"
    image_inches: float = 2.0


class FontConfig(BaseModel):
    """字体配置"""

    label_font: str = "Helvetica-Bold"
    caption_font: str = "Helvetica-Bold"
    caption_size: float = 12.0


class CaptionConfig(BaseModel):
    """四角标注文字"""

    url_text: str = "www.fishlet.com"
    copyright_text: str = "Copyright © 2022"
    spacing_template: str = 'Ring spacing {num}/{den}"'
    spacing_denominator: int = 32


class PaletteConfig(BaseModel):
    """配色（RGB，0~1）"""

    blue: tuple[float, float, float] = (0.3, 0.5, 1.0)
    red: tuple[float, float, float] = (1.0, 0.0, 0.0)
    white: tuple[float, float, float] = (1.0, 1.0, 1.0)
    black: tuple[float, float, float] = (0.0, 0.0, 0.0)
    background: tuple[float, float, float] = (0.95, 0.95, 0.8)

    def rgb(self, name: str) -> tuple[float, float, float]:
        """按配色名取RGB（ZoneColor 是 str 枚举，可直接传入）"""
        return getattr(self, getattr(name, "value", name))


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_file: str | None = None


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    decoration: DecorationConfig = Field(default_factory=DecorationConfig)
    fonts: FontConfig = Field(default_factory=FontConfig)
    captions: CaptionConfig = Field(default_factory=CaptionConfig)
    palette: PaletteConfig = Field(default_factory=PaletteConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "FISHLET_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """环境变量优先于YAML（YAML经构造参数传入）"""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置（文件不存在时返回默认值）"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        # 以字典传入，便于与环境变量逐项合并
        config = cls(
            decoration=cls._extract(runtime_opts, "decoration"),
            fonts=cls._extract(runtime_opts, "fonts"),
            captions=cls._extract(runtime_opts, "captions"),
            palette=cls._extract(runtime_opts, "palette"),
            logging=cls._extract(runtime_opts, "logging"),
        )

        config._resolve_paths(base_dir=path.parent)
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path) -> None:
        """带目录的相对图片路径基于配置文件所在目录解析；裸文件名仍按当前工作目录查找"""
        image_path = Path(self.decoration.image_path)
        if not image_path.is_absolute() and image_path.parent != Path("."):
            self.decoration.image_path = str((base_dir / image_path).resolve())


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_RUNTIME_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_RUNTIME_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
