from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """应用配置"""
    # 基本信息
    app_name: str = "hanzi-filter"
    version: str = "1.0.0"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # 中文提取默认配置
    normalize_unicode: bool = True         # NFKC 归一化 (如 "！" → "!")
    remove_duplicates: bool = False        # 移除重复字符，保留首次出现
    remove_punctuation: bool = True        # 移除中文标点
    include_characters: str = ""           # 白名单字符
    exclude_characters: str = ""           # 黑名单字符 (优先于白名单)

    class Config:
        env_prefix = "HANZI_"
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
