#!/usr/bin/env python3
"""
語言包載入與反向索引

功能：
1. 載入主要語言的語言包（JSON，或 YAML）
2. 建立 字串 → 翻譯鍵值 的反向映射
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from auto_translate_errors import TranslationLoadError

logger = logging.getLogger(__name__)

TranslationMap = Dict[str, Any]
StringToKeyMap = Dict[str, str]

YAML_SUFFIXES = ('.yaml', '.yml')


def load_translations(
    locales_dir: Union[str, Path],
    primary_lang: str,
    file_name: str = "translation.json"
) -> TranslationMap:
    """
    載入主要語言的語言包

    Args:
        locales_dir: 語言包根目錄
        primary_lang: 主要語言代碼（對應子目錄名稱）
        file_name: 語言包檔名，.yaml/.yml 以 YAML 解析，其餘以 JSON 解析

    Returns:
        巢狀翻譯字典

    Raises:
        TranslationLoadError: 檔案不存在、無法解析或頂層不是物件
    """
    path = Path(locales_dir) / primary_lang / file_name

    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except FileNotFoundError as e:
        raise TranslationLoadError(f"語言包不存在: {path}", file_path=str(path), cause=e)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise TranslationLoadError(f"語言包解析失敗: {path}", file_path=str(path), cause=e)
    except OSError as e:
        raise TranslationLoadError(f"語言包讀取失敗: {path}", file_path=str(path), cause=e)

    if not isinstance(data, dict):
        raise TranslationLoadError(
            f"語言包頂層必須是物件: {path}",
            file_path=str(path),
            context={'actual_type': type(data).__name__}
        )

    logger.debug(f"已載入語言包: {path}")
    return data


def create_string_to_key_map(translations: TranslationMap) -> StringToKeyMap:
    """
    建立 字串 → 翻譯鍵值 的反向映射

    依宣告順序深度優先遍歷；同一字串對應多個鍵值時保留第一個。
    空白字串不納入索引，陣列與其他非字串值一律忽略。

    Args:
        translations: 巢狀翻譯字典

    Returns:
        映射字典，例如 {"Submit": "common.submit"}
    """
    mapping: StringToKeyMap = {}

    def traverse(data: TranslationMap, prefix: str = "") -> None:
        for key, value in data.items():
            full_key = f"{prefix}.{key}" if prefix else str(key)

            if isinstance(value, dict):
                traverse(value, full_key)
            elif isinstance(value, str) and value.strip():
                if value not in mapping:
                    mapping[value] = full_key

    traverse(translations)
    return mapping
