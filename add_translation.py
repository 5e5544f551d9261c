#!/usr/bin/env python3
"""
新增翻譯鍵值

將同一個鍵值寫入所有語言的語言包，點號路徑會自動建立中間層。

使用方式:
    python add_translation.py common.submitNew "Submit" "Enviar"
    python add_translation.py          # 互動模式
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from rich.console import Console
from rich.prompt import Prompt

from auto_translate import setup_logging
from config_unified import UnifiedConfigManager

logger = logging.getLogger(__name__)
console = Console()


def set_nested_value(data: Dict[str, Any], key_path: str, value: Any) -> Dict[str, Any]:
    """
    依點號路徑設定值

    中間層不存在或不是物件時以新物件取代。

    Args:
        data: 目標字典（就地修改）
        key_path: 點號路徑，例如 "common.submit"
        value: 要設定的值

    Returns:
        同一個 data 物件
    """
    keys = key_path.split('.')
    node = data
    for key in keys[:-1]:
        if not isinstance(node.get(key), dict):
            node[key] = {}
        node = node[key]
    node[keys[-1]] = value
    return data


def _read_locale(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"語言包讀取失敗，以空內容重建: {path} ({e})")
        return {}
    return data if isinstance(data, dict) else {}


def add_translation(
    key_path: str,
    translations: Dict[str, str],
    locales_dir: Union[str, Path],
    file_name: str = "translation.json"
) -> List[Path]:
    """
    寫入翻譯鍵值

    Args:
        key_path: 點號路徑
        translations: 語言代碼 → 翻譯文字
        locales_dir: 語言包根目錄
        file_name: 語言包檔名

    Returns:
        已寫入的檔案路徑
    """
    written = []
    for lang, value in translations.items():
        path = Path(locales_dir) / lang / file_name
        data = set_nested_value(_read_locale(path), key_path, value)

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.write('\n')

        logger.info(f'✅ 已新增 "{key_path}" 至 {lang}')
        written.append(path)

    return written


def collect_from_args(key_path: str, values: List[str], languages: List[str]) -> Dict[str, str]:
    """依語言順序對應命令列參數，缺少的語言沿用第一個值"""
    return {
        lang: values[i] if i < len(values) else values[0]
        for i, lang in enumerate(languages)
    }


def collect_interactively(languages: List[str]) -> Optional[tuple]:
    """互動輸入鍵值路徑與各語言翻譯"""
    key_path = Prompt.ask("完整鍵值路徑（例如 common.submitNew）").strip()
    if not key_path:
        return None

    first_lang = languages[0]
    first_value = Prompt.ask(f"{first_lang.upper()} 翻譯", default="")
    translations = {first_lang: first_value}

    for lang in languages[1:]:
        translations[lang] = Prompt.ask(
            f"{lang.upper()} ({first_value or '??'})",
            default=first_value
        )

    return key_path, translations


def main(argv: Optional[List[str]] = None) -> int:
    """命令列入口"""
    parser = argparse.ArgumentParser(description='新增翻譯鍵值至所有語言包')
    parser.add_argument('key_path', nargs='?', help='點號路徑，例如 common.submitNew')
    parser.add_argument('values', nargs='*', help='各語言翻譯（依配置的語言順序）')
    parser.add_argument('--project-root', type=Path, help='前端專案根目錄（預設為目前目錄）')
    parser.add_argument('--verbose', '-v', action='store_true', help='顯示除錯訊息')
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    config = UnifiedConfigManager(project_root=args.project_root)
    languages = config.LANGUAGES

    if args.key_path and args.values:
        key_path = args.key_path
        translations = collect_from_args(key_path, args.values, languages)
    else:
        collected = collect_interactively(languages)
        if collected is None:
            console.print("[dim magenta]❌ 必須輸入鍵值路徑[/dim magenta]")
            return 1
        key_path, translations = collected

    add_translation(key_path, translations, config.locales_path, config.TRANSLATION_FILE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
