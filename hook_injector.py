#!/usr/bin/env python3
"""
翻譯 hook 注入

確保有替換的檔案：
1. 匯入 useTranslation（import { useTranslation } from "react-i18next";）
2. 在第一個元件函數內綁定 const { t } = useTranslation();

兩者皆以目前（已修改）的內容判斷，不會重複插入。
"""

import re
import logging
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_HOOK_MODULE = "react-i18next"
DEFAULT_HOOK_SYMBOL = "useTranslation"
DEFAULT_TRANSLATE_FN = "t"
DEFAULT_DIRECTIVES = ('"use client"', "'use client'")

HOOK_INDENT = "    "

FUNCTION_DECL_RE = re.compile(r"^(export\s+(default\s+)?)?function\s+\w+\s*\(")
FUNCTION_BLOCK_OPEN = ") {"
ARROW_DECL_RES = (
    re.compile(r"^export\s+const\s+\w+\s*=\s*\("),
    re.compile(r"^\s*const\s+\w+\s*=\s*\("),
)
ARROW_BLOCK_OPEN = ") => {"


def build_import_line(
    hook_symbol: str = DEFAULT_HOOK_SYMBOL,
    hook_module: str = DEFAULT_HOOK_MODULE
) -> str:
    return f'import {{ {hook_symbol} }} from "{hook_module}";'


def build_hook_line(
    hook_symbol: str = DEFAULT_HOOK_SYMBOL,
    translate_fn: str = DEFAULT_TRANSLATE_FN
) -> str:
    return f"{HOOK_INDENT}const {{ {translate_fn} }} = {hook_symbol}();"


def has_use_translation(
    content: str,
    hook_symbol: str = DEFAULT_HOOK_SYMBOL,
    hook_module: str = DEFAULT_HOOK_MODULE
) -> bool:
    """
    檢查是否已匯入 hook

    容許大括號內的空白差異與其他具名匯入，例如
    import {  useTranslation  } from 'react-i18next'
    import { Trans, useTranslation } from "react-i18next"
    """
    pattern = (
        rf"import\s*{{[^}}]*\b{re.escape(hook_symbol)}\b[^}}]*}}\s*"
        rf"from\s*['\"]{re.escape(hook_module)}['\"]"
    )
    return re.search(pattern, content) is not None


def has_use_translation_hook(
    content: str,
    hook_symbol: str = DEFAULT_HOOK_SYMBOL,
    translate_fn: str = DEFAULT_TRANSLATE_FN
) -> bool:
    """檢查是否已綁定 const { t } = useTranslation(...)（{ t: translate } 不算）"""
    pattern = (
        rf"const\s*{{[^}}]*\b{re.escape(translate_fn)}\b(?!\s*:)[^}}]*}}\s*=\s*"
        rf"{re.escape(hook_symbol)}\s*\("
    )
    return re.search(pattern, content) is not None


def add_import_if_missing(
    lines: List[str],
    hook_symbol: str = DEFAULT_HOOK_SYMBOL,
    hook_module: str = DEFAULT_HOOK_MODULE,
    directives: Sequence[str] = DEFAULT_DIRECTIVES
) -> List[str]:
    """
    缺少 import 時插入

    第一行為 "use client" 之類的指令時插在其後，否則插在檔案開頭。

    Args:
        lines: 檔案內容（就地修改）

    Returns:
        同一個 lines 物件
    """
    if has_use_translation("\n".join(lines), hook_symbol, hook_module):
        return lines

    insert_index = 0
    if lines and any(directive in lines[0] for directive in directives):
        insert_index = 1

    lines.insert(insert_index, build_import_line(hook_symbol, hook_module))
    logger.debug(f"已插入 {hook_symbol} import（L{insert_index + 1}）")
    return lines


def _find_block_open(lines: List[str], start: int, token: str) -> Optional[int]:
    for index in range(start, len(lines)):
        if token in lines[index]:
            return index
    return None


def find_hook_insert_index(lines: List[str]) -> Optional[int]:
    """
    找出 hook 綁定的插入位置

    第一個函數宣告（往下找 ") {"）或箭頭函數（往下找 ") => {"），
    返回區塊開頭的下一行索引；找不到返回 None。
    """
    for index, line in enumerate(lines):
        if FUNCTION_DECL_RE.match(line):
            block_open = _find_block_open(lines, index, FUNCTION_BLOCK_OPEN)
            if block_open is not None:
                return block_open + 1

        if any(pattern.match(line) for pattern in ARROW_DECL_RES):
            block_open = _find_block_open(lines, index, ARROW_BLOCK_OPEN)
            if block_open is not None:
                return block_open + 1

    return None


def add_hook_if_missing(
    lines: List[str],
    hook_symbol: str = DEFAULT_HOOK_SYMBOL,
    translate_fn: str = DEFAULT_TRANSLATE_FN
) -> List[str]:
    """
    缺少 hook 綁定時插入（後接一個空行）

    找不到可插入的函數時保持原樣。

    Args:
        lines: 檔案內容（就地修改）

    Returns:
        同一個 lines 物件
    """
    if has_use_translation_hook("\n".join(lines), hook_symbol, translate_fn):
        return lines

    insert_index = find_hook_insert_index(lines)
    if insert_index is None:
        logger.warning(f"找不到元件函數，未插入 {hook_symbol}() 綁定")
        return lines

    lines[insert_index:insert_index] = [build_hook_line(hook_symbol, translate_fn), ""]
    logger.debug(f"已插入 {hook_symbol}() 綁定（L{insert_index + 1}）")
    return lines
