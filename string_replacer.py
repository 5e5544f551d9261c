#!/usr/bin/env python3
"""
行定位與字串替換

linter 報告的行號可能因先前的替換而漂移，因此依序搜尋：
1. 報告宣稱的行
2. 上下 ±SEARCH_WINDOW 行（先 +offset 後 -offset）
3. 整個檔案（由上而下）

找到後只替換該行的第一個出現位置。
"""

import re
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

SEARCH_WINDOW = 10

# JSX 屬性值：label="
ATTRIBUTE_CONTEXT_RE = re.compile(r'\w+="$')


def build_translate_call(translation_key: str, translate_fn: str = "t") -> str:
    """產生 {t("key")} 呼叫"""
    return f'{{{translate_fn}("{translation_key}")}}'


def attempt_replacement(
    lines: List[str],
    line_index: int,
    old_string: str,
    translation_key: str,
    translate_fn: str = "t"
) -> bool:
    """
    在指定行替換字串

    屬性情境（label="Click me"）連同引號一起替換為 label={t("key")}，
    屬性值只有部分相符時不替換；
    文字節點情境（<div>Hello</div>）只替換字串本身。

    Args:
        lines: 檔案內容（就地修改）
        line_index: 0-based 行索引
        old_string: 要替換的字串
        translation_key: 翻譯鍵值
        translate_fn: 翻譯函數名稱

    Returns:
        是否成功替換
    """
    if not 0 <= line_index < len(lines):
        return False

    line = lines[line_index]
    string_index = line.find(old_string)
    if string_index == -1:
        return False

    call = build_translate_call(translation_key, translate_fn)
    line_before_string = line[:string_index]
    quoted = f'"{old_string}"'

    if ATTRIBUTE_CONTEXT_RE.search(line_before_string):
        if quoted not in line:
            # 屬性值只有部分相符，替換會產生巢狀引號
            logger.debug(f"L{line_index + 1} 屬性值不完全相符，略過: {old_string}")
            return False
        lines[line_index] = line.replace(quoted, call, 1)
        logger.debug(f"L{line_index + 1} 屬性替換: {quoted} → {call}")
        return True

    lines[line_index] = line.replace(old_string, call, 1)
    logger.debug(f"L{line_index + 1} 文字替換: {old_string} → {call}")
    return True


def find_target_line(
    lines: List[str],
    line_num: int,
    old_string: str,
    search_window: int = SEARCH_WINDOW
) -> Optional[int]:
    """
    找出包含字串的行

    Args:
        lines: 檔案內容
        line_num: 報告宣稱的 1-based 行號
        old_string: 要尋找的字串
        search_window: 鄰近搜尋範圍

    Returns:
        0-based 行索引，找不到返回 None
    """
    def contains(index: int) -> bool:
        return 0 <= index < len(lines) and old_string in lines[index]

    line_index = line_num - 1
    if contains(line_index):
        return line_index

    for offset in range(1, search_window + 1):
        if contains(line_index + offset):
            return line_index + offset
        if contains(line_index - offset):
            return line_index - offset

    for index, line in enumerate(lines):
        if old_string in line:
            return index

    return None


def replace_string_at_line(
    lines: List[str],
    line_num: int,
    old_string: str,
    translation_key: str,
    search_window: int = SEARCH_WINDOW,
    translate_fn: str = "t"
) -> bool:
    """
    定位並替換字串

    Args:
        lines: 檔案內容（就地修改）
        line_num: 報告宣稱的 1-based 行號
        old_string: 要替換的字串
        translation_key: 翻譯鍵值
        search_window: 鄰近搜尋範圍
        translate_fn: 翻譯函數名稱

    Returns:
        是否成功替換；整個檔案都找不到時返回 False 且不修改內容
    """
    target = find_target_line(lines, line_num, old_string, search_window)
    if target is None:
        logger.debug(f"找不到字串（宣稱行號 {line_num}）: {old_string}")
        return False

    if target != line_num - 1:
        logger.debug(f"行號漂移: 宣稱 L{line_num}，實際 L{target + 1}")

    return attempt_replacement(lines, target, old_string, translation_key, translate_fn)
