#!/usr/bin/env python3
"""
i18n linter 報告解析

將 linter 的純文字報告轉換為結構化的 LintIssue 清單，並依檔案分組。

報告格式範例：

    src/components/Button.tsx
        15: Error: Found hardcoded string: "Click me"
        20: Error: Found hardcoded string: 'Submit'

    src/pages/Home.tsx
        5: Error: Found hardcoded string: "Welcome"
"""

import re
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Pattern, Sequence, Union

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_DIR = "src"
DEFAULT_EXTENSIONS = ("ts", "tsx", "js", "jsx")
DEFAULT_ISSUE_MARKER = "Error: Found hardcoded string:"

QUOTE_CHARS = ('"', "'")


@dataclass(frozen=True)
class LintIssue:
    """單一硬編碼字串問題"""
    file: str       # 絕對路徑
    line: int       # 1-based 行號（僅供參考，可能已漂移）
    string: str     # 報告中的原始字串（已去除外層引號）


IssuesByFile = Dict[str, List[LintIssue]]


class LineKind(Enum):
    """報告行類型"""
    FILE_HEADER = "file_header"
    ISSUE = "issue"
    OTHER = "other"


@dataclass
class ClassifiedLine:
    """分類後的報告行"""
    kind: LineKind
    path: Optional[str] = None          # FILE_HEADER: 相對路徑
    line_number: Optional[int] = None   # ISSUE: 行號
    text: Optional[str] = None          # ISSUE: 字串


def build_header_pattern(
    source_dir: str = DEFAULT_SOURCE_DIR,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS
) -> Pattern:
    """建立檔案標頭的正則表達式"""
    # 長的副檔名優先，tsx 不會被截成 ts
    ordered = sorted(extensions, key=len, reverse=True)
    ext_group = "|".join(re.escape(ext) for ext in ordered)
    return re.compile(rf"^{re.escape(source_dir)}/.+\.({ext_group})")


def build_issue_pattern(marker: str = DEFAULT_ISSUE_MARKER) -> Pattern:
    """建立問題行的正則表達式"""
    return re.compile(rf"^\s+(\d+):\s*{re.escape(marker)}\s*(.+)$")


HEADER_PATTERN = build_header_pattern()
ISSUE_PATTERN = build_issue_pattern()


def strip_quotes(value: str) -> str:
    """去除成對的外層引號（"..." 或 '...'），否則原樣返回"""
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[0] == value[-1]:
        return value[1:-1]
    return value


def classify_line(
    line: str,
    header_pattern: Pattern = HEADER_PATTERN,
    issue_pattern: Pattern = ISSUE_PATTERN
) -> ClassifiedLine:
    """
    判斷報告行類型

    Args:
        line: 報告中的一行
        header_pattern: 檔案標頭正則
        issue_pattern: 問題行正則

    Returns:
        ClassifiedLine
    """
    header_match = header_pattern.match(line)
    if header_match:
        return ClassifiedLine(LineKind.FILE_HEADER, path=header_match.group(0))

    issue_match = issue_pattern.match(line)
    if issue_match:
        return ClassifiedLine(
            LineKind.ISSUE,
            line_number=int(issue_match.group(1)),
            text=strip_quotes(issue_match.group(2))
        )

    return ClassifiedLine(LineKind.OTHER)


def parse_lint_output(
    lint_output: str,
    project_root: Optional[Union[str, Path]] = None,
    source_dir: str = DEFAULT_SOURCE_DIR,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    issue_marker: str = DEFAULT_ISSUE_MARKER
) -> List[LintIssue]:
    """
    解析 linter 報告

    每個問題行歸屬於最近出現的檔案標頭；在任何標頭之前的問題行會被丟棄，
    其他行（包含成功訊息）一律忽略。

    Args:
        lint_output: linter 的完整輸出
        project_root: 解析相對路徑用的專案根目錄，預設為目前工作目錄
        source_dir: 檔案標頭的根目錄
        extensions: 可辨識的副檔名
        issue_marker: 硬編碼字串的報告標記

    Returns:
        依報告順序排列的 LintIssue 清單
    """
    root = Path(project_root) if project_root else Path.cwd()
    header_pattern = build_header_pattern(source_dir, extensions)
    issue_pattern = build_issue_pattern(issue_marker)

    issues: List[LintIssue] = []
    current_file: Optional[str] = None

    for line in lint_output.splitlines():
        classified = classify_line(line, header_pattern, issue_pattern)

        if classified.kind is LineKind.FILE_HEADER:
            current_file = str((root / classified.path).resolve())
        elif classified.kind is LineKind.ISSUE:
            if current_file is None:
                logger.debug(f"問題行出現在檔案標頭之前，已略過: {line.strip()}")
                continue
            issues.append(LintIssue(
                file=current_file,
                line=classified.line_number,
                string=classified.text
            ))

    return issues


def group_issues_by_file(issues: List[LintIssue]) -> IssuesByFile:
    """依檔案分組（保留每個檔案內的原始順序）"""
    issues_by_file: IssuesByFile = {}
    for issue in issues:
        issues_by_file.setdefault(issue.file, []).append(issue)
    return issues_by_file
