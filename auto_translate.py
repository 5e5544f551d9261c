#!/usr/bin/env python3
"""
i18n 自動替換工具

流程：
1. 載入主要語言包，建立 字串 → 鍵值 反向索引
2. 執行 i18n linter（非零結束碼不視為失敗，照樣解析輸出）
3. 解析報告並依檔案分組
4. 每個檔案依行號由大到小替換為 {t("key")}，並補上 import 與 hook
5. 只寫回有變更的檔案，回報修改檔案數、替換數、略過數

使用方式:
    python auto_translate.py
    python auto_translate.py --dry-run
    python auto_translate.py --report lint.txt --backup
"""

import sys
import json
import shutil
import logging
import argparse
import subprocess
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from auto_translate_errors import TranslationLoadError
from config_unified import UnifiedConfigManager
from hook_injector import DEFAULT_DIRECTIVES, add_hook_if_missing, add_import_if_missing
from lint_report_parser import LintIssue, group_issues_by_file, parse_lint_output
from string_replacer import SEARCH_WINDOW, replace_string_at_line
from translation_index import StringToKeyMap, create_string_to_key_map, load_translations

logger = logging.getLogger(__name__)
console = Console()


# ==================== 資料結構定義 ====================

@dataclass
class LintRunResult:
    """linter 執行結果（非零結束碼也照樣保留輸出）"""
    exit_code: Optional[int]    # None 表示無法啟動程序
    output: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass
class FileProcessResult:
    """單一檔案處理結果"""
    lines: List[str]
    changed: bool
    replacements: int
    skipped: int


@dataclass
class AutoTranslateResult:
    """整次執行統計"""
    files_modified: int = 0
    strings_replaced: int = 0
    skipped: int = 0
    modified_files: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)


# ==================== 外部 linter ====================

def run_lint_command(command: str, cwd: Optional[Path] = None) -> LintRunResult:
    """
    執行 linter 並擷取輸出

    linter 通常以非零結束碼表示「有發現問題」，輸出仍可解析，
    因此不拋出異常。

    Args:
        command: shell 指令
        cwd: 工作目錄

    Returns:
        LintRunResult
    """
    logger.info(f"🔍 執行 linter: {command}")
    try:
        result = subprocess.run(
            command,
            shell=True,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True
        )
    except OSError as e:
        logger.warning(f"linter 無法執行: {e}")
        return LintRunResult(exit_code=None, output=str(e))

    if result.returncode != 0:
        logger.debug(f"linter 結束碼 {result.returncode}，仍解析其輸出")
    return LintRunResult(exit_code=result.returncode, output=result.stdout or "")


# ==================== 單一檔案處理 ====================

def process_file(
    file_path: str,
    file_issues: List[LintIssue],
    string_to_key: StringToKeyMap,
    search_window: int = SEARCH_WINDOW,
    hook_symbol: str = "useTranslation",
    hook_module: str = "react-i18next",
    translate_fn: str = "t",
    directives: Sequence[str] = DEFAULT_DIRECTIVES
) -> FileProcessResult:
    """
    處理單一檔案的所有問題

    依行號由大到小處理，避免前面的替換影響後面問題的行號。

    Args:
        file_path: 檔案路徑
        file_issues: 該檔案的問題
        string_to_key: 反向索引

    Returns:
        FileProcessResult（lines 為處理後內容，未寫回磁碟）
    """
    path = Path(file_path)
    if not path.exists():
        logger.warning(f"檔案不存在，略過 {len(file_issues)} 個問題: {file_path}")
        return FileProcessResult(lines=[], changed=False, replacements=0, skipped=len(file_issues))

    # newline='' 保留 \r\n，只在 \n 切行
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            lines = f.read().split("\n")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"無法讀取檔案，略過 {len(file_issues)} 個問題: {file_path} ({e})")
        return FileProcessResult(lines=[], changed=False, replacements=0, skipped=len(file_issues))

    replacements = 0
    skipped = 0

    for issue in sorted(file_issues, key=lambda i: i.line, reverse=True):
        key = string_to_key.get(issue.string)
        if not key:
            logger.debug(f"無對應鍵值: {issue.string}")
            skipped += 1
            continue

        if replace_string_at_line(lines, issue.line, issue.string, key, search_window, translate_fn):
            replacements += 1
        else:
            logger.debug(f"找不到字串 L{issue.line}: {issue.string}")
            skipped += 1

    changed = replacements > 0
    if changed:
        add_hook_if_missing(lines, hook_symbol, translate_fn)
        add_import_if_missing(lines, hook_symbol, hook_module, directives)

    return FileProcessResult(lines=lines, changed=changed, replacements=replacements, skipped=skipped)


def backup_file(file_path: Path, project_root: Path, backup_dir: Path) -> Path:
    """備份檔案（保留相對於專案根目錄的路徑）"""
    try:
        relative = file_path.resolve().relative_to(project_root.resolve())
    except ValueError:
        relative = Path(file_path.name)

    backup_path = backup_dir / relative
    backup_path.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(file_path, backup_path)
    return backup_path


# ==================== 主流程 ====================

def run_auto_translate(
    config: Optional[UnifiedConfigManager] = None,
    *,
    lint_command: Optional[str] = None,
    lint_output: Optional[str] = None,
    dry_run: bool = False,
    backup_dir: Optional[Path] = None
) -> AutoTranslateResult:
    """
    執行一次完整的自動替換

    Args:
        config: 配置管理器，預設以目前工作目錄建立
        lint_command: 覆寫配置中的 linter 指令
        lint_output: 直接提供 linter 報告（不執行 linter）
        dry_run: 只統計，不寫回檔案
        backup_dir: 寫回前備份原檔的目錄

    Returns:
        AutoTranslateResult

    Raises:
        TranslationLoadError: 主要語言包無法載入
    """
    config = config or UnifiedConfigManager()
    project_root = config.PROJECT_ROOT

    translations = load_translations(config.locales_path, config.PRIMARY_LANG, config.TRANSLATION_FILE)
    string_to_key = create_string_to_key_map(translations)
    logger.info(f"✅ 已載入 {len(string_to_key)} 個翻譯鍵值")

    if lint_output is None:
        lint_output = run_lint_command(lint_command or config.LINT_COMMAND, cwd=project_root).output

    issues = parse_lint_output(
        lint_output,
        project_root=project_root,
        source_dir=config.SOURCE_DIR,
        extensions=config.SOURCE_EXTENSIONS,
        issue_marker=config.ISSUE_MARKER
    )
    logger.info(f"📍 發現 {len(issues)} 個硬編碼字串")

    result = AutoTranslateResult()

    for file_path, file_issues in group_issues_by_file(issues).items():
        file_result = process_file(
            file_path,
            file_issues,
            string_to_key,
            search_window=config.SEARCH_WINDOW,
            hook_symbol=config.HOOK_SYMBOL,
            hook_module=config.HOOK_MODULE,
            translate_fn=config.TRANSLATE_FUNCTION,
            directives=config.MODULE_DIRECTIVES
        )

        if file_result.changed:
            if not dry_run:
                path = Path(file_path)
                if backup_dir is not None:
                    backup_file(path, project_root, backup_dir)
                with open(path, 'w', encoding='utf-8', newline='') as f:
                    f.write("\n".join(file_result.lines))
            result.files_modified += 1
            result.modified_files.append(file_path)
            logger.info(f"✏️  {file_path}: 替換 {file_result.replacements} 個，略過 {file_result.skipped} 個")

        result.strings_replaced += file_result.replacements
        result.skipped += file_result.skipped

    return result


# ==================== 命令列 ====================

def setup_logging(verbose: bool = False) -> None:
    """配置日誌（使用 Rich Handler，輸出至 stderr 以免混入 --json 結果）"""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(message)s',
        datefmt='[%X]',
        handlers=[RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            rich_tracebacks=True,
        )],
        force=True
    )


def print_summary(result: AutoTranslateResult, dry_run: bool = False) -> None:
    """輸出統計表格"""
    title = "📊 替換統計（預覽模式）" if dry_run else "📊 替換統計"
    table = Table(title=title)
    table.add_column("項目", style="bright_magenta")
    table.add_column("數值", style="magenta", justify="right")

    table.add_row("修改檔案", str(result.files_modified))
    table.add_row("已替換字串", str(result.strings_replaced))
    table.add_row("略過字串", str(result.skipped))

    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='將硬編碼字串替換為 t() 呼叫')
    parser.add_argument('--project-root', type=Path, help='前端專案根目錄（預設為目前目錄）')
    parser.add_argument('--lint-command', help='覆寫 linter 指令')
    parser.add_argument('--report', help='使用已存的 linter 報告（- 表示從 stdin 讀取）')
    parser.add_argument('--dry-run', action='store_true', help='預覽模式，不實際修改檔案')
    parser.add_argument('--backup', action='store_true', help='寫回前備份原檔')
    parser.add_argument('--json', action='store_true', help='以 JSON 輸出統計')
    parser.add_argument('--verbose', '-v', action='store_true', help='顯示詳細日誌')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """命令列入口"""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = UnifiedConfigManager(project_root=args.project_root)

    lint_output = None
    if args.report == '-':
        lint_output = sys.stdin.read()
    elif args.report:
        lint_output = Path(args.report).read_text(encoding='utf-8')

    if not args.json:
        mode_text = "🔍 預覽模式" if args.dry_run else "🚀 開始替換 i18n 字串"
        console.print(f"\n[bold magenta]{mode_text}[/bold magenta]\n")

    try:
        result = run_auto_translate(
            config,
            lint_command=args.lint_command,
            lint_output=lint_output,
            dry_run=args.dry_run,
            backup_dir=config.backup_path if args.backup else None
        )
    except TranslationLoadError as e:
        logger.error(f"❌ {e.message}")
        if args.json:
            print(json.dumps(e.to_dict(), ensure_ascii=False, indent=2))
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_summary(result, dry_run=args.dry_run)
        if args.dry_run and result.files_modified:
            console.print("\n💡 提示: 移除 --dry-run 參數執行實際替換")

    return 0


if __name__ == "__main__":
    sys.exit(main())
