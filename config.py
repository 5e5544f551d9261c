#!/usr/bin/env python3
"""
auto-translate - 配置檔案
用途：i18n 自動替換工具的系統預設值（Tier 1）

所有大寫變數會被 config_unified.py 讀取，
可由專案內的 .auto_translate.json 或 AUTO_TRANSLATE_* 環境變數覆寫。
"""

# ==========================================
# 專案路徑
# ==========================================

# 前端專案根目錄（None = 目前工作目錄）
PROJECT_ROOT = None

# 語言包目錄（相對於專案根目錄）
LOCALES_DIR = "src/locales"

# 主要語言（字串 → 鍵值反查以此語言為準）
PRIMARY_LANG = "es"

# add_translation.py 會寫入的所有語言
LANGUAGES = ["en", "es"]

# 每個語言目錄下的語言包檔名
TRANSLATION_FILE = "translation.json"

# ==========================================
# 外部 linter
# ==========================================

# 執行 i18n linter 的指令（stderr 一併擷取）
LINT_COMMAND = "pnpm i18n:lint 2>&1"

# 報告中檔案標頭的根目錄與副檔名
SOURCE_DIR = "src"
SOURCE_EXTENSIONS = ["ts", "tsx", "js", "jsx"]

# 硬編碼字串的報告標記
ISSUE_MARKER = "Error: Found hardcoded string:"

# ==========================================
# 翻譯 hook
# ==========================================

HOOK_MODULE = "react-i18next"
HOOK_SYMBOL = "useTranslation"
TRANSLATE_FUNCTION = "t"

# 檔案第一行若為以下指令，import 插在其後
MODULE_DIRECTIVES = ['"use client"', "'use client'"]

# ==========================================
# 替換行為
# ==========================================

# 行號漂移時，於宣稱行號上下搜尋的範圍
SEARCH_WINDOW = 10

# 備份目錄（相對於專案根目錄，--backup 時使用）
BACKUP_DIR = ".i18n_backups"
