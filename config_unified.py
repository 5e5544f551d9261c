#!/usr/bin/env python3
"""
auto-translate - 統一配置管理系統
Unified Configuration Management System

三層架構：
- Tier 1: config.py（系統預設，最低優先級）
- Tier 2: 專案配置 JSON（<專案根目錄>/.auto_translate.json）
- Tier 3: 環境變數 AUTO_TRANSLATE_*（最高優先級，支援 .env）

優先級: Tier 3 > Tier 2 > Tier 1
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

USER_CONFIG_FILENAME = ".auto_translate.json"
ENV_PREFIX = "AUTO_TRANSLATE_"


# ==========================================
# 環境變數映射與類型轉換
# ==========================================

class EnvironmentVariableManager:
    """環境變數管理器

    環境變數名稱為 AUTO_TRANSLATE_ + 配置鍵，例如
    AUTO_TRANSLATE_PRIMARY_LANG=en
    """

    # 配置鍵 → 類型
    ENV_VAR_MAPPING = {
        'PROJECT_ROOT': str,
        'LOCALES_DIR': str,
        'PRIMARY_LANG': str,
        'LANGUAGES': list,
        'TRANSLATION_FILE': str,
        'LINT_COMMAND': str,
        'SOURCE_DIR': str,
        'SOURCE_EXTENSIONS': list,
        'ISSUE_MARKER': str,
        'HOOK_MODULE': str,
        'HOOK_SYMBOL': str,
        'TRANSLATE_FUNCTION': str,
        'MODULE_DIRECTIVES': list,
        'SEARCH_WINDOW': int,
        'BACKUP_DIR': str,
    }

    @classmethod
    def get_from_env(cls, config_key: str) -> Optional[Any]:
        """從環境變數讀取配置

        Args:
            config_key: 配置鍵（不含前綴）

        Returns:
            轉換後的值，若未設定或轉換失敗返回 None
        """
        if config_key not in cls.ENV_VAR_MAPPING:
            return None

        env_var = ENV_PREFIX + config_key
        value = os.environ.get(env_var)
        if value is None:
            return None

        try:
            return cls._convert_type(value, cls.ENV_VAR_MAPPING[config_key])
        except (ValueError, TypeError) as e:
            logger.warning(f"環境變數 {env_var} 類型轉換失敗: {e}，使用預設值")
            return None

    @classmethod
    def _convert_type(cls, value: str, var_type: type) -> Any:
        """類型轉換"""
        if var_type == bool:
            return value.lower() in ('true', '1', 'yes', 'on')
        elif var_type == int:
            return int(value)
        elif var_type == list:
            return [item.strip() for item in value.split(',') if item.strip()]
        else:
            return value

    @classmethod
    def get_all_env_overrides(cls) -> Dict[str, Any]:
        """取得所有環境變數覆寫（僅包含已設定的項目）"""
        overrides = {}
        for config_key in cls.ENV_VAR_MAPPING:
            value = cls.get_from_env(config_key)
            if value is not None:
                overrides[config_key] = value
        return overrides


# ==========================================
# 統一配置管理器
# ==========================================

class UnifiedConfigManager:
    """統一配置管理器

    Args:
        project_root: 前端專案根目錄（優先於所有配置層）
        user_config_path: Tier 2 配置檔路徑，預設為 <專案根目錄>/.auto_translate.json
        load_env_file: 是否先載入 .env
    """

    def __init__(
        self,
        project_root: Optional[Path] = None,
        user_config_path: Optional[Path] = None,
        load_env_file: bool = True
    ):
        if load_env_file:
            load_dotenv()

        self._explicit_root = Path(project_root).resolve() if project_root else None

        self._tier1_config = self._load_tier1_config()
        self._tier3_config = EnvironmentVariableManager.get_all_env_overrides()

        if user_config_path is None:
            user_config_path = self._root_before_tier2() / USER_CONFIG_FILENAME
        self.user_config_path = Path(user_config_path)
        self._tier2_config = self._load_tier2_config()

        logger.debug(
            f"配置已載入: Tier 1 {len(self._tier1_config)} 項, "
            f"Tier 2 {len(self._tier2_config)} 項, Tier 3 {len(self._tier3_config)} 項"
        )

    def _load_tier1_config(self) -> Dict[str, Any]:
        """載入 Tier 1: config.py（系統預設）"""
        import config as config_module

        tier1 = {}
        for key in dir(config_module):
            if key.isupper() and not key.startswith('_'):
                tier1[key] = getattr(config_module, key)
        return tier1

    def _load_tier2_config(self) -> Dict[str, Any]:
        """載入 Tier 2: 專案配置 JSON

        檔案不存在或格式錯誤時使用空配置
        """
        if not self.user_config_path.exists():
            logger.debug("專案配置不存在，使用空配置")
            return {}

        try:
            with open(self.user_config_path, 'r', encoding='utf-8') as f:
                tier2 = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"專案配置載入失敗: {e}，使用空配置")
            return {}

        if not isinstance(tier2, dict):
            logger.warning(f"專案配置格式錯誤（需為物件）: {self.user_config_path}")
            return {}

        logger.info(f"✓ 載入專案配置: {self.user_config_path}")
        return tier2

    def _root_before_tier2(self) -> Path:
        # Tier 2 檔案位於專案根目錄，因此根目錄只能由參數、環境變數或預設值決定
        if self._explicit_root:
            return self._explicit_root
        root = self._tier3_config.get('PROJECT_ROOT') or self._tier1_config.get('PROJECT_ROOT')
        return Path(root).resolve() if root else Path.cwd()

    def get(self, key: str, default: Any = None) -> Any:
        """取得配置值（優先級: Tier 3 > Tier 2 > Tier 1 > default）"""
        if key in self._tier3_config:
            return self._tier3_config[key]
        if key in self._tier2_config:
            return self._tier2_config[key]
        if key in self._tier1_config:
            return self._tier1_config[key]
        return default

    def get_all_config(self) -> Dict[str, Any]:
        """取得完整配置（三層合併）"""
        merged = {}
        merged.update(self._tier1_config)
        merged.update(self._tier2_config)
        merged.update(self._tier3_config)
        return merged

    def get_config_source(self, key: str) -> str:
        """查詢配置來源"""
        if key in self._tier3_config:
            return "環境變數 (Tier 3)"
        elif key in self._tier2_config:
            return "專案配置 (Tier 2)"
        elif key in self._tier1_config:
            return "系統預設 (Tier 1)"
        else:
            return "未設定"

    # ==========================================
    # 便利屬性
    # ==========================================

    @property
    def PROJECT_ROOT(self) -> Path:
        """專案根目錄（參數 > 配置 > 目前工作目錄）"""
        if self._explicit_root:
            return self._explicit_root
        root = self.get('PROJECT_ROOT')
        return Path(root).resolve() if root else Path.cwd()

    @property
    def LOCALES_DIR(self) -> str:
        return self.get('LOCALES_DIR', 'src/locales')

    @property
    def PRIMARY_LANG(self) -> str:
        return self.get('PRIMARY_LANG', 'es')

    @property
    def LANGUAGES(self) -> List[str]:
        return list(self.get('LANGUAGES', ['en', 'es']))

    @property
    def TRANSLATION_FILE(self) -> str:
        return self.get('TRANSLATION_FILE', 'translation.json')

    @property
    def LINT_COMMAND(self) -> str:
        return self.get('LINT_COMMAND', 'pnpm i18n:lint 2>&1')

    @property
    def SOURCE_DIR(self) -> str:
        return self.get('SOURCE_DIR', 'src')

    @property
    def SOURCE_EXTENSIONS(self) -> List[str]:
        return list(self.get('SOURCE_EXTENSIONS', ['ts', 'tsx', 'js', 'jsx']))

    @property
    def ISSUE_MARKER(self) -> str:
        return self.get('ISSUE_MARKER', 'Error: Found hardcoded string:')

    @property
    def HOOK_MODULE(self) -> str:
        return self.get('HOOK_MODULE', 'react-i18next')

    @property
    def HOOK_SYMBOL(self) -> str:
        return self.get('HOOK_SYMBOL', 'useTranslation')

    @property
    def TRANSLATE_FUNCTION(self) -> str:
        return self.get('TRANSLATE_FUNCTION', 't')

    @property
    def MODULE_DIRECTIVES(self) -> List[str]:
        return list(self.get('MODULE_DIRECTIVES', ['"use client"', "'use client'"]))

    @property
    def SEARCH_WINDOW(self) -> int:
        return int(self.get('SEARCH_WINDOW', 10))

    @property
    def BACKUP_DIR(self) -> str:
        return self.get('BACKUP_DIR', '.i18n_backups')

    # ==========================================
    # 解析後路徑
    # ==========================================

    @property
    def locales_path(self) -> Path:
        """語言包目錄絕對路徑"""
        return self.PROJECT_ROOT / self.LOCALES_DIR

    @property
    def backup_path(self) -> Path:
        """備份目錄絕對路徑"""
        return self.PROJECT_ROOT / self.BACKUP_DIR
