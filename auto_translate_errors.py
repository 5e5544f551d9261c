#!/usr/bin/env python3
"""
auto-translate 自定義異常

- AutoTranslateError: 基礎錯誤類別
- TranslationLoadError: 主要語言包無法讀取或解析（整次執行失敗）

單一字串或單一檔案的問題不會拋出異常，只計入 skipped。
"""

from datetime import datetime
from typing import Any, Dict, Optional


class AutoTranslateError(Exception):
    """
    auto-translate 基礎錯誤類別

    提供統一的錯誤資訊結構：訊息、原始異常、上下文、時間戳記
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.context = context or {}
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """轉換為字典格式"""
        return {
            'type': self.__class__.__name__,
            'message': self.message,
            'timestamp': self.timestamp.isoformat(),
            'context': self.context,
            'cause': str(self.cause) if self.cause else None
        }


class TranslationLoadError(AutoTranslateError):
    """語言包載入錯誤"""

    def __init__(self, message: str, file_path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.file_path = file_path
        if file_path:
            self.context['file_path'] = file_path
