"""
pytest 全局配置與共用 fixtures

Fixtures 說明：
- temp_dir: 臨時測試目錄
- sample_translations: 測試用巢狀語言包
- frontend_project: 含語言包與元件的前端專案結構
- sample_lint_report: 對應 frontend_project 的 linter 報告
"""

import json
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict

import pytest

# 添加專案根目錄到 Python 路徑
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ============================================================================
# pytest 配置
# ============================================================================

def pytest_configure(config):
    """pytest 啟動時的配置"""
    config.addinivalue_line(
        "markers", "integration: 標記為整合測試（讀寫檔案或執行子程序）"
    )
    config.addinivalue_line(
        "markers", "unit: 標記為單元測試"
    )


# ============================================================================
# 基礎 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir():
    """臨時測試目錄（每個測試獨立，使用後自動清理）"""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    if temp_path.exists():
        shutil.rmtree(temp_path)


@pytest.fixture
def sample_translations() -> Dict[str, Any]:
    """測試用語言包（西班牙文為主要語言）"""
    return {
        "common": {
            "submit": "Enviar",
            "cancel": "Cancelar",
        },
        "greeting": {
            "hello": "Hola",
        },
        "button": {
            "click": "Haz clic",
        },
    }


# ============================================================================
# 前端專案 Fixtures
# ============================================================================

GREETING_COMPONENT = '''import React from "react";

export function Greeting() {
  return (
    <div>
      <p>Hola</p>
      <Button label="Haz clic" />
    </div>
  );
}
'''


@pytest.fixture
def frontend_project(temp_dir, sample_translations) -> Path:
    """建立前端專案結構

    Returns:
        專案根目錄，包含：
        - src/locales/es/translation.json
        - src/components/Greeting.tsx
    """
    locale_dir = temp_dir / "src" / "locales" / "es"
    locale_dir.mkdir(parents=True)
    (locale_dir / "translation.json").write_text(
        json.dumps(sample_translations, ensure_ascii=False, indent=2),
        encoding="utf-8"
    )

    components_dir = temp_dir / "src" / "components"
    components_dir.mkdir(parents=True)
    (components_dir / "Greeting.tsx").write_text(GREETING_COMPONENT, encoding="utf-8")

    return temp_dir


@pytest.fixture
def sample_lint_report() -> str:
    """frontend_project 的 linter 報告（含一個沒有鍵值的字串）"""
    return (
        "> i18n:lint\n"
        "\n"
        "src/components/Greeting.tsx\n"
        '    6: Error: Found hardcoded string: "Hola"\n'
        '    7: Error: Found hardcoded string: "Haz clic"\n'
        "    8: Error: Found hardcoded string: 'Desconocido'\n"
    )
