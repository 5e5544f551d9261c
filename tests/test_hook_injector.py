"""
hook_injector.py 測試套件

測試範圍：
1. import / hook 偵測（容許空白差異）
2. add_import_if_missing 插入位置與冪等性
3. add_hook_if_missing 函數宣告 / 箭頭函數與冪等性
"""

from hook_injector import (
    add_hook_if_missing,
    add_import_if_missing,
    has_use_translation,
    has_use_translation_hook,
)

IMPORT_LINE = 'import { useTranslation } from "react-i18next";'
HOOK_LINE = '    const { t } = useTranslation();'


# ============================================================================
# Test Class: 偵測
# ============================================================================

class TestHasUseTranslation:
    """測試 import 偵測"""

    def test_detect_import(self):
        content = 'import { useTranslation } from "react-i18next";\nimport React from "react";'

        assert has_use_translation(content) is True

    def test_detect_import_with_spaces(self):
        """測試：大括號內多餘空白"""
        assert has_use_translation("import {  useTranslation  } from 'react-i18next';") is True

    def test_detect_import_with_other_names(self):
        """測試：同時匯入其他名稱"""
        assert has_use_translation('import { Trans, useTranslation } from "react-i18next";') is True

    def test_other_module_not_detected(self):
        assert has_use_translation('import { useTranslation } from "next-i18next";') is False

    def test_missing(self):
        assert has_use_translation('import React from "react";') is False


class TestHasUseTranslationHook:
    """測試 hook 綁定偵測"""

    def test_detect_hook(self):
        content = (
            "function MyComponent() {\n"
            "  const { t } = useTranslation();\n"
            "  return <div>{t('key')}</div>;\n"
            "}"
        )

        assert has_use_translation_hook(content) is True

    def test_detect_hook_with_spaces(self):
        assert has_use_translation_hook("const {  t  } = useTranslation();") is True

    def test_detect_hook_with_namespace(self):
        """測試：帶命名空間參數"""
        assert has_use_translation_hook('const { t, i18n } = useTranslation("common");') is True

    def test_renamed_binding_not_counted(self):
        """測試：{ t: translate } 沒有綁定 t"""
        assert has_use_translation_hook("const { t: translate } = useTranslation();") is False
        assert has_use_translation_hook("const { i18n, t : tr } = useTranslation();") is False

    def test_renamed_binding_gets_hook(self):
        """測試：只有改名綁定時仍插入 const { t }"""
        lines = [
            "function Page() {",
            "  const { t: translate } = useTranslation();",
            "  return <p>{t(\"greeting.hello\")}</p>;",
            "}",
        ]

        add_hook_if_missing(lines)

        assert lines[1] == HOOK_LINE

    def test_missing(self):
        content = "function MyComponent() {\n  return <div>Hello</div>;\n}"

        assert has_use_translation_hook(content) is False


# ============================================================================
# Test Class: import 插入
# ============================================================================

class TestAddImportIfMissing:
    """測試 import 插入"""

    def test_add_at_top(self):
        lines = ['import React from "react";', "function Component() {}"]

        result = add_import_if_missing(lines)

        assert result[0] == IMPORT_LINE
        assert result[1] == 'import React from "react";'

    def test_add_after_use_client(self):
        """測試：插在 "use client" 指令之後"""
        lines = ['"use client"', 'import React from "react";']

        result = add_import_if_missing(lines)

        assert result[0] == '"use client"'
        assert result[1] == IMPORT_LINE

    def test_add_after_single_quoted_directive(self):
        lines = ["'use client';", "export default function Page() {}"]

        result = add_import_if_missing(lines)

        assert result[1] == IMPORT_LINE

    def test_no_duplicate(self):
        """測試：已有 import 時不重複插入"""
        lines = [IMPORT_LINE, "function Component() {}"]

        result = add_import_if_missing(list(lines))

        assert result == lines
        assert sum("useTranslation" in line for line in result) == 1

    def test_empty_file(self):
        assert add_import_if_missing([]) == [IMPORT_LINE]

    def test_modifies_in_place(self):
        lines = ["function Component() {}"]

        result = add_import_if_missing(lines)

        assert result is lines


# ============================================================================
# Test Class: hook 插入
# ============================================================================

class TestAddHookIfMissing:
    """測試 hook 綁定插入"""

    def test_function_declaration(self):
        """測試：函數宣告"""
        lines = ["function MyComponent() {", "  return <div>Hello</div>;", "}"]

        result = add_hook_if_missing(lines)

        assert result[1] == HOOK_LINE
        assert result[2] == ""
        assert result[3] == "  return <div>Hello</div>;"

    def test_exported_arrow_function(self):
        """測試：匯出的箭頭函數"""
        lines = ["export const MyComponent = () => {", "  return <div>Hello</div>;", "};"]

        result = add_hook_if_missing(lines)

        assert result[1] == HOOK_LINE
        assert result[2] == ""

    def test_local_arrow_function(self):
        lines = ["const MyComponent = () => {", "  return <div>Hello</div>;", "};"]

        result = add_hook_if_missing(lines)

        assert result[1] == HOOK_LINE

    def test_multiline_signature(self):
        """測試：參數跨多行時插在區塊開頭之後"""
        lines = [
            "export function Card(",
            "  props: CardProps",
            ") {",
            "  return <div>{props.title}</div>;",
            "}",
        ]

        result = add_hook_if_missing(lines)

        assert result[3] == HOOK_LINE
        assert result[4] == ""

    def test_export_default_function(self):
        lines = ["export default function Page() {", "  return null;", "}"]

        result = add_hook_if_missing(lines)

        assert result[1] == HOOK_LINE

    def test_only_first_function(self):
        """測試：只處理第一個函數"""
        lines = [
            "function First() {",
            "  return null;",
            "}",
            "function Second() {",
            "  return null;",
            "}",
        ]

        result = add_hook_if_missing(lines)

        assert result[1] == HOOK_LINE
        assert sum(line == HOOK_LINE for line in result) == 1

    def test_no_duplicate(self):
        """測試：已有 hook 時不重複插入"""
        lines = [
            "function MyComponent() {",
            "  const { t } = useTranslation();",
            "  return <div>Hello</div>;",
            "}",
        ]

        result = add_hook_if_missing(list(lines))

        assert result == lines
        assert sum("useTranslation()" in line for line in result) == 1

    def test_no_function_leaves_lines(self):
        """測試：找不到函數時保持原樣"""
        lines = ['export const LABEL = "Hola";']

        assert add_hook_if_missing(list(lines)) == lines

    def test_unmatched_signature_leaves_lines(self):
        """測試：找不到區塊開頭時保持原樣"""
        lines = ["function Broken(", "  a,", "  b"]

        assert add_hook_if_missing(list(lines)) == lines
