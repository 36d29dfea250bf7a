"""测试 Unicode 归一化模块"""
import pytest

from hanzi_filter.core.text_processor import UnicodeNormalizer, normalize_text


class TestNormalizeText:
    """normalize_text 测试"""

    def test_fullwidth(self):
        assert normalize_text("！＠Ａ１") == "!@A1"

    def test_compatibility_ideographs(self):
        assert normalize_text("\uf90a\uf90b\uf90c\uf90e") == "金喇奈癩"

    def test_kangxi_radicals(self):
        assert normalize_text("\u2f00\u2f59") == "一\u723f"

    def test_empty(self):
        assert normalize_text("") == ""

    def test_protected_set(self):
        assert normalize_text("\uf90a\uf90b", protected={"\uf90a"}) == "\uf90a喇"

    def test_protected_predicate(self):
        assert normalize_text("！！", protected=lambda c: c == "！") == "！！"

    def test_runs_between_protected(self):
        """受保护字符两侧的连续段分别归一化"""
        assert normalize_text("！x！", protected={"x"}) == "!x!"
        assert normalize_text("x！x", protected={"x"}) == "x!x"

    def test_expansion(self):
        """一对多展开"""
        assert normalize_text("\u337f") == "株式会社"
        assert normalize_text("a\u337fb", protected={"\u337f"}) == "a\u337fb"

    def test_composition_does_not_cross_protected(self):
        assert normalize_text("e\u0301") == "\u00e9"
        assert normalize_text("e\u0301", protected={"e"}) == "e\u0301"

    def test_composition_inside_run(self):
        assert normalize_text("xe\u0301", protected={"x"}) == "x\u00e9"

    def test_empty_protected_set(self):
        assert normalize_text("！", protected=set()) == "!"

    def test_lone_surrogate_passthrough(self):
        assert normalize_text("中\ud800") == "中\ud800"


class TestUnicodeNormalizer:
    """UnicodeNormalizer 测试"""

    def test_default_form(self):
        normalizer = UnicodeNormalizer()
        assert normalizer.form == "NFKC"
        assert normalizer.normalize("！") == "!"

    def test_nfc_keeps_fullwidth(self):
        assert UnicodeNormalizer("NFC").normalize("！") == "！"

    def test_invalid_form(self):
        with pytest.raises(ValueError):
            UnicodeNormalizer("NFX")

    def test_is_normalized(self):
        normalizer = UnicodeNormalizer()
        assert normalizer.is_normalized("中文")
        assert not normalizer.is_normalized("！")
