"""命令行演示与终端渲染测试"""

import sys

import pytest

import main
from src.poker.card import parse_cards
from src.poker.combo_detector import detect_combo
from src.ui.renderer import TerminalRenderer


class TestRenderer:
    """TerminalRenderer"""

    def test_format_combo_plain(self):
        renderer = TerminalRenderer(style="ascii", color=False)
        combo = detect_combo(parse_cards("Aa Ab Kc Kd 2a"))
        assert renderer.format_combo(combo) == "[两对] Aa Ab Kc Kd 2a"

    def test_red_suits_colored(self):
        renderer = TerminalRenderer(style="unicode")
        assert "\033[91m" in renderer.format_card(parse_cards("Ab")[0])
        assert "\033[91m" not in renderer.format_card(parse_cards("Aa")[0])

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            TerminalRenderer(style="braille")


class TestMain:
    """main.py 入口"""

    def run(self, monkeypatch, *argv):
        monkeypatch.setattr(sys, "argv", ["main.py", *argv])
        main.main()

    def test_given_hand(self, monkeypatch, capsys):
        self.run(monkeypatch, "--hand", "ta Ja Qa Ka Aa", "--no-color")
        out = capsys.readouterr().out
        assert "皇家同花顺" in out
        assert "royal flush: Aa Ka Qa Ja ta" in out

    def test_deal_rounds(self, monkeypatch, capsys):
        self.run(monkeypatch, "--rounds", "2", "--seed", "3", "--fast", "--no-color")
        out = capsys.readouterr().out
        assert "第 2/2 手" in out
        assert "结果:" in out

    @pytest.mark.parametrize("argv", [
        ["--hand", "Aa Kb"],
        ["--hand", "Aa Kb Qc Jd Zz"],
        ["--hand", "Aa Aa Qc Jd 2b"],
        ["--cards", "4"],
    ])
    def test_usage_errors(self, monkeypatch, argv):
        with pytest.raises(SystemExit) as exc:
            self.run(monkeypatch, *argv)
        assert exc.value.code == 2
