"""Tests for the example console driver."""

import logging

from demo import EXAMPLE_PACKAGES, main


class TestMain:
    """main() prints one sorted line per example package."""

    def test_prints_header(self, capsys):
        main()
        out = capsys.readouterr().out
        assert out.startswith("Package Sorting System\n")

    def test_prints_every_example(self, capsys):
        main()
        lines = capsys.readouterr().out.strip().splitlines()
        # header, blank line, one line per package
        assert len(lines) == 2 + len(EXAMPLE_PACKAGES)

    def test_documented_results(self, capsys):
        main()
        out = capsys.readouterr().out
        assert "Standard package: 50x50x50 cm, 10 kg -> STANDARD" in out
        assert "Bulky by volume: 100x100x100 cm, 10 kg -> SPECIAL" in out
        assert "Bulky by dimension: 160x50x50 cm, 10 kg -> SPECIAL" in out
        assert "Heavy package: 50x50x50 cm, 25 kg -> SPECIAL" in out
        assert "Bulky and heavy: 160x50x50 cm, 25 kg -> REJECTED" in out

    def test_custom_packages(self, capsys):
        main([("Tiny", 1.5, 2, 3, 0.25)])
        out = capsys.readouterr().out
        assert "Tiny: 1.5x2x3 cm, 0.25 kg -> STANDARD" in out

    def test_logs_each_result_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="demo"):
            main([("Heavy package", 50.0, 50.0, 50.0, 25.0)])
        assert "Heavy package sorted to SPECIAL" in caplog.text
