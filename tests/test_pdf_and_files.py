import json
from datetime import datetime

import pytest

from src.export.build_exports import (
    EXPORT_FILENAMES,
    export_all,
    main,
    render_export,
    save_export,
)
from src.export.pdf_report import build_pdf_report
from src.tokens.design_tokens import DesignConfig

FIXED_DATE = datetime(2024, 3, 15, 10, 30)


class TestPdfReport:
    def test_returns_pdf_bytes(self, full_config, full_tokens):
        pdf = build_pdf_report(full_config, full_tokens, generated_at=FIXED_DATE)
        assert isinstance(pdf, bytes)
        assert pdf.startswith(b"%PDF")
        assert pdf.rstrip().endswith(b"%%EOF")

    def test_accepts_minimal_config(self, scenario_config, scenario_tokens):
        pdf = build_pdf_report(scenario_config, scenario_tokens)
        assert pdf.startswith(b"%PDF")

    def test_escapes_markup_in_font_names(self, full_tokens):
        config = DesignConfig("#6366f1", font_family="<b>Fira & Co</b>")
        pdf = build_pdf_report(config, full_tokens, generated_at=FIXED_DATE)
        assert pdf.startswith(b"%PDF")


class TestRenderExport:
    @pytest.mark.parametrize("kind", ["css", "tailwind", "json"])
    def test_text_exports(self, scenario_config, scenario_tokens, kind):
        assert isinstance(render_export(kind, scenario_config, scenario_tokens), str)

    def test_pdf_export(self, scenario_config, scenario_tokens):
        assert render_export("pdf", scenario_config, scenario_tokens).startswith(b"%PDF")

    def test_unknown_kind(self, scenario_config, scenario_tokens):
        with pytest.raises(ValueError):
            render_export("scss", scenario_config, scenario_tokens)


class TestSaveExport:
    def test_writes_text(self, tmp_path):
        path = save_export(":root {\n}\n", "design-tokens.css", tmp_path)
        assert path == tmp_path / "design-tokens.css"
        assert path.read_text(encoding="utf-8") == ":root {\n}\n"

    def test_writes_bytes(self, tmp_path):
        path = save_export(b"%PDF-1.4", "design-system.pdf", tmp_path)
        assert path.read_bytes() == b"%PDF-1.4"

    def test_creates_missing_directory(self, tmp_path):
        target = tmp_path / "nested" / "exports"
        path = save_export("{}", "design-system.json", target)
        assert path.exists()

    def test_export_all_writes_every_file(self, full_config, tmp_path):
        paths = export_all(full_config, tmp_path)
        assert [p.name for p in paths] == list(EXPORT_FILENAMES.values())
        assert all(p.exists() for p in paths)
        payload = json.loads((tmp_path / "design-system.json").read_text(encoding="utf-8"))
        assert payload["config"]["secondaryColor"] == "#8b5cf6"


class TestCli:
    def test_main_writes_exports(self, tmp_path, capsys):
        code = main(["--primary", "#0ea5e9", "--spacing", "8", "--font", "Roboto", "--out", str(tmp_path)])
        assert code == 0
        out = capsys.readouterr().out
        assert out.count("[OK]") == 4

        css = (tmp_path / "design-tokens.css").read_text(encoding="utf-8")
        assert "  --color-primary-500: #0ea5e9;" in css
        assert "  --spacing-xs: 8px;" in css
        assert "  --font-sans: Roboto, system-ui, sans-serif;" in css

        payload = json.loads((tmp_path / "design-system.json").read_text(encoding="utf-8"))
        assert payload["config"]["baseSpacing"] == 8
        assert payload["config"]["headingFont"] == "Roboto"

    def test_main_fractional_spacing(self, tmp_path):
        assert main(["--spacing", "2.5", "--out", str(tmp_path)]) == 0
        css = (tmp_path / "design-tokens.css").read_text(encoding="utf-8")
        assert "  --spacing-xs: 2.5px;" in css

    def test_main_rejects_invalid_color(self, tmp_path, capsys):
        assert main(["--primary", "no-es-un-color", "--out", str(tmp_path)]) == 1
        assert "[OK]" not in capsys.readouterr().out
        assert not (tmp_path / "design-tokens.css").exists()

    def test_main_rejects_invalid_spacing(self, tmp_path):
        assert main(["--spacing", "0", "--out", str(tmp_path)]) == 1
