"""Tests for the command line entry point."""

import pytest

from iso_configurator.catalog import JsonCatalogStore
from iso_configurator.excel import CatalogTemplateGenerator
from iso_configurator.run_cli import CATALOG_ENV_VAR, load_catalog, main


@pytest.fixture
def catalog_file(catalog, temp_dir):
    return JsonCatalogStore.save(catalog, temp_dir / "catalog.json")


class TestLoadCatalog:

    def test_json(self, catalog_file):
        store = load_catalog(catalog_file)
        assert store.find_base_configuration("1.2.1") is not None

    @pytest.mark.integration
    def test_workbook(self, catalog, temp_dir):
        path = temp_dir / "catalog.xlsx"
        CatalogTemplateGenerator(catalog).save(str(path))
        assert load_catalog(path).find_base_configuration("1.2.1") is not None

    def test_invalid_workbook(self, temp_dir):
        path = temp_dir / "empty.xlsx"
        CatalogTemplateGenerator().save(str(path))
        with pytest.raises(ValueError, match="Invalid catalog workbook"):
            load_catalog(path)

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_catalog(temp_dir / "missing.json")

    def test_unsupported_suffix(self, temp_dir):
        path = temp_dir / "catalog.csv"
        path.write_text("iso_class\n")
        with pytest.raises(ValueError, match="Unsupported catalog file type"):
            load_catalog(path)


class TestMain:

    def test_iso_with_flow(self, catalog_file, capsys):
        code = main(["--catalog", str(catalog_file), "iso", "1", "2", "1", "--flow", "8"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Found 1 configuration(s)" in out
        assert "Configuration #1: QCMD (-40F)" in out
        assert "QCMD 4-11  [4-11 CFM]" in out
        assert "QOF -> QMF -> QCMD 4-11" in out

    def test_industry(self, catalog_file, capsys):
        code = main(["--catalog", str(catalog_file), "industry", "Carwash", "Touchless Wash Systems"])
        assert code == 0
        assert "QCMD 12-64" in capsys.readouterr().out

    def test_not_found_exit_code(self, catalog_file, capsys):
        code = main(["--catalog", str(catalog_file), "iso", "9", "9", "9"])
        assert code == 1
        assert "Error: ISO configuration not found: 9.9.9" in capsys.readouterr().out

    def test_no_flow_match(self, catalog_file, capsys):
        code = main(["--catalog", str(catalog_file), "iso", "1", "2", "1", "--flow", "1000"])
        out = capsys.readouterr().out
        assert code == 0
        assert "No compatible configurations found!" in out

    def test_catalog_from_environment(self, catalog_file, capsys, monkeypatch):
        monkeypatch.setenv(CATALOG_ENV_VAR, str(catalog_file))
        assert main(["iso", "3", "-", "3"]) == 0
        assert "No Dryer Required" in capsys.readouterr().out

    def test_no_catalog(self, capsys, monkeypatch):
        monkeypatch.delenv(CATALOG_ENV_VAR, raising=False)
        assert main(["iso", "1", "2", "1"]) == 1
        assert "no catalog given" in capsys.readouterr().out

    def test_missing_catalog_file(self, temp_dir, capsys):
        assert main(["--catalog", str(temp_dir / "nope.json"), "iso", "1", "2", "1"]) == 1
        assert "Catalog file not found" in capsys.readouterr().out

    @pytest.mark.integration
    def test_export(self, catalog_file, temp_dir, capsys):
        export_path = temp_dir / "result.xlsx"
        code = main([
            "--catalog", str(catalog_file), "--export", str(export_path),
            "iso", "1", "1", "1",
        ])
        assert code == 0
        assert export_path.exists()
        assert "Exported to:" in capsys.readouterr().out
