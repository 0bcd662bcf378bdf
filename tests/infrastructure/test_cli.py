"""End-to-end tests for the click CLI."""

import shutil
from urllib.parse import unquote

import pytest
from click.testing import CliRunner

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.config import PROJECT_ROOT


@pytest.fixture
def runner(tmp_path, monkeypatch):
    shutil.copy(PROJECT_ROOT / "data" / "products.json", tmp_path / "products.json")
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("STOREFRONT_DEPLOYMENT", raising=False)
    monkeypatch.delenv("STOREFRONT_CONFIG", raising=False)
    bootstrap.settings.cache_clear()
    yield CliRunner()
    bootstrap.settings.cache_clear()


ORDER_ARGS = [
    "order", "place",
    "--product-id", "2",
    "--quantity", "2",
    "--name", "Ali Khan",
    "--phone", "0300 1234567",
    "--address", "Saddar Bazar, Peshawar",
    "--size", "M",
]


class TestProductsCommands:

    def test_list_search_and_sort(self, runner):
        result = runner.invoke(cli, ["products", "list", "--search", "jacket", "--sort", "price-low"])
        assert result.exit_code == 0, result.output
        lines = [line for line in result.output.splitlines() if line[:1].isdigit()]
        assert [line.split()[0] for line in lines] == ["3", "7", "5", "2", "4", "1"]

    def test_list_no_matches(self, runner):
        result = runner.invoke(cli, ["products", "list", "--search", "sneakers"])
        assert result.exit_code == 0
        assert "No products found" in result.output

    def test_show_unknown_product(self, runner):
        result = runner.invoke(cli, ["products", "show", "--id", "999"])
        assert result.exit_code != 0
        assert "Product with ID 999 not found" in result.output


class TestOrderPlace:

    def test_whatsapp_order(self, runner):
        result = runner.invoke(cli, ORDER_ARGS)
        assert result.exit_code == 0, result.output
        assert "Price: PKR 4299" in result.output
        assert "Total: PKR 8598" in result.output
        link = [l for l in result.output.splitlines() if l.startswith("https://wa.me/")][0]
        assert link.startswith("https://wa.me/923441092910?text=")
        assert "Total: PKR 8598" in unquote(link)

    def test_mailto_order(self, runner):
        result = runner.invoke(cli, ORDER_ARGS + ["--channel", "email"])
        assert result.exit_code == 0, result.output
        assert "mailto:waqaskhank128@gmail.com?subject=" in result.output

    def test_clipboard_deployment(self, runner):
        result = runner.invoke(
            cli, ["--deployment", "clipboard"] + ORDER_ARGS + ["--channel", "email"]
        )
        assert result.exit_code == 0, result.output
        assert "ORDER SUMMARY:" in result.output
        assert "https://mail.google.com/compose?to=hhmibrothers@gmail.com&su=" in result.output

    def test_missing_fields_reported(self, runner):
        args = [a for a in ORDER_ARGS]
        i = args.index("--name")
        del args[i:i + 2]
        result = runner.invoke(cli, args)
        assert result.exit_code != 0
        assert "required fields: name" in result.output

    def test_invalid_email_reported(self, runner):
        result = runner.invoke(cli, ORDER_ARGS + ["--email", "not-an-email"])
        assert result.exit_code != 0
        assert "Invalid email address" in result.output

    def test_size_outside_deployment_sizes_reported(self, runner):
        args = list(ORDER_ARGS)
        args[args.index("M")] = "XXXL"
        result = runner.invoke(cli, args)
        assert result.exit_code != 0
        assert "Unknown size 'XXXL'" in result.output


class TestPreferenceCommands:

    def test_theme_round_trip(self, runner, tmp_path):
        assert runner.invoke(cli, ["theme", "show"]).output.strip() == "default"
        result = runner.invoke(cli, ["theme", "set", "dark"])
        assert result.exit_code == 0
        assert runner.invoke(cli, ["theme", "show"]).output.strip() == "dark"
        assert (tmp_path / "preferences.json").exists()

    def test_history_empty_then_cleared(self, runner):
        assert "No conversation history" in runner.invoke(cli, ["history", "show"]).output
        result = runner.invoke(cli, ["history", "clear"])
        assert result.exit_code == 0
        assert "cleared" in result.output
