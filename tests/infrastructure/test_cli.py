"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from marketplace.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("MARKETPLACE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("MARKETPLACE_SECRET_KEY", "cli-test-secret")
    monkeypatch.setenv("MARKETPLACE_BCRYPT_ROUNDS", "4")
    monkeypatch.delenv("MARKETPLACE_TOKEN", raising=False)
    monkeypatch.delenv("MARKETPLACE_VERIFY_CATALOG", raising=False)
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, list(args), catch_exceptions=False)

    return _run


def _id_from(output: str) -> str:
    for line in output.splitlines():
        if line.startswith("ID: "):
            return line[len("ID: "):]
    raise AssertionError(f"no ID line in {output!r}")


@pytest.fixture
def accounts(run, tmp_path):
    """A manufacturer with a one-product catalog and a buyer, both logged in."""
    products = tmp_path / "products.json"
    products.write_text(
        json.dumps([{"name": "Cotton Saree", "price": 120, "category": "Textiles"}]),
        encoding="utf-8",
    )
    result = run(
        "manufacturer", "register",
        "--company-name", "Loom Works",
        "--owner-name", "Ravi",
        "--email", "loom@example.com",
        "--username", "loom",
        "--password", "s3cret",
        "--products-file", str(products),
    )
    assert result.exit_code == 0, result.output
    manufacturer_id = _id_from(result.output)

    result = run("buyer", "register", "--username", "asha", "--password", "pw", "--name", "Asha")
    assert result.exit_code == 0, result.output

    maker_token = run("manufacturer", "login", "--username", "loom@example.com", "--password", "s3cret").output.strip()
    buyer_token = run("buyer", "login", "--username", "asha", "--password", "pw").output.strip()
    return manufacturer_id, maker_token, buyer_token


def _order_id(output: str) -> str:
    first = output.splitlines()[0]
    return first.split()[1]


class TestAccountsCli:

    def test_public_listing(self, run, accounts):
        result = run("manufacturer", "list")
        assert result.exit_code == 0
        assert "Loom Works" in result.output

    def test_duplicate_registration_fails(self, run, accounts):
        result = run("buyer", "register", "--username", "asha", "--password", "pw")
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_bad_login(self, run, accounts):
        result = run("buyer", "login", "--username", "asha", "--password", "nope")
        assert result.exit_code == 1
        assert "Invalid credentials" in result.output

    def test_profile_requires_token(self, run, accounts):
        result = run("manufacturer", "show", "--token", "bogus")
        assert result.exit_code == 1
        assert "Malformed token" in result.output

    def test_catalog_show_and_replace(self, run, accounts, tmp_path):
        _, maker_token, _ = accounts
        assert "Cotton Saree" in run("catalog", "show", "--token", maker_token).output

        new_catalog = tmp_path / "new.json"
        new_catalog.write_text(json.dumps([{"name": "Shawl", "price": 40}]), encoding="utf-8")
        result = run("catalog", "replace", "--file", str(new_catalog), "--token", maker_token)
        assert result.exit_code == 0, result.output
        assert "1 product(s)" in result.output

    def test_buyer_cannot_replace_catalog(self, run, accounts, tmp_path):
        _, _, buyer_token = accounts
        catalog_file = tmp_path / "c.json"
        catalog_file.write_text("[]", encoding="utf-8")
        result = run("catalog", "replace", "--file", str(catalog_file), "--token", buyer_token)
        assert result.exit_code == 1
        assert "Only a manufacturer" in result.output


class TestOrdersCli:

    def test_order_lifecycle(self, run, accounts):
        manufacturer_id, maker_token, buyer_token = accounts

        result = run(
            "order", "create",
            "--manufacturer-id", manufacturer_id,
            "--product", "Cotton Saree",
            "--price", "100",
            "--quantity", "3",
            "--token", buyer_token,
        )
        assert result.exit_code == 0, result.output
        assert "= 300.00" in result.output
        order_id = _order_id(result.output)

        assert order_id in run("order", "list", "--token", maker_token).output
        assert order_id in run("order", "list", "--token", buyer_token).output

        result = run("order", "status", "--id", order_id, "--to", "Approved", "--token", maker_token)
        assert result.exit_code == 1
        assert "allowed: Allowed, Cancelled" in result.output

        result = run("order", "status", "--id", order_id, "--to", "Allowed", "--token", buyer_token)
        assert result.exit_code == 1
        assert "Only a manufacturer" in result.output

        for status in ("Allowed", "Approved", "Delivered"):
            result = run("order", "status", "--id", order_id, "--to", status, "--token", maker_token)
            assert result.exit_code == 0, result.output
            assert f"is now {status}" in result.output

        shown = run("order", "show", "--id", order_id, "--token", buyer_token)
        assert "status=Delivered" in shown.output
        assert "Next: (final)" in shown.output

    def test_token_from_environment(self, run, accounts, monkeypatch):
        _, maker_token, _ = accounts
        monkeypatch.setenv("MARKETPLACE_TOKEN", maker_token)
        result = run("order", "list")
        assert result.exit_code == 0
        assert "No orders found." in result.output

    def test_invalid_quantity(self, run, accounts):
        manufacturer_id, _, buyer_token = accounts
        result = run(
            "order", "create",
            "--manufacturer-id", manufacturer_id,
            "--product", "Cotton Saree",
            "--price", "100",
            "--quantity", "0",
            "--token", buyer_token,
        )
        assert result.exit_code == 1
        assert "quantity" in result.output


class TestSettingsCli:

    def test_bad_integer_setting_is_reported(self, run, monkeypatch):
        monkeypatch.setenv("MARKETPLACE_TOKEN_TTL", "one day")
        result = run("manufacturer", "list")
        assert result.exit_code == 1
        assert "MARKETPLACE_TOKEN_TTL must be an integer" in result.output
