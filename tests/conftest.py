import pytest

from seller_ranking import settings


def make_seller(seller_id: str, first: str = "First", last: str = "Last") -> dict:
    return {"id": seller_id, "first_name": first, "last_name": last}


def make_product(sku: str, purchase_price: float = 0.0, name: str | None = None, category: str = "General") -> dict:
    return {
        "sku": sku,
        "name": name or f"Product {sku}",
        "category": category,
        "purchase_price": purchase_price,
    }


def make_item(sku: str, sale_price: float, quantity: int = 1, discount: float = 0.0) -> dict:
    return {"sku": sku, "sale_price": sale_price, "quantity": quantity, "discount": discount}


def make_record(record_id: str, seller_id: str, total_amount: float, items: list[dict]) -> dict:
    return {
        "id": record_id,
        "seller_id": seller_id,
        "total_amount": total_amount,
        "items": items,
    }


@pytest.fixture
def sales_data() -> dict:
    """Three sellers: B and A tie on profit (B has more revenue), C trails."""
    sellers = [
        make_seller("seller_a", "Anna", "Ivanova"),
        make_seller("seller_b", "Boris", "Petrov"),
        make_seller("seller_c", "Clara", "Sidorova"),
    ]
    products = [
        make_product("SKU_001", purchase_price=0.0, name="Tea", category="Drinks"),
        make_product("SKU_002", purchase_price=0.0, name="Coffee", category="Drinks"),
    ]
    records = [
        make_record(f"r_a{i}", "seller_a", 400.0, [make_item("SKU_001", 200.0)])
        for i in range(5)
    ]
    records += [
        make_record("r_b1", "seller_b", 1000.0, [make_item("SKU_002", 400.0)]),
        make_record("r_b2", "seller_b", 1000.0, [make_item("SKU_002", 400.0)]),
        make_record("r_b3", "seller_b", 500.0, [make_item("SKU_001", 200.0)]),
        make_record("r_c1", "seller_c", 100.0, [make_item("SKU_001", 100.0)]),
    ]
    return {"sellers": sellers, "products": products, "purchase_records": records}


@pytest.fixture
def isolated_dirs(tmp_path, monkeypatch):
    """Points input, output and log directories at a temporary folder."""
    input_dir = tmp_path / "input"
    output_dir = tmp_path / "output"
    input_dir.mkdir()
    monkeypatch.setattr(settings, "INPUT_DIR", input_dir)
    monkeypatch.setattr(settings, "OUTPUT_DIR", output_dir)
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(settings, "WEBHOOK_URL", None)
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", True)
    return input_dir, output_dir
