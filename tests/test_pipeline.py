import json
from datetime import date
from unittest import mock

import pandas as pd
import requests

import update_leaderboard
from seller_ranking import data_handler, settings, utils
from seller_ranking.analysis import analyze_sales_data
from seller_ranking.pipelines.leaderboard import LeaderboardPipeline
from seller_ranking.strategies import DEFAULT_OPTIONS


def _write_input(directory, name, payload):
    path = directory / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_find_latest_report_uses_date_in_filename(tmp_path):
    (tmp_path / "sales_data_2024-01-10.json").write_text("{}")
    (tmp_path / "sales_data_2024-02-01.json").write_text("{}")
    (tmp_path / "other_2025-01-01.json").write_text("{}")

    path, file_date = utils.find_latest_report(tmp_path, "sales_data_")

    assert path.name == "sales_data_2024-02-01.json"
    assert file_date == date(2024, 2, 1)


def test_find_latest_report_missing_dir_or_files(tmp_path):
    assert utils.find_latest_report(tmp_path / "nope", "sales_data_") is None
    assert utils.find_latest_report(tmp_path, "sales_data_") is None


def test_load_json_handles_missing_and_invalid_files(tmp_path):
    assert utils.load_json(tmp_path / "missing.json") is None

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert utils.load_json(broken) is None


def test_load_sales_data_requires_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert data_handler.load_sales_data(path) is None


def test_leaderboard_frames(sales_data):
    reports = analyze_sales_data(sales_data, DEFAULT_OPTIONS)

    board = data_handler.leaderboard_frame(reports)
    assert list(board.columns) == [
        "Rank", "Seller ID", "Name", "Revenue", "Profit", "Sales Count", "Bonus"
    ]
    assert board["Rank"].tolist() == [1, 2, 3]
    assert board["Seller ID"].tolist() == ["seller_b", "seller_a", "seller_c"]

    top = data_handler.top_products_frame(reports)
    assert list(top.columns) == [
        "Seller ID", "Seller Name", "Position", "SKU", "Quantity", "Product Name", "Category"
    ]
    seller_b = top[top["Seller ID"] == "seller_b"]
    assert seller_b["Position"].tolist() == [1, 2]
    assert seller_b["SKU"].tolist() == ["SKU_002", "SKU_001"]


def test_pipeline_writes_outputs(isolated_dirs, sales_data):
    input_dir, output_dir = isolated_dirs
    _write_input(input_dir, "sales_data_2024-03-01.json", sales_data)

    pipeline = LeaderboardPipeline(test_mode=True)
    assert pipeline.run() is True

    board = pd.read_csv(pipeline.saved_files["csv"])
    assert board["Seller ID"].tolist() == ["seller_b", "seller_a", "seller_c"]
    assert board["Bonus"].tolist() == [150.0, 100.0, 10.0]

    with open(pipeline.saved_files["json"], encoding="utf-8") as f:
        dumped = json.load(f)
    assert dumped[0]["Seller ID"] == "seller_b"
    assert dumped[0]["Top Products"][0]["SKU"] == "SKU_002"

    assert pipeline.saved_files["top_products_csv"].exists()
    assert pipeline.status_summary["source_file"] == "sales_data_2024-03-01.json"
    assert pipeline.status_summary["data_date"] == "2024-03-01"
    assert pipeline.status_summary["skipped_records"] == 0


def test_pipeline_skips_json_when_disabled(isolated_dirs, sales_data, monkeypatch):
    input_dir, output_dir = isolated_dirs
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", False)
    path = _write_input(input_dir, "custom.json", sales_data)

    pipeline = LeaderboardPipeline(input_path=path, test_mode=True)
    assert pipeline.run() is True
    assert "json" not in pipeline.saved_files
    assert list(output_dir.glob("*.json")) == []


def test_pipeline_without_input_produces_nothing(isolated_dirs):
    _, output_dir = isolated_dirs
    assert LeaderboardPipeline(test_mode=True).run() is False
    assert not output_dir.exists()


def test_pipeline_rejects_invalid_data(isolated_dirs, sales_data):
    input_dir, output_dir = isolated_dirs
    sales_data["sellers"] = []
    _write_input(input_dir, "sales_data_2024-03-01.json", sales_data)

    assert LeaderboardPipeline(test_mode=True).run() is False
    assert not output_dir.exists()


def test_pipeline_counts_skipped_references(isolated_dirs, sales_data):
    input_dir, _ = isolated_dirs
    sales_data["purchase_records"].append(
        {"id": "r_ghost", "seller_id": "ghost", "total_amount": 1.0, "items": []}
    )
    _write_input(input_dir, "sales_data_2024-03-01.json", sales_data)

    pipeline = LeaderboardPipeline(test_mode=True)
    pipeline.run()
    assert pipeline.status_summary["skipped_records"] == 1


def test_webhook_skipped_without_url(monkeypatch):
    monkeypatch.setattr(settings, "WEBHOOK_URL", None)
    with mock.patch.object(data_handler.requests, "post") as post:
        assert data_handler.post_to_webhook([], {}, "leaderboard") is False
    post.assert_not_called()


def test_webhook_posts_payload(monkeypatch, sales_data):
    monkeypatch.setattr(settings, "WEBHOOK_URL", "https://example.invalid/hook")
    reports = analyze_sales_data(sales_data, DEFAULT_OPTIONS)

    with mock.patch.object(data_handler.requests, "post") as post:
        assert data_handler.post_to_webhook(reports, {"sellers": 3}, "leaderboard") is True

    _, kwargs = post.call_args
    assert kwargs["timeout"] == 15
    assert kwargs["json"]["reportType"] == "leaderboard"
    assert kwargs["json"]["metadata"] == {"sellers": 3}
    assert kwargs["json"]["reportData"][0]["Seller ID"] == "seller_b"


def test_webhook_errors_are_not_raised(monkeypatch):
    monkeypatch.setattr(settings, "WEBHOOK_URL", "https://example.invalid/hook")
    with mock.patch.object(
        data_handler.requests, "post", side_effect=requests.exceptions.ConnectionError("down")
    ):
        assert data_handler.post_to_webhook([], {}, "leaderboard") is False


def test_cli_exit_codes(isolated_dirs, sales_data):
    input_dir, _ = isolated_dirs
    path = _write_input(input_dir, "cli.json", sales_data)

    assert update_leaderboard.main(["--input", str(path), "--test"]) == 0
    assert update_leaderboard.main(["--input", str(input_dir / "missing.json"), "--test"]) == 1
