import json
import sys

import pytest

from config import load_settings
from crawlers import FileFeedCrawler, ResultsFeedCrawler
from scheduler import MedalWatchScheduler, main
from tests.helpers import award, feed_document
from utils import reset_logging

FEED_URL = "https://results.example.test/athletics.json"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("FEED_URL", "FEED_FILE", "TOP_N", "POLL_INTERVAL_SECONDS", "LOG_LEVEL", "LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    yield
    # main() installs a stderr handler bound to the captured stream
    reset_logging()


@pytest.fixture
def feed_file(tmp_path):
    path = tmp_path / "athletics.json"
    document = feed_document([award("GOLD", "Kenya"), award("SILVER", "Ethiopia"), award("BRONZE", "Kenya")])
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def run_main(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["medal-watch", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def test_once_with_valid_file_exits_zero(monkeypatch, feed_file):
    assert run_main(monkeypatch, "--once", "--file", str(feed_file)) == 0


def test_once_with_missing_file_exits_one(monkeypatch, tmp_path):
    assert run_main(monkeypatch, "--once", "--file", str(tmp_path / "missing.json")) == 1


def test_once_with_malformed_feed_exits_one(monkeypatch, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(feed_document([award("TIN", "Peru")])), encoding="utf-8")
    
    assert run_main(monkeypatch, "--once", "--file", str(path)) == 1


@pytest.mark.parametrize("flags", [
    ["--top-n", "0"],
    ["--interval", "0"],
    ["--interval", "-1"],
])
def test_invalid_flags_exit_two(monkeypatch, feed_file, flags):
    assert run_main(monkeypatch, "--once", "--file", str(feed_file), *flags) == 2


def test_no_feed_exits_two(monkeypatch):
    assert run_main(monkeypatch, "--once") == 2


def test_url_flag_with_feed_file_in_environment_exits_two(monkeypatch, feed_file):
    monkeypatch.setenv("FEED_FILE", str(feed_file))
    
    assert run_main(monkeypatch, "--once", "--url", FEED_URL) == 2


def test_url_settings_build_http_crawler():
    scheduler = MedalWatchScheduler(load_settings(FEED_URL=FEED_URL, TOP_N=3, POLL_INTERVAL_SECONDS=0.5))
    
    assert isinstance(scheduler.poller.source, ResultsFeedCrawler)
    assert not isinstance(scheduler.poller.source, FileFeedCrawler)
    assert scheduler.poller.source.url == FEED_URL
    assert scheduler.poller.top_n == 3
    assert scheduler.poller.poll_interval == 0.5


def test_file_settings_build_file_crawler(feed_file):
    scheduler = MedalWatchScheduler(load_settings(FEED_FILE=str(feed_file)))
    
    assert isinstance(scheduler.poller.source, FileFeedCrawler)
    assert scheduler.poller.source.path == feed_file
