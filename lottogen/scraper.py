"""
Lotto 6/45 Historical Data Updater

Fetches draw results from the dhlottery JSON endpoint and appends them to a
local store of past draws. The store is de-duplicated by draw number and
kept sorted; a metadata file records the last update time and the highest
draw number seen.
"""
import json
import os
import tempfile
from datetime import datetime, timezone

import requests

from lottogen.analysis import draws_to_frame

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.environ.get("LOTTOGEN_DATA_DIR", os.path.join(PROJECT_ROOT, "data"))
DRAWS_PATH = os.path.join(DATA_DIR, "lotto-draws.json")
META_PATH = os.path.join(DATA_DIR, "meta.json")

API_URL = "https://www.dhlottery.co.kr/common.do?method=getLottoNumber&drwNo="
HEADERS = {"User-Agent": "lottogen-updater"}
MAX_ADD_PER_RUN = int(os.environ.get("MAX_ADD_PER_RUN", 200))
DEFAULT_META = {"updated_at": "1970-01-01T00:00:00Z", "latest_drwNo": 0}


def read_json(path, fallback):
    """Load JSON from `path`, returning `fallback` if missing or unreadable."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        return fallback


def write_json(path, obj):
    """Write `obj` as indented JSON; `path` is only replaced once fully written."""
    directory = os.path.dirname(path)
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(obj, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def _now_iso():
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def fetch_draw(drw_no, session=None):
    """
    Fetch one draw by number.

    Returns None when the draw does not exist yet (the endpoint answers
    ``returnValue: "fail"``). HTTP errors raise ``requests.HTTPError``.
    """
    http = session or requests
    resp = http.get(f"{API_URL}{drw_no}", headers=HEADERS, timeout=15)
    resp.raise_for_status()
    data = resp.json()
    if not data or data.get("returnValue") != "success":
        return None

    numbers = sorted(int(data[f"drwtNo{i}"]) for i in range(1, 7))
    return {
        "drwNo": int(data["drwNo"]),
        "date": data["drwNoDate"],
        "numbers": numbers,
        "bonus": int(data["bnusNo"]),
    }


def update_draws(max_add=None, session=None, draws_path=None, meta_path=None):
    """
    Append newly published draws to the store.

    Starts one past the highest draw number known from either the metadata
    or the draws file and stops at the first missing draw or after
    `max_add` additions.

    Returns
    -------
    dict with 'added', 'total', 'latest'
    """
    draws_path = draws_path or DRAWS_PATH
    meta_path = meta_path or META_PATH
    if max_add is None:
        max_add = MAX_ADD_PER_RUN

    meta = load_meta(meta_path)
    draws_json = read_json(draws_path, {"draws": []})
    draws = draws_json.get("draws") if isinstance(draws_json, dict) else None
    if not isinstance(draws, list):
        draws = []

    existing = {d["drwNo"]: d for d in draws if "drwNo" in d}
    max_in_file = max(existing, default=0)
    start = max(max(meta.get("latest_drwNo") or 0, 0) + 1, max_in_file + 1)

    added = 0
    drw_no = start
    while added < max_add:
        draw = fetch_draw(drw_no, session=session)
        if draw is None:
            break
        existing[draw["drwNo"]] = draw
        meta["latest_drwNo"] = max(meta.get("latest_drwNo") or 0, draw["drwNo"])
        added += 1
        drw_no += 1

    merged = [existing[k] for k in sorted(existing)]
    write_json(draws_path, {"draws": merged})

    meta["updated_at"] = _now_iso()
    write_json(meta_path, meta)

    print(f"[Scraper] Fetched draws {start}..{drw_no - 1}" if added else
          f"[Scraper] No new draws from {start}")
    return {"added": added, "total": len(merged), "latest": meta.get("latest_drwNo", 0)}


def load_meta(meta_path=None):
    """Load the metadata record; anything but a JSON object gives the defaults."""
    meta = read_json(meta_path or META_PATH, None)
    if not isinstance(meta, dict):
        meta = dict(DEFAULT_META)
    return meta


def load_draws(draws_path=None):
    """Load the draw store as a DataFrame. A missing store gives an empty frame."""
    path = draws_path or DRAWS_PATH
    draws_json = read_json(path, {"draws": []})
    records = draws_json.get("draws", []) if isinstance(draws_json, dict) else []
    if not records:
        print(f"[Scraper] No draws found at {path}; frequencies will be uniform.")
    return draws_to_frame(records)


if __name__ == "__main__":
    update_draws()
