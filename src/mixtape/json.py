import datetime
import json
import os


def create_collection_snapshot(root_key: str) -> dict:
    """
    Create the base JSON snapshot structure for an item collection export.
    """
    return {
        "generated_at": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        root_key: [],
    }


def write_json_snapshot(snapshot: dict, json_output_path: str) -> None:
    """
    Write a JSON snapshot to disk, creating parent directories if needed.
    """
    os.makedirs(os.path.dirname(json_output_path) or ".", exist_ok=True)
    with open(json_output_path, "w", encoding="utf-8") as f:
        json.dump(snapshot, f, ensure_ascii=False, indent=2)


def read_json_snapshot(json_input_path: str, root_key: str) -> dict:
    """
    Read a JSON snapshot from disk. A missing file yields an empty snapshot.
    """
    if not os.path.exists(json_input_path):
        return create_collection_snapshot(root_key)
    with open(json_input_path, "r", encoding="utf-8") as f:
        snapshot = json.load(f)
    snapshot.setdefault(root_key, [])
    return snapshot
