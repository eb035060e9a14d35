import json
from pathlib import Path


def write_json_report(payload: dict, out_path: Path) -> None:
    # interface and network names are user text; keep them readable
    text = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")
