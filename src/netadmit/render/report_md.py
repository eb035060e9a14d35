from pathlib import Path


def write_markdown_report(payload: dict, out_path: Path) -> None:
    lines = ["# netadmit report", ""]
    source = payload.get("source", {})
    if source:
        lines.append(f"- Manifest: {source.get('kind') or 'spec'} `{source.get('name', '')}`")
        lines.append(f"- Field prefix: `{source.get('field', '')}`")
    lines.append("")
    lines.append("## Summary")
    summary = payload.get("summary", {})
    lines.append(f"- Exit code: {summary.get('exit_code', 1)}")
    lines.append(f"- Cause counts: {summary.get('counts_by_type', {})}")
    lines.append("")
    lines.append("## Causes")

    causes = payload.get("causes", [])
    if not causes:
        lines.append("No causes reported.")

    grouped: dict[str, list[dict]] = {}
    for item in causes:
        grouped.setdefault(item.get("type", "other"), []).append(item)

    for cause_type, items in grouped.items():
        lines.append(f"### {cause_type}")
        for item in items:
            lines.append(f"- `{item['field']}`: {item['message']}")
        lines.append("")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(lines), encoding="utf-8")
