"""Scan an AddOns folder and summarize every manifest.

This example demonstrates how to:
- Parse each addon's manifest with full validation
- Report errors and unresolved dependencies
- Save all records to a JSON file
"""

import json
import sys
from pathlib import Path

from eso_addon_manifest import SourceRegistry


def main():
    # Change this to your ESO AddOns directory
    addons_dir = Path.home() / "Documents" / "Elder Scrolls Online" / "live" / "AddOns"

    if not addons_dir.exists():
        print(f"Directory not found: {addons_dir}", file=sys.stderr)
        print("Please update the addons_dir variable in this script", file=sys.stderr)
        return

    records = {}
    for addon_dir in sorted(p for p in addons_dir.iterdir() if p.is_dir()):
        manifest_path = addon_dir / f"{addon_dir.name}.txt"
        if not manifest_path.is_file():
            continue

        pipeline = SourceRegistry.create_pipeline('file', path=manifest_path, full_validate=True)
        records[addon_dir.name] = pipeline.run()

    # Dependencies that no scanned addon provides
    installed = set(records)
    for name, record in records.items():
        missing = [dep.title for dep in record.depends_on if dep.title not in installed]
        status = "ok" if record.is_valid else f"{len(record.errors)} errors"
        print(f"{name}: {status}", file=sys.stderr)
        for issue in record.errors:
            print(f"    {issue}", file=sys.stderr)
        if missing:
            print(f"    missing dependencies: {', '.join(missing)}", file=sys.stderr)

    output_file = Path("addons.json")
    with open(output_file, 'w') as f:
        json.dump({name: record.to_dict() for name, record in records.items()}, f, indent=2)

    print(f"\nSaved {len(records)} manifests to {output_file}", file=sys.stderr)


if __name__ == '__main__':
    main()
