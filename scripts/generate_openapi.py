"""
Write the store service OpenAPI schema to a JSON file.

Usage:
    python scripts/generate_openapi.py [output.json]
"""

import json
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.store_service.app.main import app  # noqa: E402


def main():
    output = sys.argv[1] if len(sys.argv) > 1 else "openapi.json"
    with open(output, "w", encoding="utf-8") as f:
        json.dump(app.openapi(), f, indent=2)
    print(f"OpenAPI schema written to {output}")


if __name__ == "__main__":
    main()
